"""Curriculum phases and deterministic substitution rolls."""

from .config import PHASES
from .models import Phase, MODE_SENTENCE

FNV_OFFSET_BASIS = 2166136261
FNV_PRIME = 16777619
UINT32_MASK = 0xFFFFFFFF


def load_phases(table: list[dict] | None = None) -> list[Phase]:
    """Build and validate a phase table from config dicts."""
    return validate_phases([Phase.from_dict(row) for row in (table if table is not None else PHASES)])


def validate_phases(phases: list[Phase]) -> list[Phase]:
    """Return the phases sorted by start offset, raising ValueError if unusable."""
    if not phases:
        raise ValueError("Phase table is empty")
    ordered = sorted(phases, key=lambda p: p.start_word_offset)
    if ordered[0].start_word_offset != 0:
        raise ValueError("First phase must start at word offset 0")
    starts = [p.start_word_offset for p in ordered]
    if len(set(starts)) != len(starts):
        raise ValueError(f"Duplicate phase start offsets: {starts}")
    for phase in ordered:
        for value in (phase.token_probability, phase.sentence_probability):
            if not 0.0 <= value <= 1.0:
                raise ValueError(f"Probability out of range in {phase!r}")
    return ordered


def active_phase(word_offset: int, phases: list[Phase]) -> Phase:
    """The last phase starting at or before word_offset."""
    active = phases[0]
    for phase in phases:
        if word_offset >= phase.start_word_offset:
            active = phase
    return active


def phase_label(phase: Phase, phases: list[Phase]) -> str:
    position = phases.index(phase) + 1
    if phase.mode == MODE_SENTENCE:
        intensity = f"sentences {phase.sentence_probability:.0%}, words {phase.token_probability:.0%}"
    else:
        intensity = f"words {phase.token_probability:.0%}"
    return f"Phase {position}/{len(phases)}: {intensity}"


def hash_to_unit(key: str) -> float:
    """Map a key to [0, 1] with 32-bit FNV-1a over its UTF-16 code units."""
    h = FNV_OFFSET_BASIS
    data = key.encode('utf-16-le')
    for i in range(0, len(data), 2):
        h ^= data[i] | (data[i + 1] << 8)
        h = (h * FNV_PRIME) & UINT32_MASK
    return h / UINT32_MASK


def sentence_key(sentence_index: int, source_text: str) -> str:
    return f"s:{sentence_index}:{source_text}"


def token_key(sentence_index: int, token_index: int, surface: str) -> str:
    return f"w:{sentence_index}:{token_index}:{surface}"
