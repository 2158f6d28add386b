"""Reading session: one loaded text, its lexicon and reveal progress."""

import logging

from .alignment import TranslationModel, build_lexicon, induce_translation_model
from .blender import SentenceBlender
from .config import EM_ROUNDS, MIN_WORDS_PER_CHUNK
from .interfaces import CorpusProvider, Tagger
from .models import Phase, Text
from .reveal import RevealController
from .schedule import active_phase, load_phases, phase_label, validate_phases
from .tokenizer import count_words

logger = logging.getLogger(__name__)


class ReadingSession:
    """Owns the current text, translation model and reveal state.

    Loading a text replaces all of them at once. Commands issued before a
    text is loaded are ignored.
    """

    def __init__(self, corpus: CorpusProvider, taggers: dict[str, Tagger] | None = None,
                 phases: list[Phase] | None = None, min_words_per_chunk: int = MIN_WORDS_PER_CHUNK,
                 em_rounds: int = EM_ROUNDS):
        self.corpus = corpus
        self.taggers = taggers or {}
        self.phases = validate_phases(phases) if phases is not None else load_phases()
        self.min_words_per_chunk = min_words_per_chunk
        self.em_rounds = em_rounds

        self.text = None
        self.model = TranslationModel()
        self.lexicon = {}
        self.word_counts = []
        self.word_offsets = []
        self.reveal = RevealController([], min_words_per_chunk)
        self._blender = None

    @property
    def is_loaded(self) -> bool:
        return self.text is not None

    def _tagger(self, language: str) -> Tagger | None:
        return self.taggers.get(language)

    def load_text(self, text_id: str) -> bool:
        """Load a text and build its lexicon. Returns False if the id is unknown."""
        text = self.corpus.get_text(text_id)
        if text is None:
            logger.info(f"Unknown text: {text_id}")
            return False
        self._install(text)
        return True

    def _install(self, text: Text) -> None:
        source_tagger = self._tagger(text.source_language)
        model = induce_translation_model(
            text.pairs, text.source_language, text.target_language,
            source_tagger, self._tagger(text.target_language),
            rounds=self.em_rounds,
        )
        word_counts = [count_words(pair.source_text) for pair in text.pairs]
        offsets = []
        total = 0
        for count in word_counts:
            offsets.append(total)
            total += count

        self.text = text
        self.model = model
        self.lexicon = build_lexicon(model)
        self.word_counts = word_counts
        self.word_offsets = offsets
        self.reveal = RevealController(word_counts, self.min_words_per_chunk)
        self._blender = SentenceBlender(self.lexicon, self.phases, text.source_language, source_tagger)
        logger.info(f"Loaded {text.id}: {len(text.pairs)} sentences, {total} words, "
                    f"{len(self.reveal.boundaries)} chunks, {len(self.lexicon)} lexicon entries")

    def start(self) -> bool:
        return self.reveal.start()

    def advance(self, chunk_count: int = 1) -> bool:
        return self.reveal.advance(chunk_count)

    def reset(self) -> bool:
        """Hide everything again. The lexicon is kept."""
        return self.reveal.reset()

    def render_sentences(self) -> list[dict]:
        """Blended rendering of every revealed sentence."""
        if not self.is_loaded:
            return []
        sentences = []
        for pair in self.text.pairs[:self.reveal.revealed]:
            offset = self.word_offsets[pair.index]
            units = self._blender.blend(pair, pair.index, offset)
            sentences.append({
                'index': pair.index,
                'word_offset': offset,
                'units': [unit.to_dict() for unit in units],
            })
        return sentences

    def active_phase_label(self) -> str:
        phase = active_phase(self.reveal.revealed_words, self.phases)
        return phase_label(phase, self.phases)

    def view(self) -> dict:
        """Everything a renderer needs to show the current state."""
        return {
            'text': self.text.summary() if self.text else None,
            'sentences': self.render_sentences(),
            'revealed_sentence_count': self.reveal.revealed,
            'total_sentences': self.reveal.total_sentences,
            'revealed_word_count': self.reveal.revealed_words,
            'total_word_count': self.reveal.total_words,
            'active_phase_label': self.active_phase_label(),
        }

    def lexicon_entries(self, limit: int | None = None) -> list[dict]:
        """Learned translations, alphabetical by source lemma."""
        entries = []
        for source in sorted(self.lexicon):
            entries.append({
                'source': source,
                'target': self.lexicon[source],
                'alternatives': [
                    {'target': f, 'probability': round(p, 4)} for f, p in self.model.top(source, 3)
                ],
            })
        return entries[:limit] if limit is not None else entries
