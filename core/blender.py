"""Mixed-language rendering of one sentence."""

from .content_words import content_lemmas
from .interfaces import Tagger
from .models import (
    Phase, RenderUnit, SentencePair,
    MODE_SENTENCE, KIND_WORD, KIND_SENTENCE
)
from .schedule import active_phase, hash_to_unit, sentence_key, token_key
from .tokenizer import is_word_run, split_runs, stem


class SentenceBlender:
    """Decides which parts of a sentence appear in the target language.

    Every decision is a hash of the sentence index and text, so re-rendering
    gives the same output and one sentence never affects another.
    """

    def __init__(self, lexicon: dict[str, str], phases: list[Phase], source_language: str,
                 tagger: Tagger | None = None):
        self.lexicon = lexicon
        self.phases = phases
        self.source_language = source_language
        self.tagger = tagger

    def blend(self, pair: SentencePair, sentence_index: int, word_offset: int) -> list[RenderUnit]:
        source = pair.source_text
        unchanged = [RenderUnit(source)]
        phase = active_phase(word_offset, self.phases)

        if phase.mode == MODE_SENTENCE:
            roll = hash_to_unit(sentence_key(sentence_index, source))
            if roll < phase.sentence_probability:
                return [RenderUnit(pair.target_text, KIND_SENTENCE, source)]

        probability = phase.token_probability
        if probability <= 0:
            return unchanged

        targets = set(content_lemmas(source, self.source_language, self.tagger))
        if not targets:
            return unchanged

        units = []
        plain = []
        for token_index, run in enumerate(split_runs(source)):
            replacement = None
            if is_word_run(run):
                replacement = self._substitute(run, sentence_index, token_index, targets, probability)
            if replacement is None:
                if run:
                    plain.append(run)
                continue
            if plain:
                units.append(RenderUnit(''.join(plain)))
                plain = []
            units.append(RenderUnit(replacement, KIND_WORD, run))
        if plain:
            units.append(RenderUnit(''.join(plain)))
        return units

    def _substitute(self, run: str, sentence_index: int, token_index: int,
                    targets: set[str], probability: float) -> str | None:
        lemma = stem(run, self.source_language)
        if lemma not in targets:
            return None
        translation = self.lexicon.get(lemma)
        if not translation:
            return None
        if hash_to_unit(token_key(sentence_index, token_index, run)) >= probability:
            return None
        return translation


def render_text(units: list[RenderUnit]) -> str:
    """Plain-text rendering, mainly for logs and tests."""
    return ''.join(unit.text for unit in units)
