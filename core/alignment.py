"""Lexicon induction from sentence-aligned text.

Word translation probabilities P(target | source) are estimated with a few
rounds of expectation-maximization over co-occurring content-word lemmas,
IBM Model 1 style, without a NULL word or word positions. Each aligned
sentence pair contributes its deduplicated source and target lemma sets;
pairs with an empty side carry no alignment evidence and are skipped.
"""

import logging

from .config import EM_ROUNDS
from .content_words import content_lemmas
from .interfaces import Tagger
from .models import SentencePair

logger = logging.getLogger(__name__)


class TranslationModel:
    """Per-source-lemma distributions over target lemmas."""

    def __init__(self, probabilities: dict[str, dict[str, float]] | None = None):
        self.probabilities = probabilities or {}

    def __len__(self) -> int:
        return len(self.probabilities)

    def __contains__(self, source_lemma: str) -> bool:
        return source_lemma in self.probabilities

    def distribution(self, source_lemma: str) -> dict[str, float]:
        return dict(self.probabilities.get(source_lemma, {}))

    def best(self, source_lemma: str) -> tuple[str, float] | None:
        """Most probable target lemma, ties going to the alphabetically first."""
        candidates = [(f, p) for f, p in self.probabilities.get(source_lemma, {}).items() if p > 0]
        if not candidates:
            return None
        return min(candidates, key=lambda item: (-item[1], item[0]))

    def top(self, source_lemma: str, n: int = 3) -> list[tuple[str, float]]:
        ranked = sorted(self.probabilities.get(source_lemma, {}).items(),
                        key=lambda item: (-item[1], item[0]))
        return ranked[:n]


def collect_evidence(pairs: list[SentencePair], source_language: str, target_language: str,
                     source_tagger: Tagger | None = None,
                     target_tagger: Tagger | None = None) -> list[tuple[list[str], list[str]]]:
    """Lemma sets for every pair that has content words on both sides."""
    evidence = []
    for pair in pairs:
        source = content_lemmas(pair.source_text, source_language, source_tagger)
        target = content_lemmas(pair.target_text, target_language, target_tagger)
        if source and target:
            evidence.append((source, target))
    return evidence


def seed_probabilities(evidence: list[tuple[list[str], list[str]]]) -> dict[str, dict[str, float]]:
    """Initial distributions, seeded only from co-occurring lemmas.

    First collect the target vocabulary for the uniform value, then walk the
    pairs in order. A source lemma's distribution gains the target lemmas of
    each pair it appears in; entries that already exist are left as they are.
    """
    vocabulary = set()
    for _, target in evidence:
        vocabulary.update(target)
    uniform = 1.0 / max(1, len(vocabulary))

    probabilities = {}
    for source, target in evidence:
        for e in source:
            dist = probabilities.setdefault(e, {})
            for f in target:
                dist.setdefault(f, uniform)
    return probabilities


def em_round(evidence: list[tuple[list[str], list[str]]],
             probabilities: dict[str, dict[str, float]]) -> dict[str, dict[str, float]]:
    """One E-step and M-step. Returns new distributions, the input is not modified."""
    counts = {}
    totals = {}
    for source, target in evidence:
        for f in target:
            norm = sum(probabilities[e].get(f, 0.0) for e in source)
            if norm <= 0:
                continue
            for e in source:
                p = probabilities[e].get(f, 0.0)
                if p <= 0:
                    continue
                posterior = p / norm
                counts.setdefault(e, {})
                counts[e][f] = counts[e].get(f, 0.0) + posterior
                totals[e] = totals.get(e, 0.0) + posterior

    updated = {}
    for e, dist in probabilities.items():
        new_dist = dict(dist)
        total = totals.get(e, 0.0)
        if total > 0:
            for f, count in counts[e].items():
                new_dist[f] = count / total
        updated[e] = new_dist
    return updated


def induce_translation_model(pairs: list[SentencePair], source_language: str, target_language: str,
                             source_tagger: Tagger | None = None, target_tagger: Tagger | None = None,
                             rounds: int = EM_ROUNDS) -> TranslationModel:
    """Estimate a translation model from the whole corpus."""
    evidence = collect_evidence(pairs, source_language, target_language, source_tagger, target_tagger)
    if not evidence:
        logger.info(f"No alignment evidence in {len(pairs)} pairs, lexicon is empty")
        return TranslationModel()

    probabilities = seed_probabilities(evidence)
    for _ in range(rounds):
        probabilities = em_round(evidence, probabilities)

    logger.info(f"Induced translation model: {len(probabilities)} source lemmas "
                f"from {len(evidence)}/{len(pairs)} pairs, {rounds} rounds")
    return TranslationModel(probabilities)


def build_lexicon(model: TranslationModel) -> dict[str, str]:
    """Best translation for every source lemma with a positive probability."""
    lexicon = {}
    for e in model.probabilities:
        best = model.best(e)
        if best:
            lexicon[e] = best[0]
    return lexicon
