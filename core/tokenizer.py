"""Word segmentation, normalization and heuristic stemming."""

import re
import unicodedata

from .config import SUFFIXES

# Letters counted as words when measuring reading progress
WORD_PATTERN = re.compile(r"[A-Za-zÀ-ÖØ-öø-ÿ'-]+")

# Word runs used for blending; ASCII \b/\w so accented letters only join a
# run through the explicit Latin-1 ranges
RUN_PATTERN = re.compile(r"(\b[\wÀ-ÖØ-öø-ÿ'-]+\b)", re.ASCII)
RUN_WORD_PATTERN = re.compile(r"^[\wÀ-ÖØ-öø-ÿ'-]*[\wÀ-ÖØ-öø-ÿ][\wÀ-ÖØ-öø-ÿ'-]*$", re.ASCII)

_NON_LEMMA_CHARS = re.compile(r"[^a-z'-]")


def normalize(token: str) -> str:
    """Lowercase, strip diacritics and drop everything outside a-z, ' and -."""
    decomposed = unicodedata.normalize('NFD', token.lower())
    stripped = ''.join(ch for ch in decomposed if not unicodedata.combining(ch))
    return _NON_LEMMA_CHARS.sub('', stripped)


def stem(candidate: str, language: str) -> str:
    """Reduce a word to its heuristic lemma.

    The first suffix from the language's list (ordered longest first) that
    matches is stripped, provided the word is longer than the suffix plus two
    characters. Unknown languages are only normalized.
    """
    word = normalize(candidate)
    if not word:
        return ''
    for suffix in SUFFIXES.get(language, []):
        if word.endswith(suffix) and len(word) > len(suffix) + 2:
            return word[:-len(suffix)]
    return word


def split_into_sentences(text: str) -> list[str]:
    """Split running text into sentences, dropping list numbering."""
    sentences = re.split(r'(?<=[.!?])\s+', text.strip())
    cleaned = []
    for s in sentences:
        s = re.sub(r'^\d+[.)]\s*', '', s.strip())
        if s:
            cleaned.append(s)
    return cleaned


def word_tokens(text: str) -> list[str]:
    """Split text into word tokens."""
    return WORD_PATTERN.findall(text)


def count_words(text: str) -> int:
    return len(word_tokens(text))


def split_runs(text: str) -> list[str]:
    """Split text into alternating non-word and word runs.

    Joining the result gives back the input unchanged. Empty runs are kept
    so that run positions stay stable for a given sentence.
    """
    return RUN_PATTERN.split(text)


def is_word_run(run: str) -> bool:
    return bool(RUN_WORD_PATTERN.match(run))
