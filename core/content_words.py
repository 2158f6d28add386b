"""Content-word extraction: noun and verb-like tokens of a sentence."""

import logging

from .config import CONTENT_TAGS
from .interfaces import Tagger
from .models import ContentWord
from .tokenizer import stem, word_tokens

logger = logging.getLogger(__name__)


def _tagged_terms(sentence: str, tagger: Tagger | None) -> list[dict]:
    """Run the tagger, returning [] whenever it cannot be used."""
    if tagger is None or not tagger.available:
        return []
    try:
        return tagger.tag(sentence) or []
    except Exception as e:
        logger.debug(f"Tagger failed, falling back to whole tokens: {type(e).__name__}: {e}")
        return []


def extract_content_words(sentence: str, language: str, tagger: Tagger | None = None,
                          sentence_index: int = 0) -> list[ContentWord]:
    """Extract content words in sentence order.

    Terms tagged Noun, Verb, Infinitive or Gerund are kept. Without usable
    tags every word token counts as a content word, so any sentence with
    letters yields candidates.
    """
    words = []
    terms = _tagged_terms(sentence, tagger)
    if terms:
        for term in terms:
            if not CONTENT_TAGS.intersection(term.get('tags', ())):
                continue
            lemma = stem(term['surface'], language)
            if lemma:
                words.append(ContentWord(lemma, term['surface'], sentence_index, language))
        return words

    for surface in word_tokens(sentence):
        lemma = stem(surface, language)
        if lemma:
            words.append(ContentWord(lemma, surface, sentence_index, language))
    return words


def content_lemmas(sentence: str, language: str, tagger: Tagger | None = None) -> list[str]:
    """Deduplicated content-word lemmas in first-seen order."""
    words = extract_content_words(sentence, language, tagger)
    return list(dict.fromkeys(w.lemma for w in words))
