"""spaCy implementation of the tagging capability."""

import logging

import spacy

from core.interfaces import Tagger
from core.tokenizer import is_word_run, split_runs

logger = logging.getLogger(__name__)

# Small pipelines are enough for coarse noun/verb tags
MODEL_CANDIDATES = {
    'en': ['en_core_web_sm', 'en_core_web_md'],
    'fr': ['fr_core_news_sm', 'fr_core_news_md'],
    'es': ['es_core_news_sm', 'es_core_news_md'],
    'de': ['de_core_news_sm', 'de_core_news_md'],
}


def token_tags(token) -> set[str]:
    """Translate a spaCy token's annotations into content tags."""
    tags = set()
    if token.pos_ in ('NOUN', 'PROPN'):
        tags.add('Noun')
    if token.pos_ == 'VERB':
        tags.add('Verb')
    verb_form = token.morph.get('VerbForm')
    if 'Inf' in verb_form:
        tags.add('Infinitive')
    if 'Ger' in verb_form or token.tag_ == 'VBG':
        tags.add('Gerund')
    return tags


class SpacyTagger(Tagger):
    """Tagger backed by a spaCy pipeline, loaded on first use.

    When no pipeline for the language is installed the tagger reports itself
    unavailable and callers fall back to whole-token extraction.
    """

    def __init__(self, language: str, model_name: str = None, nlp=None):
        self.language = language
        self.model_name = model_name
        self._nlp = nlp
        self._load_failed = False

    def _load(self):
        if self._nlp is not None or self._load_failed:
            return self._nlp
        candidates = [self.model_name] if self.model_name else MODEL_CANDIDATES.get(self.language, [])
        for name in candidates:
            try:
                logger.info(f"Loading spaCy model {name}")
                self._nlp = spacy.load(name, disable=['parser', 'ner'])
                return self._nlp
            except OSError:
                logger.warning(f"spaCy model {name} not found")
        self._load_failed = True
        return None

    @property
    def available(self) -> bool:
        return self._load() is not None

    def tag(self, sentence: str) -> list[dict]:
        nlp = self._load()
        if nlp is None:
            return []
        doc = nlp(sentence)
        # Report whole word runs, so "baron's" or "Thunder-ten-tronckh" stay
        # one term with the tags of the spaCy tokens inside them
        terms = []
        start = 0
        for run in split_runs(sentence):
            end = start + len(run)
            if is_word_run(run):
                span = doc.char_span(start, end, alignment_mode='expand')
                tags = set()
                if span is not None:
                    for token in span:
                        tags |= token_tags(token)
                terms.append({'surface': run, 'tags': tags})
            start = end
        return terms


def build_taggers(languages: list[str]) -> dict[str, Tagger]:
    return {language: SpacyTagger(language) for language in languages}
