from .models import SentencePair, ContentWord, RenderUnit, Phase, Text
from .interfaces import Tagger, UnavailableTagger, CorpusProvider
from .tokenizer import normalize, stem, word_tokens, count_words
from .alignment import TranslationModel, induce_translation_model, build_lexicon
from .schedule import active_phase, hash_to_unit, load_phases
from .blender import SentenceBlender
from .reveal import RevealController, chunk_boundaries
from .session import ReadingSession
from .corpus import StaticCorpus, builtin_texts
from .config import (
    PHASES, MIN_WORDS_PER_CHUNK, EM_ROUNDS,
    DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE
)

__all__ = [
    'SentencePair', 'ContentWord', 'RenderUnit', 'Phase', 'Text',
    'Tagger', 'UnavailableTagger', 'CorpusProvider',
    'normalize', 'stem', 'word_tokens', 'count_words',
    'TranslationModel', 'induce_translation_model', 'build_lexicon',
    'active_phase', 'hash_to_unit', 'load_phases',
    'SentenceBlender',
    'RevealController', 'chunk_boundaries',
    'ReadingSession',
    'StaticCorpus', 'builtin_texts',
    'PHASES', 'MIN_WORDS_PER_CHUNK', 'EM_ROUNDS',
    'DEFAULT_SOURCE_LANGUAGE', 'DEFAULT_TARGET_LANGUAGE'
]
