"""Configuration constants for mingle."""

DEFAULT_SOURCE_LANGUAGE = 'en'
DEFAULT_TARGET_LANGUAGE = 'fr'

# Curriculum: blend intensity by cumulative words read.
# Token phases replace single content words, sentence phases may also swap
# the whole sentence for its translation.
PHASES = [
    {'start': 0, 'mode': 'token', 'token_probability': 0.0},
    {'start': 300, 'mode': 'token', 'token_probability': 0.1},
    {'start': 600, 'mode': 'token', 'token_probability': 0.2},
    {'start': 800, 'mode': 'token', 'token_probability': 0.3},
    {'start': 900, 'mode': 'token', 'token_probability': 0.4},
    {'start': 1000, 'mode': 'token', 'token_probability': 0.5},
    {'start': 1100, 'mode': 'sentence', 'sentence_probability': 0.2, 'token_probability': 0.5},
    {'start': 1300, 'mode': 'sentence', 'sentence_probability': 0.3, 'token_probability': 0.5},
]

# Progressive reveal
MIN_WORDS_PER_CHUNK = 500     # Words a chunk must reach before it is closed

# Lexicon induction
EM_ROUNDS = 8                 # Fixed number of EM rounds, no convergence check

# Tags that mark a term as a content word
CONTENT_TAGS = frozenset({'Noun', 'Verb', 'Infinitive', 'Gerund'})

# Heuristic stemming suffixes, longest first so the first match is the longest
SUFFIXES = {
    'en': ['ations', 'ation', 'ments', 'ness', 'ment', 'ings', 'ing', 'ies', 'ied', 'ers', 'ed', 'es', 'er', 'ly', 's'],
    'fr': ['eraient', 'erions', 'ements', 'ations', 'ation', 'ement', 'aient', 'antes', 'ions', 'ants', 'ante',
           'ait', 'ent', 'ant', 'ees', 'ons', 'ez', 'ee', 'es', 'er', 'ir', 'e', 's'],
}
