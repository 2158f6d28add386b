"""Progressive reveal of a text in chunks of sentences."""

from .config import MIN_WORDS_PER_CHUNK


def chunk_boundaries(word_counts: list[int], min_words: int = MIN_WORDS_PER_CHUNK) -> list[int]:
    """Sentence counts at which chunks end.

    A chunk closes once it holds at least min_words words; the last
    sentence always closes a chunk.
    """
    boundaries = []
    accumulated = 0
    for i, count in enumerate(word_counts):
        accumulated += count
        if accumulated >= min_words:
            boundaries.append(i + 1)
            accumulated = 0
    if word_counts and (not boundaries or boundaries[-1] != len(word_counts)):
        boundaries.append(len(word_counts))
    return boundaries


class RevealController:
    """Tracks how many sentences of a text the reader has been shown.

    Commands that make no sense in the current state (starting twice,
    advancing past the end) are ignored. Each command returns whether the
    revealed count changed.
    """

    def __init__(self, word_counts: list[int], min_words: int = MIN_WORDS_PER_CHUNK):
        self.word_counts = list(word_counts)
        self.min_words = min_words
        self.boundaries = chunk_boundaries(self.word_counts, min_words)
        self.revealed = 0

    @property
    def total_sentences(self) -> int:
        return len(self.word_counts)

    @property
    def total_words(self) -> int:
        return sum(self.word_counts)

    @property
    def revealed_words(self) -> int:
        return sum(self.word_counts[:self.revealed])

    @property
    def is_started(self) -> bool:
        return self.revealed > 0

    @property
    def is_finished(self) -> bool:
        return self.revealed == self.total_sentences

    def start(self) -> bool:
        if self.revealed != 0 or not self.boundaries:
            return False
        self.revealed = self.boundaries[0]
        return True

    def advance(self, chunks: int = 1) -> bool:
        if chunks < 1:
            return False
        following = [i for i, b in enumerate(self.boundaries) if b > self.revealed]
        if not following:
            return False
        target = self.boundaries[min(following[0] + chunks - 1, len(self.boundaries) - 1)]
        previous = self.revealed
        self.revealed = max(self.revealed, target)
        return self.revealed != previous

    def reset(self) -> bool:
        previous = self.revealed
        self.revealed = 0
        return previous != 0

    def to_dict(self) -> dict:
        return {
            'word_counts': self.word_counts,
            'chunk_boundaries': self.boundaries,
            'revealed_sentence_count': self.revealed,
        }
