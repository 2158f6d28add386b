"""Abstract base classes for dependency injection."""

from abc import ABC, abstractmethod


class Tagger(ABC):
    """Abstract base class for a part-of-speech tagging capability."""

    @property
    def available(self) -> bool:
        """Whether the tagger can be used. Unavailable taggers trigger fallbacks."""
        return True

    @abstractmethod
    def tag(self, sentence: str) -> list[dict]:
        """Tag a sentence. Returns ordered [{surface, tags}] where tags is a set of str."""
        pass


class UnavailableTagger(Tagger):
    """Tagger placeholder for when no tagging engine is installed."""

    @property
    def available(self) -> bool:
        return False

    def tag(self, sentence: str) -> list[dict]:
        return []


class CorpusProvider(ABC):
    """Abstract base class for sentence-aligned text sources."""

    @abstractmethod
    def list_texts(self) -> list:
        """List available texts. Returns a list of Text objects."""
        pass

    @abstractmethod
    def get_text(self, text_id: str):
        """Get a text by id. Returns a Text or None if not found."""
        pass
