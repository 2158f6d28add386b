"""Domain models for mingle."""

from typing import NamedTuple

from .config import DEFAULT_SOURCE_LANGUAGE, DEFAULT_TARGET_LANGUAGE

MODE_TOKEN = 'token'
MODE_SENTENCE = 'sentence'

KIND_NONE = 'none'
KIND_WORD = 'word'
KIND_SENTENCE = 'sentence'


class SentencePair(NamedTuple):
    """One source sentence and its aligned translation."""
    index: int
    source_text: str
    target_text: str


class ContentWord(NamedTuple):
    lemma: str
    surface: str
    sentence_index: int
    language: str


class RenderUnit(NamedTuple):
    """A piece of blended output. Tooltip holds the text it replaced."""
    text: str
    kind: str = KIND_NONE
    tooltip: str | None = None

    def to_dict(self) -> dict:
        return {'text': self.text, 'kind': self.kind, 'tooltip': self.tooltip}


class Phase:
    """A curriculum stage, active from start_word_offset onwards."""

    def __init__(self, start_word_offset: int, mode: str = MODE_TOKEN,
                 token_probability: float = 0.0, sentence_probability: float = 0.0):
        self.start_word_offset = start_word_offset
        self.mode = mode
        self.token_probability = token_probability
        self.sentence_probability = sentence_probability if mode == MODE_SENTENCE else 0.0

    def __repr__(self) -> str:
        return (f"Phase(start={self.start_word_offset}, mode={self.mode!r}, "
                f"token={self.token_probability}, sentence={self.sentence_probability})")

    def __eq__(self, other) -> bool:
        if not isinstance(other, Phase):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def to_dict(self) -> dict:
        data = {
            'start': self.start_word_offset,
            'mode': self.mode,
            'token_probability': self.token_probability,
        }
        if self.mode == MODE_SENTENCE:
            data['sentence_probability'] = self.sentence_probability
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'Phase':
        mode = data.get('mode', data.get('type', MODE_TOKEN))
        if mode not in (MODE_TOKEN, MODE_SENTENCE):
            raise ValueError(f"Unknown phase mode: {mode!r}")
        # Token phases may give their probability as plain 'probability'
        token_probability = data.get('token_probability', data.get('probability', 0.0))
        return cls(
            start_word_offset=int(data.get('start', data.get('start_word_offset', 0))),
            mode=mode,
            token_probability=float(token_probability),
            sentence_probability=float(data.get('sentence_probability', 0.0)),
        )


class Text:
    """A sentence-aligned bilingual text."""

    def __init__(self, text_id: str, title: str, pairs: list[tuple[str, str]],
                 description: str = '', source: str = '',
                 source_language: str = DEFAULT_SOURCE_LANGUAGE,
                 target_language: str = DEFAULT_TARGET_LANGUAGE):
        self.id = text_id
        self.title = title
        self.description = description
        self.source = source
        self.source_language = source_language
        self.target_language = target_language
        self.pairs = [SentencePair(i, src, tgt) for i, (src, tgt) in enumerate(pairs)]

    def summary(self) -> dict:
        return {
            'id': self.id,
            'title': self.title,
            'description': self.description,
            'source': self.source,
            'source_language': self.source_language,
            'target_language': self.target_language,
            'sentence_count': len(self.pairs),
        }

    def to_dict(self) -> dict:
        data = self.summary()
        del data['sentence_count']
        data['pairs'] = [{'source': p.source_text, 'target': p.target_text} for p in self.pairs]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> 'Text':
        if not data.get('id'):
            raise ValueError("Text record has no id")
        source_language = data.get('source_language', DEFAULT_SOURCE_LANGUAGE)
        target_language = data.get('target_language', DEFAULT_TARGET_LANGUAGE)
        pairs = []
        for i, pair in enumerate(data.get('pairs', [])):
            # Records written for the en/fr reader use language codes as keys
            source = pair.get('source', pair.get(source_language))
            target = pair.get('target', pair.get(target_language))
            if not isinstance(source, str) or not isinstance(target, str):
                raise ValueError(f"Text {data['id']!r}: pair {i} needs source and target strings")
            pairs.append((source, target))
        return cls(
            text_id=data['id'],
            title=data.get('title', data['id']),
            pairs=pairs,
            description=data.get('description', ''),
            source=data.get('source', ''),
            source_language=source_language,
            target_language=target_language,
        )
