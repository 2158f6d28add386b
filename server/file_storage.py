"""File-based corpus and config implementation."""

import json
import logging
import os

from core.corpus import builtin_texts
from core.interfaces import CorpusProvider
from core.models import Text

logger = logging.getLogger(__name__)


class FileCorpus(CorpusProvider):
    """Corpus provider reading JSON text records from a directory.

    Each *.json file holds one text record or a list of them:
    {id, title, description, source, source_language, target_language,
     pairs: [{source, target}, ...]}. Built-in texts are included unless
    a file defines a text with the same id.
    """

    def __init__(self, config_file: str = None, texts_dir: str = None, include_builtin: bool = True):
        self.config_file = config_file or os.path.expanduser('~/.config/mingle/config.json')
        self.texts_dir = texts_dir
        self.include_builtin = include_builtin

    def load_config(self) -> dict:
        """Load optional overrides: phases, min_words_per_chunk, em_rounds, texts_dir."""
        if not os.path.exists(self.config_file):
            return {}
        with open(self.config_file, 'r') as f:
            config = json.load(f)
        if not isinstance(config, dict):
            raise ValueError(f"Config file {self.config_file} must contain a JSON object")
        return config

    def _texts_dir(self) -> str | None:
        if self.texts_dir:
            return self.texts_dir
        return self.load_config().get('texts_dir')

    def _load_file(self, path: str) -> list[Text]:
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Skipping unreadable text file {path}: {e}")
            return []
        records = data if isinstance(data, list) else [data]
        texts = []
        for record in records:
            try:
                texts.append(Text.from_dict(record))
            except (ValueError, AttributeError) as e:
                logger.warning(f"Skipping malformed text in {path}: {e}")
        return texts

    def list_texts(self) -> list[Text]:
        texts = {}
        if self.include_builtin:
            for text in builtin_texts():
                texts[text.id] = text
        texts_dir = self._texts_dir()
        if texts_dir and os.path.isdir(texts_dir):
            for filename in sorted(os.listdir(texts_dir)):
                if filename.endswith('.json'):
                    for text in self._load_file(os.path.join(texts_dir, filename)):
                        texts[text.id] = text
        return list(texts.values())

    def get_text(self, text_id: str) -> Text | None:
        for text in self.list_texts():
            if text.id == text_id:
                return text
        return None

    def save_text(self, text: Text) -> str:
        """Write a text record into the texts directory. Returns the file path."""
        texts_dir = self._texts_dir()
        if not texts_dir:
            raise ValueError("No texts directory configured")
        os.makedirs(texts_dir, exist_ok=True)
        path = os.path.join(texts_dir, f"{text.id}.json")
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(text.to_dict(), f, indent=2, ensure_ascii=False)
        return path
