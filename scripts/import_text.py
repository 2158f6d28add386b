#!/usr/bin/env python3
"""Import a sentence-aligned text into the mingle texts directory.

Source and target are plain text files. By default they are aligned line
by line; with --split each file is split into sentences first, and the two
sides must come out with the same number of sentences.
"""

import argparse
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import Text
from core.tokenizer import split_into_sentences
from server.file_storage import FileCorpus


def read_sentences(path: Path, split: bool) -> list[str]:
    content = path.read_text(encoding='utf-8')
    if split:
        return split_into_sentences(content)
    return [line.strip() for line in content.splitlines() if line.strip()]


def build_text(args) -> Text:
    source = read_sentences(Path(args.source_file), args.split)
    target = read_sentences(Path(args.target_file), args.split)
    if len(source) != len(target):
        raise ValueError(f"Not aligned: {len(source)} source vs {len(target)} target sentences")
    if not source:
        raise ValueError("No sentences found")
    return Text(
        text_id=args.id,
        title=args.title or args.id,
        pairs=list(zip(source, target)),
        description=args.description,
        source=args.attribution,
        source_language=args.source_language,
        target_language=args.target_language,
    )


def main():
    parser = argparse.ArgumentParser(description='Import an aligned bilingual text')
    parser.add_argument('id', help='Text id')
    parser.add_argument('source_file', help='Source language text')
    parser.add_argument('target_file', help='Target language text')
    parser.add_argument('--texts-dir', required=True, help='Directory of JSON text records')
    parser.add_argument('--title', default=None)
    parser.add_argument('--description', default='')
    parser.add_argument('--attribution', default='', help='Where the text comes from')
    parser.add_argument('--source-language', default='en')
    parser.add_argument('--target-language', default='fr')
    parser.add_argument('--split', action='store_true', help='Split paragraphs into sentences')
    args = parser.parse_args()

    try:
        text = build_text(args)
    except (OSError, ValueError) as e:
        print(f"Error: {e}")
        return 1

    path = FileCorpus(texts_dir=args.texts_dir, include_builtin=False).save_text(text)
    print(f"Saved {len(text.pairs)} sentence pairs to {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
