"""Entry point for mingle CLI client."""

import argparse
import sys

from cli.api_client import MingleAPIClient
from cli.console import ConsoleUI


def main():
    parser = argparse.ArgumentParser(description='Mingle - progressive bilingual reading')
    parser.add_argument(
        '--server',
        default='http://localhost:8000',
        help='Server URL (default: http://localhost:8000)'
    )
    parser.add_argument(
        '--user',
        default='default',
        help='User ID (default: default)'
    )
    parser.add_argument(
        '--text',
        default=None,
        help='Text id to load (default: ask)'
    )
    args = parser.parse_args()

    client = MingleAPIClient(base_url=args.server, user_id=args.user)
    ui = ConsoleUI(client)

    try:
        ui.run(args.text)
    except KeyboardInterrupt:
        print('\nGoodbye!')
        sys.exit(0)


if __name__ == '__main__':
    main()
