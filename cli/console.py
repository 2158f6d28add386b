"""Console UI for mingle."""

from cli.api_client import MingleAPIClient


def format_units(units: list[dict]) -> str:
    """Render blended units as plain text: [word] and «sentence» mark substitutions."""
    parts = []
    for unit in units:
        if unit['kind'] == 'word':
            parts.append(f"[{unit['text']}]")
        elif unit['kind'] == 'sentence':
            parts.append(f"«{unit['text']}»")
        else:
            parts.append(unit['text'])
    return ''.join(parts)


def format_progress(view: dict) -> str:
    return (f"{view['revealed_sentence_count']}/{view['total_sentences']} sentences | "
            f"{view['revealed_word_count']}/{view['total_word_count']} words | "
            f"{view['active_phase_label']}")


class ConsoleUI:
    """Console user interface for mingle."""

    def __init__(self, client: MingleAPIClient):
        self.client = client
        self.shown = 0

    def print_texts(self, texts: list):
        print('\nAvailable texts:')
        for text in texts:
            print(f"  {text['id']}: {text['title']} ({text['sentence_count']} sentences, "
                  f"{text['source_language']} -> {text['target_language']})")

    def print_new_sentences(self, view: dict):
        """Print sentences revealed since the last call."""
        sentences = view['sentences']
        if len(sentences) < self.shown:
            self.shown = 0
        for sentence in sentences[self.shown:]:
            print(f"  {format_units(sentence['units'])}")
        self.shown = len(sentences)
        print('-' * 60)
        print(format_progress(view))
        print('-' * 60)

    def print_lexicon(self, entries: list):
        print('\n--- LEXICON ---')
        for entry in entries:
            alternatives = ', '.join(f"{a['target']} {a['probability']:.2f}" for a in entry['alternatives'])
            print(f"  {entry['source']:<16} -> {entry['target']:<16} ({alternatives})")
        print('---------------')

    def run(self, text_id: str = None):
        """Run the main reading loop."""
        try:
            health = self.client.health_check()
            print(f"Connected to mingle server ({health['service']})")
        except Exception as e:
            print(f"Error: Cannot connect to server at {self.client.base_url}: {e}")
            print("Make sure the server is running: python run_server.py")
            return

        texts = self.client.list_texts()
        if not texts:
            print('No texts available.')
            return
        if text_id is None:
            self.print_texts(texts)
            text_id = input('Text id (enter for first): ').strip() or texts[0]['id']

        try:
            view = self.client.load_text(text_id)
        except Exception as e:
            print(f"Error loading text {text_id}: {e}")
            return
        print(f"\n{view['text']['title']}")
        print(f"{view['text']['description']} {view['text']['source']}")
        print('Commands: enter or "more [n]" to read on, "start", "reset", "lexicon", "status", "exit"\n')

        view = self.client.start()
        self.print_new_sentences(view)

        while True:
            user_input = input('==> ').strip().lower()
            try:
                if user_input == 'exit':
                    print('Goodbye!')
                    return
                elif user_input == '' or user_input.startswith('more'):
                    parts = user_input.split()
                    chunks = int(parts[1]) if len(parts) > 1 and parts[1].isdigit() else 1
                    view = self.client.advance(max(1, chunks))
                    if not view['changed']:
                        print('End of text. Type "reset" to read again.')
                        continue
                    self.print_new_sentences(view)
                elif user_input == 'start':
                    view = self.client.start()
                    if not view['changed']:
                        print('Already started.')
                        continue
                    self.print_new_sentences(view)
                elif user_input == 'reset':
                    self.client.reset()
                    self.shown = 0
                    view = self.client.start()
                    self.print_new_sentences(view)
                elif user_input == 'lexicon':
                    self.print_lexicon(self.client.get_lexicon())
                elif user_input == 'status':
                    print(format_progress(self.client.get_view()))
                else:
                    print('Unknown command.')
            except Exception as e:
                print(f"Error: {e}")
