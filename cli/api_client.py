"""REST API client for mingle server."""

import requests


class MingleAPIClient:
    """Client for communicating with the mingle REST API."""

    def __init__(self, base_url: str = "http://localhost:8000", user_id: str = "default"):
        self.base_url = base_url.rstrip('/')
        self.user_id = user_id
        self.session = requests.Session()

    def _get(self, endpoint: str, params: dict = None) -> dict:
        """Make a GET request."""
        if params is None:
            params = {}
        params['user_id'] = self.user_id
        response = self.session.get(f"{self.base_url}{endpoint}", params=params)
        response.raise_for_status()
        return response.json()

    def _post(self, endpoint: str, data: dict = None) -> dict:
        """Make a POST request."""
        if data is None:
            data = {}
        data['user_id'] = self.user_id
        response = self.session.post(f"{self.base_url}{endpoint}", json=data)
        response.raise_for_status()
        return response.json()

    def health_check(self) -> dict:
        """Check if the server is running."""
        response = self.session.get(f"{self.base_url}/")
        response.raise_for_status()
        return response.json()

    def list_texts(self) -> list:
        return self._get("/api/texts")

    def load_text(self, text_id: str) -> dict:
        return self._post("/api/load", {'text_id': text_id})

    def start(self) -> dict:
        return self._post("/api/start")

    def advance(self, chunks: int = 1) -> dict:
        return self._post("/api/advance", {'chunks': chunks})

    def reset(self) -> dict:
        return self._post("/api/reset")

    def get_view(self) -> dict:
        """Get the current rendering and progress."""
        return self._get("/api/view")

    def get_lexicon(self, limit: int = 50) -> list:
        return self._get("/api/lexicon", {'limit': limit})
