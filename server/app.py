"""FastAPI server for mingle."""

import logging
import os
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field

from core.config import EM_ROUNDS, MIN_WORDS_PER_CHUNK
from core.interfaces import CorpusProvider, Tagger
from core.models import Phase
from core.schedule import load_phases
from core.session import ReadingSession

from server.file_storage import FileCorpus
from server.spacy_tagger import build_taggers

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


# Pydantic models for API
class LoadRequest(BaseModel):
    text_id: str
    user_id: str = "default"


class CommandRequest(BaseModel):
    user_id: str = "default"


class AdvanceRequest(BaseModel):
    chunks: int = Field(default=1, ge=1)
    user_id: str = "default"


class TextSummary(BaseModel):
    id: str
    title: str
    description: str
    source: str
    source_language: str
    target_language: str
    sentence_count: int


class UnitResponse(BaseModel):
    text: str
    kind: str  # none, word or sentence
    tooltip: Optional[str]


class SentenceResponse(BaseModel):
    index: int
    word_offset: int
    units: list[UnitResponse]


class ViewResponse(BaseModel):
    text: Optional[TextSummary]
    sentences: list[SentenceResponse]
    revealed_sentence_count: int
    total_sentences: int
    revealed_word_count: int
    total_word_count: int
    active_phase_label: str
    changed: bool = False


class LexiconEntry(BaseModel):
    source: str
    target: str
    alternatives: list[dict]  # [{target, probability}]


# Global state, set up on startup
corpus: CorpusProvider = None
taggers: dict[str, Tagger] = {}
phases: list[Phase] = None
min_words_per_chunk: int = MIN_WORDS_PER_CHUNK
em_rounds: int = EM_ROUNDS
user_sessions: dict[str, ReadingSession] = {}


app = FastAPI(title="Mingle API", description="Progressive bilingual reading API")


@app.on_event("startup")
async def startup():
    """Initialize corpus, configuration and taggers on startup."""
    global corpus, taggers, phases, min_words_per_chunk, em_rounds

    corpus = FileCorpus(
        config_file=os.environ.get('MINGLE_CONFIG'),
        texts_dir=os.environ.get('MINGLE_TEXTS_DIR'),
    )
    config = corpus.load_config()
    phases = load_phases(config.get('phases'))
    min_words_per_chunk = int(config.get('min_words_per_chunk', MIN_WORDS_PER_CHUNK))
    em_rounds = int(config.get('em_rounds', EM_ROUNDS))

    # Set MINGLE_TAGGER=none to skip spaCy and use whole-token extraction
    if os.environ.get('MINGLE_TAGGER', 'spacy') == 'none':
        taggers = {}
        logger.info("Tagging disabled, using whole-token content words")
    else:
        languages = set()
        for text in corpus.list_texts():
            languages.update((text.source_language, text.target_language))
        taggers = build_taggers(sorted(languages))
        logger.info(f"spaCy taggers configured for: {', '.join(sorted(languages))}")

    logger.info(f"{len(phases)} phases, {min_words_per_chunk} words per chunk, {em_rounds} EM rounds")


def get_session(user_id: str = "default") -> ReadingSession:
    """Get or create the reading session for a user."""
    if user_id not in user_sessions:
        user_sessions[user_id] = ReadingSession(
            corpus, taggers,
            phases=phases,
            min_words_per_chunk=min_words_per_chunk,
            em_rounds=em_rounds,
        )
    return user_sessions[user_id]


def require_loaded(user_id: str) -> ReadingSession:
    session = get_session(user_id)
    if not session.is_loaded:
        raise HTTPException(status_code=400, detail="No text loaded")
    return session


def view_response(session: ReadingSession, changed: bool = False) -> ViewResponse:
    return ViewResponse(**session.view(), changed=changed)


@app.get("/")
async def root():
    """Health check."""
    return {"status": "ok", "service": "mingle"}


@app.get("/api/texts", response_model=list[TextSummary])
async def list_texts():
    """List available texts."""
    return [TextSummary(**text.summary()) for text in corpus.list_texts()]


@app.get("/api/phases")
async def get_phases():
    """Get the configured curriculum."""
    return {"phases": [phase.to_dict() for phase in phases], "min_words_per_chunk": min_words_per_chunk}


@app.post("/api/load", response_model=ViewResponse)
async def load_text(request: LoadRequest):
    """Load a text and build its lexicon. Replaces any previous session state."""
    session = get_session(request.user_id)
    if not session.load_text(request.text_id):
        raise HTTPException(status_code=404, detail=f"Text not found: {request.text_id}")
    logger.info(f"User {request.user_id} loaded {request.text_id}")
    return view_response(session, changed=True)


@app.post("/api/start", response_model=ViewResponse)
async def start(request: CommandRequest):
    """Reveal the first chunk. Ignored once reading has started."""
    session = require_loaded(request.user_id)
    return view_response(session, session.start())


@app.post("/api/advance", response_model=ViewResponse)
async def advance(request: AdvanceRequest):
    """Reveal the next chunks. Ignored at the end of the text."""
    session = require_loaded(request.user_id)
    return view_response(session, session.advance(request.chunks))


@app.post("/api/reset", response_model=ViewResponse)
async def reset(request: CommandRequest):
    """Hide all sentences again, keeping the learned lexicon."""
    session = require_loaded(request.user_id)
    return view_response(session, session.reset())


@app.get("/api/view", response_model=ViewResponse)
async def get_view(user_id: str = "default"):
    """Get the current rendering and progress."""
    return view_response(get_session(user_id))


@app.get("/api/lexicon", response_model=list[LexiconEntry])
async def get_lexicon(user_id: str = "default", limit: int = Query(100, ge=0)):
    """Get the learned lexicon of the loaded text."""
    session = require_loaded(user_id)
    return session.lexicon_entries(limit)


def create_app():
    """Factory function for creating the app (useful for testing)."""
    return app
