"""Shared pytest fixtures for the bookdraft test suite."""

import pytest
from unittest.mock import MagicMock, AsyncMock


# ---------------------------------------------------------------------------
# Storage fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def tmp_db_path(tmp_path):
    """Return a temporary SQLite database path."""
    return tmp_path / "test_bookdraft.db"


@pytest.fixture
def db(tmp_db_path):
    """Return an initialized Database instance backed by a temp file."""
    from models.database import Database
    return Database(tmp_db_path)


@pytest.fixture
def store(db):
    from models.saved_chapters import SavedChapterStore
    return SavedChapterStore(db)


# ---------------------------------------------------------------------------
# Settings fixture
# ---------------------------------------------------------------------------

@pytest.fixture
def settings(tmp_path):
    """Return a Settings instance with all paths pointing to tmp_path."""
    from config.settings import Settings
    return Settings(
        _env_file=None,
        gemini_api_key="test-key",
        storage_path=tmp_path / "bookdraft.db",
        log_dir=tmp_path / "logs",
        chapter_min_chars=100,
        chapter_max_chars=200,
    )


# ---------------------------------------------------------------------------
# LLM Client mocks
# ---------------------------------------------------------------------------

@pytest.fixture
def mock_llm():
    """Return a MagicMock replacing GeminiClient."""
    llm = MagicMock()
    llm.generate_json = AsyncMock(return_value={"content": "本文です。" * 30, "intent": "意図"})
    llm.generate_image = AsyncMock(return_value="data:image/jpeg;base64,AAAA")
    llm.get_usage_summary.return_value = {"total_calls": 1}
    return llm


# ---------------------------------------------------------------------------
# Sample data fixtures
# ---------------------------------------------------------------------------

def make_plan_dict(title: str, n_sections: int = 2) -> dict:
    return {
        "title": title,
        "overview": f"{title}の概要",
        "purpose": f"{title}の目的",
        "sections": [
            {"title": f"{title} 第{i + 1}節", "summary": f"{title}の節{i + 1}の概要"}
            for i in range(n_sections)
        ],
    }


@pytest.fixture
def plan_dicts():
    """Five chapter plans as the model returns them."""
    return [make_plan_dict(t) for t in ("はじめに", "現状分析", "戦略", "実践", "おわりに")]


@pytest.fixture
def sample_outline(plan_dicts):
    """Return the five plans as ChapterOutline records with ids '1000-0'..'1000-4'."""
    from models.chapter import ChapterOutline
    return tuple(ChapterOutline(id=f"1000-{i}", **p) for i, p in enumerate(plan_dicts))


@pytest.fixture
def sample_state(sample_outline):
    """A draft with an outline and nothing written yet."""
    from workflow.state import DraftState
    return DraftState(topic="持続可能な経営", outline=sample_outline, generation=1)


@pytest.fixture
def written_state(sample_state):
    """A draft where every chapter is written."""
    from dataclasses import replace
    from models.chapter import WrittenChapterContent
    written = {
        c.id: WrittenChapterContent(content=f"{c.title}の本文", intent=f"{c.title}の意図")
        for c in sample_state.outline
    }
    return replace(sample_state, written=written)


@pytest.fixture
def session(settings, mock_llm, store):
    """A DraftSession wired to the mock LLM and temp storage, with a fixed clock."""
    from workflow.session import DraftSession
    return DraftSession(settings=settings, llm_client=mock_llm, store=store, clock=lambda: 1000.0)


@pytest.fixture
def make_plan():
    """Return the factory for a single chapter plan dict."""
    return make_plan_dict
