"""
Shared fixtures for the resume builder tests.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.messages import AIMessage

from resume_builder.models import SAMPLE_RESUME
from resume_builder.storage import SlotStore


@pytest.fixture
def sample_resume():
    """A private copy of the built-in sample resume."""
    return SAMPLE_RESUME.model_copy(deep=True)


@pytest.fixture
def store(tmp_path):
    """Slot store in a temporary directory."""
    return SlotStore(tmp_path / "storage")


@pytest.fixture
def mock_llm():
    """Chat model double; replies are configured per test."""
    llm = MagicMock()
    llm.ainvoke = AsyncMock(return_value=AIMessage(content="A generated summary."))
    llm.with_structured_output.return_value.ainvoke = AsyncMock()
    return llm


@pytest.fixture
def env(monkeypatch, tmp_path):
    """Minimal environment for AppConfig."""
    for name in (
        "MODEL",
        "MODEL_TEMPERATURE",
        "DEFAULT_TEMPLATE",
        "PDF_SCALE",
        "PREVIEW_WIDTH_PX",
        "HTML_STYLESHEET_URL",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GOOGLE_API_KEY", "test-key")
    monkeypatch.setenv("STORAGE_DIR", str(tmp_path / "storage"))
    monkeypatch.setenv("OUTPUT_DIR", str(tmp_path / "output"))
    return tmp_path
