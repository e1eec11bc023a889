"""
nasmkit Test Configuration
==========================

Shared fixtures for the nasmkit test suite.
"""

import dataclasses
import os

import pytest

from nasmkit.config import AfterMnemonic, EditorConfig
from nasmkit.editor import EditingSession, TextBuffer
from nasmkit.syntax import LineClassifier


# =============================================================================
# Configuration Fixtures
# =============================================================================

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep NASMKIT_* variables from the developer shell out of the tests."""
    for name in list(os.environ):
        if name.startswith("NASMKIT_"):
            monkeypatch.delenv(name)


@pytest.fixture
def config() -> EditorConfig:
    """Default configuration: offset 8, tab after mnemonics, spaces."""
    return EditorConfig(
        basic_offset=8,
        after_mnemonic=AfterMnemonic.TAB,
        comment_column=32,
        indent_tabs=False,
    )


@pytest.fixture(scope="session")
def classifier() -> LineClassifier:
    """Classifier over the built-in NASM tables."""
    return LineClassifier()


# =============================================================================
# Buffer Helpers
# =============================================================================

def buffer_at(text: str, row: int = 0, index: int | None = None) -> TextBuffer:
    """
    Create a buffer with point at (row, index).

    Index defaults to the end of the row.
    """
    buffer = TextBuffer(text)
    if index is None:
        index = len(buffer.line(row))
    buffer.goto(row, index)
    return buffer


@pytest.fixture
def make_buffer():
    """Factory fixture: buffer over text with point at (row, index)."""
    return buffer_at


@pytest.fixture
def make_session(config):
    """Factory fixture: session over text with point at (row, index)."""
    sessions = []

    def factory(text: str, row: int = 0, index: int | None = None, **overrides) -> EditingSession:
        session_config = dataclasses.replace(config, **overrides) if overrides else config
        session = EditingSession(buffer_at(text, row, index), session_config)
        sessions.append(session)
        return session

    yield factory

    for session in sessions:
        session.close()
