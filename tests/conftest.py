"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

from collections.abc import Callable, Iterator

import pytest

from tictactoe.core.enums import Outcome
from tictactoe.game.interfaces import IOutputSink


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for socket tests."""
    from tictactoe.net.connection import ensure_core_application

    yield ensure_core_application()


class RecordingSink(IOutputSink):
    """Output sink that keeps everything it is asked to show."""

    def __init__(self) -> None:
        self.boards: list[str] = []
        self.messages: list[str] = []
        self.errors: list[str] = []
        self.outcomes: list[Outcome] = []
        self.prompts: list[str] = []

    def show_board(self, rendered: str) -> None:
        self.boards.append(rendered)

    def show_message(self, text: str) -> None:
        self.messages.append(text)

    def show_error(self, text: str) -> None:
        self.errors.append(text)

    def show_outcome(self, outcome: Outcome) -> None:
        self.outcomes.append(outcome)

    def prompt(self, text: str) -> None:
        self.prompts.append(text)


def _scripted_input(*lines: str) -> Callable[[], str]:
    """``input()`` replacement returning *lines* then raising EOFError."""
    pending = list(lines)

    def read_line() -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read_line


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def scripted_input() -> Callable[..., Callable[[], str]]:
    return _scripted_input


@pytest.fixture
def sink_factory() -> Callable[[], RecordingSink]:
    """For tests that need one sink per player."""
    return RecordingSink
