from __future__ import annotations

from datetime import datetime
from typing import Iterator, List

import pytest

from simplelogging import LogContext, LogWriter, reset_context
from simplelogging.context import get_context, set_context

FIXED_NOW = datetime(2024, 3, 7, 9, 5, 2)


class RecordingWriter(LogWriter):
    """Writer em memória que guarda linhas e exceções recebidas."""

    def __init__(self, ansi: bool = False) -> None:
        self.ansi = ansi
        self.lines: List[str] = []
        self.stack_traces: List[BaseException] = []

    def write(self, text: str) -> None:
        self.lines.append(text)

    def is_ansi(self) -> bool:
        return self.ansi

    def write_stack_trace(self, exc: BaseException) -> None:
        self.stack_traces.append(exc)


class FailingWriter(RecordingWriter):
    def write(self, text: str) -> None:
        raise RuntimeError("writer quebrado")


@pytest.fixture
def context() -> LogContext:
    """Contexto isolado, sem logger de console semeado."""
    return LogContext(seed_default_logger=False)


@pytest.fixture
def writer() -> RecordingWriter:
    return RecordingWriter()


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_NOW


@pytest.fixture(autouse=True)
def isolated_process_context() -> Iterator[None]:
    """Garante que nenhum teste vaze estado no contexto do processo."""
    previous = get_context()
    reset_context()
    yield
    set_context(previous)
