"""
Writers: destinos das linhas de log.

Define a interface ``LogWriter`` e os destinos concretos de console e
arquivo. Todos escrevem de forma síncrona, uma linha por chamada.
"""

from __future__ import annotations

import logging
import sys
import threading
import traceback
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.traceback import Traceback

from simplelogging.constants import (
    DEFAULT_ENCODING,
    DEFAULT_FILE_ANSI,
    DEFAULT_STACK_TRACES_ONLY_IN_DEBUG,
)
from simplelogging.context import LogContext, get_context
from simplelogging.exceptions import InvalidArgumentError

_logger = logging.getLogger(__name__)


class LogWriter(ABC):
    """
    Interface base para writers de log.

    Define o contrato para escrita de linhas já formatadas
    e de stack traces em um destino.
    """

    @abstractmethod
    def write(self, text: str) -> None:
        """
        Escreve uma linha.

        Args:
            text: Linha já formatada (sem quebra de linha final)
        """
        pass

    @abstractmethod
    def is_ansi(self) -> bool:
        """Se o destino aceita sequências ANSI."""
        pass

    @abstractmethod
    def write_stack_trace(self, exc: BaseException) -> None:
        """Escreve o stack trace de uma exceção."""
        pass

    def flush(self) -> None:
        """Força escrita de buffers pendentes."""
        pass

    def close(self) -> None:
        """Fecha o writer e libera recursos."""
        self.flush()


class DebugGatedWriter(LogWriter):
    """
    Writer que só escreve stack traces em modo debug.

    O bloqueio pode ser desligado por writer via
    ``stack_traces_only_in_debug``.
    """

    def __init__(self, stack_traces_only_in_debug: bool = DEFAULT_STACK_TRACES_ONLY_IN_DEBUG,
                 *, context: Optional[LogContext] = None):
        """
        Inicializa o writer.

        Args:
            stack_traces_only_in_debug: Se stack traces exigem modo debug
            context: Contexto consultado para o modo debug
        """
        self.stack_traces_only_in_debug = stack_traces_only_in_debug
        self._context = context
        self._lock = threading.RLock()

    @property
    def context(self) -> LogContext:
        return self._context if self._context is not None else get_context()

    def write_stack_trace(self, exc: BaseException) -> None:
        if self.stack_traces_only_in_debug and not self.context.debug_mode:
            return
        with self._lock:
            self._write_stack_trace(exc)

    @abstractmethod
    def _write_stack_trace(self, exc: BaseException) -> None:
        """Escreve o stack trace depois da verificação de modo."""
        pass


class ConsoleWriter(DebugGatedWriter):
    """
    Writer para saída no console.

    Envia linhas para stdout (ou um stream customizado). O suporte a
    ANSI vem de ``LogContext.console_ansi``.
    """

    def __init__(self, stack_traces_only_in_debug: bool = DEFAULT_STACK_TRACES_ONLY_IN_DEBUG,
                 *, stream: Optional[TextIO] = None, context: Optional[LogContext] = None):
        """
        Inicializa o writer.

        Args:
            stack_traces_only_in_debug: Se stack traces exigem modo debug
            stream: Stream customizado (padrão: sys.stdout no momento da escrita)
            context: Contexto consultado para modo debug e ANSI
        """
        super().__init__(stack_traces_only_in_debug, context=context)
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        with self._lock:
            self.stream.write(text + "\n")
            self.stream.flush()

    def is_ansi(self) -> bool:
        return self.context.console_ansi

    def _write_stack_trace(self, exc: BaseException) -> None:
        if self.is_ansi():
            console = Console(file=self.stream, force_terminal=True)
            console.print(Traceback.from_exception(type(exc), exc, exc.__traceback__))
        else:
            traceback.print_exception(type(exc), exc, exc.__traceback__, file=self.stream)
        self.stream.flush()

    def flush(self) -> None:
        if hasattr(self.stream, "flush"):
            self.stream.flush()


class FileWriter(DebugGatedWriter):
    """
    Writer para saída em arquivo.

    Acrescenta linhas ao final do arquivo, criando-o se necessário.
    """

    def __init__(self, path: Optional[str | Path], ansi: bool = DEFAULT_FILE_ANSI,
                 stack_traces_only_in_debug: bool = DEFAULT_STACK_TRACES_ONLY_IN_DEBUG,
                 *, encoding: str = DEFAULT_ENCODING, context: Optional[LogContext] = None):
        """
        Inicializa o writer.

        Args:
            path: Caminho do arquivo
            ansi: Se as linhas devem conter sequências ANSI
            stack_traces_only_in_debug: Se stack traces exigem modo debug
            encoding: Encoding do arquivo
            context: Contexto consultado para o modo debug

        Raises:
            InvalidArgumentError: Se o caminho for None
        """
        if path is None:
            raise InvalidArgumentError("Caminho do arquivo não pode ser None")
        super().__init__(stack_traces_only_in_debug, context=context)
        self.path = Path(path)
        self.ansi = ansi
        self.encoding = encoding
        self._file: Optional[TextIO] = None
        self._create_file()
        self._open()

    def _create_file(self) -> None:
        """Cria o arquivo (e diretórios) antecipadamente; falhas são ignoradas."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.touch(exist_ok=True)
        except OSError as e:
            _logger.debug("Não foi possível pré-criar %s: %s", self.path, e)

    def _open(self) -> None:
        self._file = open(self.path, "a", encoding=self.encoding)

    def write(self, text: str) -> None:
        with self._lock:
            if self._file is None:
                self._open()
            self._file.write(text + "\n")
            self._file.flush()

    def is_ansi(self) -> bool:
        return self.ansi

    def _write_stack_trace(self, exc: BaseException) -> None:
        if self._file is None:
            self._open()
        traceback.print_exception(type(exc), exc, exc.__traceback__, file=self._file)
        self._file.flush()

    def flush(self) -> None:
        if self._file:
            self._file.flush()

    def close(self) -> None:
        """Fecha o arquivo."""
        with self._lock:
            if self._file:
                self._file.close()
                self._file = None

    def __enter__(self) -> FileWriter:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


__all__ = ["LogWriter", "DebugGatedWriter", "ConsoleWriter", "FileWriter"]
