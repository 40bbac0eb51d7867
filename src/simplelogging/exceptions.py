"""Sistema centralizado de exceções do simplelogging."""

from __future__ import annotations

from typing import Any, Optional


class SimpleLoggingError(Exception):
    """Exceção base para todas as exceções customizadas do simplelogging."""

    def __init__(self, message: str, *, details: Optional[dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        text = self.message
        if self.details:
            text += " (" + ", ".join(f"{key}={value}" for key, value in self.details.items()) + ")"
        if self.cause is not None:
            text += f" | Causa: {self.cause}"
        return text

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, details={self.details!r})"


class InvalidArgumentError(SimpleLoggingError, ValueError):
    """Argumento inválido na construção de um componente (formatador, writer, logger)."""
    pass


class ValidationException(InvalidArgumentError):
    """Erro base para falhas de validação de configuração."""
    pass


class ConfigLoaderException(SimpleLoggingError):
    """Erro ao carregar configurações."""
    pass


__all__ = [
    "SimpleLoggingError",
    "InvalidArgumentError",
    "ValidationException",
    "ConfigLoaderException",
]
