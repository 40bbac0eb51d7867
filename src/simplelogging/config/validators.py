"""
Validação dos dados de configuração.

Funções puras chamadas pelos modelos de ``simplelogging.config.models``
antes de qualquer writer ou formatador ser construído.
"""

from typing import Any, Iterable

from simplelogging.exceptions import ValidationException


def validate_choice(value: str, valid_choices: Iterable[str], field_name: str) -> None:
    """
    Garante que ``value`` é uma das opções aceitas (ex: tipo de writer).

    Raises:
        ValidationException: Com as opções válidas em ``details``
    """
    choices = sorted(valid_choices)
    if value not in choices:
        raise ValidationException(
            f"{field_name} inválido: {value!r} (opções: {', '.join(choices)})",
            details={"value": value, "valid_choices": choices},
        )


def validate_not_empty(value: Any, field_name: str) -> None:
    """Campo obrigatório: rejeita None, string vazia e coleções vazias."""
    if not value:
        raise ValidationException(f"{field_name} é obrigatório", details={"field": field_name})


def validate_type(value: Any, expected_type: type, field_name: str) -> None:
    """
    Confere o tipo sem conversão; ``"true"`` não vale como bool.

    None é aceito: o campo fica com o valor padrão do modelo.

    Raises:
        ValidationException: Se o tipo não corresponder
    """
    if value is None or isinstance(value, expected_type):
        return
    raise ValidationException(
        f"{field_name} espera {expected_type.__name__}, recebeu {type(value).__name__}",
        details={"field": field_name, "expected": expected_type.__name__, "got": type(value).__name__},
    )


__all__ = ["validate_choice", "validate_not_empty", "validate_type"]
