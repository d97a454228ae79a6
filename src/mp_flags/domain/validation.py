"""Flag name and value validation rules."""

from __future__ import annotations

import string
from typing import Callable, Final

from mp_flags.domain.errors import InvalidFlagNameError, TypeMismatchError
from mp_flags.domain.value import FlagType, FlagValue

MAX_NAME_LENGTH: Final = 63

_LOWERCASE: Final = frozenset(string.ascii_lowercase)
_ALLOWED: Final = _LOWERCASE | frozenset(string.digits) | {"-"}


def _not_empty(name: str) -> str | None:
    if not name:
        return "name must not be empty"
    return None


def _max_length(name: str) -> str | None:
    if len(name) > MAX_NAME_LENGTH:
        return f"name must not exceed {MAX_NAME_LENGTH} characters"
    return None


def _starts_with_letter(name: str) -> str | None:
    if name[0] not in _LOWERCASE:
        return "name must start with a lowercase letter"
    return None


def _no_hyphen_edge(name: str) -> str | None:
    if name[0] == "-" or name[-1] == "-":
        return "name must not start or end with a hyphen"
    return None


def _allowed_chars(name: str) -> str | None:
    if not set(name) <= _ALLOWED:
        return "name must contain only lowercase letters, digits, and hyphens"
    return None


# Evaluation order; later rules may assume the earlier ones passed.
NAME_RULES: Final[tuple[tuple[str, Callable[[str], str | None]], ...]] = (
    ("empty", _not_empty),
    ("too_long", _max_length),
    ("bad_first_char", _starts_with_letter),
    ("hyphen_edge", _no_hyphen_edge),
    ("bad_chars", _allowed_chars),
)


def validate_flag_name(name: str) -> str:
    """Return *name* unchanged if it is a valid flag name.

    Raises :class:`InvalidFlagNameError` naming the first violated rule.
    """
    for rule, check in NAME_RULES:
        problem = check(name)
        if problem is not None:
            raise InvalidFlagNameError(name, rule, problem)
    return name


def validate_flag_value(flag_type: FlagType, value: FlagValue | None) -> FlagValue:
    """Return *value* if its variant matches *flag_type*.

    ``None`` is the unset value and is always rejected.
    """
    if value is None:
        raise TypeMismatchError(flag_type.value, None)
    if value.flag_type is not flag_type:
        raise TypeMismatchError(flag_type.value, value.flag_type.value)
    return value


__all__ = ["MAX_NAME_LENGTH", "NAME_RULES", "validate_flag_name", "validate_flag_value"]
