"""Config settings – EnvSettingsLoader."""
from __future__ import annotations

import abc
import dataclasses
import os
from typing import Any, Callable, Mapping, TypeVar

from mp_flags.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from mp_flags.config.settings import Settings

T = TypeVar("T", bound=Settings)

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_bool(raw: str) -> bool:
    token = raw.strip().lower()
    if token in _TRUE:
        return True
    if token in _FALSE:
        return False
    raise ValueError(f"expected one of {sorted(_TRUE | _FALSE)}")


# Keyed by type name: with postponed annotations ``field.type`` is a string.
_COERCERS: dict[str, Callable[[str], Any]] = {
    "bool": _parse_bool,
    "int": int,
    "float": float,
    "str": str,
}


class SettingsLoader(abc.ABC):
    """Port: build a :class:`Settings` dataclass from some external source."""

    @abc.abstractmethod
    def load(self, settings_class: type[T]) -> T: ...


class EnvSettingsLoader(SettingsLoader):
    """Load settings from environment variables.

    Each field ``foo_bar`` is read from ``FOO_BAR`` (prefixed with the
    class's ``_prefix`` when set). An empty variable counts as unset, so
    the field default applies.
    """

    def __init__(self, environ: Mapping[str, str] | None = None) -> None:
        self._environ = environ

    def env_key(self, settings_class: type[Settings], field_name: str) -> str:
        prefix = getattr(settings_class, "_prefix", "")
        return f"{prefix}_{field_name}".upper() if prefix else field_name.upper()

    def load(self, settings_class: type[T]) -> T:
        environ = os.environ if self._environ is None else self._environ
        values: dict[str, Any] = {}

        for field in dataclasses.fields(settings_class):
            key = self.env_key(settings_class, field.name)
            raw = environ.get(key, "")
            if raw == "":
                if _is_required(field):
                    raise MissingRequiredSettingError(key)
                continue
            values[field.name] = _coerce(key, raw, field.type)

        try:
            return settings_class(**values)
        except ConfigError:
            raise
        except (TypeError, ValueError) as exc:
            raise ConfigError(f"Cannot build {settings_class.__name__}: {exc}", cause=exc) from exc


def _is_required(field: dataclasses.Field[Any]) -> bool:
    return field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING


def _coerce(key: str, raw: str, type_hint: Any) -> Any:
    name = type_hint if isinstance(type_hint, str) else getattr(type_hint, "__name__", "str")
    parse = _COERCERS.get(name, str)
    try:
        return parse(raw)
    except ValueError as exc:
        raise InvalidSettingValueError(key, raw, str(exc)) from exc


__all__ = ["EnvSettingsLoader", "SettingsLoader"]
