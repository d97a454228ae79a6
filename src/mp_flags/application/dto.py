"""Boundary DTOs exchanged with the transport layer."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, ClassVar, Mapping

from mp_flags.domain import (
    BooleanValue,
    Flag,
    FlagValue,
    NumericValue,
    TypeMismatchError,
)


@dataclasses.dataclass(frozen=True)
class FlagValuePayload:
    """Wire-shaped value: at most one of ``boolean`` / ``numeric`` is meant to be set.

    On the wire the boolean variant is keyed ``"bool"``; :meth:`to_dict` and
    :meth:`from_dict` are the only places that name it.
    """

    BOOL_KEY: ClassVar[str] = "bool"
    NUMERIC_KEY: ClassVar[str] = "numeric"

    boolean: bool | None = None
    numeric: float | None = None

    def to_domain(self) -> FlagValue | None:
        """Return the domain variant, or ``None`` when neither field is set.

        Raises :class:`TypeMismatchError` when both fields are set.
        """
        if self.boolean is not None and self.numeric is not None:
            raise TypeMismatchError(
                "single", "both", message="value must hold either a boolean or a number, not both"
            )
        if self.boolean is not None:
            return BooleanValue(self.boolean)
        if self.numeric is not None:
            return NumericValue(self.numeric)
        return None

    @classmethod
    def from_domain(cls, value: FlagValue) -> "FlagValuePayload":
        if isinstance(value, BooleanValue):
            return cls(boolean=value.value)
        return cls(numeric=value.value)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "FlagValuePayload":
        """Read the wire shape produced by :meth:`to_dict`; absent keys are unset."""
        return cls(boolean=data.get(cls.BOOL_KEY), numeric=data.get(cls.NUMERIC_KEY))

    def to_dict(self) -> dict[str, Any]:
        return {self.BOOL_KEY: self.boolean, self.NUMERIC_KEY: self.numeric}


@dataclasses.dataclass(frozen=True)
class CreateFlagRequest:
    name: str
    type: str
    value: FlagValuePayload
    description: str = ""


@dataclasses.dataclass(frozen=True)
class UpdateFlagValueRequest:
    value: FlagValuePayload


@dataclasses.dataclass(frozen=True)
class FlagResponse:
    """Full flag record returned by create, get and update."""

    name: str
    type: str
    description: str
    value: FlagValuePayload
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_flag(cls, flag: Flag) -> "FlagResponse":
        return cls(
            name=flag.name,
            type=flag.type.value,
            description=flag.description,
            value=FlagValuePayload.from_domain(flag.value),
            created_at=flag.created_at,
            updated_at=flag.updated_at,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "description": self.description,
            "value": self.value.to_dict(),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
        }


@dataclasses.dataclass(frozen=True)
class FlagValueResponse:
    value: FlagValuePayload

    @classmethod
    def from_value(cls, value: FlagValue) -> "FlagValueResponse":
        return cls(value=FlagValuePayload.from_domain(value))

    def to_dict(self) -> dict[str, Any]:
        return {"value": self.value.to_dict()}


__all__ = [
    "CreateFlagRequest",
    "FlagResponse",
    "FlagValuePayload",
    "FlagValueResponse",
    "UpdateFlagValueRequest",
]
