"""SQLAlchemy ORM model for the ``flags`` table."""
from __future__ import annotations

import datetime

from sqlalchemy import Boolean, CheckConstraint, DateTime, Float, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from mp_flags.domain import BooleanValue, Flag, FlagType, FlagValue, NumericValue


class Base(DeclarativeBase):
    pass


class FlagRecord(Base):
    """Row shape of a flag.

    The value is split into two nullable columns; the ``exactly_one_value``
    constraint keeps the populated column in line with ``type``.
    """

    __tablename__ = "flags"
    __table_args__ = (
        CheckConstraint("type IN ('boolean', 'numeric')", name="valid_type"),
        CheckConstraint(
            "(type = 'boolean' AND bool_value IS NOT NULL AND numeric_value IS NULL) OR "
            "(type = 'numeric' AND numeric_value IS NOT NULL AND bool_value IS NULL)",
            name="exactly_one_value",
        ),
    )

    name: Mapped[str] = mapped_column(String(63), primary_key=True)
    type: Mapped[str] = mapped_column(String(16), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    bool_value: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    numeric_value: Mapped[float | None] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    updated_at: Mapped[datetime.datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    @classmethod
    def from_domain(cls, flag: Flag) -> "FlagRecord":
        record = cls(
            name=flag.name,
            type=flag.type.value,
            description=flag.description,
            created_at=flag.created_at,
            updated_at=flag.updated_at,
        )
        record.assign_value(flag.value)
        return record

    def assign_value(self, value: FlagValue) -> None:
        if isinstance(value, BooleanValue):
            self.bool_value, self.numeric_value = value.value, None
        else:
            self.bool_value, self.numeric_value = None, value.value

    def to_domain(self) -> Flag:
        flag_type = FlagType(self.type)
        value: FlagValue
        if flag_type is FlagType.BOOLEAN:
            value = BooleanValue(bool(self.bool_value))
        else:
            value = NumericValue(float(self.numeric_value))  # type: ignore[arg-type]
        return Flag(
            name=self.name,
            type=flag_type,
            description=self.description or "",
            value=value,
            created_at=_as_utc(self.created_at),
            updated_at=_as_utc(self.updated_at),
        )


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    # SQLite drops tzinfo on the way back; stored values are always UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.UTC)
    return value.astimezone(datetime.UTC)


__all__ = ["Base", "FlagRecord"]
