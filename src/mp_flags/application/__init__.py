"""Application layer – flag orchestration, ports, DTOs and outcome mapping."""
from mp_flags.application.dto import (
    CreateFlagRequest,
    FlagResponse,
    FlagValuePayload,
    FlagValueResponse,
    UpdateFlagValueRequest,
)
from mp_flags.application.outcomes import OUTCOMES, Outcome, outcome_for
from mp_flags.application.ports import FlagCache, FlagStore
from mp_flags.application.service import FlagService

__all__ = [
    "OUTCOMES",
    "CreateFlagRequest",
    "FlagCache",
    "FlagResponse",
    "FlagService",
    "FlagStore",
    "FlagValuePayload",
    "FlagValueResponse",
    "Outcome",
    "UpdateFlagValueRequest",
    "outcome_for",
]
