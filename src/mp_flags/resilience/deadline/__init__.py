"""Resilience – caller-supplied deadlines for store and cache calls."""
from mp_flags.resilience.deadline.context import (
    DeadlineContext,
    DeadlineExceededError,
    deadline_aware,
    effective_deadline,
)
from mp_flags.resilience.deadline.deadline import Deadline

__all__ = [
    "Deadline",
    "DeadlineContext",
    "DeadlineExceededError",
    "deadline_aware",
    "effective_deadline",
]
