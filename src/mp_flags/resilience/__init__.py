"""Resilience – deadline propagation."""
from mp_flags.resilience.deadline import (
    Deadline,
    DeadlineContext,
    DeadlineExceededError,
    deadline_aware,
    effective_deadline,
)

__all__ = [
    "Deadline",
    "DeadlineContext",
    "DeadlineExceededError",
    "deadline_aware",
    "effective_deadline",
]
