"""Testing generators – Hypothesis strategies for flag names and values.

Requires the ``hypothesis`` package:

    pip install "mp-flags[test]"
"""
from __future__ import annotations

import string
from typing import TYPE_CHECKING, Any

from mp_flags.domain import MAX_NAME_LENGTH, BooleanValue, FlagValue, NumericValue

if TYPE_CHECKING:
    from hypothesis.strategies import SearchStrategy


def _require_hypothesis() -> Any:
    """Lazy import guard – raises a clear error when hypothesis is absent."""
    try:
        import hypothesis.strategies as st
        return st
    except ImportError as exc:
        raise ImportError(
            "Install 'hypothesis' to use property-based testing strategies: "
            "pip install hypothesis"
        ) from exc


_LOWER = string.ascii_lowercase
_BODY = string.ascii_lowercase + string.digits + "-"
_TAIL = string.ascii_lowercase + string.digits


def valid_flag_names() -> "SearchStrategy[str]":
    """Names that satisfy every naming rule.

    Example::

        @given(valid_flag_names())
        def test_accepts(name):
            assert validate_flag_name(name) == name
    """
    st = _require_hypothesis()
    single = st.sampled_from(_LOWER)
    longer = st.builds(
        lambda head, body, tail: head + body + tail,
        st.sampled_from(_LOWER),
        st.text(alphabet=_BODY, max_size=MAX_NAME_LENGTH - 2),
        st.sampled_from(_TAIL),
    )
    return st.one_of(single, longer)


def flag_values() -> "SearchStrategy[FlagValue]":
    """Either variant, with finite numeric payloads."""
    st = _require_hypothesis()
    return st.one_of(
        st.booleans().map(BooleanValue),
        st.floats(allow_nan=False, allow_infinity=False).map(NumericValue),
    )


__all__ = ["flag_values", "valid_flag_names"]
