"""Flag domain – value model, entity and validation rules."""
from mp_flags.domain.errors import (
    FlagAlreadyExistsError,
    FlagNotFoundError,
    InvalidFlagNameError,
    InvalidFlagValueError,
    TypeMismatchError,
)
from mp_flags.domain.value import (
    BooleanValue,
    FlagType,
    FlagValue,
    NumericValue,
    flag_value_of,
    parse_flag_type,
)
from mp_flags.domain.validation import MAX_NAME_LENGTH, validate_flag_name, validate_flag_value
from mp_flags.domain.flag import Flag

__all__ = [
    "MAX_NAME_LENGTH",
    "BooleanValue",
    "Flag",
    "FlagAlreadyExistsError",
    "FlagNotFoundError",
    "FlagType",
    "FlagValue",
    "InvalidFlagNameError",
    "InvalidFlagValueError",
    "NumericValue",
    "TypeMismatchError",
    "flag_value_of",
    "parse_flag_type",
    "validate_flag_name",
    "validate_flag_value",
]
