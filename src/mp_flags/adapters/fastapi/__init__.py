"""FastAPI adapter – error outcome → HTTP status mapping."""
from mp_flags.adapters.fastapi.exception_mapper import HTTP_STATUS, FastAPIExceptionMapper

__all__ = ["HTTP_STATUS", "FastAPIExceptionMapper"]
