"""SQLAlchemy adapter – durable flag store."""
from mp_flags.adapters.sqlalchemy.models import Base, FlagRecord
from mp_flags.adapters.sqlalchemy.session import SqlAlchemySessionFactory
from mp_flags.adapters.sqlalchemy.store import SqlAlchemyFlagStore

__all__ = ["Base", "FlagRecord", "SqlAlchemyFlagStore", "SqlAlchemySessionFactory"]
