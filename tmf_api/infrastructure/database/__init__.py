from .base import Base
from .session import build_engine, build_session_factory, get_db_session, init_models

__all__ = [
    "Base",
    "build_engine",
    "build_session_factory",
    "get_db_session",
    "init_models",
]
