from .session import (
    Base,
    get_engine,
    get_session_factory,
    make_engine,
    make_session_factory,
    unit_of_work,
)

__all__ = [
    "Base",
    "get_engine",
    "get_session_factory",
    "make_engine",
    "make_session_factory",
    "unit_of_work",
]
