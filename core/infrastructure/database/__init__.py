"""Database engine management."""

from .engine import Database, create_engine, create_session_factory

__all__ = ["Database", "create_engine", "create_session_factory"]
