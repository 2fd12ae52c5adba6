"""Persistence layer for SQLite storage."""

from sitconnect.persistence.database import Database
from sitconnect.persistence.repository import Repository

__all__ = ["Database", "Repository"]
