# src/reloc_community/db/__init__.py
"""Database configuration and utilities."""

from .session import SessionLocal, commit_or_raise, get_db

__all__ = ["get_db", "SessionLocal", "commit_or_raise"]
