"""Persistence implementations for warden_auth.

This package contains storage-specific implementations of the
repository interfaces defined in warden_auth.repositories.

Structure:
    persistence/
    ├── memory/         # In-process dict store (tests, demos)
    └── sqlalchemy/     # SQLAlchemy/SQL database implementation

Usage:
    from warden_auth.persistence.memory import InMemorySessionRepository
    from warden_auth.persistence.sqlalchemy import SessionRepositorySQLAlchemy
"""
