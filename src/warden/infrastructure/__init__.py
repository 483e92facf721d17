from warden.infrastructure.database import (
    create_engine,
    create_session_maker,
    create_tables,
    drop_tables,
    session_scope,
)

__all__ = [
    "create_engine",
    "create_session_maker",
    "create_tables",
    "drop_tables",
    "session_scope",
]
