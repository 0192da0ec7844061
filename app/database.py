from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base

Base = declarative_base()


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the given connection string."""
    if database_url.startswith("sqlite"):
        # SQLite has no server-side pool or connect timeout
        engine = create_engine(database_url)

        # Built-in lower() only folds ASCII; ilike compiles to lower() LIKE lower()
        @event.listens_for(engine, "connect")
        def _register_unicode_lower(dbapi_connection, connection_record):
            dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)

        return engine
    
    # pool_size: base connections always available
    # max_overflow: additional connections that can be created on demand
    return create_engine(
        database_url,
        pool_size=5,
        max_overflow=10,
        pool_pre_ping=True,  # Verify connections before using
        pool_recycle=3600,  # Recycle connections after 1 hour
        connect_args={
            "connect_timeout": 10,  # 10 second connection timeout
        }
    )
