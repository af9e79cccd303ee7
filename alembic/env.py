"""Alembic environment for the coach API schema.

Migrations always run through a synchronous driver (psycopg2 or sqlite3);
``Settings.sync_database_url`` strips the async driver from the app URL.
"""

from logging.config import fileConfig

from alembic import context
from sqlalchemy import create_engine, pool

from app.core.config import get_settings
from app.db.base import Base
import app.models  # noqa: F401 - populate Base.metadata

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

settings = get_settings()
database_url = config.get_main_option("sqlalchemy.url") or settings.sync_database_url


def _configure_options() -> dict:
    # SQLite cannot ALTER most constraints in place
    return {
        "target_metadata": Base.metadata,
        "render_as_batch": settings.is_sqlite,
        "compare_type": True,
    }


def run_migrations_offline() -> None:
    """Emit SQL to stdout instead of touching a database."""
    context.configure(
        url=database_url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **_configure_options(),
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    engine = create_engine(database_url, poolclass=pool.NullPool)
    try:
        with engine.connect() as connection:
            context.configure(connection=connection, **_configure_options())
            with context.begin_transaction():
                context.run_migrations()
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
