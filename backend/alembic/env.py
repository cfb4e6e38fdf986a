from logging.config import fileConfig
from alembic import context
from sqlalchemy import engine_from_config, pool

from workout_log.db import Base
from workout_log import models  # noqa: F401  # registers every table on Base.metadata
from workout_log.settings import get_settings

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

def get_url():
    # Migrations run on the sync driver; psycopg serves both, aiosqlite does not
    return get_settings().SQLALCHEMY_DATABASE_URI.replace("sqlite+aiosqlite", "sqlite")

target_metadata = Base.metadata

def run_migrations_offline():
    context.configure(url=get_url(), target_metadata=target_metadata, literal_binds=True, dialect_opts={"paramstyle": "named"})
    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online():
    connectable = engine_from_config({"sqlalchemy.url": get_url()}, prefix="sqlalchemy.", poolclass=pool.NullPool)
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
