from __future__ import annotations

import sys
from pathlib import Path
from logging.config import fileConfig

from sqlalchemy import engine_from_config, pool
from alembic import context

THIS = Path(__file__).resolve()
CLI_DIR = THIS.parents[2]  # apps/cli (or site-packages when installed)
sys.path.insert(0, str(CLI_DIR))

from sqlmodel import SQLModel  # noqa: E402

from catalog.core.db import get_database_url, resolve_sqlite_path  # noqa: E402
from catalog.modules.characters import models  # noqa: E402,F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

target_metadata = SQLModel.metadata


def get_url() -> str:
    url = get_database_url()
    sp = resolve_sqlite_path(url)
    if sp is None:
        return url
    sp.parent.mkdir(parents=True, exist_ok=True)
    return "sqlite:///" + sp.as_posix()


def run_migrations_offline() -> None:
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    # catalog.core.db.init_schema hands over an open connection
    connection = config.attributes.get("connection")
    if connection is not None:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()
        return

    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_url()

    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
        future=True,
    )
    with connectable.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
