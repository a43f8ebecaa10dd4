"""
Character catalog REPL.

    add <name> <season> <day> <true|false> <gift...>
    read all | read <name>
    change <name> <field> <value...>
    quit

Store: DATABASE_URL (or the DB_* group, also read from .env), see catalog.core.db.
"""
from __future__ import annotations

import sys
from typing import Callable

from catalog.core.db import db_health, get_database_url, get_engine, init_schema, load_env_file
from catalog.core.errors import ConfigError
from catalog.core.observability import configure_logging, emit
from catalog.modules.characters.render import Console, Presenter
from catalog.modules.characters.repository import CharacterGateway, SqlCharacterRepository
from catalog.modules.characters.seed import is_seed_enabled, seed_initial_characters
from catalog.modules.commands.handlers import execute_command
from catalog.modules.commands.parser import parse_line

PROMPT = "Type your command here:"


def run_loop(
    repo: CharacterGateway,
    out: Presenter,
    read_line: Callable[[], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """Process lines until `quit` or end of input. Returns the number of commands run."""
    executed = 0
    while True:
        write(PROMPT)
        try:
            line = read_line()
        except (EOFError, KeyboardInterrupt):
            break

        cmd = parse_line(line)
        if cmd is None:
            continue

        result = execute_command(repo, cmd, out)
        executed += 1
        if result.quit:
            break
    return executed


def bootstrap(use_alembic: bool = True) -> SqlCharacterRepository:
    engine = get_engine()
    init_schema(engine, use_alembic=use_alembic)
    health = db_health(engine)
    emit("info" if health["status"] == "ok" else "error", "catalog.db.health", health["status"], __name__, **health)

    repo = SqlCharacterRepository(engine)
    if is_seed_enabled():
        added = seed_initial_characters(repo)
        emit("info", "catalog.startup", f"seeded {added} characters", __name__, total=repo.count())
    return repo


def main() -> int:
    load_env_file()
    configure_logging()
    try:
        emit("info", "catalog.startup", "starting", __name__, db_kind=get_database_url().split(":", 1)[0])
        repo = bootstrap()
    except ConfigError as e:
        print(e.message, file=sys.stderr)
        return 2

    run_loop(repo, Console())
    emit("info", "catalog.shutdown", "bye", __name__)
    return 0


if __name__ == "__main__":
    sys.exit(main())
