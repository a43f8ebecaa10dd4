from __future__ import annotations

from typing import List

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from catalog.core.db import init_schema
from catalog.modules.characters.repository import SqlCharacterRepository
from catalog.modules.characters.schemas import CharacterRecord
from catalog.modules.characters.seed import seed_initial_characters
from catalog.modules.commands.handlers import CommandResult, execute_command
from catalog.modules.commands.parser import parse_line


class RecordingPresenter:
    def __init__(self) -> None:
        self.characters: List[CharacterRecord] = []
        self.messages: List[str] = []

    def print_character(self, character: CharacterRecord) -> None:
        self.characters.append(character)

    def print_message(self, message: str) -> None:
        self.messages.append(message)


@pytest.fixture
def engine():
    eng = create_engine(
        "sqlite://",
        future=True,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_schema(eng, use_alembic=False)
    yield eng
    eng.dispose()


@pytest.fixture
def repo(engine) -> SqlCharacterRepository:
    r = SqlCharacterRepository(engine)
    seed_initial_characters(r)
    return r


@pytest.fixture
def out() -> RecordingPresenter:
    return RecordingPresenter()


@pytest.fixture
def run(repo, out):
    def _run(line: str) -> CommandResult:
        cmd = parse_line(line)
        assert cmd is not None
        return execute_command(repo, cmd, out)

    return _run
