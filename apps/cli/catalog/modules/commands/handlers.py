from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Sequence

from catalog.core.errors import CatalogError, NotFoundError, StoreError, UsageError
from catalog.core.observability import emit
from catalog.modules.characters.fields import resolve_field
from catalog.modules.characters.render import Presenter
from catalog.modules.characters.repository import CharacterGateway
from catalog.modules.characters.schemas import (
    CharacterRecord,
    InsertOperation,
    SelectOperation,
    UpdateOperation,
)
from catalog.modules.characters.values import parse_bool, parse_day, parse_season, parse_text

from .parser import CommandKind, ParsedCommand

ADD_USAGE = "add <name> <season> <day> <true|false> <gift...>"
READ_USAGE = "read all | read <name>"
CHANGE_USAGE = "change <name> <field> <value...>"

MIN_ADD_ARGS = 5
MIN_CHANGE_ARGS = 3

UNKNOWN_COMMAND_MESSAGE = "❓ Command does not exist."
QUIT_MESSAGE = "Quitting the program."
EMPTY_CATALOG_MESSAGE = "There are no characters yet."


@dataclass
class CommandResult:
    kind: CommandKind
    ok: bool = True
    quit: bool = False
    error: Optional[CatalogError] = None


def _plural(n: int) -> str:
    return "argument" if n == 1 else "arguments"


def not_found(name: str) -> NotFoundError:
    return NotFoundError(f"No character named {name} was found.", details={"name": name})


# -------------------------
# Operation builders (pure)
# -------------------------
def build_add(args: Sequence[str]) -> InsertOperation:
    if len(args) < MIN_ADD_ARGS:
        raise UsageError(
            f"Usage: {ADD_USAGE} (got {len(args)} {_plural(len(args))}).",
            details={"expected_min": MIN_ADD_ARGS, "got": len(args)},
        )
    name, season, day, bachelor = args[0], args[1], args[2], args[3]
    record = CharacterRecord(
        name=name,
        birthday_season=parse_season(season),
        birthday_day=parse_day(day),
        is_bachelor=parse_bool(bachelor),
        best_gift=parse_text(args[4:]),
    )
    return InsertOperation(record=record)


def build_read(args: Sequence[str]) -> SelectOperation:
    if not args:
        raise UsageError(f"Usage: {READ_USAGE}.", details={"got": 0})
    if len(args) == 1 and args[0] == "all":
        return SelectOperation(name=None)
    # same join policy as add/change text values
    return SelectOperation(name=parse_text(args))


def build_change(args: Sequence[str]) -> UpdateOperation:
    if len(args) < MIN_CHANGE_ARGS:
        raise UsageError(
            f"Usage: {CHANGE_USAGE} (got {len(args)} {_plural(len(args))}).",
            details={"expected_min": MIN_CHANGE_ARGS, "got": len(args)},
        )
    target, field_token, value_tokens = args[0], args[1], args[2:]
    field = resolve_field(field_token)
    if not field.value_kind.takes_rest and len(value_tokens) != 1:
        raise UsageError(
            f"{field.field_name} takes exactly one value, got {len(value_tokens)}: {' '.join(value_tokens)}",
            details={"field": field.field_name, "got": len(value_tokens)},
        )
    return UpdateOperation(target_name=target, field=field, new_value=field.value_kind.parse(value_tokens))


# -------------------------
# Handlers (build + apply)
# -------------------------
def handle_add(repo: CharacterGateway, args: Sequence[str], out: Presenter) -> CommandResult:
    op = build_add(args)
    name = op.record.name
    try:
        repo.insert(op.record)
    except StoreError as e:
        raise StoreError(f"An error occured when adding character {name}! {e.message}", code=e.code, details=e.details) from e
    out.print_message(f"{name} was successfully added to the database! :)")
    return CommandResult(kind=CommandKind.ADD)


def handle_read(repo: CharacterGateway, args: Sequence[str], out: Presenter) -> CommandResult:
    op = build_read(args)
    if op.name is None:
        characters = repo.select_all()
        if not characters:
            out.print_message(EMPTY_CATALOG_MESSAGE)
        for c in characters:
            out.print_character(c)
        return CommandResult(kind=CommandKind.READ)

    c = repo.select_by_name(op.name)
    if c is None:
        raise not_found(op.name)
    out.print_character(c)
    return CommandResult(kind=CommandKind.READ)


def handle_change(repo: CharacterGateway, args: Sequence[str], out: Presenter) -> CommandResult:
    op = build_change(args)
    column = op.field.field_name
    try:
        n = repo.update_field(op.target_name, op.field, op.new_value)
    except StoreError as e:
        raise StoreError(
            f"Could not change {op.target_name}'s {column}! {e.message}", code=e.code, details=e.details
        ) from e
    if n == 0:
        raise not_found(op.target_name)
    out.print_message(f"{op.target_name}'s {column} was changed to {op.display_value()}.")
    return CommandResult(kind=CommandKind.CHANGE)


def handle_quit(repo: CharacterGateway, args: Sequence[str], out: Presenter) -> CommandResult:
    out.print_message(QUIT_MESSAGE)
    return CommandResult(kind=CommandKind.QUIT, quit=True)


Handler = Callable[[CharacterGateway, Sequence[str], Presenter], CommandResult]

HANDLERS: Dict[CommandKind, Handler] = {
    CommandKind.ADD: handle_add,
    CommandKind.READ: handle_read,
    CommandKind.CHANGE: handle_change,
    CommandKind.QUIT: handle_quit,
}


def execute_command(repo: CharacterGateway, cmd: ParsedCommand, out: Presenter) -> CommandResult:
    """
    Run one parsed line. Catalog errors are rendered and logged here and
    never escape; the loop continues after any of them.
    """
    handler = HANDLERS.get(cmd.kind)
    if handler is None:
        emit("info", "command.rejected", "unknown command", __name__, keyword=cmd.keyword)
        out.print_message(UNKNOWN_COMMAND_MESSAGE)
        return CommandResult(kind=CommandKind.UNRECOGNIZED, ok=False)

    emit("debug", "command.start", cmd.kind.value, __name__, args=len(cmd.arguments))
    try:
        return handler(repo, cmd.arguments, out)
    except CatalogError as e:
        level = "error" if isinstance(e, StoreError) else "info"
        emit(level, "command.rejected", e.message, __name__, command=cmd.kind.value, error=e.code, details=e.details)
        out.print_message(e.message)
        return CommandResult(kind=cmd.kind, ok=False, error=e)
