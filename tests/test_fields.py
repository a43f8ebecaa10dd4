import pytest

from catalog.core.errors import UsageError, ValidationError
from catalog.modules.characters.fields import FIELDS, FieldKind, field_names, resolve_field
from catalog.modules.characters.models import Season


def test_registry_is_the_five_columns() -> None:
    assert field_names() == ("name", "birthday_season", "birthday_day", "is_bachelor", "best_gift")
    assert {f.value_kind for f in FIELDS} == set(FieldKind)


def test_resolve_field_is_case_insensitive() -> None:
    assert resolve_field("BIRTHDAY_DAY").value_kind is FieldKind.DAY
    assert resolve_field("Best_Gift").value_kind is FieldKind.TEXT
    assert resolve_field("is_bachelor") is resolve_field("IS_BACHELOR")


def test_unknown_field_lists_valid_names() -> None:
    with pytest.raises(ValidationError) as exc:
        resolve_field("favoritecolor")
    assert exc.value.code == "unknown_field"
    for name in field_names():
        assert name in exc.value.message


def test_kind_parse_dispatch() -> None:
    assert FieldKind.TEXT.parse(["Fish", "Taco"]) == "Fish Taco"
    assert FieldKind.SEASON.parse(["summer"]) is Season.SUMMER
    assert FieldKind.DAY.parse(["7"]) == 7
    assert FieldKind.BOOL.parse(["False"]) is False
    assert FieldKind.TEXT.takes_rest
    assert not FieldKind.DAY.takes_rest


@pytest.mark.parametrize("kind", [FieldKind.SEASON, FieldKind.DAY, FieldKind.BOOL])
def test_single_word_kinds_reject_wrong_token_count(kind) -> None:
    with pytest.raises(UsageError):
        kind.parse([])
    with pytest.raises(UsageError):
        kind.parse(["a", "b"])
