import pytest
from pydantic import ValidationError

from manor.domain.models import ClueRecord
from manor.ledger.clues import ClueLedger


def _record(clue: str, suspect: str = "Alice") -> ClueRecord:
    return ClueRecord(clue=clue, suspect=suspect)


@pytest.mark.parametrize(
    "clues",
    [
        ["m", "c", "x", "a", "e", "z"],
        ["a", "b", "c", "d"],
        ["d", "c", "b", "a"],
        ["pipe", "fiber", "pipe", "glove", "fiber", "ash"],
    ],
)
def test_in_order_is_strictly_ascending_and_distinct(clues):
    ledger = ClueLedger()
    for clue in clues:
        ledger.insert(_record(clue))
    listed = [record.clue for record in ledger.in_order()]
    assert listed == sorted(set(clues))
    assert len(ledger) == len(set(clues))


def test_duplicate_insert_keeps_first_record():
    ledger = ClueLedger()
    assert ledger.insert(_record("fiber", "Alice")) is True
    assert ledger.insert(_record("fiber", "Bob")) is False
    assert len(ledger) == 1
    assert list(ledger) == [_record("fiber", "Alice")]


def test_listing_is_restartable():
    ledger = ClueLedger()
    for clue in ["glove", "ash", "pipe"]:
        ledger.insert(_record(clue))
    first = list(ledger.in_order())
    second = list(ledger.in_order())
    assert first == second
    assert [record.clue for record in first] == ["ash", "glove", "pipe"]


def test_in_order_is_lazy():
    ledger = ClueLedger()
    ledger.insert(_record("b"))
    ledger.insert(_record("a"))
    walk = ledger.in_order()
    assert next(walk).clue == "a"
    assert next(walk).clue == "b"
    with pytest.raises(StopIteration):
        next(walk)


def test_count_matching_per_suspect():
    ledger = ClueLedger()
    ledger.insert(_record("fiber", "Alice"))
    ledger.insert(_record("glove", "Alice"))
    ledger.insert(_record("pipe", "Bob"))
    assert ledger.count_matching("Alice") == 2
    assert ledger.count_matching("Bob") == 1
    assert ledger.count_matching("Carol") == 0


def test_empty_ledger():
    ledger = ClueLedger()
    assert ledger.is_empty
    assert list(ledger) == []
    assert ledger.count_matching("Alice") == 0
    assert "fiber" not in ledger


def test_contains_searches_by_clue():
    ledger = ClueLedger()
    for clue in ["m", "c", "x"]:
        ledger.insert(_record(clue))
    assert "c" in ledger
    assert "x" in ledger
    assert "q" not in ledger
    assert 3 not in ledger


def test_teardown_releases_all_nodes():
    ledger = ClueLedger()
    for clue in ["m", "c", "x", "a"]:
        ledger.insert(_record(clue))
    assert ledger.teardown() == 4
    assert len(ledger) == 0
    assert ledger.is_empty


def test_records_reject_oversized_names():
    with pytest.raises(ValidationError):
        ClueRecord(clue="x" * 50, suspect="Alice")
    with pytest.raises(ValidationError):
        ClueRecord(clue="fiber", suspect="")
