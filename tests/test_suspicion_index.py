import pytest

from manor.index.suspicion import SuspicionIndex, djb2_hash


def test_djb2_hash_matches_known_values():
    assert djb2_hash("a") == 177670 % 10
    assert djb2_hash("ab") == 5863208 % 10
    assert djb2_hash("", buckets=7) == 5381 % 7


def test_djb2_hash_is_deterministic_and_in_range():
    for key in ["Red silk thread", "Broken pipe", "x" * 49]:
        assert djb2_hash(key) == djb2_hash(key)
        assert 0 <= djb2_hash(key) < 10


def test_djb2_hash_is_order_sensitive():
    assert djb2_hash("ab", buckets=1000) != djb2_hash("ba", buckets=1000)


def test_lookup_returns_inserted_suspect(scenario_index):
    assert scenario_index.lookup("fiber") == "Alice"
    assert scenario_index.lookup("glove") == "Alice"
    assert scenario_index.lookup("pipe") == "Bob"


def test_lookup_missing_clue_is_none(scenario_index):
    assert scenario_index.lookup("candlestick") is None
    assert "candlestick" not in scenario_index
    assert "pipe" in scenario_index


def test_collisions_chain_in_one_bucket():
    index = SuspicionIndex(bucket_count=1)
    index.insert("fiber", "Alice")
    index.insert("pipe", "Bob")
    index.insert("rope", "Carol")
    assert index.chain_lengths() == [3]
    assert index.lookup("fiber") == "Alice"
    assert index.lookup("rope") == "Carol"
    assert [entry.clue for entry in index.entries()] == ["rope", "pipe", "fiber"]


def test_repeated_clue_shadows_older_entry():
    index = SuspicionIndex()
    index.insert("fiber", "Alice")
    index.insert("fiber", "Bob")
    assert index.lookup("fiber") == "Bob"
    assert len(index) == 2


def test_suspects_are_distinct_and_sorted(scenario_index):
    assert scenario_index.suspects() == ["Alice", "Bob"]


def test_teardown_empties_every_bucket(scenario_index):
    assert scenario_index.teardown() == 3
    assert len(scenario_index) == 0
    assert scenario_index.chain_lengths() == [0] * 10
    assert scenario_index.lookup("fiber") is None


def test_insert_rejects_oversized_names():
    index = SuspicionIndex()
    with pytest.raises(ValueError):
        index.insert("x" * 50, "Alice")
    with pytest.raises(ValueError):
        index.insert("fiber", "")
    assert len(index) == 0


def test_bucket_count_must_be_positive():
    with pytest.raises(ValueError):
        SuspicionIndex(bucket_count=0)
