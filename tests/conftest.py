from __future__ import annotations

import pytest

from manor.cases.loader import load_case
from manor.index.suspicion import SuspicionIndex
from manor.session import open_session


@pytest.fixture()
def scenario_index() -> SuspicionIndex:
    index = SuspicionIndex()
    index.insert("fiber", "Alice")
    index.insert("glove", "Alice")
    index.insert("pipe", "Bob")
    return index


@pytest.fixture()
def session():
    game = open_session(load_case())
    yield game
    game.close()
