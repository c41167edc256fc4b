# Shared fixtures for the rules and engine tests.

from __future__ import annotations

from typing import Iterator

import pytest

from stratego.events import ActionEvent, event_bus
from stratego.models.board import Board
from stratego.models.game import Game


@pytest.fixture()
def board() -> Board:
    return Board()


@pytest.fixture()
def game() -> Game:
    return Game()


@pytest.fixture()
def events() -> Iterator[list[ActionEvent]]:
    seen: list[ActionEvent] = []
    event_bus.subscribe(ActionEvent, seen.append)
    try:
        yield seen
    finally:
        event_bus.unsubscribe(ActionEvent, seen.append)
