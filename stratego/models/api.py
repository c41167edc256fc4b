from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from .board import Coord, Move
from .enums import ActionKind, ActionLogResult, Colour

# ----- Actions (discriminated union) -----


class MoveAction(BaseModel):
    kind: Literal[ActionKind.MOVE] = ActionKind.MOVE
    src: Coord
    dst: Coord

    @property
    def move(self) -> Move:
        return Move(src=self.src, dst=self.dst)


class AttackAction(BaseModel):
    kind: Literal[ActionKind.ATTACK] = ActionKind.ATTACK
    src: Coord
    dst: Coord

    @property
    def move(self) -> Move:
        return Move(src=self.src, dst=self.dst)


Action = Annotated[Union[MoveAction, AttackAction], Field(discriminator="kind")]


class EvaluateResponse(BaseModel):
    legal: bool
    explanation: str


class LegalAction(BaseModel):
    action: Action
    explanation: str


class ActionLogEntry(BaseModel):
    turn: int
    player: Colour
    action: Action
    result: ActionLogResult
    message: str | None = None
    battle: dict | None = None
