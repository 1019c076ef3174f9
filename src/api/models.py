"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator, model_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color

PieceColor = str
PlayerId = str
# Squares travel as [column, row]
SquarePair = tuple[int, int]


# --- REQUEST MODELS ---
class CreateMatchRequest(BaseModel):
    player_a: PlayerId
    player_b: PlayerId
    minutes: Optional[int] = None  # None: the configured default budget
    code: Optional[str] = None

    @field_validator("minutes")
    @classmethod
    def validate_minutes(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value <= 0:
            raise InvalidRequestError(f"Time budget must be positive, got {value}.")
        return value

    @model_validator(mode="after")
    def validate_distinct_players(self) -> "CreateMatchRequest":
        if self.player_a == self.player_b:
            raise InvalidRequestError(
                f"Both players have the same identity: {self.player_a!r}."
            )
        return self


class MoveRequest(BaseModel):
    code: str
    player: PlayerId
    from_square: SquarePair
    to_square: SquarePair


class LegalMovesRequest(BaseModel):
    code: str
    player: PlayerId


class GetMatchRequest(BaseModel):
    code: str


class DisconnectRequest(BaseModel):
    code: str
    player: PlayerId


class DeleteMatchRequest(BaseModel):
    code: str


# --- RESPONSE MODELS ---
class MatchResponse(BaseModel):
    code: str
    players: dict[PieceColor, PlayerId]
    board: list[list[int]]
    turn: Color
    clocks_ms: dict[PieceColor, int]
    status: str
    winner: Optional[PlayerId] = None
    end_reason: Optional[str] = None


class LegalMovesResponse(BaseModel):
    code: str
    player: PlayerId
    color: Optional[Color]
    legal_moves: list[tuple[SquarePair, SquarePair]]
