"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    ACTIVE = "active"
    ENDED = "ended"


class EndReason(StrEnum):
    PIECES_EXHAUSTED = "pieces exhausted"
    TIMEOUT = "timeout"
    DISCONNECTED = "disconnected"


class Color(StrEnum):
    WHITE = "white"
    RED = "red"

    def opponent(self) -> "Color":
        return Color.RED if self == Color.WHITE else Color.WHITE
