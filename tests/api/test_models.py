import pytest

from src.api.models import CreateMatchRequest, MatchResponse, MoveRequest
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color


# -- Validation - CreateMatchRequest --
def test_valid_create_request() -> None:
    request = CreateMatchRequest(player_a="socket-1", player_b="socket-2", minutes=5)
    assert request.minutes == 5
    assert request.code is None


def test_minutes_are_optional() -> None:
    request = CreateMatchRequest(player_a="socket-1", player_b="socket-2")
    assert request.minutes is None


@pytest.mark.parametrize("minutes", [0, -1, -60])
def test_invalid_minutes(minutes: int) -> None:
    """A match needs a positive time budget."""
    with pytest.raises(InvalidRequestError):
        _ = CreateMatchRequest(player_a="socket-1", player_b="socket-2", minutes=minutes)


def test_same_players() -> None:
    with pytest.raises(InvalidRequestError):
        _ = CreateMatchRequest(player_a="socket-1", player_b="socket-1", minutes=5)


# -- Validation - MoveRequest --
def test_squares_as_pairs() -> None:
    request = MoveRequest(code="abcd", player="p", from_square=[0, 5], to_square=(1, 4))
    assert request.from_square == (0, 5)
    assert request.to_square == (1, 4)


def test_off_board_squares_pass_through() -> None:
    """Not the API's job: the match itself declines off-board coordinates."""
    request = MoveRequest(code="abcd", player="p", from_square=(-1, 9), to_square=(8, 8))
    assert request.from_square == (-1, 9)


@pytest.mark.parametrize("square", [[1], [1, 2, 3], "a1", ["a", "b"]])
def test_malformed_squares(square: object) -> None:
    with pytest.raises(ValueError):
        _ = MoveRequest(code="abcd", player="p", from_square=square, to_square=(1, 4))


# -- Responses --
def test_match_response_turn_is_a_color() -> None:
    response = MatchResponse(
        code="abcd",
        players={"white": "a", "red": "b"},
        board=[[0] * 8 for _ in range(8)],
        turn="red",
        clocks_ms={"white": 1, "red": 2},
        status="active",
    )
    assert response.turn == Color.RED
    assert response.winner is None
