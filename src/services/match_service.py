"""Orchestration of communication from the transport layer to the match sessions (and the reverse direction)."""

import logging
from typing import Callable, Optional
from uuid import uuid4

from src.api.models import (
    CreateMatchRequest,
    DeleteMatchRequest,
    DisconnectRequest,
    GetMatchRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MatchResponse,
    MoveRequest,
)
from src.checkers.session import SessionController, create_match
from src.checkers.square import Square
from src.checkers.timers import Clock, Scheduler, monotonic_ms
from src.config.settings import Settings, settings
from src.core.exceptions import GameStateError, MatchNotFoundError
from src.core.models import MatchModel

logger = logging.getLogger(__name__)


class MatchService:
    """
    Orchestration of sessions for checkers matches.

    NOTE: the session table belongs to this instance. The transport layer decides how many services exist.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        config: Optional[Settings] = None,
        clock: Clock = monotonic_ms,
        on_match_ended: Optional[Callable[[MatchModel], None]] = None,
    ) -> None:
        self.scheduler = scheduler
        self.config = config or settings
        self.clock = clock
        self.sessions: dict[str, SessionController] = {}
        self.on_match_ended = on_match_ended

    # -- Transport logic ---
    def create_match(self, request: CreateMatchRequest) -> MatchResponse:
        """Two waiting players got paired."""
        code = request.code or uuid4().hex
        if code in self.sessions:
            raise GameStateError(f"A match with code={code!r} already exists.")
        minutes = (
            request.minutes
            if request.minutes is not None
            else self.config.DEFAULT_BUDGET_MINUTES
        )
        session = create_match(
            player_a=request.player_a,
            player_b=request.player_b,
            budget_minutes=minutes,
            scheduler=self.scheduler,
            code=code,
            clock=self.clock,
            on_ended=self._on_match_ended,
            config=self.config,
        )
        self.sessions[code] = session
        return self._create_match_response(session.snapshot())

    def make_move(self, request: MoveRequest) -> MatchResponse:
        """
        Make a move attempt.
        ----
        Always answers with the current state: an ignored move simply shows an unchanged board.
        """
        session = self._fetch_session(request.code)
        session.request_move(
            request.player,
            Square.from_pair(request.from_square),
            Square.from_pair(request.to_square),
        )
        return self._create_match_response(session.snapshot())

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """Moves the player may make right now (none when it is not their turn)."""
        session = self._fetch_session(request.code)
        moves = session.legal_moves(request.player)
        return LegalMovesResponse(
            code=request.code,
            player=request.player,
            color=session.color_of(request.player),
            legal_moves=[
                (move.from_square.to_pair(), move.to_square.to_pair()) for move in moves
            ],
        )

    def get_match_state(self, request: GetMatchRequest) -> MatchResponse:
        session = self._fetch_session(request.code)
        return self._create_match_response(session.snapshot())

    def disconnect(self, request: DisconnectRequest) -> MatchResponse:
        """The transport lost a player's connection: the match is forfeited."""
        session = self._fetch_session(request.code)
        session.notify_disconnect(request.player)
        return self._create_match_response(session.snapshot())

    def delete_match(self, request: DeleteMatchRequest) -> None:
        """Forget a match (for an active one, this also stops its clock)."""
        session = self.sessions.pop(request.code, None)
        if session is None:
            raise MatchNotFoundError(f"Match with code={request.code!r} not found.")
        session.close()

    # -- Internal helpers --
    def _on_match_ended(self, session: SessionController) -> None:
        """Called exactly once per match, when it is decided."""
        logger.info("Match %s closed, room can be torn down", session.code)
        if self.on_match_ended is not None:
            self.on_match_ended(session.snapshot())

    def _create_match_response(self, model: MatchModel) -> MatchResponse:
        return MatchResponse(
            code=model.code,
            players=model.players,
            board=model.board,
            turn=model.turn,
            clocks_ms=model.clocks_ms,
            status=model.status,
            winner=model.winner,
            end_reason=model.end_reason,
        )

    def _fetch_session(self, code: str) -> SessionController:
        """Attempt to find the session and raise error if it fails."""
        session = self.sessions.get(code)
        if session is None:
            raise MatchNotFoundError(f"Match with code={code!r} not found.")
        return session
