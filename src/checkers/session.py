"""
Per-match lifecycle: who plays which color, whose turn it is, the two clocks, and how the match ends.

States: ACTIVE --> ENDED (terminal). There is no pause / resume.
All mutation happens on the host's single event-handling thread; the `ended` flag is what stops a late timer
(or a late move) from touching a decided match.
"""

import logging
import random
from typing import Callable, Optional

from src.checkers.match import Match, MoveResult
from src.checkers.rules import Move
from src.checkers.square import Square
from src.checkers.timers import Clock, Scheduler, TimerHandle, monotonic_ms
from src.config.settings import Settings, settings
from src.core.exceptions import GameStateError, InvalidRequestError
from src.core.models import MatchModel
from src.core.shared_types import Color, EndReason, Status

logger = logging.getLogger(__name__)

MS_PER_MINUTE = 60_000

EndedCallback = Callable[["SessionController"], None]


class SessionController:
    """Wraps a Match with turn enforcement, player identities and per-player clocks."""

    def __init__(
        self,
        code: str,
        players: dict[Color, str],
        budget_ms: int,
        scheduler: Scheduler,
        clock: Clock = monotonic_ms,
        match: Optional[Match] = None,
        on_ended: Optional[EndedCallback] = None,
    ) -> None:
        self.code = code
        self.players = players
        self.match = match or Match.new_match()
        self.turn = Color.RED
        self.remaining = {Color.WHITE: budget_ms, Color.RED: budget_ms}
        self.status = Status.ACTIVE
        self.winner: Optional[Color] = None
        self.end_reason: Optional[EndReason] = None

        self._scheduler = scheduler
        self._clock = clock
        self._on_ended = on_ended
        self._timers: list[TimerHandle] = []
        self.turn_started_at = self._clock()
        self._arm_forfeit_timer(self.turn)

    @property
    def ended(self) -> bool:
        return self.status == Status.ENDED

    @property
    def pending_timers(self) -> int:
        return len(self._timers)

    def color_of(self, player: str) -> Optional[Color]:
        return next((color for color, name in self.players.items() if name == player), None)

    def player_of(self, color: Color) -> str:
        return self.players[color]

    def remaining_ms(self, color: Color) -> int:
        """Clock for display: the running turn's elapsed time is subtracted without being committed."""
        remaining = self.remaining[color]
        if color == self.turn and not self.ended:
            remaining -= self._clock() - self.turn_started_at
        return max(remaining, 0)

    def legal_moves(self, player: str) -> list[Move]:
        if self.ended or self.color_of(player) != self.turn:
            return []
        return self.match.legal_moves(self.turn)

    # --- TRANSITIONS ---
    def request_move(self, player: str, from_square: Square, to_square: Square) -> MoveResult:
        """
        Attempt a move on behalf of player.
        ----

        Anything that is not allowed (match over, not your turn, unknown player, illegal move) is silently declined.
        Callers should read the state afterwards (`snapshot()`) rather than rely on the returned result.
        """
        if self.ended or self.color_of(player) != self.turn:
            logger.debug("Match %s: ignored move request from %s", self.code, player)
            return MoveResult.rejected()

        result = self.match.apply_move(self.turn, from_square, to_square)
        if not result.accepted:
            return result

        if result.turn_ends:
            self._end_turn()

        winner = self.match.find_winner()
        if winner is not None:
            self.end(winner, EndReason.PIECES_EXHAUSTED)
        return result

    def notify_disconnect(self, player: str) -> None:
        """A player left: immediate forfeit, whoever is on move (even mid capture chain)."""
        color = self.color_of(player)
        if color is None:
            logger.warning("Match %s: disconnect from unknown player %s", self.code, player)
            return
        self.end(color.opponent(), EndReason.DISCONNECTED)

    def end(self, winner: Color, reason: EndReason) -> None:
        """Sticky: only the first call decides the match, later calls are no-ops."""
        if self.ended:
            return

        self._clear_timers()
        self.status = Status.ENDED
        self.winner = winner
        self.end_reason = reason
        logger.info(
            "Match %s ended: %s (%s) won by %s",
            self.code,
            self.players[winner],
            winner,
            reason,
        )
        if self._on_ended is not None:
            self._on_ended(self)

    def close(self) -> None:
        """Drop the match without deciding it: no timer may fire afterwards."""
        self._clear_timers()

    def snapshot(self) -> MatchModel:
        """Everything a client needs to render the match."""
        return MatchModel(
            code=self.code,
            players={color.value: name for color, name in self.players.items()},
            board=self.match.board.to_grid(),
            turn=self.turn.value,
            clocks_ms={color.value: self.remaining_ms(color) for color in Color},
            status=self.status.value,
            winner=self.players[self.winner] if self.winner is not None else None,
            end_reason=self.end_reason.value if self.end_reason is not None else None,
        )

    # -- PRIVATE HELPERS ---
    def _end_turn(self) -> None:
        """
        1. cancel every pending forfeit timer
        2. debit the mover's clock with the time spent on this turn
        3. hand the turn over and restart the turn timestamp
        4. arm a single forfeit timer against the new turn holder's remaining budget
        """
        self._clear_timers()
        now = self._clock()
        mover = self.turn
        # a move handled after the budget ran out (timer callback still queued) leaves the clock at 0
        self.remaining[mover] = max(self.remaining[mover] - (now - self.turn_started_at), 0)
        self.turn = mover.opponent()
        self.turn_started_at = now
        self._arm_forfeit_timer(self.turn)
        logger.info("Match %s: %s to move", self.code, self.turn)

    def _arm_forfeit_timer(self, color: Color) -> None:
        handle = self._scheduler.call_later(
            self.remaining[color], lambda: self._on_clock_expired(color)
        )
        self._timers.append(handle)

    def _clear_timers(self) -> None:
        for handle in self._timers:
            handle.cancel()
        self._timers = []

    def _on_clock_expired(self, color: Color) -> None:
        if self.ended:
            return
        self.remaining[color] = 0
        self.end(color.opponent(), EndReason.TIMEOUT)


def create_match(
    player_a: str,
    player_b: str,
    budget_minutes: int,
    scheduler: Scheduler,
    code: str,
    clock: Clock = monotonic_ms,
    rng: Optional[random.Random] = None,
    on_ended: Optional[EndedCallback] = None,
    config: Optional[Settings] = None,
) -> SessionController:
    """
    Pair two waiting players.
    ---
    Colors are drawn at random once; the budget is capped; Red moves first and its clock starts right away.
    """
    config = config or settings
    if player_a == player_b:
        raise GameStateError(f"A player cannot play against themselves: {player_a!r}")
    if budget_minutes <= 0:
        raise InvalidRequestError(f"Time budget must be positive, got {budget_minutes}")

    minutes = min(budget_minutes, config.MAX_BUDGET_MINUTES)
    rng = rng or random.Random()
    if rng.random() > 0.5:
        players = {Color.WHITE: player_a, Color.RED: player_b}
    else:
        players = {Color.WHITE: player_b, Color.RED: player_a}

    session = SessionController(
        code=code,
        players=players,
        budget_ms=minutes * MS_PER_MINUTE,
        scheduler=scheduler,
        clock=clock,
        on_ended=on_ended,
    )
    logger.info(
        "Match %s created: white=%s red=%s, %d min each",
        code,
        players[Color.WHITE],
        players[Color.RED],
        minutes,
    )
    return session
