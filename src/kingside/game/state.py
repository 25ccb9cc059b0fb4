"""Game state machine — board, turn, history, castling flags, outcome, clocks."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from kingside.core.board import Board
from kingside.core.castling import CastlingRights, castling_for_king_move
from kingside.core.enums import Color, GameStatus, MoveResult
from kingside.core.move import Move
from kingside.core.piece import Piece
from kingside.core.rules import Rules
from kingside.core.types import Square, is_valid_square
from kingside.game.clock import GameClock
from kingside.game.interfaces import IClock, TimeControl

_LOGGER = logging.getLogger(__name__)

_STATUS_TEXT: dict[GameStatus, str] = {
    GameStatus.WHITE_WON: "White won by checkmate",
    GameStatus.BLACK_WON: "Black won by checkmate",
    GameStatus.DRAWN: "Game ended in a draw",
}


@dataclass
class GameState:
    """The aggregate root of one game.

    Owned by the host and mutated only through its own operations. It has
    no internal locking: every call must be serialized by the caller (one
    game per event thread, or a lock per game).

    Undo pops the last :class:`Move` and reverses its board writes and the
    turn flip only. Castling flags and clock debits stay as they are, so
    move / undo / replay can forfeit castling rights or clock time.

    A pawn reaching the last rank is always promoted to a queen; the
    history record keeps the pawn in ``piece`` so undo puts it back.
    """

    board: Board = field(default_factory=Board.initial)
    side_to_move: Color = Color.WHITE
    move_history: list[Move] = field(default_factory=list)
    castling: CastlingRights = field(default_factory=CastlingRights)
    status: GameStatus = GameStatus.IN_PROGRESS
    clock: IClock = field(default_factory=GameClock)
    selected: Square | None = None

    # ── Initialisation ───────────────────────────────────────────────────

    @classmethod
    def from_board(
        cls,
        board: Board,
        side_to_move: Color = Color.WHITE,
        castling: CastlingRights | None = None,
        time_control: TimeControl | None = None,
    ) -> GameState:
        """Set up an arbitrary position, e.g. a puzzle or a test fixture.

        The outcome is evaluated immediately, so a position that is already
        mate or stalemate starts out terminal.
        """
        state = cls(
            board=board,
            side_to_move=side_to_move,
            castling=castling if castling is not None else CastlingRights(),
            clock=GameClock(time_control),
        )
        state._update_status()
        return state

    def new_game(self, time_control: TimeControl | None = None) -> None:
        """Reset to the standard starting position with full clocks.

        The existing clock is refilled in place, so an injected :class:`IClock`
        survives; *time_control* replaces its control when given.
        """
        self.board = Board.initial()
        self.side_to_move = Color.WHITE
        self.move_history = []
        self.castling = CastlingRights()
        self.status = GameStatus.IN_PROGRESS
        self.clock.reset(time_control)
        self.selected = None

    # ── Queries ──────────────────────────────────────────────────────────

    def get_piece_at(self, sq: Square) -> Piece | None:
        return self.board.get(sq)

    def legal_moves(self, sq: Square) -> set[Square]:
        """Legal destinations for the piece on *sq*.

        Empty for off-board or empty squares and for pieces of the side not
        to move.
        """
        if not is_valid_square(sq):
            return set()
        piece = self.board[sq]
        if piece is None or piece.color != self.side_to_move:
            return set()
        return Rules.legal_destinations(self.board, sq, self.castling)

    def all_legal_moves(self, color: Color | None = None) -> list[tuple[Square, Square]]:
        """Every legal ``(from, to)`` pair for *color* in board scan order.

        Moves for a color other than the side to move are computed as if it
        were that color's turn.
        """
        color = self.side_to_move if color is None else color
        moves: list[tuple[Square, Square]] = []
        for sq, _ in self.board.pieces(color):
            destinations = Rules.legal_destinations(self.board, sq, self.castling)
            moves.extend((sq, to_sq) for to_sq in sorted(destinations))
        return moves

    @property
    def is_in_check(self) -> bool:
        return Rules.is_in_check(self.board, self.side_to_move)

    @property
    def is_checkmate(self) -> bool:
        return Rules.is_checkmate(self.board, self.side_to_move, self.castling)

    @property
    def is_stalemate(self) -> bool:
        return Rules.is_stalemate(self.board, self.side_to_move, self.castling)

    @property
    def is_game_over(self) -> bool:
        return self.status.is_terminal

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1] if self.move_history else None

    def get_game_status(self) -> str:
        """Human-readable status line."""
        text = _STATUS_TEXT.get(self.status)
        if text is not None:
            return text
        side = self.side_to_move.title
        if self.is_in_check:
            return f"{side} is in check"
        return f"{side} to move"

    # ── Move execution ───────────────────────────────────────────────────

    def execute_move(self, from_sq: Square, to_sq: Square) -> MoveResult:
        """Validate and play a move.

        Returns ``MoveResult.INVALID`` with no side effects when the move is
        not legal for the side to move or the game is already over.
        """
        if self.status.is_terminal:
            _LOGGER.debug("Move %s-%s rejected: game is over", from_sq, to_sq)
            return MoveResult.INVALID
        if not is_valid_square(from_sq) or not is_valid_square(to_sq):
            _LOGGER.debug("Move %s-%s rejected: off the board", from_sq, to_sq)
            return MoveResult.INVALID
        if to_sq not in self.legal_moves(from_sq):
            _LOGGER.debug("Move %s-%s rejected: not legal", from_sq, to_sq)
            return MoveResult.INVALID

        mover = self.side_to_move
        applied = Rules.apply_move(self.board, from_sq, to_sq)
        self.castling.record_move(applied.piece, from_sq)
        self.side_to_move = mover.opposite

        is_check = Rules.is_in_check(self.board, self.side_to_move)
        has_reply = Rules.has_legal_move(self.board, self.side_to_move, self.castling)
        is_checkmate = is_check and not has_reply
        is_stalemate = not is_check and not has_reply

        self.move_history.append(
            Move(
                from_sq=from_sq,
                to_sq=to_sq,
                piece=applied.piece,
                captured=applied.captured,
                is_check=is_check,
                is_checkmate=is_checkmate,
                is_castling=applied.is_castling,
                promotion=applied.promotion,
            )
        )

        self.clock.debit(mover)

        if is_checkmate:
            self.status = GameStatus.won_by(mover)
            _LOGGER.info("Checkmate: %s", self.get_game_status())
            return MoveResult.CHECKMATE
        if is_stalemate:
            self.status = GameStatus.DRAWN
            _LOGGER.info("Stalemate after %s", self.move_history[-1])
            return MoveResult.STALEMATE
        if is_check:
            return MoveResult.CHECK
        if applied.is_castling:
            return MoveResult.CASTLING
        return MoveResult.VALID

    def undo_last_move(self) -> bool:
        """Take back the last move. ``False`` when there is nothing to undo."""
        if not self.move_history:
            return False

        record = self.move_history.pop()
        self.board[record.from_sq] = record.piece
        self.board[record.to_sq] = record.captured
        if record.is_castling:
            squares = castling_for_king_move(
                record.piece.color, record.from_sq, record.to_sq
            )
            if squares is not None:
                self.board[squares.rook_from] = self.board[squares.rook_to]
                self.board[squares.rook_to] = None

        self.side_to_move = self.side_to_move.opposite
        self.status = GameStatus.IN_PROGRESS
        return True

    def select_position(self, sq: Square) -> bool:
        """Click-to-move: arm a selection, or move the armed piece to *sq*.

        Clicking an own piece (re)arms the selection. Clicking anywhere else
        with a selection armed attempts the move and clears the selection
        whether or not it succeeded.
        """
        if not is_valid_square(sq):
            self.selected = None
            return False

        piece = self.board[sq]
        if (
            piece is not None
            and piece.color == self.side_to_move
            and not self.status.is_terminal
        ):
            self.selected = sq
            return True

        if self.selected is not None:
            result = self.execute_move(self.selected, sq)
            self.selected = None
            return result.is_success

        self.selected = None
        return False

    # ── Clock ────────────────────────────────────────────────────────────

    def start_timer(self) -> None:
        self.clock.start()

    def stop_timer(self) -> None:
        """Pause the clock, charging elapsed time to the side to move."""
        self.clock.stop(self.side_to_move)

    def remaining_time(self, color: Color) -> float:
        """Seconds left for *color* as of the last transition."""
        return self.clock.remaining(color)

    @property
    def timer_active(self) -> bool:
        return self.clock.is_active

    # ── Internal ─────────────────────────────────────────────────────────

    def _update_status(self) -> None:
        if Rules.is_checkmate(self.board, self.side_to_move, self.castling):
            self.status = GameStatus.won_by(self.side_to_move.opposite)
        elif Rules.is_stalemate(self.board, self.side_to_move, self.castling):
            self.status = GameStatus.DRAWN
        else:
            self.status = GameStatus.IN_PROGRESS
