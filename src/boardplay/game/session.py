"""BoardSession — turns raw board interactions into game-tree mutations.

Consumes drops, keyboard text, shape edits and mode toggles; produces a
read-only :class:`BoardSnapshot` for whatever renders the board.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from boardplay.core.destinations import Destinations, compute_destinations, resolve_drop
from boardplay.core.enums import Color, PieceType
from boardplay.core.errors import (
    AmbiguousInput,
    BoardPlayError,
    InvalidPosition,
    PositionEditFailed,
)
from boardplay.core.material import MaterialDiff, material_diff
from boardplay.core.move import Move
from boardplay.core.notation import move_to_squares, parse_keyboard_move, parse_uci
from boardplay.core.rules import Rules
from boardplay.core.types import Square
from boardplay.game.interfaces import IPositionEditor
from boardplay.game.promotion import PendingMove, PromotionResolver
from boardplay.game.settings import BoardSettings
from boardplay.game.tree import DrawShape, GameHeaders, GameTree

_LOGGER = logging.getLogger(__name__)

BEST_ARROW_BRUSH = "paleBlue"
ARROW_BRUSH = "paleGrey"


@dataclass(frozen=True, slots=True)
class BoardSnapshot:
    """Everything the board widget needs to draw one frame."""

    fen: str
    turn: Color | None
    orientation: Color
    destinations: Destinations
    show_dests: bool
    check: bool
    last_move: tuple[Square, Square] | None
    shapes: tuple[DrawShape, ...]
    material: MaterialDiff
    headers: GameHeaders
    pending_promotion: PendingMove | None
    promotion_choices: tuple[PieceType, ...]
    editing: bool
    view_only: bool
    show_move_input: bool
    needs_save: bool
    position_error: InvalidPosition | None
    error: BoardPlayError | None
    input_error: AmbiguousInput | None


class BoardSession:
    """Reconciles user intent, chess rules and tree topology.

    Single-threaded: every method runs on the UI thread.  The only deferred
    work is the free-edit editor, whose result lands on whatever node is
    current when it arrives.
    """

    __slots__ = (
        "_tree",
        "_settings",
        "_editor",
        "_resolver",
        "_editing",
        "_view_only",
        "_side",
        "_arrows",
        "_dirty",
        "_error",
        "_input_error",
    )

    def __init__(
        self,
        tree: GameTree | None = None,
        *,
        settings: BoardSettings | None = None,
        editor: IPositionEditor | None = None,
        view_only: bool = False,
        side: Color | None = None,
    ) -> None:
        self._tree = tree if tree is not None else GameTree()
        self._settings = settings or BoardSettings()
        self._editor = editor
        self._resolver = PromotionResolver()
        self._editing = False
        self._view_only = view_only
        self._side = side
        self._arrows: list[str] = []
        self._dirty = False
        self._error: BoardPlayError | None = None
        self._input_error: AmbiguousInput | None = None

        self._tree.events.on_move.append(lambda _node: self._mark_dirty())
        self._tree.events.on_headers_changed.append(lambda _h: self._mark_dirty())

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def tree(self) -> GameTree:
        return self._tree

    @property
    def settings(self) -> BoardSettings:
        return self._settings

    @property
    def promotion(self) -> PromotionResolver:
        return self._resolver

    @property
    def editing(self) -> bool:
        return self._editing

    @property
    def dirty(self) -> bool:
        return self._dirty

    @property
    def error(self) -> BoardPlayError | None:
        return self._error

    @property
    def input_error(self) -> AmbiguousInput | None:
        return self._input_error

    def update_settings(self, settings: BoardSettings) -> None:
        self._settings = settings

    def set_editor(self, editor: IPositionEditor | None) -> None:
        self._editor = editor

    def mark_saved(self) -> None:
        self._dirty = False

    # ── Interaction boundary ─────────────────────────────────────────────

    def drop(self, orig: Square, dest: Square, *, ctrl: bool = False) -> bool:
        """Handle a piece dragged from *orig* to *dest*.

        *ctrl* forces the promotion chooser even with auto-promotion on.
        Returns ``True`` once something was applied or an edit was started.
        """
        self._error = None
        if self._view_only:
            return False

        fen = self._tree.current.fen
        if self._editing:
            return self._request_edit(fen, orig, dest)

        try:
            target = resolve_drop(fen, orig, dest)
            move = self._resolver.submit(
                fen, Move(orig, target), self._settings, force_dialog=ctrl
            )
        except BoardPlayError as exc:
            self._report(exc)
            return False
        if move is None:
            return False
        return self._commit(move)

    def submit_text(self, text: str) -> bool:
        """Play the move typed into the move-input box."""
        self._input_error = None
        self._error = None
        cleaned = text.strip()
        if not cleaned or self._view_only or self._editing:
            return False

        fen = self._tree.current.fen
        move = parse_keyboard_move(cleaned, fen)
        if move is None:
            self._input_error = AmbiguousInput(cleaned)
            _LOGGER.info("Rejected move input %r", cleaned)
            return False

        routed = self._resolver.submit(fen, move, self._settings)
        if routed is None:
            return False
        return self._commit(routed)

    def select_promotion(self, piece_type: PieceType) -> bool:
        return self._commit(self._resolver.select(piece_type))

    def cancel_promotion(self) -> None:
        self._resolver.cancel()

    def set_shapes(self, shapes: Sequence[DrawShape]) -> None:
        self._tree.set_shapes(shapes)

    def set_arrows(self, arrows: Sequence[str]) -> None:
        """Engine suggestions as UCI codes, best line first."""
        self._arrows = list(arrows)

    def toggle_orientation(self) -> Color:
        return self._tree.toggle_orientation()

    def toggle_editing_mode(self) -> bool:
        """Enter or leave free-edit mode; unavailable when variations are off."""
        if self._tree.disable_variations:
            return self._editing
        self._editing = not self._editing
        self._resolver.cancel()
        _LOGGER.debug("Editing mode %s", "on" if self._editing else "off")
        return self._editing

    # ── Render boundary ──────────────────────────────────────────────────

    def destinations(self) -> Destinations:
        if self._editing or self._view_only:
            return {}
        node = self._tree.current
        if self._tree.disable_variations and node.children:
            return {}
        return compute_destinations(node.fen, self._settings.forced_en_passant)

    def shapes(self) -> tuple[DrawShape, ...]:
        shapes: list[DrawShape] = []
        if self._settings.show_arrows:
            for i, code in enumerate(self._arrows):
                try:
                    move = parse_uci(code)
                except ValueError:
                    _LOGGER.warning("Skipping malformed arrow %r", code)
                    continue
                brush = BEST_ARROW_BRUSH if i == 0 else ARROW_BRUSH
                shapes.append(DrawShape(move.from_sq, move.to_sq, brush))
        shapes.extend(self._tree.current.shapes)
        return tuple(shapes)

    def snapshot(self) -> BoardSnapshot:
        node = self._tree.current
        headers = self._tree.headers
        try:
            turn: Color | None = Rules.side_to_move(node.fen)
            check = Rules.is_check(node.fen)
            position_error = None
        except InvalidPosition as exc:
            turn, check, position_error = None, False, exc

        return BoardSnapshot(
            fen=node.fen,
            turn=turn,
            orientation=self._side if self._side is not None else headers.orientation,
            destinations=self.destinations() if position_error is None else {},
            show_dests=self._settings.show_dests,
            check=check,
            last_move=move_to_squares(node.move),
            shapes=self.shapes(),
            material=material_diff(node.fen),
            headers=headers,
            pending_promotion=self._resolver.pending,
            promotion_choices=self._resolver.choices,
            editing=self._editing,
            view_only=self._view_only,
            show_move_input=self._settings.move_input,
            needs_save=self._dirty and not self._settings.auto_save,
            position_error=position_error,
            error=self._error,
            input_error=self._input_error,
        )

    # ── Internal helpers ─────────────────────────────────────────────────

    def _commit(self, move: Move) -> bool:
        try:
            self._tree.apply_move(move)
        except BoardPlayError as exc:
            self._report(exc)
            return False
        return True

    def _request_edit(self, fen: str, orig: Square, dest: Square) -> bool:
        if self._editor is None:
            self._report(PositionEditFailed("No position editor is available"))
            return False
        self._editor.make_move(
            fen,
            orig,
            dest,
            on_done=self._on_edit_done,
            on_error=self._on_edit_failed,
        )
        return True

    def _on_edit_done(self, fen: str) -> None:
        try:
            self._tree.set_position(fen)
        except InvalidPosition as exc:
            self._report(exc)
            return
        self._mark_dirty()

    def _on_edit_failed(self, message: str) -> None:
        self._report(PositionEditFailed(message))

    def _mark_dirty(self) -> None:
        self._dirty = True

    def _report(self, exc: BoardPlayError) -> None:
        self._error = exc
        _LOGGER.warning("%s: %s", type(exc).__name__, exc)
