"""Tests for BoardSession interaction handling."""

from __future__ import annotations

from boardplay.core.enums import Color, PieceType
from boardplay.core.errors import (
    AmbiguousInput,
    IllegalMove,
    InvalidPosition,
    PositionEditFailed,
    VariationRejected,
)
from boardplay.core.move import Move
from boardplay.core.rules import STARTING_FEN
from boardplay.core.types import Square
from boardplay.editor.service import free_move
from boardplay.game.interfaces import ErrorCallback, IPositionEditor, PositionCallback
from boardplay.game.session import ARROW_BRUSH, BEST_ARROW_BRUSH, BoardSession
from boardplay.game.settings import BoardSettings
from boardplay.game.tree import DrawShape, GameTree

WHITE_PROMO = "8/4P3/8/8/8/8/k7/4K3 w - - 0 1"
CASTLE_FEN = "r3k2r/pppppppp/8/8/8/8/PPPPPPPP/R3K2R w KQkq - 0 1"
EDITED = "rnbqkbnr/pppppppp/8/4P3/8/8/PPPP1PPP/RNBQKBNR w KQkq - 0 1"


class _SyncEditor(IPositionEditor):
    """Runs the free-edit service inline instead of on a worker thread."""

    def __init__(self) -> None:
        self.requests: list[tuple[str, Square, Square]] = []

    def make_move(
        self,
        fen: str,
        from_sq: Square,
        to_sq: Square,
        *,
        on_done: PositionCallback,
        on_error: ErrorCallback,
    ) -> None:
        self.requests.append((fen, from_sq, to_sq))
        try:
            result = free_move(fen, from_sq, to_sq)
        except InvalidPosition as exc:
            on_error(str(exc))
            return
        on_done(result)


class _DeferredEditor(IPositionEditor):
    """Holds callbacks until the test releases them."""

    def __init__(self) -> None:
        self.pending: list[tuple[str, PositionCallback]] = []

    def make_move(
        self,
        fen: str,
        from_sq: Square,
        to_sq: Square,
        *,
        on_done: PositionCallback,
        on_error: ErrorCallback,
    ) -> None:
        del on_error
        self.pending.append((free_move(fen, from_sq, to_sq), on_done))

    def release(self) -> None:
        for fen, on_done in self.pending:
            on_done(fen)
        self.pending.clear()


def _session(fen: str | None = None, **settings: bool) -> BoardSession:
    return BoardSession(GameTree(fen), settings=BoardSettings(**settings))


class TestDrop:
    def test_legal_drop_plays_move(self) -> None:
        session = _session()
        assert session.drop("e2", "e4")
        assert session.tree.current.san == "e4"
        assert session.error is None

    def test_king_on_rook_castles(self) -> None:
        session = _session(CASTLE_FEN)
        assert session.drop("e1", "h1")
        assert session.tree.current.move == Move("e1", "g1")
        assert session.tree.current.san == "O-O"

    def test_illegal_drop_reports_error(self) -> None:
        session = _session()
        assert not session.drop("e2", "e5")
        assert isinstance(session.error, IllegalMove)
        assert session.tree.root.children == []

    def test_error_clears_on_next_action(self) -> None:
        session = _session()
        session.drop("e2", "e5")
        session.drop("e2", "e4")
        assert session.error is None

    def test_view_only_ignores_drops(self) -> None:
        session = BoardSession(view_only=True)
        assert not session.drop("e2", "e4")
        assert session.tree.root.children == []
        assert session.destinations() == {}

    def test_variation_rejected_when_disabled(self) -> None:
        session = BoardSession(GameTree(disable_variations=True))
        session.drop("e2", "e4")
        session.tree.go_previous()
        assert session.destinations() == {}
        assert not session.drop("d2", "d4")
        assert isinstance(session.error, VariationRejected)
        assert len(session.tree.root.children) == 1


class TestPromotion:
    def test_auto_promote_to_queen(self) -> None:
        session = _session(WHITE_PROMO)
        assert session.drop("e7", "e8")
        assert session.tree.current.san == "e8=Q"

    def test_ctrl_drop_opens_chooser(self) -> None:
        session = _session(WHITE_PROMO)
        assert not session.drop("e7", "e8", ctrl=True)
        assert session.promotion.is_awaiting
        assert session.tree.root.children == []

    def test_manual_promotion_commits_selection(self) -> None:
        session = _session(WHITE_PROMO, auto_promote=False)
        session.drop("e7", "e8")
        snapshot = session.snapshot()
        assert snapshot.pending_promotion is not None
        assert snapshot.pending_promotion.to_sq == "e8"
        assert snapshot.promotion_choices[0] == PieceType.QUEEN

        assert session.select_promotion(PieceType.KNIGHT)
        assert session.tree.current.move == Move("e7", "e8", PieceType.KNIGHT)
        assert session.snapshot().pending_promotion is None

    def test_cancel_plays_nothing(self) -> None:
        session = _session(WHITE_PROMO, auto_promote=False)
        session.drop("e7", "e8")
        session.cancel_promotion()
        assert not session.promotion.is_awaiting
        assert session.tree.root.children == []

    def test_typed_promotion_without_piece_waits(self) -> None:
        session = _session(WHITE_PROMO, auto_promote=False)
        assert not session.submit_text("e8")
        assert session.promotion.is_awaiting
        assert session.input_error is None
        session.select_promotion(PieceType.ROOK)
        assert session.tree.current.san == "e8=R"


class TestSubmitText:
    def test_san_move(self) -> None:
        session = _session()
        assert session.submit_text("Nf3")
        assert session.tree.current.move == Move("g1", "f3")

    def test_unknown_text_sets_input_error(self) -> None:
        session = _session()
        assert not session.submit_text("z9z9")
        assert isinstance(session.input_error, AmbiguousInput)
        assert session.input_error.text == "z9z9"
        assert session.tree.root.children == []

    def test_blank_text_is_ignored(self) -> None:
        session = _session()
        assert not session.submit_text("   ")
        assert session.input_error is None

    def test_input_error_clears_on_success(self) -> None:
        session = _session()
        session.submit_text("z9z9")
        session.submit_text("e4")
        assert session.input_error is None


class TestEditing:
    def test_edit_moves_piece_without_new_node(self) -> None:
        editor = _SyncEditor()
        session = BoardSession(editor=editor)
        assert session.toggle_editing_mode()
        assert session.destinations() == {}
        assert session.drop("e2", "e5")
        assert editor.requests == [(STARTING_FEN, "e2", "e5")]
        assert session.tree.root.fen == EDITED
        assert session.tree.root.children == []
        assert session.dirty

    def test_edit_failure_reports_error(self) -> None:
        session = BoardSession(editor=_SyncEditor())
        session.toggle_editing_mode()
        session.drop("e4", "e5")
        assert isinstance(session.error, PositionEditFailed)
        assert session.tree.root.fen == STARTING_FEN

    def test_edit_without_editor(self) -> None:
        session = BoardSession()
        session.toggle_editing_mode()
        assert not session.drop("e2", "e4")
        assert isinstance(session.error, PositionEditFailed)

    def test_late_result_lands_on_current_node(self) -> None:
        editor = _DeferredEditor()
        session = BoardSession(editor=editor)
        session.drop("e2", "e4")
        session.tree.go_previous()
        session.toggle_editing_mode()
        session.drop("g1", "f3")
        session.tree.go_next()
        editor.release()
        assert session.tree.root.fen == STARTING_FEN
        assert session.tree.current.san == "e4"
        assert session.tree.current.fen == free_move(STARTING_FEN, "g1", "f3")

    def test_toggle_unavailable_without_variations(self) -> None:
        session = BoardSession(GameTree(disable_variations=True))
        assert not session.toggle_editing_mode()
        assert not session.editing

    def test_toggle_cancels_pending_promotion(self) -> None:
        session = _session(WHITE_PROMO, auto_promote=False)
        session.drop("e7", "e8")
        session.toggle_editing_mode()
        assert not session.promotion.is_awaiting


class TestShapes:
    def test_arrows_come_first(self) -> None:
        session = BoardSession()
        session.set_shapes([DrawShape("e4")])
        session.set_arrows(["e2e4", "d2d4"])
        shapes = session.shapes()
        assert shapes[0] == DrawShape("e2", "e4", BEST_ARROW_BRUSH)
        assert shapes[1] == DrawShape("d2", "d4", ARROW_BRUSH)
        assert shapes[2] == DrawShape("e4")

    def test_malformed_arrow_is_skipped(self) -> None:
        session = BoardSession()
        session.set_arrows(["zz", "g1f3"])
        assert session.shapes() == (DrawShape("g1", "f3", ARROW_BRUSH),)

    def test_arrows_hidden_by_setting(self) -> None:
        session = _session(show_arrows=False)
        session.set_arrows(["e2e4"])
        assert session.shapes() == ()


class TestSnapshot:
    def test_initial_snapshot(self) -> None:
        snap = BoardSession().snapshot()
        assert snap.fen == STARTING_FEN
        assert snap.turn == Color.WHITE
        assert snap.orientation == Color.WHITE
        assert snap.check is False
        assert snap.last_move is None
        assert snap.material.diff == 0
        assert len(snap.destinations) == 10
        assert snap.needs_save is False
        assert snap.position_error is None
        assert snap.editing is False

    def test_after_move(self) -> None:
        session = BoardSession()
        session.drop("e2", "e4")
        snap = session.snapshot()
        assert snap.turn == Color.BLACK
        assert snap.last_move == ("e2", "e4")
        assert snap.needs_save is True

    def test_auto_save_never_needs_save(self) -> None:
        session = _session(auto_save=True)
        session.drop("e2", "e4")
        assert session.snapshot().needs_save is False

    def test_mark_saved(self) -> None:
        session = BoardSession()
        session.drop("e2", "e4")
        session.mark_saved()
        assert not session.snapshot().needs_save

    def test_fixed_side_overrides_orientation(self) -> None:
        session = BoardSession(side=Color.BLACK)
        assert session.snapshot().orientation == Color.BLACK
        session.toggle_orientation()
        assert session.snapshot().orientation == Color.BLACK

    def test_toggle_orientation(self) -> None:
        session = BoardSession()
        assert session.toggle_orientation() == Color.BLACK
        assert session.snapshot().orientation == Color.BLACK

    def test_unparsable_position_is_reported(self) -> None:
        session = BoardSession()
        session.tree.current.fen = "garbage"
        snap = session.snapshot()
        assert isinstance(snap.position_error, InvalidPosition)
        assert snap.turn is None
        assert snap.destinations == {}

    def test_settings_swap(self) -> None:
        session = BoardSession()
        session.update_settings(session.settings.with_changes(move_input=True))
        assert session.snapshot().show_move_input is True
