"""Game tree — nodes, headers and the canonical mutation API.

The tree is owned top-down: a node owns its children, and the parent link
is a weak back-reference used for navigation only.  Every mutation targets
the node selected by the current path.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field, replace
from typing import Any

from boardplay.core.enums import Color, GameResult
from boardplay.core.errors import VariationRejected
from boardplay.core.move import Move
from boardplay.core.rules import STARTING_FEN, Rules
from boardplay.core.types import Square

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DrawShape:
    """Annotation drawn over the board: an arrow, or a circled square."""

    orig: Square
    dest: Square | None = None
    brush: str = "green"

    @property
    def is_arrow(self) -> bool:
        return self.dest is not None and self.dest != self.orig


@dataclass(frozen=True, slots=True)
class GameHeaders:
    """Game metadata.  Replaced wholesale, never edited in place."""

    result: GameResult = GameResult.IN_PROGRESS
    orientation: Color = Color.WHITE
    white: str = "?"
    black: str = "?"
    event: str = "?"
    site: str = "?"
    date: str = "????.??.??"
    fen: str | None = None

    def with_changes(self, **changes: Any) -> GameHeaders:
        return replace(self, **changes)


@dataclass(eq=False)
class GameNode:
    """One position in the tree and the move that led to it."""

    fen: str
    move: Move | None = None
    san: str | None = None
    children: list[GameNode] = field(default_factory=list)
    shapes: list[DrawShape] = field(default_factory=list)
    score: int | None = None
    _parent: weakref.ref[GameNode] | None = field(
        default=None, init=False, repr=False
    )

    @property
    def parent(self) -> GameNode | None:
        return self._parent() if self._parent is not None else None

    @property
    def is_root(self) -> bool:
        return self._parent is None

    @property
    def is_leaf(self) -> bool:
        return not self.children

    @property
    def depth(self) -> int:
        """Number of moves between the root and this node."""
        depth = 0
        node = self.parent
        while node is not None:
            depth += 1
            node = node.parent
        return depth

    def add_child(self, child: GameNode) -> int:
        """Attach *child* as the last variation and return its index."""
        child._parent = weakref.ref(self)
        self.children.append(child)
        return len(self.children) - 1

    def find_child(self, move: Move, fen: str | None = None) -> int | None:
        """Index of the child reached by *move*, optionally with position *fen*."""
        for index, child in enumerate(self.children):
            if child.move == move and (fen is None or child.fen == fen):
                return index
        return None


# ── Event definitions ────────────────────────────────────────────────────────

NodeCallback = Callable[[GameNode], None]
HeadersCallback = Callable[[GameHeaders], None]


@dataclass
class TreeEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[NodeCallback] = field(default_factory=list)
    on_position_changed: list[NodeCallback] = field(default_factory=list)
    on_headers_changed: list[HeadersCallback] = field(default_factory=list)


# ── Tree ─────────────────────────────────────────────────────────────────────


class GameTree:
    """Owns the nodes, the headers and the current-node pointer.

    The pointer is a path of child indices from the root; navigation only
    rewrites the path and never changes the shape of the tree.
    """

    __slots__ = (
        "_root",
        "_path",
        "_headers",
        "_disable_variations",
        "events",
    )

    def __init__(
        self,
        fen: str | None = None,
        *,
        headers: GameHeaders | None = None,
        disable_variations: bool = False,
    ) -> None:
        start = Rules.validate(fen) if fen is not None else STARTING_FEN
        self._root = GameNode(start)
        self._path: list[int] = []
        self._headers = headers or GameHeaders(fen=fen)
        self._disable_variations = disable_variations
        self.events = TreeEvents()
        self._sync_result()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def root(self) -> GameNode:
        return self._root

    @property
    def current(self) -> GameNode:
        return self.node_at(self._path)

    @property
    def path(self) -> tuple[int, ...]:
        return tuple(self._path)

    @property
    def headers(self) -> GameHeaders:
        return self._headers

    @property
    def disable_variations(self) -> bool:
        return self._disable_variations

    def node_at(self, path: Iterable[int]) -> GameNode:
        node = self._root
        for index in path:
            node = node.children[index]
        return node

    def main_line(self) -> list[GameNode]:
        """Root plus every first child down to the end of the main line."""
        nodes = [self._root]
        while nodes[-1].children:
            nodes.append(nodes[-1].children[0])
        return nodes

    def variations(self) -> list[GameNode]:
        """The current node and its siblings, in preference order."""
        parent = self.current.parent
        return list(parent.children) if parent is not None else [self._root]

    # ── Mutations ────────────────────────────────────────────────────────

    def apply_move(self, move: Move) -> GameNode:
        """Play *move* from the current node and make the result current.

        The rule engine always builds the next position.  A child with the
        same move and the same resulting position is re-entered instead of
        duplicated.

        Raises:
            VariationRejected: variations are disabled and the current node
                already has a continuation.
            IllegalMove: the rule engine rejected the move.
        """
        node = self.current
        if self._disable_variations and node.children:
            raise VariationRejected(
                f"Variations are disabled; {move.uci} would branch the game"
            )

        fen_after, san = Rules.make_move(node.fen, move)
        index = node.find_child(move, fen_after)
        if index is not None:
            _LOGGER.debug("Re-entering existing line %s", move.uci)
            child = node.children[index]
        else:
            child = GameNode(fen_after, move, san)
            index = node.add_child(child)
            _LOGGER.debug("Added %s as variation %d", san, index)

        self._path.append(index)
        self._sync_result()
        self._emit_move(child)
        return child

    def set_position(self, fen: str) -> GameNode:
        """Overwrite the current node's position in place (free-edit).

        Raises:
            InvalidPosition: the rule engine rejected *fen*; nothing changes.
        """
        validated = Rules.validate(fen)
        node = self.current
        node.fen = validated
        _LOGGER.debug("Position set to %s", validated)
        self._enter_current()
        return node

    def set_headers(self, headers: GameHeaders) -> None:
        self._headers = headers
        for cb in self.events.on_headers_changed:
            cb(headers)

    def set_shapes(self, shapes: Sequence[DrawShape]) -> None:
        self.current.shapes = list(shapes)

    def set_score(self, score: int | None) -> None:
        self.current.score = score

    def toggle_orientation(self) -> Color:
        orientation = self._headers.orientation.opposite
        self.set_headers(self._headers.with_changes(orientation=orientation))
        return orientation

    # ── Navigation ───────────────────────────────────────────────────────

    def go_next(self) -> bool:
        if not self.current.children:
            return False
        self._path.append(0)
        self._enter_current()
        return True

    def go_previous(self) -> bool:
        if not self._path:
            return False
        self._path.pop()
        self._enter_current()
        return True

    def go_to_start(self) -> bool:
        if not self._path:
            return False
        self._path.clear()
        self._enter_current()
        return True

    def go_to_end(self) -> bool:
        node = self.current
        if not node.children:
            return False
        while node.children:
            self._path.append(0)
            node = node.children[0]
        self._enter_current()
        return True

    def go_to(self, path: Sequence[int]) -> bool:
        """Jump to the node at *path*; unknown paths leave the pointer alone."""
        if any(index < 0 for index in path):
            return False
        try:
            self.node_at(path)
        except IndexError:
            return False
        self._path = list(path)
        self._enter_current()
        return True

    # ── Internal helpers ─────────────────────────────────────────────────

    def _sync_result(self) -> None:
        """Record the result once when the current position ends the game."""
        if self._headers.result != GameResult.IN_PROGRESS:
            return
        state = Rules.terminal_state(self.current.fen)
        if state.is_terminal:
            _LOGGER.debug("Game over: %s", state.result)
            self.set_headers(self._headers.with_changes(result=state.result))

    def _emit_move(self, node: GameNode) -> None:
        for cb in self.events.on_move:
            cb(node)

    def _enter_current(self) -> None:
        """The pointer landed on a node: settle the result, then notify."""
        self._sync_result()
        node = self.current
        for cb in self.events.on_position_changed:
            cb(node)
