"""Skyline bottom-left rectangle packing, as used for texture atlases."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

__all__ = ["MAXVAL", "Heuristic", "Rect", "Packer"]

MAXVAL = 0x7FFFFFFF
"""Largest supported coordinate; also the position given to rects that do not fit."""

_SENTINEL_Y = 1 << 30


class Heuristic(IntEnum):
    """How a position is chosen for each rectangle."""

    SKYLINE_BL_SORT_HEIGHT = 0  # bottom-left: lowest position wins
    SKYLINE_BF_SORT_HEIGHT = 1  # best fit: lowest position, then least waste

    @classmethod
    def default(cls) -> Heuristic:
        return cls.SKYLINE_BL_SORT_HEIGHT


@dataclass
class Rect:
    """A rectangle to place; ``x``, ``y`` and ``was_packed`` are filled in by packing."""

    w: int
    h: int
    id: int = 0
    x: int = 0
    y: int = 0
    was_packed: bool = False


@dataclass
class _Node:
    x: int
    y: int


@dataclass(frozen=True)
class _Position:
    index: int
    x: int
    y: int


class Packer:
    """Packs rectangles into a ``width`` by ``height`` target.

    ``num_nodes`` bounds the number of skyline segments kept; it defaults
    to ``width``, which never runs out. With fewer nodes, widths are
    rounded up so the nodes suffice, unless :meth:`allow_out_of_mem` is
    switched on. Packing may be repeated to add more rectangles.
    """

    def __init__(self, width: int, height: int, num_nodes: int | None = None) -> None:
        if width < 0 or height < 0:
            raise ValueError(f"negative target size: {width}x{height}")
        if num_nodes is None:
            num_nodes = max(width, 1)
        if num_nodes < 1:
            raise ValueError(f"num_nodes must be at least 1, not {num_nodes}")
        self.width = width
        self.height = height
        self.num_nodes = num_nodes
        self.heuristic = Heuristic.default()
        self.align = 1
        self._skyline = [_Node(0, 0), _Node(width, _SENTINEL_Y)]
        self.allow_out_of_mem(False)

    def allow_out_of_mem(self, allow: bool) -> None:
        """Choose between exact widths (may run out of nodes) and rounded widths."""
        if allow:
            self.align = 1
        else:
            self.align = max(1, (self.width + self.num_nodes - 1) // self.num_nodes)

    def set_heuristic(self, heuristic: Heuristic | int) -> None:
        """Select the placement heuristic; raises ValueError for an unknown one."""
        self.heuristic = Heuristic(heuristic)

    @property
    def _free_nodes(self) -> int:
        return self.num_nodes + 2 - len(self._skyline)

    def _find_min_y(self, first: int, x0: int, width: int) -> tuple[int, int]:
        """Return the lowest y at which ``width`` fits starting at ``x0``, and the waste."""
        sky = self._skyline
        x1 = x0 + width
        min_y = 0
        waste = 0
        visited = 0
        i = first
        while sky[i].x < x1:
            node, nxt = sky[i], sky[i + 1]
            if node.y > min_y:
                waste += visited * (node.y - min_y)
                min_y = node.y
                visited += nxt.x - x0 if node.x < x0 else nxt.x - node.x
            else:
                under = nxt.x - node.x
                if under + visited > width:
                    under = width - visited
                waste += under * (min_y - node.y)
                visited += under
            i += 1
        return min_y, waste

    def _find_best_pos(self, width: int, height: int) -> _Position | None:
        width = width + self.align - 1
        width -= width % self.align
        if width > self.width or height > self.height:
            return None

        sky = self._skyline
        best: int | None = None
        best_y = _SENTINEL_Y
        best_waste = _SENTINEL_Y
        bottom_left = self.heuristic is Heuristic.SKYLINE_BL_SORT_HEIGHT

        i = 0
        while sky[i].x + width <= self.width:
            y, waste = self._find_min_y(i, sky[i].x, width)
            if bottom_left:
                if y < best_y:
                    best_y, best = y, i
            elif y + height <= self.height and (
                y < best_y or (y == best_y and waste < best_waste)
            ):
                best_y, best_waste, best = y, waste, i
            i += 1

        best_x = 0 if best is None else sky[best].x

        if not bottom_left:
            # Also try placing the right edge against each segment start.
            tail = 0
            while sky[tail].x < width:
                tail += 1
            node = 0
            for tail_node in sky[tail:]:
                xpos = tail_node.x - width
                while sky[node + 1].x <= xpos:
                    node += 1
                y, waste = self._find_min_y(node, xpos, width)
                if y + height <= self.height and y <= best_y and (
                    y < best_y
                    or waste < best_waste
                    or (waste == best_waste and xpos < best_x)
                ):
                    best_x, best_y, best_waste, best = xpos, y, waste, node

        if best is None:
            return None
        return _Position(best, best_x, best_y)

    def _pack_one(self, width: int, height: int) -> tuple[int, int] | None:
        pos = self._find_best_pos(width, height)
        if pos is None or pos.y + height > self.height or self._free_nodes <= 0:
            return None

        sky = self._skyline
        new = _Node(pos.x, pos.y + height)
        start = pos.index + 1 if sky[pos.index].x < pos.x else pos.index
        right = pos.x + width
        end = start
        while end + 1 < len(sky) and sky[end + 1].x <= right:
            end += 1
        cur = sky[end]
        if cur.x < right:
            cur.x = right
        self._skyline = sky[:start] + [new] + sky[end:]
        return pos.x, pos.y

    def pack(self, rects: list[Rect]) -> bool:
        """Place ``rects``, setting their ``x``, ``y`` and ``was_packed``.

        Taller rectangles are placed first; the list itself keeps its order.
        Empty rectangles go to the origin and count as packed. Returns
        whether every rectangle was placed.
        """
        order = sorted(range(len(rects)), key=lambda k: (-rects[k].h, -rects[k].w))
        for k in order:
            rect = rects[k]
            if rect.w == 0 or rect.h == 0:
                rect.x = rect.y = 0
                continue
            spot = self._pack_one(rect.w, rect.h)
            if spot is None:
                rect.x = rect.y = MAXVAL
            else:
                rect.x, rect.y = spot
        for rect in rects:
            rect.was_packed = not (rect.x == MAXVAL and rect.y == MAXVAL)
        return all(rect.was_packed for rect in rects)