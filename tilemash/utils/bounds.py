"""Bounding rectangles and depth ordering for placed elements.

These helpers are the single place where an empty placement set is detected;
both compositors rely on them raising :class:`~tilemash.errors.EmptyInputError`.
"""

from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple, TypeVar

from tilemash.components import GridPosition, Offset, PixelBuffer
from tilemash.errors import EmptyInputError
from tilemash.utils.addressing import grid_to_cell

T = TypeVar("T")


@dataclass(frozen=True)
class Bounds:
    """Inclusive integer bounding box over grid positions."""

    min_x: int
    max_x: int
    min_y: int
    max_y: int

    @property
    def span_x(self) -> int:
        return self.max_x - self.min_x + 1

    @property
    def span_y(self) -> int:
        return self.max_y - self.min_y + 1

    def cell(self, position: GridPosition) -> Tuple[int, int]:
        """Output cell (column, row) of ``position``; row 0 is the top."""
        return grid_to_cell(position.x, position.y, self.min_x, self.max_y)


def grid_bounds(positions: Iterable[GridPosition]) -> Bounds:
    """Return the tightest box containing every position.

    Raises:
        EmptyInputError: If ``positions`` is empty.
    """
    positions = list(positions)
    if not positions:
        raise EmptyInputError("No tiles were provided")
    xs = [p.x for p in positions]
    ys = [p.y for p in positions]
    return Bounds(min_x=min(xs), max_x=max(xs), min_y=min(ys), max_y=max(ys))


def layer_extent(layers: Sequence[Tuple[Offset, PixelBuffer]]) -> Tuple[int, int]:
    """Return the (width, height) needed to hold every layer.

    A layer reaches past its offset by its own size, so the extent is the
    maximum of ``offset + size`` rather than of the raw offsets.

    Raises:
        EmptyInputError: If ``layers`` is empty.
    """
    if not layers:
        raise EmptyInputError("No texture handles were provided")
    width = max(offset.x + texture.width for offset, texture in layers)
    height = max(offset.y + texture.height for offset, texture in layers)
    return width, height


def sort_by_depth(layers: Iterable[Tuple[Offset, T]]) -> List[Tuple[Offset, T]]:
    """Stable ascending sort by ``offset.z`` (equal depths keep input order)."""
    return sorted(layers, key=lambda layer: layer[0].z)
