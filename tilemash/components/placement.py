"""Placement keys for the two compositors."""

from dataclasses import dataclass


@dataclass(frozen=True)
class GridPosition:
    """Tile cell in tile-map space.

    Attributes:
        x: Column; grows to the right.
        y: Row; grows upward, so the largest ``y`` ends up at the top of the
            composed image.
    """

    x: int
    y: int


@dataclass(frozen=True)
class Offset:
    """Pixel placement of a layer plus its depth.

    Attributes:
        x: Left edge in output pixels (non-negative).
        y: Top edge in output pixels (non-negative).
        z: Depth key. Higher values are drawn later and win on overlap;
            equal values keep their input order.
    """

    x: int
    y: int
    z: int = 0

    def __post_init__(self) -> None:
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Offset must be non-negative, got ({self.x}, {self.y})")
