"""Output-space affine transform applied when a command record is emitted."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PathTransform:
    """Scale, optional Y flip and offset.

    x' = offset_x + scale_x * x
    y' = offset_y + (-scale_y * y if flip_y else scale_y * y)

    Font outlines are y-up while SVG is y-down, so glyph consumers usually
    pass ``flip_y=True`` with an ``offset_y`` at the baseline.
    """

    scale_x: float = 1.0
    scale_y: float = 1.0
    flip_y: bool = False
    offset_x: float = 0.0
    offset_y: float = 0.0

    @classmethod
    def identity(cls) -> PathTransform:
        return cls()

    @property
    def is_identity(self) -> bool:
        return self == PathTransform()

    def apply(self, x: float, y: float) -> tuple[float, float]:
        sy = -self.scale_y if self.flip_y else self.scale_y
        return (self.offset_x + self.scale_x * x, self.offset_y + sy * y)
