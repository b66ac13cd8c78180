"""RGB color type and interpolation helpers."""

import math
from dataclasses import dataclass
from typing import Iterator


def lerp(start: float, end: float, alpha: float) -> float:
    """Linearly interpolate between two values.

    Args:
        start: Start value
        end: End value
        alpha: Interpolation factor (0.0 to 1.0)

    Returns:
        The interpolated value
    """
    return start + (end - start) * alpha


@dataclass
class Color:
    """RGB color with float components, nominally 0.0 to 1.0.

    Components are not clamped on construction; values outside the nominal
    range are kept as given.
    """
    r: float = 0.0
    g: float = 0.0
    b: float = 0.0

    @classmethod
    def from_rgb255(cls, r: int, g: int, b: int) -> "Color":
        """Build a color from 8-bit channel values."""
        return cls(r / 255.0, g / 255.0, b / 255.0)

    def lerp(self, other: "Color", alpha: float) -> "Color":
        """Componentwise interpolation toward another color."""
        return Color(
            lerp(self.r, other.r, alpha),
            lerp(self.g, other.g, alpha),
            lerp(self.b, other.b, alpha),
        )

    def to_rgb255(self) -> tuple[int, int, int]:
        """Convert to 8-bit channels for display.

        Components are clamped to 0..255; non-finite ones become 0.
        """
        return tuple(
            max(0, min(255, int(round(c * 255.0)))) if math.isfinite(c) else 0
            for c in self
        )  # type: ignore[return-value]

    def __iter__(self) -> Iterator[float]:
        yield self.r
        yield self.g
        yield self.b

