"""State and per-call inputs for the visualizer script.

The script keeps no globals: the colors it blends between live in a
ColorState owned by whoever runs the script, and the host hands in the
frame time and audio bands on every update.
"""

from dataclasses import dataclass, field
from typing import Sequence

from .color import Color


@dataclass
class ColorState:
    """Colors the script blends between.

    `current` is only changed by the frame update, `target` only by the
    thumbnail handler. Neither is clamped.
    """
    current: Color = field(default_factory=Color)
    target: Color = field(default_factory=Color)


@dataclass
class FrameContext:
    """Values the host supplies for one frame."""
    frametime: float  # Seconds since the previous frame
    audio_average: Sequence[float] = ()  # Band averages, bass first


@dataclass
class MediaThumbnailEvent:
    """Sent by the host when the playing media's thumbnail changes."""
    primary_color: Color
