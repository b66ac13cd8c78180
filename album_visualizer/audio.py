"""Audio band buffers registered by the visualizer script.

The host analyses the playing audio and writes one average amplitude per
frequency band into the buffer before each frame. Index 0 holds the lowest
frequencies (bass).
"""

import math
from enum import Enum
from typing import Iterable, Optional

import numpy as np


class AudioResolution(Enum):
    """Number of frequency bands a script can request."""
    RESOLUTION_16 = 16
    RESOLUTION_32 = 32
    RESOLUTION_64 = 64


class AudioBuffer:
    """Per-band average amplitudes, refreshed by the host between frames."""

    def __init__(self, resolution: AudioResolution = AudioResolution.RESOLUTION_16):
        """Initialize the buffer with all bands silent.

        Args:
            resolution: Number of frequency bands
        """
        self.resolution = resolution
        self.average = np.zeros(resolution.value, dtype=np.float64)

    def update(self, values: Iterable[float]) -> None:
        """Overwrite the band averages.

        Values beyond the band count are dropped, missing bands are set
        to zero, and non-finite values are stored as zero.

        Args:
            values: New band averages, lowest band first
        """
        bands = np.zeros(self.resolution.value, dtype=np.float64)
        for i, value in enumerate(values):
            if i >= len(bands):
                break
            value = float(value)
            bands[i] = value if math.isfinite(value) else 0.0
        self.average = bands

    def set_band(self, index: int, value: float) -> None:
        """Overwrite a single band, leaving the others untouched."""
        value = float(value)
        self.average[index] = value if math.isfinite(value) else 0.0

    @property
    def bass(self) -> Optional[float]:
        """Raw amplitude of the lowest band, or None if there are no bands."""
        if len(self.average) == 0:
            return None
        return float(self.average[0])

    def __len__(self) -> int:
        return len(self.average)


def register_audio_buffers(resolution) -> AudioBuffer:
    """Create the audio buffer for a requested band count.

    Args:
        resolution: An AudioResolution or its band count (16, 32 or 64)

    Returns:
        A silent AudioBuffer with that many bands

    Raises:
        ValueError: If the band count is not supported
    """
    if not isinstance(resolution, AudioResolution):
        try:
            resolution = AudioResolution(int(resolution))
        except (TypeError, ValueError):
            raise ValueError(
                f"Unsupported audio resolution: {resolution!r} "
                f"(expected one of {[r.value for r in AudioResolution]})"
            ) from None
    return AudioBuffer(resolution)
