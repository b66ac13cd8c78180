"""Minimal host engine that drives a visualizer script.

Owns the audio buffer the script registers and the frame clock, and
serializes everything the script sees: events posted from other threads
(e.g. the OSC receiver) are queued and only delivered on the frame thread,
right before the script's update.
"""

import math
import queue
from typing import Iterable, Optional

from .audio import AudioBuffer, register_audio_buffers
from .color import Color
from .state import FrameContext, MediaThumbnailEvent


class ScriptHost:
    """Runs one script: registration at load, then one update per tick."""

    def __init__(self):
        self.script = None
        self.audio_buffer: Optional[AudioBuffer] = None
        self.last_color = Color()
        self.frame_count = 0
        self._pending: "queue.SimpleQueue[tuple[str, object]]" = queue.SimpleQueue()

    def load(self, script) -> None:
        """Attach a script and let it register its audio buffers."""
        self.script = script
        init = getattr(script, "init", None)
        if init is not None:
            init(self)

    def register_audio_buffers(self, resolution) -> AudioBuffer:
        """Create the audio buffer for the script (called from its init)."""
        self.audio_buffer = register_audio_buffers(resolution)
        return self.audio_buffer

    # -------------------------------------------------------------------------
    # Thread-safe producers
    # -------------------------------------------------------------------------

    def post_thumbnail(self, color: Color) -> None:
        """Queue a thumbnail change; delivered on the next tick."""
        self._pending.put(("thumbnail", color))

    def post_audio(self, values: Iterable[float]) -> None:
        """Queue a full set of band averages; applied on the next tick."""
        self._pending.put(("audio", list(values)))

    def post_band(self, index: int, value: float) -> None:
        """Queue a single band average; applied on the next tick."""
        self._pending.put(("band", (index, value)))

    # -------------------------------------------------------------------------
    # Frame thread
    # -------------------------------------------------------------------------

    def tick(self, frametime: float) -> Color:
        """Deliver pending events, then run the script's update once.

        Args:
            frametime: Seconds since the previous frame

        Returns:
            The color returned by the script

        Raises:
            ValueError: If frametime is negative or not finite
            RuntimeError: If no script is loaded
        """
        if not math.isfinite(frametime) or frametime < 0:
            raise ValueError(f"Invalid frame time: {frametime!r}")
        if self.script is None:
            raise RuntimeError("No script loaded")

        self._drain_pending()

        average = self.audio_buffer.average if self.audio_buffer is not None else ()
        self.last_color = self.script.update(FrameContext(frametime, average))
        self.frame_count += 1
        return self.last_color

    def _drain_pending(self) -> None:
        """Apply queued events in the order they were posted."""
        while True:
            try:
                kind, payload = self._pending.get_nowait()
            except queue.Empty:
                return

            if kind == "thumbnail":
                handler = getattr(self.script, "media_thumbnail_changed", None)
                if handler is not None:
                    handler(MediaThumbnailEvent(primary_color=payload))
            elif kind == "audio":
                if self.audio_buffer is not None:
                    self.audio_buffer.update(payload)
            elif kind == "band":
                if self.audio_buffer is not None:
                    index, value = payload
                    if 0 <= index < len(self.audio_buffer):
                        self.audio_buffer.set_band(index, value)
