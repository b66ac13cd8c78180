"""OSC receiver for the visualizer.

Listens for media and audio messages and posts them to the script host.

Messages:
- /media/thumbnail r g b  - new thumbnail primary color (0-1 floats or 0-255 ints)
- /audio/bands f...       - band averages, lowest band first
- /audio/bass f           - bass band only
"""

import math
import threading
from typing import Optional

try:
    from pythonosc import dispatcher
    from pythonosc import osc_server
    HAS_OSC = True
except ImportError:
    HAS_OSC = False
    dispatcher = None  # type: ignore
    osc_server = None  # type: ignore

from . import config
from .color import Color
from .host import ScriptHost


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def parse_color(args) -> Optional[Color]:
    """Parse an r, g, b argument list into a Color.

    - Three ints with any channel above 1 are read as 8-bit values.
    - Anything else numeric is read as 0-1 floats (bools count as 0/1).
    - A mix of ints above 1 and floats is ambiguous and rejected.

    Returns None for fewer than three arguments, ambiguous triples, or
    non-finite components.

    Raises:
        ValueError, TypeError: If a component is not numeric
    """
    if len(args) < 3:
        return None
    rgb = args[:3]

    large_ints = [c for c in rgb if _is_int(c) and c > 1]
    if large_ints:
        if not all(_is_int(c) for c in rgb):
            return None
        return Color.from_rgb255(*rgb)

    color = Color(*(float(c) for c in rgb))
    if not all(math.isfinite(c) for c in color):
        return None
    return color


class OscReceiver:
    """Feeds OSC media/audio messages into a ScriptHost.

    The server thread only enqueues on the host; the script sees the
    messages on the next frame tick. Usable as a context manager.
    """

    def __init__(self, host: ScriptHost, port: int = config.OSC_PORT):
        if not HAS_OSC:
            raise ImportError(
                "python-osc is required for OSC communication. "
                "Install with: pip install python-osc"
            )

        self.host = host
        self.port = port
        self.handlers = {
            "/media/thumbnail": self._handle_thumbnail,
            "/audio/bands": self._handle_bands,
            "/audio/bass": self._handle_bass,
        }
        self._server: Optional[osc_server.ThreadingOSCUDPServer] = None
        self._thread: Optional[threading.Thread] = None

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        """Bind the UDP port and serve on a daemon thread."""
        if self._server is not None:
            return

        disp = dispatcher.Dispatcher()
        for address, handler in self.handlers.items():
            disp.map(address, handler)

        self._server = osc_server.ThreadingOSCUDPServer(("0.0.0.0", self.port), disp)
        self._thread = threading.Thread(
            target=self._server.serve_forever,
            name="osc-receiver",
            daemon=True,
        )
        self._thread.start()

    def stop(self) -> None:
        """Shut the server down and release the port."""
        server, thread = self._server, self._thread
        self._server = None
        self._thread = None

        if server is not None:
            server.shutdown()
            server.server_close()
        if thread is not None:
            thread.join(timeout=1.0)

    def __enter__(self) -> "OscReceiver":
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    def _handle_thumbnail(self, address: str, *args) -> None:
        try:
            color = parse_color(args)
        except (TypeError, ValueError):
            return
        if color is None:
            return

        self.host.post_thumbnail(color)
        print(f"Visualizer: Thumbnail color {color.r:.2f} {color.g:.2f} {color.b:.2f}")

    def _handle_bands(self, address: str, *args) -> None:
        if not args:
            return
        try:
            values = [float(v) for v in args]
        except (TypeError, ValueError):
            return
        self.host.post_audio(values)

    def _handle_bass(self, address: str, *args) -> None:
        if not args:
            return
        try:
            value = float(args[0])
        except (TypeError, ValueError):
            return
        self.host.post_band(config.BASS_BAND_INDEX, value)
