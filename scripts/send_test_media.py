#!/usr/bin/env python3
"""Send test media/audio messages to a running Album Visualizer.

Start the visualizer first:
    python -m album_visualizer.main

Then run this script and watch the background fade between thumbnail
colors while the bass pulse brightens it.
"""

import math
import sys
import time

from album_visualizer import config

try:
    from pythonosc import udp_client
except ImportError:
    print("ERROR: python-osc not installed. Run: pip install python-osc")
    sys.exit(1)


# Thumbnail colors to cycle through (0-255)
TEST_COLORS = [
    (200, 40, 40),
    (40, 160, 220),
    (240, 200, 60),
    (30, 30, 30),
]

BEATS_PER_SECOND = 2.0
SECONDS_PER_COLOR = 4.0
SEND_RATE = 60  # Messages per second


def send_test_media(host: str = config.OSC_HOST, port: int = config.OSC_PORT) -> None:
    """Cycle through the test colors with a synthetic bass pulse."""
    print(f"Album Visualizer test sender")
    print(f"=" * 50)
    print(f"Target: {host}:{port}")
    print()

    client = udp_client.SimpleUDPClient(host, port)
    start = time.monotonic()

    for r, g, b in TEST_COLORS:
        print(f"  /media/thumbnail {r} {g} {b}")
        client.send_message("/media/thumbnail", [r, g, b])

        color_start = time.monotonic()
        while time.monotonic() - color_start < SECONDS_PER_COLOR:
            t = time.monotonic() - start
            # Decaying kick at each beat
            phase = (t * BEATS_PER_SECOND) % 1.0
            bass = math.exp(-phase * 6.0) * 1.5
            client.send_message("/audio/bass", [float(bass)])
            time.sleep(1.0 / SEND_RATE)

    client.send_message("/audio/bass", [0.0])
    print("\nDone. The background should have faded through each color.")


if __name__ == "__main__":
    send_test_media()
