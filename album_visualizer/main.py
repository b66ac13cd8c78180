"""Main entry point for the Album Visualizer."""

import argparse
import signal

from . import config
from .audio import AudioResolution
from .host import ScriptHost
from .osc_receiver import OscReceiver
from .smoother import AlbumBassScript


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Album Visualizer - Thumbnail color background with bass pulse"
    )
    parser.add_argument(
        "--port",
        type=int,
        default=config.OSC_PORT,
        help=f"OSC port to listen on (default: {config.OSC_PORT})",
    )
    parser.add_argument(
        "--resolution",
        type=int,
        choices=[r.value for r in AudioResolution],
        default=config.AUDIO_RESOLUTION,
        help=f"Number of audio bands (default: {config.AUDIO_RESOLUTION})",
    )
    parser.add_argument(
        "--smoothing",
        type=float,
        default=config.SMOOTHING_FACTOR,
        help=f"Color smoothing factor per 60fps frame (default: {config.SMOOTHING_FACTOR})",
    )
    parser.add_argument(
        "--bass-intensity",
        type=float,
        default=config.BASS_EFFECT_INTENSITY,
        help=f"Brightening at full bass (default: {config.BASS_EFFECT_INTENSITY})",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=config.FPS,
        help=f"Preview frame rate cap (default: {config.FPS})",
    )
    parser.add_argument(
        "--no-bars",
        action="store_true",
        help="Hide audio band bars (can toggle with 'B' key)",
    )
    return parser


def parse_args(argv=None) -> argparse.Namespace:
    """Parse and range-check the command line; bad values exit with usage."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not 0.0 < args.smoothing <= 1.0:
        parser.error("--smoothing must be in (0, 1]")
    return args


def main() -> None:
    """Entry point for the Album Visualizer CLI."""
    args = parse_args()

    host = ScriptHost()
    host.load(AlbumBassScript(
        smoothing_factor=args.smoothing,
        bass_intensity=args.bass_intensity,
        resolution=args.resolution,
    ))

    from .renderer import Renderer
    renderer = Renderer(host, fps=args.fps, show_bars=not args.no_bars)

    def request_stop(sig, frame):
        renderer.running = False

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, request_stop)

    print(f"Album Visualizer: OSC port {args.port}, {args.resolution} audio bands")
    print("  'B' toggles band bars, ESC quits")

    try:
        with OscReceiver(host, port=args.port):
            renderer.open()
            renderer.run()
    finally:
        renderer.close()
        print("Visualizer stopped.")


if __name__ == "__main__":
    main()
