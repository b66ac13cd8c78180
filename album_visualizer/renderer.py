"""PyGame-based preview window for the visualizer."""

from typing import Optional

try:
    import pygame
    HAS_PYGAME = True
except ImportError:
    HAS_PYGAME = False
    pygame = None  # type: ignore

from . import config
from .color import Color
from .host import ScriptHost


def band_bar_heights(average, max_height: int) -> list[int]:
    """Pixel heights for the band bars; amplitudes are clamped to 0..1."""
    return [int(max(0.0, min(float(v), 1.0)) * max_height) for v in average]


class Renderer:
    """Preview window: the script's clear color with the audio bands on top.

    `run()` owns the frame loop and drives `host.tick` with the measured
    frame time, so the window is the host's frame clock.
    """

    def __init__(self, host: ScriptHost, fps: int = config.FPS, show_bars: bool = True):
        if not HAS_PYGAME:
            raise ImportError(
                "pygame is required for visualization. "
                "Install with: pip install pygame"
            )

        self.host = host
        self.fps = fps
        self.show_bars = show_bars
        self.running = False
        self.screen: Optional[pygame.Surface] = None
        self.font_small: Optional[pygame.font.Font] = None

    def open(self) -> None:
        """Create the window."""
        pygame.display.init()
        pygame.font.init()
        self.screen = pygame.display.set_mode((config.WINDOW_WIDTH, config.WINDOW_HEIGHT))
        pygame.display.set_caption(config.WINDOW_TITLE)
        self.font_small = pygame.font.Font(None, 18)

    def close(self) -> None:
        self.running = False
        self.screen = None
        pygame.quit()

    def run(self) -> None:
        """Tick the host and draw until the window closes or `running` clears."""
        clock = pygame.time.Clock()
        self.running = True
        while self.running:
            dt = clock.tick(self.fps) / 1000.0
            self._process_events()
            if self.running:
                self.render(self.host.tick(dt))

    def _process_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                action = self._key_actions().get(event.key)
                if action is not None:
                    action()

    def _key_actions(self) -> dict:
        return {
            pygame.K_ESCAPE: self._quit,
            pygame.K_b: self._toggle_bars,
        }

    def _quit(self) -> None:
        self.running = False

    def _toggle_bars(self) -> None:
        self.show_bars = not self.show_bars

    def render(self, color: Color) -> None:
        """Render one frame with the given clear color."""
        if not self.screen:
            return

        self.screen.fill(color.to_rgb255())

        if self.show_bars:
            self._draw_bars()
        self._draw_readout(color, 10, 10)

        pygame.display.flip()

    def _draw_bars(self) -> None:
        """Draw one translucent bar per audio band along the bottom."""
        buffer = self.host.audio_buffer
        if buffer is None or len(buffer) == 0:
            return

        width = config.WINDOW_WIDTH - 2 * config.BAR_MARGIN
        bar_width = width / len(buffer)
        bottom = config.WINDOW_HEIGHT - config.BAR_MARGIN

        surface = pygame.Surface(
            (config.WINDOW_WIDTH, config.WINDOW_HEIGHT), pygame.SRCALPHA
        )
        heights = band_bar_heights(buffer.average, config.BAR_AREA_HEIGHT)
        for i, height in enumerate(heights):
            base = config.COLOR_BAR_BASS if i == config.BASS_BAND_INDEX else config.COLOR_BAR
            rect = pygame.Rect(
                config.BAR_MARGIN + i * bar_width,
                bottom - height,
                max(1, bar_width - config.BAR_GAP),
                height,
            )
            pygame.draw.rect(surface, (*base, config.BAR_ALPHA), rect, border_radius=2)
        self.screen.blit(surface, (0, 0))

    def _draw_readout(self, color: Color, x: int, y: int) -> None:
        """Draw the current output color values."""
        if not self.font_small:
            return

        r, g, b = color.to_rgb255()
        text = f"rgb({r}, {g}, {b})  frame {self.host.frame_count}"
        shadow = self.font_small.render(text, True, config.COLOR_TEXT_SHADOW)
        label = self.font_small.render(text, True, config.COLOR_TEXT)
        self.screen.blit(shadow, (x + 1, y + 1))
        self.screen.blit(label, (x, y))
