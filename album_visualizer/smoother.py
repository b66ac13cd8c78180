"""Bass-reactive background color smoothing.

Each frame the current color moves a little closer to the target color
(taken from the playing media's thumbnail), then gets brightened by the
bass amplitude. The brightening is applied to the returned color only and
is recomputed every frame, so it never builds up in the stored state.

The smoothing is frame-rate independent: the per-frame factor is derived
from the elapsed time so that the same wall-clock time always covers the
same fraction of the distance, however many frames it was split into.
"""

from typing import Optional, Sequence

from . import config
from .audio import AudioBuffer
from .color import Color
from .state import ColorState, FrameContext, MediaThumbnailEvent


def smoothing_alpha(
    frametime: float,
    smoothing_factor: float = config.SMOOTHING_FACTOR,
    reference_fps: float = config.REFERENCE_FPS,
) -> float:
    """Interpolation factor for a frame of the given duration.

    Args:
        frametime: Seconds since the previous frame
        smoothing_factor: Fraction covered per reference frame (0.0 to 1.0)
        reference_fps: Frame rate the smoothing factor is tuned for

    Returns:
        0.0 for a zero-length frame, approaching 1.0 for very long ones
    """
    dt_scaled = frametime * reference_fps
    return 1.0 - (1.0 - smoothing_factor) ** dt_scaled


def bass_level(audio_average: Sequence[float]) -> float:
    """Bass amplitude clamped to 0.0..MAX_BASS; a missing sample counts as 0."""
    if len(audio_average) > config.BASS_BAND_INDEX:
        raw = audio_average[config.BASS_BAND_INDEX]
    else:
        raw = None
    return max(0.0, min(float(raw or 0.0), config.MAX_BASS))


def update(
    state: ColorState,
    frame: FrameContext,
    smoothing_factor: float = config.SMOOTHING_FACTOR,
    bass_intensity: float = config.BASS_EFFECT_INTENSITY,
    reference_fps: float = config.REFERENCE_FPS,
) -> Color:
    """Advance the current color one frame and return the color to display.

    Args:
        state: Color state to advance (current is replaced)
        frame: Frame time and audio bands for this frame
        smoothing_factor: Fraction covered per reference frame
        bass_intensity: Brightening at full bass
        reference_fps: Frame rate the smoothing factor is tuned for

    Returns:
        The current color brightened by the bass, each component at most 1.0
    """
    alpha = smoothing_alpha(frame.frametime, smoothing_factor, reference_fps)
    state.current = state.current.lerp(state.target, alpha)

    boost = bass_level(frame.audio_average) * bass_intensity
    return Color(*(min(c + boost, config.MAX_COMPONENT) for c in state.current))


def media_thumbnail_changed(state: ColorState, event: MediaThumbnailEvent) -> None:
    """Make the event's primary color the new target.

    The color is taken as is, without range checks. Blending toward it
    starts on the next update.
    """
    state.target = event.primary_color


class AlbumBassScript:
    """The visualizer script as the host sees it.

    Holds its own ColorState and exposes the callbacks the host calls:
    `init` once at load, `update` every frame and `media_thumbnail_changed`
    whenever the thumbnail changes. The host must not call them
    concurrently.
    """

    def __init__(
        self,
        smoothing_factor: float = config.SMOOTHING_FACTOR,
        bass_intensity: float = config.BASS_EFFECT_INTENSITY,
        reference_fps: float = config.REFERENCE_FPS,
        resolution: int = config.AUDIO_RESOLUTION,
        state: Optional[ColorState] = None,
    ):
        """Initialize the script.

        Args:
            smoothing_factor: Fraction covered per reference frame (0.0 to 1.0)
            bass_intensity: Brightening at full bass
            reference_fps: Frame rate the smoothing factor is tuned for
            resolution: Number of audio bands to register
            state: Initial colors (defaults to black/black)
        """
        self.smoothing_factor = smoothing_factor
        self.bass_intensity = bass_intensity
        self.reference_fps = reference_fps
        self.resolution = resolution
        self.state = state if state is not None else ColorState()
        # Registration handle from init. Updates read the bands from
        # FrameContext instead, so the script works without a host.
        self.audio_buffer: Optional[AudioBuffer] = None

    def init(self, host) -> None:
        """Register the audio buffer with the host and keep the handle."""
        self.audio_buffer = host.register_audio_buffers(self.resolution)

    def update(self, frame: FrameContext) -> Color:
        return update(
            self.state,
            frame,
            self.smoothing_factor,
            self.bass_intensity,
            self.reference_fps,
        )

    def media_thumbnail_changed(self, event: MediaThumbnailEvent) -> None:
        media_thumbnail_changed(self.state, event)

    @property
    def current_color(self) -> Color:
        return self.state.current

    @property
    def target_color(self) -> Color:
        return self.state.target
