"""Tests for the script host, audio buffers and color helpers."""

import math
import threading

import numpy as np
import pytest

from album_visualizer.audio import AudioBuffer, AudioResolution, register_audio_buffers
from album_visualizer.color import Color, lerp
from album_visualizer.host import ScriptHost
from album_visualizer.smoother import AlbumBassScript


ONE_FRAME = 1.0 / 60.0


# =============================================================================
# Color
# =============================================================================

class TestColor:
    """Verify the color helpers."""

    def test_lerp_endpoints(self):
        assert lerp(0.2, 0.8, 0.0) == 0.2
        assert lerp(0.2, 0.8, 1.0) == pytest.approx(0.8)

    def test_lerp_midpoint(self):
        assert lerp(0.0, 1.0, 0.5) == 0.5

    def test_color_lerp_is_componentwise(self):
        result = Color(0.0, 0.5, 1.0).lerp(Color(1.0, 0.5, 0.0), 0.25)
        assert result.r == pytest.approx(0.25)
        assert result.g == pytest.approx(0.5)
        assert result.b == pytest.approx(0.75)

    def test_from_rgb255(self):
        assert Color.from_rgb255(255, 0, 51) == Color(1.0, 0.0, 0.2)

    def test_to_rgb255_clamps(self):
        assert Color(1.5, -0.2, 0.5).to_rgb255() == (255, 0, 128)

    def test_to_rgb255_non_finite_is_zero(self):
        assert Color(float("nan"), float("inf"), float("-inf")).to_rgb255() == (0, 0, 0)


# =============================================================================
# Audio buffers
# =============================================================================

class TestAudioBuffer:
    """Verify band storage and registration."""

    def test_starts_silent(self):
        buffer = AudioBuffer()
        assert len(buffer) == 16
        assert np.all(buffer.average == 0.0)
        assert buffer.bass == 0.0

    def test_update_pads_and_truncates(self):
        buffer = AudioBuffer(AudioResolution.RESOLUTION_16)
        buffer.update([0.5, 0.25])
        assert buffer.average[0] == 0.5
        assert buffer.average[1] == 0.25
        assert buffer.average[15] == 0.0

        buffer.update([1.0] * 40)
        assert len(buffer) == 16

    def test_non_finite_values_stored_as_zero(self):
        buffer = AudioBuffer()
        buffer.update([float("nan"), float("inf"), 0.3])
        assert buffer.average[0] == 0.0
        assert buffer.average[1] == 0.0
        assert buffer.average[2] == pytest.approx(0.3)

    def test_set_band(self):
        buffer = AudioBuffer()
        buffer.update([0.1, 0.2])
        buffer.set_band(0, 2.5)
        assert buffer.bass == 2.5
        assert buffer.average[1] == pytest.approx(0.2)

    @pytest.mark.parametrize("bands", [16, 32, 64])
    def test_register_supported_resolutions(self, bands):
        buffer = register_audio_buffers(bands)
        assert len(buffer) == bands
        assert buffer.resolution == AudioResolution(bands)

    def test_register_accepts_enum(self):
        buffer = register_audio_buffers(AudioResolution.RESOLUTION_32)
        assert len(buffer) == 32

    @pytest.mark.parametrize("bands", [0, 8, 17, "many"])
    def test_register_rejects_unsupported(self, bands):
        with pytest.raises(ValueError):
            register_audio_buffers(bands)


# =============================================================================
# Script host
# =============================================================================

class TestScriptHost:
    """Verify event delivery and frame ticking."""

    @pytest.fixture
    def host(self):
        host = ScriptHost()
        host.load(AlbumBassScript())
        return host

    def test_load_registers_audio_buffer(self, host):
        assert host.audio_buffer is not None
        assert len(host.audio_buffer) == 16
        assert host.script.audio_buffer is host.audio_buffer

    def test_load_with_resolution(self):
        host = ScriptHost()
        host.load(AlbumBassScript(resolution=64))
        assert len(host.audio_buffer) == 64

    def test_tick_without_script_raises(self):
        with pytest.raises(RuntimeError):
            ScriptHost().tick(ONE_FRAME)

    @pytest.mark.parametrize("frametime", [-0.1, float("nan"), float("inf")])
    def test_invalid_frametime_raises(self, host, frametime):
        with pytest.raises(ValueError):
            host.tick(frametime)

    def test_thumbnail_is_delivered_on_next_tick(self, host):
        host.post_thumbnail(Color(1.0, 0.0, 0.0))
        assert host.script.target_color == Color(0.0, 0.0, 0.0)

        host.tick(ONE_FRAME)
        assert host.script.target_color == Color(1.0, 0.0, 0.0)
        assert host.script.current_color.r == pytest.approx(0.05)

    def test_events_applied_in_order(self, host):
        host.post_thumbnail(Color(1.0, 0.0, 0.0))
        host.post_thumbnail(Color(0.0, 1.0, 0.0))
        host.tick(0.0)
        assert host.script.target_color == Color(0.0, 1.0, 0.0)

    def test_audio_reaches_output(self, host):
        host.post_audio([3.0] + [0.0] * 15)
        color = host.tick(0.0)
        assert color == Color(0.1, 0.1, 0.1)
        assert host.last_color is color

    def test_band_update_keeps_other_bands(self, host):
        host.post_audio([0.0, 0.7])
        host.post_band(0, 0.5)
        host.tick(0.0)
        assert host.audio_buffer.average[0] == 0.5
        assert host.audio_buffer.average[1] == pytest.approx(0.7)

    def test_out_of_range_band_ignored(self, host):
        host.post_band(99, 1.0)
        host.tick(0.0)
        assert np.all(host.audio_buffer.average == 0.0)

    def test_frame_count(self, host):
        for _ in range(3):
            host.tick(ONE_FRAME)
        assert host.frame_count == 3

    def test_posts_from_other_threads(self, host):
        def producer():
            for i in range(100):
                host.post_thumbnail(Color(i / 100.0, 0.0, 0.0))

        threads = [threading.Thread(target=producer) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        host.tick(ONE_FRAME)
        assert not math.isnan(host.script.current_color.r)
        assert 0.0 <= host.script.target_color.r < 1.0

    def test_converges_to_thumbnail_over_time(self, host):
        host.post_thumbnail(Color(0.2, 0.4, 0.6))
        for _ in range(600):
            color = host.tick(ONE_FRAME)
        assert color.r == pytest.approx(0.2, abs=1e-6)
        assert color.g == pytest.approx(0.4, abs=1e-6)
        assert color.b == pytest.approx(0.6, abs=1e-6)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
