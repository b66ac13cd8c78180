"""Tests for display helpers and CLI parsing that need no window."""

import pytest

from album_visualizer import config
from album_visualizer.main import build_parser, parse_args
from album_visualizer.renderer import band_bar_heights


class TestBandBarHeights:
    """Verify bar height scaling."""

    def test_scales_to_max_height(self):
        assert band_bar_heights([0.0, 0.5, 1.0], 100) == [0, 50, 100]

    def test_clamps_out_of_range(self):
        assert band_bar_heights([-1.0, 3.0], 120) == [0, 120]


class TestCli:
    """Verify argument defaults come from config."""

    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.port == config.OSC_PORT
        assert args.resolution == config.AUDIO_RESOLUTION
        assert args.smoothing == config.SMOOTHING_FACTOR
        assert args.bass_intensity == config.BASS_EFFECT_INTENSITY
        assert args.no_bars is False

    def test_overrides(self):
        args = build_parser().parse_args(
            ["--port", "9100", "--resolution", "64", "--smoothing", "0.2", "--no-bars"]
        )
        assert args.port == 9100
        assert args.resolution == 64
        assert args.smoothing == 0.2
        assert args.no_bars is True

    def test_rejects_unsupported_resolution(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["--resolution", "20"])

    @pytest.mark.parametrize("smoothing", ["0", "-0.1", "1.5"])
    def test_bad_smoothing_exits_with_usage(self, smoothing, capsys):
        with pytest.raises(SystemExit) as exc:
            parse_args(["--smoothing", smoothing])
        assert exc.value.code == 2
        err = capsys.readouterr().err
        assert "usage:" in err
        assert "--smoothing must be in (0, 1]" in err

    def test_parse_args_accepts_full_smoothing(self):
        assert parse_args(["--smoothing", "1.0"]).smoothing == 1.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
