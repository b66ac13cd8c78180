"""Configuration for the Album Visualizer."""

# =============================================================================
# Color Smoothing
# =============================================================================

# Fraction of the remaining distance to the target covered per reference frame
# Lower = slower/smoother transition (0.0 to 1.0)
SMOOTHING_FACTOR = 0.05

# Frame rate the smoothing factor is tuned for
REFERENCE_FPS = 60

# Upper bound for any output color component
MAX_COMPONENT = 1.0

# =============================================================================
# Bass Effect
# =============================================================================

# How strongly the bass band brightens the color
BASS_EFFECT_INTENSITY = 0.1

# Band read as "bass" (0 = lowest frequencies)
BASS_BAND_INDEX = 0

# Bass amplitude can exceed 1.0, clamp before use
MAX_BASS = 1.0

# =============================================================================
# Audio
# =============================================================================

# Number of frequency bands requested from the host
AUDIO_RESOLUTION = 16

# =============================================================================
# OSC
# =============================================================================

OSC_HOST = "127.0.0.1"
OSC_PORT = 9002

# =============================================================================
# Preview Window
# =============================================================================

WINDOW_WIDTH = 960
WINDOW_HEIGHT = 540
WINDOW_TITLE = "Album Visualizer"
FPS = 60

# Colors (RGB)
COLOR_BAR = (255, 255, 255)
COLOR_BAR_BASS = (255, 200, 120)
COLOR_TEXT = (200, 200, 210)
COLOR_TEXT_SHADOW = (10, 10, 15)

# Band bars
BAR_AREA_HEIGHT = 120  # Max bar height in pixels
BAR_MARGIN = 20
BAR_GAP = 4
BAR_ALPHA = 110
