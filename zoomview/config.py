"""Application configuration constants."""

from __future__ import annotations

# Performance
TARGET_FPS = 120

# Window defaults
WINDOW_WIDTH = 960
WINDOW_HEIGHT = 720
WINDOW_TITLE = "zoomview"

# Zoom
ZOOM_COEFFICIENT = 1.2      # max scale = fit of the other axis * coefficient
ZOOM_STEP_WHEEL = 0.1       # scale factor per wheel notch

# Animation durations (milliseconds)
ANIM_TOGGLE_ZOOM_MS = 300

# Content
CONTENT_TARGET_WIDTH = None  # decode width in pixels, None keeps native size

# Input
DOUBLE_CLICK_TIME_MS = 300
DOUBLE_CLICK_DISTANCE = 10
PINCH_IDLE_END_MS = 150     # wheel silence that ends a pinch gesture

# Logging
LOG_MUTED_TAGS = frozenset()  # e.g. {"INPUT", "CTRL"} silences gesture chatter

# HUD
HUD_FONT_SIZE = 20
HUD_MARGIN = 12

# Hotkeys (raylib key codes)
# See: https://github.com/raysan5/raylib/blob/master/src/raylib.h
KEY_TOGGLE_HUD = 73         # KEY_I
KEY_TOGGLE_ZOOM = 70        # KEY_F
KEY_CLOSE = 256             # KEY_ESCAPE

# Background
BG_COLOR = (0, 0, 0)

# Supported image extensions
IMG_EXTS = frozenset({".png", ".jpg", ".jpeg", ".bmp", ".gif", ".webp", ".tga"})
