"""zoomview - image view with double-tap and pinch zoom, pan clamped to bounds."""

__version__ = "0.1.0"
