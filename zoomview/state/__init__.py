"""State management submodules for zoomview.

AppState lives in ``zoomview.state.app_state``; it depends on the
controller, which itself depends on TransformState from this package.
"""

from .window import WindowState
from .input import InputState
from .transform import TransformState

__all__ = [
    'WindowState',
    'InputState',
    'TransformState',
]
