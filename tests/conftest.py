import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]

if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from zoomview.controller import ZoomTransformController  # noqa: E402
from zoomview.logging import get_logger  # noqa: E402


class FakeClock:
    """Manually advanced clock for driving tweens."""

    def __init__(self, t: float = 100.0):
        self.t = t

    def advance_ms(self, ms: float) -> None:
        self.t += ms / 1000.0

    def __call__(self) -> float:
        return self.t


@pytest.fixture(autouse=True)
def quiet_logger():
    logger = get_logger()
    logger.enabled = False
    yield
    logger.enabled = True


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def controller(clock):
    """Controller laid out as view 300x300, content 600x300."""
    c = ZoomTransformController(zoom_coefficient=1.2, toggle_duration_ms=300, clock=clock)
    c.on_layout(300, 300, 600, 300)
    return c
