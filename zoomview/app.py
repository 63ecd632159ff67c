"""Application - main loop orchestrator.

The Application class coordinates, once per frame:
- Window resize detection (-> Layout)
- Input handling (via InputHandler -> commands)
- Command execution against the controller
- Tween ticking
- Rendering (via Renderer)
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional
import os
import traceback

from .state.app_state import AppState
from .renderer import Renderer, get_renderer
from .input_handler import InputHandler, get_input_handler
from .commands import Command, Layout
from .errors import ZoomViewError
from .image_utils import decode_image
from .rl_compat import rl, init_window, texture_from_png_bytes, is_texture_valid
from .types import TextureInfo
from .config import TARGET_FPS, WINDOW_WIDTH, WINDOW_HEIGHT, WINDOW_TITLE, CONTENT_TARGET_WIDTH
from .logging import log, increment_frame, get_frame


@dataclass
class Application:
    """
    Main application orchestrator.

    Usage:
        app = Application()
        app.initialize(image_path)
        app.run()
    """

    state: AppState = field(default_factory=AppState)
    renderer: Renderer = field(default_factory=get_renderer)
    input_handler: InputHandler = field(default_factory=get_input_handler)
    window_open: bool = False

    def initialize(self, image_path: str, target_width: Optional[int] = CONTENT_TARGET_WIDTH) -> bool:
        """Open the window, load the image and apply the first layout.

        Raises:
            OSError: If the image cannot be decoded.
        """
        decoded = decode_image(image_path, target_width)
        log(f"[IMG] Decoded {os.path.basename(image_path)} {decoded.width}x{decoded.height}")

        log(f"[INIT] Creating window: {WINDOW_WIDTH}x{WINDOW_HEIGHT}")
        rl.SetConfigFlags(rl.FLAG_WINDOW_RESIZABLE)
        init_window(WINDOW_WIDTH, WINDOW_HEIGHT, f"{WINDOW_TITLE} - {os.path.basename(image_path)}")
        self.window_open = True
        rl.SetExitKey(0)
        rl.SetTargetFPS(TARGET_FPS)

        tex = texture_from_png_bytes(decoded.png_bytes)
        if not is_texture_valid(tex):
            log("[INIT][ERR] Texture upload failed")
            return False
        self.state.content = TextureInfo(tex=tex, w=decoded.width, h=decoded.height, path=image_path)

        self._execute_command(Layout(rl.GetScreenWidth(), rl.GetScreenHeight()))
        log("[APP] Application initialized")
        return self.state.controller.is_ready

    def run(self) -> None:
        """Run the main loop until the window closes."""
        log("[APP] Starting main loop")
        try:
            while self.state.running:
                self._frame()
        except Exception as e:
            log(f"[APP][CRITICAL] Unhandled exception: {e!r}")
            log(f"[APP][CRITICAL] Traceback:\n{traceback.format_exc()}")
            raise
        finally:
            self.shutdown()

    def _frame(self) -> None:
        """Execute a single frame."""
        if rl.WindowShouldClose():
            self.state.running = False
            return

        # 1. Geometry
        if rl.IsWindowResized():
            self._execute_command(Layout(rl.GetScreenWidth(), rl.GetScreenHeight()))

        # 2. Input -> commands
        for cmd in self.input_handler.poll(self.state):
            self._execute_command(cmd)
            if not self.state.running:
                return

        # 3. Animations
        self.state.controller.tick()

        # 4. Render
        self.renderer.draw_frame(self.state)

        increment_frame()

    def _execute_command(self, cmd: Command) -> bool:
        """Execute a single command, logging rejected geometry."""
        try:
            return cmd.execute(self.state)
        except ZoomViewError as e:
            log(f"[APP][ERR] {type(cmd).__name__} rejected: {e}")
            return False

    def shutdown(self) -> None:
        """Release the controller, the texture and the window."""
        log("[APP] Starting cleanup")
        self.state.controller.destroy()

        ti = self.state.content
        if ti and is_texture_valid(ti.tex):
            rl.UnloadTexture(ti.tex)
        self.state.content = None

        if self.window_open:
            log("[APP] Closing window")
            rl.CloseWindow()
            self.window_open = False

        log(f"[APP] Cleanup complete frames={get_frame()}")


def create_app(state: Optional[AppState] = None) -> Application:
    """Create a new application instance."""
    return Application(state=state or AppState())
