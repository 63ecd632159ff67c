"""Renderer - handles all drawing operations.

The Renderer only reads state and draws to screen. It polls the
controller's transform once per frame.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .state.app_state import AppState

from .rl_compat import (
    rl, RL_VERSION,
    make_rect as RL_Rect, make_vec2 as RL_V2, make_color as RL_Color,
    draw_text as RL_DrawText,
)
from .frame import FrameTransformSource
from .types import TextureInfo, RenderTransform
from .view_math import compute_dest_rect
from .config import BG_COLOR, HUD_FONT_SIZE, HUD_MARGIN


@dataclass
class Renderer:
    """
    Handles all drawing operations.

    Usage:
        renderer = Renderer()
        renderer.draw_frame(state)
    """
    frames: FrameTransformSource = field(default_factory=FrameTransformSource)

    def begin_frame(self) -> None:
        rl.BeginDrawing()

    def end_frame(self) -> None:
        rl.EndDrawing()

    def draw_background(self, state: "AppState") -> None:
        c = BG_COLOR
        rl.ClearBackground(RL_Color(c[0], c[1], c[2], 255))

    # ═══════════════════════════════════════════════════════════════════════
    # Image rendering
    # ═══════════════════════════════════════════════════════════════════════

    def frame_transform(self, state: "AppState") -> RenderTransform:
        """Transform for this frame, without pan when the zoom range is empty."""
        return self.frames.transform_for(state.controller)

    def draw_texture_at(self, ti: TextureInfo, transform: RenderTransform, state: "AppState") -> None:
        """Draw a texture under a render transform."""
        tex_id = getattr(ti.tex, 'id', 0)
        if not tex_id or tex_id <= 0:
            return
        x, y, w, h = compute_dest_rect(transform, state.geometry)
        rl.DrawTexturePro(
            ti.tex,
            RL_Rect(0, 0, ti.w, ti.h),
            RL_Rect(x, y, w, h),
            RL_V2(0, 0), 0.0, rl.WHITE
        )

    def draw_image(self, state: "AppState") -> None:
        """Draw the current image."""
        ti = state.content
        if not ti or not state.controller.is_ready:
            return
        self.draw_texture_at(ti, self.frame_transform(state), state)

    # ═══════════════════════════════════════════════════════════════════════
    # HUD
    # ═══════════════════════════════════════════════════════════════════════

    def draw_hud(self, state: "AppState") -> None:
        """Draw scale/pan overlay."""
        if not state.show_hud:
            return

        line = HUD_FONT_SIZE + 4
        y = state.screenH - HUD_MARGIN - line * 3
        scale, pan_x, pan_y = state.controller.current_transform()
        s = state.controller.state

        RL_DrawText(f"RL={RL_VERSION}", HUD_MARGIN, y, HUD_FONT_SIZE, rl.LIGHTGRAY)
        if s is None:
            RL_DrawText("no layout", HUD_MARGIN, y + line, HUD_FONT_SIZE, rl.LIGHTGRAY)
            return
        RL_DrawText(
            f"scale={scale:.3f} [{s.min_scale:.3f}, {s.max_scale:.3f}] zoomed_in={s.is_zoomed_in}",
            HUD_MARGIN, y + line, HUD_FONT_SIZE, rl.LIGHTGRAY
        )
        RL_DrawText(
            f"pan=({pan_x:.1f}, {pan_y:.1f}) animating={state.controller.is_animating}",
            HUD_MARGIN, y + line * 2, HUD_FONT_SIZE, rl.LIGHTGRAY
        )

    # ═══════════════════════════════════════════════════════════════════════
    # Convenience methods
    # ═══════════════════════════════════════════════════════════════════════

    def draw_all(self, state: "AppState") -> None:
        """Draw everything in correct order."""
        self.draw_background(state)
        self.draw_image(state)
        self.draw_hud(state)

    def draw_frame(self, state: "AppState") -> None:
        """Complete frame: begin, draw all, end."""
        self.begin_frame()
        self.draw_all(state)
        self.end_frame()
        state.controller.consume_redraw()


# Singleton instance
_default_renderer: Optional[Renderer] = None


def get_renderer() -> Renderer:
    """Get the default renderer instance."""
    global _default_renderer
    if _default_renderer is None:
        _default_renderer = Renderer()
    return _default_renderer
