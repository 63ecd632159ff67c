"""zoomview entry point: ``python viewer.py <image-or-directory>``."""

from __future__ import annotations
import os
import sys
import traceback

from zoomview.app import create_app
from zoomview.image_utils import resolve_start_image
from zoomview.logging import log


def main() -> int:
    log("[MAIN] Starting application")

    start_path = None
    for a in sys.argv[1:]:
        p = os.path.abspath(a)
        log(f"[ARGS] Checking argument: {a} -> {p}")
        if os.path.exists(p):
            start_path = p
            break

    image_path = resolve_start_image(start_path or os.getcwd())
    if not image_path:
        log("[ARGS] No image found, usage: viewer.py <image-or-directory>")
        return 2

    app = create_app()
    try:
        ok = app.initialize(image_path)
    except Exception:
        app.shutdown()
        raise
    if not ok:
        log("[INIT][CRITICAL] Initialization failed")
        app.shutdown()
        return 1
    app.run()
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        log(f"[FATAL] Fatal error: {e!r}")
        log(f"[FATAL] Traceback:\n{traceback.format_exc()}")
        sys.exit(1)
