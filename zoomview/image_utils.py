"""Image utilities - the content provider for the view.

Decoding goes through Pillow; the GPU upload happens in rl_compat so this
module stays importable without a window.
"""

from __future__ import annotations
import io
import os
from dataclasses import dataclass
from typing import Optional, Tuple, List

from PIL import Image, ImageOps

from .config import IMG_EXTS
from .logging import log


@dataclass
class DecodedContent:
    """A decoded image ready for upload."""
    png_bytes: bytes
    width: int
    height: int
    path: str = ""

    @property
    def size(self) -> Tuple[int, int]:
        return (self.width, self.height)


def is_supported_image(filepath: str) -> bool:
    """Check if file has a supported image extension."""
    ext = os.path.splitext(filepath)[1].lower()
    return ext in IMG_EXTS


def list_images(dirpath: str) -> List[str]:
    """List all supported image files in directory, sorted by name."""
    try:
        names = sorted(os.listdir(dirpath))
    except OSError:
        return []
    result = []
    for name in names:
        path = os.path.join(dirpath, name)
        if os.path.isfile(path) and is_supported_image(name):
            result.append(path)
    return result


def read_image_dimensions(filepath: str) -> Optional[Tuple[int, int]]:
    """Read image dimensions from the file header without decoding pixels.

    Returns:
        Tuple of (width, height) or None if Pillow cannot identify the file.
    """
    try:
        with Image.open(filepath) as img:
            return img.size
    except (OSError, ValueError):
        return None


def target_size(width: int, height: int, target_width: Optional[int]) -> Tuple[int, int]:
    """Size after scaling to ``target_width`` with the aspect ratio kept."""
    if not target_width or target_width <= 0 or target_width == width:
        return (width, height)
    return (int(target_width), max(1, round(height * target_width / width)))


def decode_image(filepath: str, target_width: Optional[int] = None) -> DecodedContent:
    """Decode an image, apply EXIF orientation, optionally rescale to a width.

    Raises:
        OSError: If the file cannot be read or decoded.
    """
    with Image.open(filepath) as src:
        img = ImageOps.exif_transpose(src)
        img = img.convert("RGBA")

    w, h = target_size(img.width, img.height, target_width)
    if (w, h) != img.size:
        img = img.resize((w, h), Image.LANCZOS)
        log(f"[IMG] Rescaled {os.path.basename(filepath)} to {w}x{h}")

    buf = io.BytesIO()
    img.save(buf, format="PNG")
    return DecodedContent(png_bytes=buf.getvalue(), width=w, height=h, path=filepath)


def resolve_start_image(path: Optional[str]) -> Optional[str]:
    """Pick the image to show: the file itself, or the first readable image of a directory.

    Files Pillow cannot identify are skipped.
    """
    if not path:
        return None
    if os.path.isdir(path):
        candidates = list_images(path)
    elif os.path.isfile(path):
        candidates = [path]
    else:
        return None
    for candidate in candidates:
        dims = read_image_dimensions(candidate)
        if dims is None:
            log(f"[IMG] Skipping unreadable {os.path.basename(candidate)}")
            continue
        log(f"[IMG] Start image {os.path.basename(candidate)} {dims[0]}x{dims[1]}")
        return candidate
    return None
