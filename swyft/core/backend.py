"""
Image backend used by the resizer.

The resizer only talks to an ``ImageBackend``: ``open`` returns an
``ImageHandle`` that can report its size, produce a resized copy and write
itself to disk. ``PillowBackend`` is the real thing; tests substitute a fake.
"""
import os
from typing import Optional, Protocol, Tuple

from PIL import Image, UnidentifiedImageError

from .errors import DecodeError, ResizeError, WriteError

EXT_TO_PIL = {"jpg":"JPEG","jpeg":"JPEG","png":"PNG","gif":"GIF","webp":"WEBP"}
Size = Tuple[Optional[int], Optional[int]]


class ImageHandle(Protocol):
    def metadata(self) -> Size: ...
    def resize(self, width: Optional[int], height: Optional[int]) -> "ImageHandle": ...
    def write_to(self, path: str) -> None: ...
    def close(self) -> None: ...


class ImageBackend(Protocol):
    def open(self, path: str) -> ImageHandle: ...


def scale_side(given: int, src_given: int, src_other: int) -> int:
    """Length of the other side when one side goes from src_given to given."""
    return max(1, round(given/src_given*src_other))


def fill_missing(sw: int, sh: int, width: Optional[int], height: Optional[int]) -> Tuple[int, int]:
    """Compute an absent dimension proportionally, the way the resize primitive does."""
    if width and not height: return width, scale_side(width, sw, sh)
    if height and not width: return scale_side(height, sh, sw), height
    if width and height: return width, height
    return sw, sh


class PillowImage:
    def __init__(self, im: Image.Image):
        self.im = im

    def metadata(self) -> Size:
        w, h = self.im.size
        return (w or None), (h or None)

    def resize(self, width, height) -> "PillowImage":
        sw, sh = self.im.size
        tw, th = fill_missing(sw, sh, width, height)
        if (tw, th) == (sw, sh):
            return self
        # LANCZOS for downscale, BICUBIC otherwise
        resample = Image.LANCZOS if (tw<sw or th<sh) else Image.BICUBIC
        try:
            return PillowImage(self.im.resize((tw, th), resample=resample))
        except (OSError, ValueError) as e:
            raise ResizeError(str(e)) from e

    def write_to(self, path: str) -> None:
        ext = os.path.splitext(path)[1].lstrip(".").lower()
        pil_fmt = EXT_TO_PIL.get(ext)
        if not pil_fmt:
            raise WriteError(f"Unknown output format .{ext}")
        im = self.im
        if pil_fmt == "JPEG" and im.mode in ("RGBA", "LA", "P"):
            im = im.convert("RGB")
        try:
            im.save(path, format=pil_fmt)
        except (OSError, ValueError) as e:
            raise WriteError(str(e)) from e

    def close(self) -> None:
        self.im.close()


class PillowBackend:
    def open(self, path: str) -> PillowImage:
        try:
            return PillowImage(Image.open(path))
        except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as e:
            raise DecodeError(str(e)) from e
