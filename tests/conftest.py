import os
import struct
import zlib

import pytest
from PIL import Image

from swyft.core.errors import ResizeError, WriteError

PIL_FMT = {".jpg": "JPEG", ".jpeg": "JPEG", ".png": "PNG", ".gif": "GIF", ".webp": "WEBP"}


def _png_chunk(kind, data):
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data))


class FakeHandle:
    def __init__(self, size, backend):
        self.size = size
        self.backend = backend

    def metadata(self):
        return self.size

    def resize(self, width, height):
        if self.backend.fail == "resize":
            raise ResizeError("resampling blew up")
        return FakeHandle((width, height), self.backend)

    def write_to(self, path):
        if self.backend.fail == "write":
            raise WriteError("disk full")
        with open(path, "wb") as f:
            f.write(b"fake")
        self.backend.written.append(path)

    def close(self):
        pass


class FakeBackend:
    """Reports a fixed size for every file, never decodes anything."""

    def __init__(self, size=(None, None), fail=None):
        self.size = size
        self.fail = fail
        self.written = []

    def open(self, path):
        return FakeHandle(self.size, self)


@pytest.fixture
def make_image():
    def make(path, size=(200, 400), mode="RGB", color=(200, 40, 40)):
        im = Image.new(mode, size, color if mode != "P" else 3)
        im.save(str(path), format=PIL_FMT[os.path.splitext(str(path))[1].lower()])
        return path
    return make


@pytest.fixture
def make_bomb_png():
    """PNG whose header claims far more pixels than Pillow agrees to open."""
    def make(path, side=30000):
        ihdr = struct.pack(">IIBBBBB", side, side, 8, 2, 0, 0, 0)
        path.write_bytes(b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", ihdr)
                         + _png_chunk(b"IDAT", zlib.compress(b"")) + _png_chunk(b"IEND", b""))
        return path
    return make


@pytest.fixture
def fake_backend():
    return FakeBackend


@pytest.fixture
def dirs(tmp_path):
    src = tmp_path / "in"
    out = tmp_path / "out"
    src.mkdir()
    return src, out
