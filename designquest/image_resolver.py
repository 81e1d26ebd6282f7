# designquest/image_resolver.py — self-healing image paths
# ----------------------------------------------------------
# Resolves an image reference against the base path and, on each load
# failure, walks a fixed ladder of alternate candidates:
#   NFC → NFD → .jpeg/.jpg swap → （大） suffix toggle → give up
# ----------------------------------------------------------

from __future__ import annotations
import re
import unicodedata
from typing import Callable, Optional, Tuple

ABSOLUTE_PREFIXES: Tuple[str, ...] = ("http://", "https://", "//", "data:")
LARGE_MARKER = "（大）"
# icon / QR assets never get the marker inserted
NO_MARKER_SEGMENTS: Tuple[str, ...] = ("img/", "Xgd")


# -----------------------------
# Classification
# -----------------------------
def is_absolute(src: str) -> bool:
    return src.startswith(ABSOLUTE_PREFIXES)

def resolve_src(src: str, base_path: str = "/") -> str:
    """Absolute references pass through; relative ones are joined to base_path."""
    if is_absolute(src):
        return src
    return re.sub(r"/{2,}", "/", f"{base_path}{src}")


# -----------------------------
# Fallback ladder (one step per attempt)
# -----------------------------
def to_nfc(path: str) -> str:
    return unicodedata.normalize("NFC", path)

def to_nfd(path: str) -> str:
    return unicodedata.normalize("NFD", path)

def swap_jpeg_extension(path: str) -> str:
    if path.endswith(".jpeg"):
        return path[:-len(".jpeg")] + ".jpg"
    if path.endswith(".jpg"):
        return path[:-len(".jpg")] + ".jpeg"
    return path

def toggle_large_suffix(path: str) -> str:
    """Drop the （大） marker if present, else insert it before the extension.

    Insertion is skipped for icon/QR paths; removal is not.
    """
    if LARGE_MARKER in path:
        return path.replace(LARGE_MARKER, "", 1)
    if any(seg in path for seg in NO_MARKER_SEGMENTS):
        return path
    stem, dot, ext = path.rpartition(".")
    if not dot:
        return path
    return f"{stem}{LARGE_MARKER}.{ext}"

FALLBACK_LADDER: Tuple[Callable[[str], str], ...] = (
    to_nfc,
    to_nfd,
    swap_jpeg_extension,
    toggle_large_suffix,
)
MAX_ATTEMPTS = len(FALLBACK_LADDER)


# -----------------------------
# State machine
# -----------------------------
class ImageResolver:
    """Resolution state for one displayed image.

    States are Resolved(candidate, attempt) for attempt in 0..4, plus Failed.
    Each failure signal moves one step down the ladder; the fifth failure
    is terminal. Success needs no transition.
    """

    def __init__(self, src: str, base_path: str = "/"):
        self.base_path = base_path
        self.reset(src)

    def reset(self, src: str) -> None:
        self.original = src
        self.candidate = resolve_src(src, self.base_path)
        self.attempt = 0
        self.failed = False

    def set_source(self, src: str) -> None:
        # a new identity restarts the ladder, even mid-way
        if src != self.original:
            self.reset(src)

    def on_error(self) -> None:
        if self.failed:
            return
        if self.attempt < MAX_ATTEMPTS:
            self.candidate = FALLBACK_LADDER[self.attempt](self.candidate)
            self.attempt += 1
        else:
            self.failed = True

    def resolve(self, probe: Callable[[str], bool]) -> Optional[str]:
        """Probe candidates until one loads; None once the ladder is exhausted."""
        while not self.failed:
            if probe(self.candidate):
                return self.candidate
            self.on_error()
        return None

    def __repr__(self) -> str:
        state = "Failed" if self.failed else f"Resolved({self.candidate!r}, {self.attempt})"
        return f"<ImageResolver {self.original!r} {state}>"
