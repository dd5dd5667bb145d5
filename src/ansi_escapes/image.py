"""Inline images using the iTerm2 ``File=`` protocol (OSC 1337).

Example:
    from ansi_escapes.image import image_from_file

    print(image_from_file("logo.png", width=40))

Encoding a Pillow image in memory requires the ``image`` extra.
"""

from __future__ import annotations

import base64
import io
from pathlib import Path
from typing import TYPE_CHECKING, Optional, Union

from ansi_escapes.core.constants import BEL
from ansi_escapes.core.sequence import osc

try:
    from PIL import Image
    HAS_PIL = True
except ImportError:
    HAS_PIL = False

if TYPE_CHECKING:
    from PIL.Image import Image as PILImage


# Cells as int, or "Npx", "N%", "auto"
Dimension = Union[int, str]


def _check_pil() -> None:
    """Raise ImportError if PIL is not available."""
    if not HAS_PIL:
        raise ImportError(
            "Pillow is required for encoding Pillow images. "
            "Install with: uv pip install ansi-escapes[image]"
        )


def _b64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def image(
    data: bytes,
    width: Optional[Dimension] = None,
    height: Optional[Dimension] = None,
    preserve_aspect_ratio: Optional[bool] = None,
    name: Optional[str] = None,
    *,
    terminator: str = BEL,
) -> str:
    """
    Display image ``data`` inline.

    Args:
        data: Encoded image file contents (PNG, JPEG, GIF, ...)
        width: Width in cells, or a string such as ``"100px"``, ``"50%"``, ``"auto"``
        height: Height, same forms as ``width``
        preserve_aspect_ratio: ``False`` lets the terminal stretch the image
        name: File name shown by the terminal on download

    Options left as ``None`` are omitted from the sequence rather than
    sent as zero.
    """
    args = ["inline=1", f"size={len(data)}"]
    if name is not None:
        args.append(f"name={_b64(name.encode('utf-8'))}")
    if width is not None:
        args.append(f"width={width}")
    if height is not None:
        args.append(f"height={height}")
    if preserve_aspect_ratio is not None:
        args.append(f"preserveAspectRatio={int(preserve_aspect_ratio)}")

    return osc(1337, f"File={';'.join(args)}:{_b64(data)}", terminator=terminator)


def image_from_file(
    path: Union[str, Path],
    width: Optional[Dimension] = None,
    height: Optional[Dimension] = None,
    preserve_aspect_ratio: Optional[bool] = None,
    name: Optional[str] = None,
    *,
    terminator: str = BEL,
) -> str:
    """Read an image file and display it inline, named after the file by default."""
    path = Path(path)
    return image(
        path.read_bytes(),
        width=width,
        height=height,
        preserve_aspect_ratio=preserve_aspect_ratio,
        name=path.name if name is None else name,
        terminator=terminator,
    )


def image_from_pil(
    img: "PILImage",
    format: str = "PNG",
    width: Optional[Dimension] = None,
    height: Optional[Dimension] = None,
    preserve_aspect_ratio: Optional[bool] = None,
    name: Optional[str] = None,
    *,
    terminator: str = BEL,
) -> str:
    """Encode a Pillow image as ``format`` and display it inline."""
    _check_pil()
    if not isinstance(img, Image.Image):
        raise TypeError(f"Expected a PIL image, got {type(img).__name__}")

    # Palette/alpha modes JPEG cannot store
    if format.upper() == "JPEG" and img.mode not in ("RGB", "L"):
        img = img.convert("RGB")

    buffer = io.BytesIO()
    img.save(buffer, format=format)
    return image(
        buffer.getvalue(),
        width=width,
        height=height,
        preserve_aspect_ratio=preserve_aspect_ratio,
        name=name,
        terminator=terminator,
    )
