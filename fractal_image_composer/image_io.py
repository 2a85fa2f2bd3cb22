"""Loading and saving pixel buffers with Pillow."""

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from .errors import DecodeFailureError, EncodeFailureError
from .pixel_buffer import MODES, PixelBuffer

logger = logging.getLogger(__name__)


def load_image(path: str | Path, channels: int = 3) -> PixelBuffer:
    """
    Decode an image file into a PixelBuffer.

    Args:
        path: Path to image file (PNG, JPG, GIF, ...)
        channels: 1 (grey), 3 (RGB) or 4 (RGBA)

    Raises:
        DecodeFailureError: if the path is not a file or is not a readable image
    """
    path = Path(path)
    if not path.is_file():
        raise DecodeFailureError(f"Image file not found: {path}")
    if channels not in MODES:
        raise ValueError(f"Unsupported channel count: {channels}")

    try:
        with Image.open(path) as img:
            img = img.convert(MODES[channels])
    except (UnidentifiedImageError, OSError) as exc:
        raise DecodeFailureError(f"Could not decode image: {path}") from exc

    buffer = PixelBuffer.from_image(img)
    logger.info(f"Loaded {path} ({buffer.width}x{buffer.height}, {img.mode})")
    return buffer


def save_image(buffer: PixelBuffer, path: str | Path):
    """
    Encode buffer to path; the format follows the file extension.

    Raises:
        EncodeFailureError: on an unknown extension or an unwritable path
    """
    path = Path(path)
    try:
        buffer.to_image().save(path)
    except (ValueError, OSError) as exc:
        raise EncodeFailureError(f"Could not write image: {path} ({exc})") from exc
    logger.info(f"Saved {path} ({buffer.width}x{buffer.height})")
