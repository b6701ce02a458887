"""
PNG reading and writing for chest atlases.

Atlases are handled as RGBA Pillow images throughout; indexed or RGB sources
are converted on load so pixels copy between atlases unchanged.
"""

import logging
from pathlib import Path
from typing import Union

from PIL import Image, UnidentifiedImageError

from chestconverter.exceptions import AtlasDecodeError, AtlasEncodeError
from chestconverter.schema.layout import ATLAS_SIZE

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def new_atlas(size: int = ATLAS_SIZE) -> Image.Image:
    """Create a transparent black RGBA atlas."""
    return Image.new('RGBA', (size, size), (0, 0, 0, 0))


def load_atlas(path: PathLike) -> Image.Image:
    """
    Decode a PNG atlas into an RGBA image.

    Raises:
        AtlasDecodeError: If the file is missing, unreadable or not an image
    """
    try:
        with Image.open(path) as img:
            img.load()
            atlas = img.convert('RGBA')
    except FileNotFoundError as e:
        logger.error(f"Atlas not found: {path}")
        raise AtlasDecodeError(path, "file not found") from e
    except Image.DecompressionBombError as e:
        logger.error(f"Atlas too large: {path}")
        raise AtlasDecodeError(path, str(e)) from e
    except UnidentifiedImageError as e:
        logger.error(f"Not an image: {path}")
        raise AtlasDecodeError(path, "not a valid image") from e
    except OSError as e:
        logger.error(f"Failed to read atlas {path}: {e}")
        raise AtlasDecodeError(path, str(e)) from e

    logger.debug(f"Loaded {atlas.width}x{atlas.height} atlas from {path}")
    return atlas


def save_atlas(atlas: Image.Image, path: PathLike) -> None:
    """
    Encode an atlas as PNG. The parent directory must already exist.

    Raises:
        AtlasEncodeError: If the file cannot be written
    """
    try:
        atlas.save(path, format='PNG')
    except OSError as e:
        logger.error(f"Failed to write atlas {path}: {e}")
        raise AtlasEncodeError(path, str(e)) from e

    logger.info(f"Saved atlas to {path}")
