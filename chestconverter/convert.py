"""
Chest texture conversion jobs

Converts legacy chest atlases in one folder into the split format in another.
File names follow the game's texture naming:

    <name>.png          single chest (legacy and new)
    <name>_double.png   legacy double chest
    <name>_left.png     new left half of a double chest
    <name>_right.png    new right half of a double chest
"""

import logging
from pathlib import Path
from typing import Optional, Tuple, Union

from PIL import Image

from chestconverter.codec import load_atlas, new_atlas, save_atlas
from chestconverter.schema.layout import (
    ConversionOptions,
    DOUBLE_DEBUG_LAYOUT,
    DOUBLE_LAYOUT,
    SINGLE_DEBUG_LAYOUT,
    SINGLE_LAYOUT,
)
from chestconverter.texturing.blitter import flip_atlas, split_atlas
from chestconverter.texturing.debug_overlay import draw_layout

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def single_paths(from_dir: PathLike, to_dir: PathLike, name: str) -> Tuple[Path, Path]:
    """Resolve (source, output) paths of a single chest texture"""
    return Path(from_dir) / f"{name}.png", Path(to_dir) / f"{name}.png"


def double_paths(from_dir: PathLike, to_dir: PathLike, name: str) -> Tuple[Path, Path, Path]:
    """Resolve (source, left output, right output) paths of a double chest texture"""
    return (
        Path(from_dir) / f"{name}_double.png",
        Path(to_dir) / f"{name}_left.png",
        Path(to_dir) / f"{name}_right.png",
    )


def convert_single_atlas(source: Image.Image, options: Optional[ConversionOptions] = None) -> Image.Image:
    """
    Convert an in-memory legacy single chest atlas.

    Args:
        source: Decoded legacy single chest atlas
        options: Job switches (flip_single, debug)

    Returns:
        A new 64x64 atlas in the current single chest format
    """
    options = options or ConversionOptions()

    dest = new_atlas()
    if options.debug:
        draw_layout(dest, SINGLE_DEBUG_LAYOUT)

    return flip_atlas(source, SINGLE_LAYOUT, flip_single=options.flip_single, dest=dest)


def split_double_atlas(
    source: Image.Image,
    options: Optional[ConversionOptions] = None
) -> Tuple[Image.Image, Image.Image]:
    """
    Split an in-memory legacy double chest atlas.

    The flip_single switch has no effect on double chests.

    Returns:
        Tuple of new (left, right) 64x64 atlases
    """
    options = options or ConversionOptions()

    left = new_atlas()
    right = new_atlas()
    if options.debug:
        draw_layout(left, DOUBLE_DEBUG_LAYOUT)
        draw_layout(right, DOUBLE_DEBUG_LAYOUT)

    return split_atlas(source, DOUBLE_LAYOUT, left=left, right=right)


def convert_single(
    from_dir: PathLike,
    to_dir: PathLike,
    name: str,
    options: Optional[ConversionOptions] = None
) -> Path:
    """
    Convert <from_dir>/<name>.png into <to_dir>/<name>.png.

    Raises:
        AtlasDecodeError: If the source atlas cannot be read
        AtlasEncodeError: If the output atlas cannot be written

    Examples:
        >>> convert_single("old/entity/chest", "new/entity/chest", "normal")
    """
    source_path, output_path = single_paths(from_dir, to_dir, name)

    source = load_atlas(source_path)
    converted = convert_single_atlas(source, options)
    save_atlas(converted, output_path)

    logger.info(f"Converted single chest '{name}'")
    return output_path


def convert_single_with_flip(from_dir: PathLike, to_dir: PathLike, name: str) -> Path:
    """Convert a single chest whose front and back textures are exchanged."""
    return convert_single(from_dir, to_dir, name, ConversionOptions(flip_single=True))


def convert_double(
    from_dir: PathLike,
    to_dir: PathLike,
    name: str,
    options: Optional[ConversionOptions] = None
) -> Tuple[Path, Path]:
    """
    Split <from_dir>/<name>_double.png into <to_dir>/<name>_left.png and
    <to_dir>/<name>_right.png.

    Both halves are converted before either is written. If either write fails
    the whole job fails, even when the other half was already saved.

    Raises:
        AtlasDecodeError: If the source atlas cannot be read
        AtlasEncodeError: If either output atlas cannot be written
    """
    source_path, left_path, right_path = double_paths(from_dir, to_dir, name)

    source = load_atlas(source_path)
    left, right = split_double_atlas(source, options)
    save_atlas(left, left_path)
    save_atlas(right, right_path)

    logger.info(f"Converted double chest '{name}'")
    return left_path, right_path


def convert_both(
    from_dir: PathLike,
    to_dir: PathLike,
    name: str,
    options: Optional[ConversionOptions] = None
) -> Tuple[Path, Path, Path]:
    """
    Convert both the single and the double chest textures sharing a name.

    Returns:
        Tuple of (single, left, right) output paths
    """
    single_path = convert_single(from_dir, to_dir, name, options)
    left_path, right_path = convert_double(from_dir, to_dir, name, options)
    return single_path, left_path, right_path
