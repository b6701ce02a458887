"""
Atlas blitter - moves chest faces between the legacy and split atlas formats.

Every converted pixel comes from a face rectangle of a source box net and
lands in a face rectangle of a destination box net, optionally mirrored.
Which face goes where is a fixed property of the two formats, so the
mappings below are lookup tables rather than something derived from the
geometry.

Split (legacy double atlas -> left + right atlases):
    The double box net is twice as wide as a single one. Each half-width
    destination net takes one half of the north/up/down/south strips,
    selected by shifting the source read by half the box width. The east face
    only goes to the left atlas and the west face only to the right atlas;
    the other two become the hidden seam between the halves.

Flip (legacy single atlas -> new single atlas):
    Same net on both sides, faces exchanged and mirrored in place.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

from PIL import Image

from chestconverter.codec import new_atlas
from chestconverter.exceptions import AtlasGeometryError
from chestconverter.schema.layout import (
    BoxSpec,
    ChestLayout,
    DOUBLE_LAYOUT,
    SINGLE_LAYOUT,
)
from chestconverter.texturing.uv_net import Face, Rect, compute_box_net

logger = logging.getLogger(__name__)

LEFT = "left"
RIGHT = "right"


@dataclass(frozen=True)
class FaceCopy:
    """One face transfer between two box nets."""
    source: Face
    dest: Face
    flip_x: bool
    flip_y: bool
    target: Optional[str] = None  # LEFT/RIGHT for split copies
    shift_half: bool = False  # read from the second half of the source face


# Order matches the legacy converter: right half before left half per face
SPLIT_COPIES = (
    FaceCopy(Face.north, Face.south, True, True, RIGHT, shift_half=False),
    FaceCopy(Face.north, Face.south, True, True, LEFT, shift_half=True),

    FaceCopy(Face.up, Face.down, False, True, RIGHT, shift_half=False),
    FaceCopy(Face.up, Face.down, False, True, LEFT, shift_half=True),

    FaceCopy(Face.down, Face.up, False, True, RIGHT, shift_half=False),
    FaceCopy(Face.down, Face.up, False, True, LEFT, shift_half=True),

    FaceCopy(Face.east, Face.east, True, True, LEFT, shift_half=False),

    FaceCopy(Face.west, Face.west, True, True, RIGHT, shift_half=False),

    FaceCopy(Face.south, Face.north, True, True, RIGHT, shift_half=True),
    FaceCopy(Face.south, Face.north, True, True, LEFT, shift_half=False),
)

FLIP_COPIES = (
    FaceCopy(Face.up, Face.down, False, True),
    FaceCopy(Face.down, Face.up, False, True),
    FaceCopy(Face.north, Face.south, True, True),
    FaceCopy(Face.east, Face.east, True, True),
    FaceCopy(Face.west, Face.west, True, True),
    FaceCopy(Face.south, Face.north, True, True),
)

# Front/back stay put and the sides are only flipped vertically
FLIP_SINGLE_COPIES = (
    FaceCopy(Face.up, Face.down, False, True),
    FaceCopy(Face.down, Face.up, False, True),
    FaceCopy(Face.north, Face.north, True, True),
    FaceCopy(Face.east, Face.east, False, True),
    FaceCopy(Face.west, Face.west, False, True),
    FaceCopy(Face.south, Face.south, True, True),
)


def _check_bounds(image: Image.Image, rect: Rect, role: str) -> None:
    img_w, img_h = image.size
    if rect.x < 0 or rect.y < 0 or rect.right > img_w or rect.bottom > img_h:
        raise AtlasGeometryError(
            f"{role} region ({rect.x}, {rect.y}, {rect.width}x{rect.height}) is outside the {img_w}x{img_h} image"
        )


def copy_rect(
    source: Image.Image,
    src: Rect,
    dest: Image.Image,
    dst: Rect,
    offset_x: int = 0,
    offset_y: int = 0,
    flip_x: bool = False,
    flip_y: bool = False,
) -> None:
    """
    Copy the overlap of two face rectangles from one atlas into another.

    The copied block is min(src.width, dst.width) x min(src.height, dst.height),
    read at the source rectangle's origin plus (offset_x, offset_y) and written
    at the destination rectangle's origin. Mirroring happens within that block.
    Destination pixels are replaced outright, alpha included.

    Raises:
        AtlasGeometryError: If the block would read or write outside either image
    """
    w = min(src.width, dst.width)
    h = min(src.height, dst.height)
    if w <= 0 or h <= 0:
        return

    read = Rect(src.x + offset_x, src.y + offset_y, w, h)
    write = Rect(dst.x, dst.y, w, h)
    _check_bounds(source, read, "Source")
    _check_bounds(dest, write, "Destination")

    block = source.crop(read.box())
    if block.mode != dest.mode:
        block = block.convert(dest.mode)
    if flip_x:
        block = block.transpose(Image.Transpose.FLIP_LEFT_RIGHT)
    if flip_y:
        block = block.transpose(Image.Transpose.FLIP_TOP_BOTTOM)

    # No mask: paste overwrites every channel
    dest.paste(block, write.box())


def split_box(
    source: Image.Image,
    left: Image.Image,
    right: Image.Image,
    box: BoxSpec,
) -> None:
    """
    Split one double-width box of a legacy double atlas into two halves.

    Args:
        source: Legacy double atlas
        left: Destination atlas for the left chest half
        right: Destination atlas for the right chest half
        box: The full-width box in the legacy atlas
    """
    half = box.width // 2

    src_net = compute_box_net(box.width, box.height, box.length, box.u, box.v)
    dst_net = compute_box_net(half, box.height, box.length, box.u, box.v)

    targets = {LEFT: left, RIGHT: right}
    for copy in SPLIT_COPIES:
        copy_rect(
            source, src_net[copy.source],
            targets[copy.target], dst_net[copy.dest],
            half if copy.shift_half else 0, 0,
            copy.flip_x, copy.flip_y,
        )

    logger.debug(f"Split {box.name} ({box.width}x{box.height}x{box.length}) into halves")


def flip_box(
    source: Image.Image,
    dest: Image.Image,
    box: BoxSpec,
    flip_single: bool = False,
) -> None:
    """
    Convert one box of a legacy single atlas into the new orientation.

    Args:
        source: Legacy single atlas
        dest: Destination atlas
        box: The box in the legacy atlas
        flip_single: Keep north/south in place (for assets with front and back exchanged)
    """
    net = compute_box_net(box.width, box.height, box.length, box.u, box.v)

    copies = FLIP_SINGLE_COPIES if flip_single else FLIP_COPIES
    for copy in copies:
        copy_rect(
            source, net[copy.source],
            dest, net[copy.dest],
            0, 0,
            copy.flip_x, copy.flip_y,
        )

    logger.debug(f"Flipped {box.name} ({box.width}x{box.height}x{box.length}), flip_single={flip_single}")


def split_atlas(
    source: Image.Image,
    layout: ChestLayout = DOUBLE_LAYOUT,
    left: Optional[Image.Image] = None,
    right: Optional[Image.Image] = None,
) -> Tuple[Image.Image, Image.Image]:
    """
    Split a legacy double chest atlas into left and right atlases.

    Destination atlases are allocated fresh unless given; the source is never
    modified.

    Returns:
        Tuple of (left, right) atlases
    """
    left = left if left is not None else new_atlas()
    right = right if right is not None else new_atlas()

    for box in layout.boxes:
        split_box(source, left, right, box)

    return left, right


def flip_atlas(
    source: Image.Image,
    layout: ChestLayout = SINGLE_LAYOUT,
    flip_single: bool = False,
    dest: Optional[Image.Image] = None,
) -> Image.Image:
    """
    Convert a legacy single chest atlas to the new single chest atlas.

    Returns:
        The converted atlas
    """
    dest = dest if dest is not None else new_atlas()

    for box in layout.boxes:
        flip_box(source, dest, box, flip_single=flip_single)

    return dest
