"""
Debug overlay for box nets

Paints each face of a net in a fixed colour so the geometry can be checked
by eye against a real chest texture.
"""

from typing import Dict, Tuple

from PIL import Image, ImageDraw

from chestconverter.schema.layout import ChestLayout
from chestconverter.texturing.uv_net import BoxNet, Face, compute_box_net

FACE_COLORS: Dict[Face, Tuple[int, int, int, int]] = {
    Face.north: (0, 0, 255, 255),      # blue
    Face.east: (0, 255, 0, 255),       # green
    Face.south: (255, 255, 0, 255),    # yellow
    Face.west: (255, 0, 0, 255),       # red
    Face.up: (255, 200, 0, 255),       # orange
    Face.down: (255, 0, 255, 255),     # magenta
}


def draw_box_net(image: Image.Image, net: BoxNet) -> None:
    """Fill every face rectangle of a net with its highlight colour."""
    draw = ImageDraw.Draw(image)
    for face, rect in net:
        if rect.area == 0:
            continue
        draw.rectangle(
            [rect.x, rect.y, rect.right - 1, rect.bottom - 1],
            fill=FACE_COLORS[face],
        )


def draw_layout(image: Image.Image, layout: ChestLayout) -> None:
    """Highlight the nets of every box in a layout."""
    for box in layout.boxes:
        net = compute_box_net(box.width, box.height, box.length, box.u, box.v)
        draw_box_net(image, net)
