"""
Box UV nets for chest atlases.

Computes the six face rectangles of a cuboid unwrapped into a texture atlas
with the game's model-format convention. Chest textures use the same box UV
template as any other entity model:

          +-----+-----+
          | Up  | Down|              ← length tall
    +-----+-----+-----+-----+
    | W   | N   | E   | S   |        ← height tall
    +-----+-----+-----+-----+
      L     W     L     W

    Side row width = 2 * (length + width)

The up/down pair is centred over the side row, which for the usual template
puts "up" directly above "north".
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Tuple


class Face(str, Enum):
    north = "north"
    east = "east"
    south = "south"
    west = "west"
    up = "up"
    down = "down"


@dataclass(frozen=True)
class Rect:
    """An axis-aligned pixel rectangle in an atlas."""
    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def box(self) -> Tuple[int, int, int, int]:
        """(x1, y1, x2, y2) with exclusive right/bottom edges, as Pillow expects."""
        return (self.x, self.y, self.right, self.bottom)

    def overlaps(self, other: "Rect") -> bool:
        if self.area == 0 or other.area == 0:
            return False
        return (
            self.x < other.right and other.x < self.right
            and self.y < other.bottom and other.y < self.bottom
        )


@dataclass(frozen=True)
class BoxNet:
    """The unfolded faces of one cuboid in an atlas."""
    north: Rect
    east: Rect
    south: Rect
    west: Rect
    up: Rect
    down: Rect

    def __getitem__(self, face: Face) -> Rect:
        return getattr(self, Face(face).value)

    def __iter__(self) -> Iterator[Tuple[Face, Rect]]:
        for face in Face:
            yield face, self[face]


def _rect(x: int, y: int, width: int, height: int) -> Rect:
    # Degenerate boxes collapse to empty rectangles rather than negative sizes
    return Rect(x, y, max(0, width), max(0, height))


def compute_box_net(
    width: int, height: int, length: int,
    origin_u: int, origin_v: int
) -> BoxNet:
    """
    Get the face rectangles of a width × height × length box unwrapped at
    (origin_u, origin_v).

    Args:
        width: Box size along X (north/south/up/down face width)
        height: Box size along Y (side face height)
        length: Box size along Z (east/west face width, up/down face height)
        origin_u: Left edge of the net in the atlas
        origin_v: Top edge of the net in the atlas

    Returns:
        BoxNet with one Rect per face
    """
    perimeter = 2 * (length + width)

    # Up/down pair, centred over the side row
    down_u = origin_u + perimeter // 2
    up_u = down_u - width
    up = _rect(up_u, origin_v, width, length)
    down = _rect(down_u, origin_v, width, length)

    # Side row: west, north, east, south
    side_v = origin_v + length
    west = _rect(origin_u, side_v, length, height)

    north_u = origin_u + length
    north = _rect(north_u, side_v, width, height)

    east_u = north_u + width
    east = _rect(east_u, side_v, length, height)

    south_u = east_u + length
    south = _rect(south_u, side_v, width, height)

    return BoxNet(north=north, east=east, south=south, west=west, up=up, down=down)
