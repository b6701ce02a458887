"""
Chest atlas layouts.

A chest model is three stacked cuboids, each unwrapped into the same 64x64
atlas with its own box UV net:

- body:  the lower box, net origin (0, 19)
- lid:   the upper box, net origin (0, 0)
- latch: the small lock on the front, net origin (0, 0)

Legacy double chests pack both halves into one box twice as wide as a half.
The new format stores each half in its own atlas. A half is 15 pixels wide,
one more than a single chest, so the double body and lid are 30 wide.

All sizes are in atlas pixels.
"""

from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field

ATLAS_SIZE = 64


class BoxSpec(BaseModel):
    """Dimensions and net origin of one cuboid in an atlas."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    name: str = Field(..., description="Human-readable name (body, lid, latch).")
    width: int = Field(..., ge=0, description="Size along X in pixels.")
    height: int = Field(..., ge=0, description="Size along Y in pixels.")
    length: int = Field(..., ge=0, description="Size along Z in pixels.")
    origin: Tuple[int, int] = Field((0, 0), description="Top-left corner (u, v) of the box net.")

    @property
    def u(self) -> int:
        return self.origin[0]

    @property
    def v(self) -> int:
        return self.origin[1]


class ChestLayout(BaseModel):
    """The cuboids of one chest atlas, in blit order."""
    model_config = ConfigDict(extra='forbid', frozen=True)

    boxes: List[BoxSpec] = Field(..., min_length=1)


class ConversionOptions(BaseModel):
    """Per-job conversion switches."""
    model_config = ConfigDict(extra='forbid')

    flip_single: bool = Field(False, description="""
        Keep the front and back faces of single chests in place instead of
        swapping them. Some texture packs shipped single chests with the
        front and back already exchanged; this switch undoes that.
    """)
    debug: bool = Field(False, description="Paint face highlight colours under the converted pixels.")


SINGLE_LAYOUT = ChestLayout(boxes=[
    BoxSpec(name="body", width=14, height=10, length=14, origin=(0, 19)),
    BoxSpec(name="lid", width=14, height=5, length=14, origin=(0, 0)),
    BoxSpec(name="latch", width=2, height=4, length=1, origin=(0, 0)),
])

DOUBLE_LAYOUT = ChestLayout(boxes=[
    BoxSpec(name="body", width=30, height=10, length=14, origin=(0, 19)),
    BoxSpec(name="lid", width=30, height=5, length=14, origin=(0, 0)),
    BoxSpec(name="latch", width=2, height=4, length=1, origin=(0, 0)),
])

# Face highlight layouts for the debug overlay, drawn on the output atlases.
SINGLE_DEBUG_LAYOUT = SINGLE_LAYOUT

DOUBLE_DEBUG_LAYOUT = ChestLayout(boxes=[
    BoxSpec(name="body", width=15, height=10, length=14, origin=(0, 19)),
    BoxSpec(name="lid", width=15, height=5, length=14, origin=(0, 0)),
    BoxSpec(name="latch", width=1, height=4, length=1, origin=(0, 0)),
])
