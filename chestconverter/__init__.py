"""
chestconverter - Convert legacy chest textures to the split chest atlas format

Older resource packs ship one atlas per single chest and one double-width
atlas per double chest. Current versions expect single chests in a new
orientation and double chests as separate left and right atlases. This
package moves every face of the chest model into its new place.
"""

__version__ = "0.1.0"

from chestconverter.convert import (
    convert_single,
    convert_single_with_flip,
    convert_double,
    convert_both,
    convert_single_atlas,
    split_double_atlas,
)
from chestconverter.schema.layout import ConversionOptions

__all__ = [
    "convert_single",
    "convert_single_with_flip",
    "convert_double",
    "convert_both",
    "convert_single_atlas",
    "split_double_atlas",
    "ConversionOptions",
]
