"""
chestconverter Quick Start Example

Converts the vanilla-named chest textures of an old resource pack into the
split chest format.
"""

from pathlib import Path

from chestconverter import convert_both, convert_single, convert_single_with_flip

old = Path("old_pack/assets/minecraft/textures/entity/chest")
new = Path("new_pack/assets/minecraft/textures/entity/chest")
new.mkdir(parents=True, exist_ok=True)

print("Converting normal and trapped chests...")
for name in ("normal", "trapped", "christmas"):
    convert_both(old, new, name)
    print(f"✅ Saved {name}.png, {name}_left.png and {name}_right.png")

print("\nConverting the ender chest (single only)...")
convert_single(old, new, "ender")
print("✅ Saved ender.png")

# Some packs ship single chests with front and back exchanged
convert_single_with_flip(old, new, "midnight")
print("✅ Saved midnight.png")

print(f"\nDone! Check {new} for the converted textures.")
