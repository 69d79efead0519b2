"""Fixed geometry and layer names for the generated footprints."""

# Rat-bite breakaway tab
RAT_BITE_FOOTPRINT_ID = "zzkeeb:Hole_Breakaway-Tabs"
"""Library:footprint identifier written in the module header."""

RAT_BITE_HOLE_COUNT = 9
"""Number of non-plated holes in the tab."""

RAT_BITE_HOLE_PITCH = 0.59375
"""Centre-to-centre spacing of the holes in mm."""

RAT_BITE_HOLE_DIAMETER = 0.3
"""Hole diameter (pad size and drill) in mm."""

RAT_BITE_PAD_ANGLE = 90
"""Rotation applied to every hole pad."""

RAT_BITE_GUIDE_HALF_LENGTH = 3
"""Guide lines run from -3 to +3 mm, spanning 6 mm."""

RAT_BITE_GUIDE_OFFSET = 0.2
"""Guide lines sit at y = -0.2 and y = +0.2 mm."""

RAT_BITE_GUIDE_WIDTH = 0.12
"""Stroke width of the guide lines in mm."""

REFERENCE_FONT_SIZE = 1.27
REFERENCE_FONT_THICKNESS = 0.15

# Layer names, parsed literally by KiCad
FRONT_COPPER = "F.Cu"
FRONT_SILKSCREEN = "F.SilkS"
DRAWINGS_LAYER = "Dwgs.User"
ALL_COPPER = "*.Cu"
ALL_MASK = "*.Mask"
