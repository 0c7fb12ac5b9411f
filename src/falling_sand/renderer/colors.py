"""Color definitions for the renderer."""

import numpy as np

from ..simulation.cell import Material

# Background
BG_DARK = (28, 28, 32)
BG_SIDEBAR = (38, 38, 45)

# Materials
AIR_COLOR = (18, 18, 24)
SAND_COLOR = (230, 204, 128)
WOOD_COLOR = (120, 78, 40)
FIRE_HOT = (255, 220, 90)  # Fresh flame
FIRE_COOL = (200, 40, 0)  # Nearly burnt out

# Heat at which fire is drawn fully hot
FIRE_FULL_HEAT = 30

PALETTE = np.array(
    [
        AIR_COLOR,  # AIR
        SAND_COLOR,  # SAND
        WOOD_COLOR,  # WOOD
        FIRE_HOT,  # FIRE (tinted by heat below)
    ],
    dtype=np.uint8,
)

# UI
TEXT_PRIMARY = (240, 240, 245)
TEXT_SECONDARY = (160, 160, 170)
DIVIDER = (60, 60, 70)


def cell_colors(materials: np.ndarray, amounts: np.ndarray) -> np.ndarray:
    """
    Map a block's cell arrays to RGB.

    Args:
        materials: Material codes indexed [y, x]
        amounts: Payload amounts indexed [y, x]

    Returns:
        uint8 array of shape [y, x, 3]
    """
    rgb = PALETTE[materials]
    fire = materials == Material.FIRE
    if fire.any():
        t = np.clip(amounts[fire] / FIRE_FULL_HEAT, 0.0, 1.0)[:, None]
        cool = np.array(FIRE_COOL, dtype=np.float32)
        hot = np.array(FIRE_HOT, dtype=np.float32)
        rgb[fire] = (cool + (hot - cool) * t).astype(np.uint8)
    return rgb
