"""Basic Poline usage examples.

Run directly with:
    python examples/basic_usage.py
"""
import logging

import numpy as np

from poline import Poline, FormatType, random_hsl_triple


def demonstrate_palette() -> None:
    # Two anchors, four interpolated colors between them.
    palette = Poline(
        anchor_colors=[(0.0, 1.0, 0.5), (180.0, 1.0, 0.5)],
        num_points=4,
    )
    print("HSL:", [tuple(round(c, 3) for c in hsl) for hsl in palette.get_colors()])
    print("RGB (int):", palette.get_rgb_colors(FormatType.INT))


def demonstrate_editing() -> None:
    # Seeded triple in a closed loop, eased differently per axis.
    palette = Poline(
        anchor_colors=random_hsl_triple(rng=np.random.default_rng(42)),
        num_points=3,
        position_function_x="sinusoidal",
        position_function_y="quadratic",
        position_function_z="arc",
        closed_loop=True,
    )
    print("Closed loop colors:", len(palette.get_colors()))

    anchor = palette.add_anchor_point(color=(90.0, 0.6, 0.6), insert_at_index=1)
    palette.update_anchor_point(point=anchor, color=(100.0, 0.6, 0.6))
    palette.shift_hue(30)

    nearest = palette.get_closest_anchor_point(hsl=(130.0, None, None))
    print("Nearest anchor to hue 130:", nearest)

    palette.remove_anchor_point(point=anchor)
    print("RGB array shape:", palette.get_colors_array("rgb").shape)


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    demonstrate_palette()
    demonstrate_editing()
