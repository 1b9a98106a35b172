#!/usr/bin/env python3
"""
PLOT_BIND_POSE: Draw Skeletons for Three Body Types
===================================================

Generates a slender, average and stocky body and saves a 3D stick-figure
plot of each bind pose.

Run with:
    python demos/plot_bind_pose.py

Outputs:
    artifacts/skeleton_slender.png
    artifacts/skeleton_average.png
    artifacts/skeleton_stocky.png
"""

import logging
import os
import sys
from pathlib import Path

import matplotlib
matplotlib.use("Agg")

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from anatomy_forge import CONFIG, BodyDNA, generate_body
from anatomy_forge.viz import plot_skeleton

BODIES = {
    'slender': BodyDNA(height_m=1.75, mass_kg=60.0, build_factor=0.7),
    'average': BodyDNA.average_adult(),
    'stocky': BodyDNA(height_m=1.70, mass_kg=95.0, build_factor=1.4, leg_ratio=0.46),
}


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    os.makedirs("artifacts", exist_ok=True)

    for name, dna in BODIES.items():
        skeleton = generate_body(dna)
        plot_skeleton(
            skeleton,
            outpath=f"artifacts/skeleton_{name}.png",
            title=f"{name.title()} ({dna.height_m} m, {dna.mass_kg:.0f} kg)",
            color_by=CONFIG.plot_color_by,
        )


if __name__ == "__main__":
    main()
