#!/usr/bin/env python3
"""
RUN_AVERAGE_ADULT: Generate and Inspect a Skeleton
==================================================

This demo shows the generate-then-inspect workflow:
1. Define genetic parameters (height, mass, build)
2. Generate the 206-bone skeleton
3. Print a few representative bones
4. Summarise mass distribution and check left/right symmetry

Run with:
    python demos/run_average_adult.py
"""

import logging
import math
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from anatomy_forge import Bone, BodyDNA, generate_body, get_joint
from anatomy_forge.post import mass_by_side, mirror_mismatches, skeleton_table, total_mass


def print_header(text: str):
    """Print a formatted section header."""
    print("\n" + "=" * 70)
    print(f"  {text}")
    print("=" * 70)


def describe(skeleton, bone: Bone):
    d = skeleton[bone]
    joint = get_joint(bone)
    p = d.bind_position
    print(f"\n  {bone.name}")
    print(f"    Length:     {d.length:.3f} m")
    print(f"    Mass:       {d.mass:.3f} kg")
    print(f"    Bind pos:   ({p.x:+.3f}, {p.y:+.3f}, {p.z:+.3f})")
    print(f"    Shapes:     {', '.join(type(s).__name__ for s in d.collision_shapes) or '-'}")
    if joint is None:
        print("    Joint:      (root)")
    else:
        lim = d.joint_limits
        print(f"    Joint:      {joint.type.value} to {joint.parent.name}")
        print(f"    Pitch:      {math.degrees(lim.min_pitch):.0f}..{math.degrees(lim.max_pitch):.0f} deg")


def main():
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    print_header("GENETIC PARAMETERS")
    dna = BodyDNA.average_adult()
    print(f"  Height: {dna.height_m} m   Mass: {dna.mass_kg} kg   Build: {dna.build_factor}")

    print_header("GENERATING SKELETON")
    skeleton = generate_body(dna)
    print(f"  Bones: {len(skeleton)}")

    print_header("SAMPLE BONES")
    for bone in (Bone.SACRUM, Bone.FEMUR_LEFT, Bone.HUMERUS_RIGHT, Bone.OCCIPITAL):
        describe(skeleton, bone)

    print_header("MASS & SYMMETRY")
    sides = mass_by_side(skeleton)
    print(f"  Total bone mass: {total_mass(skeleton):.2f} kg")
    print(f"  Left / right / center: {sides['left']:.2f} / {sides['right']:.2f} / {sides['center']:.2f} kg")
    mismatches = mirror_mismatches(skeleton)
    print(f"  Mirror mismatches: {len(mismatches)}")

    df = skeleton_table(skeleton)
    print("\n  Heaviest bones:")
    print(df.nlargest(5, 'mass')[['bone', 'joint_type', 'mass', 'wy']].to_string(index=False))

    return skeleton


if __name__ == "__main__":
    main()
