# anatomy_forge/post.py
"""
POST-PROCESSING: Reading a Generated Skeleton
=============================================

PURPOSE:
--------
The generator produces parent-local offsets. Most questions asked of a
skeleton afterwards need something else:
- Where is each bone in the world? (world_positions)
- How is mass distributed? (total_mass, mass_by_side)
- Are the two sides really mirror images? (mirror_mismatches)
- How big are the collision shapes? (shape_volume, volumetric_mass)
- A flat table for inspection and plotting (skeleton_table)

All functions are read-only: they never modify the skeleton and never write
anything to disk.

WORLD POSITIONS:
----------------
Bind rotations are identity, so a world position is the sum of local offsets
along the parent chain:

    world(bone) = world(parent) + bind_position(bone)
    world(root) = bind_position(root)
"""

import math
from typing import Dict, List, Optional

import numpy as np
import pandas as pd

from .catalog import Bone, Side, mirror, side_of
from .generative.segments import BONE_DENSITY
from .kernel.registry import JOINT_REGISTRY, JointRegistry
from .model import BoneDefinition, BoneShape, Box, Capsule, Sphere


def world_positions(
    skeleton: Dict[Bone, BoneDefinition],
    registry: Optional[JointRegistry] = None,
) -> Dict[Bone, np.ndarray]:
    """
    Bind-pose world position of every bone in the skeleton.

    Parameters:
    -----------
    skeleton : Dict[Bone, BoneDefinition]
        Output of generate_body
    registry : JointRegistry, optional
        Hierarchy used to chain offsets (default: JOINT_REGISTRY)

    Returns:
    --------
    Dict[Bone, np.ndarray]
        Shape (3,) array per bone. A bone whose parent is not in the
        skeleton is placed at its own local offset.
    """
    registry = registry if registry is not None else JOINT_REGISTRY
    world: Dict[Bone, np.ndarray] = {}

    def resolve(bone: Bone) -> np.ndarray:
        if bone in world:
            return world[bone]
        local = skeleton[bone].bind_position.as_array()
        parent = registry.parent(bone)
        if parent is None or parent not in skeleton:
            pos = local
        else:
            pos = resolve(parent) + local
        world[bone] = pos
        return pos

    for bone in skeleton:
        resolve(bone)
    return world


def total_mass(skeleton: Dict[Bone, BoneDefinition]) -> float:
    """Sum of all bone masses (kg)."""
    return float(sum(d.mass for d in skeleton.values()))


def mass_by_side(skeleton: Dict[Bone, BoneDefinition]) -> Dict[str, float]:
    """Bone mass grouped into 'left', 'right' and 'center' (kg)."""
    totals = {'left': 0.0, 'right': 0.0, 'center': 0.0}
    for bone, definition in skeleton.items():
        totals[_side_label(side_of(bone))] += definition.mass
    return totals


def _side_label(side: Optional[Side]) -> str:
    return 'center' if side is None else side.value.lower()


def mirror_mismatches(
    skeleton: Dict[Bone, BoneDefinition],
    tol: float = 1e-9,
) -> List[Bone]:
    """
    Left bones whose right twin is not an exact mirror image.

    Compared: length, mass, bind position (x flipped), bind rotation
    (reflected), joint limits and the number of collision shapes. A left
    bone whose twin is missing from the skeleton also counts as a mismatch.

    Returns:
    --------
    List[Bone]
        Left-side bones, in bone-id order. Empty for a symmetric skeleton.
    """
    mismatches = []
    for bone in sorted(skeleton):
        if side_of(bone) is not Side.LEFT:
            continue
        left = skeleton[bone]
        right = skeleton.get(mirror(bone))
        if right is None:
            mismatches.append(bone)
            continue

        same = (
            math.isclose(left.length, right.length, abs_tol=tol)
            and math.isclose(left.mass, right.mass, abs_tol=tol)
            and np.allclose(left.bind_position.mirrored().as_array(),
                            right.bind_position.as_array(), atol=tol, rtol=0)
            and np.allclose(left.bind_rotation.mirrored().as_array(),
                            right.bind_rotation.as_array(), atol=tol, rtol=0)
            and np.allclose(_limits_array(left), _limits_array(right), atol=tol, rtol=0)
            and len(left.collision_shapes) == len(right.collision_shapes)
        )
        if not same:
            mismatches.append(bone)
    return mismatches


def _limits_array(definition: BoneDefinition) -> np.ndarray:
    lim = definition.joint_limits
    return np.array([lim.min_pitch, lim.max_pitch, lim.min_yaw,
                     lim.max_yaw, lim.min_roll, lim.max_roll])


def shape_volume(shape: BoneShape) -> float:
    """
    Volume of one collision shape (m^3).

    Box half extents are doubled. Capsule length includes both caps, so the
    cylinder part is (length - 2r), clipped at zero.
    """
    if isinstance(shape, Box):
        h = shape.half_extents
        return 8.0 * abs(h.x * h.y * h.z)
    elif isinstance(shape, Capsule):
        r = shape.radius
        cylinder = math.pi * r**2 * max(shape.length - 2 * r, 0.0)
        return cylinder + 4.0 / 3.0 * math.pi * abs(r)**3
    elif isinstance(shape, Sphere):
        return 4.0 / 3.0 * math.pi * abs(shape.radius)**3
    else:
        raise ValueError(f"Unknown shape type: {type(shape).__name__}")


def volumetric_mass(definition: BoneDefinition, density: float = BONE_DENSITY) -> float:
    """
    Mass estimate from collision volume and bone density.

    Informational only: generated masses come from MASS_FRACTIONS. Bones
    without shapes return 0.
    """
    return density * sum(shape_volume(s) for s in definition.collision_shapes)


def skeleton_table(
    skeleton: Dict[Bone, BoneDefinition],
    registry: Optional[JointRegistry] = None,
) -> pd.DataFrame:
    """
    One row per bone, in bone-id order.

    Columns:
    --------
    bone, parent, joint_type, side, length, mass,
    x, y, z (local bind offset), wx, wy, wz (world), n_shapes

    parent and joint_type are None for the root.
    """
    registry = registry if registry is not None else JOINT_REGISTRY
    world = world_positions(skeleton, registry)

    rows = []
    for bone in sorted(skeleton):
        definition = skeleton[bone]
        joint = registry.lookup(bone)
        local = definition.bind_position
        wx, wy, wz = world[bone]
        rows.append({
            'bone': bone.name,
            'parent': joint.parent.name if joint is not None else None,
            'joint_type': joint.type.value if joint is not None else None,
            'side': _side_label(side_of(bone)),
            'length': definition.length,
            'mass': definition.mass,
            'x': local.x,
            'y': local.y,
            'z': local.z,
            'wx': float(wx),
            'wy': float(wy),
            'wz': float(wz),
            'n_shapes': len(definition.collision_shapes),
        })
    df = pd.DataFrame(rows)
    # Object columns so the root keeps None rather than a string-dtype NaN
    for col in ('parent', 'joint_type'):
        df[col] = pd.Series([row[col] for row in rows], index=df.index, dtype=object)
    return df
