# tests/test_post.py
"""
Test post-processing of a generated skeleton: world positions, mass
summaries, symmetry audit, shape volumes and the summary table.
"""

import math
from dataclasses import replace

import numpy as np
import pandas as pd
import pytest

from anatomy_forge.catalog import Bone, LUMBAR, THORACIC, CERVICAL
from anatomy_forge.generative import BONE_DENSITY, derive_proportions, generate_body
from anatomy_forge.model import BodyDNA, BoneDefinition, Box, Capsule, Quat, Sphere, Vec3
from anatomy_forge.post import (
    mass_by_side,
    mirror_mismatches,
    shape_volume,
    skeleton_table,
    total_mass,
    volumetric_mass,
    world_positions,
)


@pytest.fixture(scope="module")
def adult():
    return generate_body(BodyDNA.average_adult())


def test_world_positions_chain_offsets(adult):
    """
    World position = sum of local offsets from the root down.
    """
    world = world_positions(adult)
    assert len(world) == 206

    np.testing.assert_allclose(world[Bone.SACRUM], [0.0, 0.864, 0.0])

    # Top of the neck: hip height + the whole spine
    torso = derive_proportions(BodyDNA.average_adult()).torso_length
    np.testing.assert_allclose(world[Bone.CERVICAL_1_ATLAS], [0.0, 0.864 + torso, 0.0])

    # Femur hangs off the hip bone
    expected = (adult[Bone.SACRUM].bind_position.as_array()
                + adult[Bone.HIP_BONE_LEFT].bind_position.as_array()
                + adult[Bone.FEMUR_LEFT].bind_position.as_array())
    np.testing.assert_allclose(world[Bone.FEMUR_LEFT], expected)

    print(f"✓ Atlas at {world[Bone.CERVICAL_1_ATLAS][1]:.3f} m")


def test_world_positions_are_symmetric(adult):
    world = world_positions(adult)
    left = world[Bone.DISTAL_PHALANX_LITTLE_TOE_LEFT]
    right = world[Bone.DISTAL_PHALANX_LITTLE_TOE_RIGHT]
    np.testing.assert_allclose(right, left * np.array([-1.0, 1.0, 1.0]), atol=1e-12)


def test_feet_are_below_the_hips(adult):
    world = world_positions(adult)
    assert world[Bone.TALUS_LEFT][1] < world[Bone.TIBIA_LEFT][1] < world[Bone.FEMUR_LEFT][1]


def test_total_mass_and_sides(adult):
    total = total_mass(adult)
    sides = mass_by_side(adult)

    assert set(sides) == {'left', 'right', 'center'}
    assert sides['left'] == pytest.approx(sides['right'])
    assert sum(sides.values()) == pytest.approx(total)
    assert total > 0.10 * 78.0


def test_mirror_mismatches(adult):
    assert mirror_mismatches(adult) == []

    broken = dict(adult)
    broken[Bone.ULNA_RIGHT] = replace(adult[Bone.ULNA_RIGHT], length=1.0)
    assert mirror_mismatches(broken) == [Bone.ULNA_LEFT]

    # A right bone rotated like its twin rather than reflected
    tilted = Quat(0.9238795, 0.0, 0.3826834, 0.0)
    turned = dict(adult)
    turned[Bone.RADIUS_LEFT] = replace(adult[Bone.RADIUS_LEFT], bind_rotation=tilted)
    turned[Bone.RADIUS_RIGHT] = replace(adult[Bone.RADIUS_RIGHT], bind_rotation=tilted)
    assert mirror_mismatches(turned) == [Bone.RADIUS_LEFT]

    turned[Bone.RADIUS_RIGHT] = replace(adult[Bone.RADIUS_RIGHT], bind_rotation=tilted.mirrored())
    assert mirror_mismatches(turned) == []

    missing = dict(adult)
    del missing[Bone.FEMUR_RIGHT]
    assert Bone.FEMUR_LEFT in mirror_mismatches(missing)


def test_shape_volumes():
    assert shape_volume(Box.of(0.5, 0.5, 0.5)) == pytest.approx(1.0)
    assert shape_volume(Sphere(1.0)) == pytest.approx(4.0 / 3.0 * math.pi)

    # Capsule of length 2r is a sphere
    assert shape_volume(Capsule(0.1, 0.2)) == pytest.approx(shape_volume(Sphere(0.1)))
    assert shape_volume(Capsule(0.1, 1.2)) == pytest.approx(
        math.pi * 0.01 * 1.0 + 4.0 / 3.0 * math.pi * 0.001)

    with pytest.raises(ValueError):
        shape_volume("not a shape")


def test_volumetric_mass_uses_density(adult):
    femur = adult[Bone.FEMUR_LEFT]
    vol = sum(shape_volume(s) for s in femur.collision_shapes)
    assert volumetric_mass(femur) == pytest.approx(BONE_DENSITY * vol)
    assert volumetric_mass(femur, density=1000.0) == pytest.approx(1000.0 * vol)

    # No shapes, no volume
    bare = BoneDefinition(length=0.1, bind_position=Vec3())
    assert volumetric_mass(bare) == 0.0


def test_skeleton_table(adult):
    df = skeleton_table(adult)

    assert isinstance(df, pd.DataFrame)
    assert len(df) == 206
    for col in ('bone', 'parent', 'joint_type', 'side', 'length', 'mass',
                'x', 'y', 'z', 'wx', 'wy', 'wz', 'n_shapes'):
        assert col in df.columns

    root = df[df['bone'] == 'SACRUM'].iloc[0]
    assert root['parent'] is None
    assert root['joint_type'] is None
    assert df['parent'].dtype == object
    assert df['joint_type'].dtype == object
    assert root['side'] == 'center'

    humerus = df[df['bone'] == 'HUMERUS_LEFT'].iloc[0]
    assert humerus['parent'] == 'SCAPULA_LEFT'
    assert humerus['joint_type'] == 'ball_and_socket'
    assert humerus['side'] == 'left'

    assert df['mass'].sum() == pytest.approx(total_mass(adult))
    assert (df.groupby('side').size()['left'] == df.groupby('side').size()['right'])

    spine = df[df['bone'].isin([b.name for b in LUMBAR + THORACIC + CERVICAL])]
    assert len(spine) == 24


if __name__ == "__main__":
    skeleton = generate_body(BodyDNA.average_adult())
    print(skeleton_table(skeleton).head(20).to_string())
