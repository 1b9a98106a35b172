# anatomy_forge/model.py
"""
MODEL DEFINITIONS: DNA, Shapes and Bone Definitions
===================================================

PURPOSE:
--------
This module defines the value types the generator consumes and produces:
- BodyDNA: the five genetic scalars that drive every proportion
- Vec3 / Quat: small immutable vector and rotation values
- Box / Capsule / Sphere: collision shapes in a bone's local frame
- BoneDefinition: the generated record for one bone

COORDINATE CONVENTION:
----------------------
    x = lateral (left side is +x)
    y = up
    z = forward

Every bind position is expressed in the PARENT bone's local frame
("stacking"): a child usually sits at (0, parent_length, 0) or
(0, -parent_length, 0) relative to its parent. The root is the exception,
its position is a world-like offset (hip height).

Bind rotations are always identity. That keeps world positions a simple sum
of offsets along the parent chain (see post.world_positions).
"""

from dataclasses import dataclass, field, replace
from typing import Tuple, Union

import numpy as np

from .kernel.limits import JointLimits, LOCKED


@dataclass(frozen=True)
class BodyDNA:
    """
    The genetic blueprint for one body.

    Parameters:
    -----------
    height_m : float
        Standing height (meters)
    mass_kg : float
        Total body mass (kg). Every bone mass is a fixed fraction of this.
    build_factor : float
        0.5 (slender) .. 1.5 (stocky). Scales widths and thicknesses.
    head_ratio : float
        Head size as a fraction of height (1/8 is typical)
    leg_ratio : float
        Leg length as a fraction of height (~0.48)

    Notes:
    ------
    No range checks are applied. Degenerate input (negative height, zero
    mass) still produces a structurally complete skeleton.
    """
    height_m: float
    mass_kg: float
    build_factor: float = 1.0
    head_ratio: float = 0.125
    leg_ratio: float = 0.48

    @classmethod
    def average_adult(cls) -> 'BodyDNA':
        return cls(height_m=1.80, mass_kg=78.0, build_factor=1.0,
                   head_ratio=0.125, leg_ratio=0.48)


@dataclass(frozen=True)
class Vec3:
    """Immutable 3-vector (meters)."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def mirrored(self) -> 'Vec3':
        """Reflect across the sagittal plane (flip the lateral axis)."""
        return Vec3(-self.x, self.y, self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=float)


@dataclass(frozen=True)
class Quat:
    """Immutable unit quaternion (w, x, y, z). Defaults to identity."""
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def mirrored(self) -> 'Quat':
        # Reflection across the YZ plane keeps rotation about x, flips y and z.
        return Quat(self.w, self.x, -self.y, -self.z)

    def as_array(self) -> np.ndarray:
        return np.array([self.w, self.x, self.y, self.z], dtype=float)


ORIGIN = Vec3()
IDENTITY = Quat()


# ============================================================================
# COLLISION SHAPES
# ============================================================================
# Three closed variants. All geometry lives in the owning bone's local frame.

@dataclass(frozen=True)
class Box:
    """
    Box/cuboid collision shape.

    Parameters:
    -----------
    half_extents : Vec3
        Half-width, half-height, half-depth (meters)
    offset : Vec3
        Local position of the box center relative to the bone origin
    rotation : Quat
        Local rotation of the box
    """
    half_extents: Vec3
    offset: Vec3 = ORIGIN
    rotation: Quat = IDENTITY

    @classmethod
    def of(cls, half_width: float, half_height: float, half_depth: float) -> 'Box':
        """Centered, unrotated box from three half extents."""
        return cls(Vec3(half_width, half_height, half_depth))

    def mirrored(self) -> 'Box':
        return replace(self, offset=self.offset.mirrored(), rotation=self.rotation.mirrored())


@dataclass(frozen=True)
class Capsule:
    """
    Capsule collision shape (cylinder with hemispherical caps).

    `length` is the total length including both caps. The capsule axis is
    the bone's local y axis.
    """
    radius: float
    length: float
    offset: Vec3 = ORIGIN
    rotation: Quat = IDENTITY

    def mirrored(self) -> 'Capsule':
        return replace(self, offset=self.offset.mirrored(), rotation=self.rotation.mirrored())


@dataclass(frozen=True)
class Sphere:
    """Sphere collision shape."""
    radius: float
    offset: Vec3 = ORIGIN

    def mirrored(self) -> 'Sphere':
        return replace(self, offset=self.offset.mirrored())


BoneShape = Union[Box, Capsule, Sphere]


@dataclass(frozen=True)
class BoneDefinition:
    """
    The generated physical and geometric record for one bone.

    Parameters:
    -----------
    length : float
        Length of the bone segment (meters)
    bind_position : Vec3
        Position relative to the parent bone in the bind pose
        (world-like offset for the root)
    bind_rotation : Quat
        Rotation relative to the parent bone. Always identity.
    mass : float
        Mass (kg), a fixed fraction of total body mass
    collision_shapes : Tuple[BoneShape, ...]
        Ordered simplified shapes for physics/visualisation (may be empty)
    joint_limits : JointLimits
        Rotational constraints copied from the joint registry
        (LOCKED for the root)
    """
    length: float
    bind_position: Vec3
    bind_rotation: Quat = IDENTITY
    mass: float = 0.0
    collision_shapes: Tuple[BoneShape, ...] = field(default_factory=tuple)
    joint_limits: JointLimits = LOCKED

    def mirrored(self, joint_limits: JointLimits) -> 'BoneDefinition':
        """
        Mirror copy for the opposite side.

        Limits are passed in rather than carried over so that the mirrored
        bone still copies its own registry entry.
        """
        return replace(
            self,
            bind_position=self.bind_position.mirrored(),
            bind_rotation=self.bind_rotation.mirrored(),
            collision_shapes=tuple(s.mirrored() for s in self.collision_shapes),
            joint_limits=joint_limits,
        )
