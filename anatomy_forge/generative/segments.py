# anatomy_forge/generative/segments.py
"""
SEGMENTS: Shared Plumbing for the Region Generators
===================================================

PURPOSE:
--------
Every region generator (pelvis, spine, skull, legs, arms) needs the same
three things:
1. The body's derived proportions (head size, leg length, ...)
2. A way to turn (bone, length, position, mass, shapes) into a
   BoneDefinition with the right joint limits attached
3. A way to produce the right side from the left side

They live here so body.py and limbs.py can both use them without importing
each other.

MASS MODEL:
-----------
Bone mass is a fixed fraction of total body mass:

    mass = dna.mass_kg * MASS_FRACTIONS[category]

Doubling total mass doubles every bone mass exactly. The fractions are
hand-authored and do not sum to 1 (soft tissue is not modelled).
BONE_DENSITY is kept for volume-based estimates in post.py; it is NOT used
to compute generated masses.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterable

from ..catalog import Bone, mirror
from ..config import GeneratorConfig
from ..kernel.limits import JointLimits, LOCKED
from ..kernel.registry import JointRegistry, RegistryError
from ..model import BodyDNA, BoneDefinition, BoneShape, Vec3

logger = logging.getLogger(__name__)

Skeleton = Dict[Bone, BoneDefinition]


# Cortical bone, kg/m^3 (approximate)
BONE_DENSITY = 1500.0

# Body mass (kg) of the average adult. Small bones are specified as absolute
# masses at this reference and scale linearly from it.
REFERENCE_MASS_KG = 78.0

# Fraction of total body mass per bone, by category
MASS_FRACTIONS: Dict[str, float] = {
    # Axial
    'sacrum': 0.10,
    'coccyx': 0.05 / REFERENCE_MASS_KG,
    'hip_bone': 0.04,
    'lumbar': 0.015,
    'thoracic': 0.012,
    'cervical': 0.008,
    'sternum': 0.002,
    'rib': 0.05 / REFERENCE_MASS_KG,

    # Head and neck
    'occipital': 0.05,
    'cranial_plate': 0.1 / REFERENCE_MASS_KG,
    'facial': 0.0003,
    'mandible': 0.3 / REFERENCE_MASS_KG,
    'ossicle': 0.0000004,
    'hyoid': 0.0001,

    # Lower limb
    'femur': 0.12,
    'patella': 0.1 / REFERENCE_MASS_KG,
    'tibia': 0.06,
    'fibula': 0.01,
    'talus': 0.1 / REFERENCE_MASS_KG,
    'calcaneus': 0.1 / REFERENCE_MASS_KG,
    'navicular': 0.05 / REFERENCE_MASS_KG,
    'cuboid': 0.0004,
    'cuneiform': 0.0004,

    # Upper limb
    'clavicle': 0.02,
    'scapula': 0.03,
    'humerus': 0.05,
    'radius': 0.02,
    'ulna': 0.02,
    'carpal': 0.01 / REFERENCE_MASS_KG,

    # Digits (hands and feet)
    'metapodial': 0.005 / REFERENCE_MASS_KG,
    'proximal_phalanx': 0.002 / REFERENCE_MASS_KG,
    'middle_phalanx': 0.002 / REFERENCE_MASS_KG,
    'distal_phalanx': 0.001 / REFERENCE_MASS_KG,
}


@dataclass(frozen=True)
class BodyProportions:
    """
    Lengths derived once from the DNA and shared by every region.

    All values in meters.
    """
    head_size: float
    leg_length: float
    torso_length: float
    shoulder_width: float
    hip_width: float
    arm_length: float


def derive_proportions(dna: BodyDNA) -> BodyProportions:
    """
    Derive regional lengths from the genetic scalars.

    Examples:
    ---------
    >>> p = derive_proportions(BodyDNA.average_adult())
    >>> round(p.leg_length, 3), round(p.torso_length, 3)
    (0.864, 0.711)
    """
    h = dna.height_m
    head_size = h * dna.head_ratio
    leg_length = h * dna.leg_ratio
    return BodyProportions(
        head_size=head_size,
        leg_length=leg_length,
        torso_length=h - leg_length - head_size,
        shoulder_width=h * 0.23 * dna.build_factor,
        hip_width=h * 0.16 * dna.build_factor,
        arm_length=h * 0.42,
    )


@dataclass(frozen=True)
class BuildContext:
    """Everything a region generator reads. Immutable, shared across regions."""
    dna: BodyDNA
    proportions: BodyProportions
    registry: JointRegistry
    config: GeneratorConfig

    @property
    def build(self) -> float:
        return self.dna.build_factor

    def mass(self, category: str) -> float:
        return self.dna.mass_kg * MASS_FRACTIONS[category]


def resolve_limits(ctx: BuildContext, bone: Bone) -> JointLimits:
    """
    Joint limits for a bone, copied from the registry.

    The root has no joint and gets LOCKED. A non-root bone missing from the
    registry also gets LOCKED with a warning, or raises RegistryError when
    ctx.config.strict_registry is set.
    """
    joint = ctx.registry.lookup(bone)
    if joint is not None:
        return joint.limits

    if bone != ctx.registry.root:
        if ctx.config.strict_registry:
            raise RegistryError(f"No joint registered for non-root bone {bone.name}")
        logger.warning("No joint registered for %s; using locked limits", bone.name)
    return LOCKED


def create_bone(
    ctx: BuildContext,
    bone: Bone,
    length: float,
    position: Vec3,
    mass: float,
    shapes: Iterable[BoneShape] = (),
) -> BoneDefinition:
    """Assemble one BoneDefinition. Bind rotation is always identity."""
    return BoneDefinition(
        length=length,
        bind_position=position,
        mass=mass,
        collision_shapes=tuple(shapes),
        joint_limits=resolve_limits(ctx, bone),
    )


def mirror_to_right(ctx: BuildContext, left: Skeleton) -> Skeleton:
    """
    Produce the right side from a dict of left-side bones.

    Positions and shape offsets flip along x, rotations are reflected, and
    joint limits are looked up again for the right-side identity.
    """
    right = {}
    for bone, definition in left.items():
        twin = mirror(bone)
        right[twin] = definition.mirrored(resolve_limits(ctx, twin))
    return right
