# anatomy_forge/generative/body.py
"""
BODY GENERATOR: From Five Scalars to 206 Bones
==============================================

PURPOSE:
--------
Turn a BodyDNA into a complete skeleton: one BoneDefinition per catalog
bone, each carrying its bind offset, mass, collision shapes and joint
limits. This module owns the orchestration and the axial regions; the limbs
live in limbs.py.

REGIONS:
--------
    pelvis   sacrum (root), coccyx, 2 hip bones
    spine    5 lumbar + 12 thoracic + 7 cervical, stacked bottom-up,
             sharing 35% / 45% / 20% of torso length
    thorax   a rib pair per thoracic level, sternum on T4
    head     occipital base, fused cranial and facial plates,
             ossicles, hyoid, hinged mandible
    legs     see limbs.py
    arms     see limbs.py

Each region returns its own dict of bones. The keys never overlap, so the
final skeleton is a plain merge. Paired bones are built on the left and
mirrored to the right.

DETERMINISM:
------------
No randomness, no global state touched. The same DNA always gives the same
skeleton, and every call returns a fresh dict owned by the caller.
"""

import logging
from typing import Dict, Optional

from ..catalog import Bone, Side, LUMBAR, THORACIC, CERVICAL, ROOT_BONE, rib, sided
from ..config import CONFIG, GeneratorConfig
from ..kernel.registry import JOINT_REGISTRY, JointRegistry
from ..model import BodyDNA, BoneDefinition, Box, Sphere, Vec3, ORIGIN
from .limbs import generate_arms, generate_legs
from .segments import (
    BuildContext,
    Skeleton,
    create_bone,
    derive_proportions,
    mirror_to_right,
)

logger = logging.getLogger(__name__)

LEFT = Side.LEFT

# Share of torso length per spinal region
LUMBAR_SHARE = 0.35
THORACIC_SHARE = 0.45
CERVICAL_SHARE = 0.20


def rib_scale(number: int) -> float:
    """
    Size factor of a rib. Grows from rib 1 to rib 7, then shrinks
    towards the floating ribs.

    >>> rib_scale(1) < rib_scale(7) > rib_scale(10)
    True
    >>> rib_scale(12)
    0.0
    """
    if number > 7:
        return (12 - number) * 0.15
    return number * 0.15


# ============================================================================
# PELVIS
# ============================================================================

def _generate_pelvis(ctx: BuildContext) -> Skeleton:
    p = ctx.proportions
    bones = {}

    # Root: world-like offset at hip height
    bones[ROOT_BONE] = create_bone(
        ctx, ROOT_BONE, p.head_size * 0.8,
        Vec3(0, p.leg_length, 0),
        ctx.mass('sacrum'),
        [Box.of(p.hip_width * 0.4, p.head_size * 0.4, p.head_size * 0.3)],
    )
    bones[Bone.COCCYX] = create_bone(
        ctx, Bone.COCCYX, p.head_size * 0.2,
        Vec3(0, -p.head_size * 0.4, -0.02),
        ctx.mass('coccyx'),
    )

    hip = sided('HIP_BONE', LEFT)
    left = {
        hip: create_bone(
            ctx, hip, 0.2,
            Vec3(p.hip_width * 0.5, 0, 0),
            ctx.mass('hip_bone'),
            [Box.of(0.1 * ctx.build, 0.14, 0.08)],
        )
    }
    bones.update(left)
    bones.update(mirror_to_right(ctx, left))
    return bones


# ============================================================================
# SPINE, RIBS, STERNUM
# ============================================================================

def _generate_rib(ctx: BuildContext, number: int) -> BoneDefinition:
    """Left rib `number`; its head sits just lateral of the vertebra."""
    scale = rib_scale(number)
    size = Vec3(0.1 + scale, 0.02, 0.05 + scale)
    bone = rib(number, LEFT)
    return create_bone(
        ctx, bone, 0.1,
        Vec3(0.03, 0, 0),
        ctx.mass('rib'),
        [Box(size, offset=Vec3(size.x / 2, 0, size.z / 2))],
    )


def _generate_spine_and_ribs(ctx: BuildContext) -> Skeleton:
    """
    Stack the vertebrae bottom-up and hang a rib pair off each thoracic level.

    Each vertebra sits one segment height above its parent:

        position = (0, seg_h, 0)

    so the three regions add up to the full torso length.
    """
    torso = ctx.proportions.torso_length
    bones = {}
    left_ribs = {}

    # --- Lumbar ---
    seg_h = torso * LUMBAR_SHARE / len(LUMBAR)
    for bone in LUMBAR:
        bones[bone] = create_bone(
            ctx, bone, seg_h, Vec3(0, seg_h, 0),
            ctx.mass('lumbar'),
            [Box.of(0.04 * ctx.build, seg_h * 0.9, 0.04)],
        )

    # --- Thoracic, with ribs (T12 carries rib 12, T1 carries rib 1) ---
    thoracic_h = torso * THORACIC_SHARE / len(THORACIC)
    for i, bone in enumerate(THORACIC):
        bones[bone] = create_bone(
            ctx, bone, thoracic_h, Vec3(0, thoracic_h, 0),
            ctx.mass('thoracic'),
            [Box.of(0.035 * ctx.build, thoracic_h * 0.9, 0.035)],
        )
        number = 12 - i
        left_ribs[rib(number, LEFT)] = _generate_rib(ctx, number)

    bones.update(left_ribs)
    bones.update(mirror_to_right(ctx, left_ribs))

    # --- Sternum: in front of T4, spanning four thoracic segments ---
    sternum_len = thoracic_h * 4
    bones[Bone.STERNUM] = create_bone(
        ctx, Bone.STERNUM, sternum_len,
        Vec3(0, 0, 0.1 * ctx.build),
        ctx.mass('sternum'),
        [Box(Vec3(0.02, sternum_len / 2, 0.01), offset=Vec3(0, -sternum_len / 4, 0))],
    )

    # --- Cervical ---
    seg_h = torso * CERVICAL_SHARE / len(CERVICAL)
    for bone in CERVICAL:
        bones[bone] = create_bone(
            ctx, bone, seg_h, Vec3(0, seg_h, 0),
            ctx.mass('cervical'),
            [Box.of(0.025, seg_h * 0.8, 0.025)],
        )

    return bones


# ============================================================================
# HEAD
# ============================================================================

# Paired facial bones: stem -> left-side offset from the parent (maxilla or frontal)
FACIAL_OFFSETS: Dict[str, Vec3] = {
    'ZYGOMATIC': Vec3(0.035, 0.01, -0.01),
    'LACRIMAL': Vec3(0.012, 0.02, 0.0),
    'PALATINE': Vec3(0.008, -0.01, -0.02),
    'INFERIOR_NASAL_CONCHA': Vec3(0.006, 0.005, -0.005),
}

# Ossicle chain: (stem, length), each hanging from the previous one
OSSICLES = (('MALLEUS', 0.008), ('INCUS', 0.007), ('STAPES', 0.003))


def _generate_head(ctx: BuildContext) -> Skeleton:
    size = ctx.proportions.head_size
    bones = {}

    # Skull base sits on the atlas
    bones[Bone.OCCIPITAL] = create_bone(
        ctx, Bone.OCCIPITAL, size,
        Vec3(0, 0.02, 0),
        ctx.mass('occipital'),
        [Sphere(size * 0.5, offset=Vec3(0, size * 0.4, 0.05))],
    )

    # Fused midline plates, simplified geometry
    for bone in (Bone.SPHENOID, Bone.FRONTAL, Bone.ETHMOID):
        bones[bone] = create_bone(ctx, bone, size * 0.2, ORIGIN, ctx.mass('cranial_plate'))
    bones[Bone.VOMER] = create_bone(
        ctx, Bone.VOMER, size * 0.15, Vec3(0, -size * 0.25, 0.04), ctx.mass('facial'),
    )

    bones[Bone.MANDIBLE] = create_bone(
        ctx, Bone.MANDIBLE, size * 0.4,
        Vec3(0, 0.03, 0.05),   # hinge near the ear
        ctx.mass('mandible'),
        [Box(Vec3(0.06, 0.02, 0.08), offset=Vec3(0, -0.05, 0.06))],
    )

    bones[Bone.HYOID] = create_bone(
        ctx, Bone.HYOID, 0.04, Vec3(0, 0, 0.04), ctx.mass('hyoid'),
    )

    # --- Left-side plates, facial bones and ossicles ---
    left = {}
    for stem in ('PARIETAL', 'TEMPORAL'):
        bone = sided(stem, LEFT)
        left[bone] = create_bone(ctx, bone, size * 0.2, ORIGIN, ctx.mass('cranial_plate'))

    maxilla = sided('MAXILLA', LEFT)
    left[maxilla] = create_bone(
        ctx, maxilla, size * 0.25, Vec3(0.015, -size * 0.3, 0.06), ctx.mass('facial'),
    )
    nasal = sided('NASAL', LEFT)
    left[nasal] = create_bone(
        ctx, nasal, size * 0.1, Vec3(0.005, -size * 0.15, 0.09), ctx.mass('facial'),
    )
    for stem, offset in FACIAL_OFFSETS.items():
        bone = sided(stem, LEFT)
        left[bone] = create_bone(ctx, bone, size * 0.1, offset, ctx.mass('facial'))

    position = Vec3(0.01, -0.01, 0.0)   # malleus inside the temporal
    for stem, length in OSSICLES:
        bone = sided(stem, LEFT)
        left[bone] = create_bone(ctx, bone, length, position, ctx.mass('ossicle'))
        position = Vec3(0.002, -length, 0)

    bones.update(left)
    bones.update(mirror_to_right(ctx, left))
    return bones


# ============================================================================
# ENTRY POINT
# ============================================================================

def generate_body(
    dna: BodyDNA,
    config: Optional[GeneratorConfig] = None,
    registry: Optional[JointRegistry] = None,
) -> Dict[Bone, BoneDefinition]:
    """
    Generate a complete 206-bone skeleton from genetic parameters.

    Parameters:
    -----------
    dna : BodyDNA
        Height, mass, build and ratios. Not validated.
    config : GeneratorConfig, optional
        Defaults to the global CONFIG
    registry : JointRegistry, optional
        Joint hierarchy to copy limits from. Defaults to JOINT_REGISTRY.

    Returns:
    --------
    skeleton : Dict[Bone, BoneDefinition]
        One entry per catalog bone, new on every call

    Raises:
    -------
    RegistryError
        Only with config.strict_registry=True and a registry that lacks a
        non-root bone.

    Examples:
    ---------
    >>> skeleton = generate_body(BodyDNA.average_adult())
    >>> len(skeleton)
    206
    >>> round(skeleton[Bone.SACRUM].mass, 2)
    7.8
    """
    ctx = BuildContext(
        dna=dna,
        proportions=derive_proportions(dna),
        registry=registry if registry is not None else JOINT_REGISTRY,
        config=config if config is not None else CONFIG,
    )
    logger.debug("Generating skeleton: height=%.3f m, mass=%.1f kg, build=%.2f",
                 dna.height_m, dna.mass_kg, dna.build_factor)

    skeleton: Skeleton = {}
    for region in (_generate_pelvis, _generate_spine_and_ribs, _generate_head,
                   generate_legs, generate_arms):
        part = region(ctx)
        logger.debug("%s: %d bones", region.__name__.lstrip('_'), len(part))
        skeleton.update(part)

    if ctx.config.log_summary:
        logger.debug("Skeleton complete: %d bones, %.2f kg of bone",
                     len(skeleton), sum(d.mass for d in skeleton.values()))
    return skeleton
