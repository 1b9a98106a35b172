# anatomy_forge/generative/limbs.py
"""
LIMB GENERATOR: Legs, Feet, Arms and Hands
==========================================

PURPOSE:
--------
Build the four limbs. Each limb is generated once, on the LEFT side
(lateral sign +1), then mirrored to the right with mirror_to_right().
Building one side and reflecting it makes left/right symmetry exact instead
of something two hand-written code paths have to agree on.

LENGTH SHARES:
--------------
    Leg:  femur 52%  tibia 40%  foot 8%      (of leg length)
    Arm:  humerus 48%  radius/ulna 42%       (of arm length, 0.42 * height)

DIGITS:
-------
All 20 digits (fingers and toes) go through one routine, _generate_digit():

    base (metacarpal/metatarsal)   40% of total digit length
    phalanges                      remaining 60%, split over 2 or 3
    distal phalanx                 shortened to 80%

    capsule width taper:  base 1.0  proximal 0.9  middle 0.8  distal 0.7

Thumb and big toe have no middle phalanx.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

from ..catalog import Side, sided
from ..model import Box, Capsule, Sphere, Vec3
from .segments import BuildContext, Skeleton, create_bone, mirror_to_right

LEFT = Side.LEFT

FEMUR_SHARE = 0.52
TIBIA_SHARE = 0.40
FOOT_SHARE = 0.08  # talus to sole, covered by the fixed-size tarsals

HUMERUS_SHARE = 0.48
FOREARM_SHARE = 0.42

DIGIT_BASE_SHARE = 0.4
DISTAL_SHORTENING = 0.8
WIDTH_TAPER = (1.0, 0.9, 0.8, 0.7)


@dataclass(frozen=True)
class DigitSpec:
    """
    One finger or toe, described on the left side.

    Parameters:
    -----------
    base : str
        Stem of the metacarpal/metatarsal (e.g. 'METACARPAL_2')
    phalanx : str
        Phalanx stem suffix (e.g. 'INDEX_FINGER' for PROXIMAL_PHALANX_INDEX_FINGER)
    offset : Vec3
        Base position relative to its carpal/tarsal parent
    total_length : float
        Base + all phalanges (meters)
    width : float
        Capsule radius of the base segment (meters)
    has_middle : bool
        False for thumb and big toe
    """
    base: str
    phalanx: str
    offset: Vec3
    total_length: float
    width: float
    has_middle: bool = True


FINGERS: Tuple[DigitSpec, ...] = (
    DigitSpec('METACARPAL_1', 'THUMB', Vec3(0.03, -0.02, 0.02), 0.05, 0.012, has_middle=False),
    DigitSpec('METACARPAL_2', 'INDEX_FINGER', Vec3(0.015, -0.03, 0), 0.09, 0.01),
    DigitSpec('METACARPAL_3', 'MIDDLE_FINGER', Vec3(0, -0.03, 0), 0.10, 0.01),
    DigitSpec('METACARPAL_4', 'RING_FINGER', Vec3(-0.015, -0.03, 0), 0.09, 0.01),
    DigitSpec('METACARPAL_5', 'LITTLE_FINGER', Vec3(-0.03, -0.03, 0), 0.07, 0.008),
)

TOES: Tuple[DigitSpec, ...] = (
    DigitSpec('METATARSAL_1', 'BIG_TOE', Vec3(0.02, 0, 0.05), 0.08, 0.02, has_middle=False),
    DigitSpec('METATARSAL_2', 'TOE_2', Vec3(0.01, 0, 0.05), 0.07, 0.015),
    DigitSpec('METATARSAL_3', 'TOE_3', Vec3(0, 0, 0.05), 0.065, 0.015),
    DigitSpec('METATARSAL_4', 'TOE_4', Vec3(-0.01, 0, 0.05), 0.06, 0.015),
    DigitSpec('METATARSAL_5', 'LITTLE_TOE', Vec3(-0.02, 0, 0.05), 0.055, 0.012),
)


def _capsule_down(radius: float, length: float) -> Capsule:
    """Capsule hanging down the bone's -y axis from its origin."""
    return Capsule(radius, length, offset=Vec3(0, -length / 2, 0))


def digit_lengths(spec: DigitSpec) -> Tuple[float, float, Optional[float], float]:
    """
    (base, proximal, middle, distal) lengths of a digit; middle is None
    for two-phalanx digits.

    Examples:
    ---------
    >>> base, prox, mid, dist = digit_lengths(FINGERS[2])
    >>> round(base, 3), round(prox, 3), round(dist, 3)
    (0.04, 0.02, 0.016)
    """
    base = spec.total_length * DIGIT_BASE_SHARE
    n_phalanges = 3 if spec.has_middle else 2
    phalanx = spec.total_length * (1 - DIGIT_BASE_SHARE) / n_phalanges
    middle = phalanx if spec.has_middle else None
    return base, phalanx, middle, phalanx * DISTAL_SHORTENING


def _generate_digit(ctx: BuildContext, spec: DigitSpec) -> Skeleton:
    """Base segment plus 2 or 3 phalanges, chained down the local -y axis."""
    base_len, phal_len, mid_len, dist_len = digit_lengths(spec)
    bones = {}

    base = sided(spec.base, LEFT)
    bones[base] = create_bone(
        ctx, base, base_len, spec.offset, ctx.mass('metapodial'),
        [_capsule_down(spec.width * WIDTH_TAPER[0], base_len)],
    )

    proximal = sided(f'PROXIMAL_PHALANX_{spec.phalanx}', LEFT)
    bones[proximal] = create_bone(
        ctx, proximal, phal_len, Vec3(0, -base_len, 0), ctx.mass('proximal_phalanx'),
        [_capsule_down(spec.width * WIDTH_TAPER[1], phal_len)],
    )

    if mid_len is not None:
        middle = sided(f'MIDDLE_PHALANX_{spec.phalanx}', LEFT)
        bones[middle] = create_bone(
            ctx, middle, mid_len, Vec3(0, -phal_len, 0), ctx.mass('middle_phalanx'),
            [_capsule_down(spec.width * WIDTH_TAPER[2], mid_len)],
        )

    distal = sided(f'DISTAL_PHALANX_{spec.phalanx}', LEFT)
    bones[distal] = create_bone(
        ctx, distal, dist_len, Vec3(0, -phal_len, 0), ctx.mass('distal_phalanx'),
        [_capsule_down(spec.width * WIDTH_TAPER[3], dist_len)],
    )
    return bones


# ============================================================================
# LEGS
# ============================================================================

def _generate_foot(ctx: BuildContext, tibia_len: float) -> Skeleton:
    bones = {}

    def add(stem, length, position, category, shapes=()):
        bone = sided(stem, LEFT)
        bones[bone] = create_bone(ctx, bone, length, position, ctx.mass(category), shapes)

    # Hindfoot
    add('TALUS', 0.05, Vec3(0, -tibia_len, 0), 'talus', [Box.of(0.04, 0.04, 0.04)])
    add('CALCANEUS', 0.08, Vec3(0, -0.03, -0.03), 'calcaneus', [Box.of(0.04, 0.04, 0.06)])

    # Midfoot
    add('NAVICULAR', 0.04, Vec3(0, -0.02, 0.04), 'navicular')
    add('CUBOID', 0.04, Vec3(0.02, 0, 0.06), 'cuboid', [Box.of(0.015, 0.015, 0.02)])
    add('MEDIAL_CUNEIFORM', 0.03, Vec3(-0.012, 0, 0.02), 'cuneiform')
    add('INTERMEDIATE_CUNEIFORM', 0.025, Vec3(0, 0, 0.02), 'cuneiform')
    add('LATERAL_CUNEIFORM', 0.025, Vec3(0.012, 0, 0.02), 'cuneiform')

    for toe in TOES:
        bones.update(_generate_digit(ctx, toe))
    return bones


def generate_legs(ctx: BuildContext) -> Skeleton:
    """Both legs: femur, patella, tibia, fibula, tarsals, toes."""
    leg_len = ctx.proportions.leg_length
    femur_len = leg_len * FEMUR_SHARE
    tibia_len = leg_len * TIBIA_SHARE
    build = ctx.build

    left = {}
    femur = sided('FEMUR', LEFT)
    left[femur] = create_bone(
        ctx, femur, femur_len,
        Vec3(0.08, -0.05, 0.02),   # acetabulum
        ctx.mass('femur'),
        [_capsule_down(0.05 * build, femur_len)],
    )

    # Patella rides at the knee, in front of the femur's distal end
    patella = sided('PATELLA', LEFT)
    left[patella] = create_bone(
        ctx, patella, 0.05, Vec3(0, -femur_len, 0.04), ctx.mass('patella'), [Sphere(0.03)],
    )

    tibia = sided('TIBIA', LEFT)
    left[tibia] = create_bone(
        ctx, tibia, tibia_len, Vec3(0, -femur_len, 0), ctx.mass('tibia'),
        [_capsule_down(0.04 * build, tibia_len)],
    )

    fibula = sided('FIBULA', LEFT)
    left[fibula] = create_bone(
        ctx, fibula, tibia_len, Vec3(0.03, 0, 0), ctx.mass('fibula'),
        [_capsule_down(0.015, tibia_len)],
    )

    left.update(_generate_foot(ctx, tibia_len))

    bones = dict(left)
    bones.update(mirror_to_right(ctx, left))
    return bones


# ============================================================================
# ARMS
# ============================================================================

def _generate_hand(ctx: BuildContext, forearm_len: float) -> Skeleton:
    bones = {}

    def add(stem, length, position, shapes=()):
        bone = sided(stem, LEFT)
        bones[bone] = create_bone(ctx, bone, length, position, ctx.mass('carpal'), shapes)

    # Proximal row (lunate is the wrist root)
    add('LUNATE', 0.03, Vec3(0, -forearm_len, 0), [Box.of(0.03, 0.03, 0.02)])
    add('SCAPHOID', 0.025, Vec3(0.015, -forearm_len, 0))
    add('TRIQUETRUM', 0.02, Vec3(-0.015, 0, 0))
    add('PISIFORM', 0.01, Vec3(0, 0, 0.01))

    # Distal row
    add('CAPITATE', 0.02, Vec3(0, -0.02, 0))
    add('HAMATE', 0.02, Vec3(-0.012, 0, 0))
    add('TRAPEZIUM', 0.015, Vec3(0.008, -0.02, 0))
    add('TRAPEZOID', 0.015, Vec3(0, -0.02, 0))

    for finger in FINGERS:
        bones.update(_generate_digit(ctx, finger))
    return bones


def generate_arms(ctx: BuildContext) -> Skeleton:
    """Both arms: clavicle, scapula, humerus, radius, ulna, carpals, fingers."""
    sw = ctx.proportions.shoulder_width
    arm_len = ctx.proportions.arm_length
    humerus_len = arm_len * HUMERUS_SHARE
    forearm_len = arm_len * FOREARM_SHARE
    build = ctx.build

    left = {}
    clavicle = sided('CLAVICLE', LEFT)
    left[clavicle] = create_bone(
        ctx, clavicle, sw * 0.45,
        Vec3(0.02, 0.08, 0.04),   # top of sternum
        ctx.mass('clavicle'),
        [Capsule(0.02, sw * 0.4, offset=Vec3(sw * 0.2, 0, 0))],
    )

    scapula = sided('SCAPULA', LEFT)
    left[scapula] = create_bone(
        ctx, scapula, 0.15, Vec3(sw * 0.4, 0, -0.05), ctx.mass('scapula'),
        [Box.of(0.1, 0.12, 0.02)],
    )

    humerus = sided('HUMERUS', LEFT)
    left[humerus] = create_bone(
        ctx, humerus, humerus_len, Vec3(0.05, -0.02, 0), ctx.mass('humerus'),
        [_capsule_down(0.04 * build, humerus_len)],
    )

    # Radius and ulna both start at the elbow
    radius = sided('RADIUS', LEFT)
    left[radius] = create_bone(
        ctx, radius, forearm_len, Vec3(0, -humerus_len, 0), ctx.mass('radius'),
        [_capsule_down(0.025 * build, forearm_len)],
    )
    ulna = sided('ULNA', LEFT)
    left[ulna] = create_bone(
        ctx, ulna, forearm_len, Vec3(0, -humerus_len, 0), ctx.mass('ulna'),
        [_capsule_down(0.02, forearm_len)],
    )

    left.update(_generate_hand(ctx, forearm_len))

    bones = dict(left)
    bones.update(mirror_to_right(ctx, left))
    return bones
