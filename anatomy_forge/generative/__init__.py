# anatomy_forge/generative - Procedural skeleton generation
"""
GENERATIVE: Procedural Skeleton Generator
=========================================

This package turns genetic parameters into bones. Regions are built
independently and merged:

- body:      orchestration plus pelvis, spine, ribs, sternum, head
- limbs:     legs/feet and arms/hands, left side built then mirrored
- segments:  proportions, mass table, bone creation, mirroring

USAGE:
------
    from anatomy_forge.generative import generate_body
    from anatomy_forge.model import BodyDNA

    skeleton = generate_body(BodyDNA(height_m=1.65, mass_kg=60.0, build_factor=0.8))
    femur = skeleton[Bone.FEMUR_LEFT]
"""

from .body import generate_body, rib_scale
from .limbs import DigitSpec, FINGERS, TOES, digit_lengths
from .segments import (
    BONE_DENSITY,
    MASS_FRACTIONS,
    BodyProportions,
    derive_proportions,
)

__all__ = [
    'generate_body', 'rib_scale',
    'DigitSpec', 'FINGERS', 'TOES', 'digit_lengths',
    'BONE_DENSITY', 'MASS_FRACTIONS', 'BodyProportions', 'derive_proportions',
]
