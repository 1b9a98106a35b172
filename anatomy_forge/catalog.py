"""
CATALOG: THE 206 BONES OF THE ADULT SKELETON
=============================================

PURPOSE:
--------
This module defines the closed set of bone identities that every other part
of the package refers to. A bone is just a key: it has no geometry, no mass,
no behaviour. Geometry comes from the generator, constraints come from the
joint registry.

WHY AN IntEnum?
---------------
- Each bone gets a dense, stable integer id (0..205)
- The joint registry is stored as a flat tuple indexed by that id, the same
  way DOF indices address rows of a stiffness matrix
- Members still print and compare by name (Bone.FEMUR_LEFT)

ANATOMICAL COUNT:
-----------------
    Vertebral column     26   (sacrum, coccyx, 5 lumbar, 12 thoracic, 7 cervical)
    Thoracic cage        25   (sternum + 12 rib pairs)
    Skull                22   (8 cranial + 14 facial, mandible included)
    Auditory ossicles     6
    Hyoid                 1
    Upper limbs          64   (32 per side)
    Lower limbs          62   (31 per side)
    ------------------------
    Total               206

Paired bones carry a _LEFT / _RIGHT suffix. The lateral axis is x, with the
left side on +x.
"""

from enum import Enum, IntEnum, auto
from typing import Optional, Tuple


class Bone(IntEnum):
    """Closed catalog of skeletal segments. Values are dense ids 0..205."""

    def _generate_next_value_(name, start, count, last_values):
        return count

    # ------------------------------------------------------------------
    # VERTEBRAL COLUMN
    # ------------------------------------------------------------------
    SACRUM = auto()
    COCCYX = auto()
    LUMBAR_1 = auto()
    LUMBAR_2 = auto()
    LUMBAR_3 = auto()
    LUMBAR_4 = auto()
    LUMBAR_5 = auto()
    THORACIC_1 = auto()
    THORACIC_2 = auto()
    THORACIC_3 = auto()
    THORACIC_4 = auto()
    THORACIC_5 = auto()
    THORACIC_6 = auto()
    THORACIC_7 = auto()
    THORACIC_8 = auto()
    THORACIC_9 = auto()
    THORACIC_10 = auto()
    THORACIC_11 = auto()
    THORACIC_12 = auto()
    CERVICAL_1_ATLAS = auto()
    CERVICAL_2_AXIS = auto()
    CERVICAL_3 = auto()
    CERVICAL_4 = auto()
    CERVICAL_5 = auto()
    CERVICAL_6 = auto()
    CERVICAL_7 = auto()

    # ------------------------------------------------------------------
    # SKULL (cranial)
    # ------------------------------------------------------------------
    OCCIPITAL = auto()
    FRONTAL = auto()
    PARIETAL_LEFT = auto()
    PARIETAL_RIGHT = auto()
    TEMPORAL_LEFT = auto()
    TEMPORAL_RIGHT = auto()
    SPHENOID = auto()
    ETHMOID = auto()

    # ------------------------------------------------------------------
    # SKULL (facial)
    # ------------------------------------------------------------------
    MANDIBLE = auto()
    VOMER = auto()
    MAXILLA_LEFT = auto()
    MAXILLA_RIGHT = auto()
    ZYGOMATIC_LEFT = auto()
    ZYGOMATIC_RIGHT = auto()
    NASAL_LEFT = auto()
    NASAL_RIGHT = auto()
    LACRIMAL_LEFT = auto()
    LACRIMAL_RIGHT = auto()
    PALATINE_LEFT = auto()
    PALATINE_RIGHT = auto()
    INFERIOR_NASAL_CONCHA_LEFT = auto()
    INFERIOR_NASAL_CONCHA_RIGHT = auto()

    # ------------------------------------------------------------------
    # AUDITORY OSSICLES + HYOID
    # ------------------------------------------------------------------
    MALLEUS_LEFT = auto()
    MALLEUS_RIGHT = auto()
    INCUS_LEFT = auto()
    INCUS_RIGHT = auto()
    STAPES_LEFT = auto()
    STAPES_RIGHT = auto()
    HYOID = auto()

    # ------------------------------------------------------------------
    # THORACIC CAGE
    # ------------------------------------------------------------------
    STERNUM = auto()
    RIB_1_LEFT = auto()
    RIB_1_RIGHT = auto()
    RIB_2_LEFT = auto()
    RIB_2_RIGHT = auto()
    RIB_3_LEFT = auto()
    RIB_3_RIGHT = auto()
    RIB_4_LEFT = auto()
    RIB_4_RIGHT = auto()
    RIB_5_LEFT = auto()
    RIB_5_RIGHT = auto()
    RIB_6_LEFT = auto()
    RIB_6_RIGHT = auto()
    RIB_7_LEFT = auto()
    RIB_7_RIGHT = auto()
    RIB_8_LEFT = auto()
    RIB_8_RIGHT = auto()
    RIB_9_LEFT = auto()
    RIB_9_RIGHT = auto()
    RIB_10_LEFT = auto()
    RIB_10_RIGHT = auto()
    RIB_11_LEFT = auto()
    RIB_11_RIGHT = auto()
    RIB_12_LEFT = auto()
    RIB_12_RIGHT = auto()

    # ------------------------------------------------------------------
    # UPPER LIMBS: girdle, arm, forearm
    # ------------------------------------------------------------------
    CLAVICLE_LEFT = auto()
    CLAVICLE_RIGHT = auto()
    SCAPULA_LEFT = auto()
    SCAPULA_RIGHT = auto()
    HUMERUS_LEFT = auto()
    HUMERUS_RIGHT = auto()
    RADIUS_LEFT = auto()
    RADIUS_RIGHT = auto()
    ULNA_LEFT = auto()
    ULNA_RIGHT = auto()

    # Carpals
    SCAPHOID_LEFT = auto()
    SCAPHOID_RIGHT = auto()
    LUNATE_LEFT = auto()
    LUNATE_RIGHT = auto()
    TRIQUETRUM_LEFT = auto()
    TRIQUETRUM_RIGHT = auto()
    PISIFORM_LEFT = auto()
    PISIFORM_RIGHT = auto()
    TRAPEZIUM_LEFT = auto()
    TRAPEZIUM_RIGHT = auto()
    TRAPEZOID_LEFT = auto()
    TRAPEZOID_RIGHT = auto()
    CAPITATE_LEFT = auto()
    CAPITATE_RIGHT = auto()
    HAMATE_LEFT = auto()
    HAMATE_RIGHT = auto()

    # Metacarpals
    METACARPAL_1_LEFT = auto()
    METACARPAL_1_RIGHT = auto()
    METACARPAL_2_LEFT = auto()
    METACARPAL_2_RIGHT = auto()
    METACARPAL_3_LEFT = auto()
    METACARPAL_3_RIGHT = auto()
    METACARPAL_4_LEFT = auto()
    METACARPAL_4_RIGHT = auto()
    METACARPAL_5_LEFT = auto()
    METACARPAL_5_RIGHT = auto()

    # Phalanges of the hand (thumb has no middle phalanx)
    PROXIMAL_PHALANX_THUMB_LEFT = auto()
    PROXIMAL_PHALANX_THUMB_RIGHT = auto()
    DISTAL_PHALANX_THUMB_LEFT = auto()
    DISTAL_PHALANX_THUMB_RIGHT = auto()
    PROXIMAL_PHALANX_INDEX_FINGER_LEFT = auto()
    PROXIMAL_PHALANX_INDEX_FINGER_RIGHT = auto()
    MIDDLE_PHALANX_INDEX_FINGER_LEFT = auto()
    MIDDLE_PHALANX_INDEX_FINGER_RIGHT = auto()
    DISTAL_PHALANX_INDEX_FINGER_LEFT = auto()
    DISTAL_PHALANX_INDEX_FINGER_RIGHT = auto()
    PROXIMAL_PHALANX_MIDDLE_FINGER_LEFT = auto()
    PROXIMAL_PHALANX_MIDDLE_FINGER_RIGHT = auto()
    MIDDLE_PHALANX_MIDDLE_FINGER_LEFT = auto()
    MIDDLE_PHALANX_MIDDLE_FINGER_RIGHT = auto()
    DISTAL_PHALANX_MIDDLE_FINGER_LEFT = auto()
    DISTAL_PHALANX_MIDDLE_FINGER_RIGHT = auto()
    PROXIMAL_PHALANX_RING_FINGER_LEFT = auto()
    PROXIMAL_PHALANX_RING_FINGER_RIGHT = auto()
    MIDDLE_PHALANX_RING_FINGER_LEFT = auto()
    MIDDLE_PHALANX_RING_FINGER_RIGHT = auto()
    DISTAL_PHALANX_RING_FINGER_LEFT = auto()
    DISTAL_PHALANX_RING_FINGER_RIGHT = auto()
    PROXIMAL_PHALANX_LITTLE_FINGER_LEFT = auto()
    PROXIMAL_PHALANX_LITTLE_FINGER_RIGHT = auto()
    MIDDLE_PHALANX_LITTLE_FINGER_LEFT = auto()
    MIDDLE_PHALANX_LITTLE_FINGER_RIGHT = auto()
    DISTAL_PHALANX_LITTLE_FINGER_LEFT = auto()
    DISTAL_PHALANX_LITTLE_FINGER_RIGHT = auto()

    # ------------------------------------------------------------------
    # LOWER LIMBS: pelvis, thigh, leg
    # ------------------------------------------------------------------
    HIP_BONE_LEFT = auto()
    HIP_BONE_RIGHT = auto()
    FEMUR_LEFT = auto()
    FEMUR_RIGHT = auto()
    PATELLA_LEFT = auto()
    PATELLA_RIGHT = auto()
    TIBIA_LEFT = auto()
    TIBIA_RIGHT = auto()
    FIBULA_LEFT = auto()
    FIBULA_RIGHT = auto()

    # Tarsals
    TALUS_LEFT = auto()
    TALUS_RIGHT = auto()
    CALCANEUS_LEFT = auto()
    CALCANEUS_RIGHT = auto()
    NAVICULAR_LEFT = auto()
    NAVICULAR_RIGHT = auto()
    CUBOID_LEFT = auto()
    CUBOID_RIGHT = auto()
    MEDIAL_CUNEIFORM_LEFT = auto()
    MEDIAL_CUNEIFORM_RIGHT = auto()
    INTERMEDIATE_CUNEIFORM_LEFT = auto()
    INTERMEDIATE_CUNEIFORM_RIGHT = auto()
    LATERAL_CUNEIFORM_LEFT = auto()
    LATERAL_CUNEIFORM_RIGHT = auto()

    # Metatarsals
    METATARSAL_1_LEFT = auto()
    METATARSAL_1_RIGHT = auto()
    METATARSAL_2_LEFT = auto()
    METATARSAL_2_RIGHT = auto()
    METATARSAL_3_LEFT = auto()
    METATARSAL_3_RIGHT = auto()
    METATARSAL_4_LEFT = auto()
    METATARSAL_4_RIGHT = auto()
    METATARSAL_5_LEFT = auto()
    METATARSAL_5_RIGHT = auto()

    # Phalanges of the foot (big toe has no middle phalanx)
    PROXIMAL_PHALANX_BIG_TOE_LEFT = auto()
    PROXIMAL_PHALANX_BIG_TOE_RIGHT = auto()
    DISTAL_PHALANX_BIG_TOE_LEFT = auto()
    DISTAL_PHALANX_BIG_TOE_RIGHT = auto()
    PROXIMAL_PHALANX_TOE_2_LEFT = auto()
    PROXIMAL_PHALANX_TOE_2_RIGHT = auto()
    MIDDLE_PHALANX_TOE_2_LEFT = auto()
    MIDDLE_PHALANX_TOE_2_RIGHT = auto()
    DISTAL_PHALANX_TOE_2_LEFT = auto()
    DISTAL_PHALANX_TOE_2_RIGHT = auto()
    PROXIMAL_PHALANX_TOE_3_LEFT = auto()
    PROXIMAL_PHALANX_TOE_3_RIGHT = auto()
    MIDDLE_PHALANX_TOE_3_LEFT = auto()
    MIDDLE_PHALANX_TOE_3_RIGHT = auto()
    DISTAL_PHALANX_TOE_3_LEFT = auto()
    DISTAL_PHALANX_TOE_3_RIGHT = auto()
    PROXIMAL_PHALANX_TOE_4_LEFT = auto()
    PROXIMAL_PHALANX_TOE_4_RIGHT = auto()
    MIDDLE_PHALANX_TOE_4_LEFT = auto()
    MIDDLE_PHALANX_TOE_4_RIGHT = auto()
    DISTAL_PHALANX_TOE_4_LEFT = auto()
    DISTAL_PHALANX_TOE_4_RIGHT = auto()
    PROXIMAL_PHALANX_LITTLE_TOE_LEFT = auto()
    PROXIMAL_PHALANX_LITTLE_TOE_RIGHT = auto()
    MIDDLE_PHALANX_LITTLE_TOE_LEFT = auto()
    MIDDLE_PHALANX_LITTLE_TOE_RIGHT = auto()
    DISTAL_PHALANX_LITTLE_TOE_LEFT = auto()
    DISTAL_PHALANX_LITTLE_TOE_RIGHT = auto()


class Side(Enum):
    """Body side. The left side lies on +x."""
    LEFT = 'LEFT'
    RIGHT = 'RIGHT'

    @property
    def opposite(self) -> 'Side':
        return Side.RIGHT if self is Side.LEFT else Side.LEFT


# The physics root. The only bone without a parent joint.
ROOT_BONE = Bone.SACRUM

N_BONES = len(Bone)

# Spine segments, ordered bottom-up (the order they are stacked in)
LUMBAR: Tuple[Bone, ...] = (
    Bone.LUMBAR_5, Bone.LUMBAR_4, Bone.LUMBAR_3, Bone.LUMBAR_2, Bone.LUMBAR_1,
)

THORACIC: Tuple[Bone, ...] = (
    Bone.THORACIC_12, Bone.THORACIC_11, Bone.THORACIC_10, Bone.THORACIC_9,
    Bone.THORACIC_8, Bone.THORACIC_7, Bone.THORACIC_6, Bone.THORACIC_5,
    Bone.THORACIC_4, Bone.THORACIC_3, Bone.THORACIC_2, Bone.THORACIC_1,
)

CERVICAL: Tuple[Bone, ...] = (
    Bone.CERVICAL_7, Bone.CERVICAL_6, Bone.CERVICAL_5, Bone.CERVICAL_4,
    Bone.CERVICAL_3, Bone.CERVICAL_2_AXIS, Bone.CERVICAL_1_ATLAS,
)


def side_of(bone: Bone) -> Optional[Side]:
    """Return the side of a paired bone, or None for a midline bone."""
    if bone.name.endswith('_LEFT'):
        return Side.LEFT
    if bone.name.endswith('_RIGHT'):
        return Side.RIGHT
    return None


def sided(stem: str, side: Side) -> Bone:
    """
    Resolve a side-less stem to a concrete bone.

    >>> sided('FEMUR', Side.LEFT)
    <Bone.FEMUR_LEFT: 146>
    """
    return Bone[f"{stem}_{side.value}"]


def mirror(bone: Bone) -> Bone:
    """Swap LEFT and RIGHT. Midline bones map to themselves."""
    side = side_of(bone)
    if side is None:
        return bone
    stem = bone.name[: -len(side.value) - 1]
    return sided(stem, side.opposite)


def rib(number: int, side: Side) -> Bone:
    """Rib bone for a rib number (1 = highest, 12 = lowest floating rib)."""
    if not 1 <= number <= 12:
        raise ValueError(f"Rib number must be in 1..12, got {number}")
    return sided(f"RIB_{number}", side)
