# anatomy_forge/kernel/registry.py
"""
JOINT REGISTRY: The Edge Set of the Skeleton Tree
=================================================

PURPOSE:
--------
Every bone except the root has exactly one parent joint:

    bone -> Joint(parent, type, limits)

Taken together, the parent links are the edges of the skeleton tree. The
generator looks up each bone here to copy its limits; consumers look bones
up here to get the kinematic type, which is not copied into the output.

STORAGE:
--------
Bone ids are dense (0..205), so the registry is a flat tuple indexed by
int(bone), with None in the root's slot. Lookup is O(1) and completeness is
a single pass over the tuple.

AUTHORING:
----------
- AXIAL_JOINTS: midline bones plus paired skull bones, one row per bone
- BILATERAL_JOINTS: limb rows written once with a "{s}" side placeholder
  and expanded for LEFT and RIGHT, so the two sides cannot drift apart

The module-level JOINT_REGISTRY is built and validated at import and never
mutated afterwards. It is safe to share between threads without locking.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional, Tuple

from ..catalog import Bone, Side, ROOT_BONE, N_BONES
from .limits import JointLimits, JointType, LOCKED

logger = logging.getLogger(__name__)


class RegistryError(RuntimeError):
    """Raised when the joint hierarchy is incomplete or not a single tree."""
    pass


@dataclass(frozen=True)
class Joint:
    """Parent link of one bone: who it hangs from, how, and how far it moves."""
    parent: Bone
    type: JointType
    limits: JointLimits


# ============================================================================
# AUTHORED TABLES
# ============================================================================

hinge = JointLimits.hinge
pivot = JointLimits.pivot
ball = JointLimits.ball
biaxial = JointLimits.biaxial

CART = JointType.CARTILAGINOUS
GLIDE = JointType.GLIDING
FIB = JointType.FIBROUS

# Tight cone shared by most gliding joints (carpals, tarsals, rib heads)
GLIDE_CONE = ball(-5, 5, -5, 5, -5, 5)

LUMBAR_DISC = ball(-10, 5, -5, 5, -5, 5)
THORACIC_DISC = ball(-5, 5, -15, 15, -5, 5)   # more twist
CERVICAL_DISC = ball(-10, 10, -10, 10, -10, 10)


AXIAL_JOINTS: Tuple[Tuple[Bone, Bone, JointType, JointLimits], ...] = (
    # --- Spine, built up from the sacrum ---
    (Bone.COCCYX, Bone.SACRUM, CART, LOCKED),
    (Bone.LUMBAR_5, Bone.SACRUM, CART, ball(-15, 5, -5, 5, -5, 5)),
    (Bone.LUMBAR_4, Bone.LUMBAR_5, CART, LUMBAR_DISC),
    (Bone.LUMBAR_3, Bone.LUMBAR_4, CART, LUMBAR_DISC),
    (Bone.LUMBAR_2, Bone.LUMBAR_3, CART, LUMBAR_DISC),
    (Bone.LUMBAR_1, Bone.LUMBAR_2, CART, LUMBAR_DISC),

    (Bone.THORACIC_12, Bone.LUMBAR_1, CART, THORACIC_DISC),
    (Bone.THORACIC_11, Bone.THORACIC_12, CART, THORACIC_DISC),
    (Bone.THORACIC_10, Bone.THORACIC_11, CART, THORACIC_DISC),
    (Bone.THORACIC_9, Bone.THORACIC_10, CART, THORACIC_DISC),
    (Bone.THORACIC_8, Bone.THORACIC_9, CART, THORACIC_DISC),
    (Bone.THORACIC_7, Bone.THORACIC_8, CART, THORACIC_DISC),
    (Bone.THORACIC_6, Bone.THORACIC_7, CART, THORACIC_DISC),
    (Bone.THORACIC_5, Bone.THORACIC_6, CART, THORACIC_DISC),
    (Bone.THORACIC_4, Bone.THORACIC_5, CART, THORACIC_DISC),
    (Bone.THORACIC_3, Bone.THORACIC_4, CART, THORACIC_DISC),
    (Bone.THORACIC_2, Bone.THORACIC_3, CART, THORACIC_DISC),
    (Bone.THORACIC_1, Bone.THORACIC_2, CART, THORACIC_DISC),

    (Bone.CERVICAL_7, Bone.THORACIC_1, CART, CERVICAL_DISC),
    (Bone.CERVICAL_6, Bone.CERVICAL_7, CART, CERVICAL_DISC),
    (Bone.CERVICAL_5, Bone.CERVICAL_6, CART, CERVICAL_DISC),
    (Bone.CERVICAL_4, Bone.CERVICAL_5, CART, CERVICAL_DISC),
    (Bone.CERVICAL_3, Bone.CERVICAL_4, CART, CERVICAL_DISC),
    (Bone.CERVICAL_2_AXIS, Bone.CERVICAL_3, CART, CERVICAL_DISC),
    (Bone.CERVICAL_1_ATLAS, Bone.CERVICAL_2_AXIS, JointType.PIVOT, pivot(-80, 80)),  # "no"

    # --- Skull ---
    (Bone.OCCIPITAL, Bone.CERVICAL_1_ATLAS, JointType.CONDYLOID, biaxial(-25, 25, -10, 10)),  # "yes"
    (Bone.SPHENOID, Bone.OCCIPITAL, FIB, LOCKED),
    (Bone.FRONTAL, Bone.SPHENOID, FIB, LOCKED),
    (Bone.ETHMOID, Bone.SPHENOID, FIB, LOCKED),
    (Bone.VOMER, Bone.ETHMOID, FIB, LOCKED),
    (Bone.MANDIBLE, Bone.TEMPORAL_LEFT, JointType.HINGE, hinge(0, 45)),  # jaw open

    # --- Hyoid hangs free in the neck ---
    (Bone.HYOID, Bone.CERVICAL_3, GLIDE, ball(-10, 10, -10, 10, -10, 10)),

    # --- Thoracic cage ---
    (Bone.STERNUM, Bone.THORACIC_4, CART, GLIDE_CONE),
)


# Paired skull bones and limbs: "{s}" expands to LEFT / RIGHT
BILATERAL_JOINTS: Tuple[Tuple[str, str, JointType, JointLimits], ...] = (
    # --- Cranial and facial plates (sutures) ---
    ('PARIETAL_{s}', 'OCCIPITAL', FIB, LOCKED),
    ('TEMPORAL_{s}', 'PARIETAL_{s}', FIB, LOCKED),
    ('MAXILLA_{s}', 'FRONTAL', FIB, LOCKED),
    ('NASAL_{s}', 'FRONTAL', FIB, LOCKED),
    ('ZYGOMATIC_{s}', 'MAXILLA_{s}', FIB, LOCKED),
    ('LACRIMAL_{s}', 'MAXILLA_{s}', FIB, LOCKED),
    ('PALATINE_{s}', 'MAXILLA_{s}', FIB, LOCKED),
    ('INFERIOR_NASAL_CONCHA_{s}', 'MAXILLA_{s}', FIB, LOCKED),

    # --- Ossicle chain in the middle ear ---
    ('MALLEUS_{s}', 'TEMPORAL_{s}', FIB, LOCKED),
    ('INCUS_{s}', 'MALLEUS_{s}', JointType.SADDLE, biaxial(-5, 5, -5, 5)),
    ('STAPES_{s}', 'INCUS_{s}', JointType.BALL_AND_SOCKET, GLIDE_CONE),

    # --- Rib heads on their thoracic vertebra ---
    *((f'RIB_{n}_{{s}}', f'THORACIC_{n}', GLIDE, GLIDE_CONE) for n in range(1, 13)),

    # --- Pectoral girdle and arm ---
    ('CLAVICLE_{s}', 'STERNUM', JointType.SADDLE, biaxial(-10, 20, -10, 10)),
    ('SCAPULA_{s}', 'CLAVICLE_{s}', GLIDE, ball(-20, 20, -20, 20, -20, 20)),
    ('HUMERUS_{s}', 'SCAPULA_{s}', JointType.BALL_AND_SOCKET, ball(-90, 180, -90, 90, -45, 135)),
    ('ULNA_{s}', 'HUMERUS_{s}', JointType.HINGE, hinge(0, 145)),
    ('RADIUS_{s}', 'HUMERUS_{s}', JointType.PIVOT, pivot(-90, 90)),

    # --- Wrist ---
    ('LUNATE_{s}', 'RADIUS_{s}', JointType.CONDYLOID, biaxial(-60, 60, -30, 30)),
    ('SCAPHOID_{s}', 'RADIUS_{s}', GLIDE, GLIDE_CONE),
    ('TRIQUETRUM_{s}', 'LUNATE_{s}', GLIDE, GLIDE_CONE),
    ('PISIFORM_{s}', 'TRIQUETRUM_{s}', GLIDE, GLIDE_CONE),
    ('CAPITATE_{s}', 'LUNATE_{s}', GLIDE, GLIDE_CONE),
    ('HAMATE_{s}', 'CAPITATE_{s}', GLIDE, GLIDE_CONE),
    ('TRAPEZIUM_{s}', 'SCAPHOID_{s}', GLIDE, GLIDE_CONE),
    ('TRAPEZOID_{s}', 'SCAPHOID_{s}', GLIDE, GLIDE_CONE),

    # --- Thumb ---
    ('METACARPAL_1_{s}', 'TRAPEZIUM_{s}', JointType.SADDLE, ball(-20, 20, -20, 20, -45, 45)),
    ('PROXIMAL_PHALANX_THUMB_{s}', 'METACARPAL_1_{s}', JointType.HINGE, hinge(0, 60)),
    ('DISTAL_PHALANX_THUMB_{s}', 'PROXIMAL_PHALANX_THUMB_{s}', JointType.HINGE, hinge(0, 80)),

    # --- Fingers 2..5 ---
    *(row
      for n, finger, carpal in ((2, 'INDEX_FINGER', 'CAPITATE'),
                                (3, 'MIDDLE_FINGER', 'CAPITATE'),
                                (4, 'RING_FINGER', 'HAMATE'),
                                (5, 'LITTLE_FINGER', 'HAMATE'))
      for row in (
          (f'METACARPAL_{n}_{{s}}', f'{carpal}_{{s}}', GLIDE, GLIDE_CONE),
          (f'PROXIMAL_PHALANX_{finger}_{{s}}', f'METACARPAL_{n}_{{s}}',
           JointType.CONDYLOID, biaxial(-10, 90, -20, 20)),
          (f'MIDDLE_PHALANX_{finger}_{{s}}', f'PROXIMAL_PHALANX_{finger}_{{s}}',
           JointType.HINGE, hinge(0, 100)),
          (f'DISTAL_PHALANX_{finger}_{{s}}', f'MIDDLE_PHALANX_{finger}_{{s}}',
           JointType.HINGE, hinge(0, 80)),
      )),

    # --- Pelvis and leg ---
    ('HIP_BONE_{s}', 'SACRUM', FIB, LOCKED),
    ('FEMUR_{s}', 'HIP_BONE_{s}', JointType.BALL_AND_SOCKET, ball(-20, 120, -30, 30, -10, 45)),
    ('PATELLA_{s}', 'FEMUR_{s}', GLIDE, ball(-10, 10, -5, 5, -5, 5)),
    ('TIBIA_{s}', 'FEMUR_{s}', JointType.HINGE, hinge(0, 150)),
    ('FIBULA_{s}', 'TIBIA_{s}', GLIDE, GLIDE_CONE),

    # --- Ankle and tarsals ---
    ('TALUS_{s}', 'TIBIA_{s}', JointType.HINGE, hinge(-20, 50)),
    ('CALCANEUS_{s}', 'TALUS_{s}', GLIDE, ball(-10, 10, -10, 10, -10, 10)),
    ('NAVICULAR_{s}', 'TALUS_{s}', GLIDE, GLIDE_CONE),
    ('CUBOID_{s}', 'CALCANEUS_{s}', GLIDE, GLIDE_CONE),
    ('MEDIAL_CUNEIFORM_{s}', 'NAVICULAR_{s}', GLIDE, GLIDE_CONE),
    ('INTERMEDIATE_CUNEIFORM_{s}', 'NAVICULAR_{s}', GLIDE, GLIDE_CONE),
    ('LATERAL_CUNEIFORM_{s}', 'NAVICULAR_{s}', GLIDE, GLIDE_CONE),

    # --- Big toe ---
    ('METATARSAL_1_{s}', 'MEDIAL_CUNEIFORM_{s}', GLIDE, GLIDE_CONE),
    ('PROXIMAL_PHALANX_BIG_TOE_{s}', 'METATARSAL_1_{s}', JointType.CONDYLOID, biaxial(-10, 60, -10, 10)),
    ('DISTAL_PHALANX_BIG_TOE_{s}', 'PROXIMAL_PHALANX_BIG_TOE_{s}', JointType.HINGE, hinge(0, 60)),

    # --- Toes 2..5 ---
    *(row
      for n, toe, tarsal in ((2, 'TOE_2', 'INTERMEDIATE_CUNEIFORM'),
                             (3, 'TOE_3', 'LATERAL_CUNEIFORM'),
                             (4, 'TOE_4', 'CUBOID'),
                             (5, 'LITTLE_TOE', 'CUBOID'))
      for row in (
          (f'METATARSAL_{n}_{{s}}', f'{tarsal}_{{s}}', GLIDE, GLIDE_CONE),
          (f'PROXIMAL_PHALANX_{toe}_{{s}}', f'METATARSAL_{n}_{{s}}',
           JointType.CONDYLOID, biaxial(-10, 60, -10, 10)),
          (f'MIDDLE_PHALANX_{toe}_{{s}}', f'PROXIMAL_PHALANX_{toe}_{{s}}',
           JointType.HINGE, hinge(0, 60)),
          (f'DISTAL_PHALANX_{toe}_{{s}}', f'MIDDLE_PHALANX_{toe}_{{s}}',
           JointType.HINGE, hinge(0, 50)),
      )),
)


def _expand(template: str, side: Side) -> Bone:
    return Bone[template.format(s=side.value)]


# ============================================================================
# REGISTRY
# ============================================================================

class JointRegistry:
    """
    Read-only joint hierarchy stored as a flat tuple indexed by bone id.

    Parameters:
    -----------
    entries : Mapping[Bone, Joint]
        One joint per non-root bone
    root : Bone
        The bone with no parent (default: sacrum)

    Notes:
    ------
    The constructor does not validate. Call validate() (build_joint_registry
    does) to check that the entries form a single tree.
    """

    def __init__(self, entries: Mapping[Bone, Joint], root: Bone = ROOT_BONE):
        slots: List[Optional[Joint]] = [None] * N_BONES
        for bone, joint in entries.items():
            slots[int(bone)] = joint
        self._joints: Tuple[Optional[Joint], ...] = tuple(slots)
        self._root = root

        children: Dict[Bone, List[Bone]] = {bone: [] for bone in Bone}
        for bone in Bone:
            joint = self._joints[bone]
            if joint is not None:
                children[joint.parent].append(bone)
        self._children = {bone: tuple(kids) for bone, kids in children.items()}

    @property
    def root(self) -> Bone:
        return self._root

    def __len__(self) -> int:
        """Number of joints (edges), i.e. bones with a parent."""
        return sum(1 for j in self._joints if j is not None)

    def lookup(self, bone: Bone) -> Optional[Joint]:
        """Joint entry for a bone, or None (the root, or a missing entry)."""
        return self._joints[bone]

    def parent(self, bone: Bone) -> Optional[Bone]:
        joint = self._joints[bone]
        return joint.parent if joint is not None else None

    def children(self, bone: Bone) -> Tuple[Bone, ...]:
        return self._children[bone]

    def edges(self) -> Iterator[Tuple[Bone, Bone]]:
        """Yield (parent, child) pairs in bone-id order."""
        for bone in Bone:
            joint = self._joints[bone]
            if joint is not None:
                yield joint.parent, bone

    def path_to_root(self, bone: Bone) -> List[Bone]:
        """
        Chain of bones from `bone` up to the root, both included.

        Raises RegistryError if the chain loops or ends somewhere other
        than the root.
        """
        path = [bone]
        seen = {bone}
        current = bone
        while current != self._root:
            joint = self._joints[current]
            if joint is None:
                raise RegistryError(
                    f"{current.name} has no parent joint; chain from {bone.name} "
                    f"does not reach root {self._root.name}"
                )
            current = joint.parent
            if current in seen:
                raise RegistryError(f"Cycle in joint hierarchy at {current.name}")
            seen.add(current)
            path.append(current)
        return path

    def depth(self, bone: Bone) -> int:
        """Number of joints between `bone` and the root."""
        return len(self.path_to_root(bone)) - 1

    def validate(self) -> None:
        """
        Check that the entries form one tree rooted at `root`.

        Raises:
        -------
        RegistryError
            If the root has a parent, a non-root bone has none, or a parent
            chain loops.
        """
        if self._joints[self._root] is not None:
            raise RegistryError(f"Root {self._root.name} must not have a parent joint")

        missing = [b.name for b in Bone if b != self._root and self._joints[b] is None]
        if missing:
            raise RegistryError(
                f"{len(missing)} bone(s) missing from joint registry: {', '.join(missing)}"
            )

        for bone in Bone:
            self.path_to_root(bone)


def build_joint_registry() -> JointRegistry:
    """Expand the authored tables into a validated JointRegistry."""
    entries: Dict[Bone, Joint] = {}

    def add(bone: Bone, joint: Joint) -> None:
        if bone in entries:
            raise RegistryError(f"Duplicate joint entry for {bone.name}")
        entries[bone] = joint

    for bone, parent, joint_type, limits in AXIAL_JOINTS:
        add(bone, Joint(parent, joint_type, limits))

    for template, parent_template, joint_type, limits in BILATERAL_JOINTS:
        for side in Side:
            add(_expand(template, side),
                Joint(_expand(parent_template, side), joint_type, limits))

    registry = JointRegistry(entries)
    registry.validate()
    logger.debug("Joint registry built: %d joints, root %s", len(registry), registry.root.name)
    return registry


# Process-wide, built once at import, read-only thereafter
JOINT_REGISTRY = build_joint_registry()


def get_joint(bone: Bone) -> Optional[Joint]:
    """Shortcut for JOINT_REGISTRY.lookup(bone)."""
    return JOINT_REGISTRY.lookup(bone)
