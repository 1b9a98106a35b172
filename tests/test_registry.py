# tests/test_registry.py
"""
JOINT REGISTRY TESTS: The Skeleton Must Be One Tree
===================================================

The registry is the edge set of the skeleton. If it is wrong, every consumer
downstream (physics, animation, plotting) inherits the error, so these tests
audit the authored table:

1. TREE: every non-root bone has a parent, the root has none, no cycles
2. SYMMETRY: left and right entries agree after mirroring
3. AUTHORING: joint types agree with the shape of their limits
4. ERRORS: an incomplete registry is rejected with RegistryError
"""

import pytest

from anatomy_forge.catalog import Bone, Side, ROOT_BONE, mirror, side_of
from anatomy_forge.kernel.limits import JointLimits, JointType, LOCKED
from anatomy_forge.kernel.registry import (
    JOINT_REGISTRY,
    Joint,
    JointRegistry,
    RegistryError,
    build_joint_registry,
    get_joint,
)


class TestTreeStructure:
    """The shipped registry is a single tree rooted at the sacrum."""

    def test_root_has_no_entry(self):
        assert JOINT_REGISTRY.root == Bone.SACRUM
        assert get_joint(Bone.SACRUM) is None
        assert JOINT_REGISTRY.parent(ROOT_BONE) is None

    def test_every_other_bone_has_an_entry(self):
        missing = [b for b in Bone if b != ROOT_BONE and get_joint(b) is None]
        assert missing == []
        assert len(JOINT_REGISTRY) == 205

        print("✓ 205 joints, one per non-root bone")

    def test_every_chain_reaches_root(self):
        for bone in Bone:
            path = JOINT_REGISTRY.path_to_root(bone)
            assert path[0] == bone
            assert path[-1] == ROOT_BONE
            assert len(path) == len(set(path))

    def test_edges_match_lookup(self):
        edges = list(JOINT_REGISTRY.edges())
        assert len(edges) == 205
        for parent, child in edges:
            assert get_joint(child).parent == parent
            assert child in JOINT_REGISTRY.children(parent)

    def test_depths(self):
        assert JOINT_REGISTRY.depth(Bone.SACRUM) == 0
        assert JOINT_REGISTRY.depth(Bone.LUMBAR_5) == 1
        # sacrum -> 5 lumbar -> 12 thoracic -> 7 cervical -> occipital
        assert JOINT_REGISTRY.depth(Bone.OCCIPITAL) == 25

    def test_validate_passes(self):
        JOINT_REGISTRY.validate()
        build_joint_registry().validate()


class TestAnatomicalEntries:
    """Spot-check entries against standard anatomy."""

    def test_left_humerus(self):
        joint = get_joint(Bone.HUMERUS_LEFT)
        assert joint.parent == Bone.SCAPULA_LEFT
        assert joint.type is JointType.BALL_AND_SOCKET
        assert joint.limits == JointLimits.ball(-90, 180, -90, 90, -45, 135)

    def test_spine_chain(self):
        assert get_joint(Bone.LUMBAR_5).parent == Bone.SACRUM
        assert get_joint(Bone.THORACIC_12).parent == Bone.LUMBAR_1
        assert get_joint(Bone.CERVICAL_7).parent == Bone.THORACIC_1
        assert get_joint(Bone.CERVICAL_1_ATLAS).type is JointType.PIVOT
        assert get_joint(Bone.OCCIPITAL).parent == Bone.CERVICAL_1_ATLAS

    def test_ribs_hang_from_their_vertebra(self):
        for n in range(1, 13):
            for side in Side:
                joint = get_joint(Bone[f"RIB_{n}_{side.value}"])
                assert joint.parent == Bone[f"THORACIC_{n}"]
                assert joint.type is JointType.GLIDING

    def test_knee_and_elbow_are_hinges(self):
        for bone in (Bone.TIBIA_LEFT, Bone.ULNA_RIGHT, Bone.MANDIBLE):
            joint = get_joint(bone)
            assert joint.type is JointType.HINGE
            assert joint.limits.free_axes == ('pitch',)

    def test_ossicle_chain(self):
        assert get_joint(Bone.MALLEUS_LEFT).parent == Bone.TEMPORAL_LEFT
        assert get_joint(Bone.INCUS_LEFT).parent == Bone.MALLEUS_LEFT
        assert get_joint(Bone.STAPES_LEFT).parent == Bone.INCUS_LEFT


class TestSymmetry:
    """Paired bones have structurally identical entries."""

    def test_left_right_entries_mirror(self):
        for bone in Bone:
            if side_of(bone) is not Side.LEFT:
                continue
            left = get_joint(bone)
            right = get_joint(mirror(bone))
            assert right.type == left.type, bone.name
            assert right.limits == left.limits, bone.name
            assert right.parent == mirror(left.parent), bone.name

        print("✓ All paired joints mirror exactly")


class TestAuthoring:
    """Joint types are paired with limits of the right shape."""

    def test_fibrous_joints_are_locked(self):
        for parent, child in JOINT_REGISTRY.edges():
            joint = get_joint(child)
            if joint.type is JointType.FIBROUS:
                assert joint.limits == LOCKED, child.name

    def test_hinges_move_in_pitch_only(self):
        for _, child in JOINT_REGISTRY.edges():
            joint = get_joint(child)
            if joint.type is JointType.HINGE:
                assert joint.limits.free_axes == ('pitch',), child.name

    def test_pivots_move_in_yaw_only(self):
        for _, child in JOINT_REGISTRY.edges():
            joint = get_joint(child)
            if joint.type is JointType.PIVOT:
                assert joint.limits.free_axes == ('yaw',), child.name

    def test_condyloid_joints_do_not_twist(self):
        for _, child in JOINT_REGISTRY.edges():
            joint = get_joint(child)
            if joint.type is JointType.CONDYLOID:
                assert 'yaw' not in joint.limits.free_axes, child.name


class TestValidationErrors:
    """Hand-built registries that are not a tree are rejected."""

    def _entries(self):
        return {child: get_joint(child) for _, child in JOINT_REGISTRY.edges()}

    def test_missing_entry(self):
        entries = self._entries()
        del entries[Bone.FEMUR_LEFT]
        with pytest.raises(RegistryError, match="FEMUR_LEFT"):
            JointRegistry(entries).validate()

    def test_root_with_parent(self):
        entries = self._entries()
        entries[Bone.SACRUM] = Joint(Bone.LUMBAR_5, JointType.FIBROUS, LOCKED)
        with pytest.raises(RegistryError):
            JointRegistry(entries).validate()

    def test_cycle(self):
        entries = self._entries()
        entries[Bone.LUMBAR_5] = Joint(Bone.LUMBAR_1, JointType.CARTILAGINOUS, LOCKED)
        with pytest.raises(RegistryError, match="Cycle"):
            JointRegistry(entries).validate()

    def test_registry_error_is_runtime_error(self):
        assert issubclass(RegistryError, RuntimeError)


if __name__ == "__main__":
    TestTreeStructure().test_every_other_bone_has_an_entry()
    TestSymmetry().test_left_right_entries_mirror()
    print("\n✓ All registry tests passed!")
