# File: tests/test_catalog.py
"""
Test the catalog.py module: bone identities, sides and mirroring helpers.
"""

import pytest
from anatomy_forge.catalog import (
    Bone, Side, ROOT_BONE, N_BONES,
    LUMBAR, THORACIC, CERVICAL,
    side_of, sided, mirror, rib,
)


def test_catalog_has_206_bones():
    """
    The adult skeleton has exactly 206 bones, with dense ids 0..205.
    """
    assert N_BONES == 206
    assert len(Bone) == 206
    assert sorted(int(b) for b in Bone) == list(range(206))

    print("✓ Catalog has 206 bones with dense ids")


def test_regional_composition():
    """
    Count bones per region the way an anatomy text does.
    """
    names = [b.name for b in Bone]

    vertebral = [n for n in names if n.startswith(('LUMBAR', 'THORACIC', 'CERVICAL'))]
    assert len(vertebral) + 2 == 26          # + sacrum, coccyx

    ribs = [n for n in names if n.startswith('RIB_')]
    assert len(ribs) == 24

    ossicles = [n for n in names if n.startswith(('MALLEUS', 'INCUS', 'STAPES'))]
    assert len(ossicles) == 6

    left = [b for b in Bone if side_of(b) is Side.LEFT]
    right = [b for b in Bone if side_of(b) is Side.RIGHT]
    assert len(left) == len(right)

    print(f"✓ Regions: {len(vertebral) + 2} vertebral, {len(ribs)} ribs, {len(ossicles)} ossicles")


def test_spine_tuples_are_bottom_up():
    """
    LUMBAR/THORACIC/CERVICAL are ordered in stacking order (lowest first).
    """
    assert len(LUMBAR) == 5 and LUMBAR[0] == Bone.LUMBAR_5 and LUMBAR[-1] == Bone.LUMBAR_1
    assert len(THORACIC) == 12 and THORACIC[0] == Bone.THORACIC_12
    assert len(CERVICAL) == 7 and CERVICAL[-1] == Bone.CERVICAL_1_ATLAS
    assert ROOT_BONE == Bone.SACRUM


def test_side_of():
    assert side_of(Bone.FEMUR_LEFT) is Side.LEFT
    assert side_of(Bone.HUMERUS_RIGHT) is Side.RIGHT
    assert side_of(Bone.SACRUM) is None
    assert side_of(Bone.MANDIBLE) is None

    assert Side.LEFT.opposite is Side.RIGHT


def test_mirror_is_an_involution():
    """
    mirror() swaps paired bones, keeps midline bones, and mirror(mirror(b)) == b.
    """
    assert mirror(Bone.FEMUR_LEFT) == Bone.FEMUR_RIGHT
    assert mirror(Bone.DISTAL_PHALANX_LITTLE_TOE_RIGHT) == Bone.DISTAL_PHALANX_LITTLE_TOE_LEFT
    assert mirror(Bone.STERNUM) == Bone.STERNUM

    for bone in Bone:
        assert mirror(mirror(bone)) == bone

    print("✓ mirror() is an involution over the full catalog")


def test_sided_and_rib():
    assert sided('CLAVICLE', Side.LEFT) == Bone.CLAVICLE_LEFT
    assert rib(1, Side.RIGHT) == Bone.RIB_1_RIGHT
    assert rib(12, Side.LEFT) == Bone.RIB_12_LEFT

    with pytest.raises(KeyError):
        sided('TAIL', Side.LEFT)


@pytest.mark.parametrize("number", [0, 13, -1])
def test_rib_out_of_range(number):
    with pytest.raises(ValueError):
        rib(number, Side.LEFT)


if __name__ == "__main__":
    test_catalog_has_206_bones()
    test_regional_composition()
    test_mirror_is_an_involution()
    print("\n✓ All catalog tests passed!")
