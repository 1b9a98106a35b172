# anatomy_forge - Procedural human skeleton generation
"""
ANATOMY-FORGE: A Procedural Skeleton Generator
==============================================

This package provides:
- A closed catalog of the 206 bones of the adult skeleton
- A static joint registry (parent, joint type, rotation limits per bone)
- A generator that turns five genetic scalars into a full skeleton
- Post-processing and plotting of the generated bind pose

ARCHITECTURE:
-------------
    catalog.py      Bone identities, sides, mirroring helpers
    model.py        BodyDNA, vectors, collision shapes, BoneDefinition
    config.py       GeneratorConfig / CONFIG

    kernel/         Joint limits, joint types, joint registry
    generative/     Region generators (body, limbs, shared segments)

    post.py         World positions, mass summaries, symmetry audit, tables
    viz.py          Matplotlib bind-pose plot
"""

from .catalog import Bone, Side, ROOT_BONE, mirror, side_of, sided, rib
from .config import CONFIG, GeneratorConfig
from .kernel import (
    JOINT_REGISTRY,
    Joint,
    JointLimits,
    JointRegistry,
    JointType,
    LOCKED,
    RegistryError,
    get_joint,
)
from .model import BodyDNA, BoneDefinition, Box, Capsule, Quat, Sphere, Vec3
from .generative import generate_body

__version__ = "0.1.0"
