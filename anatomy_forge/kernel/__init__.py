# anatomy_forge/kernel - Joint constraints and the skeleton hierarchy
"""
KERNEL: THE SKELETON'S STATIC STRUCTURE
=======================================

This package holds everything about a skeleton that does not depend on the
body being generated:
- How far each joint may rotate (JointLimits)
- What kind of joint it is (JointType)
- Which bone hangs from which (JointRegistry)

The generator reads from the kernel; nothing in the kernel reads from the
generator. The registry is built once at import and shared.
"""

from .limits import JointLimits, JointType, LOCKED
from .registry import (
    Joint,
    JointRegistry,
    RegistryError,
    JOINT_REGISTRY,
    build_joint_registry,
    get_joint,
)

__all__ = [
    'JointLimits', 'JointType', 'LOCKED',
    'Joint', 'JointRegistry', 'RegistryError',
    'JOINT_REGISTRY', 'build_joint_registry', 'get_joint',
]
