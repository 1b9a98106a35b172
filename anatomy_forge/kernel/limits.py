# anatomy_forge/kernel/limits.py
"""
JOINT LIMITS: Rotational Box Constraints
========================================

PURPOSE:
--------
A joint limit is an angular box relative to the bind pose:

    pitch  (x axis)  flexion / extension
    yaw    (y axis)  twist / axial rotation
    roll   (z axis)  abduction / adduction

Values are stored in RADIANS. The preset constructors take DEGREES, because
that is how joint ranges are quoted in anatomy tables, and convert once.

This is a data carrier, not a solver: min > max is not rejected and nothing
is clamped here.

JOINT TYPES:
------------
JointType is descriptive metadata stored next to the limits in the joint
registry. It says what motion the joint is meant to allow; the limits say
how much. Pairing a type with inconsistent limits is an authoring error
that the registry tests audit, it is not checked at runtime.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

D2R = math.pi / 180.0


@dataclass(frozen=True)
class JointLimits:
    """
    Rotational limits of a joint, in radians, relative to the bind pose.

    Examples:
    ---------
    >>> JointLimits.hinge(0, 90).max_pitch      # elbow-like
    1.5707963267948966
    >>> JointLimits.pivot(-80, 80).min_pitch    # pitch locked on a pivot
    0.0
    """
    min_pitch: float = 0.0
    max_pitch: float = 0.0
    min_yaw: float = 0.0
    max_yaw: float = 0.0
    min_roll: float = 0.0
    max_roll: float = 0.0

    # --- Presets (degrees in, radians stored) ---

    @classmethod
    def locked(cls) -> 'JointLimits':
        """Fused joint (sutures, pelvic fusion). No motion."""
        return cls()

    @classmethod
    def hinge(cls, min_deg: float, max_deg: float) -> 'JointLimits':
        """Pitch only (knee, elbow, interphalangeal joints)."""
        return cls(min_pitch=min_deg * D2R, max_pitch=max_deg * D2R)

    @classmethod
    def pivot(cls, min_deg: float, max_deg: float) -> 'JointLimits':
        """Yaw only (atlas/axis rotation, forearm twist)."""
        return cls(min_yaw=min_deg * D2R, max_yaw=max_deg * D2R)

    @classmethod
    def ball(
        cls,
        pitch_min: float, pitch_max: float,
        yaw_min: float, yaw_max: float,
        roll_min: float, roll_max: float,
    ) -> 'JointLimits':
        """Full three-axis box (shoulder, hip, small gliding cones)."""
        return cls(
            pitch_min * D2R, pitch_max * D2R,
            yaw_min * D2R, yaw_max * D2R,
            roll_min * D2R, roll_max * D2R,
        )

    @classmethod
    def biaxial(
        cls,
        pitch_min: float, pitch_max: float,
        roll_min: float, roll_max: float,
    ) -> 'JointLimits':
        """Pitch + roll, no twist (condyloid and saddle joints)."""
        return cls(
            min_pitch=pitch_min * D2R, max_pitch=pitch_max * D2R,
            min_roll=roll_min * D2R, max_roll=roll_max * D2R,
        )

    @property
    def free_axes(self) -> Tuple[str, ...]:
        """Names of the axes whose range is not collapsed to a point."""
        axes = []
        if self.min_pitch != self.max_pitch:
            axes.append('pitch')
        if self.min_yaw != self.max_yaw:
            axes.append('yaw')
        if self.min_roll != self.max_roll:
            axes.append('roll')
        return tuple(axes)

    def to_degrees(self) -> Tuple[float, float, float, float, float, float]:
        """(min_pitch, max_pitch, min_yaw, max_yaw, min_roll, max_roll) in degrees."""
        return tuple(math.degrees(v) for v in (
            self.min_pitch, self.max_pitch,
            self.min_yaw, self.max_yaw,
            self.min_roll, self.max_roll,
        ))


LOCKED = JointLimits.locked()


class JointType(Enum):
    """
    Kinematic classification of a joint.

    BALL_AND_SOCKET  3 DOF. Shoulder, hip.
    HINGE            1 DOF, pitch. Elbow, knee, finger joints.
    PIVOT            1 DOF, yaw. Atlas/axis, radius twist.
    CONDYLOID        2 DOF, pitch + roll, no twist. Wrist, knuckles, skull nod.
    SADDLE           2 DOF with a wider, opposable range. Thumb base, clavicle.
    GLIDING          Small sliding motion, modelled as a tight ball cone.
                     Carpals, tarsals, rib heads.
    FIBROUS          Rigid/fused. Paired with LOCKED. Skull sutures.
    CARTILAGINOUS    Small flexible cone. Vertebral discs.
    """
    BALL_AND_SOCKET = 'ball_and_socket'
    HINGE = 'hinge'
    PIVOT = 'pivot'
    CONDYLOID = 'condyloid'
    SADDLE = 'saddle'
    GLIDING = 'gliding'
    FIBROUS = 'fibrous'
    CARTILAGINOUS = 'cartilaginous'
