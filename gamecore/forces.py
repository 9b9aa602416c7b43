"""Force generators: springs between bodies and uniform gravity."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from .vector import Vector3


@dataclass
class Body:
    """A point mass that accumulates the forces applied to it.

    An ``inverse_mass`` of zero stands for an immovable body of infinite mass.
    """

    position: Vector3 = field(default_factory=Vector3)
    linear_velocity: Vector3 = field(default_factory=Vector3)
    inverse_mass: float = 1.0
    force: Vector3 = field(default_factory=Vector3)

    def apply_force_at_center(self, force: Vector3) -> None:
        """Add a force acting through the centre of mass."""
        self.force = self.force + force

    def clear_forces(self) -> None:
        self.force = Vector3()


class ForceGenerator(ABC):
    """Something that applies forces to the bodies it is attached to."""

    @abstractmethod
    def apply_force(self) -> None:
        """Apply this generator's forces for the current step."""


class GlobalForceGenerator(ABC):
    """Something that applies a force to any body it is handed."""

    @abstractmethod
    def apply_force(self, body: Body) -> None:
        """Apply this generator's force to the given body."""


class Spring(ForceGenerator):
    """A damped spring; the rest length is never negative."""

    def __init__(self, rest_length: float = 0.0, stiffness: float = 1.0, damping: float = 1.0) -> None:
        self.rest_length = rest_length
        self.stiffness = float(stiffness)
        self.damping = float(damping)

    @property
    def rest_length(self) -> float:
        return self._rest_length

    @rest_length.setter
    def rest_length(self, value: float) -> None:
        self._rest_length = max(float(value), 0.0)

    @abstractmethod
    def current_length(self) -> float:
        """The spring's present length."""


class ParticleSpring(Spring):
    """A damped spring joining the centres of two bodies."""

    def __init__(
        self,
        rest_length: float,
        stiffness: float,
        damping: float,
        anchor1: Body,
        anchor2: Body,
    ) -> None:
        super().__init__(rest_length, stiffness, damping)
        self.anchors = (anchor1, anchor2)

    def apply_force(self) -> None:
        """Push or pull both anchors along the line between them.

        Anchors at the same point have no direction between them and
        receive no force.
        """
        first, second = self.anchors
        offset = second.position - first.position
        length = offset.magnitude()
        if length == 0.0:
            return
        direction = offset / length
        relative_velocity = second.linear_velocity - first.linear_velocity
        magnitude = (
            self.stiffness * (self.rest_length - length)
            - self.damping * direction.dot(relative_velocity)
        )
        force = direction * magnitude
        first.apply_force_at_center(-force)
        second.apply_force_at_center(force)

    def current_length(self) -> float:
        first, second = self.anchors
        return (second.position - first.position).magnitude()


class Gravity(GlobalForceGenerator):
    """A uniform gravitational acceleration."""

    def __init__(self, gravity: Vector3 | None = None) -> None:
        self.gravity = gravity if gravity is not None else Vector3(0.0, -9.81, 0.0)

    def apply_force(self, body: Body) -> None:
        """Apply the weight of the body; bodies of infinite mass are left alone."""
        if body.inverse_mass == 0.0:
            return
        body.apply_force_at_center(self.gravity / body.inverse_mass)