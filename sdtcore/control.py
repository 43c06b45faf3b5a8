"""Temporal control layers that drive impact and friction models.

These objects produce compound sound events: bouncing, breaking, crumpling,
rolling and scraping. Each one outputs control values, such as impact
velocities, energies or forces, that feed the lower level interaction
models.
"""

from __future__ import annotations

import math
import random

from .common import EARTH, MICRO, exp_rand, fclip, frand, get_time_step, gravity, kinetic

UNDERSHOOT = 0.1
OVERSHOOT = 10.0


def ground_decay(grain: float, velocity: float) -> float:
    """Decay rate of the surface profile tracker, clipped to ``[0, 2]``."""
    return fclip(2.0 * grain * abs(velocity), 0.0, 2.0)


def _micro_impact_energy(rng: random.Random | None) -> float:
    return fclip(exp_rand(1.45, rng), UNDERSHOOT, OVERSHOOT)


class Bouncing:
    """Irregular bouncing of an object that is dropped from a height.

    :meth:`step` returns the impact velocity of a bounce, or 0 between bounces.
    """

    def __init__(
        self,
        restitution: float = 0.0,
        height: float = 0.0,
        irregularity: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng
        self.restitution = restitution
        self.height = height
        self.irregularity = irregularity
        self.target_velocity = 0.0
        self.current_velocity = 0.0

    @property
    def restitution(self) -> float:
        """Coefficient of restitution, in ``[0, 1]``."""
        return self._restitution

    @restitution.setter
    def restitution(self, value: float) -> None:
        self._restitution = fclip(value, 0.0, 1.0)

    @property
    def height(self) -> float:
        """Starting height of the falling object, in metres."""
        return self._height

    @height.setter
    def height(self, value: float) -> None:
        self._height = max(value, 0.0)

    @property
    def irregularity(self) -> float:
        """How far the object's shape is from a sphere, in ``[0, 1]``."""
        return self._irregularity

    @irregularity.setter
    def irregularity(self, value: float) -> None:
        self._irregularity = fclip(value, 0.0, 1.0)

    def reset(self) -> None:
        """Restart the process with the energy of a fall from ``height``."""
        self.target_velocity = math.sqrt(2.0 * self._height * EARTH)
        self.current_velocity = 0.0

    def step(self) -> float:
        """Advance one sample and return the impact velocity, if any."""
        velocity = 0.0
        if self.target_velocity > MICRO:
            self.current_velocity += get_time_step() * EARTH
            if self.current_velocity > self.target_velocity:
                velocity = self.target_velocity
                self.target_velocity *= self._restitution * (
                    1.0 - self._irregularity * frand(self._rng)
                )
                self.current_velocity -= velocity + self.target_velocity
        return velocity

    def has_finished(self) -> bool:
        """True once no energy is left."""
        return self.target_velocity <= 0.0


class Breaking:
    """Breaking process that uses up a stored energy through micro impacts.

    :meth:`step` returns a pair ``(energy, size)``: the impact energy and the
    size of the fragment.
    """

    def __init__(
        self,
        stored_energy: float = 0.0,
        crushing_energy: float = 0.0,
        granularity: float = 0.0,
        fragmentation: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng
        self._stored_energy = 0.0
        self._crushing_energy = 0.0
        if stored_energy:
            self.stored_energy = stored_energy
        if crushing_energy:
            self.crushing_energy = crushing_energy
        self.granularity = granularity
        self.fragmentation = fragmentation
        self.remaining_energy = 0.0

    @property
    def stored_energy(self) -> float:
        """Total energy that the micro impacts use up."""
        return self._stored_energy

    @stored_energy.setter
    def stored_energy(self, value: float) -> None:
        self._stored_energy = max(MICRO, value)

    @property
    def crushing_energy(self) -> float:
        """Average energy of a micro impact."""
        return self._crushing_energy

    @crushing_energy.setter
    def crushing_energy(self, value: float) -> None:
        self._crushing_energy = max(MICRO, value)

    @property
    def granularity(self) -> float:
        """Event density, in ``[0, 1]``."""
        return self._granularity

    @granularity.setter
    def granularity(self, value: float) -> None:
        self._granularity = fclip(value, 0.0, 1.0)

    @property
    def fragmentation(self) -> float:
        """Progressive fragmentation of the object, in ``[0, 1]``."""
        return self._fragmentation

    @fragmentation.setter
    def fragmentation(self, value: float) -> None:
        self._fragmentation = fclip(value, 0.0, 1.0)

    def reset(self) -> None:
        """Restore the full initial energy."""
        self.remaining_energy = 1.0

    def has_finished(self) -> bool:
        """True once the remaining energy cannot feed another impact."""
        if self._stored_energy == 0.0:
            # Unset energies: 0/0 never finishes, x/0 always does.
            return self._crushing_energy > 0.0
        return self.remaining_energy <= self._crushing_energy / self._stored_energy

    def step(self) -> tuple[float, float]:
        """Advance one iteration and return ``(energy, size)``."""
        energy = 0.0
        size = 0.0
        if not self.has_finished():
            success = self._granularity * self.remaining_energy
            if frand(self._rng) < success:
                fragment = (
                    1.0
                    - self._fragmentation
                    + self._fragmentation * self.remaining_energy
                )
                energy = (
                    self._crushing_energy
                    * self.remaining_energy
                    * _micro_impact_energy(self._rng)
                )
                size = max(MICRO, fragment * (0.5 + 0.5 * frand(self._rng)))
                if self._stored_energy:
                    self.remaining_energy -= energy / self._stored_energy
        else:
            self.remaining_energy = 0.0
        return energy, size


class Crumpling:
    """Crumpling process whose micro impacts never use up any energy.

    :meth:`step` returns a pair ``(energy, size)``.
    """

    def __init__(
        self,
        crushing_energy: float = 0.0,
        granularity: float = 0.0,
        fragmentation: float = 0.0,
        rng: random.Random | None = None,
    ) -> None:
        self._rng = rng
        self._crushing_energy = 0.0
        if crushing_energy:
            self.crushing_energy = crushing_energy
        self.granularity = granularity
        self.fragmentation = fragmentation

    @property
    def crushing_energy(self) -> float:
        """Average energy of a micro impact."""
        return self._crushing_energy

    @crushing_energy.setter
    def crushing_energy(self, value: float) -> None:
        self._crushing_energy = max(MICRO, value)

    @property
    def granularity(self) -> float:
        """Event density, in ``[0, 1]``."""
        return self._granularity

    @granularity.setter
    def granularity(self, value: float) -> None:
        self._granularity = fclip(value, 0.0, 1.0)

    @property
    def fragmentation(self) -> float:
        """Fragmentation of the object, in ``[0, 1]``."""
        return self._fragmentation

    @fragmentation.setter
    def fragmentation(self, value: float) -> None:
        self._fragmentation = fclip(value, 0.0, 1.0)

    def step(self) -> tuple[float, float]:
        """Advance one iteration and return ``(energy, size)``."""
        energy = 0.0
        size = 0.0
        if frand(self._rng) < self._granularity:
            fragment = 1.0 - self._fragmentation + self._fragmentation * frand(self._rng)
            energy = self._crushing_energy * _micro_impact_energy(self._rng)
            size = max(MICRO, fragment * (0.5 + 0.5 * frand(self._rng)))
        return energy, size


class Rolling:
    """Normal force on an object that rolls over a surface profile."""

    def __init__(
        self,
        grain: float = 0.0,
        depth: float = 0.0,
        mass: float = 0.0,
        velocity: float = 0.0,
    ) -> None:
        self._grain = 0.0
        self._depth = 0.0
        self._mass = 0.0
        self._velocity = 0.0
        self._gravity = 0.0
        self._kinetic = 0.0
        self._decay = 0.0
        self.ground_trace = 0.0
        self.ball_flight = 0.0
        self.grain = grain
        self.depth = depth
        self.mass = mass
        self.velocity = velocity

    @property
    def grain(self) -> float:
        """Surface grain, in ``[0, 1]``; higher values roll more smoothly."""
        return self._grain

    @grain.setter
    def grain(self, value: float) -> None:
        self._grain = fclip(value, 0.0, 1.0)
        self._decay = ground_decay(self._grain, self._velocity)

    @property
    def depth(self) -> float:
        """Average depth of the surface bumps."""
        return self._depth

    @depth.setter
    def depth(self, value: float) -> None:
        self._depth = max(value, 0.0)

    @property
    def mass(self) -> float:
        """Mass of the rolling object, in kg."""
        return self._mass

    @mass.setter
    def mass(self, value: float) -> None:
        self._mass = max(value, 0.0)
        self._gravity = gravity(self._mass)
        self._kinetic = kinetic(self._mass, self._velocity)

    @property
    def velocity(self) -> float:
        """Rolling velocity."""
        return self._velocity

    @velocity.setter
    def velocity(self, value: float) -> None:
        self._velocity = value
        self._kinetic = kinetic(self._mass, self._velocity)
        self._decay = ground_decay(self._grain, self._velocity)

    def process(self, surface: float) -> float:
        """Take one surface profile sample and return the normal force."""
        out = -self._gravity
        current = max(self.ground_trace - self._decay, surface)
        if current > self.ground_trace and self.ball_flight == 0.0 and self._decay:
            bump = (
                (current - self.ground_trace)
                * self._depth
                * self._kinetic
                / math.sqrt(self._decay)
            )
            self.ball_flight = 2.0 * bump
            out += bump
        self.ground_trace = current
        self.ball_flight = max(0.0, self.ball_flight - self._gravity)
        return out


class Scraping:
    """Force that a probe scraping over a surface profile applies to a resonator."""

    def __init__(
        self,
        grain: float = 0.0,
        force: float = 0.0,
        velocity: float = 0.0,
    ) -> None:
        self._grain = 0.0
        self._force = 0.0
        self._velocity = 0.0
        self._decay = 0.0
        self.ground_trace = 0.0
        self.grain = grain
        self.force = force
        self.velocity = velocity

    @property
    def grain(self) -> float:
        """Surface grain, in ``[0, 1]``; higher values scrape more smoothly."""
        return self._grain

    @grain.setter
    def grain(self, value: float) -> None:
        self._grain = fclip(value, 0.0, 1.0)
        self._decay = ground_decay(self._grain, self._velocity)

    @property
    def force(self) -> float:
        """Normal force of the probe on the surface."""
        return self._force

    @force.setter
    def force(self, value: float) -> None:
        self._force = max(value, 0.0)

    @property
    def velocity(self) -> float:
        """Probe velocity."""
        return self._velocity

    @velocity.setter
    def velocity(self, value: float) -> None:
        self._velocity = value
        self._decay = ground_decay(self._grain, self._velocity)

    def process(self, surface: float) -> float:
        """Take one surface profile sample and return the force on the resonator."""
        out = 0.0
        current = max(self.ground_trace - self._decay, surface)
        if current > self.ground_trace and self._decay:
            bump = (current - self.ground_trace) / math.sqrt(self._decay)
            out -= self._force * self._velocity * self._velocity * bump
        self.ground_trace = current
        return out