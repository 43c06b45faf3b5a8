import math
import random

import pytest

from sdtcore.common import EARTH, MICRO, set_sample_rate
from sdtcore.control import (
    Bouncing,
    Breaking,
    Crumpling,
    Rolling,
    Scraping,
    ground_decay,
)


@pytest.fixture(autouse=True)
def _sample_rate():
    set_sample_rate(44100.0)


def _bounces(bouncing, count, limit=10_000_000):
    found = []
    for _ in range(limit):
        v = bouncing.step()
        if v:
            found.append(v)
            if len(found) == count:
                break
    return found


def test_ground_decay_clips_to_two():
    assert ground_decay(1.0, 100.0) == 2.0
    assert ground_decay(0.0, 5.0) == 0.0
    assert ground_decay(0.25, -1.0) == pytest.approx(0.5)


def test_bouncing_parameter_clipping():
    b = Bouncing(restitution=2.0, height=-1.0, irregularity=-0.5)
    assert b.restitution == 1.0
    assert b.height == 0.0
    assert b.irregularity == 0.0


def test_bouncing_first_impact_velocity_matches_fall():
    b = Bouncing(restitution=0.5, height=0.2)
    b.reset()
    first, second = _bounces(b, 2)
    assert first == pytest.approx(math.sqrt(2.0 * 0.2 * EARTH))
    assert second == pytest.approx(0.5 * first)


def test_bouncing_zero_restitution_finishes():
    b = Bouncing(restitution=0.0, height=1.0)
    b.reset()
    assert not b.has_finished()
    assert len(_bounces(b, 1)) == 1
    assert b.has_finished()
    assert b.step() == 0.0


def test_bouncing_irregular_bounces_never_grow():
    b = Bouncing(restitution=0.9, height=0.1, irregularity=1.0, rng=random.Random(3))
    b.reset()
    found = _bounces(b, 5)
    assert all(later <= earlier for earlier, later in zip(found, found[1:]))


def test_breaking_energy_clamps_to_micro():
    br = Breaking(stored_energy=-5.0, crushing_energy=0.0001)
    assert br.stored_energy == MICRO
    br.crushing_energy = -1.0
    assert br.crushing_energy == MICRO


def test_breaking_without_reset_is_silent():
    br = Breaking(stored_energy=1.0, crushing_energy=0.01, granularity=1.0)
    assert br.step() == (0.0, 0.0)


def test_crumpling_zero_granularity_is_silent():
    c = Crumpling(crushing_energy=0.5, granularity=0.0, rng=random.Random(1))
    assert all(c.step() == (0.0, 0.0) for _ in range(100))


def test_crumpling_energy_bounds():
    c = Crumpling(crushing_energy=0.5, granularity=1.0, fragmentation=0.5, rng=random.Random(2))
    for _ in range(200):
        energy, size = c.step()
        assert 0.5 * 0.1 <= energy <= 0.5 * 10.0
        assert MICRO <= size < 1.0


def test_rolling_flat_surface_gives_weight():
    r = Rolling(grain=0.0, depth=1.0, mass=1.0, velocity=1.0)
    assert r.process(0.5) == pytest.approx(-EARTH)


def test_rolling_bump_adds_force():
    r = Rolling(grain=0.5, depth=1.0, mass=1.0, velocity=1.0)
    out = r.process(0.5)
    assert out > -EARTH
    assert r.ground_trace == 0.5


def test_scraping_without_decay_is_silent():
    s = Scraping(grain=0.0, force=1.0, velocity=1.0)
    assert s.process(1.0) == 0.0


def test_scraping_bump_pushes_down():
    s = Scraping(grain=0.5, force=2.0, velocity=1.0)
    assert s.process(0.25) == pytest.approx(-0.5)
    assert s.ground_trace == 0.25
    assert s.process(-1.0) == 0.0
    assert s.ground_trace == pytest.approx(-0.75)


def test_scraping_clips_parameters():
    s = Scraping(grain=3.0, force=-2.0)
    assert s.grain == 1.0
    assert s.force == 0.0