import pytest

from projection import depths, project
from scene import RandomSource, Star, generate_stars
from settings import Settings


@pytest.fixture
def geometry():
    return Settings()


def test_wrapped_star_reappears_one_cycle_back(geometry):
    star = Star(2.0, 0.0, 4.0, 2.0)
    projections = list(project(star, 0.5, geometry))
    # z = 4 - 0.5 * 8 = 0 is hidden, 8 is visible, 16 is past z_max
    assert len(projections) == 1
    x, y, radius = projections[0]
    assert x == 250.25
    assert y == 125.0
    assert radius == 0.25


def test_loop_is_seamless(geometry):
    for star in generate_stars(RandomSource(5), geometry):
        start = list(project(star, 0.0, geometry))
        end = list(project(star, 1.0, geometry))
        assert len(start) == len(end)
        for a, b in zip(start, end):
            assert a == pytest.approx(b)


def test_exact_loop_for_representable_depths(geometry):
    star = Star(-100.0, 60.0, 4.0, 3.0)
    assert list(project(star, 0.0, geometry)) == \
        list(project(star, 1.0, geometry))


def test_depth_window_is_half_open(geometry):
    at_min = Star(10.0, 10.0, 1.0, 1.0)
    assert list(depths(at_min, 0.0, geometry)) == [1.0, 9.0]

    # z_max itself is never drawn: 7 is visible, 15 is not
    at_max = Star(10.0, 10.0, 7.0, 1.0)
    assert list(depths(at_max, 0.0, geometry)) == [7.0]


def test_boundary_consistent_across_frames(geometry):
    star = Star(10.0, 10.0, 1.0, 1.0)
    for i in range(geometry.frame_count):
        for z in depths(star, i / geometry.frame_count, geometry):
            assert geometry.z_min <= z < geometry.z_max


def test_wide_window_emits_several_copies():
    settings = Settings(z_min=1.0, z_max=40.0)
    star = Star(8.0, 8.0, 2.0, 1.0)
    assert list(depths(star, 0.0, settings)) == [2.0, 10.0, 18.0, 26.0, 34.0]
    assert len(list(project(star, 0.0, settings))) == 5


def test_narrow_window_may_hide_star():
    settings = Settings(z_min=1.0, z_max=2.0)
    star = Star(8.0, 8.0, 5.0, 1.0)
    assert list(project(star, 0.0, settings)) == []


def test_nearer_is_larger_and_further_from_center(geometry):
    star = Star(100.0, -50.0, 6.0, 4.0)
    near = list(project(star, 0.5, geometry))[0]   # z = 2
    far = list(project(star, 0.0, geometry))[0]    # z = 6
    assert near.radius > far.radius
    assert abs(near.x - 250) > abs(far.x - 250)
    assert near.y < far.y < 125
