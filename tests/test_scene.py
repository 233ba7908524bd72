import pytest

from scene import RandomSource, Star, generate_stars, in_exclusion_zone, sample_position
from settings import Settings


def test_exclusion_zone_never_violated():
    settings = Settings(min_stars=2000, max_stars=2001)
    stars = generate_stars(RandomSource(1), settings)
    assert len(stars) == 2000
    for star in stars:
        x = star.x / settings.width
        y = star.y / settings.height
        assert abs(x) >= 0.5 or abs(y) >= 0.5


def test_attribute_ranges():
    settings = Settings()
    for star in generate_stars(RandomSource(7), settings):
        assert 0 <= star.depth < settings.cycle
        assert isinstance(star.radius, int)
        assert star.radius in (0, 1, 2, 3, 4)
        assert abs(star.x) <= 4 * settings.width
        assert abs(star.y) <= 4 * settings.height


def test_count_within_range():
    settings = Settings()
    for seed in range(5):
        stars = generate_stars(RandomSource(seed), settings)
        assert 500 <= len(stars) < 4500


def test_explicit_count():
    stars = generate_stars(RandomSource(3), Settings(), count=12)
    assert len(stars) == 12


def test_same_seed_same_scene():
    settings = Settings()
    assert generate_stars(RandomSource(42), settings) == \
        generate_stars(RandomSource(42), settings)


def test_clock_seed_is_recorded():
    source = RandomSource()
    assert isinstance(source.seed, int)


class ScriptedSource(RandomSource):

    """Replays fixed uniform draws, to force rejections."""

    def __init__(self, draws):
        super().__init__(0)
        self.draws = list(draws)

    def uniform(self, lower, upper):
        return self.draws.pop(0)


def test_rejected_positions_are_redrawn():
    source = ScriptedSource([0.1, -0.2, 0.4, 0.49, 3.0, 0.1])
    assert sample_position(source, Settings()) == (3.0, 0.1)
    assert source.draws == []


def test_exclusion_zone_edges():
    assert in_exclusion_zone(0.49, -0.49, 0.5)
    assert not in_exclusion_zone(0.5, 0.0, 0.5)
    assert not in_exclusion_zone(0.0, -0.5, 0.5)


def test_star_is_immutable():
    star = Star(1.0, 2.0, 3.0, 4.0)
    with pytest.raises(AttributeError):
        star.x = 5.0
