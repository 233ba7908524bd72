# starfield: Looping starfield animations rendered with cairo.
#
# Copyright (C) 2020  Brandon Lewis
#
# This program is free software: you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public License
# as published by the Free Software Foundation, either version 3 of
# the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public
# License along with this program.  If not, see
# <https://www.gnu.org/licenses/>.

"""Random placement of stars in the flythrough volume."""

from collections import namedtuple
import logging
import random
import time


log = logging.getLogger(__name__)


# x and y are already scaled to canvas pixels; depth is in [0, cycle).
Star = namedtuple("Star", ("x", "y", "depth", "radius"))


class RandomSource(object):

    """The single source of randomness for one run.

    Seeded from the wall clock unless a seed is given, so that a run
    can be reproduced.
    """

    def __init__(self, seed=None):
        if seed is None:
            seed = time.time_ns()
        self.seed = seed
        self.rng = random.Random(seed)

    def uniform(self, lower, upper):
        return self.rng.uniform(lower, upper)

    def fraction(self):
        """A float in [0, 1)."""
        return self.rng.random()

    def below(self, n):
        """An integer in [0, n)."""
        return self.rng.randrange(n)


def in_exclusion_zone(x, y, size):
    return abs(x) < size and abs(y) < size


def sample_position(source, settings):
    """Draw an (x, y) pair in unit space, rejecting the vanishing point."""
    while True:
        x = source.uniform(-settings.spread, settings.spread)
        y = source.uniform(-settings.spread, settings.spread)
        if not in_exclusion_zone(x, y, settings.exclusion):
            return x, y


def generate_stars(source, settings, count=None):
    """Return a list of stars for one animation.

    When `count` is None it is drawn from [min_stars, max_stars).
    """
    if count is None:
        count = settings.min_stars + source.below(
            settings.max_stars - settings.min_stars)

    stars = []
    while len(stars) < count:
        x, y = sample_position(source, settings)
        stars.append(Star(
            x * settings.width,
            y * settings.height,
            source.fraction() * settings.cycle,
            source.below(settings.max_radius + 1),
        ))

    log.debug("generated %d stars", len(stars))
    return stars
