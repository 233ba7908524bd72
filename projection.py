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

"""Perspective projection of stars onto the canvas.

Time moves every star toward the viewer by `ratio * cycle`. A star that
has passed `z_min` reappears one cycle further back, which is what makes
frame `frame_count` identical to frame 0 and the animation loop
seamlessly.
"""

from collections import namedtuple

from helpers import Point


Projection = namedtuple("Projection", ("x", "y", "radius"))


def depths(star, ratio, settings):
    """Yield every depth in [z_min, z_max) the star occupies at `ratio`.

    Usually one, but a depth window wider than the cycle yields more.
    """
    z = star.depth - ratio * settings.cycle
    while z < settings.z_max:
        if z >= settings.z_min:
            yield z
        z += settings.cycle


def project(star, ratio, settings):
    """Yield a Projection for each visible copy of `star`."""
    for z in depths(star, ratio, settings):
        yield Projection(
            settings.half_width + star.x / z,
            settings.half_height + star.y / z,
            star.radius / z,
        )


def center(projection):
    return Point(projection.x, projection.y)
