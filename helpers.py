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


import math


class Helper(object):

    """Wraps a cairo context in a higher-level API.

    Primitives:
    - circle
    - rect / center rect
    - fill with a gray level
    """

    def __init__(self, cr):
        self.cr = cr

    def circle(self, center, radius):
        self.cr.new_sub_path()
        self.cr.arc(center.x, center.y, radius, 0, 2 * math.pi)

    def center_rect(self, center, w, h):
        self.cr.rectangle(center.x - 0.5 * w, center.y - 0.5 * h, w, h)

    def rect(self, rect):
        self.center_rect(rect.center, rect.width, rect.height)

    def gray(self, level):
        """Set the source to an opaque gray, `level` in 0..255."""
        value = level / 0xFF
        self.cr.set_source_rgb(value, value, value)

    def fill_rect(self, rect, level):
        self.rect(rect)
        self.gray(level)
        self.cr.fill()

    def fill_circle(self, center, radius, level=0xFF):
        self.circle(center, radius)
        self.gray(level)
        self.cr.fill()


class Point(object):

    """Reasonably terse 2D Point class."""

    def __init__(self, x, y): self.x = float(x) ; self.y = float(y)
    def __eq__(self, o):
        return isinstance(o, Point) and (self.x, self.y) == (o.x, o.y)


class Rect(object):

    """Axis-aligned rectangle, stored by its center."""

    def __init__(self, center, width, height):
        self.center = center
        self.width = width
        self.height = height

    @classmethod
    def from_top_left(self, top_left, width, height):
        return Rect(
            Point(top_left.x + width * 0.5, top_left.y + height * 0.5),
            width, height
        )

