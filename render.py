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

"""Rasterize one frame of the starfield with cairo."""

import sys

import cairo
from PIL import Image

from helpers import Helper, Point, Rect
from projection import center, project


# cairo stores RGB24 pixels as native-endian 32-bit words.
RAW_MODE = "BGRX" if sys.byteorder == "little" else "XRGB"


def canvas(settings):
    """Return a fresh surface and a context drawing into it."""
    surface = cairo.ImageSurface(
        cairo.Format.RGB24, settings.width, settings.height)
    return surface, cairo.Context(surface)


def render_frame(stars, ratio, settings):
    """Draw every star at animation position `ratio` onto a new surface."""
    surface, cr = canvas(settings)
    helpers = Helper(cr)

    helpers.fill_rect(
        Rect.from_top_left(Point(0, 0), settings.width, settings.height),
        settings.background)

    for star in stars:
        for projection in project(star, ratio, settings):
            helpers.fill_circle(
                center(projection), projection.radius, settings.star)

    surface.flush()
    return surface


def surface_to_image(surface):
    """Copy an RGB24 surface into a Pillow RGB image."""
    return Image.frombuffer(
        "RGB",
        (surface.get_width(), surface.get_height()),
        bytes(surface.get_data()),
        "raw",
        RAW_MODE,
        surface.get_stride(),
        1,
    )
