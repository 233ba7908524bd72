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

"""Fixed grayscale palette and Floyd-Steinberg quantization."""

from PIL import Image


def gray_levels(levels=16):
    """Evenly spaced gray values from 0 to 255 inclusive."""
    if levels < 2:
        raise ValueError("need at least two levels, got %r" % levels)
    step = 0xFF // (levels - 1)
    return [i * step for i in range(levels)]


def build_palette(levels=16):
    """Return a 1x1 "P" image carrying #000000, #111111, ..., #ffffff.

    Pillow quantizes against the palette of such an image.
    """
    data = []
    for level in gray_levels(levels):
        data.extend((level, level, level))
    palette = Image.new("P", (1, 1))
    palette.putpalette(data)
    return palette


def palette_colors(palette):
    """The palette entries as a list of (r, g, b) tuples."""
    data = palette.getpalette("RGB")
    return [tuple(data[i:i + 3]) for i in range(0, len(data), 3)]


def quantize(image, palette):
    """Map an RGB image onto `palette` with error-diffusion dithering."""
    return image.convert("RGB").quantize(
        palette=palette, dither=Image.Dither.FLOYDSTEINBERG)
