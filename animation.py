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

"""Sequence rendered frames into one looping, palette-indexed GIF.

Frame i is drawn at ratio i / frame_count, so the frames sweep every
star through exactly one depth cycle and the last frame leads straight
back into the first.
"""

from concurrent.futures import ThreadPoolExecutor
import logging

from palette import build_palette, quantize
from render import render_frame, surface_to_image
from scene import generate_stars


log = logging.getLogger(__name__)


class Frame(object):

    """A palette-indexed image and how long to show it, in centiseconds."""

    def __init__(self, image, delay):
        self.image = image
        self.delay = delay

    @property
    def duration_ms(self):
        return self.delay * 10


class Animation(object):

    """Ordered frames sharing one palette."""

    def __init__(self, frames, palette, loop=True):
        self.frames = frames
        self.palette = palette
        self.loop = loop

    def __len__(self):
        return len(self.frames)

    def save(self, fp):
        """Encode as GIF into the file object `fp`.

        Encoding errors are not caught here.
        """
        if not self.frames:
            raise ValueError("cannot encode an animation without frames")
        first, rest = self.frames[0], self.frames[1:]
        options = dict(
            format="GIF",
            save_all=True,
            append_images=[frame.image for frame in rest],
            duration=[frame.duration_ms for frame in self.frames],
            optimize=False,
        )
        if self.loop:
            options["loop"] = 0
        first.image.save(fp, **options)


def ratios(frame_count):
    return [i / frame_count for i in range(frame_count)]


def draw_frame(stars, ratio, palette, settings):
    surface = render_frame(stars, ratio, settings)
    return Frame(quantize(surface_to_image(surface), palette), settings.delay)


def assemble(stars, palette, settings, jobs=1):
    """Render, quantize and collect `settings.frame_count` frames.

    With `jobs` > 1 the frames are drawn on a thread pool; the result
    is in frame order either way.
    """
    def draw(ratio):
        return draw_frame(stars, ratio, palette, settings)

    if jobs > 1:
        with ThreadPoolExecutor(max_workers=jobs) as pool:
            frames = list(pool.map(draw, ratios(settings.frame_count)))
    else:
        frames = [draw(ratio) for ratio in ratios(settings.frame_count)]

    return Animation(frames, palette)


def generate_animation(source, settings, jobs=1):
    """Run the whole pipeline for one image."""
    stars = generate_stars(source, settings)
    palette = build_palette(settings.levels)
    log.debug("rendering %d frames of %d stars",
              settings.frame_count, len(stars))
    return assemble(stars, palette, settings, jobs)
