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

"""Deliver finished animations into the output directory.

Readers of the directory only ever see complete `.gif` files: each
animation is encoded under a temporary `.part` name and renamed into
place once closed.
"""

import logging
import os
import tempfile


log = logging.getLogger(__name__)

PARTIAL_SUFFIX = ".part"
SUFFIX = ".gif"


class WriteError(Exception):
    pass


def write_animation(animation, directory, prefix="space-"):
    """Encode `animation` into `directory` and return the final path."""
    try:
        fd, partial = tempfile.mkstemp(
            suffix=PARTIAL_SUFFIX, prefix=prefix, dir=directory)
    except OSError as e:
        raise WriteError("unable to create file: %s" % e) from e

    final = partial[:-len(PARTIAL_SUFFIX)] + SUFFIX
    try:
        with os.fdopen(fd, "wb") as f:
            animation.save(f)
        os.rename(partial, final)
    except (KeyboardInterrupt, SystemExit):
        discard(partial)
        raise
    except Exception as e:
        discard(partial)
        raise WriteError("unable to write %s: %s" % (final, e)) from e

    log.info("wrote %s", final)
    return final


def discard(path):
    try:
        os.unlink(path)
    except FileNotFoundError:
        pass
