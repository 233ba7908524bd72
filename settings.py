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

"""Configuration for the starfield generator.

Geometry and timing are fixed for the whole program and live on the
class. The rest is resolved from the command line, falling back to the
environment, and validated before any image is produced.
"""

import argparse
import logging

from params import (
    DirectoryParameter,
    NumericParameter,
    ParameterGroup,
    PathParameter,
)


log = logging.getLogger(__name__)


class UserError(Exception):
    pass


class ConfigError(UserError):
    pass


class Settings(object):

    """Every knob the pipeline reads, in one place."""

    # canvas, in pixels
    width = 500
    height = 250

    # depth axis: stars live in [0, cycle), visible in [z_min, z_max)
    cycle = 8.0
    z_min = 1.0
    z_max = 15.0

    # animation
    frame_count = 30
    delay = 4  # centiseconds

    # scene
    min_stars = 500
    max_stars = 4500
    spread = 4.0
    exclusion = 0.5
    max_radius = 4

    # colors
    background = 0x11
    star = 0xFF
    levels = 16

    def __init__(self, output_dir=None, count=50, dataset=None, model=None,
                 seed=None, jobs=1, grace=5.0, keep_going=False,
                 verbose=False, **overrides):
        self.output_dir = output_dir
        self.count = count
        self.dataset = dataset
        self.model = model
        self.seed = seed
        self.jobs = jobs
        self.grace = grace
        self.keep_going = keep_going
        self.verbose = verbose
        for name, value in overrides.items():
            if not hasattr(Settings, name):
                raise ConfigError("Unknown setting: %s" % name)
            setattr(self, name, value)
        self.validate()

    def validate(self):
        if self.cycle <= 0:
            raise ConfigError("cycle must be positive, got %r" % self.cycle)
        if self.z_min <= 0:
            raise ConfigError("z_min must be positive, got %r" % self.z_min)
        if self.z_min >= self.z_max:
            raise ConfigError(
                "empty depth window [%r, %r)" % (self.z_min, self.z_max))
        if self.frame_count <= 0:
            raise ConfigError("frame_count must be positive")
        if not 0 < self.min_stars < self.max_stars:
            raise ConfigError(
                "bad star range [%r, %r)" % (self.min_stars, self.max_stars))
        if self.exclusion >= self.spread:
            raise ConfigError("exclusion zone covers the whole scene")
        if self.count <= 0:
            raise ConfigError("count must be positive, got %r" % self.count)
        if self.jobs <= 0:
            raise ConfigError("jobs must be positive, got %r" % self.jobs)
        if self.grace < 0:
            raise ConfigError("grace must not be negative")

    @property
    def half_width(self):
        return self.width / 2

    @property
    def half_height(self):
        return self.height / 2

    def describe(self):
        """Log the resolved settings, one per line."""
        log.info("Init starfield generator with params")
        log.info("IMAGE_DIR %s", self.output_dir)
        log.info("IMAGE_NUMBER %d", self.count)
        if self.dataset is not None:
            log.info("PATH_DATASET %s", self.dataset)
        if self.model is not None:
            log.info("PATH_MODEL %s", self.model)
        log.info("seed %s", "time" if self.seed is None else self.seed)
        log.info("jobs %d, grace %gs", self.jobs, self.grace)

    @classmethod
    def parameters(cls, environ=None):
        group = ParameterGroup(environ)
        group.define("IMAGE_DIR", DirectoryParameter(writable=True))
        group.define("IMAGE_NUMBER", NumericParameter(lower=1, default=50))
        group.define("PATH_DATASET", DirectoryParameter())
        group.define("PATH_MODEL", PathParameter())
        group.define("STARFIELD_SEED", NumericParameter(default=None))
        group.define("STARFIELD_JOBS", NumericParameter(lower=1, default=1))
        group.define("STARFIELD_GRACE", NumericParameter(lower=0, default=5.0))
        return group

    @classmethod
    def from_args(cls, argv, environ=None):
        """Parse `argv`, fill the gaps from `environ`, and validate.

        Raises ConfigError on any missing or malformed value.
        """
        args = build_parser().parse_args(argv)
        group = cls.parameters(environ)
        given = {
            "IMAGE_DIR": args.output_dir,
            "IMAGE_NUMBER": args.count,
            "PATH_DATASET": args.dataset,
            "PATH_MODEL": args.model,
            "STARFIELD_SEED": args.seed,
            "STARFIELD_JOBS": args.jobs,
            "STARFIELD_GRACE": args.grace,
        }

        try:
            values = group.getValues(given)
        except ValueError as e:
            raise ConfigError(str(e)) from e

        if values["IMAGE_DIR"] is None:
            raise ConfigError("Set `IMAGE_DIR` variable or pass --output-dir")

        return cls(
            output_dir=values["IMAGE_DIR"],
            count=values["IMAGE_NUMBER"],
            dataset=values["PATH_DATASET"],
            model=values["PATH_MODEL"],
            seed=values["STARFIELD_SEED"],
            jobs=values["STARFIELD_JOBS"],
            grace=values["STARFIELD_GRACE"],
            keep_going=args.keep_going,
            verbose=args.verbose,
        )


def build_parser():
    desc = "Generate looping starfield animations as GIF files."
    parser = argparse.ArgumentParser(description=desc)

    parser.add_argument(
        "-o", "--output-dir",
        help="Directory to write animations into (env: IMAGE_DIR)",
        metavar="DIR",
    )

    parser.add_argument(
        "-n", "--count",
        help="Number of animations to produce (env: IMAGE_NUMBER, default 50)",
        metavar="N",
    )

    parser.add_argument(
        "--dataset",
        help="Reference directory whose contents are listed at startup "
             "(env: PATH_DATASET)",
        metavar="DIR",
    )

    parser.add_argument(
        "--model",
        help="Reference file which must exist (env: PATH_MODEL)",
        metavar="FILE",
    )

    parser.add_argument(
        "--seed",
        help="Seed for the random source (env: STARFIELD_SEED, default: clock)",
    )

    parser.add_argument(
        "-j", "--jobs",
        help="Render frames on this many threads (env: STARFIELD_JOBS)",
        metavar="N",
    )

    parser.add_argument(
        "--grace",
        help="Seconds to wait after a termination signal before stopping "
             "(env: STARFIELD_GRACE, default 5)",
        metavar="SECONDS",
    )

    parser.add_argument(
        "--keep-going",
        help="Log and skip animations that fail to write instead of exiting",
        action="store_true",
    )

    parser.add_argument(
        "-v", "--verbose",
        help="Log per-image details",
        action="store_true",
    )

    return parser
