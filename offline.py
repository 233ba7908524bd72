#! /usr/bin/python3
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


"""Offline generation of starfield animations.

Writes `--count` looping GIFs into the output directory, one after
another. A termination signal stops the run before the next image
starts, after a grace period that lets the current image finish.

Intended for batch workflows: every setting can come from the
environment, so the generator runs unattended in a container.
"""

import logging
import os
import signal
import sys
import threading

from animation import generate_animation
from scene import RandomSource
from settings import Settings, UserError
from writer import WriteError, write_animation


log = logging.getLogger(__name__)


class Cancellation(object):

    """A cooperative stop flag with a delayed trigger.

    `cancel(grace)` sets the flag `grace` seconds later on a timer
    thread; `cancelled` is polled between images. Cancelling again
    while the timer is pending sets the flag at once.
    """

    def __init__(self):
        self.event = threading.Event()
        self.timer = None

    @property
    def cancelled(self):
        return self.event.is_set()

    def cancel(self, grace=0):
        if self.cancelled:
            return
        if grace > 0 and self.timer is None:
            self.timer = threading.Timer(grace, self.event.set)
            self.timer.daemon = True
            self.timer.start()
            return
        if self.timer is not None:
            self.timer.cancel()
        self.event.set()

    def wait(self, timeout=None):
        return self.event.wait(timeout)


def install_signal_handlers(cancellation, grace,
                            signals=(signal.SIGTERM, signal.SIGINT)):
    """Route termination signals into `cancellation`.

    The first signal starts the grace period and a second one stops
    before the next image. After the first SIGINT, Ctrl+C goes back to
    raising KeyboardInterrupt so an interactive user can abort the
    current image too.
    """
    def handler(signum, unused_frame):
        if cancellation.timer is None:
            log.info("%s received. Going to shutdown gracefully in %gs...",
                     signal.Signals(signum).name, grace)
        else:
            log.info("%s received again. Stopping after this image.",
                     signal.Signals(signum).name)
        cancellation.cancel(grace)
        if signum == signal.SIGINT:
            signal.signal(signal.SIGINT, signal.default_int_handler)

    for signum in signals:
        signal.signal(signum, handler)


def list_dataset(path):
    """Log the entries of the reference directory."""
    try:
        names = sorted(os.listdir(path))
    except OSError as e:
        raise UserError("unable to list %s: %s" % (path, e)) from e
    for name in names:
        log.info(name)


def startup(settings):
    """Checks that must pass before the first image is rendered."""
    settings.describe()
    if settings.dataset is not None:
        list_dataset(settings.dataset)
    if settings.model is not None and not os.path.exists(settings.model):
        raise UserError("%s does not exist" % settings.model)


def run(settings, cancellation, source=None):
    """Produce up to `settings.count` animations; return the paths written."""
    if source is None:
        source = RandomSource(settings.seed)
    log.debug("random seed %s", source.seed)

    written = []
    for index in range(settings.count):
        if cancellation.cancelled:
            log.info("shutting down")
            break

        animation = generate_animation(source, settings, settings.jobs)
        try:
            written.append(write_animation(animation, settings.output_dir))
        except WriteError as e:
            if not settings.keep_going:
                raise
            log.error("skipping image %d: %s", index, e)

    return written


def main(argv=None, environ=None):
    logging.basicConfig(level=logging.INFO,
            format='%(asctime)s - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S')

    try:
        settings = Settings.from_args(
            sys.argv[1:] if argv is None else argv, environ)
        if settings.verbose:
            logging.getLogger().setLevel(logging.DEBUG)
        startup(settings)
    except UserError as e:
        print(e, file=sys.stderr)
        return 2

    cancellation = Cancellation()
    install_signal_handlers(cancellation, settings.grace)

    try:
        run(settings, cancellation)
    except WriteError as e:
        log.error("%s", e)
        return 1
    except KeyboardInterrupt:
        log.info("interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
