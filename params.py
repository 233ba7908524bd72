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

"""Text-based parameter implementations.

Each parameter turns one text value, taken from the command line or
the environment, into a typed and validated setting.
"""

from collections import OrderedDict
import os


class Parameter(object):

    """A uniform interface for creating parameters from the environment."""

    default = None

    def require(self, value, allowed_types):
        """Raise an error if `value` is not one of `allowed_types`.

        `allowed_types` may be a tuple or a single type.
        """

        if not isinstance(value, allowed_types):
            raise TypeError("Expected one of %s, got %r." % (
                ", ".join(repr(t) for t in allowed_types),
                value
            ))

    def parse(self, text):
        raise NotImplementedError


class NumericParameter(Parameter):

    """A scalar numeric value, with an optional finite range."""

    def __init__(self, lower=None, upper=None, default=0):
        allowed = (int, float, type(None))
        self.require(lower, allowed)
        self.require(upper, allowed)
        self.require(default, allowed)
        self.lower = lower
        self.upper = upper
        self.default = default
        self.kind = float if isinstance(default, float) else int

    def parse(self, text):
        value = self.kind(text)
        if self.lower is not None and value < self.lower:
            raise ValueError("{} is below {}".format(value, self.lower))
        if self.upper is not None and value > self.upper:
            raise ValueError("{} is above {}".format(value, self.upper))
        return value


class PathParameter(Parameter):

    """A filesystem path which must exist."""

    def __init__(self, default=None):
        self.require(default, (str, type(None)))
        self.default = default

    def parse(self, text):
        if not os.path.exists(text):
            raise ValueError("{} does not exist".format(text))
        return text


class DirectoryParameter(PathParameter):

    """A directory, optionally required to be writable."""

    def __init__(self, default=None, writable=False):
        super().__init__(default)
        self.require(writable, bool)
        self.writable = writable

    def parse(self, text):
        if not os.path.isdir(text):
            raise ValueError("{} is not a directory".format(text))
        if self.writable and not os.access(text, os.W_OK | os.X_OK):
            raise ValueError("{} is not writable".format(text))
        return text


class ParameterGroup(object):

    """Manages the named parameters, keyed by environment variable."""

    def __init__(self, environ=None):
        self.params = OrderedDict()
        self.environ = os.environ if environ is None else environ

    def define(self, name, param):
        """Define a new parameter."""

        if name in self.params:
            raise ValueError("Parameter %s already defined" % name)
        self.params[name] = param

    def getValues(self, overrides=None):
        """Get the current value for each parameter, as dict.

        `overrides` maps names to text that takes precedence over the
        environment (e.g. values given on the command line).
        """
        overrides = overrides or {}
        return {
            name: self.getParamValue(name, param, overrides.get(name))
            for name, param in self.params.items()
        }

    def getParamValue(self, name, param, text=None):
        if text is None:
            text = self.environ.get(name)
        if text is None:
            return param.default
        try:
            return param.parse(text)
        except ValueError as e:
            raise ValueError("{}: {}".format(name, e)) from e
