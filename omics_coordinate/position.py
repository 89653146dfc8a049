# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Positions are the numeric part of a coordinate: a non-negative integer no
larger than the configured width (see default_parameters.POSITION_BITS).

Construction policy: Position.new and Position.try_new only accept plain
Python ints, so a float or a numpy scalar never silently becomes a
position. Position.from_value is the generic conversion path for anything
integer-like (numpy integers, decimal strings), kept for interoperability
but not meant as the everyday constructor.
"""

from functools import total_ordering
import operator
import re

from . import default_parameters
from .errors import ParseError, PositionOutOfRangeError
from .value_object import ValueObject

DECIMAL_DIGITS_REGEX = re.compile(r"[0-9]+")


def _is_plain_int(value):
    return isinstance(value, int) and not isinstance(value, bool)


@total_ordering
class Position(ValueObject):
    __slots__ = ["value"]

    def __init__(self, value):
        if not _is_plain_int(value):
            raise TypeError("Expected position to be an int but got %s" % (
                type(value),))
        max_value = Position.max_value()
        if value < 0 or value > max_value:
            raise PositionOutOfRangeError(value, 0, max_value)
        super(Position, self).__init__(value=value)

    @staticmethod
    def max_value():
        """
        Largest position representable with the configured width.
        """
        return 2 ** default_parameters.POSITION_BITS - 1

    @classmethod
    def new(cls, value):
        """
        Create a Position from an int which is known to be valid, e.g. a
        literal in trusted code. Out of range values still raise
        PositionOutOfRangeError.
        """
        return cls(value)

    @classmethod
    def try_new(cls, value, system=None):
        """
        Create a Position from an int which might not be valid.

        Parameters
        ----------
        value : int

        system : System, optional
            If given, the value must also be at least the minimum position
            of this coordinate system (1 for base, 0 for interbase).

        Raises PositionOutOfRangeError if the value can't be represented.
        """
        if system is not None and _is_plain_int(value) and value < system.min_position:
            raise PositionOutOfRangeError(
                value,
                system.min_position,
                cls.max_value())
        return cls(value)

    @classmethod
    def from_value(cls, value):
        """
        Generic conversion from any integer-like value: ints, objects
        implementing __index__ (such as numpy integers), other Positions
        and strings of decimal digits. Prefer new/try_new when the input
        is already an int.
        """
        if isinstance(value, Position):
            return value
        if isinstance(value, str):
            text = value.strip()
            if DECIMAL_DIGITS_REGEX.fullmatch(text) is None:
                raise ParseError("Invalid position: '%s'" % (value,))
            return cls(int(text))
        if isinstance(value, bool):
            raise TypeError("Can't convert bool to a position")
        return cls(operator.index(value))

    def get(self):
        return self.value

    def __int__(self):
        return self.value

    def __index__(self):
        return self.value

    def checked_add(self, amount):
        """
        Position `amount` further along, or None if that would exceed the
        largest representable position.
        """
        result = self.value + amount
        if result < 0 or result > Position.max_value():
            return None
        return Position(result)

    def checked_sub(self, amount):
        """
        Position `amount` before this one, or None if that would be negative.
        """
        return self.checked_add(-amount)

    def distance(self, other):
        """
        Absolute number of positions between this position and another.
        """
        return abs(self.value - int(other))

    def __lt__(self, other):
        if not isinstance(other, Position):
            return NotImplemented
        return self.value < other.value

    def __str__(self):
        return str(self.value)

    def __repr__(self):
        return ValueObject.__str__(self)
