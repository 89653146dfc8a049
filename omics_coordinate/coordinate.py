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

from .contig import Contig
from .default_parameters import COORDINATE_SEPARATOR
from .errors import InvalidPositionError, ParseError, PositionOutOfRangeError
from .logging import get_logger
from .position import Position
from .strand import Strand
from .system import System
from .value_object import ValueObject

logger = get_logger(__name__)


class Coordinate(ValueObject):
    """
    A single addressable point: a position on a strand of a contig,
    interpreted in either the base or the interbase coordinate system.
    """
    __slots__ = [
        "contig",
        "position",
        "strand",
        "system",
    ]

    def __init__(self, contig, position, strand, system):
        """
        Parameters
        ----------
        contig : Contig or str

        position : Position or int

        strand : Strand or str
            Either a Strand or one of "+" / "-"

        system : System or str
            Either a System or one of "base" / "interbase"

        Raises InvalidPositionError if the position is smaller than the
        minimum position of the coordinate system.
        """
        contig = Contig(contig)
        if not isinstance(position, Position):
            position = Position.new(position)
        strand = Strand.coerce(strand)
        system = System.coerce(system)
        if position.value < system.min_position:
            raise InvalidPositionError(position.value, system)
        super(Coordinate, self).__init__(
            contig=contig,
            position=position,
            strand=strand,
            system=system)

    @classmethod
    def from_string(cls, text, system):
        """
        Parse a coordinate written as "contig:strand:position",
        e.g. "chr1:+:100".
        """
        parts = text.split(COORDINATE_SEPARATOR)
        if len(parts) != 3:
            raise ParseError("Invalid coordinate format: '%s'" % (text,))
        contig, strand, position = parts
        return cls(
            contig=contig,
            position=Position.from_value(position),
            strand=strand,
            system=system)

    def to_string(self):
        return COORDINATE_SEPARATOR.join(
            (str(self.contig), str(self.strand), str(self.position)))

    def _replace(self, position=None, strand=None, system=None):
        return Coordinate(
            contig=self.contig,
            position=self.position if position is None else position,
            strand=self.strand if strand is None else strand,
            system=self.system if system is None else system)

    def with_system(self, system):
        """
        Same point expressed in another coordinate system: going from base
        to interbase subtracts one from the position, going from interbase
        to base adds one. Contig and strand are unchanged.
        """
        system = System.coerce(system)
        if system is self.system:
            return self
        if system is System.INTERBASE:
            value = self.position.value - 1
        else:
            value = self.position.value + 1
            if value > Position.max_value():
                raise PositionOutOfRangeError(value, 1, Position.max_value())
        return self._replace(position=Position(value), system=system)

    def with_strand(self, strand):
        """
        Re-tag this coordinate with another strand. The position is left as
        is, what reversing the strand of a lone point means is up to the
        caller.
        """
        return self._replace(strand=Strand.coerce(strand))

    def swap_strand(self):
        return self.with_strand(self.strand.complement())

    def _move(self, steps):
        value = self.position.value + steps
        if value < self.system.min_position or value > Position.max_value():
            logger.debug(
                "Can't move %s by %d positions, result would be out of range",
                self.to_string(),
                steps)
            return None
        return self._replace(position=Position(value))

    def move_forward(self, magnitude):
        """
        Coordinate `magnitude` positions further along the strand (toward
        higher positions on the positive strand, lower positions on the
        negative strand).

        Returns None if the result would fall outside the valid range of
        positions.
        """
        if magnitude < 0:
            raise ValueError("Expected non-negative magnitude but got %d" % (
                magnitude,))
        return self._move(self.strand.step * magnitude)

    def move_backward(self, magnitude):
        """
        Coordinate `magnitude` positions back along the strand. Returns None
        if the result would fall outside the valid range of positions.
        """
        if magnitude < 0:
            raise ValueError("Expected non-negative magnitude but got %d" % (
                magnitude,))
        return self._move(-self.strand.step * magnitude)

    def nudge_forward(self):
        """
        Move half a position forward along the strand, which switches the
        coordinate system: a base coordinate becomes the interbase boundary
        right after that nucleotide, an interbase boundary becomes the
        nucleotide right after it.

        Returns None when no such neighbor exists.
        """
        return self._nudge(forward=True)

    def nudge_backward(self):
        """
        Move half a position backward along the strand: a base coordinate
        becomes the interbase boundary right before that nucleotide, an
        interbase boundary becomes the nucleotide right before it.

        Returns None when no such neighbor exists.
        """
        return self._nudge(forward=False)

    def _nudge(self, forward):
        # On the positive strand, nucleotide n sits between the interbase
        # boundaries n - 1 and n, on the negative strand the boundary
        # sharing a number with a nucleotide comes before it instead
        # of after it.
        toward_higher = forward == (self.strand is Strand.POSITIVE)
        value = self.position.value
        if self.system is System.BASE:
            target = System.INTERBASE
            if not toward_higher:
                value -= 1
        else:
            target = System.BASE
            if toward_higher:
                value += 1
        if value < target.min_position or value > Position.max_value():
            logger.debug(
                "No %s neighbor of %s in the %s direction",
                target,
                self.to_string(),
                "forward" if forward else "backward")
            return None
        return self._replace(position=Position(value), system=target)
