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
Intervals are contiguous regions between two coordinates on the same
contig, strand and coordinate system.

"start" is always the first position in traversal order along the strand,
so on the negative strand start holds the numerically larger position:

    positive strand, base:       [100, 200]  covers 100, 101, ..., 200
    negative strand, base:       [200, 100]  covers 200, 199, ..., 100
    positive strand, interbase:  [99, 200)   covers the same nucleotides
                                             as base [100, 200]
    negative strand, interbase:  [200, 99)   covers the same nucleotides
                                             as base [200, 100]

All arithmetic which depends on the strand or the coordinate system (length,
offsets, conversions between systems) lives in this module so that callers
never have to redo it.
"""

import operator

from .coordinate import Coordinate
from .default_parameters import COORDINATE_SEPARATOR, RANGE_SEPARATOR
from .errors import (
    InvalidOrderError,
    MismatchedContigError,
    MismatchedStrandError,
    MismatchedSystemError,
    OffsetOutOfBoundsError,
    ParseError,
    ZeroSizedIntervalError,
)
from .logging import get_logger
from .position import Position
from .strand import Strand
from .system import System
from .value_object import ValueObject

logger = get_logger(__name__)


class Interval(ValueObject):
    __slots__ = [
        "start",
        "end",
    ]

    def __init__(self, start, end):
        """
        Parameters
        ----------
        start : Coordinate
            First coordinate in traversal order along the strand

        end : Coordinate
            Last coordinate (base) or boundary after the last nucleotide
            (interbase) in traversal order along the strand

        Raises MismatchedContigError, MismatchedStrandError or
        MismatchedSystemError when the two coordinates don't agree on those
        fields and InvalidOrderError when end comes before start in
        traversal order.
        """
        if not isinstance(start, Coordinate) or not isinstance(end, Coordinate):
            raise TypeError("Expected two Coordinate objects but got %s and %s" % (
                type(start),
                type(end)))
        if start.contig != end.contig:
            raise MismatchedContigError(start.contig, end.contig)
        if start.strand is not end.strand:
            raise MismatchedStrandError(start.strand, end.strand)
        if start.system is not end.system:
            raise MismatchedSystemError(start.system, end.system)
        if start.strand is Strand.POSITIVE and start.position > end.position:
            raise InvalidOrderError(
                "Start position %s can't be greater than end position %s "
                "on the positive strand" % (start.position, end.position))
        if start.strand is Strand.NEGATIVE and start.position < end.position:
            raise InvalidOrderError(
                "End position %s can't be greater than start position %s "
                "on the negative strand" % (end.position, start.position))
        super(Interval, self).__init__(start=start, end=end)

    @classmethod
    def from_positions(cls, contig, start, end, strand, system):
        """
        Build an interval from plain values for both endpoints.
        """
        return cls(
            Coordinate(contig, start, strand, system),
            Coordinate(contig, end, strand, system))

    @classmethod
    def from_string(cls, text, system):
        """
        Parse an interval written as "contig:strand:start-end",
        e.g. "chr1:+:100-200" or "chr1:-:200-100". A single position such
        as "chr1:+:100" is the interval covering just that one nucleotide.
        """
        system = System.coerce(system)
        parts = text.split(COORDINATE_SEPARATOR)
        if len(parts) != 3:
            raise ParseError("Invalid interval format: '%s'" % (text,))
        contig, strand, positions = parts
        position_parts = positions.split(RANGE_SEPARATOR)
        if len(position_parts) == 1:
            start = Coordinate(
                contig,
                Position.from_value(position_parts[0]),
                strand,
                system)
            end = start if system.end_inclusive else start.move_forward(1)
            if end is None:
                raise ParseError(
                    "Can't build single position interval from '%s'" % (text,))
        elif len(position_parts) == 2:
            start = Coordinate(
                contig,
                Position.from_value(position_parts[0]),
                strand,
                system)
            end = Coordinate(
                contig,
                Position.from_value(position_parts[1]),
                strand,
                system)
        else:
            raise ParseError("Invalid interval format: '%s'" % (text,))
        return cls(start, end)

    def to_string(self):
        return "%s%s%s%s%s%s%s" % (
            self.contig,
            COORDINATE_SEPARATOR,
            self.strand,
            COORDINATE_SEPARATOR,
            self.start.position,
            RANGE_SEPARATOR,
            self.end.position)

    @property
    def contig(self):
        return self.start.contig

    @property
    def strand(self):
        return self.start.strand

    @property
    def system(self):
        return self.start.system

    @property
    def direction(self):
        """
        +1 if positions increase from start to end, -1 if they decrease.
        """
        return self.strand.step

    def len(self):
        """
        Number of nucleotides covered by this interval.

        For base intervals this is |end - start| + 1 since both endpoints
        are included, for interbase intervals it's |end - start|.
        """
        distance = self.start.position.distance(self.end.position)
        if self.system.end_inclusive:
            return distance + 1
        return distance

    def __len__(self):
        # builtin len() only handles results up to sys.maxsize, use the len
        # method for 64-bit intervals longer than that
        return self.len()

    def __bool__(self):
        # an interval is a value, not a container: empty ones are still true
        return True

    def is_empty(self):
        return self.len() == 0

    def into_start(self):
        return self.start

    def into_end(self):
        return self.end

    def into_coordinates(self):
        return (self.start, self.end)

    def coordinate_at_offset(self, offset):
        """
        Coordinate reached by walking `offset` positions from the start of
        the interval in traversal order.

        Parameters
        ----------
        offset : int or Position
            Must satisfy 0 <= offset < len(interval)

        Raises OffsetOutOfBoundsError otherwise.
        """
        offset = operator.index(offset)
        length = self.len()
        if offset < 0 or offset >= length:
            raise OffsetOutOfBoundsError(offset, length)
        value = self.start.position.value + self.direction * offset
        return Coordinate(
            contig=self.contig,
            position=Position(value),
            strand=self.strand,
            system=self.system)

    def contains(self, coordinate):
        """
        Does this interval include the given coordinate? The coordinate must
        be on the same contig and strand and in the same coordinate system.
        For interbase intervals the end boundary is not included.
        """
        if (coordinate.contig != self.contig or
                coordinate.strand is not self.strand or
                coordinate.system is not self.system):
            return False
        offset = self.direction * (
            coordinate.position.value - self.start.position.value)
        return 0 <= offset < self.len()

    def __contains__(self, coordinate):
        return self.contains(coordinate)

    def offset_of(self, coordinate):
        """
        Number of positions between the start of this interval and the
        given coordinate in traversal order, or None if the interval
        doesn't contain the coordinate.
        """
        if not self.contains(coordinate):
            return None
        return self.start.position.distance(coordinate.position)

    def coordinates(self):
        """
        Generator over every coordinate of this interval in traversal order.
        """
        for offset in range(self.len()):
            yield self.coordinate_at_offset(offset)

    def __iter__(self):
        return self.coordinates()

    def into_equivalent_base(self):
        """
        Base interval covering the same nucleotides as this interbase
        interval:

            positive strand: interbase [s, e) -> base [s + 1, e]
            negative strand: interbase [s, e) -> base [s, e + 1]

        Base intervals are returned unchanged. Raises ZeroSizedIntervalError
        for empty interbase intervals, since every base interval contains at
        least one nucleotide.
        """
        if self.system is System.BASE:
            return self
        if self.is_empty():
            logger.debug("No base equivalent for empty interval %s", self.to_string())
            raise ZeroSizedIntervalError(
                "Empty interval %s has no equivalent in the base coordinate system" % (
                    self.to_string(),))
        start, end = self.start.position.value, self.end.position.value
        if self.strand is Strand.POSITIVE:
            start += 1
        else:
            end += 1
        return Interval.from_positions(
            self.contig, start, end, self.strand, System.BASE)

    def into_equivalent_interbase(self):
        """
        Interbase interval covering the same nucleotides as this base
        interval:

            positive strand: base [s, e] -> interbase [s - 1, e)
            negative strand: base [s, e] -> interbase [s, e - 1)

        Interbase intervals are returned unchanged.
        """
        if self.system is System.INTERBASE:
            return self
        start, end = self.start.position.value, self.end.position.value
        if self.strand is Strand.POSITIVE:
            start -= 1
        else:
            end -= 1
        return Interval.from_positions(
            self.contig, start, end, self.strand, System.INTERBASE)

    def complement(self):
        """
        The same region read along the opposite strand: the endpoints swap
        roles and the strand flips.

            positive strand, base:       [100, 200] -> negative [200, 100]
            positive strand, interbase:  [99, 200)  -> negative [200, 99)

        Interbase positions are boundaries between nucleotides no matter
        which strand they're on, so swapping the endpoints keeps the same
        nucleotides in both systems and complementing twice gives back the
        original interval.
        """
        return Interval(
            self.end.swap_strand(),
            self.start.swap_strand())

    def with_system(self, system):
        if System.coerce(system) is System.BASE:
            return self.into_equivalent_base()
        return self.into_equivalent_interbase()
