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
Exceptions raised when a position, contig, strand, coordinate or interval
can't be constructed or converted. All of them are ValueErrors, so callers
which only care about bad input can catch that alone.
"""


class OmicsCoordinateError(ValueError):
    pass


class PositionError(OmicsCoordinateError):
    pass


class PositionOutOfRangeError(PositionError):
    """
    Value can't be represented as a Position: it's negative, larger than
    the configured width allows, or below the minimum of a coordinate system.
    """
    def __init__(self, value, min_value, max_value):
        self.value = value
        self.min_value = min_value
        self.max_value = max_value
        super(PositionOutOfRangeError, self).__init__(
            "Position %s out of range [%d, %d]" % (value, min_value, max_value))


class ContigError(OmicsCoordinateError):
    pass


class EmptyContigNameError(ContigError):
    def __init__(self):
        super(EmptyContigNameError, self).__init__("Contig name can't be empty")


class StrandError(OmicsCoordinateError):
    pass


class CoordinateError(OmicsCoordinateError):
    pass


class InvalidPositionError(CoordinateError):
    def __init__(self, position, system):
        self.position = position
        self.system = system
        super(InvalidPositionError, self).__init__(
            "Position %d is invalid in the %s coordinate system (minimum %d)" % (
                position,
                system,
                system.min_position))


class IntervalError(OmicsCoordinateError):
    pass


class MismatchedContigError(IntervalError):
    def __init__(self, start_contig, end_contig):
        self.start_contig = start_contig
        self.end_contig = end_contig
        super(MismatchedContigError, self).__init__(
            "Mismatched contigs: %s, %s" % (start_contig, end_contig))


class MismatchedStrandError(IntervalError):
    def __init__(self, start_strand, end_strand):
        self.start_strand = start_strand
        self.end_strand = end_strand
        super(MismatchedStrandError, self).__init__(
            "Mismatched strands: %s, %s" % (start_strand, end_strand))


class MismatchedSystemError(IntervalError):
    def __init__(self, start_system, end_system):
        self.start_system = start_system
        self.end_system = end_system
        super(MismatchedSystemError, self).__init__(
            "Mismatched coordinate systems: %s, %s" % (start_system, end_system))


class InvalidOrderError(IntervalError):
    pass


class OffsetOutOfBoundsError(IntervalError):
    def __init__(self, offset, length):
        self.offset = offset
        self.length = length
        super(OffsetOutOfBoundsError, self).__init__(
            "Offset %d outside of interval with length %d" % (offset, length))


class ZeroSizedIntervalError(IntervalError):
    pass


class ParseError(OmicsCoordinateError):
    pass
