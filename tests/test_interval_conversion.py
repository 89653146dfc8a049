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
Conversions between base and interbase intervals: round-trips, length
invariance and the nucleotides each interval covers, checked over small
grids which include zero-width intervals and the minimum position of
each coordinate system on both strands.
"""

import pytest

from omics_coordinate.errors import ZeroSizedIntervalError
from omics_coordinate.interval import Interval
from omics_coordinate.position import Position
from omics_coordinate.system import System
from .common import eq_


def interval(strand, start, end, system, contig="chr1"):
    return Interval.from_positions(contig, start, end, strand, system)


def base_intervals(max_position=8):
    for start in range(1, max_position + 1):
        for end in range(start, max_position + 1):
            yield interval("+", start, end, System.BASE)
            yield interval("-", end, start, System.BASE)


def interbase_intervals(max_position=8):
    for start in range(0, max_position + 1):
        for end in range(start, max_position + 1):
            yield interval("+", start, end, System.INTERBASE)
            yield interval("-", end, start, System.INTERBASE)


def covered_nucleotides(i):
    """
    Base positions of the nucleotides covered by an interval, in traversal
    order, computed one coordinate at a time.
    """
    result = []
    for c in i.coordinates():
        if i.system is System.BASE:
            result.append(c.position.value)
        else:
            result.append(c.nudge_forward().position.value)
    return result


def test_concrete_positive_strand_conversion():
    i = interval("+", 100, 200, System.BASE)
    eq_(i.len(), 101)
    converted = i.into_equivalent_interbase()
    eq_(converted, interval("+", 99, 200, System.INTERBASE))
    eq_(converted.len(), 101)
    eq_(converted.into_equivalent_base(), i)


def test_concrete_negative_strand_conversion():
    i = interval("-", 200, 100, System.BASE)
    converted = i.into_equivalent_interbase()
    eq_(converted, interval("-", 200, 99, System.INTERBASE))
    eq_(converted.len(), 101)
    eq_(converted.into_equivalent_base(), i)


def test_minimum_positions():
    eq_(
        interval("+", 1, 1, System.BASE).into_equivalent_interbase(),
        interval("+", 0, 1, System.INTERBASE))
    eq_(
        interval("-", 1, 1, System.BASE).into_equivalent_interbase(),
        interval("-", 1, 0, System.INTERBASE))
    eq_(
        interval("+", 0, 1, System.INTERBASE).into_equivalent_base(),
        interval("+", 1, 1, System.BASE))
    eq_(
        interval("-", 1, 0, System.INTERBASE).into_equivalent_base(),
        interval("-", 1, 1, System.BASE))


def test_maximum_positions():
    top = Position.max_value()
    i = interval("+", top - 1, top, System.INTERBASE)
    eq_(i.into_equivalent_base(), interval("+", top, top, System.BASE))
    i = interval("-", top, top - 1, System.INTERBASE)
    eq_(i.into_equivalent_base(), interval("-", top, top, System.BASE))
    eq_(i.into_equivalent_base().into_equivalent_interbase(), i)


def test_base_round_trip_and_length():
    for i in base_intervals():
        converted = i.into_equivalent_interbase()
        eq_(converted.system, System.INTERBASE)
        eq_(converted.strand, i.strand)
        eq_(converted.len(), i.len())
        eq_(converted.into_equivalent_base(), i)


def test_interbase_round_trip_and_length():
    for i in interbase_intervals():
        if i.is_empty():
            continue
        converted = i.into_equivalent_base()
        eq_(converted.system, System.BASE)
        eq_(converted.len(), i.len())
        eq_(converted.into_equivalent_interbase(), i)


def test_conversion_covers_same_nucleotides():
    for i in base_intervals():
        eq_(covered_nucleotides(i.into_equivalent_interbase()), covered_nucleotides(i))


def test_empty_interbase_intervals_have_no_base_equivalent():
    for strand in ["+", "-"]:
        for position in [0, 1, 10]:
            i = interval(strand, position, position, System.INTERBASE)
            with pytest.raises(ZeroSizedIntervalError):
                i.into_equivalent_base()


def test_conversion_to_same_system_is_identity():
    i = interval("+", 1, 5, System.BASE)
    assert i.into_equivalent_base() is i
    assert i.with_system(System.BASE) is i
    j = interval("-", 5, 1, System.INTERBASE)
    assert j.into_equivalent_interbase() is j
    eq_(j.with_system("base"), j.into_equivalent_base())
    eq_(i.with_system("interbase"), i.into_equivalent_interbase())
