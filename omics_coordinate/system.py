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
The two numbering conventions used for genomic positions.

  * base: 1-based and fully-closed, a position names a nucleotide and the
    interval [s, e] includes both endpoints.
  * interbase: 0-based and half-open, a position names the boundary between
    two nucleotides and the interval [s, e) excludes its end.
"""

from enum import Enum

from .errors import ParseError


class System(Enum):
    BASE = "base"
    INTERBASE = "interbase"

    @property
    def min_position(self):
        """
        Smallest position which is valid in this coordinate system.
        """
        return 1 if self is System.BASE else 0

    @property
    def end_inclusive(self):
        """
        Is the end position of an interval part of the interval?
        """
        return self is System.BASE

    def other(self):
        return System.INTERBASE if self is System.BASE else System.BASE

    @classmethod
    def from_string(cls, text):
        """
        Parse "base" or "interbase" (case-insensitive).
        """
        try:
            return cls(text.strip().lower())
        except ValueError:
            raise ParseError("Invalid coordinate system: '%s'" % (text,))

    @classmethod
    def coerce(cls, value):
        if isinstance(value, System):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        raise TypeError(
            "Expected System or str but got %s" % (type(value),))

    def __str__(self):
        return self.value
