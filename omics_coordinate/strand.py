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

from enum import Enum

from .errors import StrandError


class Strand(Enum):
    """
    Orientation of a coordinate or interval along its contig. Walking
    forward on the positive strand moves toward higher positions, on the
    negative strand toward lower ones.
    """
    POSITIVE = "+"
    NEGATIVE = "-"

    @property
    def step(self):
        """
        Numeric direction (+1 or -1) of a single forward move.
        """
        return 1 if self is Strand.POSITIVE else -1

    def complement(self):
        return Strand.NEGATIVE if self is Strand.POSITIVE else Strand.POSITIVE

    @classmethod
    def from_string(cls, text):
        if not text:
            raise StrandError("Strand can't be empty")
        try:
            return cls(text)
        except ValueError:
            raise StrandError("Invalid strand: '%s'" % (text,))

    @classmethod
    def coerce(cls, value):
        if isinstance(value, Strand):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        raise TypeError(
            "Expected Strand or str but got %s" % (type(value),))

    def __str__(self):
        return self.value
