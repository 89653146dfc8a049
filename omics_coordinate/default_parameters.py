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
Gathered all the package-wide defaults in a single module, so that these
values can be easily shared between modules and inspected by callers.
"""

import os

# positions can be stored in either of these widths (number of bits of an
# unsigned integer)
VALID_POSITION_BITS = (32, 64)

# Width of a Position. The default matches the smaller representation, callers
# working with sequences longer than ~4.29 billion bases can opt into 64 bits
# by setting OMICS_COORDINATE_POSITION_BITS=64 before importing the package.
# The width only changes how large a position can get, never how coordinates
# are interpreted.
POSITION_BITS = int(os.environ.get("OMICS_COORDINATE_POSITION_BITS", 32))

if POSITION_BITS not in VALID_POSITION_BITS:
    raise ValueError(
        "Invalid OMICS_COORDINATE_POSITION_BITS=%d, expected one of %s" % (
            POSITION_BITS,
            VALID_POSITION_BITS))

# separates the contig, strand and position of a coordinate written as text,
# e.g. "chr1:+:100"
COORDINATE_SEPARATOR = ":"

# separates the start and end positions of an interval written as text,
# e.g. "chr1:+:100-200"
RANGE_SEPARATOR = "-"
