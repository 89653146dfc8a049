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

__version__ = "0.2.0"


from .contig import Contig, ContigCorpus
from .coordinate import Coordinate
from .dataframe_builder import coordinates_to_dataframe, intervals_to_dataframe
from .errors import (
    OmicsCoordinateError,
    PositionError,
    PositionOutOfRangeError,
    ContigError,
    EmptyContigNameError,
    StrandError,
    CoordinateError,
    InvalidPositionError,
    IntervalError,
    MismatchedContigError,
    MismatchedStrandError,
    MismatchedSystemError,
    InvalidOrderError,
    OffsetOutOfBoundsError,
    ZeroSizedIntervalError,
    ParseError,
)
from .interval import Interval
from .position import Position
from .strand import Strand
from .system import System


__all__ = [
    "coordinates_to_dataframe",
    "intervals_to_dataframe",
    "Contig",
    "ContigCorpus",
    "Coordinate",
    "Interval",
    "Position",
    "Strand",
    "System",
    "OmicsCoordinateError",
    "PositionError",
    "PositionOutOfRangeError",
    "ContigError",
    "EmptyContigNameError",
    "StrandError",
    "CoordinateError",
    "InvalidPositionError",
    "IntervalError",
    "MismatchedContigError",
    "MismatchedStrandError",
    "MismatchedSystemError",
    "InvalidOrderError",
    "OffsetOutOfBoundsError",
    "ZeroSizedIntervalError",
    "ParseError",
]
