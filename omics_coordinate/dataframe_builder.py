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
Helpers for exporting collections of coordinates and intervals as
pandas DataFrames, one row per value.
"""

from collections import OrderedDict

import numpy as np
import pandas as pd

from . import default_parameters
from .coordinate import Coordinate
from .interval import Interval

COORDINATE_COLUMN_FNS = OrderedDict([
    ("contig", lambda c: c.contig.name),
    ("strand", lambda c: str(c.strand)),
    ("system", lambda c: str(c.system)),
    ("position", lambda c: c.position.value),
])

INTERVAL_COLUMN_FNS = OrderedDict([
    ("contig", lambda i: i.contig.name),
    ("strand", lambda i: str(i.strand)),
    ("system", lambda i: str(i.system)),
    ("start", lambda i: i.start.position.value),
    ("end", lambda i: i.end.position.value),
    ("length", lambda i: i.len()),
])

# columns which hold positions (or lengths) and get an unsigned integer dtype
# wide enough for the configured position width
POSITION_COLUMNS = {"position", "start", "end", "length"}

COLUMN_FNS_BY_CLASS = {
    Coordinate: COORDINATE_COLUMN_FNS,
    Interval: INTERVAL_COLUMN_FNS,
}


def position_dtype():
    """
    numpy dtype matching default_parameters.POSITION_BITS
    """
    if default_parameters.POSITION_BITS == 64:
        return np.uint64
    return np.uint32


class DataFrameBuilder(object):
    """
    Helper class for constructing a DataFrame from Coordinate or Interval
    objects, with optional extra columns computed from each element.
    """
    def __init__(
            self,
            element_class,
            exclude=None,
            converters=None,
            rename_dict=None,
            extra_column_fns=None):
        """
        Parameters
        ----------
        element_class : type
            Either Coordinate or Interval

        exclude : set
            Column names which should be left out of the DataFrame

        converters : dict
            Dictionary of names mapping to functions. These functions will be
            applied to each element of a column before it's added to the
            DataFrame.

        rename_dict : dict
            Dictionary mapping default column names to desired column names
            in the produced DataFrame.

        extra_column_fns : dict
            Dictionary mapping column names to functions which take an
            element and return a single value for each row.
        """
        if element_class not in COLUMN_FNS_BY_CLASS:
            raise ValueError("Can't build DataFrame for %s, expected one of %s" % (
                element_class.__name__,
                [cls.__name__ for cls in COLUMN_FNS_BY_CLASS]))
        self.element_class = element_class
        if exclude is None:
            exclude = set()
        self.converters = {} if converters is None else dict(converters)
        self.rename_dict = {} if rename_dict is None else dict(rename_dict)
        self.extra_column_fns = (
            {} if extra_column_fns is None else dict(extra_column_fns))

        # remove excluded columns without changing the order of the others
        self.column_fns = OrderedDict(
            (name, fn)
            for (name, fn) in COLUMN_FNS_BY_CLASS[element_class].items()
            if name not in exclude)

        for name in self.converters:
            if name not in self.column_fns:
                raise ValueError("No column named '%s', valid names: %s" % (
                    name,
                    list(self.column_fns)))

        columns_list = [
            (self.rename_dict.get(name, name), [])
            for name in self.column_fns
        ]
        for column_name in self.extra_column_fns:
            columns_list.append((column_name, []))
        self.columns_dict = OrderedDict(columns_list)

    def add(self, element):
        if not isinstance(element, self.element_class):
            raise TypeError("Expected %s but got %s" % (
                self.element_class.__name__,
                type(element)))

        for name, fn in self.column_fns.items():
            value = fn(element)
            if name in self.converters:
                value = self.converters[name](value)
            self.columns_dict[self.rename_dict.get(name, name)].append(value)

        for column_name, fn in self.extra_column_fns.items():
            self.columns_dict[column_name].append(fn(element))

    def add_many(self, elements):
        for element in elements:
            self.add(element)

    def _check_column_lengths(self):
        """
        Make sure columns are of the same length or else DataFrame construction
        will fail.
        """
        column_lengths_dict = {
            name: len(xs)
            for (name, xs)
            in self.columns_dict.items()
        }
        unique_column_lengths = set(column_lengths_dict.values())
        if len(unique_column_lengths) > 1:
            raise ValueError(
                "Mismatch between lengths of columns: %s" % (column_lengths_dict,))

    def to_dataframe(self):
        self._check_column_lengths()
        df = pd.DataFrame(self.columns_dict)
        dtype = position_dtype()
        for name in POSITION_COLUMNS:
            if name not in self.column_fns or name in self.converters:
                continue
            df[self.rename_dict.get(name, name)] = df[
                self.rename_dict.get(name, name)].astype(dtype)
        return df


def dataframe_from_elements(element_class, elements, **kwargs):
    builder = DataFrameBuilder(element_class, **kwargs)
    builder.add_many(elements)
    return builder.to_dataframe()


def coordinates_to_dataframe(coordinates, **kwargs):
    """
    DataFrame with columns contig/strand/system/position and one row
    per Coordinate.
    """
    return dataframe_from_elements(Coordinate, coordinates, **kwargs)


def intervals_to_dataframe(intervals, **kwargs):
    """
    DataFrame with columns contig/strand/system/start/end/length and one row
    per Interval.
    """
    return dataframe_from_elements(Interval, intervals, **kwargs)
