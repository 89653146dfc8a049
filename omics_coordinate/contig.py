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

from threading import Lock

from .errors import EmptyContigNameError
from .value_object import ValueObject


class ContigCorpus(object):
    """
    Process-wide pool of contig names. Interning the same name always
    returns the same string object (and the same integer id), no matter how
    many threads race to insert it first.
    """
    def __init__(self):
        self._lock = Lock()
        self._name_to_id = {}
        self._names = []

    def intern(self, name):
        """
        Returns the canonical copy of `name`, adding it to the corpus if
        this is the first time it's been seen.
        """
        return self._names[self.intern_id(name)]

    def intern_id(self, name):
        with self._lock:
            name_id = self._name_to_id.get(name)
            if name_id is None:
                name_id = len(self._names)
                self._names.append(name)
                self._name_to_id[name] = name_id
            return name_id

    def resolve(self, name_id):
        """
        Name associated with an id returned by intern_id, or None if
        no such id has been handed out.
        """
        with self._lock:
            if 0 <= name_id < len(self._names):
                return self._names[name_id]
            return None

    def __len__(self):
        with self._lock:
            return len(self._names)

    def __contains__(self, name):
        with self._lock:
            return name in self._name_to_id


CORPUS = ContigCorpus()


class Contig(ValueObject):
    """
    Name of a reference sequence (e.g. a chromosome) which positions are
    scoped to. Names are compared exactly, "chr1" and "1" are different
    contigs.
    """
    __slots__ = ["name"]

    def __init__(self, name):
        if isinstance(name, Contig):
            name = name.name
        if not isinstance(name, str):
            raise TypeError("Expected contig name to be a str but got %s" % (
                type(name),))
        if len(name) == 0:
            raise EmptyContigNameError()
        super(Contig, self).__init__(name=CORPUS.intern(name))

    @classmethod
    def from_name(cls, name):
        return cls(name)

    @property
    def id(self):
        """
        Integer identity of this contig's name in the shared corpus.
        """
        return CORPUS.intern_id(self.name)

    def __str__(self):
        return self.name

    def __repr__(self):
        return ValueObject.__str__(self)

    def __lt__(self, other):
        if not isinstance(other, Contig):
            return NotImplemented
        return self.name < other.name
