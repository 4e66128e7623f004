from collections import defaultdict
from collections.abc import Mapping
from math import log
from types import MappingProxyType

import numpy as np

from .errors import TableSpentError


class CountTable:

    # raw occurrence counts, source -> destination -> count
    # once normalize() has run the counts are gone and the table can't be reused
    def __init__(self):

        self._counts = defaultdict(create_float_defaultdict)
        self._spent = False

    def add(self, source, destination, amount=1.0):

        if self._spent:
            raise TableSpentError("count table was already normalized")
        self._counts[source][destination] += amount

    def normalize(self):
        """Turn every row into log(count / row total) and hand back a ProbabilityTable."""

        if self._spent:
            raise TableSpentError("count table was already normalized")

        rows = {}
        for source, row in self._counts.items():
            total = sum(row.values())
            rows[source] = {destination: log(count / total) for destination, count in row.items()}

        self._counts = None
        self._spent = True
        return ProbabilityTable(rows)

    @property
    def spent(self):
        return self._spent


class ProbabilityTable(Mapping):
    """Read-only source -> (destination -> log-probability) table.

    Rows come back wrapped in a read-only proxy so a decoder can share the
    table without being able to change it.
    """

    def __init__(self, rows):
        self._rows = {source: dict(row) for source, row in rows.items()}

    def __getitem__(self, source):
        return MappingProxyType(self._rows[source])

    def __iter__(self):
        return iter(self._rows)

    def __len__(self):
        return len(self._rows)

    def __contains__(self, source):
        return source in self._rows

    def __eq__(self, other):
        if isinstance(other, ProbabilityTable):
            return self._rows == other._rows
        return NotImplemented

    def __repr__(self):
        return f"ProbabilityTable({len(self._rows)} sources)"

    def sources(self):
        return list(self._rows)

    def row(self, source):
        # missing sources have no outgoing edges
        return MappingProxyType(self._rows.get(source, {}))

    def log_prob(self, source, destination, default=None):
        return self._rows.get(source, {}).get(destination, default)

    def total_mass(self, source):
        """Linear-space probability mass of one row, 1.0 for any trained row."""
        scores = np.fromiter(self._rows[source].values(), dtype=float)
        return float(np.exp(scores).sum())


def create_float_defaultdict():
    return defaultdict(float)
