import logging

import pytest

from pathfinder.lib.algorithms.accumulator import PathAccumulator
from pathfinder.lib.algorithms.base import INF


class TestPathAccumulator:
    def test_starts_empty(self):
        acc = PathAccumulator()
        assert acc.min_len == INF
        assert acc.paths == []
        assert not acc.found
        assert len(acc) == 0

    def test_first_record_sets_minimum(self):
        acc = PathAccumulator()
        assert acc.record([0, 1, 2], 7) is True
        assert acc.min_len == 7
        assert acc.paths == [(0, 1, 2)]

    def test_tie_is_appended_in_discovery_order(self):
        acc = PathAccumulator()
        acc.record([0, 1, 3], 2)
        acc.record([0, 2, 3], 2)
        assert acc.min_len == 2
        assert list(acc) == [(0, 1, 3), (0, 2, 3)]

    def test_cheaper_path_discards_everything(self):
        acc = PathAccumulator()
        acc.record([0, 1, 3], 4)
        acc.record([0, 4, 3], 4)
        acc.record([0, 2, 3], 2)
        assert acc.min_len == 2
        assert acc.paths == [(0, 2, 3)]

    def test_more_expensive_path_is_ignored(self):
        acc = PathAccumulator()
        acc.record([0, 2, 3], 2)
        assert acc.record([0, 1, 3], 4) is False
        assert acc.min_len == 2
        assert acc.paths == [(0, 2, 3)]

    def test_record_copies_caller_buffer(self):
        acc = PathAccumulator()
        buffer = [0, 1]
        acc.record(buffer, 1)
        buffer.append(2)
        buffer[0] = 9
        assert acc.paths == [(0, 1)]
        assert isinstance(acc.paths[0], tuple)

    def test_zero_weight_path_is_found(self):
        """A zero minimum is falsy; ``found`` must still report it."""
        acc = PathAccumulator()
        acc.record([3], 0)
        assert acc.min_len == 0
        assert acc.found
        assert acc

    def test_reset(self):
        acc = PathAccumulator()
        acc.record([0, 1], 1)
        acc.reset()
        assert acc.min_len == INF
        assert acc.paths == []

    def test_invalidation_is_logged(self, caplog):
        acc = PathAccumulator()
        acc.record([0, 1, 3], 4)
        with caplog.at_level(logging.DEBUG, logger="pathfinder"):
            acc.record([0, 2, 3], 2)
        assert any("discarding 1 path(s)" in r.getMessage() for r in caplog.records)

    @pytest.mark.parametrize("weight", [0, 1, 10**12])
    def test_integer_weights_compare_against_inf(self, weight):
        acc = PathAccumulator()
        assert acc.record([0], weight)
        assert acc.min_len == weight
