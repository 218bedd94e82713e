#!/usr/bin/env python3
"""
GridNode bookkeeping: open/closed flags, F rounding and distances
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import math

from gridpath.pathfinding.grid_node import BLOCKED, GridNode


class TestGridNode:

    def setup_method(self):
        self.node = GridNode(x=2, y=3, idx=0)

    def test_new_node_is_in_no_set(self):
        assert not self.node.is_open
        assert not self.node.is_closed
        assert not self.node.in_path
        assert self.node.parent is None
        assert self.node.position == (2, 3)

    def test_open_and_close_are_exclusive(self):
        self.node.open()
        assert self.node.is_open and not self.node.is_closed
        self.node.close()
        assert self.node.is_closed and not self.node.is_open
        self.node.open()
        assert self.node.is_open and not self.node.is_closed

    def test_open_and_close_are_idempotent(self):
        self.node.close()
        self.node.close()
        assert self.node.is_closed and not self.node.is_open

    def test_f_rounds_g_plus_h(self):
        self.node.g = 14.142
        self.node.h = 42.426
        assert self.node.F == 57
        self.node.g = 10.0
        self.node.h = 0.5
        # halves round up
        assert self.node.F == 11

    def test_relax_updates_cost_and_parent_together(self):
        self.node.relax(24.5, 7)
        assert self.node.g == 24.5
        assert self.node.parent == 7

    def test_distance_is_euclidean(self):
        other = GridNode(x=5, y=7, idx=1)
        assert self.node.distance_to(other) == 5.0
        assert other.distance_to(self.node) == 5.0
        diagonal = GridNode(x=3, y=4, idx=2)
        assert math.isclose(self.node.distance_to(diagonal), math.sqrt(2))

    def test_nodes_compare_by_identity(self):
        twin = GridNode(x=2, y=3, idx=0)
        assert twin != self.node


def test_blocked_is_a_singleton():
    assert BLOCKED is type(BLOCKED)()
    assert repr(BLOCKED) == "BLOCKED"
