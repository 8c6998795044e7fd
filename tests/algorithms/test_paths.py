import numpy as np
import pytest

from graphkit.algorithms.base import NO_VERTEX
from graphkit.algorithms.paths import next_hop_path, reconstruct_path


def test_reconstruct_path():
    parent = [NO_VERTEX, 0, 1, 1]
    assert reconstruct_path(parent, 3) == [0, 1, 3]
    assert reconstruct_path(parent, 0) == [0]
    assert reconstruct_path(parent, NO_VERTEX) == []


def test_reconstruct_path_detects_cycle():
    with pytest.raises(ValueError):
        reconstruct_path([1, 0], 0)


def test_next_hop_path():
    next_hop = np.array([[0, 1, 1], [NO_VERTEX, 1, 2], [NO_VERTEX, NO_VERTEX, 2]])
    assert next_hop_path(next_hop, 0, 2) == [0, 1, 2]
    assert next_hop_path(next_hop, 2, 2) == [2]
    assert next_hop_path(next_hop, 2, 0) == []


def test_next_hop_path_loop():
    # 0 and 2 each claim the other as the next hop towards 1
    next_hop = np.array([[0, 2, 2], [NO_VERTEX, 1, NO_VERTEX], [0, 0, 2]])
    with pytest.raises(ValueError):
        next_hop_path(next_hop, 0, 1)
