"""Tests for StepCursor navigation over a recorded trace."""

import pytest

from relaxgraph.algorithms.bellman_ford import bellman_ford
from relaxgraph.trace import StepCursor


@pytest.fixture
def cursor(negative_edge_graph):
    return StepCursor(bellman_ford(negative_edge_graph, 0).steps)


def test_initial_state(cursor):
    assert len(cursor) == 12
    assert cursor.position == 0
    assert cursor.current is None
    assert cursor.distances() is None
    assert cursor.remaining == 12
    assert not cursor.at_end


def test_forward_walks_every_step_in_order(negative_edge_graph):
    steps = bellman_ford(negative_edge_graph, 0).steps
    cursor = StepCursor(steps)
    seen = []
    while (step := cursor.forward()) is not None:
        seen.append(step)
    assert seen == list(steps)
    assert cursor.at_end
    assert cursor.forward() is None
    assert cursor.position == 12


def test_backward_returns_previous_step(cursor):
    first = cursor.forward()
    second = cursor.forward()
    assert cursor.current is second
    assert cursor.backward() is first
    assert cursor.position == 1


def test_backward_stops_at_first_step(cursor):
    assert cursor.backward() is None
    assert cursor.position == 0

    first = cursor.forward()
    assert cursor.backward() is None
    assert cursor.current is first
    assert cursor.position == 1


def test_seek_and_reset(cursor):
    step = cursor.seek(5)
    assert cursor.position == 5
    assert step is cursor.current
    assert step.iteration == 2

    assert cursor.seek(0) is None
    cursor.seek(12)
    assert cursor.at_end

    cursor.reset()
    assert cursor.position == 0
    assert cursor.current is None


@pytest.mark.parametrize("position", [-1, 13])
def test_seek_out_of_range(cursor, position):
    with pytest.raises(IndexError):
        cursor.seek(position)


def test_distances_is_a_copy(cursor):
    cursor.forward()
    distances = cursor.distances()
    assert distances == {0: 0.0, 1: 4.0, 2: float("inf"), 3: float("inf")}
    distances[1] = -1.0
    assert cursor.current.distances[1] == 4.0


def test_empty_trace(single_vertex_graph):
    cursor = StepCursor(bellman_ford(single_vertex_graph, 0).steps)
    assert len(cursor) == 0
    assert cursor.at_end
    assert cursor.forward() is None
    assert cursor.backward() is None
