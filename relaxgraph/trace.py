"""Navigation over an already computed relaxation trace.

`StepCursor` lets a viewer replay the Steps of a run one at a time, forwards
and backwards. It only moves an index over the recorded sequence and never
touches the graph or the engine.
"""

from __future__ import annotations

from typing import Optional, Sequence

from relaxgraph.algorithms.types import DistanceMap, Step


class StepCursor:
    """Position within a sequence of Steps.

    ``position`` counts the Steps replayed so far: 0 before the first
    `forward()`, ``len(cursor)`` once every Step has been shown. The Step on
    display is ``steps[position - 1]``.
    """

    def __init__(self, steps: Sequence[Step]) -> None:
        self._steps = tuple(steps)
        self._position = 0

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def position(self) -> int:
        return self._position

    @property
    def current(self) -> Optional[Step]:
        """The Step on display, or None before the first `forward()`."""
        if self._position == 0:
            return None
        return self._steps[self._position - 1]

    @property
    def at_end(self) -> bool:
        return self._position >= len(self._steps)

    @property
    def remaining(self) -> int:
        return len(self._steps) - self._position

    def forward(self) -> Optional[Step]:
        """Show the next Step. Returns None once the trace is exhausted."""
        if self.at_end:
            return None
        self._position += 1
        return self._steps[self._position - 1]

    def backward(self) -> Optional[Step]:
        """Show the previous Step.

        Does nothing and returns None when the first Step (or nothing) is on
        display, so the cursor never steps back to the empty position.
        """
        if self._position <= 1:
            return None
        self._position -= 1
        return self._steps[self._position - 1]

    def seek(self, position: int) -> Optional[Step]:
        """Jump to ``position`` and return the Step on display there.

        Raises:
            IndexError: If ``position`` is outside ``0..len(self)``.
        """
        if not 0 <= position <= len(self._steps):
            raise IndexError(
                f"Position {position} outside 0..{len(self._steps)}."
            )
        self._position = position
        return self.current

    def reset(self) -> None:
        self._position = 0

    def distances(self) -> Optional[DistanceMap]:
        """Distance snapshot of the Step on display, as a fresh copy."""
        step = self.current
        if step is None:
            return None
        return dict(step.distances)
