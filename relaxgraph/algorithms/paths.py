"""Path reconstruction from a predecessor map."""

from __future__ import annotations

from typing import Hashable, List, Mapping, Optional


def resolve_path(
    predecessors: Mapping[Hashable, Optional[Hashable]],
    source: Hashable,
    target: Hashable,
) -> Optional[List[Hashable]]:
    """Walk predecessor links back from ``target`` to ``source``.

    Args:
        predecessors: Vertex -> predecessor mapping produced by a run.
        source: The run's source vertex.
        target: Vertex whose path is requested.

    Returns:
        The vertices ``[source, ..., target]``; ``[source]`` when ``target`` is
        the source; None when ``target`` was not reached.

    Raises:
        KeyError: If ``target`` is not in ``predecessors``.
        ValueError: If the chain loops before reaching ``source``. This only
            happens for runs that reported a negative cycle.
    """
    if target not in predecessors:
        raise KeyError(f"Vertex '{target}' is not in the predecessor map.")
    if target == source:
        return [source]
    if predecessors[target] is None:
        return None

    path = [target]
    seen = {target}
    node = predecessors[target]
    while node is not None and node != source:
        if node in seen:
            raise ValueError(
                f"Predecessor chain from '{target}' loops at '{node}'; "
                "the run did not converge."
            )
        seen.add(node)
        path.append(node)
        node = predecessors.get(node)

    if node is None:
        # chain ended without reaching the source
        return None
    path.append(source)
    path.reverse()
    return path
