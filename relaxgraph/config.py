"""Configuration classes for relaxgraph components."""

from dataclasses import dataclass
from typing import Optional


@dataclass
class BellmanFordConfig:
    """Defaults applied by the relaxation engine when a caller does not override them."""

    # Keep a full Step (with distance/predecessor snapshots) for every
    # relaxation attempt. Turning this off yields a trace-free run.
    record_steps: bool = True

    # Emit one DEBUG record per relaxation attempt.
    log_steps: bool = False

    def estimate_trace_length(
        self,
        vertex_count: int,
        edge_count: int,
        record_steps: Optional[bool] = None,
    ) -> int:
        """Number of Steps a run will record for a graph of the given size.

        ``record_steps`` overrides ``self.record_steps``, matching how the
        engine resolves an explicit constructor argument.
        """
        record = self.record_steps if record_steps is None else record_steps
        if not record or vertex_count <= 1:
            return 0
        return (vertex_count - 1) * edge_count


# Global configuration instance
BELLMAN_FORD_CONFIG = BellmanFordConfig()
