"""Configuration for GraphKit algorithms."""

from dataclasses import dataclass


@dataclass
class AlgorithmConfig:
    """Tunables shared by the algorithm families."""

    # Reject negative weights in Dijkstra and non-0/1 weights in 0-1 BFS
    validate_weights: bool = True

    # Vertex count above which an all-pairs request logs a warning
    floyd_warshall_warn_nodes: int = 500

    # Residual capacity at or below this value counts as exhausted in max-flow
    flow_tolerance: float = 0.0

    def is_large_for_all_pairs(self, num_nodes: int) -> bool:
        """Return True if an O(n^3) all-pairs run on ``num_nodes`` deserves a warning."""
        return num_nodes > self.floyd_warshall_warn_nodes


# Global configuration instance
ALGORITHM_CONFIG = AlgorithmConfig()
