"""
核心模組 - 雙方連通刪邊演算法與連通性檢查
"""

from src.data_model import INFEASIBLE, Edge, EdgeOwner, RemovalPlan

from .connectivity import plan_preserves_connectivity, remaining_edges, spans_all_vertices
from .pruner import ConnectivityPruner, coerce_edges, max_num_edges_to_remove


__all__ = [
    "INFEASIBLE",
    "ConnectivityPruner",
    "Edge",
    "EdgeOwner",
    "RemovalPlan",
    "coerce_edges",
    "max_num_edges_to_remove",
    "plan_preserves_connectivity",
    "remaining_edges",
    "spans_all_vertices",
]
