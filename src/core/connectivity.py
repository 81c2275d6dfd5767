"""
連通性檢查

獨立於刪邊流程，重新確認指定一方的子圖是否涵蓋所有頂點
"""

from collections.abc import Iterable

from src.data_model import Edge, EdgeOwner, RemovalPlan
from src.utils.union_find import UnionFind


def spans_all_vertices(n: int, edges: Iterable[Edge], owner: EdgeOwner) -> bool:
    """
    指定一方可用的邊是否連通全部 n 個頂點

    Args:
        n: 頂點數
        edges: 邊
        owner: ALICE 或 BOB (其專屬邊加上共用邊)

    Returns:
        是否完全連通
    """
    forest = UnionFind(n)
    for edge in edges:
        if edge.usable_by(owner):
            forest.union(edge.u, edge.v)
    return forest.is_connected_whole


def remaining_edges(edges: list[Edge], plan: RemovalPlan) -> list[Edge]:
    """刪除計畫中可刪除的邊後剩下的邊"""
    removed = set(plan.removable)
    return [edge for index, edge in enumerate(edges) if index not in removed]


def plan_preserves_connectivity(n: int, edges: list[Edge], plan: RemovalPlan) -> bool:
    """
    套用刪邊計畫後，Alice 與 Bob 是否仍都完全連通

    Args:
        n: 頂點數
        edges: 原始邊 (順序須與計畫相同)
        plan: 刪邊計畫

    Returns:
        雙方是否都仍完全連通
    """
    left = remaining_edges(edges, plan)
    return spans_all_vertices(n, left, EdgeOwner.ALICE) and spans_all_vertices(
        n, left, EdgeOwner.BOB
    )
