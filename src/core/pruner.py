"""
雙方連通刪邊模組

在 Alice 與 Bob 的子圖都保持完全連通的前提下，計算最多可刪除的邊數
共用邊優先處理：只要對任一方有用就必須保留，專屬邊只影響其擁有者
"""

import logging
from collections.abc import Iterable, Sequence

from src.data_model import Edge, EdgeOwner, InvalidEdgeError, RemovalPlan
from src.settings.app import settings
from src.utils.union_find import UnionFind


logger = logging.getLogger(__name__)


EdgeLike = Edge | Sequence[int]


def coerce_edges(edges: Iterable[EdgeLike]) -> list[Edge]:
    """
    將 [owner_tag, u, v] 紀錄轉為 Edge

    Args:
        edges: Edge 或三元素紀錄

    Returns:
        Edge 列表 (保持輸入順序)
    """
    return [e if isinstance(e, Edge) else Edge.from_triple(e) for e in edges]


class ConnectivityPruner:
    """
    貪婪刪邊器

    維護 Alice 與 Bob 各自的 UnionFind，依序處理共用邊、Alice 專屬邊、Bob 專屬邊
    """

    def __init__(self, validate_edges: bool | None = None):
        """
        初始化刪邊器

        Args:
            validate_edges: 是否檢查端點範圍，None 時使用全局設定
        """
        self._validate_edges = (
            settings.validate_edges if validate_edges is None else validate_edges
        )

    def plan(self, n: int, edges: Iterable[EdgeLike]) -> RemovalPlan:
        """
        計算刪邊計畫

        Args:
            n: 頂點數 (編號 1..n)
            edges: 輸入邊

        Returns:
            包含保留與可刪除邊索引的結果

        Raises:
            ValueError: n 為負數
            InvalidEdgeError: 邊紀錄無效或端點超出範圍
        """
        edge_list = coerce_edges(edges)
        if self._validate_edges:
            self._check_endpoints(n, edge_list)

        alice = UnionFind(n)
        bob = UnionFind(n)

        # 依類型分組，組內保持輸入順序
        alice_only: list[int] = []
        bob_only: list[int] = []
        shared: list[int] = []
        for index, edge in enumerate(edge_list):
            match edge.owner:
                case EdgeOwner.ALICE:
                    alice_only.append(index)
                case EdgeOwner.BOB:
                    bob_only.append(index)
                case EdgeOwner.SHARED:
                    shared.append(index)

        alice_kept = 0
        bob_kept = 0
        kept: list[int] = []
        removable: list[int] = []

        for index in shared:
            edge = edge_list[index]
            # 兩邊都必須嘗試合併
            merged_alice = alice.union(edge.u, edge.v)
            merged_bob = bob.union(edge.u, edge.v)
            alice_kept += int(merged_alice)
            bob_kept += int(merged_bob)
            if merged_alice or merged_bob:
                kept.append(index)
            else:
                removable.append(index)

        logger.debug(
            "Shared edges: %d processed, alice=%d bob=%d kept so far",
            len(shared),
            alice_kept,
            bob_kept,
        )

        for index in alice_only:
            edge = edge_list[index]
            if alice.union(edge.u, edge.v):
                alice_kept += 1
                kept.append(index)
            else:
                removable.append(index)

        for index in bob_only:
            edge = edge_list[index]
            if bob.union(edge.u, edge.v):
                bob_kept += 1
                kept.append(index)
            else:
                removable.append(index)

        plan = RemovalPlan(
            vertex_count=n,
            alice_kept=alice_kept,
            bob_kept=bob_kept,
            kept=tuple(sorted(kept)),
            removable=tuple(sorted(removable)),
        )

        if plan.is_feasible:
            logger.info(
                "Pruning plan: %d of %d edges removable for %d vertices",
                plan.removable_count,
                len(edge_list),
                n,
            )
        else:
            logger.warning(
                "Full connectivity impossible: alice=%d/%d bob=%d/%d components=%d/%d",
                alice_kept,
                n - 1,
                bob_kept,
                n - 1,
                alice.component_count,
                bob.component_count,
            )

        return plan

    def max_removable(self, n: int, edges: Iterable[EdgeLike]) -> int:
        """
        最多可刪除的邊數

        Args:
            n: 頂點數
            edges: 輸入邊

        Returns:
            可刪除邊數，無法讓雙方都完全連通時為 INFEASIBLE (-1)
        """
        return self.plan(n, edges).answer

    @staticmethod
    def _check_endpoints(n: int, edges: Sequence[Edge]) -> None:
        """檢查所有端點都在 1..n 範圍內"""
        for index, edge in enumerate(edges):
            if edge.u > n or edge.v > n:
                msg = f"Edge #{index} {list(edge.as_triple())!r} references a vertex outside 1..{n}"
                raise InvalidEdgeError(msg)


def max_num_edges_to_remove(n: int, edges: Iterable[EdgeLike]) -> int:
    """
    最多可刪除的邊數

    Args:
        n: 頂點數 (編號 1..n)
        edges: [owner_tag, u, v] 紀錄，owner_tag 為 1 (Alice)、2 (Bob)、3 (共用)

    Returns:
        可刪除邊數，或 -1 表示雙方無法都完全連通
    """
    return ConnectivityPruner().max_removable(n, edges)

