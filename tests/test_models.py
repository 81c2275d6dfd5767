"""
資料模型測試
"""

import pytest
from pydantic import ValidationError

from src.data_model import INFEASIBLE, Edge, EdgeOwner, InvalidEdgeError, RemovalPlan


class TestEdge:
    """測試 Edge"""

    def test_from_triple(self) -> None:
        edge = Edge.from_triple([3, 1, 2])

        assert edge.owner is EdgeOwner.SHARED
        assert edge.u == 1
        assert edge.v == 2
        assert edge.as_triple() == (3, 1, 2)

    def test_owner_labels(self) -> None:
        assert EdgeOwner(1).label == "alice"
        assert EdgeOwner(2).label == "bob"
        assert EdgeOwner(3).label == "shared"

    @pytest.mark.parametrize("record", [[0, 1, 2], [4, 1, 2], [1, 0, 2], [2, 1, -3]])
    def test_invalid_record(self, record: list[int]) -> None:
        with pytest.raises(InvalidEdgeError, match="Invalid edge record"):
            Edge.from_triple(record)

    def test_wrong_length(self) -> None:
        with pytest.raises(InvalidEdgeError):
            Edge.from_triple([1, 2, 3, 4])

    def test_usable_by(self) -> None:
        alice = Edge(owner=EdgeOwner.ALICE, u=1, v=2)
        shared = Edge(owner=EdgeOwner.SHARED, u=1, v=2)

        assert alice.usable_by(EdgeOwner.ALICE)
        assert not alice.usable_by(EdgeOwner.BOB)
        assert shared.usable_by(EdgeOwner.ALICE)
        assert shared.usable_by(EdgeOwner.BOB)

    def test_frozen(self) -> None:
        edge = Edge(owner=EdgeOwner.BOB, u=1, v=2)
        with pytest.raises(ValidationError):
            edge.u = 3


class TestRemovalPlan:
    """測試 RemovalPlan"""

    def test_feasible_answer(self) -> None:
        plan = RemovalPlan(
            vertex_count=3, alice_kept=2, bob_kept=2, kept=(0, 1, 2), removable=(3,)
        )

        assert plan.is_feasible
        assert plan.removable_count == 1
        assert plan.answer == 1

    def test_infeasible_answer(self) -> None:
        plan = RemovalPlan(vertex_count=3, alice_kept=2, bob_kept=1, removable=(2, 3))

        assert not plan.is_feasible
        assert plan.answer == INFEASIBLE

    def test_single_vertex_target_is_zero(self) -> None:
        plan = RemovalPlan(vertex_count=1, alice_kept=0, bob_kept=0)

        assert plan.is_feasible
        assert plan.answer == 0
