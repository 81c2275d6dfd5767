"""
核心資料模型

使用 Pydantic 進行資料驗證和序列化，確保邊資料完整性
"""

from collections.abc import Sequence
from enum import IntEnum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError


# 無法讓雙方都完全連通時的回傳值
INFEASIBLE: Final[int] = -1


class InvalidEdgeError(ValueError):
    """邊資料格式錯誤"""


class EdgeOwner(IntEnum):
    """邊的使用者類型"""

    ALICE = 1  # 僅 Alice 可用
    BOB = 2  # 僅 Bob 可用
    SHARED = 3  # 雙方皆可用

    @property
    def label(self) -> str:
        """顯示名稱"""
        return self.name.lower()


class Edge(BaseModel):
    """
    帶類型的無向邊

    Attributes:
        owner: 可使用此邊的一方
        u: 端點編號 (1-based)
        v: 端點編號 (1-based)
    """

    model_config = ConfigDict(frozen=True)

    owner: EdgeOwner
    u: int = Field(ge=1)
    v: int = Field(ge=1)

    @classmethod
    def from_triple(cls, record: Sequence[int]) -> "Edge":
        """
        由 [owner_tag, u, v] 紀錄建立邊

        Args:
            record: 三元素紀錄

        Returns:
            邊

        Raises:
            InvalidEdgeError: 紀錄長度不是 3、類型未知或端點無效
        """
        if len(record) != 3:  # noqa: PLR2004
            msg = f"Edge record must have exactly 3 items, got {list(record)!r}"
            raise InvalidEdgeError(msg)

        tag, u, v = record
        try:
            return cls(owner=tag, u=u, v=v)
        except ValidationError as exc:
            msg = f"Invalid edge record {list(record)!r}: {exc.error_count()} error(s)"
            raise InvalidEdgeError(msg) from exc

    def as_triple(self) -> tuple[int, int, int]:
        """轉換為 (owner_tag, u, v)"""
        return int(self.owner), self.u, self.v

    def usable_by(self, owner: EdgeOwner) -> bool:
        """此邊是否可被指定一方使用"""
        return self.owner in (owner, EdgeOwner.SHARED)


class RemovalPlan(BaseModel):
    """
    貪婪刪邊結果

    記錄每條邊被保留或可刪除，索引對應輸入邊的順序

    Attributes:
        vertex_count: 頂點數 n
        alice_kept: Alice 保留的邊數
        bob_kept: Bob 保留的邊數
        kept: 被保留的邊索引
        removable: 可刪除的邊索引
    """

    model_config = ConfigDict(frozen=True)

    vertex_count: int = Field(ge=0)
    alice_kept: int = Field(ge=0)
    bob_kept: int = Field(ge=0)
    kept: tuple[int, ...] = Field(default_factory=tuple)
    removable: tuple[int, ...] = Field(default_factory=tuple)

    @property
    def removable_count(self) -> int:
        """可刪除的邊數"""
        return len(self.removable)

    @property
    def is_feasible(self) -> bool:
        """雙方是否都形成生成樹"""
        target = self.vertex_count - 1
        return self.alice_kept == target and self.bob_kept == target

    @property
    def answer(self) -> int:
        """最多可刪除的邊數，不可行時為 INFEASIBLE"""
        return self.removable_count if self.is_feasible else INFEASIBLE
