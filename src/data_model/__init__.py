"""
資料模型模組

提供邊、邊類型與刪邊結果的資料結構，使用 Pydantic 進行驗證
"""

from .core import (
    INFEASIBLE,
    Edge,
    EdgeOwner,
    InvalidEdgeError,
    RemovalPlan,
)

__all__ = [
    "Edge",
    "EdgeOwner",
    "INFEASIBLE",
    "InvalidEdgeError",
    "RemovalPlan",
]
