"""
工具模組

提供與領域無關的資料結構
"""

from .union_find import UnionFind


__all__ = ["UnionFind"]
