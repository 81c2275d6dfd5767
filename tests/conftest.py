"""
Pytest 配置和共用 fixtures
"""

import pytest


@pytest.fixture
def scenario_edges() -> list[list[int]]:
    """Alice 有兩條多餘專屬邊的圖 (答案 2)"""
    return [[3, 1, 2], [3, 2, 3], [1, 1, 3], [1, 3, 4], [1, 1, 4], [2, 3, 4]]


@pytest.fixture
def tight_edges() -> list[list[int]]:
    """每條邊都必須保留的圖 (答案 0)"""
    return [[3, 1, 2], [3, 2, 3], [1, 1, 4], [2, 1, 4]]


@pytest.fixture
def bob_disconnected_edges() -> list[list[int]]:
    """Bob 無法連到頂點 4 的圖 (答案 -1)"""
    return [[3, 1, 2], [3, 2, 3], [1, 1, 4]]
