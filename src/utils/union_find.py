"""
Union-Find (並查集) 資料結構

固定大小的不相交集合，節點編號為 1..n，索引 0 為保留位置
"""


class UnionFind:
    """
    靜態 Union-Find 資料結構

    每個集合是一棵有根樹，以根節點作為代表元素 (parent[root] == root)
    支援路徑減半壓縮和按大小合併優化
    """

    def __init__(self, n: int) -> None:
        """
        初始化 Union-Find

        Args:
            n: 元素數量 (編號 1..n，0 為佔位)

        Raises:
            ValueError: n 為負數
        """
        if n < 0:
            msg = f"Element count must be non-negative, got {n}"
            raise ValueError(msg)

        self._n = n
        self._parent = list(range(n + 1))
        self._size = [1] * (n + 1)
        self._components = n

    def __len__(self) -> int:
        return self._n

    def __contains__(self, x: object) -> bool:
        return isinstance(x, int) and 1 <= x <= self._n

    def find(self, x: int) -> int:
        """
        尋找元素的根節點 (帶路徑減半)

        Args:
            x: 元素編號

        Returns:
            根節點編號
        """
        parent = self._parent
        while parent[x] != x:
            parent[x] = parent[parent[x]]  # 路徑減半
            x = parent[x]
        return x

    def union(self, x: int, y: int) -> bool:
        """
        合併兩個元素所在的集合

        Args:
            x: 第一個元素編號
            y: 第二個元素編號

        Returns:
            True 表示兩個集合被合併，False 表示原本已在同一集合
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        size = self._size

        # 按大小合併：將較小的樹接到較大的樹
        if size[root_x] < size[root_y]:
            root_x, root_y = root_y, root_x

        self._parent[root_y] = root_x
        size[root_x] += size[root_y]
        self._components -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """兩個元素是否在同一集合"""
        return self.find(x) == self.find(y)

    def set_size(self, x: int) -> int:
        """元素所在集合的大小"""
        return self._size[self.find(x)]

    @property
    def component_count(self) -> int:
        """集合數量 (不含佔位索引 0)"""
        return self._components

    @property
    def is_connected_whole(self) -> bool:
        """所有元素是否已在同一集合"""
        return self._components <= 1

    def groups(self) -> dict[int, list[int]]:
        """
        取得所有集合

        Returns:
            代表元素 -> 成員列表 (遞增排序)
        """
        groups: dict[int, list[int]] = {}
        for element in range(1, self._n + 1):
            groups.setdefault(self.find(element), []).append(element)
        return groups
