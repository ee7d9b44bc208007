# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import List


class UnionFind:
    """
    Disjoint-set forest over the indices ``0..size-1``.

    - Union by rank; every element starts as its own root with rank 1.
    - ``find`` compresses paths iteratively, so deep chains cannot hit the
      recursion limit on large inputs.
    - On equal rank the root of ``y`` is attached under the root of ``x``.
      Root ids are therefore deterministic for a given union order.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"UnionFind size must be >= 0, got {size}")
        self._size = int(size)
        self._parent: List[int] = list(range(self._size))
        self._rank: List[int] = [1] * self._size

    def __len__(self) -> int:
        return self._size

    def _check(self, x: int) -> None:
        # Python lists accept negative indices; reject them explicitly.
        if not 0 <= x < self._size:
            raise IndexError(f"element {x} out of range [0, {self._size})")

    def find(self, x: int) -> int:
        """Return the root of ``x``, re-pointing every visited node at it."""
        self._check(x)
        parent = self._parent

        root = x
        while parent[root] != root:
            root = parent[root]

        while parent[x] != root:
            nxt = parent[x]
            parent[x] = root
            x = nxt

        return root

    def union(self, x: int, y: int) -> bool:
        """
        Merge the sets containing ``x`` and ``y``.

        Returns:
            True if two sets were merged, False if already connected.
        """
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False

        if self._rank[root_x] < self._rank[root_y]:
            self._parent[root_x] = root_y
        elif self._rank[root_x] > self._rank[root_y]:
            self._parent[root_y] = root_x
        else:
            self._parent[root_y] = root_x
            self._rank[root_x] += 1
        return True

    def connected(self, x: int, y: int) -> bool:
        return self.find(x) == self.find(y)
