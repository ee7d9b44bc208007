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

import logging
from typing import Dict, List, Sequence, Tuple

from ..domain.models import Row, render_row
from ..domain.union_find import UnionFind

logger = logging.getLogger(__name__)

ColumnSignature = Tuple[int, str]


class GroupingService:
    """
    Groups rows that share a non-empty value in the same column, directly or
    transitively.

    The first row to show a given (column, value) signature becomes its
    representative; every later row with that signature is unioned with it.
    """

    def group_rows(self, rows: Sequence[Row]) -> Dict[int, List[str]]:
        """
        Return a mapping of root id -> rendered member rows.

        Members keep their relative input order; keys appear in order of each
        group's first member.
        """
        uf = self._build_union_find(rows)
        return self._collect_groups(rows, uf)

    def _build_union_find(self, rows: Sequence[Row]) -> UnionFind:
        uf = UnionFind(len(rows))
        first_seen: Dict[ColumnSignature, int] = {}
        unions = 0

        for row_idx, row in enumerate(rows):
            for col_idx, value in enumerate(row):
                if not value:
                    continue
                signature = (col_idx, value)
                first_idx = first_seen.get(signature)
                if first_idx is None:
                    first_seen[signature] = row_idx
                elif uf.union(first_idx, row_idx):
                    unions += 1

        logger.debug(
            "Scanned %d rows, %d column signatures, %d merges",
            len(rows),
            len(first_seen),
            unions,
        )
        return uf

    @staticmethod
    def _collect_groups(rows: Sequence[Row], uf: UnionFind) -> Dict[int, List[str]]:
        groups: Dict[int, List[str]] = {}
        for row_idx, row in enumerate(rows):
            groups.setdefault(uf.find(row_idx), []).append(render_row(row))
        return groups

    @staticmethod
    def count_multi_groups(groups: Dict[int, List[str]]) -> int:
        """Number of groups with more than one member."""
        return sum(1 for members in groups.values() if len(members) > 1)

    @staticmethod
    def sort_groups(groups: Dict[int, List[str]]) -> List[Tuple[int, List[str]]]:
        """Largest groups first; equal sizes ordered by ascending root id."""
        return sorted(groups.items(), key=lambda item: (-len(item[1]), item[0]))
