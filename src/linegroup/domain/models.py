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

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

Row = Tuple[str, ...]

DELIMITER = ";"


def render_row(row: Iterable[str]) -> str:
    """Canonical text form of a row; used for deduplication and output."""
    return DELIMITER.join(row)


@dataclass(frozen=True)
class ProcessResult:
    """
    Outcome of one pipeline run.

    ``sorted_groups`` holds ``(root_id, member_rows)`` pairs in rank order
    (largest group first). Root ids are internal and only useful for
    tie-breaking.
    """

    multi_group_count: int
    sorted_groups: List[Tuple[int, List[str]]] = field(default_factory=list)

    @property
    def group_count(self) -> int:
        return len(self.sorted_groups)
