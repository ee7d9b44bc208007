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

import json
import logging
from pathlib import Path
from typing import Iterator

from ..domain.errors import ConfigurationError
from ..domain.models import ProcessResult

logger = logging.getLogger(__name__)

FORMATS = ("txt", "json")

HEADER = "Number of groups with more than one element: {count}"
GROUP_LABEL = "Group {number}"


class ReportService:
    """
    Writes ranked groups to disk.

    Notes:
      - txt (default): header line with the multi-group count, a blank line,
        then "Group N" (1-based rank) followed by its rows and a blank line.
      - json: {"multi_group_count": n, "groups": [[row, ...], ...]} in rank order.
    """

    def render_lines(self, result: ProcessResult) -> Iterator[str]:
        yield HEADER.format(count=result.multi_group_count)
        yield ""
        for number, (_root, members) in enumerate(result.sorted_groups, start=1):
            yield GROUP_LABEL.format(number=number)
            yield from members
            yield ""

    def render(self, result: ProcessResult) -> str:
        return "".join(line + "\n" for line in self.render_lines(result))

    def write_report(self, out: Path, result: ProcessResult, fmt: str = "txt") -> Path:
        """
        Write the report for ``result`` to ``out``.

        Returns:
            The path written.

        Raises:
            ConfigurationError: if an unsupported format is requested.
        """
        fmt = (fmt or "txt").lower()
        if fmt not in FORMATS:
            raise ConfigurationError(
                f"Unsupported format: {fmt}. Valid options: {', '.join(FORMATS)}"
            )

        out = Path(out)
        out.parent.mkdir(parents=True, exist_ok=True)

        if fmt == "json":
            payload = {
                "multi_group_count": result.multi_group_count,
                "groups": [members for _root, members in result.sorted_groups],
            }
            out.write_text(
                json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8"
            )
        else:
            with open(out, "w", encoding="utf-8", newline="\n") as f:
                for line in self.render_lines(result):
                    f.write(line)
                    f.write("\n")

        logger.info("Wrote %s report with %d groups to %s", fmt, result.group_count, out)
        return out
