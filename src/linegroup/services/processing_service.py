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
from pathlib import Path
from typing import Union

from ..domain.models import ProcessResult
from .grouping_service import GroupingService
from .reader_service import RecordReaderService
from .report_service import ReportService

logger = logging.getLogger(__name__)


class ProcessingService:
    """
    Runs the whole pipeline strictly in sequence:
      - read + validate + deduplicate rows
      - group rows and rank the groups
      - write the report

    Errors are not caught here; a failed run leaves whatever part of the
    output file was already written.
    """

    def __init__(
        self,
        reader: RecordReaderService,
        grouping: GroupingService,
        report: ReportService,
    ) -> None:
        self._reader = reader
        self._grouping = grouping
        self._report = report

    def process(
        self,
        input_file: str,
        output_file: Union[str, Path],
        fmt: str = "txt",
    ) -> ProcessResult:
        rows = self._reader.read(input_file)
        groups = self._grouping.group_rows(rows)
        multi_group_count = self._grouping.count_multi_groups(groups)
        sorted_groups = self._grouping.sort_groups(groups)
        logger.info(
            "Found %d groups (%d with more than one element)",
            len(sorted_groups),
            multi_group_count,
        )

        result = ProcessResult(multi_group_count, sorted_groups)
        self._report.write_report(Path(output_file), result, fmt=fmt)
        return result

    @staticmethod
    def duration_seconds(start: float, end: float) -> float:
        return end - start
