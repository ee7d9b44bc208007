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

import csv
import gzip
import io
import logging
from typing import BinaryIO, Iterable, Iterator, List, Optional

from ..domain.models import DELIMITER, Row, render_row
from ..ports.source import SourcePort

logger = logging.getLogger(__name__)

GZ_SUFFIX = ".gz"
QUOTE = '"'
MAX_FIELD_SIZE = 2**31 - 1


class RecordReaderService:
    """
    Turns a semicolon-delimited text source into unique, valid rows.

    Notes:
      - Compression is decided from the identifier suffix only (``.gz``).
      - One record per line. Quoted fields may hold the delimiter
        (``"2;3"`` is one value ``2;3``); ``""`` inside quotes is one quote.
      - Fields are whitespace-trimmed after unquoting. A value that still
        contains a quote must start and end with one, and a line whose quoting
        cannot be parsed is malformed; either way the row is dropped silently.
      - Undecodable bytes become U+FFFD instead of failing the run.
      - Duplicate rows (same canonical text) keep their first occurrence.
    """

    def __init__(self, source: SourcePort) -> None:
        self._source = source
        if csv.field_size_limit() < MAX_FIELD_SIZE:
            csv.field_size_limit(MAX_FIELD_SIZE)

    @staticmethod
    def is_compressed(identifier: str) -> bool:
        return str(identifier).endswith(GZ_SUFFIX)

    def read(self, identifier: str) -> List[Row]:
        """
        Read and parse the named input.

        Raises:
            SourceNotFoundError: if the identifier cannot be resolved.
            OSError: on read/decompression failures.
        """
        compressed = self.is_compressed(identifier)
        with self._source.open_bytes(identifier) as stream:
            rows = self.parse_stream(stream, compressed=compressed)
        logger.info("Read %d unique rows from %s", len(rows), identifier)
        return rows

    def parse_stream(self, stream: BinaryIO, compressed: bool = False) -> List[Row]:
        """Parse an already-open byte stream. The stream is not closed."""
        if compressed:
            with gzip.GzipFile(fileobj=stream, mode="rb") as gz:
                return self._parse_text_stream(gz)
        return self._parse_text_stream(stream)

    def _parse_text_stream(self, stream: BinaryIO) -> List[Row]:
        text = io.TextIOWrapper(stream, encoding="utf-8", errors="replace", newline="")
        try:
            return self._unique_valid_rows(self._records(text))
        finally:
            # Detach so closing the wrapper does not close the underlying stream.
            text.detach()

    # --- helpers ------------------------------------------------------------

    @staticmethod
    def _split(line: str) -> Optional[List[str]]:
        """Split one line into trimmed values; None if its quoting is malformed."""
        reader = csv.reader(
            [line], delimiter=DELIMITER, quotechar=QUOTE, skipinitialspace=True, strict=True
        )
        try:
            record = next(reader, [])
        except csv.Error:
            return None
        return [value.strip() for value in record]

    def _records(self, lines: Iterable[str]) -> Iterator[Optional[List[str]]]:
        for line in lines:
            line = line.rstrip("\r\n")
            if not line:
                continue  # blank line
            yield self._split(line)

    @staticmethod
    def is_valid(fields: Iterable[str]) -> bool:
        return all(
            QUOTE not in value or (value.startswith(QUOTE) and value.endswith(QUOTE))
            for value in fields
        )

    def _unique_valid_rows(self, records: Iterable[Optional[List[str]]]) -> List[Row]:
        seen: set[str] = set()
        rows: List[Row] = []
        total = invalid = 0

        for fields in records:
            total += 1
            if fields is None or not self.is_valid(fields):
                invalid += 1
                continue
            row: Row = tuple(fields)
            key = render_row(row)
            if key in seen:
                continue
            seen.add(key)
            rows.append(row)

        logger.debug(
            "Parsed %d records: %d invalid, %d duplicate, %d kept",
            total,
            invalid,
            total - invalid - len(rows),
            len(rows),
        )
        return rows

