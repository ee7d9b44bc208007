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
import time
from pathlib import Path
from typing import Optional

import typer

from ..adapters.source.local_source import LocalSource
from ..config import AppConfig
from ..domain.errors import LineGroupError
from ..services import (
    GroupingService,
    ProcessingService,
    RecordReaderService,
    ReportService,
)
from ..services.report_service import FORMATS

from ..logging_config import setup_logging

setup_logging()

app = typer.Typer(help="linegroup CLI - group records that share column values")

logger = logging.getLogger(__name__)


def _parse_format(fmt: Optional[str]) -> str:
    """
    Normalise --fmt; raises Typer BadParameter for unknown formats.
    """
    value = (fmt or "txt").strip().lower()
    if value not in FORMATS:
        raise typer.BadParameter(
            f"Unknown format: {value}. Valid options: {', '.join(FORMATS)}"
        )
    return value


def _determine_input(input_file: Optional[str], config: AppConfig) -> str:
    if input_file:
        logger.info("Using input file from command line: %s", input_file)
        return input_file
    logger.info("Using input file from configuration: %s", config.input_file)
    return config.input_file


def _determine_output(out: Optional[Path], config: AppConfig, fmt: str) -> Path:
    # - no --out  -> configured output file
    # - --out DIR -> DIR/groups.<fmt>
    # - --out FILE -> FILE
    target = Path(out) if out is not None else Path(config.output_file)
    if target.exists() and target.is_dir():
        return target / f"groups.{fmt}"
    return target


def _wire() -> ProcessingService:
    """
    Composition root:
      LocalSource -> RecordReaderService -> GroupingService -> ReportService
    """
    reader = RecordReaderService(LocalSource())
    return ProcessingService(reader, GroupingService(), ReportService())


@app.callback()
def main() -> None:
    """
    Group semicolon-delimited records that share a non-empty value in the
    same column, and write the groups ranked by size.
    """


@app.command()
def run(
    input_file: Optional[str] = typer.Argument(
        None,
        help="Input file path or bundled resource name (.gz is decompressed). "
        "Defaults to LINEGROUP_INPUT_FILE.",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "--output",
        help="Write the report to this path. If a directory is provided, the file will be "
        "named 'groups.<fmt>' inside it. Defaults to LINEGROUP_OUTPUT_FILE.",
        resolve_path=True,
    ),
    fmt: str = typer.Option(
        "txt",
        "--fmt",
        help="Output format: txt or json.",
        case_sensitive=False,
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        help="Suppress the summary lines.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Enable verbose logging"),
):
    """
    Read the input, group rows, and write the ranked groups report.
    """
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Verbose logging enabled")

    fmt = _parse_format(fmt)
    config = AppConfig.from_env()
    source = _determine_input(input_file, config)
    target = _determine_output(out, config, fmt)

    processing = _wire()
    start = time.perf_counter()
    try:
        result = processing.process(source, target, fmt=fmt)
    except (LineGroupError, OSError) as e:
        logger.exception("Processing %s failed", source)
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    duration = processing.duration_seconds(start, time.perf_counter())

    if not quiet:
        typer.echo(f"Groups with more than one element: {result.multi_group_count}")
        typer.echo(f"Run time: {duration:.3f} seconds")
    typer.echo(f"Wrote {fmt} report to {target}")
