# rowfilter/cli/filter.py
"""
CLI command filtering rows from a JSON or YAML file.

    celine-rowfilter filter people.json --where name=al --where age=30

The input holds either a list of rows or a mapping of row id to row.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import typer

from celine.rowfilter.cli.utils import load_rows_file, parse_where
from celine.rowfilter.core.logging import setup_logging
from celine.rowfilter.engine import RowFilter
from celine.rowfilter.errors import RowFilterError
from celine.rowfilter.schemas.filter_result import FilterResult

logger = logging.getLogger(__name__)


def filter_cmd(
    input_file: Path = typer.Argument(
        ..., help="JSON or YAML file with the rows, '-' for JSON on stdin."
    ),
    where: List[str] = typer.Option(
        None,
        "--where",
        "-w",
        help=(
            "Reference attribute as name=value (can be passed multiple times). "
            "Repeating a name matches any of its values."
        ),
    ),
    normalize: bool = typer.Option(
        True,
        "--normalize/--no-normalize",
        help="Reduce kept rows to the compared attributes.",
    ),
    strict: bool = typer.Option(
        False,
        "--strict",
        help="Compare missing attributes as empty values instead of skipping them.",
    ),
    output: Optional[Path] = typer.Option(
        None, "-o", "--output", help="Write the result here instead of stdout."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """
    Filter rows by attribute values.

    Text values match case-insensitively anywhere in the row's value, other
    values must be equal. Empty values do not filter.
    """
    setup_logging(verbose)

    try:
        attributes = parse_where(where or [])
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    try:
        rows = load_rows_file(input_file)
    except Exception as exc:
        typer.echo(f"Failed to load rows from {input_file}: {exc}", err=True)
        raise typer.Exit(code=1)

    if not isinstance(rows, (list, dict)):
        typer.echo("Input must be a list of rows or a mapping of id to row.", err=True)
        raise typer.Exit(code=1)

    try:
        kept = RowFilter().filter(
            rows,
            attributes,
            normalize=normalize,
            ignore_undefined_attributes=not strict,
        )
    except RowFilterError as e:
        typer.echo(f"Filtering failed: {e}", err=True)
        raise typer.Exit(code=1)

    result = FilterResult(items=kept, input_count=len(rows), count=len(kept))
    doc = result.model_dump_json(indent=2)

    if output is None:
        typer.echo(doc)
    else:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(doc + "\n", encoding="utf-8")
        logger.info("Wrote %d of %d rows to %s", result.count, result.input_count, output)
