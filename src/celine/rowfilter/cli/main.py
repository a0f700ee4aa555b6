# rowfilter/cli/main.py
from __future__ import annotations
import typer

from celine.rowfilter.cli.filter import filter_cmd

app = typer.Typer(help="Row filter command-line utilities", no_args_is_help=True)


@app.callback()
def main() -> None:
    """Row filter command-line utilities."""


app.command("filter")(filter_cmd)


def run():
    app()


if __name__ == "__main__":
    run()
