"""
guard-summary CLI

Render the summary of a rule evaluation run from a results file.
"""

import json
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Generator

import typer
from typing_extensions import Annotated

from guardsummary.settings import get_default_labels
from guardsummary.settings import get_default_show_summary
from guardsummary.summary.exceptions import ResultsValidationError
from guardsummary.summary.exceptions import SinkWriteError
from guardsummary.summary.loaders import FlatResults
from guardsummary.summary.loaders import load_results
from guardsummary.summary.reporters import JsonSummary
from guardsummary.summary.reporters import Reporter
from guardsummary.summary.reporters import SummaryTable
from guardsummary.summary.models.model import parse_summary_types
from guardsummary.summary.models.model import ReportConfig
from guardsummary.summary.models.model import Status
from guardsummary.summary.models.model import SummaryType
from guardsummary.summary.styles import COLORED
from guardsummary.summary.styles import PLAIN
from guardsummary.version import get_version_string

logger = logging.getLogger(__name__)

# Exit codes
EXIT_FAILED_RULES = 19
EXIT_INVALID_INPUT = 1
EXIT_WRITE_ERROR = 5

app = typer.Typer(
    help="Render rule evaluation summaries",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    text = "text"
    json = "json"


# ----------------------------
# Autocompletion functions
# ----------------------------


def complete_summary_types(incomplete: str) -> Generator[str, None, None]:
    """Autocomplete summary type names plus 'all' and 'none'."""
    for name in [t.value.lower() for t in SummaryType] + ["all", "none"]:
        if name.startswith(incomplete.lower()):
            yield name


# ----------------------------
# CLI Commands
# ----------------------------


@app.command(name="render")  # type: ignore[misc]
def render_cmd(
    results_file: Annotated[
        Path,
        typer.Argument(
            help="JSON results file of one evaluation run",
            exists=True,
            dir_okay=False,
            readable=True,
        ),
    ],
    rules_file: Annotated[
        str | None,
        typer.Option(help="Rules source label printed before every rule name"),
    ] = None,
    data_file: Annotated[
        str | None,
        typer.Option(help="Data source label printed in the status line"),
    ] = None,
    show_summary: Annotated[
        list[str] | None,
        typer.Option(
            help=(
                "Summary groups to print: pass, fail, skip, all or none. "
                "Repeatable or comma separated."
            ),
            autocompletion=complete_summary_types,
        ),
    ] = None,
    output: Annotated[
        OutputFormat,
        typer.Option(help="Output format"),
    ] = OutputFormat.text,
    color: Annotated[
        bool,
        typer.Option(
            "--color/--no-color",
            help="Color status text",
            envvar="GUARD_SUMMARY_COLOR",
        ),
    ] = True,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """
    Render the summary of an evaluation run.

    \b
    Examples:
        guard-summary render results.json --rules-file rules.guard --data-file data.json
        guard-summary render results.json --show-summary all
        guard-summary render results.json --show-summary pass,fail --output json
    """
    if verbose:
        logging.getLogger("guardsummary").setLevel(logging.DEBUG)

    try:
        selector = parse_summary_types(show_summary or get_default_show_summary())
    except ValueError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(EXIT_INVALID_INPUT)

    default_rules_file, default_data_file = get_default_labels()
    config = ReportConfig(
        rules_file_name=rules_file or default_rules_file,
        data_file_name=data_file or default_data_file,
        selector=selector,
    )

    try:
        with results_file.open(encoding="utf-8") as fh:
            data = json.load(fh)
        results = load_results(data)
    except json.JSONDecodeError as e:
        typer.secho(
            f"Error: {results_file} is not valid JSON: {e}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(EXIT_INVALID_INPUT)
    except ResultsValidationError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(EXIT_INVALID_INPUT)

    reporter: Reporter
    if output == OutputFormat.json:
        reporter = JsonSummary(config)
    else:
        reporter = SummaryTable(config, COLORED if color else PLAIN)

    logger.debug(
        "Rendering %s as %s for %s",
        results_file,
        output.value,
        ", ".join(sorted(t.value for t in selector.types)) or "no groups",
    )
    try:
        if isinstance(results, FlatResults):
            reporter.report(
                sys.stdout,
                results.status,
                results.failed,
                results.passed_or_skipped,
                results.longest_rule_name,
            )
        else:
            reporter.report_eval(sys.stdout, results.status, results.root)
    except SinkWriteError as e:
        typer.secho(f"Error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(EXIT_WRITE_ERROR)

    if results.status == Status.FAIL:
        raise typer.Exit(EXIT_FAILED_RULES)


@app.command(name="version")  # type: ignore[misc]
def version_cmd() -> None:
    """Print the guard-summary version."""
    typer.echo(get_version_string())


def main():
    """Entrypoint for guard-summary CLI."""
    logging.basicConfig(level=logging.INFO)
    app()


if __name__ == "__main__":
    main()
