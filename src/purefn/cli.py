"""Console entry point that runs the example catalogue and prints a table."""

import argparse
import typing as tp

from rich.console import Console
from rich.table import Table

from purefn.catalogue import run_all
from purefn.core.data_models import ExampleResult
from purefn.core.enums import Concept

__all__ = ["main", "render_results"]


def render_results(results: tp.Sequence[ExampleResult]) -> Table:
    table = Table(title="purefn examples")
    table.add_column("Concept", style="cyan")
    table.add_column("Expression")
    table.add_column("Expected")
    table.add_column("Actual")
    table.add_column("Status")

    for r in results:
        actual = r.error if r.error is not None else repr(r.actual)
        status = "[green]PASS[/green]" if r.passed else "[red]FAIL[/red]"
        table.add_row(r.concept.value, r.expression, repr(r.expected), actual, status)
    return table


def main(argv: tp.Optional[tp.Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="purefn-examples",
        description="Run the functional-programming examples and check their results.",
    )
    parser.add_argument(
        "--concept",
        help=f"Only run examples for one concept ({', '.join(c.value for c in Concept)}).",
    )
    args = parser.parse_args(argv)

    concept = None
    if args.concept is not None:
        try:
            concept = Concept.from_name(args.concept)
        except ValueError as e:
            parser.error(str(e))

    results = run_all(concept)
    console = Console()
    console.print(render_results(results))

    failed = sum(not r.passed for r in results)
    console.print(f"{len(results) - failed} passed, {failed} failed")
    return 1 if failed else 0
