#!/usr/bin/env python3
"""
Sixth-order Fierz Identities Report

Simplifies every product of the Fierz form table with two inserted Dirac
structures (275 expressions) and typesets the results into fierz6.pdf.

Examples:\n

    fierz6.py ./build/dirac                   # Writes fierz6.tex and fierz6.pdf

    fierz6.py ./build/dirac --no-typeset      # Writes fierz6.tex only

    fierz6.py ./build/dirac --no-shell        # Passes expressions to dirac without sh
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from diracdoc.contexts.invocation import DiracInvocation
from diracdoc.contexts.rendering import typeset
from diracdoc.contexts.rendering.logger import log_compiler_missing
from diracdoc.contexts.suites import fierz_invocations, run_batch
from diracdoc.contexts.suites.fierz import FIERZ_LINE_LENGTH
from diracdoc.contexts.suites.logger import setup_batch_logger
from diracdoc.utils.timestamp import now

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

OUTPUT_NAME = "fierz6"
USAGE = "Usage: fierz6.py /path/to/dirac/executable\n"

app = typer.Typer(
    help="Compute the sixth-order Fierz identity table with dirac",
    add_completion=False,
)


def announce(invocation: DiracInvocation) -> None:
    typer.echo(f"Computing {invocation.expression}")


@app.command()
def main(
    executable: Annotated[
        Optional[str],
        typer.Argument(help="Path to the dirac executable", show_default=False),
    ] = None,
    line_length: Annotated[
        int,
        typer.Option("--line-length", "-l", help="Terms per output line requested from dirac", min=0),
    ] = FIERZ_LINE_LENGTH,
    no_shell: Annotated[
        bool,
        typer.Option("--no-shell", help="Run dirac without a shell (expressions never reach sh)"),
    ] = False,
    no_typeset: Annotated[
        bool,
        typer.Option("--no-typeset", help="Write the .tex file only"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Show every dirac call and its raw output"),
    ] = False,
):
    """
    Compute every Fierz product with dirac and write fierz6.tex.
    """
    if executable is None:
        typer.echo(USAGE, nl=False)
        raise typer.Exit(code=1)

    dirac = Path(os.path.abspath(os.path.expanduser(executable)))
    tex_path = Path(f"{OUTPUT_NAME}.tex")

    setup_batch_logger(LOGS_PATH / f"{OUTPUT_NAME}_{now()}", dirac, verbose=verbose)

    summary = run_batch(
        dirac,
        fierz_invocations(line_length=line_length),
        tex_path,
        use_shell=not no_shell,
        before_each=announce,
    )

    typer.secho(
        f"\n{summary.succeeded}/{summary.total} products computed, written to {summary.tex_path}",
        fg=typer.colors.GREEN if summary.failed == 0 else typer.colors.YELLOW,
        bold=True,
    )

    if not no_typeset:
        try:
            typeset(tex_path)
        except FileNotFoundError as e:
            log_compiler_missing(e)

    raise typer.Exit(code=0)


if __name__ == "__main__":
    app()
