import logging
import traceback
from pathlib import Path

import typer

from patchgen.config import Settings, load_settings
from patchgen.logging import setup_logging
from patchgen.rector.inputs import read_report
from patchgen.rector.output import write_patches
from patchgen.rector.synthesize import synthesize

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """
    Composer patch generator CLI
    """
    settings = load_settings()
    setup_logging(level=logging.DEBUG if verbose else settings.log_level)
    ctx.obj = settings


@app.command("rector:generate:composer-patches")
def generate_composer_patches_cmd(
    ctx: typer.Context,
    file_path: Path = typer.Option(
        ...,
        "--file_path",
        help="Path to the file which contains the JSON output",
    ),
    ticket: str | None = typer.Option(
        None,
        "--ticket",
        help="Identifier of the ticket in Jira or Github etc. [default: identifier-not-set]",
    ),
    output_dir: Path | None = typer.Option(
        None,
        "--output_dir",
        help="Path to the output directory [default: <base-path>/patches]",
    ),
):
    """
    Generate composer patches for each file in Rector JSON output.
    """
    settings: Settings = ctx.obj
    if ticket is None:
        ticket = settings.default_ticket
    if output_dir is None:
        output_dir = settings.default_output_dir

    try:
        entries = read_report(file_path)
        patches = synthesize(entries, ticket)
        written = write_patches(patches, output_dir)
    except Exception as exc:
        logger.debug("Patch generation failed", exc_info=True)
        typer.echo(f"Error: {exc}", err=True)
        typer.echo(traceback.format_exc(), err=True)
        raise typer.Exit(code=1)

    typer.echo("Here is a list of the patches that have been generated:")
    for path in written:
        typer.echo(f"- {path}")
