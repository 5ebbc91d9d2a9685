import typer

from forge import __version__
from forge.cli import output
from forge.cli.errors import error_feedback
from forge.config import get_settings
from forge.lib.log import setup_logging
from forge.task import cli as task_cli

app = typer.Typer(
    invoke_without_command=True,
    no_args_is_help=False,
    add_completion=False,
    help="Task coordination CLI for multi-agent workflows.",
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"forge {__version__}")
        raise typer.Exit()


@app.callback(context_settings={"help_option_names": ["-h", "--help"]})
def common_options_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version."
    ),
):
    """Create, claim, complete and release shared tasks."""
    setup_logging(verbose)
    output.init_context(ctx, json_output, quiet_output)

    if ctx.resilient_parsing:
        return

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())


@app.command("serve")
@error_feedback
def serve(
    host: str | None = typer.Option(None, "--host", help="Loopback interface to bind."),
    port: int | None = typer.Option(None, "--port", "-p", help="Port to listen on."),
):
    """Run the web dashboard."""
    from forge.api.main import run

    settings = get_settings()
    run(host or settings.host, port or settings.port)


task_cli.register(app)


def main() -> None:
    """Entry point for forge command."""
    app()
