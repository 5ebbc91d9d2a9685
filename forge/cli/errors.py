"""CLI error handling: report failures on stderr and exit non-zero."""

import logging
from functools import wraps

import typer
from click.exceptions import Exit

from forge.errors import ForgeError

logger = logging.getLogger(__name__)


def error_feedback(f):
    """Wrap a command so any failure is echoed to stderr before Exit(1).

    Forge errors print their own message; ValueError/OSError get a short
    category prefix. Tracebacks go to the debug log only.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except ForgeError as e:
            typer.echo(str(e), err=True)
            raise typer.Exit(1) from e
        except (ValueError, KeyError, TypeError) as e:
            typer.echo(f"Invalid input: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"File error: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            logger.debug("Unhandled error in %s", f.__name__, exc_info=True)
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
