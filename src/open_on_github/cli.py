"""CLI for open-on-github."""

import re
import sys
from typing import NoReturn

import click
import structlog

from open_on_github import app
from open_on_github.config.logging import configure_logging
from open_on_github.config.settings import get_settings
from open_on_github.core.exceptions import OpenOnGithubError
from open_on_github.core.models.remote import LineRange
from open_on_github.git.url_resolver import parse_remote

logger = structlog.get_logger(__name__)

_LINES_PATTERN = re.compile(r"^(\d+)(?:[-:]L?(\d+))?$")


class LineRangeType(click.ParamType):
    """Parses "5", "5-9" or "L5-L9" into a LineRange."""

    name = "START[-END]"

    def convert(self, value, param, ctx) -> LineRange:
        if isinstance(value, LineRange):
            return value
        match = _LINES_PATTERN.match(value.strip().lstrip("L"))
        if not match:
            self.fail(f"{value!r} is not a line or line range", param, ctx)
        start = int(match.group(1))
        end = int(match.group(2)) if match.group(2) else start
        if start < 1 or end < start:
            self.fail(f"{value!r} is not a valid line range", param, ctx)
        return LineRange(start_line=start, end_line=end)


def _fail(error: OpenOnGithubError) -> NoReturn:
    logger.debug("command_failed", error=error.message, **error.details)
    click.echo(f"Error: {error.message}", err=True)
    sys.exit(1)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """open-on-github: open files from a Git checkout on their web host."""
    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)
    ctx.call_on_close(app.deactivate)


@cli.command("open")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--lines", "-L", type=LineRangeType(), default=None, help="Line or line range, e.g. 5 or 5-9")
@click.option("--ref", "-r", default=None, help="Branch or commit (default: current branch, else HEAD commit)")
@click.option("--remote", default=None, help="Remote name (default: origin, else the first remote)")
@click.option("--print-only", is_flag=True, help="Print the URL without opening a browser")
def open_(path: str, lines: LineRange | None, ref: str | None, remote: str | None, print_only: bool) -> None:
    """Open PATH on its Git web host.

    The URL is always printed; it is opened in the browser unless
    --print-only is given or OPEN_ON_GITHUB_OPEN_BROWSER is false.
    """
    try:
        service = app.activate()
        if print_only:
            url = service.resolve_url(path, line_range=lines, ref=ref, remote_name=remote)
        else:
            url = service.open_file(path, line_range=lines, ref=ref, remote_name=remote)
    except OpenOnGithubError as e:
        _fail(e)
    click.echo(url)


@cli.command()
@click.argument("remote_url")
def parse(remote_url: str) -> None:
    """Show the host, owner and repository of REMOTE_URL."""
    descriptor = parse_remote(remote_url)
    if descriptor is None:
        click.echo(f"Error: Unsupported or unrecognized remote URL: {remote_url}", err=True)
        sys.exit(1)

    click.echo(f"host:  {descriptor.host}")
    click.echo(f"owner: {descriptor.owner}")
    click.echo(f"repo:  {descriptor.repo}")


if __name__ == "__main__":
    cli()
