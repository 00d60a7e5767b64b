"""Command-line interface for ospath."""
import logging
import sys
from typing import Tuple

import click

from . import __version__
from .core.errors import OSPathError
from .core.models import Config
from .core.query import FilesystemQuery
from .core.syntax import PathSyntax
from .utils.console_base import THEMES, ConsoleManager


def setup_logging(debug: bool, level_name: str = 'WARNING') -> None:
    """Configure logging based on debug flag and configured level."""
    level = logging.DEBUG if debug else getattr(logging, level_name.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format='[%(levelname)s] %(message)s',
        handlers=[logging.StreamHandler(sys.stderr)]
    )


class Context:
    """State shared by all subcommands."""

    def __init__(self, config: Config, console: ConsoleManager, as_json: bool):
        self.config = config
        self.console = console
        self.as_json = as_json
        self._query = None

    @property
    def query(self) -> FilesystemQuery:
        if self._query is None:
            self._query = FilesystemQuery(self.config)
        return self._query

    def emit(self, value) -> None:
        """Print a string result, or any result as JSON when requested."""
        if self.as_json:
            self.console.print_json(value)
        elif isinstance(value, str):
            self.console.print_path(value)
        else:
            for item in value:
                self.console.print_path(item)


pass_context = click.make_pass_decorator(Context)


@click.group()
@click.option('--debug', is_flag=True, help='Enable debug logging (shows failed system calls)')
@click.option('--theme', '-t', type=click.Choice(sorted(THEMES)), default=None,
              help='Terminal color theme')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON')
@click.version_option(__version__)
@click.pass_context
def main(ctx: click.Context, debug: bool, theme: str, as_json: bool) -> None:
    """
    POSIX path manipulation and filesystem queries.

    Examples:

        ospath normalize a//b/../c

        ospath join /usr local bin

        ospath commonpath /usr/lib /usr/lib64

        ospath info /
    """
    config = Config()
    if theme:
        config.theme = theme
    setup_logging(debug, config.log_level)
    ctx.obj = Context(config, ConsoleManager(theme=config.theme), as_json)


@main.command()
@click.argument('paths', nargs=-1, required=True)
@pass_context
def normalize(ctx: Context, paths: Tuple[str, ...]) -> None:
    """Collapse redundant separators and . / .. references."""
    results = [PathSyntax.normalize(p) for p in paths]
    ctx.emit(results[0] if len(results) == 1 else results)


@main.command()
@click.argument('path')
@pass_context
def split(ctx: Context, path: str) -> None:
    """Print the head and tail of PATH on separate lines."""
    ctx.emit(list(PathSyntax.split(path)))


@main.command()
@click.argument('path')
@pass_context
def basename(ctx: Context, path: str) -> None:
    """Print the final component of PATH."""
    ctx.emit(PathSyntax.base_name(path))


@main.command()
@click.argument('path')
@pass_context
def dirname(ctx: Context, path: str) -> None:
    """Print the directory component of PATH."""
    ctx.emit(PathSyntax.dir_name(path))


@main.command()
@click.argument('first')
@click.argument('second')
@click.argument('rest', nargs=-1)
@pass_context
def join(ctx: Context, first: str, second: str, rest: Tuple[str, ...]) -> None:
    """Join two or more path fragments."""
    ctx.emit(PathSyntax.join(first, second, *rest))


@main.command()
@click.argument('paths', nargs=-1)
@pass_context
def commonprefix(ctx: Context, paths: Tuple[str, ...]) -> None:
    """Print the character-wise common prefix of PATHS."""
    ctx.emit(PathSyntax.common_prefix(paths))


@main.command()
@click.argument('paths', nargs=-1)
@pass_context
def commonpath(ctx: Context, paths: Tuple[str, ...]) -> None:
    """Print the longest common sub-path of PATHS."""
    ctx.emit(PathSyntax.common_path(paths))


@main.command()
@click.argument('path')
@pass_context
def abspath(ctx: Context, path: str) -> None:
    """Print PATH made absolute and normalized."""
    ctx.emit(ctx.query.abs_path(path))


@main.command()
@click.argument('path')
@pass_context
def realpath(ctx: Context, path: str) -> None:
    """Print the canonical form of PATH with symlinks resolved."""
    result = ctx.query.real_path(path)
    if not result:
        ctx.console.print_error(f"Cannot resolve {path}")
        sys.exit(1)
    ctx.emit(result)


@main.command()
@click.argument('path')
@click.option('--lenient', is_flag=True,
              help='Expand an unknown user to an empty home instead of failing')
@pass_context
def expanduser(ctx: Context, path: str, lenient: bool) -> None:
    """Replace a leading ~ or ~user in PATH with the home directory."""
    try:
        result = ctx.query.expand_user(path, strict=False if lenient else None)
    except OSPathError as e:
        ctx.console.print_error(str(e))
        sys.exit(1)
    ctx.emit(result)


@main.command()
@click.argument('path')
@pass_context
def info(ctx: Context, path: str) -> None:
    """Show every filesystem predicate for PATH."""
    query = ctx.query
    flags = {
        'exists': query.exists(path),
        'lexists': query.lexists(path),
        'is_file': query.is_file(path),
        'is_dir': query.is_dir(path),
        'is_link': query.is_link(path),
        'is_mount': query.is_mount(path),
    }
    if ctx.as_json:
        ctx.console.print_json(flags)
    else:
        ctx.console.print_flags(path, flags)


if __name__ == '__main__':
    main()
