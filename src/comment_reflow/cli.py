"""CLI entry point for comment-reflow."""

import sys
from pathlib import Path

import click

from .config import load_config
from .exceptions import ConfigError, ReflowError
from .fixer import check_file, fix_file


@click.command()
@click.argument(
    "paths",
    nargs=-1,
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--max-line-length", "-l",
    type=int,
    default=None,
    help="Maximum comment line width (default: 80, or COMMENT_REFLOW_MAX_LINE_LENGTH env var)",
)
@click.option(
    "--fix",
    is_flag=True,
    default=False,
    help="Rewrite the files in place instead of reporting",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
def main(paths, max_line_length, fix, verbose):
    """Reflow source code comments to a maximum line width.

    Without --fix, every comment that needs a split or a merge is reported
    as path:line: message.

    Example: comment-reflow --max-line-length 100 --fix src/index.js
    """
    # Load config
    try:
        config = load_config(max_line_length=max_line_length, verbose=verbose)
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if verbose:
        click.echo(f"Maximum line length: {config.max_line_length}")

    had_errors = False
    total_failure = True
    findings = 0

    for path in paths:
        if verbose:
            click.echo(f"\nProcessing: {path}")

        try:
            if fix:
                result = fix_file(path, config)
                if result.changed:
                    click.echo(f"Reflowed {path} ({len(result.corrections)} correction(s))")
            else:
                for correction in check_file(path, config):
                    click.echo(f"{path}:{correction.line}: {correction.message}")
                    findings += 1
            total_failure = False
        except UnicodeDecodeError as e:
            click.echo(f"  Cannot decode {path} as UTF-8: {e}", err=True)
            had_errors = True
        except ReflowError as e:
            click.echo(f"  Reflow failed for {path}: {e}", err=True)
            had_errors = True
        except OSError as e:
            click.echo(f"  Failed to access {path}: {e}", err=True)
            had_errors = True

    # Exit code
    if total_failure:
        sys.exit(2)
    elif had_errors or findings:
        sys.exit(1)
    else:
        if verbose:
            click.echo("\nDone!")
        sys.exit(0)
