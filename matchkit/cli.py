"""matchkit CLI entry point.

Commands:
- matchkit config validate <path>: Validate config file
- matchkit config show [--config <path>]: Show effective config and hash
- matchkit diff <actual> <expected>: Ordered diff of two JSON arrays
- matchkit unordered <actual> <expected>: Unordered comparison of two JSON arrays
"""

import json
import sys
from pathlib import Path

import click
import yaml
from pydantic import ValidationError

from matchkit import __version__
from matchkit.assertions import render_failure
from matchkit.config import (
    get_config_hash,
    get_config_summary,
    load_config,
    validate_config,
)
from matchkit.logic.matcher import MatchPolicy
from matchkit.matchers import UnorderedElementsMatcher, eq, sequence_eq


def _read_elements(path: Path, as_lines: bool) -> tuple[list | None, str | None]:
    """Read a JSON array (or the lines of a text file).

    Args:
        path: File to read
        as_lines: Treat the file as text, one element per line

    Returns:
        Tuple of (elements, error message)
    """
    if not path.exists():
        return None, f"File not found: {path}"

    content = path.read_text(encoding="utf-8")
    if as_lines:
        return content.splitlines(), None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        return None, f"Invalid JSON in {path}: {e}"

    if not isinstance(data, list):
        return None, f"Expected a JSON array in {path}, got {type(data).__name__}"
    return data, None


def _load_config_or_exit(config_path: str | None):
    path = Path(config_path) if config_path else None
    try:
        return load_config(path)
    except (yaml.YAMLError, ValidationError) as e:
        click.echo(click.style(f"✗ Config Invalid: {e}", fg="red"))
        sys.exit(1)


def _read_pair_or_exit(actual_path: str, expected_path: str, as_lines: bool) -> tuple[list, list]:
    actual, actual_error = _read_elements(Path(actual_path), as_lines)
    expected, expected_error = _read_elements(Path(expected_path), as_lines)

    errors = [e for e in (actual_error, expected_error) if e]
    if errors:
        click.echo(click.style("✗ Input Invalid", fg="red"))
        for error in errors:
            click.echo(f"  - {error}")
        sys.exit(1)
    return actual, expected


@click.group()
@click.version_option(version=__version__, prog_name="matchkit")
def cli():
    """matchkit: composable matchers with precise failure explanations."""
    pass


@cli.group()
def config():
    """Config management commands."""
    pass


@config.command("validate")
@click.argument("config_path", type=click.Path(exists=False))
def config_validate(config_path: str):
    """Validate config file.

    CONFIG_PATH: Path to YAML config file
    """
    path = Path(config_path)

    is_valid, errors = validate_config(path)

    if is_valid:
        click.echo(click.style("✓ Config OK", fg="green"))
        loaded_config = load_config(path)
        click.echo(f"  config_hash: {get_config_hash(loaded_config)}")
        sys.exit(0)
    else:
        click.echo(click.style("✗ Config Invalid", fg="red"))
        for error in errors:
            click.echo(f"  - {error}")
        sys.exit(1)


@config.command("show")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to config file",
)
@click.option(
    "--json",
    "output_json",
    is_flag=True,
    default=False,
    help="Output as JSON",
)
def config_show(config_path: str | None, output_json: bool):
    """Show effective config and its hash."""
    summary = get_config_summary(_load_config_or_exit(config_path))

    if output_json:
        click.echo(json.dumps(summary, indent=2, ensure_ascii=False))
    else:
        click.echo(click.style("matchkit Config", fg="cyan", bold=True))
        click.echo()
        click.echo(f"  config_hash:       {summary['config_hash']}")
        click.echo()
        click.echo("  Diff Settings:")
        click.echo(f"    context_lines:     {summary['context_lines']}")
        click.echo(f"    max_edit_distance: {summary['max_edit_distance']}")


@cli.command("diff")
@click.argument("actual_path", type=click.Path(exists=False))
@click.argument("expected_path", type=click.Path(exists=False))
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=False),
    default=None,
    help="Path to config file",
)
@click.option(
    "--lines",
    "as_lines",
    is_flag=True,
    default=False,
    help="Compare text files line by line instead of JSON arrays",
)
def diff(actual_path: str, expected_path: str, config_path: str | None, as_lines: bool):
    """Show the minimal diff between two sequences.

    ACTUAL_PATH / EXPECTED_PATH: JSON arrays (or text files with --lines)

    Exits 0 when the sequences are equal, 1 otherwise.
    """
    loaded_config = _load_config_or_exit(config_path)
    actual, expected = _read_pair_or_exit(actual_path, expected_path, as_lines)

    matcher = sequence_eq(expected, loaded_config.diff)
    if matcher.matches(actual).is_match():
        click.echo(click.style("✓ Sequences are equal", fg="green"))
        sys.exit(0)

    click.echo(render_failure(actual_path, actual, matcher))
    sys.exit(1)


@cli.command("unordered")
@click.argument("actual_path", type=click.Path(exists=False))
@click.argument("expected_path", type=click.Path(exists=False))
@click.option(
    "--policy",
    type=click.Choice([policy.value for policy in MatchPolicy]),
    default=MatchPolicy.EXACT.value,
    show_default=True,
    help="How the two sides must be covered",
)
def unordered(actual_path: str, expected_path: str, policy: str):
    """Compare two JSON arrays regardless of order.

    Every expected element becomes an equality matcher; the arrays are
    then matched through a maximum bipartite matching.

    Exits 0 on match, 1 otherwise.
    """
    actual, expected = _read_pair_or_exit(actual_path, expected_path, as_lines=False)

    matcher = UnorderedElementsMatcher([eq(item) for item in expected], MatchPolicy(policy))
    if matcher.matches(actual).is_match():
        click.echo(click.style(f"✓ Elements match ({policy})", fg="green"))
        sys.exit(0)

    click.echo(render_failure(actual_path, actual, matcher))
    sys.exit(1)


def main():
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    main()
