"""CLI adapter for ``lib_config_paths`` built on ``lib_cli_exit_tools``.

Purpose
-------
Let operators inspect where an application looks for its configuration
without writing Python: the resolved application config file, the roaming and
local ``user.config`` locations, and the sanitised directory segments.

Contents
--------
* :data:`CLICK_CONTEXT_SETTINGS` – shared Click settings ensuring ``-h`` works.
* :func:`cli` – root command that wires global traceback handling into
  ``lib_cli_exit_tools``.
* :func:`cli_info` – prints distribution metadata for quick diagnostics.
* :func:`cli_resolve` – resolves configuration paths and prints them as JSON.
* :func:`cli_sanitize` – shows how a string becomes a directory segment.
* :func:`main` – entry point used by ``console_scripts`` registration.

System Role
-----------
The CLI lives in the outermost layer. It calls the composition root
(:mod:`lib_config_paths.core`) and never reaches into adapters directly.
"""

from __future__ import annotations

import sys
from importlib import metadata
from pathlib import Path
from typing import Final, Optional, Sequence

import lib_cli_exit_tools
import rich_click as click

from .core import default_resolver, get_paths
from .domain.segments import sanitize

CLICK_CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}
_TRACEBACK_SUMMARY_LIMIT: Final[int] = 500
_TRACEBACK_VERBOSE_LIMIT: Final[int] = 10_000


def _resolve_version() -> str:
    """Return the installed package version, ``"0.0.0"`` for source checkouts."""

    try:
        return metadata.version("lib_config_paths")
    except metadata.PackageNotFoundError:
        return "0.0.0"


@click.group(
    help="Resolve application and per-user configuration file locations",
    context_settings=CLICK_CONTEXT_SETTINGS,
    invoke_without_command=False,
)
@click.version_option(
    version=_resolve_version(),
    prog_name="lib_config_paths",
    message="lib_config_paths version %(version)s",
)
@click.option(
    "--traceback/--no-traceback",
    is_flag=True,
    default=False,
    help="Show full Python traceback on errors",
)
@click.pass_context
def cli(ctx: click.Context, traceback: bool) -> None:
    """Root command configuring traceback handling for all subcommands.

    Side Effects
        Mutates ``lib_cli_exit_tools.config.traceback`` and
        ``lib_cli_exit_tools.config.traceback_force_color``.
    """

    ctx.ensure_object(dict)
    ctx.obj["traceback"] = traceback
    lib_cli_exit_tools.config.traceback = traceback
    lib_cli_exit_tools.config.traceback_force_color = traceback


@cli.command("info", context_settings=CLICK_CONTEXT_SETTINGS)
def cli_info() -> None:
    """Print basic distribution metadata so users can confirm installation."""

    try:
        meta = metadata.metadata("lib_config_paths")
    except metadata.PackageNotFoundError:
        click.echo("lib_config_paths (metadata unavailable)")
        return
    click.echo(f"Info for {meta.get('Name', 'lib_config_paths')}:")
    click.echo(f"  Version         : {meta.get('Version', _resolve_version())}")
    click.echo(f"  Requires-Python : {meta.get('Requires-Python', '>=3.10')}")
    summary = meta.get("Summary")
    if summary:
        click.echo(f"  Summary         : {summary}")


@cli.command("resolve", context_settings=CLICK_CONTEXT_SETTINGS)
@click.option(
    "--exe-path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Resolve for this executable instead of the running application (no user paths)",
)
@click.option(
    "--user-config/--no-user-config",
    default=True,
    show_default=True,
    help="Resolve the roaming and local user.config locations",
)
@click.option(
    "--platform",
    default=None,
    help="Override path semantics (e.g. linux, darwin, windows)",
)
@click.option(
    "--indent",
    type=int,
    default=None,
    help="Pretty-print JSON output with the provided indent size",
)
def cli_resolve(exe_path: Optional[Path], user_config: bool, platform: Optional[str], indent: Optional[int]) -> None:
    """Resolve configuration paths and print them as JSON.

    Without ``--platform`` the process-wide cached resolution is used; with it
    a dedicated resolver applies the requested path semantics.
    """

    exe = str(exe_path) if exe_path is not None else None
    normalized_platform = _normalize_platform(platform)
    if normalized_platform is None:
        paths = get_paths(exe, user_config)
    else:
        paths = default_resolver(platform=normalized_platform).resolve(exe, user_config)
    click.echo(paths.to_json(indent=indent))


@cli.command("sanitize", context_settings=CLICK_CONTEXT_SETTINGS)
@click.argument("text")
@click.option(
    "--limit/--no-limit",
    default=True,
    show_default=True,
    help="Cut the result to the directory segment length limit",
)
def cli_sanitize(text: str, limit: bool) -> None:
    """Print TEXT as it would appear as a configuration directory segment.

    Examples
    --------
    >>> from click.testing import CliRunner
    >>> result = CliRunner().invoke(cli, ["sanitize", "My:Company*Name"])
    >>> result.output.strip()
    'My_Company_Name'
    """

    click.echo(sanitize(text, limit_length=limit))


def _normalize_platform(platform: Optional[str]) -> Optional[str]:
    """Return a resolver-friendly platform identifier or ``None``."""

    if platform is None:
        return None
    alias = platform.strip().lower()
    if not alias:
        return None
    mapping = {
        "linux": "linux",
        "posix": "linux",
        "darwin": "darwin",
        "mac": "darwin",
        "macos": "darwin",
        "win": "win32",
        "win32": "win32",
        "windows": "win32",
    }
    try:
        return mapping[alias]
    except KeyError as exc:
        raise click.BadParameter(
            "Platform must be one of: linux, posix, darwin, mac, macos, win, win32, windows.",
            param_hint="--platform",
        ) from exc


def main(argv: Optional[Sequence[str]] = None, *, restore_traceback: bool = True) -> int:
    """Execute the CLI with shared exit handling and return the exit code."""

    previous_traceback = getattr(lib_cli_exit_tools.config, "traceback", False)
    previous_force_color = getattr(lib_cli_exit_tools.config, "traceback_force_color", False)
    try:
        try:
            return lib_cli_exit_tools.run_cli(
                cli,
                argv=list(argv) if argv is not None else None,
                prog_name="lib_config_paths",
            )
        except BaseException as exc:  # noqa: BLE001 - funnel through shared printers
            lib_cli_exit_tools.print_exception_message(
                trace_back=lib_cli_exit_tools.config.traceback,
                length_limit=(
                    _TRACEBACK_VERBOSE_LIMIT if lib_cli_exit_tools.config.traceback else _TRACEBACK_SUMMARY_LIMIT
                ),
            )
            return lib_cli_exit_tools.get_system_exit_code(exc)
    finally:
        if restore_traceback:
            lib_cli_exit_tools.config.traceback = previous_traceback
            lib_cli_exit_tools.config.traceback_force_color = previous_force_color


if __name__ == "__main__":  # pragma: no cover - exercised via console entry point
    raise SystemExit(main(sys.argv[1:]))
