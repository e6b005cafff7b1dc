"""Command-line entry point for teems.

Lists the themes in a catalog (`list`), applies one to every supported
terminal's config files (`activate`) and shows which config files were
found (`apps`).
"""

from __future__ import annotations

import argparse
from pathlib import Path
import sys
import textwrap
from typing import Callable

from .activation import STATUS_FAILED, ActivationReport, activate
from .apps import APPLICATIONS, select_applications
from .config import AppConfig, ConfigError, load_config
from .logging_setup import configure_logging, get_logger
from .paths import resolve_config_paths

CONFIG_ATTR = "_config"


def build_parser() -> argparse.ArgumentParser:
    """Create the top-level argument parser."""

    parser = argparse.ArgumentParser(
        prog="teems",
        description=textwrap.dedent(
            """
            Switch the color theme of your terminal emulators. Themes are
            read from a YAML or JSON catalog; `activate` rewrites only the
            color lines of each config file it finds.
            """
        ).strip(),
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        default=None,
        help=(
            "Theme catalog file. Defaults to $TEEMS_CONFIG or "
            "teems/themes.yaml in the user config directory "
            "($XDG_CONFIG_HOME, else ~/.config; ~/Library/Application "
            "Support on macOS, %%APPDATA%% on Windows)."
        ),
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every config file that is inspected.",
    )

    subparsers = parser.add_subparsers(dest="command")

    list_parser = subparsers.add_parser("list", help="List all themes")
    list_parser.add_argument(
        "--colors",
        action="store_true",
        help="Also print every color role of each theme.",
    )
    list_parser.set_defaults(handler=_run_list, needs_config=True)

    activate_parser = subparsers.add_parser(
        "activate",
        help="Activate a theme",
    )
    activate_parser.add_argument(
        "-t",
        "--theme",
        required=True,
        help="Name of the theme to activate.",
    )
    activate_parser.add_argument(
        "-a",
        "--app",
        action="append",
        default=None,
        help=(
            "Only re-theme this application (repeatable). Overrides the "
            "catalog's 'apps' list."
        ),
    )
    activate_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Report which files would change without writing them.",
    )
    activate_parser.set_defaults(handler=_run_activate, needs_config=True)

    apps_parser = subparsers.add_parser(
        "apps",
        help="List supported applications and their config files",
    )
    apps_parser.set_defaults(handler=_run_apps, needs_config=False)

    parser.set_defaults(command="list", handler=_run_list, needs_config=True)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point used by console scripts and ``python -m teems.cli``."""

    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.needs_config:
        try:
            config = load_config(args.config)
        except ConfigError as exc:
            parser.error(str(exc))
        setattr(args, CONFIG_ATTR, config)

    handler: Callable[[argparse.Namespace], int] = getattr(
        args, "handler", _run_list
    )

    return handler(args)


def _run_list(args: argparse.Namespace) -> int:
    config: AppConfig = getattr(args, CONFIG_ATTR)
    if not config.themes:
        print(f"No themes defined in {config.path}", file=sys.stderr)
        return 0

    show_colors = getattr(args, "colors", False)
    for theme in config.themes:
        if show_colors:
            print(theme.describe())
            print()
        else:
            print(theme.name)
    return 0


def _run_activate(args: argparse.Namespace) -> int:
    config: AppConfig = getattr(args, CONFIG_ATTR)
    theme = config.find_theme(args.theme)
    if theme is None:
        print(
            f"Theme {args.theme!r} not found in {config.path}",
            file=sys.stderr,
        )
        return 2

    try:
        applications = select_applications(args.app or config.apps)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 2

    get_logger().debug(
        "Activating %s for %s",
        theme.name,
        ", ".join(app.name for app in applications),
    )
    report = activate(theme, applications, dry_run=args.dry_run)
    _print_activation_summary(report)
    if not report.results:
        return 2
    return 0 if report.ok else 1


def _run_apps(args: argparse.Namespace) -> int:
    _ = args
    for app in APPLICATIONS:
        paths = resolve_config_paths(app.config_paths)
        print(app.name)
        if not paths:
            print("  (no config files found)")
        for path in paths:
            print(f"  {path}")
    return 0


def _print_activation_summary(report: ActivationReport) -> None:
    if not report.results:
        print(
            "No config files found for the selected applications.",
            file=sys.stderr,
        )
        return

    for result in report.results:
        status = result.status
        if status == STATUS_FAILED:
            status = f"{status}: {result.error}"
        print(f"{result.app}: {result.path} -> {status}")

    verb = "would be updated" if report.dry_run else "updated"
    print(
        f"Theme '{report.theme}': {len(report.changed)} file(s) {verb}, "
        f"{len(report.failures)} failed."
    )


if __name__ == "__main__":
    raise SystemExit(main())
