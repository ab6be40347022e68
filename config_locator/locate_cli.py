"""Command line tool printing where configuration resources are found."""

import argparse
import logging
import sys

from config_locator.load_config import load_config
from config_locator.resource_loader import (
    SysPathResourceLoader,
    get_system_loader,
    set_system_loader,
)
from config_locator.resource_locator import ResourceLocator

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def run_locate(args: argparse.Namespace) -> int:
    """Locate every requested name and print its URL.

    Returns 1 if any name could not be found, 0 otherwise.
    """
    config = load_config(args.config)
    level = str(args.log_level or config["logging"]["level"]).upper()
    if level not in LOG_LEVELS:
        choices = ", ".join(LOG_LEVELS)
        msg = f"Unknown logging level: {level} (expected one of {choices})"
        raise SystemExit(msg)
    logging.basicConfig(
        level=level, format="%(levelname)s %(name)s: %(message)s"
    )

    previous_loader = get_system_loader()
    roots = config["classpath"]["roots"]
    if roots:
        set_system_loader(SysPathResourceLoader(roots))

    locator = ResourceLocator(home_dir=config["locator"]["home_dir"])
    missing = 0
    try:
        for name in args.names:
            result = locator.resolve(args.base, name)
            if result is None:
                print(f"{name}: not found", file=sys.stderr)
                missing += 1
            elif args.verbose:
                print(f"{name} -> {result.url} ({result.winning_step})")
            else:
                print(result.url)
    finally:
        set_system_loader(previous_loader)

    return 1 if missing else 0


def main(argv: list[str] | None = None) -> int:
    """Parse arguments and run the lookup."""
    ap = argparse.ArgumentParser(
        description="Locate configuration resources by name.",
    )
    ap.add_argument(
        "names",
        nargs="+",
        help="Resource names, paths or URLs to locate",
    )
    ap.add_argument(
        "--base",
        default=None,
        help="Base path or URL the names are relative to",
    )
    ap.add_argument(
        "--config",
        help="Path to a YAML settings file",
    )
    ap.add_argument(
        "--log-level",
        default=None,
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: from settings, WARNING)",
    )
    ap.add_argument(
        "--verbose",
        action="store_true",
        help="Show the search step that found each resource",
    )
    args = ap.parse_args(argv)
    return run_locate(args)


if __name__ == "__main__":
    raise SystemExit(main())
