"""Command-line entry point for ``liveapp init``.

Runs the whole scaffolding flow: ask the questions, pick the template, copy
it into ``./<package-name>`` and patch its ``package.json`` and
``manifest.json``.

Usage::

    liveapp init
    liveapp init --no-create
    python -m liveapp_init init
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional

from liveapp_init import __version__
from liveapp_init.config import InitConfig, ManifestOptions, PackageOptions
from liveapp_init.errors import InitError
from liveapp_init.scaffolder import PromptCollector, materialize, merge_configs, template_id
from liveapp_init.utils import print_error, print_options_table, print_step, print_success

# ---------------------------------------------------------------------------
# Command
# ---------------------------------------------------------------------------


async def run_init(
    config: InitConfig,
    collector: Optional[PromptCollector] = None,
) -> tuple[PackageOptions, ManifestOptions]:
    """Run the ``init`` command with an already-parsed configuration.

    Returns:
        The collected ``(PackageOptions, ManifestOptions)`` pair.
    """
    collector = collector or PromptCollector()
    package, manifest = collector.collect(config.cwd)

    tid = template_id(package.typescript, package.bundler)
    dest = config.destination_for(package.name)
    await materialize(config.template_path(tid), dest, dry_run=config.dry_run)

    if config.dry_run:
        print_options_table(package.model_dump(), "Would update package.json with")
        print_options_table(manifest.as_updates(), "Would update manifest.json with")
    else:
        await merge_configs(dest, package, manifest)

    print_success(f"Live App Project initialized: {manifest.name} ({package.name})")
    return package, manifest


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    """Build the ``liveapp`` argument parser with its ``init`` subcommand."""
    parser = argparse.ArgumentParser(
        prog="liveapp",
        description="Quip Live App command-line tools",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True, metavar="COMMAND")

    init = subparsers.add_parser(
        "init",
        help="Initialize a new Live App Project",
        description="Initialize a new Live App Project",
    )
    init.add_argument(
        "--dry-run", "-d",
        action="store_true",
        help=argparse.SUPPRESS,
    )
    init.add_argument(
        "--no-create", "-n",
        action="store_true",
        help="only create a local app (don't create an app in the dev console or assign an ID)",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """CLI entry point for ``liveapp``."""
    args = build_parser().parse_args(argv)

    config = InitConfig.from_env(dry_run=args.dry_run, no_create=args.no_create)

    try:
        asyncio.run(run_init(config))
    except KeyboardInterrupt:
        print_step("")
        return 130
    except (InitError, OSError) as exc:
        print_error(str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
