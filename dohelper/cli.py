"""Command line entry point.

Usage:
    do-helper -listDroplets
    do-helper -listDropletsNetwork
    do-helper -publicDropletIP Data01
    do-helper -dropletJSON Data01

The API token is read from DO_TOKEN (see `token_env` in dohelper.toml).
"""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from functools import partial
from pathlib import Path

from loguru import logger

from dohelper.client import PydoDropletSource
from dohelper.config import Settings, load_settings
from dohelper.credentials import load_credential
from dohelper.exceptions import DoHelperError, EmptyResultError
from dohelper.listing import list_all_droplets
from dohelper.logging import LOG_LEVELS, LogConfig, LogLevel, setup_logging, teardown_logging
from dohelper.reports import (
    print_basic_info,
    print_droplet_json,
    print_network_info,
    print_public_ip,
)
from dohelper.types import Droplet, DropletSource

type Report = Callable[[Sequence[Droplet]], object]
type SourceFactory = Callable[[str], DropletSource]

EXIT_OK = 0
EXIT_FAILURE = 1


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Parsed command line options."""

    list_basic: bool = False
    list_network: bool = False
    public_ip: str | None = None
    droplet_json: str | None = None
    config: Path | None = None
    log_level: LogLevel | None = None

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> CommandOptions:
        return cls(
            list_basic=args.list_basic,
            list_network=args.list_network,
            public_ip=args.public_ip,
            droplet_json=args.droplet_json,
            config=args.config,
            log_level=args.log_level,
        )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="do-helper",
        description="List DigitalOcean droplets. The API token is read from DO_TOKEN.",
        allow_abbrev=False,
    )
    parser.add_argument(
        "-listDroplets", "--listDroplets",
        dest="list_basic", action="store_true",
        help="List basic info on all Droplets",
    )
    parser.add_argument(
        "-listDropletsNetwork", "--listDropletsNetwork",
        dest="list_network", action="store_true",
        help="List network info for all Droplets",
    )
    parser.add_argument(
        "-publicDropletIP", "--publicDropletIP",
        dest="public_ip", metavar="NAME", default=None,
        help="Print the public IP address(es) of the Droplet named NAME",
    )
    parser.add_argument(
        "-dropletJSON", "--dropletJSON",
        dest="droplet_json", metavar="NAME", default=None,
        help="Print the full API record of the Droplet named NAME as JSON",
    )
    parser.add_argument("--config", type=Path, default=None, help="Settings file (TOML)")
    parser.add_argument(
        "--log-level", type=str.upper, choices=LOG_LEVELS, default=None, help="Console log level"
    )
    return parser


def select_report(options: CommandOptions) -> Report | None:
    """Pick the report for `options`; the first selected flag wins."""
    if options.list_basic:
        return print_basic_info
    if options.list_network:
        return print_network_info
    if options.public_ip is not None:
        return partial(print_public_ip, options.public_ip)
    if options.droplet_json is not None:
        return partial(print_droplet_json, options.droplet_json)
    return None


def fetch_droplets(
    settings: Settings,
    environ: Mapping[str, str] | None,
    source_factory: SourceFactory,
) -> list[Droplet]:
    token = load_credential(settings.token_env, environ)
    droplets = list_all_droplets(source_factory(token))
    if not droplets:
        raise EmptyResultError()
    return droplets


def main(
    argv: Sequence[str] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
    source_factory: SourceFactory | None = None,
) -> int:
    """Run the command line and return the process exit status."""
    parser = build_parser()
    options = CommandOptions.from_args(parser.parse_args(argv))

    report = select_report(options)
    if report is None:
        parser.print_help(sys.stderr)
        return EXIT_OK

    handler_ids = setup_logging(LogConfig(level=options.log_level or "WARNING"))
    try:
        try:
            settings = load_settings(project_path=options.config)
        except DoHelperError as e:
            logger.error(str(e))
            return EXIT_FAILURE

        # Settings may change the level and add a file sink.
        teardown_logging(handler_ids)
        handler_ids = setup_logging(
            LogConfig(level=options.log_level or settings.log_level, file=settings.log_file)
        )

        try:
            droplets = fetch_droplets(settings, environ, source_factory or PydoDropletSource.from_token)
        except DoHelperError as e:
            logger.error(str(e))
            return EXIT_FAILURE

        report(droplets)
        return EXIT_OK
    finally:
        teardown_logging(handler_ids)


def run() -> None:
    sys.exit(main())
