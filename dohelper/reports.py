"""Text reports over an already fetched droplet collection.

Every report writes to `out` (stdout when None) and never touches the API.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import TextIO

from loguru import logger

from dohelper.types import Droplet

NO_DROPLETS = "No droplets"


def print_basic_info(droplets: Sequence[Droplet], out: TextIO | None = None) -> None:
    """Print `<name> (<id>) Created: <created>.` for each droplet."""
    if not droplets:
        print(NO_DROPLETS, file=out)
        return

    for droplet in droplets:
        print(f"{droplet.name} ({droplet.id}) Created: {droplet.created}.", file=out)


def print_network_info(droplets: Sequence[Droplet], out: TextIO | None = None) -> None:
    """Print a header per droplet followed by one tab-indented line per interface."""
    if not droplets:
        print(NO_DROPLETS, file=out)
        return

    for droplet in droplets:
        print(f"{droplet.name} ({droplet.id}):", file=out)
        for network in droplet.networks:
            print(f"\t{network.type}: {network.address}", file=out)


def find_droplet(name: str, droplets: Sequence[Droplet]) -> Droplet | None:
    """Return the first droplet named exactly `name`."""
    return next((d for d in droplets if d.name == name), None)


def print_public_ip(name: str, droplets: Sequence[Droplet], out: TextIO | None = None) -> bool:
    """Print the public address(es) of droplet `name`.

    Addresses are concatenated without separator or trailing newline.
    A missing droplet prints nothing and only logs a warning.

    Returns:
        True if a droplet named `name` was found.
    """
    droplet = find_droplet(name, droplets)
    if droplet is None:
        logger.warning(f"No droplet named {name!r}")
        return False

    addresses = droplet.public_addresses
    if not addresses:
        logger.warning(f"Droplet {name!r} ({droplet.id}) has no public interface")
    for address in addresses:
        print(address, end="", file=out)
    return True


def print_droplet_json(name: str, droplets: Sequence[Droplet], out: TextIO | None = None) -> bool:
    """Print the full API record of droplet `name` as indented JSON."""
    droplet = find_droplet(name, droplets)
    if droplet is None:
        logger.warning(f"No droplet named {name!r}")
        return False

    print(json.dumps(dict(droplet.raw), indent=1, default=str), file=out)
    return True


__all__ = [
    "NO_DROPLETS",
    "find_droplet",
    "print_basic_info",
    "print_droplet_json",
    "print_network_info",
    "print_public_ip",
]
