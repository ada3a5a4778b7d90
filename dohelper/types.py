"""Droplet records and the page source protocol."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "Droplet",
    "DropletPage",
    "DropletSource",
    "NetworkInterface",
]


@dataclass(frozen=True, slots=True)
class NetworkInterface:
    """One IPv4 network attachment of a droplet."""

    type: str
    address: str

    @property
    def is_public(self) -> bool:
        return self.type == "public"


@dataclass(frozen=True, slots=True)
class Droplet:
    """Immutable snapshot of a DigitalOcean droplet.

    Attributes:
        id: Droplet ID.
        name: Droplet name (not unique on DigitalOcean).
        created: Creation timestamp as returned by the API.
        networks: IPv4 interfaces in API order.
        raw: The untouched API record.
    """

    id: int
    name: str
    created: str = ""
    networks: tuple[NetworkInterface, ...] = ()
    raw: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({}), repr=False, compare=False
    )

    @property
    def public_addresses(self) -> tuple[str, ...]:
        return tuple(n.address for n in self.networks if n.is_public)

    @classmethod
    def from_api(cls, data: Mapping[str, Any]) -> Droplet:
        """Build a Droplet from a `droplets.list` entry.

        Raises:
            KeyError, TypeError, ValueError: If the record is malformed.
        """
        networks = data.get("networks") or {}
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            created=str(data.get("created_at") or ""),
            networks=tuple(
                NetworkInterface(type=n["type"], address=n["ip_address"])
                for n in networks.get("v4") or []
            ),
            raw=MappingProxyType(dict(data)),
        )


@dataclass(frozen=True, slots=True)
class DropletPage:
    """Droplets of one list response and whether another page follows."""

    droplets: tuple[Droplet, ...]
    has_next: bool = False


@runtime_checkable
class DropletSource(Protocol):
    """Anything that can fetch one page of the droplet listing.

    Pages are numbered from 1.
    """

    def fetch_page(self, page: int) -> DropletPage: ...
