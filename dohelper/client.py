"""DigitalOcean API client wrapper using pydo SDK."""

from __future__ import annotations

from typing import Any

from pydo import Client

from dohelper.exceptions import UpstreamError
from dohelper.types import Droplet, DropletPage


def get_client(token: str) -> Client:
    """Create authenticated pydo client.

    The client sends the token as a bearer Authorization header on every
    request. No request is made here.

    Args:
        token: DigitalOcean API token.

    Returns:
        Authenticated pydo Client instance.
    """
    return Client(token=token)


def parse_page(response: dict[str, Any]) -> DropletPage:
    """Parse a `droplets.list` response into a DropletPage."""
    droplets = tuple(Droplet.from_api(d) for d in response.get("droplets") or [])
    links = response.get("links") or {}
    pages = links.get("pages") or {}
    return DropletPage(droplets=droplets, has_next=bool(pages.get("next")))


class PydoDropletSource:
    """DropletSource backed by the pydo droplets endpoint."""

    def __init__(self, client: Client) -> None:
        self._client = client

    @classmethod
    def from_token(cls, token: str) -> PydoDropletSource:
        return cls(get_client(token))

    def fetch_page(self, page: int) -> DropletPage:
        try:
            response = self._client.droplets.list(page=page)
        except Exception as e:
            raise UpstreamError(f"Failed to list droplets (page {page}): {e}") from e

        try:
            return parse_page(response)
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise UpstreamError(f"Malformed droplet listing (page {page}): {e!r}") from e


__all__ = ["PydoDropletSource", "get_client", "parse_page"]
