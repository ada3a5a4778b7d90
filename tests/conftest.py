from __future__ import annotations

from collections.abc import Sequence

import pytest

from dohelper.exceptions import UpstreamError
from dohelper.types import Droplet, DropletPage, NetworkInterface


def make_droplet(
    name: str,
    id: int = 1,
    created: str = "2020-01-01",
    networks: Sequence[tuple[str, str]] = (),
) -> Droplet:
    return Droplet(
        id=id,
        name=name,
        created=created,
        networks=tuple(NetworkInterface(type=t, address=a) for t, a in networks),
    )


class FakeSource:
    """In-memory DropletSource serving a fixed list of pages."""

    def __init__(self, pages: Sequence[Sequence[Droplet]], fail_on: int | None = None) -> None:
        self.pages = [tuple(p) for p in pages]
        self.fail_on = fail_on
        self.requested: list[int] = []

    def fetch_page(self, page: int) -> DropletPage:
        self.requested.append(page)
        if page == self.fail_on:
            raise UpstreamError(f"boom on page {page}")
        return DropletPage(droplets=self.pages[page - 1], has_next=page < len(self.pages))


@pytest.fixture
def droplets() -> list[Droplet]:
    return [
        make_droplet(
            "Data01",
            id=101,
            created="2021-03-04T10:00:00Z",
            networks=[("public", "9.9.9.9"), ("private", "10.0.0.2")],
        ),
        make_droplet(
            "web",
            id=102,
            created="2021-05-06T11:00:00Z",
            networks=[("private", "10.0.0.3"), ("public", "1.2.3.4"), ("public", "5.6.7.8")],
        ),
    ]
