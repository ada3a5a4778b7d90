"""Sequential walk over the paginated droplet listing."""

from __future__ import annotations

from loguru import logger

from dohelper.types import Droplet, DropletSource


def list_all_droplets(source: DropletSource) -> list[Droplet]:
    """Fetch every page from `source` and return the droplets in order.

    Pages are requested one at a time starting from 1, following the
    "next page" indicator of each response. An UpstreamError on any page
    propagates and nothing fetched so far is returned.
    """
    droplets: list[Droplet] = []

    page = 1
    while True:
        result = source.fetch_page(page)
        droplets.extend(result.droplets)
        logger.debug(f"Fetched page {page}: {len(result.droplets)} droplets")

        if not result.has_next:
            break
        page += 1

    logger.info(f"Listed {len(droplets)} droplets across {page} page(s)")
    return droplets
