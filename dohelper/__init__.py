"""do-helper - list DigitalOcean droplets from the command line.

Example:

    from dohelper import PydoDropletSource, list_all_droplets, load_credential, print_basic_info

    token = load_credential("DO_TOKEN")
    droplets = list_all_droplets(PydoDropletSource.from_token(token))
    print_basic_info(droplets)
"""

from dohelper.client import PydoDropletSource, get_client
from dohelper.credentials import load_credential
from dohelper.exceptions import (
    ConfigurationError,
    DoHelperError,
    EmptyResultError,
    UpstreamError,
)
from dohelper.listing import list_all_droplets
from dohelper.logging import LogConfig, setup_logging, teardown_logging
from dohelper.reports import (
    print_basic_info,
    print_droplet_json,
    print_network_info,
    print_public_ip,
)
from dohelper.types import Droplet, DropletPage, DropletSource, NetworkInterface

__all__ = [
    "ConfigurationError",
    "DoHelperError",
    "Droplet",
    "DropletPage",
    "DropletSource",
    "EmptyResultError",
    "LogConfig",
    "NetworkInterface",
    "PydoDropletSource",
    "UpstreamError",
    "get_client",
    "list_all_droplets",
    "load_credential",
    "print_basic_info",
    "print_droplet_json",
    "print_network_info",
    "print_public_ip",
    "setup_logging",
    "teardown_logging",
]
