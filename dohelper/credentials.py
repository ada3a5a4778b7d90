"""Bearer token lookup from the process environment."""

from __future__ import annotations

import os
from collections.abc import Mapping

from dohelper.exceptions import ConfigurationError

DEFAULT_TOKEN_ENV = "DO_TOKEN"


def load_credential(name: str, environ: Mapping[str, str] | None = None) -> str:
    """Return the token stored in environment variable `name`.

    Args:
        name: Environment variable to read.
        environ: Mapping to read from. Defaults to os.environ.

    Raises:
        ConfigurationError: If `name` is empty or the variable is unset/empty.
    """
    if not name:
        raise ConfigurationError("No variable name passed for the API token")

    env = os.environ if environ is None else environ
    token = env.get(name, "")
    if not token:
        raise ConfigurationError(f"No token value for {name}. Set the {name} environment variable.")
    return token
