"""Layered configuration for the game and the API client.

Later sources win: the bundled ``defaults.yml``, then a user YAML file, then
the API base URL taken from the environment variable named in
``api.base_url_env``.
"""

from .schema import ConfigModel, load_config

__all__ = ["ConfigModel", "load_config"]
