"""Config file loader — reads the YAML repository list and token.

Expected layout::

    pat: ghp_xxxxxxxx
    repos:
      - owner: octocat
        name: hello-world
      - owner: octocat
        name: spoon-knife

Any failure here happens before the dashboard starts and is fatal.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from ghwatch.models.config import WatchConfig

logger = logging.getLogger(__name__)


class ConfigLoadError(RuntimeError):
    """Raised when the config file cannot be read, parsed or validated.

    The dashboard cannot start without a valid config; the process
    should exit.
    """


def load_watch_config(path: Path) -> WatchConfig:
    """Read and validate the YAML config at *path*.

    Parameters
    ----------
    path:
        Location of the config file (usually ``config.yml``).

    Returns
    -------
    WatchConfig
        The token and the ordered repository list.

    Raises
    ------
    ConfigLoadError
        If the file is missing or unreadable, is not valid YAML, or does
        not match the expected structure.
    """
    try:
        raw_text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"Error reading {path}: {exc}") from exc

    try:
        data = yaml.safe_load(raw_text)
    except yaml.YAMLError as exc:
        raise ConfigLoadError(f"Error parsing {path}: {exc}") from exc

    # An empty file parses to None
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigLoadError(
            f"Error parsing {path}: expected a mapping at the top level, "
            f"got {type(data).__name__}"
        )

    try:
        config = WatchConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigLoadError(f"Error parsing {path}: {exc}") from exc

    if not config.pat:
        logger.warning("No 'pat' in %s; requests will be unauthenticated", path)
    logger.debug("Loaded %d repositories from %s", len(config.repos), path)
    return config
