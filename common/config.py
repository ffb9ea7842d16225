import logging
from typing import Any, Dict, Optional, Type

import toml

from . import definitions
from .errors import ConfigError
from .file_utils import find_config_file

logger = logging.getLogger(__name__)


def _positive_int(data: Dict[str, Any], key: str, default: int, path: str) -> int:
    value = data.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ConfigError(path=path, message="{} must be a positive integer".format(key))
    return value


def _string(data: Dict[str, Any], key: str, default: str, path: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value:
        raise ConfigError(path=path, message="{} must be a non empty string".format(key))
    return value


class Config:
    """Tunables of the cluster workflows, optionally read from a toml file."""

    @classmethod
    def load(cls: Type["Config"], path: Optional[str] = None) -> "Config":
        """Load the configuration.

        :param str path: explicit file to read, it must exist.
        :returns: a Config, with the defaults when there is no file to read.
        :raises common.errors.ConfigError: if the file cannot be read or
                                           holds invalid values.
        """
        config_path = find_config_file(path)
        if config_path is None:
            logger.debug("No configuration file, using defaults")
            return cls()

        logger.debug("Loading configuration from {}".format(config_path))
        try:
            data = toml.load(config_path)
        except FileNotFoundError as not_found:
            raise ConfigError(path=config_path, message="file not found") from not_found
        except (OSError, toml.TomlDecodeError) as load_error:
            raise ConfigError(path=config_path, message=str(load_error)) from load_error
        return cls.from_dict(data, path=config_path)

    @classmethod
    def from_dict(cls: Type["Config"], data: Dict[str, Any], *, path: str = "") -> "Config":
        defaults = data.get("defaults", {})
        nodegroup = data.get("nodegroup", {})
        timeouts = data.get("timeouts", {})
        eksctl = data.get("eksctl", {})
        for section in (defaults, nodegroup, timeouts, eksctl):
            if not isinstance(section, dict):
                raise ConfigError(path=path, message="sections must be tables")

        verbosity = eksctl.get("verbosity", definitions.DEFAULT_EKSCTL_VERBOSITY)
        if isinstance(verbosity, bool) or not isinstance(verbosity, int):
            raise ConfigError(path=path, message="verbosity must be an integer")
        if not 0 <= verbosity <= 5:
            raise ConfigError(path=path, message="verbosity must be between 0 and 5")

        return cls(
            region=_string(defaults, "region", definitions.DEFAULT_REGION, path),
            instance_type=_string(
                nodegroup, "instance_type", definitions.DEFAULT_INSTANCE_TYPE, path
            ),
            nodes=_positive_int(nodegroup, "nodes", definitions.DEFAULT_NODE_COUNT, path),
            csi_ready_timeout=_positive_int(
                timeouts, "csi_ready", definitions.DEFAULT_CSI_READY_TIMEOUT, path
            ),
            settle_seconds=_positive_int(
                timeouts, "settle", definitions.DEFAULT_SETTLE_SECONDS, path
            ),
            eksctl_verbosity=verbosity,
        )

    def __init__(
        self,
        *,
        region: str = definitions.DEFAULT_REGION,
        instance_type: str = definitions.DEFAULT_INSTANCE_TYPE,
        nodes: int = definitions.DEFAULT_NODE_COUNT,
        csi_ready_timeout: int = definitions.DEFAULT_CSI_READY_TIMEOUT,
        settle_seconds: int = definitions.DEFAULT_SETTLE_SECONDS,
        eksctl_verbosity: int = definitions.DEFAULT_EKSCTL_VERBOSITY
    ) -> None:
        self.region = region
        self.instance_type = instance_type
        self.nodes = nodes
        self.csi_ready_timeout = csi_ready_timeout
        self.settle_seconds = settle_seconds
        self.eksctl_verbosity = eksctl_verbosity
