# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright (C) 2016-2019 Canonical Ltd
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License version 3 as
# published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import logging
import os
import shutil
from typing import Optional, Sequence

from . import definitions
from .errors import DependencyMissingError

logger = logging.getLogger(__name__)


def get_config_path() -> str:
    """Return the per user configuration file path."""
    return os.path.join(
        os.path.expanduser("~"), definitions.CONFIG_DIR, definitions.CONFIG_FILE
    )


def find_config_file(path: Optional[str] = None) -> Optional[str]:
    """
    Locate the configuration file to load.

    An explicit path wins, then the environment variable, then the file
    in the user's home if it is there.

    :return: String or None when no file should be read
    """
    if path:
        return path
    env_path = os.environ.get(definitions.CONFIG_ENV_VAR)
    if env_path:
        return env_path
    default_path = get_config_path()
    if os.path.isfile(default_path):
        return default_path
    return None


def check_dependencies(commands: Sequence[str] = definitions.REQUIRED_COMMANDS) -> None:
    """
    Make sure every command we drive is reachable through PATH.

    :raises DependencyMissingError: on the first command not found
    """
    for command in commands:
        full_path = shutil.which(command)
        if full_path is None:
            raise DependencyMissingError(dependency=command)
        logger.debug("Found {} at {}".format(command, full_path))
