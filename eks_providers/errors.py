# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright (C) 2018-2019 Canonical Ltd
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

import shlex
from typing import Any, Dict, Optional
from typing import Sequence  # noqa: F401

from common.errors import BaseError


class ClusterBaseError(BaseError):
    pass


class CommandError(ClusterBaseError):

    _FMT_ERROR_MESSAGE_AND_EXIT_CODE = (
        "An error occurred when trying to {action} with "
        "{tool!r}: returned exit code {exit_code!r}: {error_message}"
    )

    _FMT_ERROR_MESSAGE = "An error occurred when trying to {action} with {tool!r}: {error_message}"

    _FMT_EXIT_CODE = (
        "An error occurred when trying to {action} with "
        "{tool!r}: returned exit code {exit_code!r}."
    )

    def __init__(
        self,
        *,
        tool: str,
        command: Sequence[str],
        action: Optional[str] = None,
        error_message: Optional[str] = None,
        exit_code: Optional[int] = None
    ) -> None:
        if exit_code is not None and error_message:
            fmt = self._FMT_ERROR_MESSAGE_AND_EXIT_CODE
        elif error_message:
            fmt = self._FMT_ERROR_MESSAGE
        elif exit_code is not None:
            fmt = self._FMT_EXIT_CODE
        else:
            raise RuntimeError("error_message nor exit_code are set")

        self.fmt = fmt

        command_string = " ".join(shlex.quote(i) for i in command)
        if action is None:
            action = "run {!r}".format(command_string)

        super().__init__(
            tool=tool,
            command=list(command),
            command_string=command_string,
            action=action,
            error_message=error_message,
            exit_code=exit_code,
        )


class AccountIdentityError(ClusterBaseError):

    fmt = "Could not determine AWS Account ID. Check AWS credentials/profile.{details}"

    def __init__(self, *, error_message: Optional[str] = None) -> None:
        details = "\n{}".format(error_message.strip()) if error_message else ""
        super().__init__(error_message=error_message, details=details)


class StepFailedError(ClusterBaseError):

    fmt = "Error: Step {step} failed ({description}): {reason}"

    def __init__(self, *, step: int, description: str, reason: BaseError) -> None:
        super().__init__(step=step, description=description, reason=reason)

    def get_exit_code(self):
        return 1


class ClusterInfoDataKeyError(ClusterBaseError):

    fmt = (
        "The data returned by {tool!r} was not expected. "
        "It is missing a required key {missing_key!r} in {data!r}."
    )

    def __init__(self, *, tool: str, missing_key: str, data: Dict[str, Any]) -> None:
        super().__init__(tool=tool, missing_key=missing_key, data=data)


class ClusterBadDataError(ClusterBaseError):

    fmt = "The data returned by {tool!r} was not expected or in the wrong format: {data!r}."

    def __init__(self, *, tool: str, data: str) -> None:
        super().__init__(tool=tool, data=data)
