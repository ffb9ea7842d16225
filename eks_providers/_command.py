# -*- Mode:Python; indent-tabs-mode:nil; tab-width:4 -*-
#
# Copyright (C) 2018 Canonical Ltd
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
import shlex
import subprocess

from typing import List, Optional, Sequence  # noqa: F401

from eks_providers import errors

logger = logging.getLogger(__name__)


def _log_run(command: Sequence[str]) -> None:
    cmd_string = " ".join([shlex.quote(c) for c in command])
    logger.debug(f"Running: {cmd_string}")


def _run(command: Sequence[str], stdin=subprocess.DEVNULL) -> None:
    _log_run(command)
    subprocess.check_call(command, stdin=stdin)


def _run_output(command: Sequence[str]) -> subprocess.CompletedProcess:
    _log_run(command)
    process = subprocess.Popen(
        command, stdin=subprocess.DEVNULL, stdout=subprocess.PIPE, stderr=subprocess.PIPE
    )
    stdout, stderr = process.communicate()
    return subprocess.CompletedProcess(command, process.returncode, stdout, stderr)


class ToolCommand:
    """Base for the passthrough wrappers around an external command line tool."""

    tool_name = ""
    tool_cmd = ""

    def _command(self, args: Sequence[str]) -> List[str]:
        return [self.tool_cmd] + list(args)

    def run(self, args: Sequence[str], *, action: Optional[str] = None) -> None:
        """Run the tool with args, letting its output reach the terminal.

        :raises errors.CommandError: if the tool cannot be found or
                                     exits with a non zero status.
        """
        cmd = self._command(args)
        try:
            _run(cmd)
        except subprocess.CalledProcessError as process_error:
            raise errors.CommandError(
                tool=self.tool_name,
                command=cmd,
                action=action,
                exit_code=process_error.returncode,
            ) from process_error
        except FileNotFoundError as not_found:
            raise errors.CommandError(
                tool=self.tool_name,
                command=cmd,
                action=action,
                error_message="{} not found in PATH".format(self.tool_cmd),
            ) from not_found

    def run_output(self, args: Sequence[str], *, action: Optional[str] = None) -> str:
        """Run the tool with args and return what it wrote to stdout.

        :raises errors.CommandError: if the tool cannot be found or
                                     exits with a non zero status, carrying
                                     whatever the tool wrote to stderr.
        """
        cmd = self._command(args)
        try:
            process = _run_output(cmd)
        except FileNotFoundError as not_found:
            raise errors.CommandError(
                tool=self.tool_name,
                command=cmd,
                action=action,
                error_message="{} not found in PATH".format(self.tool_cmd),
            ) from not_found

        if process.returncode != 0:
            raise errors.CommandError(
                tool=self.tool_name,
                command=cmd,
                action=action,
                exit_code=process.returncode,
                error_message=process.stderr.decode(errors="replace").strip(),
            )
        return process.stdout.decode(errors="replace")
