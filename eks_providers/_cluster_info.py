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

import json
from typing import Optional, Type

from eks_providers import errors


class ClusterInfo:
    @classmethod
    def from_json(cls: Type["ClusterInfo"], *, json_info: str) -> "ClusterInfo":
        """Create a ClusterInfo from json_info retrieved from the aws cli.

        :param str json_info: a json formatted string with the structure
                              that would follow the output of
                              aws eks describe-cluster --output json.
        :returns: a ClusterInfo.
        :rtype: ClusterInfo
        :raises eks_providers.errors.ClusterInfoDataKeyError:
            if a required key is missing from that data structure.
        """
        try:
            json_data = json.loads(json_info)
        except json.decoder.JSONDecodeError as decode_error:
            raise errors.ClusterBadDataError(tool="aws", data=json_info) from decode_error
        try:
            cluster = json_data["cluster"]
            return cls(
                name=cluster["name"],
                status=cluster["status"],
                version=cluster.get("version"),
                endpoint=cluster.get("endpoint"),
            )
        except KeyError as missing_key:
            raise errors.ClusterInfoDataKeyError(
                tool="aws", missing_key=str(missing_key), data=json_data
            ) from missing_key
        except TypeError as type_error:
            raise errors.ClusterBadDataError(tool="aws", data=json_info) from type_error

    def __init__(
        self,
        *,
        name: str,
        status: str,
        version: Optional[str] = None,
        endpoint: Optional[str] = None
    ) -> None:
        """Initialize a ClusterInfo.

        :param str name: the cluster name.
        :param str status: the state of the cluster which can be any one of
                           CREATING, ACTIVE, DELETING, FAILED, UPDATING, PENDING.
        :param str version: the Kubernetes version of the control plane.
        :param str endpoint: the API server endpoint, unset while creating.
        """
        self.name = name
        self.status = status
        self.version = version
        self.endpoint = endpoint

    def is_active(self) -> bool:
        return self.status.upper() == "ACTIVE"

    def is_deleting(self) -> bool:
        return self.status.upper() == "DELETING"
