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

import logging
import os
from time import sleep
from typing import Callable, Dict, Optional

from common import definitions, manifests
from common.config import Config
from common.errors import BaseError, ManifestWriteError
from eks_providers import errors

from ._aws_command import AwsCommand
from ._cluster_info import ClusterInfo
from ._eksctl_command import EksctlCommand
from ._kubectl_command import KubectlCommand

logger = logging.getLogger(__name__)


class ClusterParams:
    """The cluster a workflow acts on, and the names derived from it."""

    def __init__(self, *, name: str, region: str) -> None:
        self.name = name
        self.region = region

    @property
    def nodegroup_name(self) -> str:
        return "{}-workers".format(self.name)

    @property
    def role_name(self) -> str:
        return "{}{}".format(definitions.EBS_CSI_ROLE_PREFIX, self.name)

    def role_arn(self, account_id: str) -> str:
        return "arn:aws:iam::{}:role/{}".format(account_id, self.role_name)

    def manifest_paths(self, directory: Optional[str] = None) -> Dict[str, str]:
        return manifests.manifest_paths(self.name, directory)


class EksCluster:
    """Create, delete and inspect an EKS cluster running the sample application."""

    def __init__(
        self,
        *,
        params: ClusterParams,
        echoer,
        config: Optional[Config] = None,
        eksctl: Optional[EksctlCommand] = None,
        aws: Optional[AwsCommand] = None,
        kubectl: Optional[KubectlCommand] = None
    ) -> None:
        self.params = params
        self.echoer = echoer
        self.config = config if config is not None else Config()
        self._eksctl = eksctl if eksctl is not None else EksctlCommand()
        self._aws = aws if aws is not None else AwsCommand()
        self._kubectl = kubectl if kubectl is not None else KubectlCommand()

    def _show_target(self) -> None:
        self.echoer.warning("Cluster Name: {}".format(self.params.name))
        self.echoer.warning("Region: {}".format(self.params.region))
        self.echoer.plain()

    def _run_step(self, step: int, description: str, action: Callable[[], None]) -> None:
        self.echoer.step("Step {}: {}...".format(step, description))
        try:
            action()
        except BaseError as error:
            raise errors.StepFailedError(
                step=step, description=description, reason=error
            ) from error

    def _run_best_effort(self, step: int, description: str, action: Callable[[], None]) -> None:
        self.echoer.step("Step {}: {}...".format(step, description))
        try:
            action()
        except (errors.CommandError, ManifestWriteError) as step_error:
            logger.info("Ignoring failure in step {}: {}".format(step, step_error))
            self.echoer.warning("Skipped: {}".format(step_error))

    def _query(self, description: str, action: Callable[[], None]) -> None:
        try:
            action()
        except errors.CommandError as command_error:
            logger.info("Could not get {}: {}".format(description, command_error))
            self.echoer.warning("Could not get {}: {}".format(description, command_error))

    def create(self) -> None:
        """Create the cluster, the EBS CSI driver and the sample application.

        Steps run in order and the first failure stops the workflow, nothing
        already created is removed.

        :raises errors.StepFailedError: naming the step that failed.
        """
        self.echoer.step("Starting cluster creation process...")
        self._show_target()

        self._run_step(1, "Creating EKS cluster", self._create_cluster)
        self._run_step(2, "Enabling OIDC provider for IAM roles", self._enable_oidc_provider)
        self._run_step(
            3,
            "Creating IAM service account for EBS CSI driver",
            self._create_service_account,
        )
        self._run_step(4, "Installing EBS CSI driver", self._install_csi_driver)
        self._run_step(5, "Waiting for EBS CSI driver to be ready", self._wait_for_csi_driver)
        self._run_step(
            6, "Creating storage resources and sample application", self._deploy_application
        )
        self._run_step(7, "Verifying cluster resources", self._verify_resources)

        self.echoer.info("Cluster creation completed successfully!")
        self.echoer.info(
            "You can access your application using the EXTERNAL-IP from the service above."
        )

    def _create_cluster(self) -> None:
        self._eksctl.create_cluster(
            cluster_name=self.params.name,
            region=self.params.region,
            nodegroup_name=self.params.nodegroup_name,
            node_type=self.config.instance_type,
            nodes=self.config.nodes,
            verbosity=self.config.eksctl_verbosity,
        )

    def _enable_oidc_provider(self) -> None:
        self._eksctl.associate_iam_oidc_provider(
            cluster_name=self.params.name, region=self.params.region
        )

    def _create_service_account(self) -> None:
        self._eksctl.create_iam_service_account(
            cluster_name=self.params.name,
            region=self.params.region,
            role_name=self.params.role_name,
        )

    def _install_csi_driver(self) -> None:
        account_id = self._aws.get_account_id()
        self.echoer.warning("AWS Account ID: {}".format(account_id))
        self._eksctl.create_addon(
            cluster_name=self.params.name,
            region=self.params.region,
            service_account_role_arn=self.params.role_arn(account_id),
        )

    def _wait_for_csi_driver(self) -> None:
        self._kubectl.wait_for_ready_pod(
            selector=definitions.EBS_CSI_CONTROLLER_LABEL,
            namespace=definitions.EBS_CSI_NAMESPACE,
            timeout=self.config.csi_ready_timeout,
        )

    def _deploy_application(self) -> None:
        for path in manifests.write_manifests(self.params.name):
            self._kubectl.apply(filename=path)

    def _verify_resources(self) -> None:
        self.echoer.warning("Waiting for application to be ready...")
        sleep(self.config.settle_seconds)

        for resource in (
            ["nodes"],
            ["storageclass"],
            ["pvc"],
            ["pods", "-l", definitions.APP_LABEL],
            ["service", definitions.APP_SERVICE],
        ):
            self.echoer.plain()
            self._kubectl.get(resource)

    def destroy(self) -> bool:
        """Delete the cluster after asking the user to confirm.

        Removing the application, the addon and the service account is best
        effort, only the cluster deletion itself is reported as a failure.
        The local manifests are removed in every case.

        :returns: False if the user did not confirm, True otherwise.
        :raises errors.StepFailedError: if the cluster could not be deleted.
        """
        self.echoer.step("Starting cluster deletion process...")
        self._show_target()

        answer = self.echoer.prompt(
            "Are you sure you want to delete cluster '{}' in region '{}'? (y/N)".format(
                self.params.name, self.params.region
            ),
            default="N",
            show_default=False,
        )
        if str(answer).strip() not in ("y", "Y"):
            self.echoer.warning("Deletion cancelled.")
            return False

        try:
            self._run_best_effort(1, "Deleting application resources", self._delete_application)
            self._run_best_effort(2, "Deleting EBS CSI driver addon", self._delete_csi_driver)
            self._run_best_effort(3, "Deleting IAM service account", self._delete_service_account)
            self._run_step(4, "Deleting EKS cluster", self._delete_cluster)
        finally:
            manifests.remove_manifests(self.params.name)

        self.echoer.info("Cluster deletion completed!")
        return True

    def _delete_application(self) -> None:
        paths = self.params.manifest_paths()
        if not all(os.path.isfile(path) for path in paths.values()):
            manifests.write_manifests(self.params.name)

        failures = []
        for name in manifests.DELETE_ORDER:
            try:
                self._kubectl.delete(filename=paths[name])
            except errors.CommandError as command_error:
                logger.debug("Could not delete {}: {}".format(name, command_error))
                failures.append(command_error)
        if failures:
            raise failures[0]

    def _delete_csi_driver(self) -> None:
        self._eksctl.delete_addon(cluster_name=self.params.name, region=self.params.region)

    def _delete_service_account(self) -> None:
        self._eksctl.delete_iam_service_account(
            cluster_name=self.params.name, region=self.params.region
        )

    def _delete_cluster(self) -> None:
        self._eksctl.delete_cluster(cluster_name=self.params.name, region=self.params.region)

    def get_cluster_info(self) -> Optional[ClusterInfo]:
        """Return the cluster info, or None if the cluster cannot be found."""
        try:
            json_info = self._aws.describe_cluster(
                cluster_name=self.params.name, region=self.params.region
            )
        except errors.CommandError as command_error:
            logger.debug("Cluster lookup failed: {}".format(command_error))
            return None
        return ClusterInfo.from_json(json_info=json_info)

    def status(self) -> Optional[ClusterInfo]:
        """Show the cluster, its nodes and the workloads outside kube-system.

        :returns: the ClusterInfo, or None when there is no such cluster.
        """
        self.echoer.step("Checking cluster status...")

        cluster_info = self.get_cluster_info()
        if cluster_info is None:
            self.echoer.error(
                "Cluster '{}' does not exist in region '{}'".format(
                    self.params.name, self.params.region
                )
            )
            return None

        self.echoer.info(
            "Cluster '{}' exists in region '{}'".format(self.params.name, self.params.region)
        )
        self.echoer.warning(
            "Status: {}, Kubernetes version: {}".format(
                cluster_info.status, cluster_info.version or "unknown"
            )
        )

        # Each query is reported on its own, a cluster still being created
        # has no API endpoint yet.
        self._query(
            "kubeconfig",
            lambda: self._aws.update_kubeconfig(
                cluster_name=self.params.name, region=self.params.region
            ),
        )
        self.echoer.plain()
        self._query("cluster info", self._kubectl.cluster_info)
        self.echoer.plain()
        self._query("nodes", lambda: self._kubectl.get(["nodes"]))
        self.echoer.plain()
        self._query("workloads", self._show_workloads)

        return cluster_info

    def _show_workloads(self) -> None:
        workloads = self._kubectl.get_output(["all", "-A"])
        for line in workloads.splitlines():
            if definitions.SYSTEM_NAMESPACE not in line:
                self.echoer.plain(line)
