from common import definitions

from ._command import ToolCommand


class EksctlCommand(ToolCommand):
    """An object representation of the eksctl commands used on a cluster."""

    tool_name = "eksctl"
    tool_cmd = "eksctl"

    def create_cluster(
        self,
        *,
        cluster_name: str,
        region: str,
        nodegroup_name: str,
        node_type: str,
        nodes: int,
        verbosity: int = None
    ) -> None:
        """Passthrough for running eksctl create cluster.

        :param str cluster_name: the name the cluster will have.
        :param str region: the region to create the cluster in.
        :param str nodegroup_name: the name of the managed node group.
        :param str node_type: instance type of the worker nodes.
        :param int nodes: number of worker nodes.
        :param int verbosity: eksctl log level, 0 to 5.
        """
        args = [
            "create",
            "cluster",
            "--name",
            cluster_name,
            "--region",
            region,
            "--nodegroup-name",
            nodegroup_name,
            "--node-type",
            node_type,
            "--nodes",
            str(nodes),
        ]
        if verbosity is not None:
            args.extend(["--verbose", str(verbosity)])
        self.run(args, action="create the cluster")

    def associate_iam_oidc_provider(self, *, cluster_name: str, region: str) -> None:
        """Passthrough for running eksctl utils associate-iam-oidc-provider."""
        args = [
            "utils",
            "associate-iam-oidc-provider",
            "--region",
            region,
            "--cluster",
            cluster_name,
            "--approve",
        ]
        self.run(args, action="enable the OIDC provider")

    def create_iam_service_account(
        self, *, cluster_name: str, region: str, role_name: str
    ) -> None:
        """Passthrough for running eksctl create iamserviceaccount.

        The service account is the one used by the EBS CSI controller and
        gets the EBS CSI driver managed policy attached.

        :param str role_name: the IAM role created for the service account.
        """
        args = [
            "create",
            "iamserviceaccount",
            "--name",
            definitions.EBS_CSI_SERVICE_ACCOUNT,
            "--namespace",
            definitions.EBS_CSI_NAMESPACE,
            "--cluster",
            cluster_name,
            "--region",
            region,
            "--role-name",
            role_name,
            "--attach-policy-arn",
            definitions.EBS_CSI_POLICY_ARN,
            "--approve",
        ]
        self.run(args, action="create the IAM service account")

    def create_addon(
        self, *, cluster_name: str, region: str, service_account_role_arn: str
    ) -> None:
        """Passthrough for running eksctl create addon for the EBS CSI driver."""
        args = [
            "create",
            "addon",
            "--name",
            definitions.EBS_CSI_ADDON,
            "--cluster",
            cluster_name,
            "--service-account-role-arn",
            service_account_role_arn,
            "--region",
            region,
            "--force",
        ]
        self.run(args, action="install the EBS CSI driver")

    def delete_addon(self, *, cluster_name: str, region: str) -> None:
        args = [
            "delete",
            "addon",
            "--cluster",
            cluster_name,
            "--name",
            definitions.EBS_CSI_ADDON,
            "--region",
            region,
            "--force",
        ]
        self.run(args, action="delete the EBS CSI driver addon")

    def delete_iam_service_account(self, *, cluster_name: str, region: str) -> None:
        args = [
            "delete",
            "iamserviceaccount",
            "--cluster",
            cluster_name,
            "--name",
            definitions.EBS_CSI_SERVICE_ACCOUNT,
            "--namespace",
            definitions.EBS_CSI_NAMESPACE,
            "--region",
            region,
        ]
        self.run(args, action="delete the IAM service account")

    def delete_cluster(self, *, cluster_name: str, region: str) -> None:
        """Passthrough for running eksctl delete cluster."""
        args = ["delete", "cluster", "--name", cluster_name, "--region", region]
        self.run(args, action="delete the cluster")
