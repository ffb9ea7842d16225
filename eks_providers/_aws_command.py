from typing import List

from eks_providers import errors

from ._command import ToolCommand


class AwsCommand(ToolCommand):
    """An object representation of the aws cli commands in use."""

    tool_name = "aws"
    tool_cmd = "aws"

    def describe_regions(self) -> List[str]:
        """Return every region code known to the account, enabled or not."""
        output = self.run_output(
            [
                "ec2",
                "describe-regions",
                "--all-regions",
                "--query",
                "Regions[].RegionName",
                "--output",
                "text",
            ],
            action="list the available regions",
        )
        return output.split()

    def get_account_id(self) -> str:
        """Return the account id of the caller.

        :raises errors.AccountIdentityError: if the identity lookup fails or
                                             yields no account.
        """
        try:
            output = self.run_output(
                ["sts", "get-caller-identity", "--query", "Account", "--output", "text"],
                action="determine the account id",
            )
        except errors.CommandError as command_error:
            raise errors.AccountIdentityError(
                error_message=command_error.error_message
            ) from command_error

        account_id = output.strip()
        if not account_id or account_id == "None":
            raise errors.AccountIdentityError()
        return account_id

    def describe_cluster(self, *, cluster_name: str, region: str) -> str:
        """Passthrough for running aws eks describe-cluster, returning its json."""
        return self.run_output(
            [
                "eks",
                "describe-cluster",
                "--name",
                cluster_name,
                "--region",
                region,
                "--output",
                "json",
            ],
            action="describe the cluster",
        )

    def update_kubeconfig(self, *, cluster_name: str, region: str) -> None:
        self.run(
            ["eks", "update-kubeconfig", "--name", cluster_name, "--region", region],
            action="update the kubeconfig",
        )
