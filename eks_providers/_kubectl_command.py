from typing import Sequence

from ._command import ToolCommand


class KubectlCommand(ToolCommand):
    """An object representation of the kubectl commands in use."""

    tool_name = "kubectl"
    tool_cmd = "kubectl"

    def wait_for_ready_pod(self, *, selector: str, namespace: str, timeout: int) -> None:
        """Passthrough for running kubectl wait on pods matching selector.

        :param str selector: label selector of the pods to wait on.
        :param str namespace: namespace of the pods.
        :param int timeout: seconds to wait before giving up.
        """
        args = [
            "wait",
            "--for=condition=ready",
            "pod",
            "-l",
            selector,
            "-n",
            namespace,
            "--timeout={}s".format(timeout),
        ]
        self.run(args, action="wait for {} to be ready".format(selector))

    def apply(self, *, filename: str) -> None:
        self.run(["apply", "-f", filename], action="apply {}".format(filename))

    def delete(self, *, filename: str) -> None:
        self.run(["delete", "-f", filename], action="delete {}".format(filename))

    def get(self, resource: Sequence[str]) -> None:
        """Passthrough for running kubectl get, e.g. get(["pods", "-l", "app=x"])."""
        self.run(["get"] + list(resource), action="get {}".format(" ".join(resource)))

    def get_output(self, resource: Sequence[str]) -> str:
        return self.run_output(
            ["get"] + list(resource), action="get {}".format(" ".join(resource))
        )

    def cluster_info(self) -> None:
        self.run(["cluster-info"], action="show the cluster info")
