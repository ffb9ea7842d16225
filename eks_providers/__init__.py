from ._aws_command import AwsCommand  # noqa: F401
from ._cluster_info import ClusterInfo  # noqa: F401
from ._eks import ClusterParams, EksCluster  # noqa: F401
from ._eksctl_command import EksctlCommand  # noqa: F401
from ._kubectl_command import KubectlCommand  # noqa: F401
