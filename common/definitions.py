PROGRAM_NAME: str = "eks-manager"

REQUIRED_COMMANDS = ("eksctl", "aws", "kubectl")

menu_options = [
    "Create Cluster",
    "Delete Cluster",
    "Check Cluster Status",
    "Quit",
]

CLUSTER_NAME_PATTERN: str = r"^[a-z0-9-]+$"
MAX_CLUSTER_NAME_LENGTH: int = 30

DEFAULT_REGION: str = "us-east-1"
DEFAULT_INSTANCE_TYPE: str = "t3.medium"
DEFAULT_NODE_COUNT: int = 3
DEFAULT_EKSCTL_VERBOSITY: int = 4
DEFAULT_CSI_READY_TIMEOUT: int = 300
DEFAULT_SETTLE_SECONDS: int = 30

CONFIG_ENV_VAR: str = "EKS_MANAGER_CONFIG"
CONFIG_FILE: str = "config.toml"
CONFIG_DIR: str = ".eks-manager"

# Used when the cloud CLI cannot list regions, e.g. without credentials.
FALLBACK_REGIONS = [
    "us-east-1",
    "us-east-2",
    "us-west-1",
    "us-west-2",
    "af-south-1",
    "ap-east-1",
    "ap-south-1",
    "ap-south-2",
    "ap-southeast-1",
    "ap-southeast-2",
    "ap-southeast-3",
    "ap-northeast-1",
    "ap-northeast-2",
    "ap-northeast-3",
    "ca-central-1",
    "eu-central-1",
    "eu-central-2",
    "eu-west-1",
    "eu-west-2",
    "eu-west-3",
    "eu-north-1",
    "eu-south-1",
    "eu-south-2",
    "me-south-1",
    "me-central-1",
    "sa-east-1",
]

EBS_CSI_ADDON: str = "aws-ebs-csi-driver"
EBS_CSI_SERVICE_ACCOUNT: str = "ebs-csi-controller-sa"
SYSTEM_NAMESPACE: str = "kube-system"
EBS_CSI_NAMESPACE: str = SYSTEM_NAMESPACE
EBS_CSI_POLICY_ARN: str = "arn:aws:iam::aws:policy/service-role/AmazonEBSCSIDriverPolicy"
EBS_CSI_ROLE_PREFIX: str = "AmazonEKS_EBS_CSI_DriverRole_"
EBS_CSI_CONTROLLER_LABEL: str = "app=ebs-csi-controller"

APP_LABEL: str = "app=my-app"
APP_SERVICE: str = "my-app-service"
