"""Static manifests for the sample application deployed on new clusters.

The documents are the same for every cluster; only the file names written to
disk carry the cluster name so that several clusters can be managed from the
same directory.
"""
import logging
import os
from typing import Dict, List, Optional

import yaml

from common.errors import ManifestWriteError

logger = logging.getLogger(__name__)

STORAGE_CLASS = "sc"
VOLUME_CLAIM = "pvc"
DEPLOYMENT = "nginx-deployment"
SERVICE = "service"

APPLY_ORDER = (STORAGE_CLASS, VOLUME_CLAIM, DEPLOYMENT, SERVICE)
DELETE_ORDER = (DEPLOYMENT, SERVICE, VOLUME_CLAIM, STORAGE_CLASS)

DOCUMENTS: Dict[str, Dict] = {
    STORAGE_CLASS: {
        "apiVersion": "storage.k8s.io/v1",
        "kind": "StorageClass",
        "metadata": {"name": "ebs-sc"},
        "provisioner": "ebs.csi.aws.com",
        "parameters": {"type": "gp3"},
        "volumeBindingMode": "WaitForFirstConsumer",
    },
    VOLUME_CLAIM: {
        "apiVersion": "v1",
        "kind": "PersistentVolumeClaim",
        "metadata": {"name": "my-ebs-pvc"},
        "spec": {
            "storageClassName": "ebs-sc",
            "accessModes": ["ReadWriteOnce"],
            "resources": {"requests": {"storage": "5Gi"}},
        },
    },
    DEPLOYMENT: {
        "apiVersion": "apps/v1",
        "kind": "Deployment",
        "metadata": {"name": "my-app-deployment", "labels": {"app": "my-app"}},
        "spec": {
            "replicas": 3,
            "selector": {"matchLabels": {"app": "my-app"}},
            "template": {
                "metadata": {"labels": {"app": "my-app"}},
                "spec": {
                    "containers": [
                        {
                            "name": "my-app-container",
                            "image": "nginx:latest",
                            "ports": [{"containerPort": 80}],
                            "volumeMounts": [
                                {"name": "html-volume", "mountPath": "/usr/share/nginx/html"}
                            ],
                        }
                    ],
                    "volumes": [
                        {
                            "name": "html-volume",
                            "persistentVolumeClaim": {"claimName": "my-ebs-pvc"},
                        }
                    ],
                },
            },
        },
    },
    SERVICE: {
        "apiVersion": "v1",
        "kind": "Service",
        "metadata": {"name": "my-app-service"},
        "spec": {
            "selector": {"app": "my-app"},
            "ports": [{"protocol": "TCP", "port": 80, "targetPort": 80}],
            "type": "LoadBalancer",
        },
    },
}


def render(name: str) -> str:
    """Return the yaml text of the manifest called name."""
    return yaml.safe_dump(DOCUMENTS[name], default_flow_style=False, sort_keys=False)


def manifest_path(cluster_name: str, name: str, directory: Optional[str] = None) -> str:
    if directory is None:
        directory = os.getcwd()
    return os.path.join(directory, "{}-{}.yaml".format(cluster_name, name))


def manifest_paths(cluster_name: str, directory: Optional[str] = None) -> Dict[str, str]:
    return {name: manifest_path(cluster_name, name, directory) for name in APPLY_ORDER}


def write_manifests(cluster_name: str, directory: Optional[str] = None) -> List[str]:
    """Write the manifests for cluster_name, returning the paths in apply order.

    :raises ManifestWriteError: if a file cannot be written.
    """
    paths = []
    for name, path in manifest_paths(cluster_name, directory).items():
        try:
            with open(path, "w") as f:
                f.write(render(name))
        except OSError as os_error:
            raise ManifestWriteError(
                path=path, message=os_error.strerror or str(os_error)
            ) from os_error
        logger.debug("Wrote {}".format(path))
        paths.append(path)
    return paths


def remove_manifests(cluster_name: str, directory: Optional[str] = None) -> None:
    for path in manifest_paths(cluster_name, directory).values():
        if os.path.isfile(path):
            os.remove(path)
            logger.debug("Removed {}".format(path))
