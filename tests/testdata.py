"""Defines test data shared among tests"""

# pylint: disable=invalid-name,missing-docstring

CLUSTER_MANIFEST = {
    "apiVersion": "cluster.k8s.io/v1alpha1",
    "kind": "Cluster",
    "metadata": {
        "name": "test",
        "namespace": "default"
    },
    "spec": {
        "clusterNetwork": {
            "pods": {"cidrBlocks": ["10.0.0.0/16"]},
            "services": {"cidrBlocks": ["10.96.0.0/12"]},
            "serviceDomain": "cluster.local"
        }
    },
    "status": {
        "apiEndpoints": [{"host": "1.2.3.4", "port": 6443}]
    }
}

MASTER_MANIFEST = {
    "apiVersion": "cluster.k8s.io/v1alpha1",
    "kind": "Machine",
    "metadata": {
        "name": "test-master-1",
        "namespace": "default"
    },
    "spec": {
        "versions": {
            "kubelet": "1.13.1",
            "controlPlane": "1.13.1"
        }
    }
}

NODE_MANIFEST = {
    "apiVersion": "cluster.k8s.io/v1alpha1",
    "kind": "Machine",
    "metadata": {
        "name": "test-node-1",
        "namespace": "default"
    },
    "spec": {
        "versions": {
            "kubelet": "1.13.1"
        }
    }
}

METADATA = """apt-get update
apt-get install -y kubelet
"""

NAUGHTY_STRINGS = [
    "",
    "true",
    "None",
    "$1.0",
    "{}",
    "{token}",
    "Ω≈ç√∫˜µ≤≥÷",
    "社會科學院語學研究所",
    "😍",
]
