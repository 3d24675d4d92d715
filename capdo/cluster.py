"""
cluster.py
==========

Read-only descriptors of a Cluster API cluster and its machines.

The objects are built from the manifests the orchestrator stores (see
:meth:`Cluster.from_manifest` and :meth:`Machine.from_manifest`) and are
never modified while rendering bootstrap scripts.
"""
from capdo import DEFAULT_SERVICE_DOMAIN
from capdo.util.util import lookup


class APIEndpoint:  # pylint: disable=too-few-public-methods
    """
    A host/port pair at which the control plane accepts connections.

    Args:
        host (str): IP address or DNS name
        port (int): the port of the API server
    """
    def __init__(self, host, port):
        self.host = host
        self.port = port

    def __repr__(self):
        return "APIEndpoint(host=%r, port=%r)" % (self.host, self.port)

    def __eq__(self, other):
        return (isinstance(other, APIEndpoint) and
                (self.host, self.port) == (other.host, other.port))

    @classmethod
    def from_dict(cls, data):
        """create an endpoint from ``{'host': ..., 'port': ...}``"""
        try:
            host, port = data['host'], data['port']
        except (KeyError, TypeError) as err:
            raise ValueError("invalid API endpoint %r" % (data,)) from err

        # ports are integers or strings of digits, 6443.9 or true are not
        if isinstance(port, bool) or not isinstance(port, (int, str)):
            raise ValueError("invalid port %r of API endpoint %s" % (port, host))

        return cls(host, int(port))


class NetworkRanges:  # pylint: disable=too-few-public-methods
    """
    An ordered list of CIDR blocks, e.g. ``['10.96.0.0/12']``
    """
    def __init__(self, cidr_blocks=None):
        self.cidr_blocks = list(cidr_blocks or [])

    def __repr__(self):
        return "NetworkRanges(%r)" % self.cidr_blocks


class ClusterNetwork:  # pylint: disable=too-few-public-methods
    """
    The network configuration of a cluster.

    Args:
        pods (NetworkRanges): the pod subnets
        services (NetworkRanges): the service subnets
        service_domain (str): the cluster DNS domain
    """
    def __init__(self, pods=None, services=None,
                 service_domain=DEFAULT_SERVICE_DOMAIN):
        self.pods = pods or NetworkRanges()
        self.services = services or NetworkRanges()
        self.service_domain = service_domain


class Cluster:
    """
    A cluster as seen by the machine actuator.

    Args:
        name (str): the cluster name
        network (ClusterNetwork): pod and service networks, DNS domain
        api_endpoints (list): :class:`APIEndpoint` instances, filled in
            after the control plane was provisioned
        namespace (str): the namespace the cluster object lives in
    """
    def __init__(self, name, network=None, api_endpoints=None,
                 namespace="default"):
        self.name = name
        self.namespace = namespace
        self.network = network or ClusterNetwork()
        self.api_endpoints = list(api_endpoints or [])

    def __repr__(self):
        return "Cluster(%s/%s)" % (self.namespace, self.name)

    @classmethod
    def from_manifest(cls, manifest):
        """
        Create a Cluster from a ``cluster.k8s.io/v1alpha1`` Cluster manifest

        Args:
            manifest (dict): the parsed YAML manifest

        Raises:
            ValueError if the manifest has no name or a malformed endpoint
        """
        name = lookup(manifest, 'metadata.name')
        if not name:
            raise ValueError("cluster manifest has no metadata.name")

        cluster_network = lookup(manifest, 'spec.clusterNetwork', {})
        network = ClusterNetwork(
            pods=NetworkRanges(lookup(cluster_network, 'pods.cidrBlocks')),
            services=NetworkRanges(
                lookup(cluster_network, 'services.cidrBlocks')),
            service_domain=lookup(cluster_network, 'serviceDomain',
                                  DEFAULT_SERVICE_DOMAIN))

        endpoints = [APIEndpoint.from_dict(ep) for ep in
                     lookup(manifest, 'status.apiEndpoints', [])]

        return cls(name, network, endpoints,
                   namespace=lookup(manifest, 'metadata.namespace', 'default'))


class MachineVersions:  # pylint: disable=too-few-public-methods
    """
    The kubernetes versions of a machine.

    ``control_plane`` is only set for control plane machines.
    """
    def __init__(self, kubelet, control_plane=""):
        self.kubelet = kubelet
        self.control_plane = control_plane


class Machine:
    """
    A single compute node of a cluster.

    Args:
        name (str): the machine name
        namespace (str): the namespace of the machine object
        versions (MachineVersions): kubelet and control plane versions
    """
    def __init__(self, name, namespace, versions):
        self.name = name
        self.namespace = namespace
        self.versions = versions

    def __repr__(self):
        return "Machine(%s/%s)" % (self.namespace, self.name)

    @classmethod
    def from_manifest(cls, manifest):
        """
        Create a Machine from a ``cluster.k8s.io/v1alpha1`` Machine manifest

        Raises:
            ValueError if the manifest has no name, no kubelet version or
            a version which is not a string
        """
        name = lookup(manifest, 'metadata.name')
        if not name:
            raise ValueError("machine manifest has no metadata.name")

        kubelet = lookup(manifest, 'spec.versions.kubelet')
        if not kubelet:
            raise ValueError("machine %s has no spec.versions.kubelet" % name)

        control_plane = lookup(manifest, 'spec.versions.controlPlane', "")
        # unquoted versions like 1.10 are parsed as floats by YAML
        for field, value in (('kubelet', kubelet),
                             ('controlPlane', control_plane)):
            if not isinstance(value, str):
                raise ValueError(
                    "machine %s: spec.versions.%s must be a string, got %r"
                    % (name, field, value))

        versions = MachineVersions(kubelet, control_plane)

        return cls(name, lookup(manifest, 'metadata.namespace', 'default'),
                   versions)


def is_control_plane(machine):
    """
    A machine belongs to the control plane if it has a control plane version.
    """
    return bool(machine.versions.control_plane)
