"""
This module renders the bootstrap scripts handed to new machines as
user-data.

Each script starts with a block of shell variables describing the cluster
and the machine, followed by the provider specific ``metadata`` script
supplied by the caller.
"""
from capdo.cluster import is_control_plane
from capdo.util.logger import Logger

LOGGER = Logger(__name__)


# the environment for control plane instances
CONTROL_PLANE_ENVIRONMENT = """#!/bin/bash
KUBELET_VERSION={machine.versions.kubelet}
TOKEN={token}
PORT=443
NAMESPACE={machine.namespace}
MACHINE=$NAMESPACE
MACHINE+="/"
MACHINE+={machine.name}
CONTROL_PLANE_VERSION={machine.versions.control_plane}
CLUSTER_DNS_DOMAIN={cluster.network.service_domain}
POD_CIDR={pod_cidr}
SERVICE_CIDR={service_cidr}
"""

# the environment for worker instances
WORKER_ENVIRONMENT = """#!/bin/bash
KUBELET_VERSION={machine.versions.kubelet}
MASTER={master_endpoint}
TOKEN={token}
NAMESPACE={machine.namespace}
MACHINE=$NAMESPACE
MACHINE+="/"
MACHINE+={machine.name}
CLUSTER_DNS_DOMAIN={cluster.network.service_domain}
POD_CIDR={pod_cidr}
SERVICE_CIDR={service_cidr}
"""


class UserdataError(Exception):
    """Base class for errors while building user-data"""


class TemplateRenderError(UserdataError):
    """The template references a field the parameters can't resolve"""


class NoAPIEndpointError(UserdataError):
    """A worker was requested for a cluster without a control plane endpoint
    """


class BootstrapParams:  # pylint: disable=too-few-public-methods
    """
    The values substituted into the environment templates.

    Args:
        cluster (:class:`capdo.cluster.Cluster`): the cluster of the machine
        machine (:class:`capdo.cluster.Machine`): the machine to bootstrap
        token (str): the join token
        api_endpoint (:class:`capdo.cluster.APIEndpoint`): the API server
            a worker joins, None for control plane machines
    """
    def __init__(self, cluster, machine, token, api_endpoint=None):
        self.cluster = cluster
        self.machine = machine
        self.token = token
        self.master_endpoint = endpoint(api_endpoint) if api_endpoint else ""
        self.pod_cidr = subnet(cluster.network.pods)
        self.service_cidr = subnet(cluster.network.services)


def endpoint(api_endpoint):
    """format an API endpoint as ``host:port``"""
    return "%s:%d" % (api_endpoint.host, api_endpoint.port)


def subnet(net_range):
    """return the first CIDR block of a network range, or an empty string"""
    if not net_range.cidr_blocks:
        return ""
    return net_range.cidr_blocks[0]


def _render(template, metadata, *args):
    try:
        params = BootstrapParams(*args)
        script = template.format_map(vars(params))
    except (AttributeError, KeyError, IndexError, TypeError, ValueError) as err:
        raise TemplateRenderError(
            "failed to execute user-data template: %s" % err) from err

    return script + metadata


def control_plane_userdata(cluster, machine, token, metadata):
    """
    Build the bootstrap script of a control plane machine.

    Args:
        cluster (:class:`capdo.cluster.Cluster`)
        machine (:class:`capdo.cluster.Machine`)
        token (str): the join token
        metadata (str): appended verbatim after the environment

    Returns:
        the script as ``str``

    Raises:
        TemplateRenderError if a field of the template can't be resolved
    """
    LOGGER.debug("rendering control plane user-data for %s", machine)
    return _render(CONTROL_PLANE_ENVIRONMENT, metadata, cluster, machine, token)


def worker_userdata(cluster, machine, token, metadata):
    """
    Build the bootstrap script of a worker machine.

    The worker joins the API server at the first endpoint registered in
    the cluster status.

    Raises:
        NoAPIEndpointError if the cluster has no API endpoint yet
        TemplateRenderError if a field of the template can't be resolved
    """
    api_endpoints = getattr(cluster, "api_endpoints", None)
    if not api_endpoints:
        raise NoAPIEndpointError(
            "%r has no API endpoint, can't bootstrap worker %r" % (
                cluster, machine))

    LOGGER.debug("rendering worker user-data for %s", machine)
    return _render(WORKER_ENVIRONMENT, metadata, cluster, machine, token,
                   api_endpoints[0])


def userdata(cluster, machine, token, metadata):
    """
    Build the bootstrap script for ``machine``, choosing the control plane
    or worker script by the machine's versions.
    """
    try:
        control_plane = is_control_plane(machine)
    except AttributeError as err:
        raise TemplateRenderError(
            "failed to execute user-data template: %s" % err) from err

    if control_plane:
        return control_plane_userdata(cluster, machine, token, metadata)
    return worker_userdata(cluster, machine, token, metadata)
