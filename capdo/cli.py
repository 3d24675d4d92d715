"""
cli.py
======

misc functions behind the command line, usually called from
``capdo.capdo.Capdo``.

Don't use directly
"""
from capdo import CONTROL_PLANE_ROLE, WORKER_ROLE
from capdo.cluster import Cluster, Machine
from capdo.provision.userdata import (control_plane_userdata, worker_userdata,
                                      userdata)
from .util.net import is_cidr, is_port
from .util.util import load_manifest
from .util.logger import Logger


LOGGER = Logger(__name__)

ROLES = ("auto", CONTROL_PLANE_ROLE, WORKER_ROLE)

BUILDERS = {"auto": userdata,
            CONTROL_PLANE_ROLE: control_plane_userdata,
            WORKER_ROLE: worker_userdata}


def check_cluster(cluster):
    """
    Warn about network settings which will probably break the bootstrap
    script. Nothing is rejected, the script is rendered anyway.

    Returns:
        the list of warnings
    """
    warnings = []
    for kind, ranges in (("pod", cluster.network.pods),
                         ("service", cluster.network.services)):
        if not ranges.cidr_blocks:
            warnings.append(f"cluster {cluster.name} has no {kind} CIDR")
        elif not is_cidr(ranges.cidr_blocks[0]):
            warnings.append(f"{kind} CIDR {ranges.cidr_blocks[0]} of "
                            f"cluster {cluster.name} is not a valid network")

    for api_endpoint in cluster.api_endpoints:
        if not is_port(api_endpoint.port):
            warnings.append(f"API endpoint {api_endpoint.host} has an "
                            f"invalid port {api_endpoint.port}")

    for warning in warnings:
        LOGGER.warning(warning)

    return warnings


def read_metadata(path):
    """read the metadata script appended to the environment, if any"""
    if not path:
        return ""

    with open(path, 'r') as fh:
        return fh.read()


def build_userdata(cluster_path, machine_path, token, metadata_path=None,
                   role="auto"):
    """
    Render the bootstrap script for the machine in ``machine_path``.

    Args:
        cluster_path (str): path to the Cluster manifest
        machine_path (str): path to the Machine manifest
        token (str): the join token
        metadata_path (str): optional script appended to the environment
        role (str): one of ``auto``, ``control-plane`` or ``worker``

    Raises:
        ValueError for an unknown role or an invalid manifest
        capdo.provision.userdata.UserdataError if rendering fails
    """
    if role not in BUILDERS:
        raise ValueError("role must be one of [%s]" % " | ".join(ROLES))

    cluster = Cluster.from_manifest(load_manifest(cluster_path))
    machine = Machine.from_manifest(load_manifest(machine_path))
    check_cluster(cluster)

    LOGGER.info("Rendering user-data for %s in %s ...", machine, cluster)
    return BUILDERS[role](cluster, machine, token, read_metadata(metadata_path))


def write_userdata(script, path):
    """Write the rendered script to ``path``"""
    with open(path, "w") as fh:
        fh.write(script)

    LOGGER.success("user-data written to %s", path)
    return path
