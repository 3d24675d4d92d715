# pylint: disable=missing-docstring
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version('capdo')
except PackageNotFoundError:
    __version__ = '0.1.0'

# Defining some constants
CONTROL_PLANE_ROLE = "control-plane"
WORKER_ROLE = "worker"
DEFAULT_SERVICE_DOMAIN = "cluster.local"
