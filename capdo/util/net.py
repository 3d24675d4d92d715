"""Contains utility functions for network stuff"""

from netaddr import IPNetwork
from netaddr.core import AddrFormatError


def is_port(port):
    """Checks if a port is valid"""

    return isinstance(port, int) and 0 <= port <= 65535


def is_cidr(cidr):
    """Checks if a string is an IPv4 or IPv6 network in CIDR notation"""

    if not isinstance(cidr, str) or "/" not in cidr:
        return False
    try:
        IPNetwork(cidr)
    except (AddrFormatError, ValueError):
        return False
    return True
