"""
IP Classifier for Repository URL Validation

Decides whether a resolved address points into a private, loopback,
link-local or cloud metadata range.
"""

import ipaddress
from typing import Union


PRIVATE_RANGES = (
    "10.0.0.0/8",
    "172.16.0.0/12",
    "192.168.0.0/16",
    "127.0.0.0/8",
    "169.254.0.0/16",  # Link-local
    "0.0.0.0/8",
    "224.0.0.0/24",  # Link-local multicast
    "ff02::/16",  # IPv6 link-local multicast
)

CLOUD_METADATA_RANGES = (
    "169.254.169.254/32",  # AWS/GCP/Azure metadata
    "fd00:ec2::254/128",  # AWS IMDS IPv6
)

DISALLOWED_NETWORKS = tuple(
    ipaddress.ip_network(cidr) for cidr in PRIVATE_RANGES + CLOUD_METADATA_RANGES
)

Address = Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address]


def is_disallowed_ip(address: Address) -> bool:
    """Check if an address is in a private/reserved range.

    Unparseable input is treated as disallowed.
    """
    try:
        ip = ipaddress.ip_address(address)
    except ValueError:
        return True

    # ::ffff:a.b.c.d is judged as the IPv4 address it carries
    if ip.version == 6 and ip.ipv4_mapped is not None:
        ip = ip.ipv4_mapped

    for network in DISALLOWED_NETWORKS:
        if ip.version == network.version and ip in network:
            return True

    return ip.is_loopback or ip.is_link_local or ip.is_private
