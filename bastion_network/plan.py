"""Address plan for the bastion network and the static checks run on it."""
from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from .errors import BastionConfigError

__all__ = ["NetworkPlan", "validate_source_cidr", "AWS_RESERVED_ADDRESSES"]

# AWS keeps the network address, the VPC router, DNS, a future-use address
# and the broadcast address of every subnet.
AWS_RESERVED_ADDRESSES = 5

VPC_MIN_PREFIX = 16
VPC_MAX_PREFIX = 28
SUBNET_MAX_PREFIX = 28


def _parse_network(label: str, value: str) -> ipaddress.IPv4Network:
    if not value:
        raise BastionConfigError(f"{label} must not be empty")
    try:
        network = ipaddress.ip_network(value, strict=True)
    except ValueError as exc:
        raise BastionConfigError(f"{label} {value!r} is not a valid CIDR block: {exc}") from exc
    if network.version != 4:
        raise BastionConfigError(f"{label} {value!r} must be an IPv4 CIDR block")
    return network


def validate_source_cidr(value: str) -> str:
    """Return the SSH source range in canonical form."""
    return str(_parse_network("sshSourceCidr", value))


@dataclass(frozen=True)
class NetworkPlan:
    vpc_cidr: ipaddress.IPv4Network
    public_subnet_cidr: ipaddress.IPv4Network
    private_subnet_cidr: ipaddress.IPv4Network

    def __post_init__(self) -> None:
        vpc = self.vpc_cidr
        if not VPC_MIN_PREFIX <= vpc.prefixlen <= VPC_MAX_PREFIX:
            raise BastionConfigError(
                f"vpcCidr {vpc} must have a prefix between /{VPC_MIN_PREFIX} and /{VPC_MAX_PREFIX}"
            )

        for label, subnet in self.subnets().items():
            if subnet.prefixlen > SUBNET_MAX_PREFIX:
                raise BastionConfigError(
                    f"{label} {subnet} is smaller than the /{SUBNET_MAX_PREFIX} minimum"
                )
            # strict: a subnet equal to the VPC leaves no room for its sibling
            if subnet == vpc or not subnet.subnet_of(vpc):
                raise BastionConfigError(f"{label} {subnet} is not a strict subnet of vpcCidr {vpc}")

        if self.public_subnet_cidr.overlaps(self.private_subnet_cidr):
            raise BastionConfigError(
                f"publicSubnetCidr {self.public_subnet_cidr} overlaps "
                f"privateSubnetCidr {self.private_subnet_cidr}"
            )

    @classmethod
    def from_strings(cls, vpc_cidr: str, public_subnet_cidr: str, private_subnet_cidr: str) -> "NetworkPlan":
        return cls(
            vpc_cidr=_parse_network("vpcCidr", vpc_cidr),
            public_subnet_cidr=_parse_network("publicSubnetCidr", public_subnet_cidr),
            private_subnet_cidr=_parse_network("privateSubnetCidr", private_subnet_cidr),
        )

    def subnets(self) -> dict[str, ipaddress.IPv4Network]:
        return {
            "publicSubnetCidr": self.public_subnet_cidr,
            "privateSubnetCidr": self.private_subnet_cidr,
        }

    @staticmethod
    def usable_addresses(subnet: ipaddress.IPv4Network) -> int:
        return subnet.num_addresses - AWS_RESERVED_ADDRESSES

    def describe(self) -> str:
        return (
            f"vpc {self.vpc_cidr}, public subnet {self.public_subnet_cidr} "
            f"({self.usable_addresses(self.public_subnet_cidr)} usable), private subnet "
            f"{self.private_subnet_cidr} ({self.usable_addresses(self.private_subnet_cidr)} usable)"
        )
