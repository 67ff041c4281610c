"""Stack configuration for the bastion network."""
from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import pulumi

from .errors import BastionConfigError
from .plan import NetworkPlan, validate_source_cidr

__all__ = ["BastionSettings", "load_settings", "read_public_key"]

DEFAULT_INSTANCE_TYPE = "t2.micro"
DEFAULT_KEY_NAME = "bastion-key"
DEFAULT_VPC_CIDR = "10.0.0.0/27"
DEFAULT_PUBLIC_SUBNET_CIDR = "10.0.0.0/28"
DEFAULT_PRIVATE_SUBNET_CIDR = "10.0.0.16/28"
DEFAULT_SSH_SOURCE_CIDR = "0.0.0.0/0"
DEFAULT_SSH_USER = "ubuntu"

# Key types EC2 accepts for imported key pairs.
PUBLIC_KEY_TYPES = ("ssh-rsa", "ssh-ed25519")
PRIVATE_KEY_ARMOUR = re.compile(r"-----BEGIN [A-Z0-9 ]*PRIVATE KEY-----")


@dataclass(frozen=True)
class BastionSettings:
    ami: str
    public_key: str
    plan: NetworkPlan
    instance_type: str = DEFAULT_INSTANCE_TYPE
    key_name: str = DEFAULT_KEY_NAME
    availability_zone: Optional[str] = None
    ssh_source_cidr: str = DEFAULT_SSH_SOURCE_CIDR
    ssh_user: str = DEFAULT_SSH_USER
    restrict_private_ssh: bool = False


def read_public_key(path: str | Path) -> str:
    """Return the OpenSSH public key stored at ``path``.

    Only the public half may ever be declared, so anything that looks like
    private key material is refused outright.
    """
    key_path = Path(path).expanduser()
    try:
        content = key_path.read_text(encoding="utf-8").strip()
    except FileNotFoundError as exc:
        raise BastionConfigError(f"public key file {key_path} does not exist") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise BastionConfigError(f"public key file {key_path} cannot be read: {exc}") from exc

    if not content:
        raise BastionConfigError(f"public key file {key_path} is empty")
    if PRIVATE_KEY_ARMOUR.search(content):
        raise BastionConfigError(
            f"{key_path} holds a private key; point publicKeyPath at the .pub file instead"
        )

    lines = content.splitlines()
    if len(lines) != 1:
        raise BastionConfigError(f"{key_path} must contain exactly one public key line")

    fields = lines[0].split()
    if len(fields) < 2 or fields[0] not in PUBLIC_KEY_TYPES:
        raise BastionConfigError(
            f"{key_path} is not an OpenSSH public key of type {', '.join(PUBLIC_KEY_TYPES)}"
        )
    return lines[0]


def load_settings(config: pulumi.Config | None = None) -> BastionSettings:
    config = config or pulumi.Config()

    ami = config.require("ami")
    if not ami.startswith("ami-"):
        raise BastionConfigError(f"ami {ami!r} is not an AMI id")

    plan = NetworkPlan.from_strings(
        config.get("vpcCidr") or DEFAULT_VPC_CIDR,
        config.get("publicSubnetCidr") or DEFAULT_PUBLIC_SUBNET_CIDR,
        config.get("privateSubnetCidr") or DEFAULT_PRIVATE_SUBNET_CIDR,
    )

    settings = BastionSettings(
        ami=ami,
        public_key=read_public_key(config.require("publicKeyPath")),
        plan=plan,
        instance_type=config.get("instanceType") or DEFAULT_INSTANCE_TYPE,
        key_name=config.get("keyName") or DEFAULT_KEY_NAME,
        availability_zone=config.get("availabilityZone"),
        ssh_source_cidr=validate_source_cidr(config.get("sshSourceCidr") or DEFAULT_SSH_SOURCE_CIDR),
        ssh_user=config.get("sshUser") or DEFAULT_SSH_USER,
        restrict_private_ssh=bool(config.get_bool("restrictPrivateSsh")),
    )

    pulumi.log.info(f"bastion network plan: {plan.describe()}")
    return settings
