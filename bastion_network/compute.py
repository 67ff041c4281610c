"""Key pair and the two EC2 instances."""
from __future__ import annotations

from dataclasses import dataclass

import pulumi_aws as aws

from .network import Network
from .security import Security
from .settings import BastionSettings

__all__ = ["Instances", "build_key_pair", "build_instances"]


@dataclass
class Instances:
    bastion: aws.ec2.Instance
    private: aws.ec2.Instance


def build_key_pair(name: str, settings: BastionSettings) -> aws.ec2.KeyPair:
    # Only the public half is registered; the private key stays with the operator
    # and reaches the private host through agent forwarding.
    return aws.ec2.KeyPair(f"{name}-key",
        key_name=settings.key_name,
        public_key=settings.public_key,
        tags={"Name": settings.key_name}
    )


def build_instances(
    name: str,
    settings: BastionSettings,
    network: Network,
    security: Security,
    key_pair: aws.ec2.KeyPair,
) -> Instances:
    # ----- Bastion EC2 -----
    bastion = aws.ec2.Instance(f"{name}-bastion-instance",
        ami=settings.ami,
        instance_type=settings.instance_type,
        subnet_id=network.public_subnet.id,
        vpc_security_group_ids=[security.bastion_group.id],
        associate_public_ip_address=True,
        key_name=key_pair.key_name,
        tags={"Name": f"{name}-bastion"}
    )

    # ----- Private EC2 -----
    private_instance = aws.ec2.Instance(f"{name}-private-instance",
        ami=settings.ami,
        instance_type=settings.instance_type,
        subnet_id=network.private_subnet.id,
        vpc_security_group_ids=[security.private_group.id],
        associate_public_ip_address=False,
        key_name=key_pair.key_name,
        tags={"Name": f"{name}-private"}
    )

    return Instances(bastion=bastion, private=private_instance)
