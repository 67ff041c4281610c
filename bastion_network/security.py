"""Security groups guarding SSH access to the bastion and private instances."""
from __future__ import annotations

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from .network import DEFAULT_ROUTE, Network
from .settings import BastionSettings

__all__ = ["Security", "build_security", "SSH_PORT"]

SSH_PORT = 22


@dataclass
class Security:
    bastion_group: aws.ec2.SecurityGroup
    private_group: aws.ec2.SecurityGroup

    @property
    def shared(self) -> bool:
        return self.bastion_group is self.private_group


def _allow_all_egress() -> list[aws.ec2.SecurityGroupEgressArgs]:
    return [aws.ec2.SecurityGroupEgressArgs(
        protocol="-1",
        from_port=0,
        to_port=0,
        cidr_blocks=[DEFAULT_ROUTE]
    )]


def build_security(name: str, settings: BastionSettings, network: Network) -> Security:
    # ----- SSH Security Group -----
    ssh_sg = aws.ec2.SecurityGroup(f"{name}-ssh-sg",
        vpc_id=network.vpc.id,
        description=f"Allow SSH from {settings.ssh_source_cidr}",
        ingress=[aws.ec2.SecurityGroupIngressArgs(
            protocol="tcp",
            from_port=SSH_PORT,
            to_port=SSH_PORT,
            cidr_blocks=[settings.ssh_source_cidr]
        )],
        egress=_allow_all_egress(),
        tags={"Name": f"{name}-ssh-sg"}
    )

    if not settings.restrict_private_ssh:
        pulumi.log.warn(
            f"the private instance accepts SSH from {settings.ssh_source_cidr} like the bastion does; "
            "set restrictPrivateSsh to only admit connections from the bastion"
        )
        return Security(bastion_group=ssh_sg, private_group=ssh_sg)

    # ----- Private Security Group -----
    # Only the bastion may open SSH sessions to the private instance.
    private_sg = aws.ec2.SecurityGroup(f"{name}-private-sg",
        vpc_id=network.vpc.id,
        description="Allow SSH from the bastion instance",
        ingress=[aws.ec2.SecurityGroupIngressArgs(
            protocol="tcp",
            from_port=SSH_PORT,
            to_port=SSH_PORT,
            security_groups=[ssh_sg.id]
        )],
        egress=_allow_all_egress(),
        tags={"Name": f"{name}-private-sg"}
    )
    return Security(bastion_group=ssh_sg, private_group=private_sg)
