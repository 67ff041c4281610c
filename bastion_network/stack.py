"""Wires the bastion network resources into one graph."""
from __future__ import annotations

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from .compute import Instances, build_instances, build_key_pair
from .network import Network, build_network
from .security import Security, build_security
from .settings import BastionSettings
from .ssh_config import render_ssh_config

__all__ = ["Stack", "build_stack"]


@dataclass
class Stack:
    settings: BastionSettings
    network: Network
    security: Security
    key_pair: aws.ec2.KeyPair
    instances: Instances

    def ssh_config(self) -> pulumi.Output[str]:
        return pulumi.Output.all(
            self.instances.bastion.public_ip,
            self.instances.private.private_ip,
        ).apply(lambda addresses: render_ssh_config(addresses[0], addresses[1], self.settings.ssh_user))

    def export(self) -> None:
        pulumi.export("vpc_id", self.network.vpc.id)
        pulumi.export("public_subnet_id", self.network.public_subnet.id)
        pulumi.export("private_subnet_id", self.network.private_subnet.id)
        pulumi.export("bastion_public_ip", self.instances.bastion.public_ip)
        pulumi.export("private_instance_private_ip", self.instances.private.private_ip)
        pulumi.export("nat_gateway_ip", self.network.nat_eip.public_ip)
        pulumi.export("ssh_config", self.ssh_config())


def build_stack(settings: BastionSettings, name: str = "bastion") -> Stack:
    network = build_network(name, settings)
    security = build_security(name, settings, network)
    key_pair = build_key_pair(name, settings)
    instances = build_instances(name, settings, network, security, key_pair)
    return Stack(
        settings=settings,
        network=network,
        security=security,
        key_pair=key_pair,
        instances=instances,
    )
