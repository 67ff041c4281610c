import pulumi
import pytest

from bastion_network.plan import NetworkPlan
from bastion_network.settings import BastionSettings

PUBLIC_KEY = "ssh-ed25519 AAAAC3NzaC1lZDI1NTE5AAAAIJ7q0Zb4n0gLrVd1c3m5bX9m0pQeZsXJf2m2nQG1F0Qd operator@laptop"
BASTION_PUBLIC_IP = "203.0.113.10"
PRIVATE_INSTANCE_IP = "10.0.0.20"


class BastionMocks(pulumi.runtime.Mocks):
    def __init__(self):
        self.resources = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        outputs = dict(args.inputs)
        if args.typ == "aws:ec2/instance:Instance":
            if args.inputs.get("associatePublicIpAddress"):
                outputs["publicIp"] = BASTION_PUBLIC_IP
                outputs["privateIp"] = "10.0.0.4"
            else:
                outputs["privateIp"] = PRIVATE_INSTANCE_IP
        elif args.typ == "aws:ec2/eip:Eip":
            outputs["publicIp"] = "198.51.100.7"
        self.resources.append((args.typ, args.name))
        return [args.name + "_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}


MOCKS = BastionMocks()
pulumi.runtime.set_mocks(MOCKS, project="bastion-network", stack="test", preview=False)


def make_settings(**overrides):
    values = dict(
        ami="ami-052064a798f08f0d3",
        public_key=PUBLIC_KEY,
        plan=NetworkPlan.from_strings("10.0.0.0/27", "10.0.0.0/28", "10.0.0.16/28"),
    )
    values.update(overrides)
    return BastionSettings(**values)


@pytest.fixture
def public_key_file(tmp_path):
    path = tmp_path / "id_ed25519.pub"
    path.write_text(PUBLIC_KEY + "\n")
    return path
