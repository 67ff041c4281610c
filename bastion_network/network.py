"""VPC, subnets, gateways and route tables for the bastion network."""
from __future__ import annotations

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from .settings import BastionSettings

__all__ = ["Network", "build_network", "DEFAULT_ROUTE"]

DEFAULT_ROUTE = "0.0.0.0/0"


@dataclass
class Network:
    vpc: aws.ec2.Vpc
    public_subnet: aws.ec2.Subnet
    private_subnet: aws.ec2.Subnet
    internet_gateway: aws.ec2.InternetGateway
    nat_eip: aws.ec2.Eip
    nat_gateway: aws.ec2.NatGateway
    public_route_table: aws.ec2.RouteTable
    private_route_table: aws.ec2.RouteTable
    route_table_associations: list[aws.ec2.RouteTableAssociation]


def build_network(name: str, settings: BastionSettings) -> Network:
    plan = settings.plan

    # ----- VPC -----
    vpc = aws.ec2.Vpc(f"{name}-vpc",
        cidr_block=str(plan.vpc_cidr),
        enable_dns_support=True,
        enable_dns_hostnames=True,
        tags={"Name": f"{name}-vpc"}
    )

    # ----- Internet Gateway -----
    igw = aws.ec2.InternetGateway(f"{name}-igw",
        vpc_id=vpc.id,
        tags={"Name": f"{name}-igw"}
    )

    # ----- Subnets -----
    public_subnet = aws.ec2.Subnet(f"{name}-public-subnet",
        vpc_id=vpc.id,
        cidr_block=str(plan.public_subnet_cidr),
        availability_zone=settings.availability_zone,
        map_public_ip_on_launch=True,
        tags={"Name": f"{name}-public-subnet"}
    )

    private_subnet = aws.ec2.Subnet(f"{name}-private-subnet",
        vpc_id=vpc.id,
        cidr_block=str(plan.private_subnet_cidr),
        availability_zone=settings.availability_zone,
        map_public_ip_on_launch=False,
        tags={"Name": f"{name}-private-subnet"}
    )

    # ----- Public Route Table -----
    public_rt = aws.ec2.RouteTable(f"{name}-public-rt",
        vpc_id=vpc.id,
        routes=[aws.ec2.RouteTableRouteArgs(
            cidr_block=DEFAULT_ROUTE,
            gateway_id=igw.id
        )],
        tags={"Name": f"{name}-public-rt"}
    )
    public_assoc = aws.ec2.RouteTableAssociation(f"{name}-public-rt-assoc",
        route_table_id=public_rt.id,
        subnet_id=public_subnet.id
    )

    # ----- NAT Gateway -----
    # The NAT gateway has no path out until the internet gateway is attached.
    eip = aws.ec2.Eip(f"{name}-nat-eip",
        domain="vpc",
        tags={"Name": f"{name}-nat-eip"}
    )
    nat_gw = aws.ec2.NatGateway(f"{name}-nat-gw",
        allocation_id=eip.id,
        subnet_id=public_subnet.id,
        tags={"Name": f"{name}-nat-gateway"},
        opts=pulumi.ResourceOptions(depends_on=[igw])
    )

    # ----- Private Route Table -----
    private_rt = aws.ec2.RouteTable(f"{name}-private-rt",
        vpc_id=vpc.id,
        routes=[aws.ec2.RouteTableRouteArgs(
            cidr_block=DEFAULT_ROUTE,
            nat_gateway_id=nat_gw.id
        )],
        tags={"Name": f"{name}-private-rt"}
    )
    private_assoc = aws.ec2.RouteTableAssociation(f"{name}-private-rt-assoc",
        route_table_id=private_rt.id,
        subnet_id=private_subnet.id
    )

    return Network(
        vpc=vpc,
        public_subnet=public_subnet,
        private_subnet=private_subnet,
        internet_gateway=igw,
        nat_eip=eip,
        nat_gateway=nat_gw,
        public_route_table=public_rt,
        private_route_table=private_rt,
        route_table_associations=[public_assoc, private_assoc],
    )
