"""Pulumi resources for a VPC with a public bastion and a private instance.

Import the pieces as:

    from bastion_network import build_stack, load_settings
"""
from .errors import BastionConfigError  # noqa: F401
from .plan import NetworkPlan  # noqa: F401
from .settings import BastionSettings, load_settings, read_public_key  # noqa: F401
from .ssh_config import render_ssh_config  # noqa: F401
from .stack import Stack, build_stack  # noqa: F401
