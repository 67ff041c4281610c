"""Bastion network Pulumi program"""

from bastion_network import build_stack, load_settings


# ----- CONFIG -----
settings = load_settings()

# ----- RESOURCES -----
stack = build_stack(settings)

# ----- Outputs -----
stack.export()
