"""OpenSSH client configuration for reaching the private host via the bastion."""
from __future__ import annotations

from typing import Optional

__all__ = ["render_ssh_config"]


def render_ssh_config(
    bastion_address: str,
    private_address: str,
    user: str,
    *,
    bastion_alias: str = "bastion",
    private_alias: str = "private",
    identity_file: Optional[str] = None,
) -> str:
    """Render ``~/.ssh/config`` entries for the two hosts.

    The bastion block enables agent forwarding and the private block jumps
    through the bastion alias, so the private key never leaves the client.
    """
    for label, value in (("bastion address", bastion_address), ("private address", private_address), ("user", user)):
        if not value:
            raise ValueError(f"{label} must not be empty")

    def host_block(alias: str, address: str, extra: list[str]) -> list[str]:
        lines = [f"Host {alias}", f"    HostName {address}", f"    User {user}"]
        if identity_file:
            lines.append(f"    IdentityFile {identity_file}")
        return lines + [f"    {line}" for line in extra]

    blocks = [
        host_block(bastion_alias, bastion_address, ["ForwardAgent yes"]),
        host_block(private_alias, private_address, [f"ProxyJump {bastion_alias}"]),
    ]
    return "\n\n".join("\n".join(block) for block in blocks) + "\n"
