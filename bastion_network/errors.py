import pulumi


class BastionConfigError(pulumi.RunError):
    """Raised when stack configuration cannot produce a valid resource graph."""
