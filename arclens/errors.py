"""Exception hierarchy raised by the lens coordination engine."""


class ArcLensError(Exception):
    """Base class for all errors raised by :mod:`arclens`."""


class ConfigurationError(ArcLensError, ValueError):
    """Raised when a group or layout is constructed with invalid options."""


class MembershipError(ConfigurationError):
    """Raised when a lens already belongs to another group of the same kind."""

    def __init__(self, kind: str, lens: object) -> None:
        super().__init__(
            f"Lens {lens!r} is already in a {kind} group. "
            f"Each lens can only belong to one {kind} group at a time."
        )
        self.kind = kind
        self.lens = lens


class ReactiveCycleError(ArcLensError, RuntimeError):
    """Raised when a reactive rule keeps invalidating itself without settling."""


__all__ = [
    "ArcLensError",
    "ConfigurationError",
    "MembershipError",
    "ReactiveCycleError",
]
