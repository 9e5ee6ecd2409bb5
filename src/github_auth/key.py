"""Public key value object."""

from dataclasses import dataclass, field

from ._constants import DEFAULT_PROFILE_BASE


@dataclass(frozen=True)
class Key:
    """A public key and the GitHub username it belongs to.

    ``profile_base`` only affects :attr:`url`; it takes no part in equality.
    """

    username: str
    key: str
    profile_base: str = field(default=DEFAULT_PROFILE_BASE, compare=False)

    @property
    def url(self) -> str:
        return f"{self.profile_base.rstrip('/')}/{self.username}"

    def __str__(self) -> str:
        """Render as an authorized_keys line, commented with the owner's profile URL."""
        return f"{self.key} {self.url}"
