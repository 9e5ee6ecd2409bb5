"""Client configuration."""
import logging
import os
from dataclasses import dataclass
from urllib.parse import urlsplit

from ._constants import DEFAULT_API_BASE, DEFAULT_PROFILE_BASE, PRODUCT, VERSION

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Settings shared by every KeysClient built from it.

    ``product`` and ``version`` make up the ``User-Agent`` header sent to
    GitHub (``<product>-<version>``). ``api_base`` may point at a GitHub
    Enterprise API root. ``timeout`` is handed to the default transport.
    """

    product: str = PRODUCT
    version: str = VERSION
    api_base: str = DEFAULT_API_BASE
    timeout: float = 10.0

    def __post_init__(self) -> None:
        if not self.api_base.startswith("https://"): raise ValueError("api_base must use HTTPS")
        if self.timeout <= 0: raise ValueError("timeout must be positive")

    @property
    def user_agent(self) -> str:
        return f"{self.product}-{self.version}"

    @property
    def profile_base(self) -> str:
        """Web root that user profiles live under: github.com, or the Enterprise host."""
        if self.api_base.rstrip("/") == DEFAULT_API_BASE:
            return DEFAULT_PROFILE_BASE
        parts = urlsplit(self.api_base)
        return f"{parts.scheme}://{parts.netloc}"


def load_config_from_env() -> ClientConfig:
    """Build a ClientConfig from ``GITHUB_AUTH_*`` variables, defaulting anything unset."""
    timeout_raw = os.environ.get("GITHUB_AUTH_TIMEOUT", "")
    try:
        timeout = float(timeout_raw) if timeout_raw else 10.0
    except ValueError as e:
        raise ValueError(f"GITHUB_AUTH_TIMEOUT must be a number, got {timeout_raw!r}") from e

    config = ClientConfig(
        product=os.environ.get("GITHUB_AUTH_PRODUCT") or PRODUCT,
        version=os.environ.get("GITHUB_AUTH_VERSION") or VERSION,
        api_base=os.environ.get("GITHUB_AUTH_API_BASE", DEFAULT_API_BASE).rstrip("/"),
        timeout=timeout,
    )
    logger.debug("Loaded client config: api_base=%s user_agent=%s", config.api_base, config.user_agent)
    return config
