"""Package-wide constants."""

VERSION = "0.1.0"
PRODUCT = "github_auth"
DEFAULT_API_BASE = "https://api.github.com"
DEFAULT_PROFILE_BASE = "https://github.com"
