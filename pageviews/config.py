"""
Wikimedia Pageviews API – client configuration.

Constants are resolved once at import. ClientConfig is the explicit,
read-only configuration handed to PageviewsClient; from_env() reads
optional overrides from the environment (and a .env file).
"""

import os
from importlib.metadata import PackageNotFoundError, version

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

LIBRARY_NAME = "pageviews"
try:
    VERSION = version(LIBRARY_NAME)
except PackageNotFoundError:
    # source checkout that was never installed
    VERSION = "0.0.0"
REPOSITORY_URL = "https://github.com/pageviews-py/pageviews"

BASE_URL = "https://wikimedia.org/api/rest_v1"
USER_AGENT = f"{LIBRARY_NAME}-v{VERSION} ({REPOSITORY_URL})"

ACCESS_DEFAULT = "all-access"
ACCESS_ALLOWED = ("all-access", "desktop", "mobile-web", "mobile-app")

AGENT_DEFAULT = "all-agents"
AGENT_ALLOWED = ("all-agents", "user", "spider", "bot")

GRANULARITY_DEFAULT = "daily"
GRANULARITY_ALLOWED = ("daily",)

# Upper bound used by strict limit validation (the top endpoint returns 1000)
LIMIT_MAX = 1000

# (field, environment variable) pairs read by ClientConfig.from_env
ENV_OVERRIDES = (
    ("base_url", "PAGEVIEWS_BASE_URL"),
    ("user_agent", "PAGEVIEWS_USER_AGENT"),
    ("debug", "PAGEVIEWS_DEBUG"),
    ("timeout", "PAGEVIEWS_TIMEOUT"),
    ("strict_limit", "PAGEVIEWS_STRICT_LIMIT"),
)


class ClientConfig(BaseModel):
    """
    Configuration for a PageviewsClient.

    Attributes:
        base_url: Versioned REST API root, without trailing slash.
        user_agent: Value of the User-Agent header sent with every request.
        debug: Log outgoing request options when no on_request hook is given.
        timeout: Seconds passed to the transport as is (None = no timeout).
        strict_limit: Reject top-articles limits outside 1..1000.
    """

    model_config = ConfigDict(frozen=True)

    base_url: str = BASE_URL
    user_agent: str = USER_AGENT
    debug: bool = False
    timeout: float | None = None
    strict_limit: bool = False

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """
        Build a config from PAGEVIEWS_* environment variables.

        Loads a .env file first. Unset or empty variables keep their defaults;
        the raw strings are parsed by the model fields.

        Raises:
            pydantic.ValidationError: A variable holds a value its field
                cannot parse (e.g. PAGEVIEWS_DEBUG=treu).
        """
        load_dotenv()
        overrides: dict = {}
        for field, name in ENV_OVERRIDES:
            value = os.getenv(name)
            if value:
                overrides[field] = value

        if "base_url" in overrides:
            overrides["base_url"] = overrides["base_url"].rstrip("/")

        return cls(**overrides)
