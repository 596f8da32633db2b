# config.py  –  environment driven settings for the GoHighLevel MCP server
#
#   GHL_API_KEY       private integration / OAuth access token   (required)
#   GHL_LOCATION_ID   default sub-account used by location tools (required)
#   GHL_BASE_URL      REST root, defaults to the LeadConnector host
#   DEBUG             1/true/yes turns on request tracing on stderr

import os, sys
from dataclasses import dataclass, replace
from dotenv import load_dotenv

from .errors import ConfigurationError

load_dotenv()

DEFAULT_BASE_URL = "https://services.leadconnectorhq.com"
API_VERSION = "2021-07-28"
CONVERSATIONS_VERSION = "2021-04-15"

DEBUG = os.getenv("DEBUG", "").lower() in ("1", "true", "yes")


def log(tag: str, *a, force: bool = False):
    """Trace line on stderr; stdout belongs to the MCP stdio transport."""
    if DEBUG or force:
        print(tag, *a, file=sys.stderr)


@dataclass
class GHLConfig:
    access_token: str
    base_url: str
    location_id: str
    version: str = API_VERSION

    def copy(self) -> "GHLConfig":
        return replace(self)


_REQUIRED = (
    ("GHL_API_KEY", "access_token"),
    ("GHL_BASE_URL", "base_url"),
    ("GHL_LOCATION_ID", "location_id"),
)


def load_config() -> GHLConfig:
    """Read the three GHL_* variables, failing fast on any that is empty."""
    config = GHLConfig(
        access_token=os.getenv("GHL_API_KEY", "").strip(),
        base_url=os.getenv("GHL_BASE_URL", DEFAULT_BASE_URL).strip(),
        location_id=os.getenv("GHL_LOCATION_ID", "").strip(),
    )
    for env_name, attr in _REQUIRED:
        if not getattr(config, attr):
            raise ConfigurationError(f"{env_name} environment variable is required")
    return config
