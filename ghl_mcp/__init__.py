"""GoHighLevel CRM tools for MCP hosts."""

from .client import GHLApiClient
from .config import GHLConfig, load_config
from .errors import (
    ConfigurationError,
    GHLApiError,
    GHLError,
    InvalidArgumentsError,
    MissingDataError,
    ToolExecutionError,
    UnknownToolError,
)
from .tools import ToolRegistry

__version__ = "1.0.0"
