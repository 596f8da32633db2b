from typing import Optional


class GHLError(Exception):
    """Base class for everything this package raises on purpose."""


class ConfigurationError(GHLError):
    pass


class UnknownToolError(GHLError):
    def __init__(self, name: str, domain: Optional[str] = None):
        self.name = name
        self.domain = domain
        if domain:
            super().__init__(f"Unknown {domain} tool: {name}")
        else:
            super().__init__(f"Unknown tool: {name}")


class GHLApiError(GHLError):
    """Upstream failure: non-2xx status, or no response at all (status None)."""

    def __init__(self, message: str, status: Optional[int] = None):
        self.status = status
        if status is None:
            super().__init__(f"GHL API Error: {message}")
        else:
            super().__init__(f"GHL API Error ({status}): {message}")


class MissingDataError(GHLError):
    """The call went through but the envelope carried no usable data."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "Unknown API error")


class ToolExecutionError(GHLError):
    def __init__(self, action: str, cause: BaseException):
        self.action = action
        self.cause = cause
        super().__init__(f"Failed to {action}: {cause}")


class InvalidArgumentsError(GHLError):
    def __init__(self, missing):
        self.missing = list(missing)
        super().__init__(f"Missing required parameter(s): {', '.join(self.missing)}")
