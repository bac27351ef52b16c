"""Error taxonomy for the IACR MCP server.

Every error is caught at the tool dispatcher and surfaced to the client as a
single internal error carrying the message.
"""


class IACRServerError(Exception):
    """Base class for failures raised while serving a tool call."""


class ValidationError(IACRServerError):
    """Tool arguments are missing or malformed."""

    def __init__(self, tool: str, fields: dict[str, str]):
        self.tool = tool
        self.fields = fields
        detail = "; ".join(f"{name}: {msg}" for name, msg in fields.items())
        super().__init__(f"Invalid arguments for {tool}: {detail}")


class FetchError(IACRServerError):
    """The feed or document server could not be reached or returned garbage."""


class NotFoundError(IACRServerError):
    """The requested paper is not in the current feed."""


class UnknownToolError(IACRServerError):
    """A call named a tool that is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")
