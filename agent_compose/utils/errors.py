"""Custom exceptions for agent construction."""


class AgentComposeError(Exception):
    """Base exception for all agent_compose errors."""
    pass


class ConfigurationError(AgentComposeError):
    """Raised when an agent configuration has the wrong shape."""
    pass
