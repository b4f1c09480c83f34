"""
Agent construction.

This is the canonical import path:

    from agent_compose.agent import Agent, AgentConfig
"""

from .agent import Agent, construct
from .config import AgentConfig
from .deprecated import DEPRECATION_MESSAGE, construct_legacy

__all__ = ["Agent", "AgentConfig", "construct", "construct_legacy", "DEPRECATION_MESSAGE"]
