"""
Legacy construction path.

``from agent_compose import Agent`` predates the ``agent_compose.agent``
package. It still works and builds the same agent as
``agent_compose.agent.construct``, but logs a deprecation warning on every
construction.
"""

import logging
from typing import Optional

from .agent import Agent, agent_logger, construct
from .config import AgentConfig, TAgentId, TMetrics, TTools

logger = logging.getLogger(__name__)

DEPRECATION_MESSAGE = 'Please import "Agent" from "agent_compose.agent" instead of "agent_compose"'


def _warn_deprecated(config: AgentConfig, warn_logger: Optional[logging.Logger]) -> None:
    """Log the deprecation warning; failures here never reach the caller."""
    try:
        if warn_logger is None:
            warn_logger = agent_logger(config.name)
        warn_logger.warning(DEPRECATION_MESSAGE)
    except Exception as e:
        logger.debug(f"Could not log deprecation warning: {type(e).__name__}: {e}")


def construct_legacy(
    config: AgentConfig[TAgentId, TTools, TMetrics],
    logger: Optional[logging.Logger] = None,
) -> Agent[TAgentId, TTools, TMetrics]:
    """
    Construct an agent through the deprecated top-level import path.

    Same as ``agent_compose.agent.construct``, plus one warning logged per call.

    Args:
        config: Agent configuration
        logger: Logger for the agent and the warning (default: ``agent.<name>``)

    Returns:
        Agent instance
    """
    _warn_deprecated(config, logger)
    return construct(config, logger=logger)
