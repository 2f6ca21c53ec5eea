"""
Agent administration exceptions.
"""

from .base import StorefrontException


class AgentException(StorefrontException):
    """Base exception for agent administration errors."""
    pass


class AgentPartialUpdateException(AgentException):
    """
    Raised when the step-by-step agent update fails part way.

    Steps listed in completed_steps were accepted by the backend and are
    NOT rolled back.
    """

    def __init__(self, agent_id: str, failed_step: str, completed_steps: list[str], reason: str):
        super().__init__(
            f"Agent {agent_id} update failed at '{failed_step}' "
            f"(already applied: {', '.join(completed_steps) or 'none'}): {reason}",
            details={
                'agent_id': agent_id,
                'failed_step': failed_step,
                'completed_steps': completed_steps,
                'reason': reason,
            }
        )
        self.agent_id = agent_id
        self.failed_step = failed_step
        self.completed_steps = completed_steps
        self.reason = reason
