import logging

from api import StorefrontApiClient
from exceptions.api import ApiException, AuthenticationRequiredException
from exceptions.agent import AgentPartialUpdateException
from models.agent import AgentDTO, AgentUpdateDTO
from repositories.agent import AgentRepository


class AgentService:

    @staticmethod
    async def update_agent(client: StorefrontApiClient, agent_id: str, agent_update: AgentUpdateDTO) -> AgentDTO:
        """
        Update an agent's name, email and commission rate.

        Algorithm:
        1. Try the combined PUT /api/admin/agents/:id
        2. If it fails, PATCH name, then email, then commission, in that order
        3. Re-read the agent from the backend

        A failing PATCH stops the sequence. Earlier PATCHes stay applied on the
        backend (there is no rollback endpoint); the exception lists them.

        Raises:
            AgentPartialUpdateException: A fallback step failed
            AuthenticationRequiredException: No admin token
        """
        try:
            await AgentRepository.update(agent_id, agent_update, client)
            logging.info(f"Agent {agent_id} updated with combined request")
            return await AgentRepository.get_by_id(agent_id, client)
        except AuthenticationRequiredException:
            raise
        except ApiException as e:
            logging.warning(f"Combined update of agent {agent_id} failed ({e}), falling back to separate updates")

        steps = [
            ("name", lambda: AgentRepository.update_name(agent_id, agent_update.name, client)),
            ("email", lambda: AgentRepository.update_email(agent_id, agent_update.email, client)),
            ("commission", lambda: AgentRepository.update_commission(agent_id, agent_update, client)),
        ]
        completed_steps = []
        for step, call in steps:
            try:
                await call()
            except ApiException as e:
                logging.error(f"Agent {agent_id} update failed at {step}; applied so far: {completed_steps}")
                raise AgentPartialUpdateException(agent_id, step, completed_steps, str(e)) from e
            completed_steps.append(step)

        logging.info(f"Agent {agent_id} updated with separate requests")
        return await AgentRepository.get_by_id(agent_id, client)
