from api import StorefrontApiClient, parse_payload
from models.agent import AgentDTO, AgentUpdateDTO
from models.charges import to_json_number


class AgentRepository:
    """Admin endpoints for sales agents. The client must carry an admin token."""

    @staticmethod
    async def get_by_id(agent_id: str, client: StorefrontApiClient) -> AgentDTO:
        path = f"/api/admin/agents/{agent_id}"
        payload = await client.get(path)
        return parse_payload(AgentDTO, payload.get("data") or {}, path)

    @staticmethod
    async def update(agent_id: str, agent_update: AgentUpdateDTO, client: StorefrontApiClient):
        await client.put(f"/api/admin/agents/{agent_id}", agent_update.to_payload())

    @staticmethod
    async def update_name(agent_id: str, name: str, client: StorefrontApiClient):
        await client.patch(f"/api/admin/agents/{agent_id}/update-name", {"name": name})

    @staticmethod
    async def update_email(agent_id: str, email: str, client: StorefrontApiClient):
        await client.patch(f"/api/admin/agents/{agent_id}/update-email", {"email": email})

    @staticmethod
    async def update_commission(agent_id: str, agent_update: AgentUpdateDTO, client: StorefrontApiClient):
        await client.patch(f"/api/admin/agents/{agent_id}/commission",
                           {"commissionRate": to_json_number(agent_update.commission_rate)})
