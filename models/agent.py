from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from models.charges import to_json_number


class AgentDTO(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str | None = Field(default=None, alias="_id")
    name: str
    email: str
    commission_rate: Decimal | None = None


class AgentUpdateDTO(BaseModel):
    name: str
    email: str
    commission_rate: Decimal = Field(ge=0)

    def to_payload(self) -> dict:
        return {
            "name": self.name,
            "email": self.email,
            "commissionRate": to_json_number(self.commission_rate),
        }
