from datetime import date

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from enums.follow_up_period import FollowUpPeriod


class FollowUpReminderDTO(BaseModel):
    """Agent follow-up reminder attached to a cart or an order."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    enabled: bool = False
    period: FollowUpPeriod | None = FollowUpPeriod.SEVEN_DAYS
    custom_days: int | None = None
    custom_date: date | None = None
    comment: str = ""
