from enum import Enum


class FollowUpPeriod(str, Enum):
    SEVEN_DAYS = "7days"
    TEN_DAYS = "10days"
    ONE_MONTH = "1month"
    CUSTOM = "custom"  # Explicit date picked by the user

    @property
    def days(self) -> int | None:
        """Fixed length of the period, None for CUSTOM."""
        return {
            FollowUpPeriod.SEVEN_DAYS: 7,
            FollowUpPeriod.TEN_DAYS: 10,
            FollowUpPeriod.ONE_MONTH: 30,
            FollowUpPeriod.CUSTOM: None,
        }[self]

    @property
    def label(self) -> str:
        return {
            FollowUpPeriod.SEVEN_DAYS: "7 Days",
            FollowUpPeriod.TEN_DAYS: "10 Days",
            FollowUpPeriod.ONE_MONTH: "1 Month",
            FollowUpPeriod.CUSTOM: "Custom Date",
        }[self]
