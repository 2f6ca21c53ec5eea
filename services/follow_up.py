import logging
from datetime import date, timedelta

import config
from api import StorefrontApiClient
from enums.follow_up_period import FollowUpPeriod
from exceptions.follow_up import InvalidFollowUpException
from models.follow_up import FollowUpReminderDTO
from repositories.cart import CartRepository


class FollowUpService:
    """Validation and payloads for agent follow-up reminders on carts and orders."""

    @staticmethod
    def days_until(target: date, today: date | None = None) -> int:
        """Whole days from today to target; 0 for today (or a past date)."""
        today = today or date.today()
        return max(0, (target - today).days)

    @staticmethod
    def validate(reminder: FollowUpReminderDTO, today: date | None = None):
        """
        Check a reminder before any network call.

        Disabled reminders are always valid.

        Raises:
            InvalidFollowUpException: No period, custom period without a date,
                custom date in the past, or comment too long
        """
        if not reminder.enabled:
            return

        today = today or date.today()

        if reminder.period is None:
            raise InvalidFollowUpException("Please select a follow-up period")

        if reminder.period == FollowUpPeriod.CUSTOM:
            if reminder.custom_date is None:
                raise InvalidFollowUpException("Please select a custom date")
            if reminder.custom_date < today:
                raise InvalidFollowUpException("Please select today's date or a future date")

        if len(reminder.comment) > config.FOLLOW_UP_COMMENT_MAX_LENGTH:
            raise InvalidFollowUpException(
                f"Comment cannot exceed {config.FOLLOW_UP_COMMENT_MAX_LENGTH} characters"
            )

    @staticmethod
    def resolve_days(reminder: FollowUpReminderDTO, today: date | None = None) -> int | None:
        if reminder.period == FollowUpPeriod.CUSTOM:
            if reminder.custom_date is not None:
                return FollowUpService.days_until(reminder.custom_date, today)
            return reminder.custom_days
        return reminder.period.days if reminder.period else None

    @staticmethod
    def due_date(reminder: FollowUpReminderDTO, today: date | None = None) -> date | None:
        """Date the agent should follow up, or None when no period applies."""
        today = today or date.today()
        days = FollowUpService.resolve_days(reminder, today)
        if days is None:
            return None
        return today + timedelta(days=days)

    @staticmethod
    def to_checkout_payload(reminder: FollowUpReminderDTO | None, today: date | None = None) -> dict | None:
        """followUpReminder field of POST /api/createOrder (null when disabled)."""
        if reminder is None or not reminder.enabled:
            return None
        return {
            "period": reminder.period.value,
            "customDays": FollowUpService.resolve_days(reminder, today) if reminder.period == FollowUpPeriod.CUSTOM else reminder.custom_days,
            "comment": reminder.comment,
        }

    @staticmethod
    def to_cart_payload(reminder: FollowUpReminderDTO, today: date | None = None) -> dict:
        """followUpReminder field of POST /api/client/cart-followup."""
        if not reminder.enabled:
            return {"enabled": False}
        payload = {
            "enabled": True,
            "period": reminder.period.value,
            "comment": reminder.comment,
        }
        if reminder.period == FollowUpPeriod.CUSTOM:
            payload["customDate"] = reminder.custom_date.isoformat()
            payload["customDays"] = FollowUpService.resolve_days(reminder, today)
        return payload

    @staticmethod
    async def save(reminder: FollowUpReminderDTO, client: StorefrontApiClient, today: date | None = None) -> str | None:
        """
        Validate and store a cart follow-up reminder.

        Returns:
            The id of the created follow-up (None when the backend sends none)
        """
        FollowUpService.validate(reminder, today)
        follow_up_id = await CartRepository.save_follow_up(FollowUpService.to_cart_payload(reminder, today), client)
        logging.info(f"Follow-up reminder saved: id={follow_up_id}, enabled={reminder.enabled}")
        return follow_up_id
