"""
Unit Tests: FollowUpService

Tests for services/follow_up.py covering:
- validate() - period, custom date and comment rules
- due_date() / resolve_days()
- checkout and cart payloads
- save()
"""

from datetime import date
from unittest.mock import AsyncMock, patch

import pytest

from enums.follow_up_period import FollowUpPeriod
from exceptions.follow_up import InvalidFollowUpException
from models.follow_up import FollowUpReminderDTO
from services.follow_up import FollowUpService

TODAY = date(2026, 3, 10)


class TestValidate:

    def test_disabled_reminder_always_valid(self):
        FollowUpService.validate(FollowUpReminderDTO(enabled=False, period=None, comment="x" * 1000), TODAY)

    def test_missing_period(self):
        with pytest.raises(InvalidFollowUpException) as exc_info:
            FollowUpService.validate(FollowUpReminderDTO(enabled=True, period=None), TODAY)
        assert exc_info.value.details["reason"] == "Please select a follow-up period"

    def test_custom_period_needs_date(self):
        with pytest.raises(InvalidFollowUpException) as exc_info:
            FollowUpService.validate(FollowUpReminderDTO(enabled=True, period=FollowUpPeriod.CUSTOM), TODAY)
        assert exc_info.value.details["reason"] == "Please select a custom date"

    def test_custom_date_in_past(self):
        reminder = FollowUpReminderDTO(enabled=True, period=FollowUpPeriod.CUSTOM, custom_date=date(2026, 3, 9))
        with pytest.raises(InvalidFollowUpException):
            FollowUpService.validate(reminder, TODAY)

    def test_custom_date_today_is_valid(self):
        reminder = FollowUpReminderDTO(enabled=True, period=FollowUpPeriod.CUSTOM, custom_date=TODAY)
        FollowUpService.validate(reminder, TODAY)

    def test_comment_too_long(self):
        reminder = FollowUpReminderDTO(enabled=True, comment="x" * 501)
        with pytest.raises(InvalidFollowUpException) as exc_info:
            FollowUpService.validate(reminder, TODAY)
        assert exc_info.value.details["reason"] == "Comment cannot exceed 500 characters"

    def test_comment_at_limit_is_valid(self):
        FollowUpService.validate(FollowUpReminderDTO(enabled=True, comment="x" * 500), TODAY)


class TestDueDate:

    @pytest.mark.parametrize("period,expected", [
        (FollowUpPeriod.SEVEN_DAYS, date(2026, 3, 17)),
        (FollowUpPeriod.TEN_DAYS, date(2026, 3, 20)),
        (FollowUpPeriod.ONE_MONTH, date(2026, 4, 9)),
    ])
    def test_fixed_periods(self, period, expected):
        assert FollowUpService.due_date(FollowUpReminderDTO(enabled=True, period=period), TODAY) == expected

    def test_custom_date(self):
        reminder = FollowUpReminderDTO(enabled=True, period=FollowUpPeriod.CUSTOM, custom_date=date(2026, 3, 25))
        assert FollowUpService.resolve_days(reminder, TODAY) == 15
        assert FollowUpService.due_date(reminder, TODAY) == date(2026, 3, 25)

    def test_no_period(self):
        assert FollowUpService.due_date(FollowUpReminderDTO(enabled=True, period=None), TODAY) is None


class TestPayloads:

    def test_checkout_payload_disabled(self):
        assert FollowUpService.to_checkout_payload(FollowUpReminderDTO(enabled=False), TODAY) is None
        assert FollowUpService.to_checkout_payload(None, TODAY) is None

    def test_checkout_payload_custom(self):
        reminder = FollowUpReminderDTO(enabled=True, period=FollowUpPeriod.CUSTOM,
                                       custom_date=date(2026, 3, 20), comment="Call about slabs")
        assert FollowUpService.to_checkout_payload(reminder, TODAY) == {
            "period": "custom",
            "customDays": 10,
            "comment": "Call about slabs",
        }

    def test_cart_payload_disabled(self):
        assert FollowUpService.to_cart_payload(FollowUpReminderDTO(enabled=False), TODAY) == {"enabled": False}

    def test_cart_payload_custom(self):
        reminder = FollowUpReminderDTO(enabled=True, period=FollowUpPeriod.CUSTOM, custom_date=date(2026, 3, 20))
        assert FollowUpService.to_cart_payload(reminder, TODAY) == {
            "enabled": True,
            "period": "custom",
            "comment": "",
            "customDate": "2026-03-20",
            "customDays": 10,
        }


class TestSave:

    @pytest.mark.asyncio
    async def test_save_valid_reminder(self, mock_api_client):
        reminder = FollowUpReminderDTO(enabled=True, period=FollowUpPeriod.SEVEN_DAYS, comment="Quote pending")

        with patch('services.follow_up.CartRepository.save_follow_up', new_callable=AsyncMock,
                   return_value="fu-1") as mock_save:
            follow_up_id = await FollowUpService.save(reminder, mock_api_client, TODAY)

        assert follow_up_id == "fu-1"
        mock_save.assert_awaited_once_with(
            {"enabled": True, "period": "7days", "comment": "Quote pending"}, mock_api_client
        )

    @pytest.mark.asyncio
    async def test_invalid_reminder_not_saved(self, mock_api_client):
        reminder = FollowUpReminderDTO(enabled=True, period=FollowUpPeriod.CUSTOM)

        with patch('services.follow_up.CartRepository.save_follow_up', new_callable=AsyncMock) as mock_save:
            with pytest.raises(InvalidFollowUpException):
                await FollowUpService.save(reminder, mock_api_client, TODAY)

        mock_save.assert_not_awaited()
