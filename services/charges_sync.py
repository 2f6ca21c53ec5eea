import asyncio
import logging
from typing import Any, Awaitable, Callable

import config
from enums.dashboard import Dashboard
from enums.request_state import RequestState
from exceptions.base import StorefrontException
from models.charges import ChargesConfig
from utils.error_handler import handle_service_error, handle_unexpected_error
from utils.localizator import Localizator

logger = logging.getLogger(__name__)


class ChargesSyncService:
    """
    Debounced persistence of the additional charges being edited.

    Every edit is scheduled; the push only starts once no edit arrived for
    `delay` seconds. A push that is still in flight when a newer one starts
    is cancelled, so an older configuration can never be written after a
    newer one.

    Usage:
        sync = ChargesSyncService(lambda c: CartRepository.update_additional_charges(c, client), notify=toast)
        summary = CartService.edit_charges(summary, loading_fee=1200)
        sync.schedule(summary.charges)
        ...
        await sync.aclose()
    """

    def __init__(self,
                 push: Callable[[ChargesConfig], Awaitable[Any]],
                 delay: float | None = None,
                 notify: Callable[[str], Any] | None = None,
                 on_success: Callable[[int, ChargesConfig], Any] | None = None):
        self._push = push
        self.delay = config.CHARGES_DEBOUNCE_SECONDS if delay is None else delay
        self._notify = notify
        self._on_success = on_success

        self._sequence = 0
        self._pending: tuple[int, ChargesConfig] | None = None
        self._timer: asyncio.Task | None = None
        self._in_flight: asyncio.Task | None = None

        self.state = RequestState.IDLE
        self.applied_sequence = 0
        self.last_error: Exception | None = None

    @property
    def latest_sequence(self) -> int:
        return self._sequence

    @property
    def has_pending(self) -> bool:
        return self._pending is not None

    def schedule(self, charges: ChargesConfig) -> int:
        """
        Schedule a push of charges and restart the debounce timer.

        Must be called from a running event loop.

        Returns:
            The edit sequence number assigned to this configuration
        """
        self._sequence += 1
        self._pending = (self._sequence, charges)
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = asyncio.create_task(self._fire_after_delay())
        logger.debug(f"Charges edit #{self._sequence} scheduled in {self.delay}s")
        return self._sequence

    async def _fire_after_delay(self):
        await asyncio.sleep(self.delay)
        self._timer = None
        self._send()

    def _send(self) -> asyncio.Task | None:
        if self._pending is None:
            return None
        sequence, charges = self._pending
        self._pending = None

        if self._in_flight is not None and not self._in_flight.done():
            logger.info(f"Cancelling stale charges push in favour of edit #{sequence}")
            self._in_flight.cancel()

        self._in_flight = asyncio.create_task(self._run_push(sequence, charges))
        return self._in_flight

    async def _run_push(self, sequence: int, charges: ChargesConfig):
        self.state = RequestState.PENDING
        try:
            await self._push(charges)
        except asyncio.CancelledError:
            logger.debug(f"Charges push #{sequence} cancelled")
            if self._in_flight is asyncio.current_task():
                # Closed without a newer push taking over
                self.state = RequestState.IDLE
            raise
        except StorefrontException as e:
            self._record_failure(sequence, e, self._failure_message(handle_service_error(e, Dashboard.CLIENT)))
            return
        except Exception as e:
            handle_unexpected_error(e, Dashboard.CLIENT)
            self._record_failure(sequence, e, self._failure_message())
            return

        if sequence < self.applied_sequence:
            logger.debug(f"Discarding completion of stale charges push #{sequence}")
            return
        self.applied_sequence = sequence
        self.last_error = None
        if sequence == self._sequence:
            self.state = RequestState.SUCCESS
        logger.info(f"Additional charges saved (edit #{sequence})")
        if self._on_success is not None:
            try:
                self._on_success(sequence, charges)
            except Exception as e:
                # Saved, but the caller could not apply the result
                self._record_failure(sequence, e, handle_unexpected_error(e, Dashboard.CLIENT))

    @staticmethod
    def _failure_message(reason: str | None = None) -> str:
        message = Localizator.get_text(Dashboard.CLIENT, "error_charges_update_failed")
        return f"{message}: {reason}" if reason else message

    def _record_failure(self, sequence: int, error: Exception, message: str):
        if sequence != self._sequence:
            # A newer edit supersedes this one; its own push reports the outcome
            logger.debug(f"Ignoring failure of superseded charges push #{sequence}: {error}")
            return
        logger.error(f"Failed to save additional charges (edit #{sequence}): {error}")
        self.state = RequestState.ERROR
        self.last_error = error
        if self._notify is not None:
            self._notify(message)

    async def flush(self):
        """Send a pending edit now (skipping the debounce) and wait for the push to finish."""
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None
        self._send()
        # A newer push may replace the awaited one while waiting
        while self._in_flight is not None and not self._in_flight.done():
            await asyncio.wait({self._in_flight})

    async def aclose(self):
        """Cancel the debounce timer and any in-flight push. Unsent edits are dropped."""
        tasks = [task for task in (self._timer, self._in_flight) if task is not None and not task.done()]
        for task in tasks:
            task.cancel()
        if tasks:
            await asyncio.gather(*tasks, return_exceptions=True)
        self._timer = None
        self._in_flight = None
        self._pending = None
