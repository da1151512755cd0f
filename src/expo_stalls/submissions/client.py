"""Best-effort write path for feedback and corrections.

Rows are appended to the external log with a single POST. The endpoint's reply
is deliberately not interpreted: the deployed Apps Script answers through a
redirect whose status says nothing reliable about the append. A dispatched
request is therefore reported as ``UNCONFIRMED`` rather than delivered, and
callers treat it as accepted. Only a request that could not be sent at all is
a failure.
"""

from __future__ import annotations

import asyncio
import logging
from enum import StrEnum
from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from collections.abc import Sequence

    from expo_stalls.config import SheetsConfig
    from expo_stalls.models.submission import LogName, Scalar

logger = logging.getLogger(__name__)


class SubmissionOutcome(StrEnum):
    DELIVERED = "delivered"
    UNCONFIRMED = "unconfirmed"
    DISPATCH_FAILED = "dispatch_failed"

    @property
    def accepted(self) -> bool:
        """True when the UI should report success."""
        return self is not SubmissionOutcome.DISPATCH_FAILED


# Raised before any byte of the request reached the endpoint.
_NOT_DISPATCHED = (
    httpx.ConnectError,
    httpx.ConnectTimeout,
    httpx.PoolTimeout,
    httpx.UnsupportedProtocol,
    httpx.InvalidURL,
)


class SubmissionClient:
    """Appends one row to a named log. Never retries and never raises."""

    def __init__(self, client: httpx.AsyncClient, config: SheetsConfig) -> None:
        self._client = client
        self._config = config

    @property
    def demo_mode(self) -> bool:
        return not self._config.is_configured

    async def submit(self, target: LogName, values: Sequence[Scalar]) -> SubmissionOutcome:
        """Send ``values`` as a new row of ``target``."""
        payload = {"sheetName": str(target), "values": list(values)}

        if self.demo_mode:
            logger.info("[Demo] Submitted — sheet=%s values=%s", target, payload["values"])
            await asyncio.sleep(self._config.demo_delay)
            return SubmissionOutcome.DELIVERED

        try:
            response = await self._client.post(
                self._config.script_url,
                json=payload,
                timeout=self._config.submit_timeout,
                follow_redirects=False,
            )
        except _NOT_DISPATCHED as exc:
            logger.error("Submit error — sheet=%s %s: %s", target, type(exc).__name__, exc)
            return SubmissionOutcome.DISPATCH_FAILED
        except httpx.TimeoutException:
            logger.warning(
                "Submit timed out after %.1fs — sheet=%s; outcome unknown",
                self._config.submit_timeout,
                target,
            )
            return SubmissionOutcome.UNCONFIRMED
        except httpx.HTTPError as exc:
            logger.error("Submit error — sheet=%s %s: %s", target, type(exc).__name__, exc)
            return SubmissionOutcome.DISPATCH_FAILED

        logger.info("Submitted — sheet=%s http_status=%d (not verified)", target, response.status_code)
        return SubmissionOutcome.UNCONFIRMED
