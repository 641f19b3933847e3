"""SIM implementation - scripted debugging session for manual testing."""

import asyncio
import random
from typing import Any, Protocol

import httpx

from timeline.logging_config import get_logger
from timeline.recorder import now_millis

logger = get_logger(__name__)

TARGETS = ["app", "worker", "admin"]


class ISim(Protocol):
    """Generate timeline events over the HTTP API."""

    async def start(self) -> None:
        """Start scripted scenario."""
        ...

    async def stop(self) -> None:
        """Stop scenario."""
        ...


def build_session_events(target_name: str, round_no: int) -> list[dict[str, Any]]:
    """Build one edit/compile/reload/snapshot cycle for a target."""
    failed = round_no % 3 == 1
    events: list[dict[str, Any]] = [
        {
            "timestamp": now_millis(),
            "type": "compilation",
            "targetName": target_name,
            "data": (
                {"status": "error", "errors": [f"{target_name}.py:{round_no}: type mismatch"]}
                if failed
                else {"status": "success"}
            ),
        },
        {
            "timestamp": now_millis(),
            "type": "hot_reload",
            "targetName": target_name,
            "data": {"status": "skipped" if failed else "success"},
        },
    ]
    if not failed:
        snapshot_time = now_millis()
        events.append(
            {
                "timestamp": snapshot_time,
                "type": "debugger_snapshot",
                "targetName": target_name,
                "data": {
                    "targetName": target_name,
                    "timestamp": snapshot_time,
                    "model": {"counter": round_no},
                    "history": {
                        "numMessages": round_no,
                        "recent": [{"msg": "Increment"}] * min(round_no, 3),
                        "snapshots": [],
                    },
                    "state": {"paused": False},
                    "programType": "application",
                },
            }
        )
    return events


class Sim:
    """SIM replaying a few rounds of edits across several targets."""

    def __init__(
        self,
        api_url: str = "http://localhost:8000",
        rounds: int = 5,
    ):
        self._api_url = api_url
        self._rounds = rounds
        self._running = False
        self._task: asyncio.Task | None = None
        self._client: httpx.AsyncClient | None = None

    async def start(self) -> None:
        """Start scripted scenario."""
        if self._running:
            return

        # Release the client and task of a scenario that ended on its own
        await self.stop()

        self._running = True
        self._client = httpx.AsyncClient()

        # Start background task
        self._task = asyncio.create_task(self._run_scenario())

    async def stop(self) -> None:
        """Stop scenario."""
        self._running = False

        if self._task:
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                pass
            self._task = None

        if self._client:
            await self._client.aclose()
            self._client = None

    async def _run_scenario(self) -> None:
        """Run scripted scenario."""
        logger.info("SIM: started (%d rounds, targets=%s)", self._rounds, TARGETS)
        try:
            for round_no in range(self._rounds):
                if not self._running:
                    break

                for target_name in TARGETS:
                    if not self._running:
                        break

                    for event in build_session_events(target_name, round_no):
                        await self._send_event(event)

                    # Random delay between targets (0.5-1.5 seconds)
                    await asyncio.sleep(random.uniform(0.5, 1.5))

        except asyncio.CancelledError:
            pass
        except Exception as e:
            logger.error("SIM scenario error: %s", e)
        finally:
            self._running = False
            logger.info("SIM: completed")

    async def _send_event(self, event: dict[str, Any]) -> None:
        """Send an event via HTTP API."""
        if not self._client:
            return

        try:
            response = await self._client.post(
                f"{self._api_url}/api/timeline/events",
                json=event,
                timeout=10.0,
            )

            if response.status_code == 200:
                logger.info("SIM: %s -> %s", event["targetName"], event["type"])
            else:
                logger.error(
                    "SIM: Error sending event: %s",
                    response.status_code,
                )

        except Exception as e:
            logger.error("SIM: Failed to send event: %s", e)
