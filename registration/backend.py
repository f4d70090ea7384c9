import asyncio
import logging
from typing import Awaitable, Callable

from registration.state import RegistrationRecord


logger = logging.getLogger(__name__)

SubmitFunction = Callable[[RegistrationRecord], Awaitable[None]]

DEFAULT_SUBMIT_DELAY = 2.0


def make_simulated_submit(delay: float = DEFAULT_SUBMIT_DELAY) -> SubmitFunction:
    async def simulate_submission(record: RegistrationRecord) -> None:
        # no backend yet: wait like a request would, then accept
        await asyncio.sleep(delay)
        logger.info("submitted registration: %s", record.model_dump())

    return simulate_submission
