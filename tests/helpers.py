import asyncio
from typing import List, Optional, Tuple

from registration.state import RegistrationRecord


VALID_DRAFT = {"name": "Al", "email": "al@x.com", "age": 16, "course": "math"}
INVALID_DRAFT = {"name": "A", "email": "bad", "age": 10, "course": ""}


class RecordingNotifier:
    def __init__(self):
        self.calls: List[Tuple[str, str]] = []

    def notify(self, title: str, description: str) -> None:
        self.calls.append((title, description))


class FakeBackend:
    """Submit function that records calls and can be held open or made to fail."""

    def __init__(self, error: Optional[Exception] = None, hold: bool = False):
        self.records: List[RegistrationRecord] = []
        self.error = error
        self.hold = hold
        self.gate: Optional[asyncio.Event] = None

    def release(self) -> None:
        self.hold = False
        if self.gate is not None:
            self.gate.set()

    async def __call__(self, record: RegistrationRecord) -> None:
        self.records.append(record)
        if self.hold:
            self.gate = asyncio.Event()
            await self.gate.wait()
        if self.error is not None:
            raise self.error


def fill(controller, draft: dict) -> None:
    for name, value in draft.items():
        controller.set_field(name, value)


async def wait_for_call(backend: FakeBackend, count: int = 1) -> None:
    while len(backend.records) < count:
        await asyncio.sleep(0)
