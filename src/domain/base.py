"""Domain base model and shared helpers"""

import random
import string
import threading
import time
from datetime import datetime, timezone

from pydantic import BaseModel as PydanticBaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class BaseModel(PydanticBaseModel):
    """
    Base for all domain entities

    Fields are snake_case in Python and camelCase on the wire and in the
    JSON documents, matching the records written by earlier deployments.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
    )

    def to_document(self) -> dict:
        """Serialize for JSON persistence and API output (camelCase keys)"""
        return self.model_dump(mode="json", by_alias=True)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class MillisecondClock:
    """
    Strictly increasing millisecond timestamps

    Two calls inside the same millisecond still get distinct values, so ids
    and references built from it never collide within a process.
    """

    def __init__(self):
        self._last = 0
        self._lock = threading.Lock()

    def next(self) -> int:
        with self._lock:
            current = int(time.time() * 1000)
            if current <= self._last:
                current = self._last + 1
            self._last = current
            return current


_clock = MillisecondClock()


def unique_millis() -> int:
    return _clock.next()


def random_token(length: int, alphabet: str = string.ascii_lowercase + string.digits) -> str:
    return "".join(random.choices(alphabet, k=length))
