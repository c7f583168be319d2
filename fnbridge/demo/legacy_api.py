"""
fnbridge.demo.legacy_api - Sample Callback-Style Data Source

A stand-in for an un-migrated API: every operation takes a single callback
and reports its result through a response envelope dict.
"""

import time
from collections.abc import Callable
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

COFFEE_QUEUE_ERROR = "Numeric value has exceeded Number.MAX_SAFE_INTEGER."


class Admin(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["admin"] = "admin"
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    role: str


class User(BaseModel):
    model_config = ConfigDict(frozen=True)

    type: Literal["user"] = "user"
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0)
    occupation: str


Person = Admin | User

ADMINS: list[Admin] = [
    Admin(name="Jane Doe", age=32, role="Administrator"),
    Admin(name="Bruce Willis", age=64, role="World saver"),
]

USERS: list[User] = [
    User(name="Max Mustermann", age=25, occupation="Chimney sweep"),
    User(name="Kate Müller", age=23, occupation="Astronaut"),
]


class LegacyApi:
    """Callback-based data source.

    Args:
        clock: Returns the current time in seconds since the epoch
    """

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock

    def request_admins(self, callback: Callable[[dict[str, Any]], None]) -> None:
        callback({"status": "success", "data": ADMINS})

    def request_users(self, callback: Callable[[dict[str, Any]], None]) -> None:
        callback({"status": "success", "data": USERS})

    def request_current_server_time(self, callback: Callable[[dict[str, Any]], None]) -> None:
        # Milliseconds since the epoch
        callback({"status": "success", "data": int(self._clock() * 1000)})

    def request_coffee_machine_queue_length(
        self, callback: Callable[[dict[str, Any]], None]
    ) -> None:
        callback({"status": "error", "error": COFFEE_QUEUE_ERROR})
