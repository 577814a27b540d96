from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Route(str, Enum):
    LOGIN = "login"
    SHELL = "shell"


@dataclass
class AppState:
    route: Route = Route.LOGIN
    error_message: str | None = None
    status_message: str = "Ready"
    phone_number: str | None = None
