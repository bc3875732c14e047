from dataclasses import dataclass
from enum import Enum


class StatusLevel(Enum):
    INFO = "info"
    SUCCESS = "success"
    ERROR = "error"


@dataclass(slots=True)
class StatusMessage:
    text: str = ""
    level: StatusLevel = StatusLevel.INFO
