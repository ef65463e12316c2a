"""Build event source interface and event records."""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Callable, Protocol


class Verbosity(IntEnum):
    """Configured logging threshold, lowest to highest."""
    QUIET = 0
    MINIMAL = 1
    NORMAL = 2
    DETAILED = 3
    DIAGNOSTIC = 4


class Importance(Enum):
    """Importance attached to informational messages."""
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


@dataclass(frozen=True)
class BuildEvent:
    """Common fields of every host event."""
    message: str
    sender_name: str


@dataclass(frozen=True)
class ProjectStartedEvent(BuildEvent):
    project_file: str = ""
    target_names: str = ""


@dataclass(frozen=True)
class ProjectFinishedEvent(BuildEvent):
    project_file: str = ""
    succeeded: bool = True


@dataclass(frozen=True)
class TaskStartedEvent(BuildEvent):
    task_name: str = ""
    project_file: str = ""
    task_file: str = ""


@dataclass(frozen=True)
class MessageEvent(BuildEvent):
    importance: Importance = Importance.NORMAL


@dataclass(frozen=True)
class WarningEvent(BuildEvent):
    file: str = ""
    line_number: int = 0
    column_number: int = 0
    code: str = ""


@dataclass(frozen=True)
class ErrorEvent(BuildEvent):
    file: str = ""
    line_number: int = 0
    column_number: int = 0
    code: str = ""


class IEventSource(Protocol):
    """Interface the host exposes for event subscription.

    Kinds are the keys of ``handlers.EVENT_HANDLERS``. The host calls every
    subscribed callback synchronously, in the order events are raised.
    """

    def subscribe(self, kind: str, callback: Callable[[BuildEvent], None]) -> None:
        """Register callback for one event kind."""
        ...
