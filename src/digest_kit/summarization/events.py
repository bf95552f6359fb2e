# src/digest_kit/summarization/events.py

"""Progress events streamed to the consumer during a summarization run.

A run emits exactly one `start`, then `progress` updates, then exactly one
terminal `complete` or `error`. Field names go over the wire in camelCase.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter
from pydantic.alias_generators import to_camel


class ProgressStatus(str, Enum):
    SUMMARIZING = "summarizing"
    DONE = "done"
    WAITING = "waiting"


class _Event(BaseModel):
    class Config:
        extra = "forbid"
        frozen = True
        alias_generator = to_camel
        populate_by_name = True

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class StartEvent(_Event):
    type: Literal["start"] = "start"
    total_chunks: int
    section_name: str


class ProgressUpdate(_Event):
    type: Literal["progress"] = "progress"
    chunk: int  # 1-based
    total_chunks: int
    status: ProgressStatus


class CompleteEvent(_Event):
    type: Literal["complete"] = "complete"
    bullets: list[str]


class ErrorEvent(_Event):
    type: Literal["error"] = "error"
    message: str


ProgressEvent = Union[StartEvent, ProgressUpdate, CompleteEvent, ErrorEvent]

_EVENT_ADAPTER: TypeAdapter[ProgressEvent] = TypeAdapter(
    Annotated[ProgressEvent, Field(discriminator="type")]
)

TERMINAL_EVENTS = (CompleteEvent, ErrorEvent)


def encode_sse(event: _Event) -> str:
    """Render one server-sent-events frame for `event`."""
    return f"data: {event.model_dump_json(by_alias=True)}\n\n"


def decode_event(payload: dict) -> ProgressEvent:
    """Rebuild an event from its wire payload, dispatching on `type`.

    Raises:
        pydantic.ValidationError: On an unknown type or malformed fields.
    """
    return _EVENT_ADAPTER.validate_python(payload)
