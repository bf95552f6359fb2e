from .config import SummarizationConfig
from .events import (
    TERMINAL_EVENTS,
    CompleteEvent,
    ErrorEvent,
    ProgressEvent,
    ProgressStatus,
    ProgressUpdate,
    StartEvent,
    decode_event,
    encode_sse,
)
from .orchestrator import ProgressSink, SummarizationOrchestrator
from .pacing import FixedDelayPacing, PacingPolicy
from .parsing import parse_bullets

__all__ = [
    "TERMINAL_EVENTS",
    "CompleteEvent",
    "ErrorEvent",
    "FixedDelayPacing",
    "PacingPolicy",
    "ProgressEvent",
    "ProgressSink",
    "ProgressStatus",
    "ProgressUpdate",
    "StartEvent",
    "SummarizationConfig",
    "SummarizationOrchestrator",
    "decode_event",
    "encode_sse",
    "parse_bullets",
]
