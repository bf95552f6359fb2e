# Chunking
from .chunking import Chunk, chunk_section, split_text

# Config
from .config import DigestConfig, load_config

# Errors
from .errors import (
    DigestError,
    DocumentNotFoundError,
    ExtractionError,
    LookupFailure,
    ModelServiceError,
    NoSectionsFoundError,
    SectionIndexError,
)

# LLMs
from .llms import LLMClient, LLMConfig, LLMResponse, Message, Role, create_llm_client

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Parsers
from .parsers import ExtractedText, PdfTextExtractor, TextExtractor

# Prompts
from .prompts import Prompt, PromptsLibrary

# Segmentation
from .segmentation import (
    Section,
    SectionDetector,
    SectionMarker,
    SegmentationConfig,
    filter_front_matter,
    segment,
)

# Service
from .service import ExtractionResult, StudyNotesService, create_service

# Storage
from .storage import Document, DocumentStore, StoredDocument

# Summarization
from .summarization import (
    CompleteEvent,
    ErrorEvent,
    FixedDelayPacing,
    PacingPolicy,
    ProgressEvent,
    ProgressStatus,
    ProgressUpdate,
    StartEvent,
    SummarizationConfig,
    SummarizationOrchestrator,
    decode_event,
    encode_sse,
)

# Text
from .text import clean_text, normalize_diacritics

__all__ = [
    # Chunking
    "Chunk",
    "chunk_section",
    "split_text",
    # Config
    "DigestConfig",
    "load_config",
    # Errors
    "DigestError",
    "DocumentNotFoundError",
    "ExtractionError",
    "LookupFailure",
    "ModelServiceError",
    "NoSectionsFoundError",
    "SectionIndexError",
    # LLMs
    "LLMClient",
    "LLMConfig",
    "LLMResponse",
    "Message",
    "Role",
    "create_llm_client",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Parsers
    "ExtractedText",
    "PdfTextExtractor",
    "TextExtractor",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Segmentation
    "Section",
    "SectionDetector",
    "SectionMarker",
    "SegmentationConfig",
    "filter_front_matter",
    "segment",
    # Service
    "ExtractionResult",
    "StudyNotesService",
    "create_service",
    # Storage
    "Document",
    "DocumentStore",
    "StoredDocument",
    # Summarization
    "CompleteEvent",
    "ErrorEvent",
    "FixedDelayPacing",
    "PacingPolicy",
    "ProgressEvent",
    "ProgressStatus",
    "ProgressUpdate",
    "StartEvent",
    "SummarizationConfig",
    "SummarizationOrchestrator",
    "decode_event",
    "encode_sse",
    # Text
    "clean_text",
    "normalize_diacritics",
]
