from .config import SegmentationConfig
from .detector import SectionDetector
from .models import Section, SectionMarker
from .recognizers import DEFAULT_RECOGNIZERS, HeadingRecognizer, resolve_heading
from .segmenter import filter_front_matter, segment

__all__ = [
    "DEFAULT_RECOGNIZERS",
    "HeadingRecognizer",
    "Section",
    "SectionDetector",
    "SectionMarker",
    "SegmentationConfig",
    "filter_front_matter",
    "resolve_heading",
    "segment",
]
