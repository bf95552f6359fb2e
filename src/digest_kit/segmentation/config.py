# src/digest_kit/segmentation/config.py

from dataclasses import dataclass


@dataclass(frozen=True)
class SegmentationConfig:
    """Tuning for heading detection.

    Immutable. Explicit. The defaults are tuned constants, not derived ones.
    """

    min_heading_length: int = 2
    max_heading_length: int = 60
    dedup_window: int = 5000  # chars within which a same-name heading is a repeat
    excluded_names: tuple[str, ...] = ("preface",)  # matched case-insensitively
