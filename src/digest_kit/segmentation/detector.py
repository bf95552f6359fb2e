# src/digest_kit/segmentation/detector.py

import logging
from time import monotonic

from digest_kit.observability import names
from digest_kit.observability.base import MetricsHook, NoOpMetricsHook

from .config import SegmentationConfig
from .models import SectionMarker
from .recognizers import DEFAULT_RECOGNIZERS, HeadingRecognizer, resolve_heading

logger = logging.getLogger(__name__)


class SectionDetector:
    """Finds section headings in cleaned document text.

    Local and synchronous. Works purely from layout cues: a heading
    candidate is a short line that opens the document or follows a blank
    line. Candidates are resolved against a closed recognizer catalog, so a
    heading missing from the catalog is invisible by construction.
    """

    def __init__(
        self,
        config: SegmentationConfig = SegmentationConfig(),
        recognizers: tuple[HeadingRecognizer, ...] = DEFAULT_RECOGNIZERS,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._config = config
        self._recognizers = recognizers
        self.metrics_hook = metrics_hook

    def detect(self, text: str) -> list[SectionMarker]:
        """Return markers in document order.

        A heading whose name already has a marker less than
        `dedup_window` chars back is treated as a running header and dropped.
        """
        start = monotonic()
        markers: list[SectionMarker] = []
        duplicates = 0
        offset = 0
        previous_blank = True  # the first line counts as preceded by a blank

        for raw_line in text.split("\n"):
            line = raw_line.strip()
            if previous_blank and self._is_candidate_length(line):
                name = resolve_heading(line, self._recognizers)
                if name is not None:
                    if self._is_repeat(markers, name, offset):
                        duplicates += 1
                        logger.debug("Skipping repeated heading %r at offset %d", name, offset)
                    else:
                        markers.append(SectionMarker(name=name, start_offset=offset))

            previous_blank = line == ""
            offset += len(raw_line) + 1

        elapsed_ms = 1000 * (monotonic() - start)
        self.metrics_hook.record_latency(names.SEGMENTATION_DURATION, elapsed_ms)
        self.metrics_hook.increment(names.SEGMENTATION_MARKERS_FOUND, len(markers))
        if duplicates:
            self.metrics_hook.increment(names.SEGMENTATION_DUPLICATES_SKIPPED, duplicates)

        logger.info(
            "Detected %d sections (%d repeats skipped): %s",
            len(markers),
            duplicates,
            [m.name for m in markers],
        )
        return markers

    def _is_candidate_length(self, line: str) -> bool:
        return (
            self._config.min_heading_length
            <= len(line)
            <= self._config.max_heading_length
        )

    def _is_repeat(self, markers: list[SectionMarker], name: str, offset: int) -> bool:
        return any(
            m.name == name and offset - m.start_offset < self._config.dedup_window
            for m in markers
        )
