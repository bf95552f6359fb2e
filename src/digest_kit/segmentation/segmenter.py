# src/digest_kit/segmentation/segmenter.py

import logging
from collections.abc import Iterable

from digest_kit.errors import NoSectionsFoundError

from .models import Section, SectionMarker

logger = logging.getLogger(__name__)


def filter_front_matter(
    markers: Iterable[SectionMarker], excluded_names: Iterable[str] = ("preface",)
) -> list[SectionMarker]:
    """Drop markers for front-matter sections not worth studying.

    Matching is on the whole name, case-insensitive. The dropped section's
    text is absorbed by the preceding section.
    """
    excluded = {name.casefold() for name in excluded_names}
    kept = [m for m in markers if m.name.casefold() not in excluded]
    logger.debug("Front-matter filter kept %d markers", len(kept))
    return kept


def segment(markers: Iterable[SectionMarker], full_text: str) -> list[Section]:
    """Turn markers into contiguous, non-overlapping sections.

    Each section ends where the next marker starts (or at the end of the
    text). The first section starts at offset 0 so the sections cover the
    whole text. Anything ahead of the first marker, such as a title page,
    contents or a filtered-out preface, therefore becomes part of the
    first section and is summarized with it. Whitespace-only sections are
    still returned.

    Raises:
        NoSectionsFoundError: If there are no markers.
    """
    ordered = sorted(markers, key=lambda m: m.start_offset)
    if not ordered:
        raise NoSectionsFoundError()

    sections: list[Section] = []
    for i, marker in enumerate(ordered):
        start = 0 if i == 0 else marker.start_offset
        end = ordered[i + 1].start_offset if i + 1 < len(ordered) else len(full_text)
        body = full_text[start:end].strip()
        sections.append(
            Section(
                name=marker.name,
                start_offset=start,
                end_offset=end,
                char_count=len(body),
                word_count=len(body.split()),
            )
        )
    return sections
