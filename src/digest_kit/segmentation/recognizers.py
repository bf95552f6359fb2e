# src/digest_kit/segmentation/recognizers.py

"""Heading recognizer catalog.

The catalog is plain data: an ordered tuple of recognizers evaluated
first-match-wins. Add a heading by adding a row, not a branch.
"""

import re
from dataclasses import dataclass, field


@dataclass(frozen=True)
class HeadingRecognizer:
    """Full-line, case-insensitive heading pattern.

    When `name` is None the matched heading text is used verbatim, for
    headings that carry their own ordinal ("Chapter 3", "Appendix B").
    """

    pattern: str
    name: str | None = None
    _compiled: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_compiled", re.compile(self.pattern, re.IGNORECASE))

    def match(self, line: str) -> str | None:
        """Return the section name for `line`, or None if it does not match."""
        if self._compiled.fullmatch(line) is None:
            return None
        return self.name if self.name is not None else line


DEFAULT_RECOGNIZERS: tuple[HeadingRecognizer, ...] = (
    HeadingRecognizer(r"publisher'?s?\s*note", "Publisher's Note"),
    HeadingRecognizer(r"preface", "Preface"),
    HeadingRecognizer(r"acknowledgements?", "Acknowledgements"),
    HeadingRecognizer(r"introduction", "Introduction"),
    HeadingRecognizer(r"g[iīé]t[aāä]\s*dhy[aāä]nam", "Gita Dhyanam"),
    HeadingRecognizer(r"dhy[aāä]na?\s*[sś]lok[aāä]s?", "Dhyana Slokas"),
    HeadingRecognizer(r"context\s*(of\s*)?(the\s*)?g[iīé]t[aāä]", "Context of the Gita"),
    HeadingRecognizer(r"chapter\s*\d+.*"),
    HeadingRecognizer(r"epilogue", "Epilogue"),
    HeadingRecognizer(r"appendix.*"),
    HeadingRecognizer(r"glossary", "Glossary"),
    HeadingRecognizer(r"index", "Index"),
)


def resolve_heading(
    line: str, recognizers: tuple[HeadingRecognizer, ...] = DEFAULT_RECOGNIZERS
) -> str | None:
    """Name of the first recognizer matching `line`, or None."""
    for recognizer in recognizers:
        name = recognizer.match(line)
        if name is not None:
            return name
    return None
