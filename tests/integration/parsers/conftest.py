from pathlib import Path

import pytest
from reportlab.lib.pagesizes import LETTER
from reportlab.pdfgen import canvas

from digest_kit.parsers import ExtractedText, PdfTextExtractor

COURSE_PAGES = [
    [
        "Introduction",
        "The Bhagavad Gita is a dialogue between Krishna and Arjuna.",
        "It is set on the battlefield of Kurukshetra.",
    ],
    [
        "Chapter 1",
        "Arjuna sees his elders and relatives arrayed on both sides.",
        "Overcome by grief, he lays down his bow and refuses to fight.",
    ],
    [
        "Glossary",
        "dharma: order, righteousness",
        "moksha: liberation",
    ],
]


def _draw_page(c: canvas.Canvas, lines: list[str], page_number: int | None) -> None:
    _, height = LETTER
    text = c.beginText(40, height - 50)
    for line in lines:
        text.textLine(line)
    c.drawText(text)
    if page_number is not None:
        c.drawString(300, 30, str(page_number))
    c.showPage()


def _create_course_pdf(path: Path) -> None:
    """Three pages, each opening with a section heading, numbered at the foot."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    for number, lines in enumerate(COURSE_PAGES, start=1):
        _draw_page(c, lines, number)
    c.save()


def _create_sparse_pdf(path: Path) -> None:
    """A single page with almost no text, like a scanned document."""
    c = canvas.Canvas(str(path), pagesize=LETTER)
    _draw_page(c, ["Scan 01"], None)
    c.save()


def _create_blank_pdf(path: Path) -> None:
    c = canvas.Canvas(str(path), pagesize=LETTER)
    c.showPage()
    c.save()


@pytest.fixture(scope="module")
def pdf_dir(tmp_path_factory: pytest.TempPathFactory) -> Path:
    """Create all test PDFs once per module."""
    dir_path: Path = tmp_path_factory.mktemp("pdfs")

    _create_course_pdf(dir_path / "course.pdf")
    _create_sparse_pdf(dir_path / "sparse.pdf")
    _create_blank_pdf(dir_path / "blank.pdf")

    return dir_path


@pytest.fixture(scope="module")
def extracted_course(pdf_dir: Path) -> ExtractedText:
    """Extract the course PDF once, reuse across tests."""
    with open(pdf_dir / "course.pdf", "rb") as f:
        return PdfTextExtractor().extract(f)
