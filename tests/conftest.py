import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from docwatch.pdf.pdfplumber_adapter import PdfPlumberAdapter
from docwatch.storage.local_adapter import LocalStorage
from docwatch.tables.csv_store import CsvTableStore


def _pdf(*pages: str) -> bytes:
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    for text in pages:
        if text:
            c.drawString(72, 720, text)
        c.showPage()
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Single-page PDF with a known text layer."""
    return _pdf("Invoice issued 29/02/2020")


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    return _pdf("Page one content", "Page two content")


@pytest.fixture()
def empty_pdf_bytes() -> bytes:
    """Valid PDF with a blank page and no text layer."""
    return _pdf("")


@pytest.fixture()
def storage_root(tmp_path: Path) -> Path:
    """Local storage root with an empty ``inbox`` input folder."""
    (tmp_path / "inbox").mkdir()
    return tmp_path


@pytest.fixture()
def local_storage(storage_root: Path) -> LocalStorage:
    return LocalStorage(root=storage_root, pdf_extractor=PdfPlumberAdapter())


@pytest.fixture()
def csv_tables(storage_root: Path) -> CsvTableStore:
    return CsvTableStore(root=storage_root)
