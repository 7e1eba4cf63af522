import io
from pathlib import Path

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF carrying a fake SSN."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Name: John Doe")
    c.drawString(72, 700, "SSN: 123-45-6789")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def multi_page_pdf_bytes() -> bytes:
    """Generate a four-page PDF with PII on the first and last pages."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Contact: jane@example.com")
    for _ in range(3):
        c.showPage()
    c.drawString(72, 720, "Phone: 555-0100")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_pdf_path(tmp_path: Path, sample_pdf_bytes: bytes) -> Path:
    path = tmp_path / "input.pdf"
    path.write_bytes(sample_pdf_bytes)
    return path
