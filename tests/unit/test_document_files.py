from pathlib import Path

import pytest

from redactor.processor.document_files import DocumentFiles
from redactor.processor.exceptions import InputFileError, OutputFileError


class TestLoad:
    def test_returns_bytes(self, tmp_path: Path) -> None:
        path = tmp_path / "doc.pdf"
        path.write_bytes(b"%PDF test content")

        assert DocumentFiles().load(path) == b"%PDF test content"

    def test_accepts_uppercase_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "SCAN.PDF"
        path.write_bytes(b"%PDF")

        assert DocumentFiles().load(path) == b"%PDF"

    def test_raises_for_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(InputFileError, match="not found"):
            DocumentFiles().load(tmp_path / "missing.pdf")

    def test_raises_for_non_pdf(self, tmp_path: Path) -> None:
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with pytest.raises(InputFileError, match="must be a PDF"):
            DocumentFiles().load(path)


class TestSave:
    def test_writes_bytes_and_creates_parent(self, tmp_path: Path) -> None:
        path = tmp_path / "out" / "nested" / "redacted.pdf"

        DocumentFiles().save(path, b"%PDF redacted")

        assert path.read_bytes() == b"%PDF redacted"

    def test_rejects_non_pdf_output(self, tmp_path: Path) -> None:
        path = tmp_path / "redacted.txt"

        with pytest.raises(OutputFileError, match="must be a PDF"):
            DocumentFiles().save(path, b"%PDF redacted")

        assert not path.exists()


class TestCheckOutput:
    def test_accepts_pdf_suffix(self, tmp_path: Path) -> None:
        DocumentFiles().check_output(tmp_path / "REDACTED.PDF")

    def test_rejects_other_suffix(self, tmp_path: Path) -> None:
        with pytest.raises(OutputFileError, match="out.tiff"):
            DocumentFiles().check_output(tmp_path / "out.tiff")
