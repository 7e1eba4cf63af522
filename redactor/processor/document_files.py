from pathlib import Path

from redactor.processor.exceptions import InputFileError, OutputFileError


class DocumentFiles:
    """Reads the input PDF and writes the redacted output to local disk."""

    PDF_SUFFIX = ".pdf"

    def load(self, path: Path) -> bytes:
        """Read input document bytes.

        Raises:
            InputFileError: if the file does not exist or is not a .pdf file.
        """
        if path.suffix.lower() != self.PDF_SUFFIX:
            raise InputFileError(f"Input file must be a PDF: {path}")
        if not path.is_file():
            raise InputFileError(f"Input file not found: {path}")
        return path.read_bytes()

    def check_output(self, path: Path) -> None:
        """Reject an output path without a .pdf suffix before any work is done.

        Raises:
            OutputFileError: if the path is not a .pdf file name.
        """
        if path.suffix.lower() != self.PDF_SUFFIX:
            raise OutputFileError(f"Output file must be a PDF: {path}")

    def save(self, path: Path, content: bytes) -> None:
        """Write output bytes, creating the parent directory when needed."""
        self.check_output(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)
