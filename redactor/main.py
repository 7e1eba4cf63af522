from pathlib import Path

import typer

from redactor.config.settings import Settings
from redactor.logging.logger import Log
from redactor.processor.exceptions import ProcessorError
from redactor.processor.processor import build_processor
from redactor.remote.exceptions import RemoteServerError
from redactor.remote.server_client import build_http_client

app = typer.Typer(add_completion=False, help="Redact PII from a PDF using a PrizmDoc server")


@app.command()
def run(
    pd: str = typer.Option(
        ..., "--pd", "-p", help="Root URL to your PrizmDoc server (no trailing slash)"
    ),
    input_path: Path = typer.Option(
        ..., "--in", "-i", help="Path to your input file (must be .pdf)"
    ),
    output_path: Path = typer.Option(
        ..., "--out", "-o", help="Path to your output file (must be .pdf)"
    ),
    log_level: str | None = typer.Option(None, help="Override LOG_LEVEL"),
) -> None:
    """Upload, OCR, detect PII, burn redactions, flatten, re-OCR and download."""
    overrides: dict[str, object] = {"prizmdoc_server_url": pd}
    if log_level:
        overrides["log_level"] = log_level
    settings = Settings(**overrides)
    Log.configure(settings.log_level)

    try:
        with build_http_client(settings) as http_client:
            processor = build_processor(settings, http_client)
            processor.process(input_path, output_path)
    except (RemoteServerError, ProcessorError) as exc:
        Log.error(f"Redaction failed: {type(exc).__name__}: {exc}")
        raise typer.Exit(code=1) from exc


def main() -> None:
    """Entry point: parse options -> build dependencies -> run the pipeline."""
    app()


if __name__ == "__main__":
    main()
