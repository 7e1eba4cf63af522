class ProcessorError(Exception):
    """Base exception for local (non-server) pipeline errors."""


class InputFileError(ProcessorError):
    """Raised when the input document is missing or is not a PDF."""


class OutputFileError(ProcessorError):
    """Raised when the output path is not a PDF."""


class ConfigurationError(ProcessorError):
    """Raised when a required setting is missing."""


class PipelineStateError(ProcessorError):
    """Raised when a step runs before the artifact id it needs is known."""
