from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path

from redactor.markup.models import PiiEntity


@dataclass(slots=True)
class PipelineContext:
    """Artifact ids threaded from one stage to the next during a single run."""

    input_path: Path
    output_path: Path
    input_bytes: bytes = b""
    input_file_id: str = ""
    searchable_file_id: str = ""
    search_context_id: str = ""
    pii_entities: list[PiiEntity] = field(default_factory=list)
    markup_file_id: str = ""
    burned_file_id: str = ""
    flattened_file_id: str = ""
    final_file_id: str = ""
    output_bytes: bytes = b""


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
