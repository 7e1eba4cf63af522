import json
import uuid
from collections.abc import Callable, Iterable

from redactor.logging.logger import Log
from redactor.markup.models import MarkupLayer, PiiEntity, RedactionAnnotation


def _new_uid() -> str:
    return str(uuid.uuid4())


class MarkupSynthesizer:
    """Turns detected PII entities into a layer of redaction rectangles.

    Only the first line group of each entity is drawn. An entity whose text
    wraps across lines may report further groups; those are not rendered.
    """

    def __init__(self, uid_factory: Callable[[], str] = _new_uid) -> None:
        self._uid_factory = uid_factory

    def synthesize(self, entities: Iterable[PiiEntity]) -> MarkupLayer:
        layer = MarkupLayer()
        for entity in entities:
            if not entity.line_groups:
                Log.warning(
                    f"PII entity on page index {entity.page_index} has no line groups, skipping"
                )
                continue
            group = entity.line_groups[0]
            for rect in group.lines:
                layer.marks.append(
                    RedactionAnnotation(
                        uid=self._uid_factory(),
                        page_number=entity.page_index + 1,
                        rectangle=rect,
                        page_data=group.page_data,
                    )
                )
        return layer

    @staticmethod
    def serialize(layer: MarkupLayer) -> bytes:
        """Encode the layer as the indented UTF-8 JSON the markup burner reads."""
        return json.dumps(layer.to_dict(), indent=2).encode("utf-8")
