from dataclasses import dataclass, field
from typing import Any, ClassVar


@dataclass(frozen=True)
class LineGroup:
    """Bounding boxes of one run of text lines holding a detected entity.

    ``page_data`` describes the page coordinate space the rectangles live in
    and is echoed back verbatim on every annotation drawn from this group.
    """

    lines: list[dict[str, Any]] = field(default_factory=list)
    page_data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LineGroup":
        if not isinstance(data, dict):
            raise TypeError(f"line group must be an object, got {type(data).__name__}")
        return cls(
            lines=list(data.get("lines") or []),
            page_data=dict(data.get("pageData") or {}),
        )


@dataclass(frozen=True)
class PiiEntity:
    """A span of sensitive data detected by the server."""

    page_index: int  # 0-based
    line_groups: list[LineGroup] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PiiEntity":
        if not isinstance(data, dict):
            raise TypeError(f"entity must be an object, got {type(data).__name__}")
        groups = data.get("lineGroups") or []
        if not isinstance(groups, list):
            raise TypeError(f"lineGroups must be a list, got {type(groups).__name__}")
        return cls(
            page_index=int(data["pageIndex"]),
            line_groups=[LineGroup.from_dict(g) for g in groups],
        )


@dataclass(frozen=True)
class RedactionAnnotation:
    """A solid black, non-interactive rectangle covering one text line."""

    TYPE: ClassVar[str] = "RectangleAnnotation"
    INTERACTION_MODE: ClassVar[str] = "SelectionDisabled"
    TIMESTAMP: ClassVar[str] = "2024-01-01T00:00:00.000Z"
    COLOR: ClassVar[str] = "#000000"
    BORDER_THICKNESS: ClassVar[int] = 4
    OPACITY: ClassVar[int] = 255

    uid: str
    page_number: int  # 1-based
    rectangle: dict[str, Any]
    page_data: dict[str, Any]

    def to_dict(self) -> dict[str, object]:
        return {
            "uid": self.uid,
            "interactionMode": self.INTERACTION_MODE,
            "pageNumber": self.page_number,
            "type": self.TYPE,
            "creationDateTime": self.TIMESTAMP,
            "modificationDateTime": self.TIMESTAMP,
            "data": {},
            "rectangle": self.rectangle,
            "pageData": self.page_data,
            "borderColor": self.COLOR,
            "borderThickness": self.BORDER_THICKNESS,
            "fillColor": self.COLOR,
            "opacity": self.OPACITY,
        }


@dataclass
class MarkupLayer:
    """Ordered annotations to be burned into a document."""

    marks: list[RedactionAnnotation] = field(default_factory=list)

    def to_dict(self) -> dict[str, list[dict[str, object]]]:
        return {"marks": [mark.to_dict() for mark in self.marks]}
