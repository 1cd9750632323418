"""Description of interleaved vertex attributes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class ElementType(IntEnum):
    """Attribute component types, numbered as in OpenGL."""

    UNSIGNED_BYTE = 0x1401
    UNSIGNED_INT = 0x1405
    FLOAT = 0x1406


_SIZES = {
    ElementType.FLOAT: 4,
    ElementType.UNSIGNED_INT: 4,
    ElementType.UNSIGNED_BYTE: 1,
}


def size_of_type(element_type: ElementType | int) -> int:
    """Return the size in bytes of one component of ``element_type``."""
    try:
        return _SIZES[ElementType(element_type)]
    except ValueError:
        raise ValueError(f"unsupported element type: {element_type!r}") from None


@dataclass(frozen=True)
class VertexBufferElement:
    """One attribute: its component type, component count and normalisation."""

    type: ElementType
    count: int
    normalized: bool


class VertexBufferLayout:
    """An ordered list of attributes and the resulting stride in bytes."""

    def __init__(self) -> None:
        self._elements: list[VertexBufferElement] = []
        self._stride = 0

    @property
    def elements(self) -> tuple[VertexBufferElement, ...]:
        return tuple(self._elements)

    @property
    def stride(self) -> int:
        return self._stride

    def push(self, element_type: ElementType | int, count: int) -> None:
        """Append an attribute of ``count`` components of ``element_type``."""
        size = size_of_type(element_type)
        kind = ElementType(element_type)
        self._elements.append(
            VertexBufferElement(kind, count, kind is ElementType.UNSIGNED_BYTE)
        )
        self._stride += size * count