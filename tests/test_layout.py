import pytest

from orbitsim.layout import (
    ElementType,
    VertexBufferElement,
    VertexBufferLayout,
    size_of_type,
)


@pytest.mark.parametrize(
    "element_type, size",
    [(ElementType.FLOAT, 4), (ElementType.UNSIGNED_INT, 4), (ElementType.UNSIGNED_BYTE, 1)],
)
def test_size_of_type(element_type, size):
    assert size_of_type(element_type) == size


def test_size_of_type_accepts_raw_gl_value():
    assert size_of_type(int(ElementType.FLOAT)) == size_of_type(ElementType.FLOAT)


def test_size_of_unknown_type_raises():
    with pytest.raises(ValueError):
        size_of_type(0x1234)


def test_push_accumulates_stride():
    layout = VertexBufferLayout()
    for count in (2, 2, 1, 3):
        layout.push(ElementType.FLOAT, count)
    assert layout.stride == sum(size_of_type(e.type) * e.count for e in layout.elements)
    assert [e.count for e in layout.elements] == [2, 2, 1, 3]


def test_only_bytes_are_normalized():
    layout = VertexBufferLayout()
    layout.push(ElementType.FLOAT, 1)
    layout.push(ElementType.UNSIGNED_INT, 1)
    layout.push(ElementType.UNSIGNED_BYTE, 4)
    assert [e.normalized for e in layout.elements] == [False, False, True]
    assert layout.elements[2] == VertexBufferElement(ElementType.UNSIGNED_BYTE, 4, True)


def test_push_unknown_type_raises_and_leaves_layout_unchanged():
    layout = VertexBufferLayout()
    with pytest.raises(ValueError):
        layout.push(7, 2)
    assert layout.elements == ()
    assert layout.stride == 0