"""Unit tests for TypeNameDict and the registry's name lookups."""

import pytest

from polyserial.typing.registration.parent_options import parent
from polyserial.typing.registration.registration import Registration
from polyserial.typing.registration.type_name_dict import TypeNameDict


@pytest.mark.unit
def test_add_registers_by_name():
    class Alpha:
        pass

    names = TypeNameDict()
    names.add(Alpha)

    assert names["Alpha"] is Alpha
    assert names.name_of(Alpha) == "Alpha"


@pytest.mark.unit
def test_add_is_idempotent():
    class Alpha:
        pass

    names = TypeNameDict()
    names.add_list([Alpha, Alpha])

    assert len(names) == 1


@pytest.mark.unit
def test_same_name_replaces_previous_class():
    def make():
        class Alpha:
            pass
        return Alpha

    first, second = make(), make()
    names = TypeNameDict()
    names.add_list([first, second])

    assert names["Alpha"] is second
    assert names.name_of(first) is None


@pytest.mark.unit
def test_registry_records_parents_and_children(registry):
    @parent("type")
    class Shape:
        pass

    class Circle(Shape):
        pass

    registry.add([Registration(parent=Shape, children={"circle": Circle})])

    assert registry.lookup_type_by_name("Shape") is Shape
    assert registry.lookup_type_by_name("Circle") is Circle
    assert registry.lookup_type_by_name("Square") is None


@pytest.mark.unit
def test_discriminator_for(registry):
    """Test the reverse lookup a serializer uses to write the discriminator."""
    @parent("type")
    class Shape:
        pass

    class Circle(Shape):
        pass

    class Square(Shape):
        pass

    registry.add([Registration(parent=Shape, children={"circle": Circle, "round": Circle})])

    assert registry.discriminator_for(Shape, Circle) == "circle"
    assert registry.discriminator_for(Shape, Square) is None
    assert registry.discriminator_for(Circle, Circle) is None
