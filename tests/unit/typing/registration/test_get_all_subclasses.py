"""Unit tests for get_all_subclasses."""

import pytest

from polyserial.typing.registration.get_all_subclasses import get_all_subclasses


@pytest.mark.unit
def test_direct_and_indirect_subclasses_parents_first():
    class Root:
        pass

    class A(Root):
        pass

    class AA(A):
        pass

    class B(Root):
        pass

    assert get_all_subclasses(Root) == [A, AA, B]


@pytest.mark.unit
def test_diamond_is_listed_once():
    class Root:
        pass

    class Left(Root):
        pass

    class Right(Root):
        pass

    class Both(Left, Right):
        pass

    assert get_all_subclasses(Root) == [Left, Both, Right]


@pytest.mark.unit
def test_leaf_has_no_subclasses():
    class Leaf:
        pass

    assert get_all_subclasses(Leaf) == []
