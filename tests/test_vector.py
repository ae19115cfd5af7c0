import pytest

from nightcrawl.vector import Vector2


def test_default_is_zero():
    assert Vector2() == Vector2(0.0, 0.0)


@pytest.mark.parametrize("a,b", [((1.5, -2.0), (3.0, 4.0)), ((0.0, 0.0), (-7.0, 2.5))])
def test_add_then_subtract_round_trips(a, b):
    va, vb = Vector2(*a), Vector2(*b)
    assert (va + vb) - vb == va


def test_add_is_commutative():
    va, vb = Vector2(1.0, 2.0), Vector2(-3.0, 8.0)
    assert va + vb == vb + va


def test_scalar_multiply_matches_repeated_addition():
    v = Vector2(1.25, -0.5)
    assert v * 2 == v + v
    assert 2 * v == v * 2


def test_multiply_identity_and_zero():
    v = Vector2(3.0, -4.0)
    assert v * 1 == v
    assert v * 0 == Vector2()


def test_in_place_add_produces_sum():
    v = Vector2(1.0, 1.0)
    original = Vector2(v.x, v.y)
    step = Vector2(0.5, -2.0)
    v += step
    assert v == original + step


def test_iteration_unpacks_components():
    x, y = Vector2(6.0, 9.0)
    assert (x, y) == (6.0, 9.0)


def test_unsupported_operand_raises():
    with pytest.raises(TypeError):
        Vector2(1.0, 2.0) + 3