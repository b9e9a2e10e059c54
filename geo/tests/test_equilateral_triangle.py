import pytest
from .. import EquilateralTriangle, NegativeDimension, Shape

# Group: triangle

@pytest.fixture
def triangle():
    return EquilateralTriangle(3)

@pytest.mark.group_triangle
def test_side(triangle):
    """An equilateral triangle should expose its side length"""
    assert triangle.side == 3.0

@pytest.mark.group_triangle
def test_repr(triangle):
    """An equilateral triangle should describe itself by its side length"""
    assert repr(triangle) == "EquilateralTriangle(side=3.0)"

# Group: shape

@pytest.mark.group_shape
def test_is_shape(triangle):
    """An equilateral triangle should be usable wherever a shape is expected"""
    assert isinstance(triangle, Shape)

@pytest.mark.group_shape
def test_perimeter(triangle):
    """A shape should be able to accurately calculate its perimeter (or circumference)"""
    assert triangle.perimeter() == 3 * triangle.side

@pytest.mark.group_shape
def test_unit_triangle():
    """A unit equilateral triangle has a perimeter of exactly 3.0"""
    assert EquilateralTriangle(1).perimeter() == 3.0

@pytest.mark.group_shape
@pytest.mark.parametrize("side", [0, 0.5, 10, 123.25])
def test_perimeter_scales_with_side(side):
    """An equilateral triangle's perimeter should be three times its side"""
    assert EquilateralTriangle(side).perimeter() == pytest.approx(3 * side)

# Group: validation

@pytest.mark.group_validation
def test_negative_side():
    """Constructing an equilateral triangle with a negative side should raise an error naming it"""
    with pytest.raises(NegativeDimension) as excinfo:
        EquilateralTriangle(-1)

    assert str(excinfo.value) == "An equilateral_triangle must have a length of at least 0."
