import math

import pytest

from danobj.objects import (
    Array,
    Float,
    Integer,
    Kind,
    String,
    Vector,
    add,
    length,
)


def test_integer_creation():
    i1 = Integer(42)
    assert i1.kind is Kind.INTEGER
    assert i1.value == 42


def test_float_creation():
    f1 = Float(3.14)
    assert f1.kind is Kind.FLOAT
    assert math.isclose(f1.value, 3.14, rel_tol=1e-6)


def test_string_creation():
    s1 = String("hello")
    assert s1.kind is Kind.STRING
    assert s1.value == "hello"


def test_vector_creation():
    vec = Vector(Integer(1), Integer(2), Integer(3))
    assert vec.kind is Kind.VECTOR
    assert vec.x.value == 1
    assert vec.y.value == 2
    assert vec.z.value == 3


def test_array_creation():
    arr = Array(3)
    assert arr.kind is Kind.ARRAY
    assert length(arr) == 3
    assert list(arr) == [None, None, None]


def test_array_set_get():
    arr = Array(3)
    arr[0] = Integer(100)
    arr[1] = Integer(200)
    arr[2] = Integer(300)
    assert arr[0].value == 100
    assert arr[1].value == 200
    assert arr[2].value == 300


def test_integer_addition():
    total = add(Integer(5), Integer(7))
    assert total.kind is Kind.INTEGER
    assert total.value == 12
    assert Integer(5) + Integer(7) == total


def test_float_addition():
    fsum = add(Float(2.5), Float(4.5))
    assert fsum.kind is Kind.FLOAT
    assert fsum.value == 7.0


def test_mixed_numeric_addition_gives_float():
    left = Integer(2) + Float(0.5)
    right = Float(0.5) + Integer(2)
    assert left.kind is Kind.FLOAT
    assert left == right
    assert left.value == 2.5


def test_string_concatenation():
    s_sum = add(String("Hello, "), String("world!"))
    assert s_sum.kind is Kind.STRING
    assert s_sum.value == "Hello, world!"


def test_vector_addition():
    v1 = Vector(Integer(1), Integer(2), Integer(3))
    v2 = Vector(Integer(4), Integer(5), Integer(6))
    vsum = add(v1, v2)
    assert vsum.kind is Kind.VECTOR
    assert vsum.x.value == 5
    assert vsum.y.value == 7
    assert vsum.z.value == 9


def test_array_concatenation():
    arr1 = Array(2)
    arr2 = Array(2)
    arr1[0] = Integer(1)
    arr1[1] = Integer(2)
    arr2[0] = Integer(3)
    arr2[1] = Integer(4)
    arrsum = add(arr1, arr2)
    assert arrsum.kind is Kind.ARRAY
    assert length(arrsum) == 4
    assert [e.value for e in arrsum] == [1, 2, 3, 4]


def test_array_concatenation_shares_elements():
    item = String("shared")
    arr1 = Array(1)
    arr1[0] = item
    joined = arr1 + Array(1)
    assert joined[0] is item
    assert joined[1] is None


def test_lengths():
    assert length(Integer(1)) == 1
    assert length(Float(1.0)) == 1
    assert length(String("hello")) == len("hello")
    assert length(Vector(Integer(1), Integer(2), Integer(3))) == 3
    assert len(Array(0)) == 0


def test_length_of_non_object_raises():
    with pytest.raises(TypeError):
        length(None)


@pytest.mark.parametrize(
    "a, b",
    [
        (Integer(1), String("x")),
        (Float(1.0), String("x")),
        (String("x"), Integer(1)),
        (Vector(Integer(1), Integer(2), Integer(3)), Integer(1)),
        (Array(1), String("x")),
    ],
)
def test_mismatched_kinds_raise(a, b):
    with pytest.raises(TypeError):
        add(a, b)
    with pytest.raises(TypeError):
        a + b


def test_vector_with_incompatible_components_raises():
    v1 = Vector(Integer(1), String("a"), Integer(3))
    v2 = Vector(Integer(1), Integer(2), Integer(3))
    with pytest.raises(TypeError):
        add(v1, v2)


def test_vector_requires_objects():
    with pytest.raises(TypeError):
        Vector(Integer(1), None, Integer(3))


def test_array_index_out_of_range():
    arr = Array(2)
    with pytest.raises(IndexError):
        arr[2] = Integer(1)
    with pytest.raises(IndexError):
        arr[2]
    with pytest.raises(IndexError):
        arr[-1]


def test_array_rejects_non_objects():
    arr = Array(1)
    with pytest.raises(TypeError):
        arr[0] = None
    assert arr[0] is None


def test_array_negative_size_raises():
    with pytest.raises(ValueError):
        Array(-1)


def test_array_set_replaces_value():
    arr = Array(1)
    arr[0] = Integer(1)
    arr[0] = Integer(2)
    assert arr[0] == Integer(2)


def test_integer_wraps_to_32_bits():
    big = add(Integer(2**31 - 1), Integer(1))
    assert big.value == -(2**31)


def test_float_is_single_precision():
    assert Float(0.1).value != 0.1
    assert math.isclose(Float(0.1).value, 0.1, rel_tol=1e-7)


def test_add_rejects_plain_python_values():
    with pytest.raises(TypeError):
        add(Integer(1), 1)