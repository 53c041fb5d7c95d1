from fractus.complexmath import ZERO, Complex, add, conjugate, multiply, norm, norm_squared


def test_add():
    assert add(Complex(1.0, 2.0), Complex(-3.0, 0.5)) == Complex(-2.0, 2.5)


def test_multiply_component_form():
    assert multiply(Complex(1.0, 2.0), Complex(3.0, 4.0)) == Complex(-5.0, 10.0)


def test_multiply_by_i_rotates():
    assert multiply(Complex(0.0, 1.0), Complex(0.0, 1.0)) == Complex(-1.0, 0.0)


def test_norms():
    z = Complex(3.0, 4.0)
    assert norm_squared(z) == 25.0
    assert norm(z) == 5.0
    assert norm(ZERO) == 0.0


def test_conjugate():
    assert conjugate(Complex(1.5, -2.0)) == Complex(1.5, 2.0)


def test_operators_match_functions():
    a, b = Complex(0.25, -1.0), Complex(2.0, 3.0)
    assert a + b == add(a, b)
    assert a * b == multiply(a, b)
    assert abs(a) == norm(a)


def test_values_are_immutable():
    z = Complex(1.0, 1.0)
    try:
        z.re = 2.0
    except AttributeError:
        pass
    else:
        raise AssertionError("Complex should be frozen")


def test_from_pair():
    assert Complex.from_pair([3, -1]) == Complex(3.0, -1.0)
