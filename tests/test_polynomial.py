from algokit.polynomial import Term, add_polynomials, format_polynomial

FIRST = [Term(2, 2), Term(3, 1)]
SECOND = [Term(5, 1), Term(6, 0)]


def test_driver_example_sum():
    assert add_polynomials(FIRST, SECOND) == [Term(2, 2), Term(8, 1), Term(6, 0)]


def test_driver_example_format():
    assert format_polynomial(add_polynomials(FIRST, SECOND)) == "2x^(2) + 8x^(1) + 6x^(0)"


def test_format_single_and_empty():
    assert format_polynomial([Term(3, 1)]) == "3x^(1)"
    assert format_polynomial([]) == "Empty!"


def test_adding_empty_is_identity():
    assert add_polynomials(FIRST, []) == FIRST
    assert add_polynomials([], SECOND) == SECOND


def test_addition_is_commutative():
    assert add_polynomials(FIRST, SECOND) == add_polynomials(SECOND, FIRST)


def test_result_powers_descend_and_totals_match():
    first = [Term(1, 5), Term(4, 3), Term(2, 0)]
    second = [Term(7, 4), Term(1, 3), Term(3, 1)]
    result = add_polynomials(first, second)
    powers = [term.power for term in result]
    assert powers == sorted(powers, reverse=True)
    assert len(set(powers)) == len(powers)
    total = sum(t.coefficient for t in first) + sum(t.coefficient for t in second)
    assert sum(t.coefficient for t in result) == total


def test_evaluation_is_additive():
    first = [Term(3, 3), Term(-2, 1)]
    second = [Term(1, 2), Term(4, 1), Term(5, 0)]

    def evaluate(terms, x):
        return sum(t.coefficient * x ** t.power for t in terms)

    result = add_polynomials(first, second)
    for x in (-2, 0, 1, 3):
        assert evaluate(result, x) == evaluate(first, x) + evaluate(second, x)