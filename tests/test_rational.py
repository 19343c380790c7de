import fractions

import pytest

import pbindgen.rational


def test_parse_integer_string () -> None:

	"""A whole-number string parses to a whole rational."""

	assert pbindgen.rational.parse_rational("3") == fractions.Fraction(3)


def test_parse_fraction_string () -> None:

	"""An ``n/d`` string parses exactly and is reduced."""

	assert pbindgen.rational.parse_rational("2/6") == fractions.Fraction(1, 3)
	assert pbindgen.rational.parse_rational(" 3/2 ") == fractions.Fraction(3, 2)


def test_parse_decimal_string_and_float () -> None:

	"""Decimals parse to their exact decimal value, not the binary float."""

	assert pbindgen.rational.parse_rational("0.25") == fractions.Fraction(1, 4)
	assert pbindgen.rational.parse_rational(0.1) == fractions.Fraction(1, 10)
	assert pbindgen.rational.parse_rational(2) == fractions.Fraction(2)


def test_parse_passes_fractions_through () -> None:

	"""An existing Fraction is returned unchanged."""

	value = fractions.Fraction(5, 7)

	assert pbindgen.rational.parse_rational(value) is value


@pytest.mark.parametrize("bad", ["", "   ", "abc", "1/", "1//2", "one third", "1/0", True, None, [1], float("nan"), float("inf")])
def test_parse_rejects_malformed (bad: object) -> None:

	"""Malformed literals raise a RationalParseError (a ValueError)."""

	with pytest.raises(pbindgen.rational.RationalParseError):
		pbindgen.rational.parse_rational(bad)  # type: ignore[arg-type]


def test_parse_error_names_the_literal () -> None:

	"""The error message quotes the offending text."""

	with pytest.raises(ValueError, match="abc"):
		pbindgen.rational.parse_rational("abc")


def test_make_rational_reduces_and_normalises_sign () -> None:

	"""Integer pairs are stored in lowest terms with a positive denominator."""

	value = pbindgen.rational.make_rational(4, -6)

	assert value.numerator == -2
	assert value.denominator == 3


def test_make_rational_zero_denominator () -> None:

	"""A zero denominator is rejected."""

	with pytest.raises(pbindgen.rational.RationalParseError):
		pbindgen.rational.make_rational(1, 0)


def test_arithmetic_is_exact () -> None:

	"""Three thirds sum to exactly one."""

	third = pbindgen.rational.make_rational(1, 3)
	total = pbindgen.rational.add(pbindgen.rational.add(third, third), third)

	assert total == 1
	assert pbindgen.rational.sub(total, third) == fractions.Fraction(2, 3)
	assert pbindgen.rational.mul(third, pbindgen.rational.make_rational(3)) == 1


def test_comparisons () -> None:

	"""less_than and less_or_equal compare exactly."""

	a = fractions.Fraction(1, 3)
	b = fractions.Fraction(2, 6)

	assert not pbindgen.rational.less_than(a, b)
	assert pbindgen.rational.less_or_equal(a, b)
	assert pbindgen.rational.less_than(a, fractions.Fraction(1, 2))


def test_min_prefers_first_on_tie () -> None:

	"""min_rational returns the first argument when equal."""

	a = fractions.Fraction(1, 2)
	b = fractions.Fraction(2, 4)

	assert pbindgen.rational.min_rational(a, b) is a
	assert pbindgen.rational.min_rational(fractions.Fraction(1), a) is a


def test_display_literal () -> None:

	"""Whole values render bare; others render as n/d, never as decimals."""

	assert pbindgen.rational.to_display_literal(fractions.Fraction(4)) == "4"
	assert pbindgen.rational.to_display_literal(fractions.Fraction(1, 3)) == "1/3"
	assert pbindgen.rational.to_display_literal(fractions.Fraction(-3, 2)) == "-3/2"
	assert pbindgen.rational.to_display_literal(fractions.Fraction(0)) == "0"
