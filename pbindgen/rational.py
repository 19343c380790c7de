"""Exact rational arithmetic for beat positions and durations.

Every start, duration and bar total in pbindgen is a ``fractions.Fraction``.
User-entered durations such as ``1/3`` have no exact binary floating point
form, and summing dozens of rounded chunk durations would drift away from the
bar total. This module is the single place where literals are parsed and
where rationals are rendered back to text.

Example:
	```python
	import pbindgen.rational as rational

	third = rational.parse_rational("1/3")
	rational.to_display_literal(rational.add(third, third))  # "2/3"
	rational.to_display_literal(rational.make_rational(6, 3))  # "2"
	```
"""

import fractions
import math
import numbers
import typing


RationalNumber = fractions.Fraction

RationalLike = typing.Union[str, int, float, fractions.Fraction]


class RationalParseError (ValueError):

	"""
	Raised when a value cannot be read as an exact rational number.
	"""

	pass


def make_rational (numerator: int, denominator: int = 1) -> RationalNumber:

	"""Build a reduced rational from an integer pair.

	Parameters:
		numerator: Signed integer numerator
		denominator: Non-zero integer denominator (sign is moved to the numerator)

	Returns:
		A ``Fraction`` in lowest terms with a positive denominator
	"""

	if denominator == 0:
		raise RationalParseError(f"Zero denominator in {numerator}/{denominator}")

	return fractions.Fraction(numerator, denominator)


def parse_rational (value: RationalLike) -> RationalNumber:

	"""Read an integer, float, decimal string or ``"n/d"`` string exactly.

	Floats are converted through their shortest ``repr`` so that ``0.1``
	becomes ``1/10`` rather than its binary expansion.

	Parameters:
		value: The literal to parse

	Returns:
		The exact rational value

	Raises:
		RationalParseError: If the value is malformed, boolean, non-finite or
			has a zero denominator.

	Example:
		```python
		parse_rational("3/2")   # Fraction(3, 2)
		parse_rational("0.25")  # Fraction(1, 4)
		parse_rational(2)       # Fraction(2, 1)
		```
	"""

	if isinstance(value, bool):
		raise RationalParseError(f"Expected a rational literal, got boolean {value!r}")

	if isinstance(value, fractions.Fraction):
		return value

	if isinstance(value, numbers.Integral):
		return fractions.Fraction(int(value))

	if isinstance(value, float):

		if not math.isfinite(value):
			raise RationalParseError(f"Expected a finite number, got {value!r}")

		return fractions.Fraction(repr(value))

	if isinstance(value, str):

		text = value.strip()

		if not text:
			raise RationalParseError("Expected a rational literal, got an empty string")

		try:
			result = fractions.Fraction(text)
		except ZeroDivisionError:
			raise RationalParseError(f"Zero denominator in {value!r}") from None
		except ValueError:
			raise RationalParseError(f"Invalid rational literal {value!r} (expected e.g. '3', '0.5' or '1/3')") from None

		return result

	raise RationalParseError(f"Expected a rational literal, got {type(value).__name__}")


def add (a: RationalNumber, b: RationalNumber) -> RationalNumber:

	"""Exact sum."""

	return a + b


def sub (a: RationalNumber, b: RationalNumber) -> RationalNumber:

	"""Exact difference."""

	return a - b


def mul (a: RationalNumber, b: RationalNumber) -> RationalNumber:

	"""Exact product."""

	return a * b


def less_than (a: RationalNumber, b: RationalNumber) -> bool:

	"""Exact ``a < b``."""

	return a < b


def less_or_equal (a: RationalNumber, b: RationalNumber) -> bool:

	"""Exact ``a <= b``."""

	return a <= b


def min_rational (a: RationalNumber, b: RationalNumber) -> RationalNumber:

	"""Return the smaller value, preferring ``a`` on ties."""

	return b if b < a else a


def to_display_literal (value: RationalNumber) -> str:

	"""Render ``"n"`` for whole values and ``"n/d"`` otherwise, never a decimal.

	Example:
		```python
		to_display_literal(Fraction(4))      # "4"
		to_display_literal(Fraction(-1, 3))  # "-1/3"
		```
	"""

	if value.denominator == 1:
		return str(value.numerator)

	return f"{value.numerator}/{value.denominator}"


def to_float (value: RationalNumber) -> float:

	"""Approximate as a float, for display only."""

	return float(value)
