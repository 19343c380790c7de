import fractions
import typing

import pytest

import pbindgen.model


def note (**kwargs: typing.Any) -> pbindgen.model.NoteSpec:

	"""Shorthand for a NoteSpec."""

	return pbindgen.model.NoteSpec(**kwargs)


def point (
	start: typing.Union[int, str] = 0,
	duration: typing.Union[int, str] = 1,
	repeat: int = 1,
	notes: typing.Optional[typing.Sequence[pbindgen.model.NoteSpec]] = None,
	strum: typing.Optional[float] = None
) -> pbindgen.model.Point:

	"""Build a point from integer or ``"n/d"`` start and duration."""

	return pbindgen.model.Point(
		start = fractions.Fraction(start),
		duration = fractions.Fraction(duration),
		repeat = repeat,
		notes = tuple(notes) if notes else (note(degree=0),),
		strum = strum
	)


@pytest.fixture
def one_bar () -> pbindgen.model.Settings:

	"""A single bar of 4/4."""

	return pbindgen.model.Settings(beats_per_bar=4, beat_unit=4, bars=1)
