"""Data model shared by the expander, timeline builder and serializer.

Inputs (``Settings``, ``NoteSpec``, ``Point``) are an immutable snapshot of the
editor state. ``Event`` and the ``Chunk`` union are rebuilt from scratch on
every build and never outlive it.

Pitch attributes are held as a ``PitchField``: a ``Scalar`` when the point
plays a single value, or a ``Chord`` when several simultaneous notes disagree.
"""

import dataclasses
import typing

import pbindgen.constants
import pbindgen.rational


T = typing.TypeVar("T")


@dataclasses.dataclass(frozen=True)
class Scalar (typing.Generic[T]):

	"""
	A single attribute value shared by every note of an event.
	"""

	value: T


@dataclasses.dataclass(frozen=True)
class Chord (typing.Generic[T]):

	"""
	One attribute value per simultaneous note, in note order.
	"""

	values: typing.Tuple[T, ...]


PitchField = typing.Union[Scalar[T], Chord[T]]


@dataclasses.dataclass(frozen=True)
class Settings:

	"""
	Grid settings: the timeline spans ``beats_per_bar * bars`` beats.
	"""

	beats_per_bar: int = 4
	beat_unit: int = 4
	bars: int = 1

	@property
	def total (self) -> pbindgen.rational.RationalNumber:

		"""Exact length of the grid in beats."""

		return pbindgen.rational.make_rational(self.beats_per_bar * self.bars)


@dataclasses.dataclass(frozen=True)
class NoteSpec:

	"""
	One note of a point. ``None`` means the attribute was not set.
	"""

	scale: typing.Optional[str] = None
	root: typing.Optional[int] = None
	degree: typing.Optional[int] = None
	octave: typing.Optional[int] = None
	legato: float = pbindgen.constants.DEFAULT_LEGATO
	amp: float = pbindgen.constants.DEFAULT_AMP


@dataclasses.dataclass(frozen=True)
class Point:

	"""
	A user-placed block: ``repeat`` back-to-back events of ``duration`` beats
	starting at ``start``, each sounding every note in ``notes`` at once.
	"""

	start: pbindgen.rational.RationalNumber
	duration: pbindgen.rational.RationalNumber
	notes: typing.Tuple[NoteSpec, ...]
	repeat: int = 1
	strum: typing.Optional[float] = None


@dataclasses.dataclass(frozen=True)
class Event:

	"""
	One scheduled occurrence of a point, with its notes projected per attribute.
	"""

	start: pbindgen.rational.RationalNumber
	duration: pbindgen.rational.RationalNumber
	scale: typing.Optional[str] = None
	root: typing.Optional[PitchField[int]] = None
	degree: typing.Optional[PitchField[int]] = None
	octave: typing.Optional[PitchField[int]] = None
	legato: PitchField[float] = Scalar(pbindgen.constants.DEFAULT_LEGATO)
	amp: PitchField[float] = Scalar(pbindgen.constants.DEFAULT_AMP)
	strum: typing.Optional[float] = None

	@property
	def end (self) -> pbindgen.rational.RationalNumber:

		"""Nominal end before any trimming."""

		return self.start + self.duration


@dataclasses.dataclass(frozen=True)
class Rest:

	"""
	A silent stretch of the timeline.
	"""

	duration: pbindgen.rational.RationalNumber


@dataclasses.dataclass(frozen=True)
class NoteChunk:

	"""
	A sounding stretch of the timeline, possibly shorter than its event.
	"""

	duration: pbindgen.rational.RationalNumber
	event: Event


Chunk = typing.Union[Rest, NoteChunk]


@dataclasses.dataclass(frozen=True)
class Timeline:

	"""
	Contiguous chunks exactly covering ``[0, total)``.
	"""

	chunks: typing.Tuple[Chunk, ...]
	total: pbindgen.rational.RationalNumber

	def __len__ (self) -> int:

		return len(self.chunks)

	def __iter__ (self) -> typing.Iterator[Chunk]:

		return iter(self.chunks)

	@property
	def durations (self) -> typing.List[pbindgen.rational.RationalNumber]:

		"""Exact duration of each chunk, in order."""

		return [chunk.duration for chunk in self.chunks]
