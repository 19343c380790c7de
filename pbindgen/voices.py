"""Split a timeline into per-attribute voices.

A voice is one ``Pbind`` key's array: one cell per chunk, aligned by index
across all voices. Each cell is either a ``RestCell`` (silence) or a
``ValueCell`` holding a pitch field.

Most voices rest on rest chunks. The root voice never does: the sequencer
needs ``\\root`` defined even during silence, so it holds the most recent
root across rests (and across notes that set none), starting from 0.
"""

import dataclasses
import itertools
import typing

import pbindgen.constants
import pbindgen.model


@dataclasses.dataclass(frozen=True)
class RestCell:

	"""
	A voice entry that renders as silence.
	"""

	pass


@dataclasses.dataclass(frozen=True)
class ValueCell:

	"""
	A voice entry carrying a scalar or chord value.
	"""

	field: pbindgen.model.PitchField


Cell = typing.Union[RestCell, ValueCell]

REST = RestCell()


@dataclasses.dataclass(frozen=True)
class Voices:

	"""
	The parallel per-key arrays of a timeline.
	"""

	scale: typing.Tuple[Cell, ...]
	root: typing.Tuple[Cell, ...]
	octave: typing.Tuple[Cell, ...]
	degree: typing.Tuple[Cell, ...]
	legato: typing.Tuple[Cell, ...]
	amp: typing.Tuple[Cell, ...]
	strum: typing.Tuple[Cell, ...]
	dur: typing.Tuple[Cell, ...]

	def items (self) -> typing.List[typing.Tuple[str, typing.Tuple[Cell, ...]]]:

		"""Return ``(key, cells)`` pairs in ``Pbind`` key order."""

		return [(key, getattr(self, key)) for key in pbindgen.constants.VOICE_KEYS]


def _optional_cell (field: typing.Optional[pbindgen.model.PitchField]) -> Cell:

	if field is None:
		return REST

	return ValueCell(field)


def _note_cell (chunk: pbindgen.model.Chunk, attribute: typing.Callable[[pbindgen.model.Event], typing.Optional[pbindgen.model.PitchField]]) -> Cell:

	if isinstance(chunk, pbindgen.model.Rest):
		return REST

	return _optional_cell(attribute(chunk.event))


def hold_root (previous: pbindgen.model.PitchField, chunk: pbindgen.model.Chunk) -> pbindgen.model.PitchField:

	"""Return the root in force after ``chunk``, given the root before it.

	Only a note chunk that sets a root changes it.
	"""

	if isinstance(chunk, pbindgen.model.NoteChunk) and chunk.event.root is not None:
		return chunk.event.root

	return previous


def root_fields (chunks: typing.Iterable[pbindgen.model.Chunk], initial: typing.Optional[pbindgen.model.PitchField] = None) -> typing.List[pbindgen.model.PitchField]:

	"""Fold ``hold_root`` over the chunks, one root per chunk.

	Example:
		```python
		# note(root=3), rest -> [Scalar(3), Scalar(3)]
		root_fields(timeline.chunks)
		```
	"""

	if initial is None:
		initial = pbindgen.model.Scalar(pbindgen.constants.DEFAULT_ROOT)

	held = itertools.accumulate(chunks, hold_root, initial=initial)

	# Skip the seed; what remains lines up with the chunks.
	next(held)

	return list(held)


def _scale_cell (chunk: pbindgen.model.Chunk) -> Cell:

	if isinstance(chunk, pbindgen.model.Rest) or chunk.event.scale is None:
		return REST

	return ValueCell(pbindgen.model.Scalar(chunk.event.scale))


def _strum_cell (chunk: pbindgen.model.Chunk) -> Cell:

	if isinstance(chunk, pbindgen.model.Rest):
		return REST

	strum = chunk.event.strum

	return ValueCell(pbindgen.model.Scalar(pbindgen.constants.DEFAULT_STRUM if strum is None else strum))


def extract_voices (timeline: pbindgen.model.Timeline) -> Voices:

	"""Build every voice for the timeline, one cell per chunk."""

	chunks = timeline.chunks

	return Voices(
		scale = tuple(_scale_cell(c) for c in chunks),
		root = tuple(ValueCell(field) for field in root_fields(chunks)),
		octave = tuple(_note_cell(c, lambda e: e.octave) for c in chunks),
		degree = tuple(_note_cell(c, lambda e: e.degree) for c in chunks),
		legato = tuple(_note_cell(c, lambda e: e.legato) for c in chunks),
		amp = tuple(_note_cell(c, lambda e: e.amp) for c in chunks),
		strum = tuple(_strum_cell(c) for c in chunks),
		dur = tuple(ValueCell(pbindgen.model.Scalar(c.duration)) for c in chunks)
	)
