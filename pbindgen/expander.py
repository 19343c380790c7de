"""Expand points into discrete events.

A point with ``repeat=n`` becomes ``n`` events laid end to end, each carrying
the point's notes projected into one field per attribute. An attribute set
on exactly one note becomes a ``Scalar``; set on several notes it becomes a
``Chord`` in note order; set on none it stays ``None``.

The scale is the exception. A ``Pbind`` step accepts one scale only, so the
first scale that is set (and is not ``"none"``) wins and the rest of the
chord's scales are discarded.
"""

import typing

import pbindgen.constants
import pbindgen.model
import pbindgen.rational


def project (values: typing.Sequence[typing.Any]) -> typing.Optional[pbindgen.model.PitchField]:

	"""Collapse per-note values into a pitch field, skipping unset ones.

	Example:
		```python
		project([3])           # Scalar(3)
		project([0, None, 4])  # Chord((0, 4))
		project([None])        # None
		```
	"""

	present = tuple(v for v in values if v is not None)

	if not present:
		return None

	if len(present) == 1:
		return pbindgen.model.Scalar(present[0])

	return pbindgen.model.Chord(present)


def pick_scale (notes: typing.Sequence[pbindgen.model.NoteSpec]) -> typing.Optional[str]:

	"""Return the first usable scale name among the notes, if any."""

	for note in notes:
		if note.scale and note.scale != pbindgen.constants.SCALE_NONE:
			return note.scale

	return None


def expand_point (point: pbindgen.model.Point) -> typing.List[pbindgen.model.Event]:

	"""Turn one point into ``point.repeat`` consecutive events.

	Event ``i`` starts at ``point.start + i * point.duration`` and lasts
	``point.duration``.

	Parameters:
		point: The point to expand

	Returns:
		Events in repetition order
	"""

	if point.repeat < 1:
		raise ValueError(f"Repeat count must be at least 1, got {point.repeat}")

	notes = point.notes

	scale = pick_scale(notes)
	root = project([n.root for n in notes])
	degree = project([n.degree for n in notes])
	octave = project([n.octave for n in notes])

	# Legato and amp always have a value per note, so they are never None.
	legato = project([n.legato for n in notes]) or pbindgen.model.Scalar(pbindgen.constants.DEFAULT_LEGATO)
	amp = project([n.amp for n in notes]) or pbindgen.model.Scalar(pbindgen.constants.DEFAULT_AMP)

	events: typing.List[pbindgen.model.Event] = []

	for i in range(point.repeat):

		offset = pbindgen.rational.mul(point.duration, pbindgen.rational.make_rational(i))

		events.append(pbindgen.model.Event(
			start = pbindgen.rational.add(point.start, offset),
			duration = point.duration,
			scale = scale,
			root = root,
			degree = degree,
			octave = octave,
			legato = legato,
			amp = amp,
			strum = point.strum
		))

	return events


def expand_points (points: typing.Iterable[pbindgen.model.Point]) -> typing.List[pbindgen.model.Event]:

	"""Expand every point, keeping input order (the timeline sorts later)."""

	events: typing.List[pbindgen.model.Event] = []

	for point in points:
		events.extend(expand_point(point))

	return events
