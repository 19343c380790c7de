"""Render voices as a SuperCollider ``Pbind`` program.

Output layout:

	```
	(
	Pbind(
	  \\instrument, \\default,
	  \\scale,   Pseq([Scale.major, Rest()], inf),
	  ...
	  \\dur,     Pseq([1/3, Pn(1, 2)], inf)
	).play
	)
	```

Every voice is rendered token by token, run-length compressed on its own,
and placed in a ``Pseq`` that repeats ``loop_count`` times (``inf`` when
unset). Durations are always exact rational literals such as ``1/3``.
"""

import dataclasses
import fractions
import typing

import pbindgen.compression
import pbindgen.constants
import pbindgen.model
import pbindgen.rational
import pbindgen.voices


@dataclasses.dataclass(frozen=True)
class PatternOptions:

	"""
	Output options for ``render_program``.
	"""

	instrument: typing.Optional[str] = None
	loop_count: typing.Optional[int] = None
	compress: bool = True


def format_number (value: typing.Any) -> str:

	"""Render a number the way the sequencer reads it.

	Whole floats lose their ``.0``; rationals use ``n/d`` literals.
	"""

	if isinstance(value, fractions.Fraction):
		return pbindgen.rational.to_display_literal(value)

	if isinstance(value, float):
		return str(int(value)) if value.is_integer() else repr(value)

	return str(value)


def format_scale (name: typing.Any) -> str:

	"""``major`` -> ``Scale.major``."""

	return f"{pbindgen.constants.SCALE_PREFIX}{name}"


def format_field (field: pbindgen.model.PitchField, format_item: typing.Callable[[typing.Any], str] = format_number) -> str:

	"""Render a scalar as-is and a chord as a bracketed list."""

	if isinstance(field, pbindgen.model.Chord):
		return "[" + ", ".join(format_item(v) for v in field.values) + "]"

	return format_item(field.value)


def format_cell (cell: pbindgen.voices.Cell, format_item: typing.Callable[[typing.Any], str] = format_number) -> str:

	"""Render one voice entry."""

	if isinstance(cell, pbindgen.voices.RestCell):
		return pbindgen.constants.REST_TOKEN

	return format_field(cell.field, format_item)


def voice_tokens (key: str, cells: typing.Iterable[pbindgen.voices.Cell]) -> typing.List[str]:

	"""Render every cell of the voice named ``key``."""

	format_item = format_scale if key == "scale" else format_number

	return [format_cell(cell, format_item) for cell in cells]


def format_instrument (instrument: typing.Optional[str]) -> str:

	"""Return a ``\\symbol`` literal, falling back to ``\\default``."""

	name = (instrument or "").strip()

	if not name:
		name = pbindgen.constants.DEFAULT_INSTRUMENT

	return name if name.startswith("\\") else f"\\{name}"


def format_repeats (loop_count: typing.Optional[int]) -> str:

	"""A positive loop count as an integer literal, otherwise ``inf``."""

	if loop_count is None or isinstance(loop_count, bool):
		return pbindgen.constants.INFINITE_REPEATS

	try:
		count = int(loop_count)
	except (TypeError, ValueError):
		return pbindgen.constants.INFINITE_REPEATS

	if count < 1:
		return pbindgen.constants.INFINITE_REPEATS

	return str(count)


def render_program (voices: pbindgen.voices.Voices, options: typing.Optional[PatternOptions] = None) -> str:

	"""Join the voices into the complete program text.

	Parameters:
		voices: Per-key cells extracted from a timeline
		options: Instrument, loop count and compression settings

	Returns:
		The ``Pbind(...).play`` program, wrapped in a parenthesised block
	"""

	if options is None:
		options = PatternOptions()

	repeats = format_repeats(options.loop_count)

	lines = [
		"(",
		"Pbind(",
		f"  \\instrument, {format_instrument(options.instrument)},"
	]

	entries = []

	for key, cells in voices.items():

		tokens = pbindgen.compression.render_tokens(voice_tokens(key, cells), compress=options.compress)
		label = f"\\{key},".ljust(pbindgen.constants.KEY_COLUMN_WIDTH)

		entries.append(f"  {label}Pseq([{', '.join(tokens)}], {repeats})")

	lines.append(",\n".join(entries))
	lines.append(").play")
	lines.append(")")

	return "\n".join(lines)
