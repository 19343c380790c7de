import fractions

import pbindgen.model
import pbindgen.serializer
import pbindgen.voices


F = fractions.Fraction
Scalar = pbindgen.model.Scalar
Chord = pbindgen.model.Chord
REST = pbindgen.voices.REST
ValueCell = pbindgen.voices.ValueCell


def _voices (**overrides):

	"""One-step voices with every key set to a rest, root 0 and dur 1."""

	fields = {key: (REST,) for key in ("scale", "octave", "degree", "legato", "amp", "strum")}
	fields["root"] = (ValueCell(Scalar(0)),)
	fields["dur"] = (ValueCell(Scalar(F(1))),)
	fields.update(overrides)

	return pbindgen.voices.Voices(**fields)


def test_format_number () -> None:

	"""Whole floats drop the decimal point; rationals render as n/d."""

	assert pbindgen.serializer.format_number(1) == "1"
	assert pbindgen.serializer.format_number(1.0) == "1"
	assert pbindgen.serializer.format_number(0.5) == "0.5"
	assert pbindgen.serializer.format_number(-2) == "-2"
	assert pbindgen.serializer.format_number(F(1, 3)) == "1/3"
	assert pbindgen.serializer.format_number(F(8, 2)) == "4"


def test_format_cell () -> None:

	"""Rests, scalars and chords each have their own form."""

	assert pbindgen.serializer.format_cell(REST) == "Rest()"
	assert pbindgen.serializer.format_cell(ValueCell(Scalar(3))) == "3"
	assert pbindgen.serializer.format_cell(ValueCell(Chord((0, 2, 4)))) == "[0, 2, 4]"


def test_scale_tokens () -> None:

	"""Scales render as Scale.<name>."""

	tokens = pbindgen.serializer.voice_tokens("scale", [ValueCell(Scalar("major")), REST])

	assert tokens == ["Scale.major", "Rest()"]


def test_format_instrument () -> None:

	"""Blank names fall back to \\default and a backslash is added when missing."""

	assert pbindgen.serializer.format_instrument(None) == "\\default"
	assert pbindgen.serializer.format_instrument("   ") == "\\default"
	assert pbindgen.serializer.format_instrument(" pad ") == "\\pad"
	assert pbindgen.serializer.format_instrument("\\bass") == "\\bass"


def test_format_repeats () -> None:

	"""Positive loop counts are kept; anything else loops forever."""

	assert pbindgen.serializer.format_repeats(None) == "inf"
	assert pbindgen.serializer.format_repeats(0) == "inf"
	assert pbindgen.serializer.format_repeats(-3) == "inf"
	assert pbindgen.serializer.format_repeats(4) == "4"


def test_render_program_layout () -> None:

	"""The program follows the Pbind layout exactly."""

	voices = _voices(
		scale = (ValueCell(Scalar("major")), REST),
		root = (ValueCell(Scalar(3)), ValueCell(Scalar(3))),
		octave = (ValueCell(Scalar(4)), REST),
		degree = (ValueCell(Chord((0, 2))), REST),
		legato = (ValueCell(Scalar(0.5)), REST),
		amp = (ValueCell(Scalar(1)), REST),
		strum = (ValueCell(Scalar(0)), REST),
		dur = (ValueCell(Scalar(F(1, 3))), ValueCell(Scalar(F(11, 3))))
	)

	expected = "\n".join([
		"(",
		"Pbind(",
		r"  \instrument, \default,",
		r"  \scale,   Pseq([Scale.major, Rest()], inf),",
		r"  \root,    Pseq([Pn(3, 2)], inf),",
		r"  \octave,  Pseq([4, Rest()], inf),",
		r"  \degree,  Pseq([[0, 2], Rest()], inf),",
		r"  \legato,  Pseq([0.5, Rest()], inf),",
		r"  \amp,     Pseq([1, Rest()], inf),",
		r"  \strum,   Pseq([0, Rest()], inf),",
		r"  \dur,     Pseq([1/3, 11/3], inf)",
		").play",
		")",
	])

	assert pbindgen.serializer.render_program(voices) == expected


def test_render_program_options () -> None:

	"""Instrument, loop count and compression options are applied."""

	voices = _voices(root=(ValueCell(Scalar(0)), ValueCell(Scalar(0))), dur=(ValueCell(Scalar(F(1))), ValueCell(Scalar(F(1)))), scale=(REST, REST), octave=(REST, REST), degree=(REST, REST), legato=(REST, REST), amp=(REST, REST), strum=(REST, REST))

	options = pbindgen.serializer.PatternOptions(instrument="pad", loop_count=2, compress=False)
	program = pbindgen.serializer.render_program(voices, options)

	assert r"  \instrument, \pad," in program
	assert r"  \dur,     Pseq([1, 1], 2)" in program
	assert r"  \root,    Pseq([0, 0], 2)" in program
	assert "Pn(" not in program
