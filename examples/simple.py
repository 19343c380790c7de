import fractions
import logging

import pbindgen

logging.basicConfig(level=logging.INFO)

F = fractions.Fraction

# Bass on every beat, with a triplet fill in the last beat of the bar.
points = [
	pbindgen.Point(
		start = F(0),
		duration = F(1),
		repeat = 3,
		notes = (pbindgen.NoteSpec(scale="minor", root=2, degree=0, octave=3, legato=0.9),)
	),
	pbindgen.Point(
		start = F(3),
		duration = F(1, 3),
		repeat = 3,
		notes = (
			pbindgen.NoteSpec(scale="minor", root=2, degree=4, octave=3),
			pbindgen.NoteSpec(degree=7, octave=3, amp=0.7),
		)
	),
]

result = pbindgen.build(
	points,
	pbindgen.Settings(beats_per_bar=4, beat_unit=4, bars=1),
	pbindgen.PatternOptions(instrument="bass", loop_count=4)
)

logging.info(f"{result.chunk_count} chunks: {result.durations}")

print(result.program)
