"""
pbindgen - turn sparse, overlapping note points into a SuperCollider Pbind.

You place points on a bar/beat grid: a start, a duration, a repeat count and
one or more simultaneous notes (scale, root, degree, octave, legato, amp).
pbindgen lays them out as a gapless timeline and prints the ``Pbind`` that
plays it.

- **Exact time.** Starts and durations are rationals, so ``1/3`` stays
  ``1/3`` and the chunks always add up to exactly ``beats_per_bar * bars``.
- **Gaps and overlaps handled.** Silence becomes ``Rest()``. A later point
  cuts off an earlier one that would run into it, and nothing plays past
  the end of the grid.
- **Chords.** Several notes on one point render as arrays, e.g.
  ``\\degree, Pseq([[0, 2, 4], Rest()], inf)``.
- **Compact output.** Repeated steps collapse to ``Pn(token, count)``.

Minimal example:

	```python
	import pbindgen

	points = [
		pbindgen.Point(start=Fraction(0), duration=Fraction(1, 3), repeat=3,
			notes=(pbindgen.NoteSpec(scale="major", degree=0, octave=4),)),
	]

	result = pbindgen.build(points, pbindgen.Settings(beats_per_bar=4, bars=1))
	print(result.program)
	```

Or from the command line, with a YAML snapshot::

	python -m pbindgen examples/arpeggio.yaml

Package-level exports: ``build``, ``build_snapshot``, ``BuildResult``,
``Settings``, ``NoteSpec``, ``Point``, ``PatternOptions``, ``load_snapshot``,
``snapshot_from_dict``, ``parse_rational``.
"""

import pbindgen.model
import pbindgen.pipeline
import pbindgen.rational
import pbindgen.serializer
import pbindgen.snapshot


build = pbindgen.pipeline.build
build_snapshot = pbindgen.pipeline.build_snapshot
BuildResult = pbindgen.pipeline.BuildResult
Settings = pbindgen.model.Settings
NoteSpec = pbindgen.model.NoteSpec
Point = pbindgen.model.Point
PatternOptions = pbindgen.serializer.PatternOptions
load_snapshot = pbindgen.snapshot.load_snapshot
snapshot_from_dict = pbindgen.snapshot.snapshot_from_dict
parse_rational = pbindgen.rational.parse_rational
