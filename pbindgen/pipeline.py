"""End-to-end build: points and settings in, timeline and program text out.

``build()`` is a pure function of its arguments. Callers must hand it one
complete snapshot of the editor state; it keeps nothing between calls.
"""

import dataclasses
import typing

import pbindgen.expander
import pbindgen.model
import pbindgen.rational
import pbindgen.serializer
import pbindgen.snapshot
import pbindgen.timeline
import pbindgen.voices


@dataclasses.dataclass(frozen=True)
class BuildResult:

	"""
	Everything one build produces.
	"""

	timeline: pbindgen.model.Timeline
	voices: pbindgen.voices.Voices
	program: str

	@property
	def chunk_count (self) -> int:

		"""Number of chunks (steps in every ``Pseq``)."""

		return len(self.timeline)

	@property
	def durations_exact (self) -> typing.List[pbindgen.rational.RationalNumber]:

		"""Exact per-chunk durations."""

		return self.timeline.durations

	@property
	def durations (self) -> typing.List[float]:

		"""Per-chunk durations as floats, for display only."""

		return [pbindgen.rational.to_float(d) for d in self.timeline.durations]


def build (
	points: typing.Iterable[pbindgen.model.Point],
	settings: typing.Optional[pbindgen.model.Settings] = None,
	options: typing.Optional[pbindgen.serializer.PatternOptions] = None
) -> BuildResult:

	"""Expand points, lay out the timeline and render the program.

	Parameters:
		points: Validated points (see ``pbindgen.snapshot``)
		settings: Grid settings, 4/4 with one bar when omitted
		options: Program output options

	Returns:
		The timeline, its voices and the program text

	Example:
		```python
		result = pbindgen.build(points, Settings(beats_per_bar=4, bars=2))
		print(result.program)
		```
	"""

	if settings is None:
		settings = pbindgen.model.Settings()

	events = pbindgen.expander.expand_points(points)
	timeline = pbindgen.timeline.build_timeline(events, settings.total)
	voices = pbindgen.voices.extract_voices(timeline)
	program = pbindgen.serializer.render_program(voices, options)

	return BuildResult(timeline=timeline, voices=voices, program=program)


def build_snapshot (snapshot: pbindgen.snapshot.Snapshot) -> BuildResult:

	"""Build from a decoded editor snapshot, using its own output options."""

	return build(snapshot.points, snapshot.settings, snapshot.options)
