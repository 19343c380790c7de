"""Build a gapless, non-overlapping timeline from events.

Events are sorted by start (shorter first on ties) and walked once with a
cursor. Gaps become ``Rest`` chunks. Each event sounds until the next event
starts, its own end, or the end of the grid, whichever comes first, so only
one event is audible at any instant. When several events share a start,
each is cut off by the next one at that same instant, so only the last of
them in sort order (the longest) sounds.

Example:
	```python
	events = pbindgen.expander.expand_points(points)
	timeline = pbindgen.timeline.build_timeline(events, total=Fraction(4))
	sum(timeline.durations) == 4  # always
	```
"""

import logging
import typing

import pbindgen.model
import pbindgen.rational


logger = logging.getLogger(__name__)


def sort_events (events: typing.Iterable[pbindgen.model.Event]) -> typing.List[pbindgen.model.Event]:

	"""Order events by start, then by duration. Equal keys keep input order."""

	return sorted(events, key=lambda event: (event.start, event.duration))


def build_timeline (events: typing.Iterable[pbindgen.model.Event], total: pbindgen.rational.RationalNumber) -> pbindgen.model.Timeline:

	"""Fill gaps, trim overlaps and clip to ``total``.

	Parameters:
		events: Expanded events in any order
		total: Grid length in beats, must be positive

	Returns:
		A timeline whose chunk durations sum exactly to ``total``
	"""

	if total <= 0:
		raise ValueError(f"Timeline total must be positive, got {total}")

	ordered = sort_events(events)
	chunks: typing.List[pbindgen.model.Chunk] = []
	t = pbindgen.rational.make_rational(0)

	for i, event in enumerate(ordered):

		# Sorted, so this and every later event starts at or past the grid end.
		if not pbindgen.rational.less_than(event.start, total):
			logger.debug(f"Dropped {len(ordered) - i} event(s) starting at or beyond the grid end at {total}")
			break

		if pbindgen.rational.less_than(t, event.start):
			chunks.append(pbindgen.model.Rest(duration=pbindgen.rational.sub(event.start, t)))
			t = event.start

		next_start = ordered[i + 1].start if i + 1 < len(ordered) else total
		hard_end = pbindgen.rational.min_rational(next_start, event.end)
		clip_end = pbindgen.rational.min_rational(hard_end, total)

		if pbindgen.rational.less_than(t, clip_end):
			chunks.append(pbindgen.model.NoteChunk(duration=pbindgen.rational.sub(clip_end, t), event=event))
			t = clip_end

		else:
			logger.debug(f"Dropped event at {event.start} (duration {event.duration}): no audible time left")

		if not pbindgen.rational.less_than(t, total):

			dropped = len(ordered) - i - 1

			if dropped:
				logger.debug(f"Dropped {dropped} event(s) beyond the grid end at {total}")

			break

	if pbindgen.rational.less_than(t, total):
		chunks.append(pbindgen.model.Rest(duration=pbindgen.rational.sub(total, t)))

	return pbindgen.model.Timeline(chunks=tuple(chunks), total=total)
