"""Decode editor state into validated model objects.

This is the boundary between loosely typed editor data (dicts decoded from
YAML or JSON, numbers typed as strings) and the core. Rational literals are
parsed here and malformed input fails fast with a ``SnapshotError`` naming
the point and field, so nothing half-valid reaches the expander.

Both snake_case and the editor's camelCase keys are accepted.

Example:
	```python
	snapshot = pbindgen.snapshot.snapshot_from_dict({
		"settings": {"beats_per_bar": 4, "bars": 1},
		"points": [{"start": "0", "duration": "1/3", "repeat": 3, "notes": [{"degree": 0}]}],
	})
	```
"""

import dataclasses
import logging
import numbers
import typing

import yaml

import pbindgen.constants
import pbindgen.model
import pbindgen.rational
import pbindgen.serializer


logger = logging.getLogger(__name__)


class SnapshotError (ValueError):

	"""
	Raised when editor state cannot be turned into settings and points.
	"""

	pass


@dataclasses.dataclass(frozen=True)
class Snapshot:

	"""
	One consistent view of the editor: grid, points and output options.
	"""

	settings: pbindgen.model.Settings
	points: typing.Tuple[pbindgen.model.Point, ...]
	options: pbindgen.serializer.PatternOptions = pbindgen.serializer.PatternOptions()


def _get (data: typing.Mapping[str, typing.Any], *keys: str, default: typing.Any = None) -> typing.Any:

	"""Return the first key present (snake_case first, then aliases)."""

	for key in keys:
		if key in data:
			return data[key]

	return default


def _is_blank (value: typing.Any) -> bool:

	return value is None or (isinstance(value, str) and not value.strip())


def _to_number (value: typing.Any, where: str) -> float:

	if isinstance(value, bool):
		raise SnapshotError(f"{where}: expected a number, got {value!r}")

	if isinstance(value, numbers.Real):
		return value

	if isinstance(value, str):
		try:
			return float(value.strip())
		except ValueError:
			raise SnapshotError(f"{where}: expected a number, got {value!r}") from None

	raise SnapshotError(f"{where}: expected a number, got {type(value).__name__}")


def _optional_int (value: typing.Any, where: str) -> typing.Optional[int]:

	if _is_blank(value):
		return None

	number = _to_number(value, where)

	if number != number or number in (float("inf"), float("-inf")):
		raise SnapshotError(f"{where}: expected a finite number, got {value!r}")

	if int(number) != number:
		raise SnapshotError(f"{where}: expected a whole number, got {value!r}")

	return int(number)


def _non_negative (value: typing.Any, where: str, default: float) -> float:

	if _is_blank(value):
		return default

	number = _to_number(value, where)

	if not number >= 0:
		raise SnapshotError(f"{where}: must be a non-negative number, got {value!r}")

	return number


def _clamped_int (value: typing.Any, where: str, default: int) -> int:

	if _is_blank(value):
		return default

	number = _optional_int(value, where)

	if number is None or number < 1:
		logger.debug(f"{where}: {value!r} clamped to 1")
		return 1

	return number


def _repeat_count (value: typing.Any, where: str) -> int:

	"""Truncate to a whole count of at least 1; unreadable values count once."""

	if _is_blank(value):
		return 1

	try:
		number = _to_number(value, where)
	except SnapshotError:
		logger.debug(f"{where}: unreadable value {value!r} treated as 1")
		return 1

	if number != number or number in (float("inf"), float("-inf")):
		logger.debug(f"{where}: non-finite value {value!r} treated as 1")
		return 1

	count = int(number)

	if count < 1:
		logger.debug(f"{where}: {value!r} clamped to 1")
		return 1

	return count


def _flag (value: typing.Any, where: str, default: bool) -> bool:

	if _is_blank(value):
		return default

	if isinstance(value, bool):
		return value

	if isinstance(value, str):

		text = value.strip().lower()

		if text in ("true", "yes", "on", "1"):
			return True

		if text in ("false", "no", "off", "0"):
			return False

	elif isinstance(value, numbers.Integral) and value in (0, 1):
		return bool(value)

	raise SnapshotError(f"{where}: expected true or false, got {value!r}")


def as_mapping (data: typing.Any, where: str) -> typing.Mapping[str, typing.Any]:

	"""Return ``data`` as a mapping, treating ``None`` as empty."""

	if data is None:
		return {}

	if not isinstance(data, typing.Mapping):
		raise SnapshotError(f"{where}: expected a mapping, got {type(data).__name__}")

	return data


def _rational (value: typing.Any, where: str) -> pbindgen.rational.RationalNumber:

	try:
		return pbindgen.rational.parse_rational(value)
	except pbindgen.rational.RationalParseError as exc:
		raise SnapshotError(f"{where}: {exc}") from exc


def settings_from_dict (data: typing.Optional[typing.Mapping[str, typing.Any]]) -> pbindgen.model.Settings:

	"""Read grid settings, clamping each value to at least 1."""

	data = as_mapping(data, "settings")

	return pbindgen.model.Settings(
		beats_per_bar = _clamped_int(_get(data, "beats_per_bar", "beatsPerBar"), "settings.beats_per_bar", 4),
		beat_unit = _clamped_int(_get(data, "beat_unit", "beatUnit"), "settings.beat_unit", 4),
		bars = _clamped_int(_get(data, "bars"), "settings.bars", 1)
	)


def note_from_dict (data: typing.Mapping[str, typing.Any], where: str = "note") -> pbindgen.model.NoteSpec:

	"""Read one note. Unset pitch attributes stay ``None``."""

	data = as_mapping(data, where)

	scale = _get(data, "scale")

	if _is_blank(scale) or scale == pbindgen.constants.SCALE_NONE:
		scale = None

	elif not isinstance(scale, str):
		raise SnapshotError(f"{where}.scale: expected a scale name, got {scale!r}")

	return pbindgen.model.NoteSpec(
		scale = scale,
		root = _optional_int(_get(data, "root"), f"{where}.root"),
		degree = _optional_int(_get(data, "degree"), f"{where}.degree"),
		octave = _optional_int(_get(data, "octave"), f"{where}.octave"),
		legato = _non_negative(_get(data, "legato"), f"{where}.legato", pbindgen.constants.DEFAULT_LEGATO),
		amp = _non_negative(_get(data, "amp"), f"{where}.amp", pbindgen.constants.DEFAULT_AMP)
	)


def point_from_dict (data: typing.Mapping[str, typing.Any], index: int = 0) -> pbindgen.model.Point:

	"""Read one point, validating its start and duration.

	A point without a ``notes`` list (or with an empty one) is read as a
	single note using its own pitch fields.

	Raises:
		SnapshotError: If the start or duration is missing or malformed, the
			duration is not positive, or the start is negative.
	"""

	where = f"points[{index}]"

	if not isinstance(data, typing.Mapping):
		raise SnapshotError(f"{where}: expected a mapping, got {type(data).__name__}")

	raw_start = _get(data, "start", "start_beat", "startBeat")
	raw_duration = _get(data, "duration", "dur")

	if _is_blank(raw_duration):
		raise SnapshotError(f"{where}.duration: missing")

	start = pbindgen.rational.make_rational(0) if _is_blank(raw_start) else _rational(raw_start, f"{where}.start")
	duration = _rational(raw_duration, f"{where}.duration")

	if duration <= 0:
		raise SnapshotError(f"{where}.duration: must be positive, got {pbindgen.rational.to_display_literal(duration)}")

	if start < 0:
		raise SnapshotError(f"{where}.start: must not be negative, got {pbindgen.rational.to_display_literal(start)}")

	raw_notes = _get(data, "notes")

	if raw_notes:
		if not isinstance(raw_notes, (list, tuple)):
			raise SnapshotError(f"{where}.notes: expected a list, got {type(raw_notes).__name__}")
		notes = tuple(note_from_dict(n, f"{where}.notes[{i}]") for i, n in enumerate(raw_notes))

	else:
		notes = (note_from_dict(data, where),)

	raw_strum = _get(data, "strum")

	return pbindgen.model.Point(
		start = start,
		duration = duration,
		notes = notes,
		repeat = _repeat_count(_get(data, "repeat"), f"{where}.repeat"),
		strum = None if _is_blank(raw_strum) else _non_negative(raw_strum, f"{where}.strum", pbindgen.constants.DEFAULT_STRUM)
	)


def options_from_dict (data: typing.Optional[typing.Mapping[str, typing.Any]]) -> pbindgen.serializer.PatternOptions:

	"""Read output options. Invalid loop counts fall back to looping forever."""

	data = as_mapping(data, "output")

	loop_count = _get(data, "loop_count", "loopCount")

	try:
		loop_count = None if _is_blank(loop_count) else _optional_int(loop_count, "output.loop_count")
	except SnapshotError:
		logger.warning(f"Ignoring invalid loop count {loop_count!r}; looping forever")
		loop_count = None

	return pbindgen.serializer.PatternOptions(
		instrument = _get(data, "instrument"),
		loop_count = loop_count,
		compress = _flag(_get(data, "compress"), "output.compress", True)
	)


def snapshot_from_dict (data: typing.Optional[typing.Mapping[str, typing.Any]]) -> Snapshot:

	"""Read a whole editor snapshot. Missing sections take their defaults."""

	data = data or {}

	if not isinstance(data, typing.Mapping):
		raise SnapshotError(f"Snapshot must be a mapping, got {type(data).__name__}")

	raw_points = _get(data, "points", default=[]) or []

	if not isinstance(raw_points, (list, tuple)):
		raise SnapshotError(f"points: expected a list, got {type(raw_points).__name__}")

	return Snapshot(
		settings = settings_from_dict(_get(data, "settings")),
		points = tuple(point_from_dict(p, i) for i, p in enumerate(raw_points)),
		options = options_from_dict(_get(data, "output"))
	)


def load_snapshot_data (path: str) -> typing.Mapping[str, typing.Any]:

	"""Read the raw snapshot mapping from a YAML (or JSON) file."""

	with open(path, 'r') as f:
		data = yaml.safe_load(f)

	if data is None:
		return {}

	if not isinstance(data, typing.Mapping):
		raise SnapshotError(f"{path}: snapshot must be a mapping, got {type(data).__name__}")

	logger.debug(f"Loaded snapshot from {path}")

	return data


def load_snapshot (path: str) -> Snapshot:

	"""Load and validate a snapshot from a YAML (or JSON) file."""

	return snapshot_from_dict(load_snapshot_data(path))
