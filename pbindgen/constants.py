"""Defaults and literal tokens for the generated pattern program.

The program targets SuperCollider's pattern library: a ``Pbind`` of parallel
``Pseq`` arrays, one per event key.

- `DEFAULT_INSTRUMENT` - synth name used when the user gives none
- `REST_TOKEN` - silence for one step
- `INFINITE_REPEATS` - ``Pseq`` repeat count when no loop count is set
- `DEFAULT_LEGATO`, `DEFAULT_AMP` - per-note defaults
"""

DEFAULT_INSTRUMENT = "default"

REST_TOKEN = "Rest()"
INFINITE_REPEATS = "inf"
SCALE_PREFIX = "Scale."
SCALE_NONE = "none"

DEFAULT_LEGATO = 1
DEFAULT_AMP = 1
DEFAULT_STRUM = 0
DEFAULT_ROOT = 0

# Order of the keys inside the Pbind, after \instrument.
VOICE_KEYS = ("scale", "root", "octave", "degree", "legato", "amp", "strum", "dur")

# Event keys are padded so the Pseq column lines up.
KEY_COLUMN_WIDTH = 10
