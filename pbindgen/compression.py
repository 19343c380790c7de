"""Run-length compression of rendered voice tokens.

A maximal run of identical consecutive tokens collapses into one ``Pn``
wrapper carrying the run length, e.g. ``Rest(), Rest(), Rest()`` becomes
``Pn(Rest(), 3)``. Tokens are compared as rendered strings, so two chords
that print the same are merged.
"""

import dataclasses
import itertools
import typing


@dataclasses.dataclass(frozen=True)
class Run:

	"""
	A token repeated ``count`` times in a row.
	"""

	token: str
	count: int = 1

	def render (self) -> str:

		"""Return the bare token for a single step, else a ``Pn`` wrapper."""

		if self.count > 1:
			return f"Pn({self.token}, {self.count})"

		return self.token

	def __str__ (self) -> str:

		return self.render()


def compress_runs (tokens: typing.Iterable[str]) -> typing.List[Run]:

	"""Collapse consecutive equal tokens into runs.

	Example:
		```python
		runs = compress_runs(["1", "1", "2"])
		[str(r) for r in runs]  # ["Pn(1, 2)", "2"]
		```
	"""

	return [Run(token=token, count=sum(1 for _ in group)) for token, group in itertools.groupby(tokens)]


def expand_runs (runs: typing.Iterable[Run]) -> typing.List[str]:

	"""Inverse of ``compress_runs``: repeat each token by its count."""

	tokens: typing.List[str] = []

	for run in runs:
		tokens.extend([run.token] * run.count)

	return tokens


def render_tokens (tokens: typing.Sequence[str], compress: bool = True) -> typing.List[str]:

	"""Return the tokens to place in a ``Pseq`` array, compressed or verbatim."""

	if not compress:
		return list(tokens)

	return [run.render() for run in compress_runs(tokens)]
