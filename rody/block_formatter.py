"""
This module implements BlockFormatter, a read-only text view over selected state
channels of a Block.

A block exposes six scalar channels, px, py, pz, vx, vy and vz, in that order. The
selector string is a whitespace separated list of case-insensitive tokens: "_" expands to
all six channels, "p" and "v" to the three position or velocity channels, and a channel
name to itself. Tokens are expanded in order and concatenated without deduplication;
unknown tokens contribute nothing. Each selected value is rendered with a fixed number
of decimals and padded by one space on each side, with no separator between values. The
formatter keeps a reference to the block rather than a copy, so rendering after an
integration step reflects the updated state.
"""

from __future__ import annotations
from typing import List, Sequence, TYPE_CHECKING

if TYPE_CHECKING:
	from .block import Block




CHANNELS = ("px", "py", "pz", "vx", "vy", "vz")

_TOKENS = {
	"_": (0, 1, 2, 3, 4, 5),
	"p": (0, 1, 2),
	"v": (3, 4, 5),
}
_TOKENS.update({name: (i,) for i, name in enumerate(CHANNELS)})


def parse_selector(selector: str) -> List[int]:
	data_index: List[int] = []
	for token in selector.split():
		data_index.extend(_TOKENS.get(token.lower(), ()))
	return data_index


class BlockFormatter:
	__slots__ = ("block", "data_index", "decimal")

	def __init__(self, block: "Block", data_index: Sequence[int], decimal: int = 3) -> None:
		decimal = int(decimal)
		if decimal < 0:
			raise ValueError(f"decimal must be non-negative, got {decimal}")
		self.block = block
		self.data_index = [int(i) for i in data_index]
		self.decimal = decimal

	def values(self) -> List[float]:
		state = self.block.state_vector()
		return [float(state[i]) for i in self.data_index if 0 <= i < len(CHANNELS)]

	def labels(self) -> List[str]:
		return [CHANNELS[i] for i in self.data_index if 0 <= i < len(CHANNELS)]

	def render(self) -> str:
		return "".join(f" {value:.{self.decimal}f} " for value in self.values())

	def __str__(self) -> str:
		return self.render()

	def __repr__(self) -> str:
		return (f"BlockFormatter(channels={self.labels()}, decimal={self.decimal}, "
				f"block={self.block!r})")
