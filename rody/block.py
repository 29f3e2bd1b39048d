"""
This module defines the Block class, a simple data container for a single rigid
rectangular block in the simulation.

The class stores the total mass, the edge lengths along the three axes, and the center of
mass position and velocity as float64 numpy arrays of shape (3,). Volume is always
derived from the lengths and never stored. Blocks are meant to be created through
BlockBuilder, which turns a mass density into a total mass; afterwards only the
integrator mutates them, by displacing the position in place. The class makes no
assumptions about units and does not validate geometry, leaving that to the caller.
"""

from __future__ import annotations
from typing import Sequence
import numpy as np
from .block_formatter import BlockFormatter, parse_selector




def _as_vec3(values: Sequence[float] | np.ndarray) -> np.ndarray:
	arr = np.array(values, dtype=np.float64).reshape(-1)
	if arr.shape != (3,):
		raise ValueError(f"expected 3 components, got {arr.shape[0]}")
	return arr


class Block:
	def __init__(
		self,
		mass: float = 0.0,
		lengths: Sequence[float] = (0.0, 0.0, 0.0),
		position: Sequence[float] | np.ndarray = (0.0, 0.0, 0.0),
		velocity: Sequence[float] | np.ndarray = (0.0, 0.0, 0.0),
	) -> None:
		self.mass = float(mass)
		self.lengths = [float(l) for l in lengths]
		if len(self.lengths) != 3:
			raise ValueError(f"expected 3 lengths, got {len(self.lengths)}")
		self.position = _as_vec3(position)
		self.velocity = _as_vec3(velocity)

	def volume(self) -> float:
		return self.lengths[0] * self.lengths[1] * self.lengths[2]

	def state_vector(self) -> np.ndarray:
		return np.concatenate((self.position, self.velocity))

	def format(self, selector: str, decimal: int = 3) -> BlockFormatter:
		"""Return a read-only formatter over the channels picked by `selector`."""
		return BlockFormatter(self, parse_selector(selector), decimal)

	def copy(self) -> "Block":
		return Block(self.mass, list(self.lengths), self.position.copy(), self.velocity.copy())

	def __repr__(self) -> str:
		return (f"Block(mass={self.mass}, lengths={self.lengths}, "
				f"position={self.position.tolist()}, velocity={self.velocity.tolist()})")
