"""
This module implements BlockBuilder, the staged constructor for Block instances.

The builder separates what the caller provides from what the block stores: the caller
sets a mass density (mass per unit volume), while the block holds a total mass. The
density is kept in its own pending field and converted exactly once, in get(), by
multiplying it with the volume of whatever lengths are staged at that moment. Setters
overwrite previous values, perform no validation and may be chained in any order. get()
hands the finished block out and resets the builder to its defaults, so one builder can
produce several independent blocks. Degenerate geometry is accepted and only reported
through the logger.
"""

from __future__ import annotations
import logging

from .block import Block
from .simulation_validator import BlockValidator


logger = logging.getLogger(__name__)




class BlockBuilder:
	def __init__(self) -> None:
		self._reset()

	def _reset(self) -> None:
		self.pending_mass_density: float = 0.0
		self._block = Block()

	def set_mass_density(self, mass_density: float) -> "BlockBuilder":
		self.pending_mass_density = float(mass_density)
		return self

	def set_lengths(self, lx: float, ly: float, lz: float) -> "BlockBuilder":
		self._block.lengths = [float(lx), float(ly), float(lz)]
		return self

	def set_initial_position(self, px: float, py: float, pz: float) -> "BlockBuilder":
		self._block.position[:] = (px, py, pz)
		return self

	def set_initial_velocity(self, vx: float, vy: float, vz: float) -> "BlockBuilder":
		self._block.velocity[:] = (vx, vy, vz)
		return self

	def get(self) -> Block:
		"""Finalize the staged block and reset the builder.

		The total mass is the pending density times the volume of the lengths staged at
		this call; lengths set afterwards do not affect the returned block.
		"""
		block = self._block
		block.mass = self.pending_mass_density * block.volume()

		if not BlockValidator.block_is_valid(block):
			BlockValidator.report_invalid_block("BlockBuilder.get", block)
		logger.debug("built %r", block)

		self._reset()
		return block
