"""
This module provides validation utilities for block states.

The BlockValidator class offers static methods to check whether a block describes a
physically meaningful body (non-negative finite mass, positive finite volume, finite
three-component position and velocity) and to report which fields fail. Invalid blocks
are never rejected here: the builder tolerates degenerate geometry and only reports it,
so callers that need strict checks should call block_is_valid themselves.
"""

from __future__ import annotations
import logging
import math
import numpy as np

from .block import Block


logger = logging.getLogger(__name__)




class BlockValidator:
	@staticmethod
	def _vec_is_valid(vec) -> bool:
		arr = np.asarray(vec, dtype=float)
		return arr.shape == (3,) and bool(np.all(np.isfinite(arr)))

	@staticmethod
	def block_is_valid(block: Block) -> bool:
		if block is None:
			return False

		m = block.mass
		if not (math.isfinite(m) and m >= 0.0):
			return False

		vol = block.volume()
		if not (math.isfinite(vol) and vol > 0.0):
			return False

		if not BlockValidator._vec_is_valid(block.position):
			return False
		if not BlockValidator._vec_is_valid(block.velocity):
			return False

		return True

	@staticmethod
	def report_invalid_block(label: str, block: Block) -> None:
		vol = block.volume()
		if math.isfinite(vol) and vol == 0.0:
			# zero volume is what an unconfigured builder produces
			logger.debug("%s: zero volume, lengths=%s", label, block.lengths)
		elif not (math.isfinite(vol) and vol > 0.0):
			logger.warning("%s: degenerate volume %s, lengths=%s", label, vol, block.lengths)

		if not (math.isfinite(block.mass) and block.mass >= 0.0):
			logger.warning("%s: invalid mass %s", label, block.mass)
		if not BlockValidator._vec_is_valid(block.position):
			logger.warning("%s: invalid position %s", label, block.position)
		if not BlockValidator._vec_is_valid(block.velocity):
			logger.warning("%s: invalid velocity %s", label, block.velocity)
