"""
This module implements first-order explicit Euler integration of a block's
translational motion.

forward() displaces the block position in place by dt times its velocity; there is no
force model, so velocity never changes. The Integrator class wraps a block, counts the
steps taken and the elapsed time, and drives one step per sample of a RegularTimeLine.
The step size always comes from the timeline itself, so the integration increment and
the sample spacing cannot disagree. No stability guarantee is made for large steps, and
a non-finite step propagates into the position exactly as it would through forward().
"""

from __future__ import annotations
import logging
from typing import Iterator, Tuple

from .block import Block
from .timeline import RegularTimeLine


logger = logging.getLogger(__name__)




def forward(block: Block, dt: float) -> None:
	block.position += float(dt) * block.velocity


class Integrator:
	def __init__(self, block: Block) -> None:
		self.block = block
		self.n_steps: int = 0
		self.elapsed: float = 0.0

	def step(self, dt: float) -> None:
		dt = float(dt)
		if dt == 0.0:
			return
		forward(self.block, dt)
		self.n_steps += 1
		self.elapsed += dt

	def run(self, timeline: RegularTimeLine) -> Iterator[Tuple[float, Block]]:
		"""Advance the block once per timeline sample.

		Yields (time, block) after each step, where time is the sample time plus the
		timeline step, i.e. the instant the block state now describes. The same block
		object is yielded every time; copy it to keep a snapshot.
		"""
		dt = timeline.time_step
		logger.debug("running %r", timeline)
		for time in timeline:
			self.step(dt)
			yield time + dt, self.block
		logger.debug("finished after %d steps, elapsed %.6g", self.n_steps, self.elapsed)
