"""
This module implements RegularTimeLine, a one-shot iterator over evenly spaced time
samples.

The time step is fixed at construction as (max_time - min_time) / nstep, or zero when
min_time is not below max_time, in which case the timeline is empty whatever nstep
is. A step count below one is rejected only when a step has to be computed, and
nstep must be an integer. Iteration yields the current time and then advances it by
one step, for as long as the current time is strictly below max_time: the start is
included and max_time never is. Sample k is computed as min_time + k * time_step
rather than by repeated addition, and at most nstep samples are produced, so rounding
can neither add a sample just below max_time nor drift the later ones. After the last
sample the cursor is placed on max_time. Once
exhausted the timeline stays exhausted and a new instance is needed to iterate again.
The step is readable at any time through time_step, independently of iteration.
"""

from __future__ import annotations
import operator
from typing import Iterator


class RegularTimeLine:
	def __init__(self, min_time: float, max_time: float, nstep: int) -> None:
		nstep = operator.index(nstep)
		min_time = float(min_time)
		max_time = float(max_time)
		dt = 0.0
		if min_time < max_time:
			if nstep < 1:
				raise ValueError(f"nstep must be at least 1, got {nstep}")
			dt = (max_time - min_time) / nstep

		self.min_time: float = min_time
		self.max_time: float = max_time
		self.nstep: int = nstep
		self.time_step: float = dt
		self.current_time: float = min_time
		self._index: int = 0

	def __iter__(self) -> Iterator[float]:
		return self

	def __next__(self) -> float:
		if self._index < self.nstep and self.current_time < self.max_time:
			time = self.current_time
			self._index += 1
			if self._index < self.nstep:
				self.current_time = self.min_time + self._index * self.time_step
			else:
				self.current_time = self.max_time
			return time
		raise StopIteration

	@property
	def exhausted(self) -> bool:
		return not (self._index < self.nstep and self.current_time < self.max_time)

	def __repr__(self) -> str:
		return (f"RegularTimeLine(min_time={self.min_time}, max_time={self.max_time}, "
				f"time_step={self.time_step}, current_time={self.current_time})")
