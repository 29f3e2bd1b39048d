from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from .block import Block
from .block_builder import BlockBuilder
from .timeline import RegularTimeLine

"""
This configuration module defines every parameter of a block run through the SimConfig
dataclass: the mass density and edge lengths of the block, its initial position and
velocity, the timeline bounds and step count, and the output selector and precision.
The defaults reproduce a single Euler step of 0.1 s for a unit cube of unit density
moving at -1 along x. The class provides a copy method and builders for the block and
the timeline, so the command line entry point and tests share one source of truth.
"""

Vec3 = Tuple[float, float, float]


@dataclass
class SimConfig:
	mass_density: float = 1.0
	lengths: Vec3 = (1.0, 1.0, 1.0)
	initial_position: Vec3 = (0.0, 0.0, 0.0)
	initial_velocity: Vec3 = (-1.0, 0.0, 0.0)
	t_min: float = 0.0
	t_max: float = 0.1
	nstep: int = 1
	selector: str = "_"
	decimal: int = 3
	show_time: bool = False

	def copy(self) -> "SimConfig":
		new = object.__new__(SimConfig)
		new.__dict__ = dict(getattr(self, "__dict__", {}))
		return new

	def build_block(self) -> Block:
		return (
			BlockBuilder()
			.set_mass_density(self.mass_density)
			.set_lengths(*self.lengths)
			.set_initial_position(*self.initial_position)
			.set_initial_velocity(*self.initial_velocity)
			.get()
		)

	def build_timeline(self) -> RegularTimeLine:
		return RegularTimeLine(self.t_min, self.t_max, self.nstep)
