"""
This initialization file is the entry point of the rigid block kinematics package,
exposing its public API through a flat namespace.

It re-exports the block data model (Block), its staged constructor (BlockBuilder), the
channel formatter (BlockFormatter, parse_selector, CHANNELS), the regular timeline
iterator (RegularTimeLine), explicit Euler integration (forward, Integrator), block
validation (BlockValidator), run configuration (SimConfig) and logging setup.
"""

from .block import Block
from .block_builder import BlockBuilder
from .block_formatter import BlockFormatter, parse_selector, CHANNELS
from .timeline import RegularTimeLine
from .integrator import forward, Integrator
from .simulation_validator import BlockValidator
from .sim_config import SimConfig
from .logging_config import setup_logging


__all__ = [
	"Block",
	"BlockBuilder",
	"BlockFormatter",
	"parse_selector",
	"CHANNELS",
	"RegularTimeLine",
	"forward",
	"Integrator",
	"BlockValidator",
	"SimConfig",
	"setup_logging",
]
