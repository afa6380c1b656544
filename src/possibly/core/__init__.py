"""Core data type: the tri-state ``Possibly`` container."""

from possibly.core.possibly import Absent, Failed, Possibly, Present, State

__all__ = ["Absent", "Failed", "Possibly", "Present", "State"]
