"""
Simulation Context (Data Model)
===============================
This module defines the central data structure for the running animation.

Why is this file needed?
------------------------
1. State Management: It holds the integrator state, the parameters and the
   trail in one place instead of module-level globals.
2. Decoupling: The Frame Driver mutates this object; the view only ever sees
   the point array handed to it.

Classes:
    SimulationContext: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, field

from lorenzscene.model.lorenz import LorenzParameters, LorenzState, step
from lorenzscene.model.trajectory import TrajectoryBuffer


@dataclass
class SimulationContext:
    """
    Owns everything the frame loop advances.
    Pass this instance to the Frame Driver.
    """
    parameters: LorenzParameters = field(default_factory=LorenzParameters)
    state: LorenzState = field(default_factory=LorenzState.initial)
    trajectory: TrajectoryBuffer = field(default_factory=TrajectoryBuffer)
    frame_count: int = 0

    def advance(self) -> LorenzState:
        """Integrate one step and count the frame. Does not touch the trail."""
        self.state = step(self.state, self.parameters)
        self.frame_count += 1
        return self.state
