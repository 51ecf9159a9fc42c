from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from lorenzscene import config


@dataclass(frozen=True)
class LorenzParameters:
    """
    Constants of the Lorenz system and the integration step.

    Fixed for the lifetime of the process.
    """
    sigma: float = config.LORENZ_SIGMA
    rho: float = config.LORENZ_RHO
    beta: float = config.LORENZ_BETA
    dt: float = config.LORENZ_DT


@dataclass(frozen=True)
class LorenzState:
    """A point (x, y, z) in the phase space of the Lorenz system."""
    x: float
    y: float
    z: float

    @classmethod
    def initial(cls) -> LorenzState:
        return cls(*config.INITIAL_STATE)

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z

    def scaled(self, factor: float) -> Tuple[float, float, float]:
        """Component-wise multiple of the state, used for display."""
        return self.x * factor, self.y * factor, self.z * factor


def step(state: LorenzState, params: LorenzParameters) -> LorenzState:
    """
    Advance the state by one explicit Euler step of the Lorenz equations.

        dx/dt = sigma * (y - x)
        dy/dt = x * (rho - z) - y
        dz/dt = x * y - beta * z

    No validation is performed: a large dt may drive the state to inf/nan.

    Args:
        state: Current state.
        params: System parameters and the time step.

    Returns:
        The state after one time step.
    """
    x, y, z = state.x, state.y, state.z

    dx = params.sigma * (y - x) * params.dt
    dy = (x * (params.rho - z) - y) * params.dt
    dz = (x * y - params.beta * z) * params.dt

    return LorenzState(x + dx, y + dy, z + dz)
