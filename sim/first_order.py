from __future__ import annotations

from dataclasses import dataclass


@dataclass
class PlantParams:
    gain: float = 1.0  # steady-state output per unit input
    tau: float = 0.5  # time constant (s)


class FirstOrderPlant:
    """First-order lag y' = (gain * u - y) / tau, explicit Euler."""

    def __init__(self, params: PlantParams | None = None) -> None:
        self.p = params or PlantParams()
        self.reset()

    def reset(self, y: float = 0.0) -> None:
        self.y = y

    def state(self) -> float:
        return self.y

    def step(self, dt: float, u: float) -> float:
        self.y += (self.p.gain * u - self.y) / self.p.tau * dt
        return self.y
