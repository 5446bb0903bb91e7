from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import List, Union

from control.feedback_controller import FeedbackController
from shared.generic import guard


class Mode(Enum):
    POSITION = "position"  # positional PID
    VELOCITY = "velocity"  # incremental (velocity-form) PID
    PI_D = "pi_d"  # derivative on measurement
    I_PD = "i_pd"  # proportional and derivative on measurement


@dataclass
class PIDGains:
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0


@dataclass
class PIDParam:
    mode: Mode = Mode.POSITION
    gains: PIDGains = field(default_factory=PIDGains)
    need_saturation: bool = False
    output_min: float = 0.0
    output_max: float = 0.0


class PID(FeedbackController):
    """Discrete-time PID with four selectable control laws.

    All laws share the error history ``errors`` (0: current, 1: previous,
    2: before previous) and a trapezoidal integral. ``dt`` is not guarded:
    ``update`` raises ``ZeroDivisionError`` when ``dt == 0``, in every mode,
    so callers pass ``dt > 0``. Only ``errors[0]`` has been written by then,
    and the next successful tick overwrites it.
    Not thread-safe; use one instance per control loop.
    """

    def __init__(self, cfg: Union[PIDParam, PIDGains, None] = None) -> None:
        if cfg is None:
            cfg = PIDParam()
        elif isinstance(cfg, PIDGains):
            cfg = PIDParam(gains=cfg)
        self.param = replace(cfg, gains=replace(cfg.gains))
        self.reset()

    @classmethod
    def from_gains(cls, kp: float, ki: float, kd: float) -> "PID":
        return cls(PIDGains(kp, ki, kd))

    def reset(self) -> None:
        self.errors: List[float] = [0.0, 0.0, 0.0]
        self.prev_measured = 0.0
        self.prev_target = 0.0
        self.integral = 0.0
        self.output = 0.0
        self.saturated = False

    def set_param(self, param: PIDParam) -> None:
        self.param = replace(param, gains=replace(param.gains))

    def set_gain(self, gains: PIDGains) -> None:
        self.param.gains = replace(gains)

    def set_mode(self, mode: Mode) -> None:
        self.param.mode = mode

    def set_saturation(self, output_min: float, output_max: float) -> None:
        self.param.need_saturation = True
        self.param.output_min = output_min
        self.param.output_max = output_max

    def clear_saturation(self) -> None:
        self.param.need_saturation = False

    def update(self, target: float, measured: float, dt: float) -> float:
        e = self.errors
        e[0] = target - measured
        # trapezoidal integral
        self.integral += (e[0] + e[1]) * (dt / 2.0)

        mode = self.param.mode
        if mode is Mode.POSITION:
            u = self._position(dt)
        elif mode is Mode.VELOCITY:
            u = self._velocity(dt)
        elif mode is Mode.PI_D:
            u = self._pi_d(measured, dt)
        elif mode is Mode.I_PD:
            u = self._i_pd(measured, dt)
        else:
            raise ValueError(f"unknown PID mode: {mode!r}")

        e[2] = e[1]
        e[1] = e[0]
        self.prev_target = target
        self.prev_measured = measured

        self.saturated = False
        if self.param.need_saturation:
            clamped = guard(u, self.param.output_min, self.param.output_max)
            self.saturated = clamped != u
            u = clamped

        self.output = u
        return u

    def get_control_value(self) -> float:
        return self.output

    def _position(self, dt: float) -> float:
        g, e = self.param.gains, self.errors
        p = g.kp * e[0]
        i = g.ki * self.integral
        d = g.kd * ((e[0] - e[1]) / dt)
        return p + i + d

    def _velocity(self, dt: float) -> float:
        # Kp multiplies e0 only; e1 enters unscaled
        g, e = self.param.gains, self.errors
        p = g.kp * e[0] - e[1]
        i = g.ki * e[0] * dt
        d = g.kd * (e[0] - 2.0 * e[1] + e[2]) / dt
        return self.prev_measured + p + i + d

    def _pi_d(self, measured: float, dt: float) -> float:
        g, e = self.param.gains, self.errors
        p = g.kp * e[0]
        i = g.ki * self.integral
        d = -g.kd * ((measured - self.prev_measured) / dt)
        return p + i + d

    def _i_pd(self, measured: float, dt: float) -> float:
        g = self.param.gains
        p = -g.kp * measured
        i = g.ki * self.integral
        d = -g.kd * ((measured - self.prev_measured) / dt)
        return p + i + d
