"""YAML loading for PID parameters.

Schema::

    mode: position        # position | velocity | pi_d | i_pd
    gains: {kp: 1.0, ki: 0.0, kd: 0.0}
    saturation:           # optional; omit for an unclamped output
      min: -1.0
      max: 1.0
"""

from __future__ import annotations

from typing import Any, Dict

import yaml

from control.pid import Mode, PIDGains, PIDParam


def _num(d: Dict[str, Any], key: str, default: float = 0.0) -> float:
    v = d.get(key, default)
    if isinstance(v, bool):
        raise ValueError(f"{key}: expected a number, got {v!r}")
    try:
        return float(v)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{key}: expected a number, got {v!r}") from e


def parse_mode(name: str) -> Mode:
    try:
        return Mode(str(name).strip().lower())
    except ValueError as e:
        valid = ", ".join(m.value for m in Mode)
        raise ValueError(f"unknown PID mode {name!r} (expected one of: {valid})") from e


def pid_param_from_dict(data: Dict[str, Any]) -> PIDParam:
    if not isinstance(data, dict):
        raise ValueError("PID config must be a mapping")
    gains = data.get("gains") or {}
    if not isinstance(gains, dict):
        raise ValueError("gains must be a mapping with kp/ki/kd")
    param = PIDParam(
        mode=parse_mode(data.get("mode", Mode.POSITION.value)),
        gains=PIDGains(_num(gains, "kp"), _num(gains, "ki"), _num(gains, "kd")),
    )
    sat = data.get("saturation")
    if sat:
        if not isinstance(sat, dict):
            raise ValueError("saturation must be a mapping with min/max")
        lo, hi = _num(sat, "min"), _num(sat, "max")
        if lo > hi:
            raise ValueError(f"saturation min {lo} exceeds max {hi}")
        param.need_saturation = True
        param.output_min, param.output_max = lo, hi
    return param


def pid_param_to_dict(param: PIDParam) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "mode": param.mode.value,
        "gains": {"kp": param.gains.kp, "ki": param.gains.ki, "kd": param.gains.kd},
    }
    if param.need_saturation:
        out["saturation"] = {"min": param.output_min, "max": param.output_max}
    return out


def load_pid_param(path: str) -> PIDParam:
    with open(path, "r") as f:
        return pid_param_from_dict(yaml.safe_load(f) or {})


def dump_pid_param(param: PIDParam, path: str) -> None:
    with open(path, "w") as f:
        yaml.safe_dump(pid_param_to_dict(param), f, sort_keys=False)
