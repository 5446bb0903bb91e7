import pytest

from control.pid import PID, Mode, PIDGains, PIDParam
from sim.first_order import FirstOrderPlant, PlantParams


def _closed_loop(pid: PID, steps: int = 1000, dt: float = 0.01, target: float = 1.0):
    plant = FirstOrderPlant(PlantParams(gain=0.8, tau=0.3))
    history = []
    for _ in range(steps):
        y = plant.state()
        history.append(abs(target - y))
        plant.step(dt, pid.update(target, y, dt))
    return plant.state(), history


@pytest.mark.parametrize("mode", [Mode.POSITION, Mode.PI_D, Mode.I_PD])
def test_pid_reduces_step_error(mode):
    pid = PID(PIDParam(mode=mode, gains=PIDGains(kp=1.2, ki=2.0, kd=0.01)))
    y, history = _closed_loop(pid)
    # Error should drop and stay small
    assert history[0] > history[-1]
    assert abs(1.0 - y) < 0.02


def test_saturated_loop_stays_within_limits():
    pid = PID(PIDGains(kp=5.0, ki=2.0, kd=0.0))
    pid.set_saturation(-0.5, 0.5)
    plant = FirstOrderPlant(PlantParams(gain=1.0, tau=0.5))
    dt = 0.01
    outputs = []
    for _ in range(500):
        outputs.append(pid.update(10.0, plant.state(), dt))
        plant.step(dt, pid.get_control_value())
    assert all(-0.5 <= u <= 0.5 for u in outputs)
    assert pid.saturated
    assert plant.state() == pytest.approx(0.5, abs=1e-2)
