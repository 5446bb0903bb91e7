import pytest

from control.feedback_controller import FeedbackController
from control.pid import PID, Mode, PIDGains, PIDParam


def test_control_value_is_zero_before_first_update():
    pid = PID.from_gains(1.0, 2.0, 3.0)
    assert pid.get_control_value() == 0.0
    assert isinstance(pid, FeedbackController)


def test_pure_proportional_response_is_constant():
    pid = PID(PIDGains(kp=1.0, ki=0.0, kd=0.0))
    for _ in range(20):
        pid.update(10.0, 0.0, 0.05)
        assert pid.get_control_value() == 10.0


def test_update_returns_the_stored_output():
    pid = PID.from_gains(0.5, 0.1, 0.0)
    u = pid.update(2.0, 1.0, 0.1)
    assert u == pid.get_control_value()
    assert pid.get_control_value() == pid.get_control_value()


def test_position_form_first_ticks():
    pid = PID(PIDParam(mode=Mode.POSITION, gains=PIDGains(2.0, 0.5, 0.1)))
    dt = 0.1
    # tick 1: e0=4, e1=0 -> integral=(4+0)*dt/2=0.2
    u1 = pid.update(5.0, 1.0, dt)
    assert pid.integral == pytest.approx(0.2)
    assert u1 == pytest.approx(2.0 * 4 + 0.5 * 0.2 + 0.1 * (4 - 0) / dt)
    # tick 2: e0=3, e1=4 -> integral=0.2+(3+4)*dt/2=0.55
    u2 = pid.update(5.0, 2.0, dt)
    assert pid.integral == pytest.approx(0.55)
    assert u2 == pytest.approx(2.0 * 3 + 0.5 * 0.55 + 0.1 * (3 - 4) / dt)
    assert pid.errors == [3.0, 3.0, 4.0]


def test_velocity_form_builds_on_previous_measurement():
    pid = PID(PIDParam(mode=Mode.VELOCITY, gains=PIDGains(2.0, 0.5, 0.1)))
    dt = 0.1
    u1 = pid.update(5.0, 1.0, dt)
    # prev_measured=0, e0=4, e1=0, e2=0
    assert u1 == pytest.approx(0.0 + 2.0 * 4 - 0 + 0.5 * 4 * dt + 0.1 * (4 - 0 + 0) / dt)
    u2 = pid.update(5.0, 2.0, dt)
    # prev_measured=1, e0=3, e1=4, e2=0; Kp scales e0 only
    assert u2 == pytest.approx(1.0 + 2.0 * 3 - 4 + 0.5 * 3 * dt + 0.1 * (3 - 8 + 0) / dt)
    u3 = pid.update(5.0, 4.0, dt)
    # prev_measured=2, e0=1, e1=3, e2=4
    assert u3 == pytest.approx(2.0 + 2.0 * 1 - 3 + 0.5 * 1 * dt + 0.1 * (1 - 6 + 4) / dt)


def test_pi_d_takes_derivative_on_measurement():
    pid = PID(PIDParam(mode=Mode.PI_D, gains=PIDGains(2.0, 0.5, 0.1)))
    dt = 0.1
    pid.update(5.0, 1.0, dt)
    # target jump does not kick the derivative term
    u = pid.update(50.0, 1.5, dt)
    e0 = 48.5
    integral = (4 + 0) * dt / 2 + (e0 + 4) * dt / 2
    assert u == pytest.approx(2.0 * e0 + 0.5 * integral - 0.1 * (1.5 - 1.0) / dt)


def test_i_pd_ignores_target_in_proportional_term():
    pid = PID(PIDParam(mode=Mode.I_PD, gains=PIDGains(2.0, 0.5, 0.1)))
    dt = 0.1
    u1 = pid.update(5.0, 1.0, dt)
    assert u1 == pytest.approx(-2.0 * 1.0 + 0.5 * 0.2 - 0.1 * (1.0 - 0.0) / dt)
    u2 = pid.update(5.0, 3.0, dt)
    assert u2 == pytest.approx(-2.0 * 3.0 + 0.5 * (0.2 + (2 + 4) * dt / 2) - 0.1 * (3.0 - 1.0) / dt)


def test_reset_reproduces_fresh_controller():
    param = PIDParam(mode=Mode.PI_D, gains=PIDGains(1.3, 0.7, 0.2))
    used = PID(param)
    for m in (0.0, 0.4, 0.9, 1.3):
        used.update(2.0, m, 0.02)
    used.reset()
    fresh = PID(param)
    assert used.update(2.0, 0.3, 0.02) == fresh.update(2.0, 0.3, 0.02)
    assert used.integral == fresh.integral
    assert used.errors == fresh.errors


def test_reset_keeps_configuration():
    pid = PID(PIDGains(1.0, 0.0, 0.0))
    pid.set_saturation(-1.0, 1.0)
    pid.update(5.0, 0.0, 0.1)
    pid.reset()
    assert pid.get_control_value() == 0.0
    assert pid.param.need_saturation
    assert pid.param.gains == PIDGains(1.0, 0.0, 0.0)


def test_saturation_clamps_and_flags():
    pid = PID(PIDGains(kp=1.0))
    pid.set_saturation(-1.0, 1.0)
    assert pid.param.need_saturation
    pid.update(5.0, 0.0, 0.1)
    assert pid.get_control_value() == 1.0
    assert pid.saturated
    pid.update(-5.0, 0.0, 0.1)
    assert pid.get_control_value() == -1.0
    pid.update(0.5, 0.0, 0.1)
    assert pid.get_control_value() == 0.5
    assert not pid.saturated

    pid.clear_saturation()
    pid.update(5.0, 0.0, 0.1)
    assert pid.get_control_value() == 5.0


def test_setters_change_configuration():
    pid = PID()
    assert pid.param.mode is Mode.POSITION
    assert pid.update(1.0, 0.0, 0.1) == 0.0  # zero gains by default

    pid.set_gain(PIDGains(kp=3.0))
    pid.set_mode(Mode.I_PD)
    assert pid.update(1.0, 2.0, 0.1) == pytest.approx(-6.0)

    pid.set_param(PIDParam(mode=Mode.POSITION, gains=PIDGains(kp=2.0)))
    assert pid.update(1.0, 0.0, 0.1) == pytest.approx(2.0)


def test_configuration_is_copied_not_aliased():
    gains = PIDGains(kp=1.0)
    pid = PID(gains)
    gains.kp = 100.0
    assert pid.update(1.0, 0.0, 0.1) == 1.0


def test_zero_dt_is_not_guarded():
    pid = PID.from_gains(1.0, 0.0, 0.0)
    with pytest.raises(ZeroDivisionError):
        pid.update(1.0, 0.0, 0.0)


@pytest.mark.parametrize("mode", list(Mode))
def test_zero_dt_raises_in_every_mode(mode):
    pid = PID(PIDParam(mode=mode, gains=PIDGains(1.0, 1.0, 0.0)))
    pid.update(1.0, 0.0, 0.1)
    integral = pid.integral
    with pytest.raises(ZeroDivisionError):
        pid.update(2.0, 0.5, 0.0)
    assert pid.integral == integral
    assert pid.errors[1] == 1.0
    pid.update(2.0, 0.5, 0.1)
    assert pid.errors[1] == 1.5
