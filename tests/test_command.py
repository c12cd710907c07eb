import math

import numpy as np
import pytest

from flightlib.command import Command


def test_default_command_is_invalid():
    cmd = Command()
    assert math.isnan(cmd.t)
    assert not cmd.valid()
    assert not cmd.is_rates_thrust()
    assert not cmd.is_single_rotor_thrusts()


def test_rates_thrust_command():
    cmd = Command.rates_thrust(0.5, 9.81, [0.1, 0.2, 0.3])
    assert cmd.valid()
    assert cmd.is_rates_thrust()
    assert not cmd.is_single_rotor_thrusts()
    assert np.array_equal(cmd.omega, [0.1, 0.2, 0.3])


def test_single_rotor_command():
    cmd = Command.single_rotor(0.5, [1.0, 2.0, 3.0, 4.0])
    assert cmd.valid()
    assert cmd.is_single_rotor_thrusts()
    assert not cmd.is_rates_thrust()


def test_both_modes_set_is_invalid():
    cmd = Command(t=0.0, collective_thrust=1.0, omega=[0.0, 0.0, 0.0],
                  thrusts=[1.0, 1.0, 1.0, 1.0])
    assert cmd.is_rates_thrust()
    assert cmd.is_single_rotor_thrusts()
    assert not cmd.valid()


def test_non_finite_time_invalidates():
    cmd = Command.single_rotor(math.inf, [1.0, 2.0, 3.0, 4.0])
    assert not cmd.valid()
    assert not cmd.is_single_rotor_thrusts()


def test_partial_nan_omega_is_not_rates_thrust():
    cmd = Command.rates_thrust(0.0, 1.0, [0.0, math.nan, 0.0])
    assert not cmd.is_rates_thrust()
    assert not cmd.valid()


def test_wrong_shapes_raise():
    with pytest.raises(ValueError):
        Command.single_rotor(0.0, [1.0, 2.0, 3.0])
    with pytest.raises(ValueError):
        Command.rates_thrust(0.0, 1.0, [1.0, 2.0])