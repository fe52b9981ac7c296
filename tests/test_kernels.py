import math

import pytest

from lenia_sim.sim.kernels import radial, repulsion


@pytest.mark.parametrize("r", [1.0, 1.0001, 1.5, 3.0, 250.0])
@pytest.mark.parametrize("c_rep", [0.0, 0.5, 1.0, 7.0])
def test_repulsion_is_zero_past_cutoff(r, c_rep):
    value, deriv = repulsion(r, c_rep)
    assert value == 0
    assert deriv == 0


def test_repulsion_at_half_distance():
    assert repulsion(0.5, 1.0) == (0.125, -0.5)


def test_repulsion_at_zero_is_half_strength():
    assert repulsion(0.0, 2.0) == (1.0, -2.0)


def test_radial_peak_at_mu():
    value, deriv = radial(4.0, 4.0, 1.0, 0.022)
    assert value == pytest.approx(0.022)
    assert deriv == 0


def test_radial_closed_form():
    value, deriv = radial(2.0, 4.0, 1.0, 0.022)
    expected = 0.022 * math.exp(-4.0)
    assert value == pytest.approx(expected, rel=1e-12)
    assert deriv == pytest.approx(4.0 * expected, rel=1e-12)


@pytest.mark.parametrize("x", [0.0, 0.3, 0.55, 0.9, 3.2])
def test_radial_derivative_matches_finite_difference(x):
    h = 1e-6
    hi, _ = radial(x + h, 0.6, 0.15, 1.0)
    lo, _ = radial(x - h, 0.6, 0.15, 1.0)
    _, deriv = radial(x, 0.6, 0.15, 1.0)
    assert deriv == pytest.approx((hi - lo) / (2 * h), rel=1e-4, abs=1e-9)


def test_radial_decays_monotonically_beyond_sigma():
    mu, sigma = 4.0, 1.0
    offsets = [1.0, 1.2, 1.5, 2.0, 2.5, 3.0]
    for sign in (1.0, -1.0):
        vals = [abs(radial(mu + sign * o, mu, sigma, 0.022)[0]) for o in offsets]
        assert all(a > b for a, b in zip(vals, vals[1:]))
