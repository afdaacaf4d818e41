# Tests for both Kepler solvers (angles in degrees)
import math
import pytest

from kepler_eq.core.angles import to_degrees, to_radians
from kepler_eq.physics.kepler import (
    KeplerSolution,
    kepler_residual,
    solve_fixed_point,
    solve_newton_raphson,
)

SOLVERS = [solve_fixed_point, solve_newton_raphson]


@pytest.mark.parametrize("solver", SOLVERS)
def test_kepler_zero_eccentricity(solver):
    # If e=0, E=M exactly
    for M in [-725.0, -10.0, 0.0, 45.5, 100.0, 359.0, 36000.77]:
        sol = solver(0.0, M)
        assert sol.E_deg == M
        assert sol.residual_deg == 0.0


@pytest.mark.parametrize("solver", SOLVERS)
def test_kepler_converges_low_eccentricity(solver):
    for e in [0.0, 0.01, 0.0167, 0.05, 0.1]:
        for M in [-200.0, 0.0, 30.0, 90.0, 100.0, 179.0, 270.0, 355.0, 1000.0]:
            sol = solver(e, M)
            # E = M + e sin E, sine term in degrees
            res = abs(M + to_degrees(e) * math.sin(to_radians(sol.E_deg)) - sol.E_deg)
            assert res < 1e-6
            assert sol.residual_deg == pytest.approx(res, abs=1e-12)


def test_earth_like_scenario():
    e, M = 0.0167, 100.0
    nr = solve_newton_raphson(e, M)
    fp = solve_fixed_point(e, M)

    assert nr.residual_deg < 1e-8
    assert nr.iterations <= 5
    assert fp.iterations <= 120
    assert abs(fp.E_deg - nr.E_deg) < 1e-4
    # E leads M by roughly e_deg * sin(M) on the way out from perihelion
    assert 100.9 < nr.E_deg < 101.0


def test_newton_moderate_eccentricity_with_larger_budget():
    sol = solve_newton_raphson(0.5, 60.0, max_iter=50, tol=1e-12)
    assert sol.residual_deg < 1e-10
    assert sol.iterations < 50


def test_fixed_point_stops_early_with_tolerance():
    full = solve_fixed_point(0.0167, 100.0)
    early = solve_fixed_point(0.0167, 100.0, tol=1e-12)
    assert early.iterations < 20
    assert abs(early.E_deg - full.E_deg) < 1e-10


def test_single_iteration_budget():
    sol = solve_fixed_point(0.1, 90.0, max_iter=1)
    assert sol.iterations == 1
    assert sol.E_deg == pytest.approx(90.0 + to_degrees(0.1))


def test_residual_helper():
    assert kepler_residual(0.0, 10.0, 10.0) == 0.0
    assert kepler_residual(0.1, 0.0, 0.0) == 0.0
    assert kepler_residual(0.0, 10.0, 12.0) == 2.0


def test_solution_fields():
    sol = solve_newton_raphson(0.0167, 100.0)
    assert isinstance(sol, KeplerSolution)
    assert sol.method == "newton_raphson"
    assert sol.elapsed_ms >= 0.0
    assert sol.converged(1e-8)
    assert solve_fixed_point(0.0167, 100.0).method == "fixed_point"


@pytest.mark.parametrize("solver", SOLVERS)
def test_rejects_non_elliptic_eccentricity(solver):
    for e in [1.0, 1.2, -0.01]:
        with pytest.raises(ValueError, match="requires 0 <= e < 1"):
            solver(e, 10.0)


@pytest.mark.parametrize("solver", SOLVERS)
def test_rejects_non_finite_inputs(solver):
    with pytest.raises(ValueError, match="Eccentricity must be finite"):
        solver(math.nan, 10.0)
    with pytest.raises(ValueError, match="Mean anomaly must be finite"):
        solver(0.0167, math.inf)


@pytest.mark.parametrize("solver", SOLVERS)
def test_rejects_bad_budget(solver):
    with pytest.raises(ValueError, match="max_iter"):
        solver(0.0167, 10.0, max_iter=0)
    with pytest.raises(ValueError, match="max_iter must be an integer"):
        solver(0.0167, 10.0, max_iter=5.0)
    with pytest.raises(ValueError, match="max_iter must be an integer"):
        solver(0.0167, 10.0, max_iter=True)
    with pytest.raises(ValueError, match="Tolerance"):
        solver(0.0167, 10.0, tol=-1.0)


def test_newton_step_stays_finite_near_parabolic():
    # 1 - e cos(E) >= 1 - e > 0, so the degenerate-step guard is never hit
    for M in [0.0, 1.0, 90.0, 180.0, 359.0]:
        sol = solve_newton_raphson(0.999, M)
        assert math.isfinite(sol.E_deg)
        assert math.isfinite(sol.residual_deg)
