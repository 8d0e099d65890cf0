"""
Tests for solve() and invert().

Reference values are from R 4.x solve(); error messages follow R's wording.
"""

import numpy as np
import pytest

from cachematrix import solve, invert
from cachematrix.core.compute.tolerances import CPU_FP64
from cachematrix.core.exceptions import (
    ConformabilityError,
    InversionError,
    MalformedMatrixError,
    NonSquareMatrixError,
    SingularMatrixError,
    ValidationError,
)
from cachematrix.inverse import InverseDesign


# ═══════════════════════════════════════════════════════════════════════
# Inversion
# ═══════════════════════════════════════════════════════════════════════


class TestInverse:

    def test_r_example(self, r_example_matrix, r_example_inverse):
        inv = solve(r_example_matrix)
        np.testing.assert_array_equal(inv, r_example_inverse)

    def test_accepts_nested_lists(self, r_example_inverse):
        inv = solve([[1, 0], [1, 2]])
        assert inv.dtype == np.float64
        np.testing.assert_array_equal(inv, r_example_inverse)

    def test_round_trip_identity(self, well_conditioned):
        inv = solve(well_conditioned)
        n = well_conditioned.shape[0]
        np.testing.assert_allclose(inv @ well_conditioned, np.eye(n),
                                   rtol=CPU_FP64.rtol, atol=CPU_FP64.atol * 100)
        np.testing.assert_allclose(well_conditioned @ inv, np.eye(n),
                                   rtol=CPU_FP64.rtol, atol=CPU_FP64.atol * 100)

    def test_matches_numpy(self, well_conditioned):
        np.testing.assert_allclose(solve(well_conditioned), np.linalg.inv(well_conditioned),
                                   rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_scalar_is_1x1(self):
        np.testing.assert_array_equal(solve(4.0), [[0.25]])

    def test_input_not_modified(self, r_example_matrix):
        before = r_example_matrix.copy()
        solve(r_example_matrix)
        np.testing.assert_array_equal(r_example_matrix, before)


# ═══════════════════════════════════════════════════════════════════════
# Right-hand side
# ═══════════════════════════════════════════════════════════════════════


class TestRightHandSide:

    def test_vector_b_gives_vector(self, r_example_matrix):
        x = solve(r_example_matrix, [1.0, 3.0])
        assert x.shape == (2,)
        np.testing.assert_allclose(x, [1.0, 1.0])

    def test_matrix_b(self, well_conditioned, rng):
        b = rng.standard_normal((6, 3))
        x = solve(well_conditioned, b)
        assert x.shape == (6, 3)
        np.testing.assert_allclose(well_conditioned @ x, b, atol=1e-10)

    def test_identity_b_equals_inverse(self, well_conditioned):
        np.testing.assert_allclose(solve(well_conditioned, np.eye(6)), solve(well_conditioned),
                                   rtol=CPU_FP64.rtol, atol=CPU_FP64.atol)

    def test_b_not_conformable(self, r_example_matrix):
        with pytest.raises(ConformabilityError,
                           match=r"'b' \(3 x 1\) must be compatible with 'a' \(2 x 2\)"):
            solve(r_example_matrix, [1.0, 2.0, 3.0])


# ═══════════════════════════════════════════════════════════════════════
# Singularity
# ═══════════════════════════════════════════════════════════════════════


class TestSingular:

    def test_exactly_singular(self, singular_matrix):
        with pytest.raises(SingularMatrixError, match=r"exactly singular: U\[2,2\] = 0") as exc_info:
            solve(singular_matrix)
        assert exc_info.value.pivot == 2
        assert exc_info.value.rcond == 0.0

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError, match=r"U\[1,1\] = 0"):
            solve(np.zeros((3, 3)))

    def test_exactly_singular_ignores_tol(self, singular_matrix):
        with pytest.raises(SingularMatrixError):
            solve(singular_matrix, tol=0)

    def test_computationally_singular_default_tol(self):
        # R: solve(diag(c(1e20, 1))) -> reciprocal condition number = 1e-20
        with pytest.raises(SingularMatrixError,
                           match="computationally singular: reciprocal condition number = 1e-20"):
            solve(np.diag([1e20, 1.0]))

    def test_tol_threshold(self, nearly_singular_matrix):
        with pytest.raises(SingularMatrixError, match="reciprocal condition number") as exc_info:
            solve(nearly_singular_matrix, tol=1e-10)
        err = exc_info.value
        assert err.tol == 1e-10
        assert 0.0 < err.rcond < 1e-10
        assert err.condition_number > 1e10

    def test_tol_zero_disables_check(self, nearly_singular_matrix):
        inv = solve(nearly_singular_matrix, tol=0)
        assert np.all(np.isfinite(inv))

    def test_singular_is_inversion_error(self, singular_matrix):
        with pytest.raises(InversionError):
            solve(singular_matrix)


# ═══════════════════════════════════════════════════════════════════════
# Malformed input
# ═══════════════════════════════════════════════════════════════════════


class TestMalformed:

    def test_non_square(self):
        with pytest.raises(NonSquareMatrixError, match=r"'a' \(2 x 3\) must be square"):
            solve(np.ones((2, 3)))

    def test_vector_is_non_square(self):
        with pytest.raises(NonSquareMatrixError):
            solve([1.0, 2.0, 3.0])

    def test_nan(self):
        with pytest.raises(MalformedMatrixError, match="non-finite"):
            solve([[1.0, np.nan], [0.0, 1.0]])

    def test_three_dimensional(self):
        with pytest.raises(MalformedMatrixError):
            solve(np.ones((2, 2, 2)))

    def test_empty(self):
        with pytest.raises(MalformedMatrixError, match="empty"):
            solve(np.ones((0, 0)))

    def test_strings(self):
        with pytest.raises(MalformedMatrixError):
            solve([["a", "b"], ["c", "d"]])

    def test_bad_tol(self, r_example_matrix):
        with pytest.raises(ValidationError):
            solve(r_example_matrix, tol="small")

    def test_unknown_backend(self, r_example_matrix):
        with pytest.raises(ValidationError, match="Unknown backend"):
            solve(r_example_matrix, backend="tpu")


# ═══════════════════════════════════════════════════════════════════════
# invert(): diagnostics
# ═══════════════════════════════════════════════════════════════════════


class TestInvert:

    def test_solution_fields(self, r_example_matrix, r_example_inverse):
        sol = invert(r_example_matrix)
        np.testing.assert_array_equal(sol.x, r_example_inverse)
        np.testing.assert_array_equal(sol.inverse, r_example_inverse)
        assert sol.n == 2
        assert sol.is_inverse
        assert sol.backend_name == "cpu_lu"
        assert sol.info["method"] == "lu"
        assert sol.warnings == ()

    def test_rcond_bounds(self, r_example_matrix):
        # gecon never underestimates rcond; true value is 1/3
        sol = invert(r_example_matrix)
        assert 1.0 / 3.0 - 1e-12 <= sol.rcond <= 1.0
        assert sol.condition_number == pytest.approx(1.0 / sol.rcond)

    def test_identity_rcond(self):
        assert invert(np.eye(4)).rcond == pytest.approx(1.0)

    def test_timing_sections(self, well_conditioned):
        timing = invert(well_conditioned).timing
        assert {"total_seconds", "factorization", "condition", "solve"} <= set(timing)

    def test_residual_norm(self, well_conditioned):
        assert invert(well_conditioned).residual_norm() < 1e-12

    def test_inverse_unavailable_with_b(self, r_example_matrix):
        sol = invert(r_example_matrix, [1.0, 3.0])
        assert not sol.is_inverse
        with pytest.raises(AttributeError, match="right-hand side"):
            sol.inverse

    def test_accepts_design(self, r_example_matrix, r_example_inverse):
        design = InverseDesign.from_arrays(r_example_matrix)
        np.testing.assert_array_equal(invert(design).x, r_example_inverse)

    def test_design_with_b_rejected(self, r_example_matrix):
        design = InverseDesign.from_arrays(r_example_matrix)
        with pytest.raises(ValidationError):
            invert(design, [1.0, 2.0])

    def test_summary(self, r_example_matrix):
        text = invert(r_example_matrix).summary()
        assert "Inverse of 2 x 2 system" in text
        assert "cpu_lu" in text

    def test_repr(self, r_example_matrix):
        assert "InverseSolution(n=2" in repr(invert(r_example_matrix))


# ═══════════════════════════════════════════════════════════════════════
# pandas input
# ═══════════════════════════════════════════════════════════════════════


class TestDataFrame:

    def test_labels_swapped(self, r_example_matrix, r_example_inverse):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame(r_example_matrix, index=["r1", "r2"], columns=["c1", "c2"])
        inv = solve(df)
        assert isinstance(inv, pd.DataFrame)
        assert list(inv.index) == ["c1", "c2"]
        assert list(inv.columns) == ["r1", "r2"]
        np.testing.assert_array_equal(inv.to_numpy(), r_example_inverse)

    def test_dataframe_with_b_returns_array(self, r_example_matrix):
        pd = pytest.importorskip("pandas")
        df = pd.DataFrame(r_example_matrix)
        x = solve(df, [1.0, 3.0])
        assert isinstance(x, np.ndarray)
        np.testing.assert_allclose(x, [1.0, 1.0])
