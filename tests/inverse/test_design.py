"""
Tests for InverseDesign construction and coercion.
"""

import numpy as np
import pytest

from cachematrix.core.exceptions import ConformabilityError, NonSquareMatrixError
from cachematrix.inverse import InverseDesign


class TestFromArrays:

    def test_inverse_design(self, r_example_matrix):
        design = InverseDesign.from_arrays(r_example_matrix)
        assert design.n == 2
        assert design.is_inverse
        assert design.b is None
        np.testing.assert_array_equal(design.rhs, np.eye(2))

    def test_vector_b(self, r_example_matrix):
        design = InverseDesign.from_arrays(r_example_matrix, [1.0, 2.0])
        assert not design.is_inverse
        assert design.b_is_vector
        assert design.b.shape == (2, 1)

    def test_matrix_b(self, r_example_matrix):
        design = InverseDesign.from_arrays(r_example_matrix, np.ones((2, 4)))
        assert not design.b_is_vector
        assert design.metadata == {'n': 2, 'n_rhs': 4, 'is_inverse': False}

    def test_plain_sequences_have_no_labels(self):
        design = InverseDesign.from_arrays([[2.0, 0.0], [0.0, 2.0]])
        assert design.row_labels is None
        assert design.col_labels is None

    def test_frozen(self, r_example_matrix):
        design = InverseDesign.from_arrays(r_example_matrix)
        with pytest.raises(AttributeError):
            design._a = np.eye(2)

    def test_non_square(self):
        with pytest.raises(NonSquareMatrixError):
            InverseDesign.from_arrays(np.ones((3, 2)))

    def test_b_checked_after_a(self):
        with pytest.raises(ConformabilityError):
            InverseDesign.from_arrays(np.eye(3), np.ones((2, 2)))
