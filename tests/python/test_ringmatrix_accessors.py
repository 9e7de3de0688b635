import unittest

import ringmatrix as rm
from ringmatrix import DenseMatrix, Index, MatrixError, MatrixErrorKind, SparseMatrix


class TestValueLookup(unittest.TestCase):
    def setUp(self):
        self.m = DenseMatrix.from_array([[1, 2, 3], [4, 5, 6]])

    def test_value_by_index(self):
        self.assertEqual(self.m.value(Index(1, 2)), 6)

    def test_out_of_range_is_none(self):
        self.assertIsNone(self.m.value(Index(2, 0)))
        self.assertIsNone(self.m.value(Index(0, 3)))
        self.assertIsNone(self.m.value(Index(-1, 0)))

    def test_value_none_index_is_null_argument(self):
        with self.assertRaises(MatrixError) as ctx:
            self.m.value(None)
        self.assertIs(ctx.exception.kind, MatrixErrorKind.NULL_ARGUMENT)
        self.assertEqual(ctx.exception.argument, "index")

    def test_value_at_clamps_negative_coordinates_to_zero(self):
        self.assertEqual(self.m.value_at(-1, -5), 1)
        self.assertEqual(self.m.value_at(-3, 2), 3)
        self.assertEqual(self.m.value_at(1, -1), 4)

    def test_value_at_does_not_wrap_past_the_end(self):
        self.assertIsNone(self.m.value_at(5, 0))

    def test_value_at_clamps_on_sparse_too(self):
        s = SparseMatrix.identity(2, 0, 1, default=0)
        self.assertEqual(s.value_at(-1, -1), 1)

    def test_value_in_forwards_to_other_matrix(self):
        other = DenseMatrix.constant(2, "x")
        self.assertEqual(self.m.value_in(other, Index(1, 1)), "x")
        self.assertIsNone(self.m.value_in(other, Index(2, 2)))

    def test_value_in_null_checks(self):
        with self.assertRaises(MatrixError) as ctx:
            self.m.value_in(self.m, None)
        self.assertEqual(ctx.exception.argument, "index")
        with self.assertRaises(MatrixError) as ctx:
            self.m.value_in(None, Index(0, 0))
        self.assertEqual(ctx.exception.argument, "matrix")

    def test_getitem(self):
        self.assertEqual(self.m[1, 0], 4)
        self.assertEqual(self.m[Index(0, 2)], 3)
        self.assertEqual(self.m[-1, 0], 1)
        with self.assertRaises(TypeError):
            self.m[0]

    def test_shape_helpers(self):
        self.assertEqual(self.m.rows(), 2)
        self.assertEqual(self.m.cols(), 3)
        self.assertEqual(self.m.shape, (2, 3))
        self.assertEqual(list(self.m.coordinates())[:4], [Index(0, 0), Index(0, 1), Index(0, 2), Index(1, 0)])

    def test_to_lists_returns_fresh_rows(self):
        rows = self.m.to_lists()
        rows[0][0] = 100
        self.assertEqual(self.m.value_at(0, 0), 1)

    def test_dense_rejects_inconsistent_storage(self):
        with self.assertRaises(ValueError):
            DenseMatrix([1, 2, 3], Index(1, 1))


class TestRendering(unittest.TestCase):
    def test_str_is_tab_terminated_rows(self):
        m = DenseMatrix.from_array([[1, 2], [3, 4]])
        self.assertEqual(str(m), "1\t2\t\n3\t4\t\n")

    def test_absent_values_render_empty(self):
        m = DenseMatrix.from_array([[1, 2, 3], [4]])
        self.assertEqual(str(m), "1\t2\t3\t\n4\t\t\t\n")

    def test_render_function_matches_str(self):
        m = DenseMatrix.identity(3, 0, 1)
        self.assertEqual(rm.render(m), str(m))
        self.assertEqual(rm.render(m).splitlines(), ["1\t0\t0\t", "0\t1\t0\t", "0\t0\t1\t"])

    def test_sparse_renders_default_for_unstored(self):
        m = SparseMatrix.identity(2, 0, 1, default=0)
        self.assertEqual(str(m), "1\t0\t\n0\t1\t\n")

    def test_dense_and_sparse_render_identically(self):
        dense = DenseMatrix.identity(2, 0, 1)
        self.assertEqual(str(dense), "1\t0\t\n0\t1\t\n")
        self.assertEqual(str(dense), str(dense.make_sparse(default=0)))

    def test_repr_preview(self):
        m = DenseMatrix.from_array([[1.5, None]])
        self.assertEqual(repr(m), "DenseMatrix(shape=(1, 2))\n[\n [1.5 .]\n]")

    def test_repr_truncates_large_matrices(self):
        rm.configure(edge_items=2)
        try:
            m = DenseMatrix.instance(10, 10, lambda idx: idx.column)
            text = repr(m)
        finally:
            rm.reset_config()
        lines = text.splitlines()
        self.assertEqual(lines[0], "DenseMatrix(shape=(10, 10))")
        self.assertEqual(lines[2], " [0 1 ... 8 9]")
        self.assertIn(" ...", lines)
        self.assertEqual(len(lines), 2 + 2 + 1 + 2 + 1)


if __name__ == "__main__":
    unittest.main()
