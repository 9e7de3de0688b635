import numpy as np
import pytest

import ringmatrix as rm
from ringmatrix import DenseMatrix, Index, SparseMatrix


def test_storage_dispatch():
    assert isinstance(rm.instance(2, 2, lambda idx: 0, storage="sparse"), SparseMatrix)
    assert isinstance(rm.of_size(Index(1, 1), lambda idx: 0, storage="SPARSE"), SparseMatrix)
    assert isinstance(rm.identity(2, 0, 1, storage="dense"), DenseMatrix)
    assert isinstance(rm.from_array([[1]], storage="sparse", default=0), SparseMatrix)


def test_unknown_storage():
    with pytest.raises(ValueError, match="Unknown storage"):
        rm.constant(2, 1, storage="banded")
    with pytest.raises(TypeError):
        rm.constant(2, 1, storage=None)


def test_matrix_returns_existing_matrix_unchanged():
    m = rm.constant(2, 1)
    assert rm.matrix(m) is m
    assert rm.matrix(m, storage="dense") is m


def test_matrix_converts_dense_to_sparse():
    m = rm.identity(3, 0, 1)
    s = rm.matrix(m, storage="sparse", default=0)
    assert isinstance(s, SparseMatrix)
    assert s.stored_count() == 3


def test_matrix_has_no_sparse_to_dense_conversion():
    s = SparseMatrix.constant(2, 1)
    with pytest.raises(TypeError):
        rm.matrix(s, storage="dense")


def test_matrix_rejects_options_without_storage():
    with pytest.raises(TypeError):
        rm.matrix(rm.constant(2, 1), default=0)


def test_matrix_from_literals():
    assert rm.matrix([[1, 2], [3, 4]]).to_lists() == [[1, 2], [3, 4]]
    assert isinstance(rm.matrix(np.eye(2)), DenseMatrix)
    assert rm.matrix([[0, 1]], storage="sparse", default=0).stored_count() == 1


def test_from_array_rejects_existing_matrix():
    sparse = SparseMatrix.identity(2, 0, 1, default=0)
    with pytest.raises(TypeError, match="already a matrix"):
        DenseMatrix.from_array(sparse)
    with pytest.raises(TypeError, match="already a matrix"):
        rm.from_array(sparse)
    with pytest.raises(TypeError, match="already a matrix"):
        SparseMatrix.from_array(DenseMatrix.identity(2, 0, 1), default=0)


def test_sparse_to_dense_has_no_back_door():
    sparse = SparseMatrix.identity(2, 0, 1, default=0)
    with pytest.raises(TypeError):
        rm.matrix(sparse, storage="dense")
    with pytest.raises(TypeError):
        rm.from_array(sparse, storage="dense")
