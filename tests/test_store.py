from pathlib import Path
import sys

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from errors import OutOfRangeError
from ledger import VariableLedger
from store.matrix import MatrixStore


def test_matrix_store_bounds_checked():
    store = MatrixStore(2, 3)
    store.set(1, 2, 4.5)
    assert store.get(1, 2) == 4.5
    assert store.shape == (2, 3)

    with pytest.raises(OutOfRangeError):
        store.get(2, 0)
    with pytest.raises(OutOfRangeError):
        store.get(0, 3)
    with pytest.raises(OutOfRangeError):
        store.set(-1, 0, 1.0)
    # OutOfRangeError is still an IndexError for callers that expect one.
    with pytest.raises(IndexError):
        store.set(0, 5, 1.0)


def test_matrix_store_rejects_non_finite_and_bad_shapes():
    store = MatrixStore(2, 2)
    with pytest.raises(ValueError):
        store.set(0, 0, float("nan"))
    with pytest.raises(ValueError):
        store.load([[1.0, 2.0, 3.0]])
    with pytest.raises(ValueError):
        store.load([[1.0, np.inf], [0.0, 0.0]])

    store.load([[1.0, 2.0], [3.0, 4.0]])
    values = store.values
    values[0, 0] = 99.0
    assert store.get(0, 0) == 1.0


def test_ledger_initial_labels_use_slot_numbering():
    ledger = VariableLedger(num_variables=2, num_constraints=2)
    assert ledger.labels == ("x1", "x2", "t3", "t4")
    assert ledger.column_labels == ("x1", "x2")
    assert ledger.row_labels == ("t3", "t4")
    assert [ledger.label_at(pos) for pos in range(len(ledger))] == ["x1", "x2", "t3", "t4"]


def test_ledger_swap_and_reset():
    ledger = VariableLedger(num_variables=3, num_constraints=2)
    assert ledger.swap_header(1, 0) == (1, 3)
    assert ledger.column_labels == ("x1", "t4", "x3")
    assert ledger.row_labels == ("x2", "t5")
    assert ledger.position_of("x2") == 3
    assert ledger.home_label(1) == "x2"

    ledger.swap(0, 4)
    assert sorted(ledger) == sorted(["x1", "x2", "x3", "t4", "t5"])

    ledger.reset()
    assert ledger.labels == ("x1", "x2", "x3", "t4", "t5")


def test_ledger_out_of_range_positions():
    ledger = VariableLedger(num_variables=1, num_constraints=1)
    with pytest.raises(OutOfRangeError):
        ledger.label_at(2)
    with pytest.raises(OutOfRangeError):
        ledger.swap_header(1, 0)
    with pytest.raises(OutOfRangeError):
        ledger.row_position(1)
    with pytest.raises(KeyError):
        ledger.position_of("x9")
