# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Fixed-size containers over an element type.

Dimensions are fixed when a `Vector` or `Matrix` is built and never change
afterwards; there is no append, insert or delete. Indexing accepts plain
integers in [0, dim) only. Anything else raises `IndexError`, which callers
are not expected to recover from.
"""

import copy
import numbers
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

from .exceptions import CapabilityError, DimensionError
from .markers import El


def _coerce(value, el: type):
    if type(value) is el:
        return value
    result = el(value)
    if type(result) is not el:
        raise TypeError(
            f"cannot convert {type(value).__name__} to {el.__name__}: "
            f"got {type(result).__name__}"
        )
    return result


def _check_index(index, dim: int, kind: str) -> int:
    if isinstance(index, bool) or not isinstance(index, numbers.Integral):
        raise IndexError(f"{kind} indices must be integers, not {type(index).__name__}")
    if not 0 <= index < dim:
        raise IndexError(f"index {index} out of range for {kind} of dimension {dim}")
    return int(index)


def _literal(x) -> str:
    # NumPy 2 reprs scalars as np.float32(1.0); show the plain number instead
    if isinstance(x, np.generic):
        return repr(x.item())
    return repr(x)


class Vector:
    """
    An ordered sequence of exactly M elements of one element type.

    Parameters
    ----------
    data : iterable
        The M entries. Entries whose type is not exactly `el` are converted
        with ``el(entry)``.
    el : type | None
        Element type. Inferred from the first entry if omitted; an empty
        vector must name it.
    """

    __slots__ = ("_inner", "el")

    def __init__(self, data: Iterable, el: Optional[type] = None):
        items = list(data)
        if el is None:
            if not items:
                raise TypeError("cannot infer the element type of an empty Vector")
            el = type(items[0])
        if not El.holds(el):
            raise CapabilityError(El, el)
        self.el = el
        self._inner = [_coerce(x, el) for x in items]

    @classmethod
    def _trusted(cls, items: List, el: type) -> "Vector":
        v = cls.__new__(cls)
        v.el = el
        v._inner = items
        return v

    @property
    def dim(self) -> int:
        return len(self._inner)

    def __len__(self) -> int:
        return len(self._inner)

    def __iter__(self) -> Iterator:
        return iter(self._inner)

    def __getitem__(self, index):
        return self._inner[_check_index(index, len(self._inner), "Vector")]

    def __setitem__(self, index, value):
        self._inner[_check_index(index, len(self._inner), "Vector")] = _coerce(
            value, self.el
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        if len(self._inner) != len(other._inner):
            return False
        return all(a == b for a, b in zip(self._inner, other._inner))

    __hash__ = None  # mutable

    def copy(self) -> "Vector":
        return Vector._trusted([copy.deepcopy(x) for x in self._inner], self.el)

    def __copy__(self) -> "Vector":
        return self.copy()

    def __deepcopy__(self, memo) -> "Vector":
        return self.copy()

    def to_list(self) -> list:
        return list(self._inner)

    def to_numpy(self, dtype=None) -> np.ndarray:
        return np.array(self._inner, dtype=dtype)

    def __repr__(self) -> str:
        return f"Vector([{', '.join(_literal(x) for x in self._inner)}])"

    def __str__(self) -> str:
        return f"[{', '.join(str(x) for x in self._inner)}]"


def _infer_el(rows: List) -> type:
    for row in rows:
        if isinstance(row, Vector):
            return row.el
        if row:
            return type(row[0])
    raise TypeError("cannot infer the element type of an empty Matrix")


def _as_row(row, el: type) -> Vector:
    if isinstance(row, Vector) and row.el is el:
        return row.copy()
    return Vector(row, el=el)


class Matrix:
    """
    An ordered sequence of exactly M `Vector` rows, each of length N.

    Built row-major from nested sequences (or `Vector`s); ``A[i][j]`` reads
    and writes entry (i, j). ``A[i]`` is the live row, so writes through it
    land in the matrix.

    Example
    -------
    >>> A = Matrix([[2.0, -1.0, 1.0], [1.0, 1.0, 5.0]])
    >>> A.shape
    (2, 3)
    """

    __slots__ = ("_rows", "el")

    def __init__(self, rows: Iterable, el: Optional[type] = None):
        rows = [r if isinstance(r, Vector) else list(r) for r in rows]
        if el is None:
            el = _infer_el(rows)
        vectors = [_as_row(r, el) for r in rows]
        if vectors:
            n = len(vectors[0])
            for i, v in enumerate(vectors):
                if len(v) != n:
                    raise DimensionError(f"row {i} has {len(v)} entries, expected {n}")
        elif not El.holds(el):
            raise CapabilityError(El, el)
        self.el = el
        self._rows = vectors

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        """Build a Matrix over the scalar type of a 2-D ndarray."""
        if not isinstance(array, np.ndarray):
            raise TypeError("array must be a NumPy ndarray")
        if array.ndim != 2:
            raise DimensionError(f"expected a 2-D array, got {array.ndim}-D")
        return cls([list(row) for row in array], el=array.dtype.type)

    @property
    def shape(self) -> Tuple[int, int]:
        m = len(self._rows)
        return m, (len(self._rows[0]) if m else 0)

    def __len__(self) -> int:
        return len(self._rows)

    def __iter__(self) -> Iterator[Vector]:
        return iter(self._rows)

    def __getitem__(self, index) -> Vector:
        return self._rows[_check_index(index, len(self._rows), "Matrix")]

    def __setitem__(self, index, row):
        i = _check_index(index, len(self._rows), "Matrix")
        row = _as_row(row if isinstance(row, Vector) else list(row), self.el)
        n = self.shape[1]
        if len(row) != n:
            raise DimensionError(f"row has {len(row)} entries, expected {n}")
        self._rows[i] = row

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            return False
        return all(a == b for a, b in zip(self._rows, other._rows))

    __hash__ = None  # mutable

    def copy(self) -> "Matrix":
        m = Matrix.__new__(Matrix)
        m.el = self.el
        m._rows = [row.copy() for row in self._rows]
        return m

    def __copy__(self) -> "Matrix":
        return self.copy()

    def __deepcopy__(self, memo) -> "Matrix":
        return self.copy()

    def to_list(self) -> List[list]:
        return [row.to_list() for row in self._rows]

    def to_numpy(self, dtype=None) -> np.ndarray:
        m, n = self.shape
        if m == 0:
            return np.zeros((0, 0), dtype=dtype)
        return np.array(self.to_list(), dtype=dtype)

    def __repr__(self) -> str:
        inner = ", ".join(
            f"[{', '.join(_literal(x) for x in row)}]" for row in self._rows
        )
        return f"Matrix([{inner}])"

    def __str__(self) -> str:
        return "\n".join(str(row) for row in self._rows)
