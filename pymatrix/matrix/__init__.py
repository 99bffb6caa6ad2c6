"""
Dense matrix data model and arithmetic.

Public API:
    Construction: make, make_row_vector, make_column_vector, make_vector,
                  make_empty, clone
    Access:       get, row, column
    Growth:       append_row, append_column, RowBuilder
    Arithmetic:   add, sub, smul, multiply, transpose, norm, dot
    Conversion:   from_array, to_array, to_numpy, map_elements, format_matrix

Example:
    >>> from pymatrix.matrix import make, multiply, transpose
    >>> A = make(2, 2, [1, 2, 3, 4])
    >>> multiply(transpose(A), A)
"""

from pymatrix.matrix._matrix import (
    Matrix,
    clone,
    get,
    make,
    make_column_vector,
    make_empty,
    make_row_vector,
    make_vector,
)
from pymatrix.matrix._arithmetic import (
    add,
    dot,
    multiply,
    norm,
    smul,
    sub,
    transpose,
)
from pymatrix.matrix._slicing import (
    RowBuilder,
    append_column,
    append_row,
    column,
    row,
)
from pymatrix.matrix.convert import (
    format_matrix,
    from_array,
    map_elements,
    to_array,
    to_numpy,
)

__all__ = [
    # Data model
    "Matrix",
    "make",
    "make_row_vector",
    "make_column_vector",
    "make_vector",
    "make_empty",
    "clone",
    "get",
    # Arithmetic
    "add",
    "sub",
    "smul",
    "multiply",
    "transpose",
    "norm",
    "dot",
    # Rows and columns
    "row",
    "column",
    "append_row",
    "append_column",
    "RowBuilder",
    # Conversion
    "from_array",
    "to_array",
    "to_numpy",
    "map_elements",
    "format_matrix",
]
