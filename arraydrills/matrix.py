"""Matrix drills on lists of rows: rotation, zeroing rows and columns, spiral reading."""

_MARK = object()


def _check_rectangular(matrix):
    widths = {len(row) for row in matrix}
    if len(widths) > 1:
        raise ValueError("rows differ in length")


def _check_square(matrix):
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("matrix is not square")


def rotate_copy(matrix):
    """Return a new square matrix turned 90 degrees clockwise."""
    _check_square(matrix)
    return [list(column) for column in zip(*reversed(matrix))]


def rotate_in_place(matrix):
    """Turn a square matrix 90 degrees clockwise in place: transpose, then reverse each row."""
    _check_square(matrix)
    size = len(matrix)
    for i in range(size - 1):
        for j in range(i + 1, size):
            matrix[i][j], matrix[j][i] = matrix[j][i], matrix[i][j]
    for row in matrix:
        row.reverse()


def set_zeroes_marking(matrix):
    """Zero every row and column holding a zero, in place, by marking cells first.

    Marked cells are not zeros yet, so they never spread the zeroing further.
    """
    _check_rectangular(matrix)
    for i, row in enumerate(matrix):
        for j, value in enumerate(row):
            if value is not _MARK and value == 0:
                for k, cell in enumerate(row):
                    if cell is _MARK or cell != 0:
                        row[k] = _MARK
                for other in matrix:
                    if other[j] is _MARK or other[j] != 0:
                        other[j] = _MARK
    for row in matrix:
        row[:] = [0 if cell is _MARK else cell for cell in row]


def set_zeroes_flags(matrix):
    """Zero every row and column holding a zero, in place, using row and column flags."""
    _check_rectangular(matrix)
    zero_rows = {i for i, row in enumerate(matrix) if 0 in row}
    zero_cols = {j for row in matrix for j, value in enumerate(row) if value == 0}
    for i, row in enumerate(matrix):
        for j in range(len(row)):
            if i in zero_rows or j in zero_cols:
                row[j] = 0


def set_zeroes(matrix):
    """Zero every row and column holding a zero, in place, keeping the flags in the first row and column."""
    _check_rectangular(matrix)
    if not matrix or not matrix[0]:
        return
    rows, cols = len(matrix), len(matrix[0])
    first_col_zero = False
    for i in range(rows):
        for j in range(cols):
            if matrix[i][j] == 0:
                matrix[i][0] = 0
                if j != 0:
                    matrix[0][j] = 0
                else:
                    first_col_zero = True
    for i in range(1, rows):
        for j in range(1, cols):
            if matrix[i][j] != 0 and (matrix[i][0] == 0 or matrix[0][j] == 0):
                matrix[i][j] = 0
    if matrix[0][0] == 0:
        matrix[0] = [0] * cols
    if first_col_zero:
        for row in matrix:
            row[0] = 0


def spiral_order(matrix):
    """Return the values read clockwise in a spiral from the top-left corner."""
    _check_rectangular(matrix)
    if not matrix or not matrix[0]:
        return []
    top, bottom = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    result = []
    while top <= bottom and left <= right:
        result.extend(matrix[top][left:right + 1])
        top += 1
        result.extend(matrix[i][right] for i in range(top, bottom + 1))
        right -= 1
        if top <= bottom:
            result.extend(matrix[bottom][i] for i in range(right, left - 1, -1))
            bottom -= 1
        if left <= right:
            result.extend(matrix[i][left] for i in range(bottom, top - 1, -1))
            left += 1
    return result