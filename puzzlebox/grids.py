"""Grid and geometry puzzles: islands, zero-sum blocks, gold paths, descents and lines."""

from collections import defaultdict, deque
from itertools import accumulate
from math import gcd

_ALL_DIRECTIONS = tuple(
    (dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if (dr, dc) != (0, 0)
)
_STRAIGHT_DIRECTIONS = ((-1, 0), (0, -1), (0, 1), (1, 0))


def _shape(matrix):
    """Rows and columns of a non-empty rectangular matrix."""
    if not matrix or not matrix[0]:
        raise ValueError("matrix must not be empty")
    cols = len(matrix[0])
    if any(len(row) != cols for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), cols


def _neighbours(row, col, rows, cols, directions):
    for dr, dc in directions:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def count_islands(matrix):
    """Number of groups of non-zero cells, joined across edges and corners."""
    if not matrix:
        return 0
    rows, cols = _shape(matrix)
    seen = set()
    count = 0
    for r, row in enumerate(matrix):
        for c, cell in enumerate(row):
            if not cell or (r, c) in seen:
                continue
            count += 1
            seen.add((r, c))
            stack = [(r, c)]
            while stack:
                cr, cc = stack.pop()
                for nr, nc in _neighbours(cr, cc, rows, cols, _ALL_DIRECTIONS):
                    if matrix[nr][nc] and (nr, nc) not in seen:
                        seen.add((nr, nc))
                        stack.append((nr, nc))
    return count


def _longest_zero_run(values):
    """Inclusive bounds of the longest zero-sum run in ``values``, or None."""
    first_seen = {0: -1}
    longest = 0
    bounds = None
    for i, prefix in enumerate(accumulate(values)):
        if prefix in first_seen:
            if i - first_seen[prefix] > longest:
                bounds = (first_seen[prefix] + 1, i)
                longest = i - first_seen[prefix]
        else:
            first_seen[prefix] = i
    return bounds


def largest_zero_submatrix(matrix):
    """Area of the largest contiguous submatrix whose elements sum to zero.

    Returns 0 if no such submatrix exists.
    """
    rows, cols = _shape(matrix)
    best = 0
    for left in range(cols):
        column_sums = [0] * rows
        for right in range(left, cols):
            for i, row in enumerate(matrix):
                column_sums[i] += row[right]
            bounds = _longest_zero_run(column_sums)
            if bounds is not None:
                top, bottom = bounds
                best = max(best, (bottom - top + 1) * (right - left + 1))
    return best


def max_gold_path(matrix):
    """Most gold collected on a path through non-zero cells, never revisiting one.

    Moves go up, down, left or right. A grid with no gold gives 0.
    """
    rows, cols = _shape(matrix)

    def best_from(row, col, visited):
        best = 0
        for nr, nc in _neighbours(row, col, rows, cols, _STRAIGHT_DIRECTIONS):
            if matrix[nr][nc] and (nr, nc) not in visited:
                visited.add((nr, nc))
                best = max(best, matrix[nr][nc] + best_from(nr, nc, visited))
                visited.remove((nr, nc))
        return best

    return max(
        (
            cell + best_from(r, c, {(r, c)})
            for r, row in enumerate(matrix)
            for c, cell in enumerate(row)
            if cell
        ),
        default=0,
    )


def is_path_possible(matrix):
    """True if the bottom-right cell is reachable from the top-left one.

    A move to an adjacent cell is allowed when its value is not greater than
    the current cell's.
    """
    rows, cols = _shape(matrix)
    target = (rows - 1, cols - 1)
    seen = {(0, 0)}
    queue = deque([(0, 0)])
    while queue:
        cell = queue.popleft()
        if cell == target:
            return True
        row, col = cell
        for nr, nc in _neighbours(row, col, rows, cols, _STRAIGHT_DIRECTIONS):
            if (nr, nc) not in seen and matrix[nr][nc] <= matrix[row][col]:
                seen.add((nr, nc))
                queue.append((nr, nc))
    return False


def is_path_possible_dp(matrix):
    """Like ``is_path_possible`` but moving only down or right."""
    rows, cols = _shape(matrix)
    reachable = [[False] * cols for _ in range(rows)]
    reachable[0][0] = True
    for r, row in enumerate(matrix):
        for c, value in enumerate(row):
            if (r, c) == (0, 0):
                continue
            from_above = r > 0 and reachable[r - 1][c] and value <= matrix[r - 1][c]
            from_left = c > 0 and reachable[r][c - 1] and value <= row[c - 1]
            reachable[r][c] = from_above or from_left
    return reachable[rows - 1][cols - 1]


def shortest_descending_path(maze, src, dest):
    """Shortest path of cells from ``src`` to ``dest``, each strictly lower than the last.

    Moves go up, down, left or right. Returns the list of ``(row, col)``
    cells from ``src`` to ``dest``, or None if ``dest`` cannot be reached.
    """
    rows, cols = _shape(maze)
    src, dest = tuple(src), tuple(dest)
    for row, col in (src, dest):
        if not (0 <= row < rows and 0 <= col < cols):
            raise ValueError(f"cell {(row, col)} lies outside the maze")
    parent = {src: None}
    queue = deque([src])
    while queue:
        node = queue.popleft()
        if node == dest:
            path = []
            while node is not None:
                path.append(node)
                node = parent[node]
            return path[::-1]
        row, col = node
        for nxt in _neighbours(row, col, rows, cols, _STRAIGHT_DIRECTIONS):
            if nxt not in parent and maze[nxt[0]][nxt[1]] < maze[row][col]:
                parent[nxt] = node
                queue.append(nxt)
    return None


def max_points_on_line(points):
    """Largest number of the given points that lie on one straight line."""
    points = [tuple(p) for p in points]
    if len(points) < 2:
        return len(points)
    best = 0
    for i, (x1, y1) in enumerate(points):
        slopes = defaultdict(int)
        overlap = vertical = current = 0
        for x2, y2 in points[i + 1:]:
            if (x1, y1) == (x2, y2):
                overlap += 1
            elif x1 == x2:
                vertical += 1
            else:
                dx, dy = x2 - x1, y2 - y1
                if dx < 0:
                    dx, dy = -dx, -dy
                divisor = gcd(dx, dy)
                key = (dy // divisor, dx // divisor)
                slopes[key] += 1
                current = max(current, slopes[key])
            current = max(current, vertical)
        best = max(best, current + overlap + 1)
    return best


def _dist(p, q):
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2


def _is_square_in_order(a, b, c, d):
    side = _dist(a, b)
    return (
        side > 0
        and side == _dist(b, c) == _dist(c, d) == _dist(d, a)
        and _dist(a, c) == _dist(b, d)
    )


def valid_square(p1, p2, p3, p4):
    """True if the four points, in any order, are the corners of a square."""
    return (
        _is_square_in_order(p1, p2, p3, p4)
        or _is_square_in_order(p1, p3, p2, p4)
        or _is_square_in_order(p1, p2, p4, p3)
    )