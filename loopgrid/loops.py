"""Small demonstrations of loop control: break, continue, trace order, parity
branching and integer wrap-around."""


def ascii_table(per_row: int = 5) -> str:
    """Printable ASCII characters with their codes, ``per_row`` to a line."""
    if per_row < 1:
        raise ValueError("per_row must be at least 1")
    parts = []
    for count, code in enumerate(range(32, 127), start=1):
        parts.append(f"{chr(code)} is {code} \t")
        if count % per_row == 0:
            parts.append("\n")
    return "".join(parts)


def odd_numbers(limit: int = 20) -> list[int]:
    """Numbers from 1 to ``limit``, skipping the even ones."""
    result = []
    for i in range(1, limit + 1):
        if i % 2 == 0:
            continue
        result.append(i)
    return result


def pairs_before_diagonal(m: int, n: int) -> list[list[tuple[int, int]]]:
    """For each row ``i``, the pairs ``(i, j)`` until the inner loop breaks at ``j == i``."""
    rows = []
    for i in range(m):
        row = []
        for j in range(n):
            if i == j:
                break
            row.append((i, j))
        rows.append(row)
    return rows


def pairs_off_diagonal(m: int, n: int) -> list[list[tuple[int, int]]]:
    """For each row ``i``, all pairs ``(i, j)`` except where ``j == i``."""
    return [[(i, j) for j in range(n) if i != j] for i in range(m)]


def rows_until(m: int, n: int, stop: int) -> list[list[tuple[int, int]]]:
    """Full rows of pairs, with the outer loop breaking once ``i == stop``."""
    rows = []
    for i in range(m):
        if i == stop:
            break
        rows.append([(i, j) for j in range(n)])
    return rows


def control_flow_trace(limit: int = 4) -> list[str]:
    """The order in which a counting loop's parts run, as labels."""
    trace = ["Initial"]
    i = 0
    while True:
        trace.append("Condition")
        if not i < limit:
            break
        trace.append("Inside")
        i += 1
        trace.append("Update")
    trace.append("Outside")
    return trace


def parity(n: int) -> str:
    """Return ``"even"`` or ``"odd"`` for an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError("parity needs an integer")
    if n % 2 == 0:
        return "even"
    return "odd"


def wrap_until_negative(bits: int = 8) -> int:
    """Value a signed ``bits``-wide counter holds when incrementing from 0 first turns negative."""
    if bits < 1:
        raise ValueError("bits must be at least 1")
    largest = (1 << (bits - 1)) - 1
    return largest + 1 - (1 << bits)