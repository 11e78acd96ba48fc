"""Edit distance between short strings."""


def levenshtein(a: str, b: str) -> int:
    """Compute the Levenshtein distance (unit-cost insert/delete/substitute).

    Uses a single row of len(b) + 1 cells; the diagonal from the previous row
    is carried in a scalar. Comparison is case-sensitive.
    """
    if not a:
        return len(b)
    if not b:
        return len(a)

    row = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        diagonal = row[0]
        row[0] = i
        for j, cb in enumerate(b, start=1):
            above = row[j]
            cost = 0 if ca == cb else 1
            row[j] = min(
                above + 1,  # deletion
                row[j - 1] + 1,  # insertion
                diagonal + cost,  # substitution
            )
            diagonal = above
    return row[-1]
