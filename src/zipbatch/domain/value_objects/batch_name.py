"""Deterministic fixed-width base-62 names for output archives."""

import string

ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase
WIDTH = 12
GROUP = 3
MAX_INDEX = len(ALPHABET) ** WIDTH


def name_for(batch_index: int) -> str:
    """
    Return the label for a 1-based batch index.

    ``batch_index - 1`` is written in base 62 (0-9, a-z, A-Z), left-padded to
    12 digits and grouped in threes: ``name_for(1) == "000-000-000-000"``.
    """
    if batch_index < 1:
        raise ValueError(f"batch_index must be >= 1, got {batch_index}")
    if batch_index > MAX_INDEX:
        raise ValueError(f"batch_index out of range: {batch_index}")

    n = batch_index - 1
    base = len(ALPHABET)
    digits: list[str] = []
    while n:
        n, rem = divmod(n, base)
        digits.append(ALPHABET[rem])
    label = "".join(reversed(digits)).rjust(WIDTH, ALPHABET[0])
    return "-".join(label[i : i + GROUP] for i in range(0, WIDTH, GROUP))
