from typing import List

import pytest

from fifteen.domains.board import Board


def is_solvable(rows: List[List[int]]) -> bool:
    """Parity rules:
       - d odd: inversions must be even
       - d even: (inversions + blank_row_from_bottom) must be ODD
         (row count is 1-based from the bottom)
    """
    d = len(rows)
    flat = [v for row in rows for v in row]
    arr = [x for x in flat if x != 0]
    inv = 0
    for i in range(len(arr)):
        for j in range(i + 1, len(arr)):
            if arr[i] > arr[j]:
                inv += 1
    if d % 2 == 1:
        return (inv % 2) == 0
    blank_row_from_bottom = d - flat.index(0) // d
    return ((inv + blank_row_from_bottom) % 2) == 1


@pytest.fixture
def solved3() -> Board:
    return Board([[1, 2, 3], [4, 5, 6], [7, 8, 0]])
