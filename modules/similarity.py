# SPDX-FileCopyrightText: 2018-2025 Joonas Rautiola <mail@joinemm.dev>
# SPDX-License-Identifier: MPL-2.0
# https://git.joinemm.dev/miso-bot


def distance(source: str | None, target: str | None) -> int:
    """Levenshtein distance between two strings.

    Missing or empty input gives 0, and two equal strings give their length
    instead of 0. Only `similarity` relies on this function and it handles
    both cases before calling it.
    """
    if not source or not target:
        return 0

    if source == target:
        return len(source)

    rows = len(source) + 1
    columns = len(target) + 1

    matrix = [[0] * columns for _ in range(rows)]
    for i in range(rows):
        matrix[i][0] = i
    for j in range(columns):
        matrix[0][j] = j

    for i in range(1, rows):
        for j in range(1, columns):
            cost = 0 if source[i - 1] == target[j - 1] else 1
            matrix[i][j] = min(
                matrix[i - 1][j] + 1,
                matrix[i][j - 1] + 1,
                matrix[i - 1][j - 1] + cost,
            )

    return matrix[-1][-1]


def similarity(source: str | None, target: str | None) -> float:
    """Likeness of two strings in the range [0, 1], 1 being identical"""
    if not source or not target:
        return 0.0

    if source == target:
        return 1.0

    return 1.0 - distance(source, target) / max(len(source), len(target))
