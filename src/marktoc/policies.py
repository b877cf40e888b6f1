"""Table cell role policies.

A policy decides whether a table cell renders as a header cell (``<th>``) or a
data cell (``<td>``). Policies are plain callables registered by name so they
can be selected from configuration files and the command line.

Available Policies:
- any-right-aligned: every cell of a table is a header cell when any column of
  that table is right-aligned. This is the historical behavior and the default.
- head-row: cells inside the table head are header cells, all others are data
  cells.

Example:
    >>> from marktoc.events import Alignment
    >>> policy = get_cell_role_policy("head-row")
    >>> policy((Alignment.LEFT,), 0, True)
    True
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from marktoc.events import Alignment

CellRolePolicy = Callable[[Sequence[Alignment] | None, int, bool], bool]
"""(table alignments or None outside a table, column index, in table head) -> is header"""


def any_right_aligned(
    alignments: Sequence[Alignment] | None, column: int, in_head: bool
) -> bool:
    """Header iff any column of the current table is right-aligned.

    Applied uniformly to every cell, regardless of column or row.
    """
    if alignments is None:
        return False
    return any(a is Alignment.RIGHT for a in alignments)


def head_row(alignments: Sequence[Alignment] | None, column: int, in_head: bool) -> bool:
    """Header iff the cell sits inside the table head."""
    return in_head


CELL_ROLE_POLICIES: dict[str, CellRolePolicy] = {
    "any-right-aligned": any_right_aligned,
    "head-row": head_row,
}

DEFAULT_CELL_ROLE = "any-right-aligned"


def get_cell_role_policy(name: str) -> CellRolePolicy:
    """Look up a registered policy.

    Raises:
        KeyError: If no policy is registered under ``name``
    """
    return CELL_ROLE_POLICIES[name]


__all__ = [
    "CELL_ROLE_POLICIES",
    "CellRolePolicy",
    "DEFAULT_CELL_ROLE",
    "any_right_aligned",
    "get_cell_role_policy",
    "head_row",
]
