"""Command-line entry point: simplify a boolean function with a Karnaugh map."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .eights import find_groups_of_eight
from .epi import locate_epi
from .expression import simplified_function
from .groups import GroupList
from .kmap import KMap
from .parsing import get_input_size, get_output_values
from .search import find_groups_of_four, find_groups_of_two, find_single_bits

_SUPPORTED = (2, 3, 4)


def simplify(function: str) -> str:
    """Return the full report for ``function``.

    The report shows the map, every non-empty list of groups found
    (essential prime implicants first, largest groups first) and the
    simplified sum-of-products expression.
    """
    input_size = get_input_size(function)
    if input_size not in _SUPPORTED:
        raise ValueError(f"input size {input_size} is invalid (use 2, 3 or 4)")

    outputs = get_output_values(function, 2**input_size)
    kmap = KMap.from_outputs(outputs, input_size)

    singles = GroupList()
    twos, fours, eights = GroupList(), GroupList(), GroupList()
    epi_twos, epi_fours, epi_eights = GroupList(), GroupList(), GroupList()

    # Essential prime implicants, largest shapes first.
    if input_size == 4:
        find_groups_of_eight(kmap, eights)
        locate_epi(kmap, epi_eights, eights)
    if input_size >= 3:
        find_groups_of_four(kmap, fours)
        locate_epi(kmap, epi_fours, fours)
    find_groups_of_two(kmap, twos)
    locate_epi(kmap, epi_twos, twos)

    # Prime implicants covering whatever is left.
    kmap.search_for_epi = False
    if input_size == 4:
        find_groups_of_eight(kmap, eights)
    if input_size >= 3:
        find_groups_of_four(kmap, fours)
    find_groups_of_two(kmap, twos)
    find_single_bits(kmap, singles)

    ordered = [
        (epi_eights, 8),
        (epi_fours, 4),
        (epi_twos, 2),
        (eights, 8),
        (fours, 4),
        (twos, 2),
        (singles, 1),
    ]
    parts = [kmap.render()]
    parts.extend(groups.format(size) for groups, size in ordered if len(groups) > 0)
    expression = simplified_function([groups for groups, _ in ordered], input_size)
    parts.append(f"Simplified Function: {expression}\n\n")
    return "".join(parts)


def main(argv: Sequence[str] | None = None) -> int:
    """Print the report for the single function given on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(
            f"ERROR: WRONG NUMBER OF ARGS.\nARG SIZE: {len(args) + 1}",
            file=sys.stderr,
        )
        return 1
    try:
        report = simplify(args[0])
    except ValueError as error:
        print(f"ERROR: {error}", file=sys.stderr)
        return 1
    print(report, end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())