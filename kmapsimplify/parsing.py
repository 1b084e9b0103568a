"""Reading a boolean function written as a string.

Functions look like ``f(a,b,c) = sum(1,3,5)`` (minterms) or
``f(a,b) = prod(0,2)`` (maxterms).
"""

from __future__ import annotations

import re

_NUMBER = re.compile(r"[0-9]+")


def get_input_size(function: str) -> int:
    """Return the number of inputs named before the first ``)``."""
    end = function.find(")")
    if end < 0:
        raise ValueError("function has no closing parenthesis")
    return function.count(",", 0, end) + 1


def get_output_values(function: str, output_size: int) -> list[int]:
    """Return the truth-table outputs, one 0 or 1 per input combination.

    A function containing ``sum`` lists the indices that are 1; any other
    lists the indices that are 0. A number at the very start of the string
    is not read.
    """
    is_sum = "sum" in function
    outputs = [0 if is_sum else 1] * output_size
    mark = 1 if is_sum else 0
    for match in _NUMBER.finditer(function):
        if match.start() == 0:
            continue
        index = int(match.group())
        if index >= output_size:
            raise ValueError(
                f"term {index} is out of range for {output_size} outputs"
            )
        outputs[index] = mark
    return outputs