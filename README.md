# kmapsimplify

Simplify Boolean functions of two, three or four inputs by grouping their
ones on a Karnaugh map.

The function is given as a single string: the inputs in parentheses, then
the term indices. If the string contains `sum`, the numbers are the
minterms (outputs that are 1); otherwise they are the maxterms (outputs
that are 0). The number of inputs is the number of commas before the first
`)` plus one. Every number in the string is read as a term index, except
one that starts at the very first character. A term index too large for
the number of inputs is an error.

## Installation

```
pip install .
```

## Command line

```
kmapsimplify "f(a,b) = sum(1,3)"
```

The command prints:

- the map, drawn as text (rows and columns in Gray-code order);
- every non-empty list of groups it found: the essential prime implicant
  groups of eight, four and two first, then the remaining groups of eight,
  four and two, then single bits, each group as its `(row,col)` cells;
- the simplified sum-of-products expression, using the variable names
  `a`, `b`, `c`, `d` and `'` for a complement. For the example above the
  last line is:

```
Simplified Function: b
```

Exactly one argument is expected. With any other number of arguments, an
input count other than 2, 3 or 4, or a term index out of range, an error
message is written to standard error and the command exits with status 1.

## Library

```python
from kmapsimplify.cli import simplify

print(simplify("f(a,b) = sum(1,3)"))
```

`simplify` returns the same report the command prints and raises
`ValueError` for an unsupported input count or an out-of-range term.

The building blocks are available on their own as well:

- `kmapsimplify.parsing` — `get_input_size` and `get_output_values` read
  the function string.
- `kmapsimplify.kmap` — `KMap.from_outputs` lays the outputs on a map in
  Gray-code order; `KMap.is_candidate` and `KMap.select` track which cells
  are already covered; `KMap.render` draws the map.
- `kmapsimplify.groups` — `GroupList`, an ordered list of groups of
  `(row, col)` points, with `add`, `remove`, `clear` and `format`;
  `format_group` renders a single group.
- `kmapsimplify.search` — `find_single_bits`, `find_groups_of_two` and
  `find_groups_of_four`.
- `kmapsimplify.eights` — `find_groups_of_eight`.
- `kmapsimplify.epi` — `locate_epi`, `remove_doubles` and
  `select_epi_bits` pick out the essential prime implicant groups.
- `kmapsimplify.expression` — `product_of_two`, `product_of_three` and
  `product_of_four` turn one group into a product term;
  `simplified_function` joins the terms of all groups into the final
  expression.

## Limitations

- Only functions of two, three or four inputs are handled.
- There is no notation for don't-care terms.
- The expression is always given as a sum of products, built from the
  groups the fixed search patterns find; it is not guaranteed to be the
  minimal form.

## Tests

```
pip install .[test]
pytest
```