# logicreduce

logicreduce reads a propositional logic expression and builds an expression
tree from it. It then simplifies the tree in place. The simplification uses a
fixed set of rewriting rules:

- the idempotent law (`p & p`, `p | p`)
- the complementary law (`p & ! p`, `p | ! p`)
- the absorption law (`p & ( p | q )`)
- the identity and domination laws for the constants true and false
- double-negation elimination
- rewriting `a > b` as `! a | b` and `a ~ b` as `( a > b ) & ( b > a )`

## Expression syntax

Each character that is not a space is one token. Spaces between tokens are
optional.

| Token           | Meaning            |
|-----------------|--------------------|
| `!`             | negation           |
| `&`             | conjunction        |
| `\|`            | disjunction        |
| `>`             | implication        |
| `~`             | biconditional      |
| `(` `)`         | grouping           |
| any other char  | a one-letter variable |

Operators are placed by binding strength. `&` binds most tightly, followed by
`|`, then `>`, then `~`. Parentheses may be nested at most 10 deep.

A malformed expression makes `create_tree` raise `ParseError`, which is a
subclass of `ValueError`. Examples of malformed input are a missing operand,
two operands with no operator between them, or unbalanced parentheses.

The result is written fully parenthesised, for example `( p & q )`. The
constant true is written `T` and the constant false is written `F`.

## Command line

Pass a single expression to simplify it:

```
logicreduce "( ( p > q ) & ( q > r ) ) > ( p > r )"
```

The command prints the tree before and after reduction. It then says whether
anything was reduced. The last line holds the result, which here is `≡ T`.
If the expression cannot be parsed or reduced, the command writes an error
to standard error and exits with status 1.

Run the command with no argument, or with more than one argument, to go
through the built-in example expressions:

```
logicreduce
```

For each example, the command prints both trees, the result and the expected
result. It then reports `SUCCESS` or `ERROR`. If an example raises an
exception, the command reports it and moves on to the next example.

## Library use

```python
from logicreduce.cli import simplify

simplify("p & ! ( p | ! q )")      # 'F'
simplify("! ! p")                  # 'p'
simplify("p > ( q ~ p )")          # '( p > q )'
```

`simplify` needs at least one operator in the expression. A lone variable
such as `"p"` raises `ValueError`.

You can also work with the tree directly:

```python
import sys

from logicreduce.expr_parser import create_tree
from logicreduce.solve import reduce_tree
from logicreduce.node import tree_to_string
from logicreduce.display import treeprint, format_tree

root = create_tree("( p & ( q | r ) ) | p")
print(format_tree(root))
changed = reduce_tree(root)        # True if any rule was applied
treeprint(root, sys.stdout)
print(tree_to_string(root))        # 'p'
```

`format_tree` lists one node per line. Each line gives the node's type
number, followed by either its variable or its type name. `create_tree("p & q")`
gives:

```
6(TRUE)
|>2(AND)
 |>0(p)
 |>0(q)
```

The tree is made of `Node` objects with `type`, `value`, `parent`, `left` and
`right` fields. The `type` field holds a `NodeType` member. The root of every
tree is an `OPEN` node, and the expression hangs from its `left` field.

`logicreduce.display.run_case(expression, expected)` reduces one expression
and prints a report of each step. It returns whether the result matched the
expected string.

## Limitations

The reducer applies its rules in a single pass over the tree. It does not
build truth tables, and it does not look for a canonical or minimal form.
Because of this, two equivalent expressions can reduce to different strings,
and some simplifiable expressions are left partly unreduced.

## Tests

```
pip install -e ".[test]"
pytest
```