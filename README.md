# rpnplot

Draw the graph of a function of `x` in your terminal.

You type an expression such as `sin(x) * 3`. rpnplot splits it into tokens
and puts them in postfix (reverse Polish) order with the shunting-yard
algorithm. It then works out the value at points across the domain you
choose and draws the result as a grid of characters.

## Installation

```
pip install .
```

The interactive command needs a POSIX terminal. It uses `termios` for
single-key input.

## Running

```
rpnplot
```

rpnplot first asks for the function. It then asks for the field:

- width and height
- the centre of coordinates (`x`, `y`)
- the domain `[n, m]`
- the codomain `[k, l]`

After that it shows a menu with the graph below it. The screen is redrawn
after every key press.

### Expressions

- unsigned numbers: `5`, `2.5`. There is no unary minus, so write `0 - 5`.
- the variable `x`
- binary operators: `+ - * /`. `*` and `/` bind tighter than `+` and `-`.
- functions: `sin cos tan ctg sqrt ln`
- parentheses: `( )`

Spaces are ignored. A function must be followed by its argument: a number,
`x`, another function or an opening parenthesis. For example:
`sqrt(cos x + 5)`.

### Keys

| Key | SELECT mode | EDIT mode |
|-----|-------------|-----------|
| `q` | quit | quit |
| `m` | switch mode; on the Function line, first ask for a new function | switch mode |
| `w` `d` / `k` `l` | move the selection up | increase the value |
| `s` `a` / `j` `h` | move the selection down | decrease the value |

The selection wraps around at the top and at the bottom of the list.

Domain, codomain and centre each hold two values. In EDIT mode on these
lines:

- `d`/`a` (`l`/`h`) change the first value.
- `w`/`s` (`k`/`j`) change the second value.

The graph uses these characters:

| Character | Meaning |
|-----------|---------|
| `*` | a point of the function |
| `o` | an axis |
| `>` | the right end of the horizontal axis |
| `^` | the top of the vertical axis |
| `.` | an empty cell |

Some points have no value at all, such as `ln` of a negative number. They
are left out of the graph.

If something goes wrong, the session ends with a short message and exit
status 1. That happens when:

- the function is malformed;
- a number typed at a prompt is not valid;
- an edit leaves the field with a width or height of zero or less;
- an edit leaves a domain or codomain whose start is greater than its end.

## Using it as a library

```python
from rpnplot.parser import strip_spaces, tokenize
from rpnplot.shunting_yard import to_postfix
from rpnplot.calculation import evaluate_postfix
from rpnplot.field import FieldInfo, generate_field, format_field

postfix = to_postfix(tokenize(strip_spaces("sqrt(x * x + 9)")))
print(evaluate_postfix(postfix, 4))   # 5.0

info = FieldInfo(width=40, height=20, domain=(-10, 10),
                 codomain=(-5, 5), center=(20, 10))
print(format_field(generate_field(postfix, info)))
```

These are the modules:

- `rpnplot.token`: `Token` and `TokenId`.
- `rpnplot.parser`: reads text into tokens.
  - `tokenize` splits an expression into tokens.
  - `convert_to_float` converts a number string.
- `rpnplot.shunting_yard`: `to_postfix`.
- `rpnplot.calculation`: `evaluate_postfix`, `apply_function` and
  `apply_binary_operator`.
- `rpnplot.field`: builds and prints fields.
  - `FieldInfo` describes a field.
  - `validate_field_info` checks a field description.
  - `empty_field` and `generate_field` build fields.
  - `format_field` and `render_field` turn a field into text.
- `rpnplot.menu`: the interactive `Menu` and the command's `main`.

### Errors

All errors live in `rpnplot.errors`:

- `InvalidFunctionError` is raised for a malformed expression. Its
  `err_type` is a `FunctionErrorType`.
- `InvalidFieldInfoError` is raised for field settings that cannot be
  plotted. Its `err_type` is a `FieldErrorType`.
- `TypeConversionError` is raised for text that is not a number.
- `DomainError` is raised for a value outside the domain of a function or
  operator, such as division by zero.

`rpnplot.messages.error_message` turns the first three into text a user can
read. It returns `None` for other errors.