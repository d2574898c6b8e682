# demoapps

Small, self-contained application models in plain Python. Each module holds
the state and logic of one little app with no user interface attached, so it
can be driven from code, from tests or, for the calculator, from a terminal.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

### `demoapps.calculator`

`calc_val(val)` evaluates a calculator expression such as `"12+3*2"` strictly
from left to right, with no operator precedence. A leading `-` belongs to the
first number, and when operators follow one another the last one typed is
used. Division by zero gives an infinity or NaN. An empty expression or a
malformed number raises `ValueError`.

`main(argv=None)` is the command-line entry point described below.

### `demoapps.calculator_state`

`Calculator` keeps the display text, a pending `Operator` (`ADD`, `SUB`,
`MUL`, `DIV`), whether it is waiting for a new operand, and the stored value.
Its methods are `input_digit`, `input_dot`, `toggle_sign`, `toggle_percent`,
`backspace`, `clear_display`, `set_operator`, `perform_operation`,
`handle_key` (accepts `"Backspace"`, a digit or `+ - * /`) and
`formatted_display`, which adds thousands separators to the integer part.

```python
from demoapps.calculator_state import Calculator, Operator

calc = Calculator()
calc.input_digit(1)
calc.input_digit(2)
calc.set_operator(Operator.ADD)
calc.input_digit(3)
calc.perform_operation()
print(calc.formatted_display())  # 15
```

### `demoapps.clock`

`format_elapsed(millis)` renders elapsed milliseconds as `MM:SS:mmm`, the
minutes wrapping every hour: `format_elapsed(61234)` is `"01:01:234"`.

### `demoapps.shop`

Data classes for a store JSON API: `Product`, `Rating`, `Cart`,
`ProductInCart`, `User` and `FullName`, each with a validating `from_dict`.
`str(rating)` draws five stars followed by the score and vote count, and
`Product.price_label()` gives text such as `$9.5`. `Sort` (`asc`/`desc`) and
`Size` (with case-insensitive `Size.parse`) enumerate listing orders and
sizes.

`fetch_product`, `fetch_products(count, sort)`, `fetch_user` and
`fetch_user_carts` call the API with `requests`;
`User.fetch_most_recent_cart()` picks the latest cart and
`Cart.update_database()` replaces a cart with the server's copy.

### `demoapps.explorer`

`FileExplorer(path=None)` starts in `path` or the current directory and lists
its entries in `path_names`. `enter_dir(index)`, `go_up()` and
`reload_path_list()` move around. Failures such as an unreadable directory or
going up from the root are stored in `err` rather than raised; `clear_err()`
resets it. `current()` returns the current directory as text.

### `demoapps.hackernews`

`StoryItem`, `CommentData` and `StoryPageData` parse Hacker News items,
filling in defaults for missing optional fields. `PreviewState.parse` reads a
story id from text. `StoryListing.from_item` prepares the text for one line of
a story list: hostname without scheme or `www.`, score, comment count and
time. `get_story`, `get_comment` and `get_top_stories(limit=30)` fetch from
the public API with `requests`.

### `demoapps.dogs`

`DogStore(path="hotdogdb/hotdog.db")` is an SQLite table of saved picture
URLs. `save_dog(url)` stores one (a failed insert is ignored),
`list_dogs()` returns the ten newest as `(id, url)` pairs, `remove_dog(id)`
deletes one, and `close()` or a `with` block closes the database. The
directory holding the database file must already exist.

### `demoapps.ui_state`

`EventLog(capacity=20)` keeps the most recent events, oldest first.
`Counters` holds a list of integers (three zeros by default) with `add`,
`remove_last`, `increment`, `decrement`, `set`, `remove` and `total`; bad
indexes raise `IndexError`. `Theme` is `LIGHT` or `DARK`, and
`Theme.stylesheet()` gives its CSS class name.

## Command line

```
demoapps-calc "2+3*4"
```

prints `20`, the value of the expression evaluated from left to right. With
no arguments it reads one expression per line from standard input. Invalid
expressions are reported on standard error and the exit status is 1.

## What this package does not do

There are no screens, windows or web pages: the modules provide state and
logic only. The clock formats a duration but does not run a timer. The dog
store is local storage only and offers no HTTP endpoints, and the API clients
make plain blocking requests without caching.