# primer

A small collection of plain Python building blocks:

- `primer.calculator` — arithmetic on floats, with errors raised for
  division by zero and square roots of negative numbers.
- `primer.bookstore` — books, categories and a catalogue keyed by book ID.
- `primer.creditcard` — a card value that refuses an empty number.
- `primer.mytypes` — a handful of small custom types around `int`, `str`
  and a string builder.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Calculator

```python
from primer.calculator import add, subtract, multiply, divide, sqrt
from primer.calculator import add_many, subtract_many, multiply_many, divide_many

add(2, 2)                 # 4.0
subtract(5, -4)           # 9.0
multiply(-1, -1)          # 1.0
divide(10, 2)             # 5.0
sqrt(25)                  # 5.0

add_many(1, 2, 3)         # 6.0
subtract_many(1, 2, 3)    # -4.0
multiply_many(1, 2, 3, 4) # 24.0
divide_many(100, 5, 2)    # 10.0
```

`divide` and `divide_many` raise an error when asked to divide by zero, and
`sqrt` raises one for a negative input. The `*_many` functions return `0`
when called with no arguments.

## Bookstore

`primer.bookstore` provides `Book`, `Category` and `Catalog`.

- `buy(book)` returns the book with one copy fewer, and raises
  `OutOfStockError` when no copies are left.
- `Book.net_price_cents()` gives the price after the book's percentage
  discount.
- `Catalog.get_all_books()` lists every book in the catalogue, and
  `Catalog.get_book(book_id)` looks one up, raising `BookNotFoundError` for
  an unknown ID.

Setting a negative price or a category that is not one of the `Category`
members is rejected with an error.

## Credit cards

`primer.creditcard.Card` holds a card number and cannot be created with an
empty one.

## Custom types

`primer.mytypes` offers:

- `MyInt` with `twice()` and `doubled()`,
- `MyString` with `length()`,
- `MyBuilder`, a string builder whose `hello()` greets gophers,
- `StringUppercaser` with `to_upper()`,
- `double(value)`, which returns twice its argument.

## Command line

```
primer-calculator
```

prints the sum of 2 and 2.