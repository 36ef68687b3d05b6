import pytest

from primer.bookstore import (
    Book,
    BookNotFoundError,
    Catalog,
    Category,
    OutOfStockError,
    buy,
)


@pytest.fixture
def catalog():
    return Catalog(
        {
            1: Book(id=1, title="For the Love of Go"),
            2: Book(id=2, title="The Power of Go: Tools"),
        }
    )


def test_buy():
    b = Book(title="Spark Joy", author="Marie Kondō", copies=2)
    result = buy(b)
    assert result.copies == 1
    assert b.copies == 2
    assert result.title == "Spark Joy"


def test_buy_errors_if_no_copies_left():
    b = Book(title="Spark Joy", author="Marie Kondō", copies=0)
    with pytest.raises(OutOfStockError, match="no copies left"):
        buy(b)


def test_get_all_books(catalog):
    got = sorted(catalog.get_all_books(), key=lambda b: b.id)
    assert got == [
        Book(id=1, title="For the Love of Go"),
        Book(id=2, title="The Power of Go: Tools"),
    ]


def test_get_book(catalog):
    assert catalog.get_book(2) == Book(id=2, title="The Power of Go: Tools")


def test_get_book_first_entry(catalog):
    assert catalog.get_book(1) == Book(id=1, title="For the Love of Go")


def test_get_book_bad_id_raises():
    with pytest.raises(BookNotFoundError, match="ID 999 doesn't exist"):
        Catalog().get_book(999)


def test_net_price_cents():
    b = Book(title="For the Love of Go", price_cents=4000, discount_percent=25)
    assert b.net_price_cents() == 3000


def test_set_price_cents():
    b = Book(title="For the Love of Go", price_cents=4000)
    b.price_cents = 3000
    assert b.price_cents == 3000


def test_set_price_cents_invalid():
    b = Book(title="For the Love of Go", price_cents=4000)
    with pytest.raises(ValueError, match="bad price -1"):
        b.price_cents = -1
    assert b.price_cents == 4000


def test_negative_price_rejected_at_construction():
    with pytest.raises(ValueError):
        Book(title="For the Love of Go", price_cents=-1)


@pytest.mark.parametrize(
    "category",
    [
        Category.AUTOBIOGRAPHY,
        Category.LARGE_PRINT_ROMANCE,
        Category.PARTICLE_PHYSICS,
    ],
)
def test_set_category(category):
    b = Book(title="For the Love of Go")
    b.category = category
    assert b.category == category


def test_set_category_invalid():
    b = Book(title="For the Love of Go")
    with pytest.raises(ValueError, match="unknown category 999"):
        b.category = 999
    assert b.category == Category.AUTOBIOGRAPHY