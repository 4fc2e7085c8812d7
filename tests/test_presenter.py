import pytest

from hotel_search.core.errors import FormattingError, ValidationError
from hotel_search.etl import presenter
from hotel_search.models import HotelRecord, OrderBy, PageResult


def _records(count):
    return [HotelRecord(f"Hotel {i}", float(i), 10.0 * i) for i in range(count)]


def test_paginate_first_page():
    result = presenter.paginate(0, 15, _records(40))

    assert result.page == 1
    assert result.total_pages == 3
    assert [r.hotel for r in result.items] == [f"Hotel {i}" for i in range(15)]


def test_paginate_defaults_limit_to_twenty():
    result = presenter.paginate(0, None, _records(45))
    assert len(result.items) == 20
    assert result.total_pages == 3


@pytest.mark.parametrize("page, expected", [(-5, 1), (None, 1), (2, 3), (99, 3)])
def test_paginate_clamps_page(page, expected):
    result = presenter.paginate(page, 10, _records(25))
    assert result.page == expected
    assert 1 <= result.page <= result.total_pages


def test_paginate_last_page_is_partial():
    result = presenter.paginate(2, 10, _records(25))
    assert [r.hotel for r in result.items] == ["Hotel 20", "Hotel 21", "Hotel 22", "Hotel 23", "Hotel 24"]


@pytest.mark.parametrize("count, limit", [(0, 5), (1, 5), (10, 5), (11, 5), (7, 20)])
def test_pages_concatenate_to_data(count, limit):
    data = _records(count)
    first = presenter.paginate(0, limit, data)
    pages = [presenter.paginate(index, limit, data) for index in range(first.total_pages)]

    assert [r for page in pages for r in page.items] == data


def test_paginate_empty_dataset_reports_one_page():
    result = presenter.paginate(3, 15, [])
    assert result == PageResult(page=1, total_pages=1, items=())


@pytest.mark.parametrize("limit", [0, -1])
def test_paginate_rejects_non_positive_limit(limit):
    with pytest.raises(ValidationError):
        presenter.paginate(0, limit, _records(3))


def test_present_structured_shape():
    result = PageResult(page=1, total_pages=1, items=(HotelRecord("Hotel B", 1.45, 80.0),))

    payload = presenter.present_structured(OrderBy.price_per_night, result)

    assert payload == {
        "orderby": "price_per_night",
        "page": 1,
        "pages": 1,
        "data": [{"hotel": "Hotel B", "km": 1.45, "price": 80.0}],
    }


def test_format_currency_without_symbol_appends_code():
    assert presenter.format_currency(80.0) == "80,00 EUR"
    assert presenter.format_currency(1234.5) == "1.234,50 EUR"


def test_format_currency_with_symbol_has_no_suffix():
    formatted = presenter.format_currency(80.0, show_symbol=True)
    assert "€" in formatted
    assert not formatted.endswith("EUR")


def test_format_currency_unknown_locale():
    with pytest.raises(FormattingError, match="Formatter error"):
        presenter.format_currency(10.0, locale="xx_ZZ")


def test_present_inline():
    records = [HotelRecord("Hotel B", 1.45, 80.0), HotelRecord("Hotel A", 0.4, 100.0)]

    text = presenter.present_inline(records)

    assert text == " • Hotel B, 1.45 KM, 80,00 EUR • Hotel A, 0.4 KM, 100,00 EUR"
