import pytest

from searchserver.document import Document
from searchserver.paginator import Page, Paginator, paginate


def test_page_sizes():
    pages = list(paginate(range(7), 3))
    assert [len(p) for p in pages] == [3, 3, 1]


def test_pages_concatenate_to_input():
    data = list(range(10))
    flattened = [x for page in paginate(data, 4) for x in page]
    assert flattened == data


def test_exact_division():
    assert len(Paginator([1, 2, 3, 4], 2)) == 2


def test_empty_container_has_no_pages():
    assert len(paginate([], 3)) == 0


def test_page_larger_than_input():
    pages = list(paginate("abc", 10))
    assert len(pages) == 1
    assert list(pages[0]) == ["a", "b", "c"]


def test_page_str_concatenates():
    page = Page([Document(1, 0.5, 2), Document(2, 0.5, 3)])
    assert str(page) == str(Document(1, 0.5, 2)) + str(Document(2, 0.5, 3))


@pytest.mark.parametrize("size", [0, -1])
def test_non_positive_page_size_raises(size):
    with pytest.raises(ValueError):
        paginate([1, 2], size)