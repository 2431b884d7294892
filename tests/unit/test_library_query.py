import pytest

from contentdesk.components.library import author_labels, query
from contentdesk.domain.entities import ContentItem, ContentStatus, ContentType


@pytest.fixture
def library():
    return [
        ContentItem(type=ContentType.ARTICLE, title="Spring Trends", status=ContentStatus.APPROVED, author_id="user-1"),
        ContentItem(type=ContentType.PRODUCT, title="Garden Hose", status=ContentStatus.APPROVED, author_id="user-3"),
        ContentItem(type=ContentType.ARTICLE, title="Winter Recap", status=ContentStatus.DRAFT, author_id="user-1"),
        ContentItem(type=ContentType.ARTICLE, title="Autumn Notes", status=ContentStatus.APPROVED, author_id="ghost"),
    ]


def test_type_and_status_filter_keeps_order(library):
    result = query(library, "article", "approved", "")
    assert result == [library[0], library[3]]


def test_enum_filters(library):
    assert query(library, ContentType.PRODUCT, ContentStatus.APPROVED) == [library[1]]


def test_all_matches_everything(library):
    assert query(library) == library


def test_search_title_case_insensitive(library):
    assert query(library, search_text="WINTER") == [library[2]]


def test_search_author_email_and_name(library, directory):
    by_email = query(library, search_text="other@", resolve_user=directory.resolve_user)
    by_name = query(library, search_text="wren", resolve_user=directory.resolve_user)

    assert by_email == [library[1]]
    assert by_name == [library[0], library[2]]


def test_unknown_author_placeholder(library, directory):
    result = query(library, search_text="unknown", resolve_user=directory.resolve_user)
    assert result == [library[3]]


def test_search_is_not_trimmed(library):
    assert query(library, search_text=" spring") == []


def test_query_is_pure_and_idempotent(library, directory):
    snapshot = list(library)
    first = query(library, "article", "all", "e", resolve_user=directory.resolve_user)
    second = query(library, "article", "all", "e", resolve_user=directory.resolve_user)

    assert first == second
    assert library == snapshot


def test_author_labels(writer):
    assert author_labels(writer) == ["writer@example.com", "Wren Writer"]
    assert author_labels(None, "nobody") == ["nobody"]
