"""Unit tests for search and label operations on the typed v2 API."""

from urllib.parse import quote

import pytest
from fixtures.confluence_mocks import (
    MOCK_GENERIC_SEARCH_RESPONSE,
    MOCK_V2_LABELS_RESPONSE,
)

from mcp_confluence.exceptions import ConfluenceError, ConfluenceErrorCode


class TestV2Search:
    def test_search_uses_generic_cql_endpoint(self, v2_fetcher):
        v2_fetcher.confluence.get.return_value = MOCK_GENERIC_SEARCH_RESPONSE

        result = v2_fetcher.search_content("typed", limit=25, start=0)

        v2_fetcher.confluence.get.assert_called_once_with(
            "rest/api/search",
            params={"cql": 'text ~ "typed"', "limit": 25, "start": 0},
        )
        first, second = result.results
        assert first.content.id == "98765"
        assert first.content.space_id == "65537"
        assert (
            first.url
            == "https://example.atlassian.net/wiki/spaces/TEST/pages/98765/Typed+Page"
        )
        assert first.last_modified == "2024-03-02T12:00:00.000Z"
        assert first.excerpt == "A @@@hl@@@typed@@@endhl@@@ page"
        assert second.excerpt == ""
        assert result.links == {"base": "https://example.atlassian.net/wiki/api/v2"}

    def test_search_failure(self, v2_fetcher, http_error):
        v2_fetcher.confluence.get.side_effect = http_error(400, {"message": "bad"})

        with pytest.raises(ConfluenceError) as excinfo:
            v2_fetcher.search_content("type = ???")

        assert excinfo.value.code is ConfluenceErrorCode.SEARCH_FAILED


class TestV2Labels:
    def test_get_page_labels(self, v2_fetcher):
        v2_fetcher.confluence.get.return_value = MOCK_V2_LABELS_RESPONSE

        result = v2_fetcher.get_page_labels("98765")

        v2_fetcher.confluence.get.assert_called_once_with("api/v2/pages/98765/labels")
        assert [label.name for label in result.results] == ["release", "draft"]
        assert result.links == {}

    def test_add_page_label(self, v2_fetcher):
        v2_fetcher.confluence.post.return_value = {
            "id": "1003",
            "name": "urgent",
            "prefix": "global",
        }

        label = v2_fetcher.add_page_label("98765", "urgent")

        v2_fetcher.confluence.post.assert_called_once_with(
            "api/v2/pages/98765/labels", data={"name": "urgent"}
        )
        assert label.id == "1003"

    def test_add_page_label_list_response(self, v2_fetcher):
        v2_fetcher.confluence.post.return_value = {
            "results": [{"id": "1003", "name": "urgent"}]
        }

        assert v2_fetcher.add_page_label("98765", "urgent").name == "urgent"

    def test_add_page_label_picks_requested_label(self, v2_fetcher):
        v2_fetcher.confluence.post.return_value = {
            "results": [
                {"id": "1001", "name": "alpha"},
                {"id": "1003", "name": "zeta"},
            ]
        }

        label = v2_fetcher.add_page_label("98765", "zeta")

        assert label.id == "1003"
        assert label.name == "zeta"

    def test_add_duplicate_label(self, v2_fetcher, http_error):
        v2_fetcher.confluence.post.side_effect = http_error(
            409, {"errors": [{"title": "Label already exists"}]}
        )

        with pytest.raises(ConfluenceError) as excinfo:
            v2_fetcher.add_page_label("98765", "urgent")

        assert excinfo.value.code is ConfluenceErrorCode.LABEL_EXISTS

    def test_remove_page_label_escapes_name(self, v2_fetcher):
        v2_fetcher.remove_page_label("98765", "team/a b")

        v2_fetcher.confluence.delete.assert_called_once_with(
            f"api/v2/pages/98765/labels/{quote('team/a b', safe='')}"
        )

    def test_remove_missing_label(self, v2_fetcher, http_error):
        v2_fetcher.confluence.delete.side_effect = http_error(
            404, {"errors": [{"title": "Label not found"}]}
        )

        with pytest.raises(ConfluenceError) as excinfo:
            v2_fetcher.remove_page_label("98765", "urgent")

        assert excinfo.value.code is ConfluenceErrorCode.LABEL_NOT_FOUND

    def test_remove_label_missing_page(self, v2_fetcher, http_error):
        v2_fetcher.confluence.delete.side_effect = http_error(
            404, {"errors": [{"title": "Not Found"}]}
        )

        with pytest.raises(ConfluenceError) as excinfo:
            v2_fetcher.remove_page_label("98765", "urgent")

        assert excinfo.value.code is ConfluenceErrorCode.PAGE_NOT_FOUND
