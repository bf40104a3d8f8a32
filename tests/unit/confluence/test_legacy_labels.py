"""Unit tests for label operations on the legacy API."""

import pytest
from fixtures.confluence_mocks import MOCK_LABELS_RESPONSE

from mcp_confluence.exceptions import ConfluenceError, ConfluenceErrorCode


class TestLegacyLabels:
    def test_get_page_labels(self, legacy_fetcher):
        legacy_fetcher.confluence.get.return_value = MOCK_LABELS_RESPONSE

        result = legacy_fetcher.get_page_labels("987654321")

        legacy_fetcher.confluence.get.assert_called_once_with(
            "rest/api/content/987654321/label"
        )
        assert result.size == 3
        assert result.results[0].name == "meeting-notes"
        assert result.results[1].prefix == "my"
        assert result.results[2].id == "456789125"

    def test_get_page_labels_missing_page(self, legacy_fetcher, http_error):
        legacy_fetcher.confluence.get.side_effect = http_error(404, {})

        with pytest.raises(ConfluenceError) as excinfo:
            legacy_fetcher.get_page_labels("1")

        assert excinfo.value.code is ConfluenceErrorCode.PAGE_NOT_FOUND

    def test_add_page_label(self, legacy_fetcher):
        legacy_fetcher.confluence.post.return_value = {
            "results": [{"prefix": "global", "name": "urgent", "id": "77"}],
            "size": 1,
        }

        label = legacy_fetcher.add_page_label("987654321", "urgent")

        legacy_fetcher.confluence.post.assert_called_once_with(
            "rest/api/content/987654321/label",
            data=[{"prefix": "global", "name": "urgent"}],
        )
        assert label.id == "77"
        assert label.name == "urgent"

    def test_add_page_label_picks_requested_label(self, legacy_fetcher):
        legacy_fetcher.confluence.post.return_value = MOCK_LABELS_RESPONSE

        label = legacy_fetcher.add_page_label("987654321", "test")

        assert label.id == "456789125"
        assert label.name == "test"

    def test_add_page_label_absent_from_response(self, legacy_fetcher):
        legacy_fetcher.confluence.post.return_value = {"results": []}

        label = legacy_fetcher.add_page_label("987654321", "urgent")

        assert label.name == "urgent"
        assert label.id == "0"

    def test_add_duplicate_label(self, legacy_fetcher, http_error):
        legacy_fetcher.confluence.post.side_effect = http_error(
            400, {"message": "Content already has the label 'urgent'"}
        )

        with pytest.raises(ConfluenceError) as excinfo:
            legacy_fetcher.add_page_label("1", "urgent")

        assert excinfo.value.code is ConfluenceErrorCode.LABEL_EXISTS

    def test_add_label_missing_page(self, legacy_fetcher, http_error):
        legacy_fetcher.confluence.post.side_effect = http_error(404, {})

        with pytest.raises(ConfluenceError) as excinfo:
            legacy_fetcher.add_page_label("1", "urgent")

        assert excinfo.value.code is ConfluenceErrorCode.PAGE_NOT_FOUND

    def test_remove_page_label(self, legacy_fetcher):
        legacy_fetcher.confluence.delete.return_value = None

        assert legacy_fetcher.remove_page_label("987654321", "urgent") is None

        legacy_fetcher.confluence.delete.assert_called_once_with(
            "rest/api/content/987654321/label", params={"name": "urgent"}
        )

    def test_remove_missing_label(self, legacy_fetcher, http_error):
        legacy_fetcher.confluence.delete.side_effect = http_error(
            404, {"message": "The label 'urgent' does not exist on this content"}
        )

        with pytest.raises(ConfluenceError) as excinfo:
            legacy_fetcher.remove_page_label("1", "urgent")

        assert excinfo.value.code is ConfluenceErrorCode.LABEL_NOT_FOUND

    def test_remove_label_missing_page(self, legacy_fetcher, http_error):
        legacy_fetcher.confluence.delete.side_effect = http_error(
            404, {"message": "No content found with id 1"}
        )

        with pytest.raises(ConfluenceError) as excinfo:
            legacy_fetcher.remove_page_label("1", "urgent")

        assert excinfo.value.code is ConfluenceErrorCode.PAGE_NOT_FOUND
