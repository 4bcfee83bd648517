"""
Unit tests for DataMasker.
"""

import pytest

from modcatalog_client.utils.data_masker import DataMasker


class TestDataMasker:
    """Test cases for DataMasker."""

    @pytest.mark.parametrize(
        "field", ["x-api-key", "X-Api-Key", "apiKey", "api_key", "Authorization", "token"]
    )
    def test_sensitive_fields(self, field):
        assert DataMasker.is_sensitive_field(field) is True

    @pytest.mark.parametrize("field", ["gameId", "index", "pageSize", "searchFilter"])
    def test_regular_fields(self, field):
        assert DataMasker.is_sensitive_field(field) is False

    def test_mask_nested(self):
        data = {"headers": {"x-api-key": "secret"}, "items": [{"token": "t", "id": 1}]}

        masked = DataMasker.mask_sensitive_data(data)

        assert masked == {
            "headers": {"x-api-key": DataMasker.MASKED_VALUE},
            "items": [{"token": DataMasker.MASKED_VALUE, "id": 1}],
        }
        assert data["headers"]["x-api-key"] == "secret"

    def test_primitives_unchanged(self):
        assert DataMasker.mask_sensitive_data("text") == "text"
        assert DataMasker.mask_sensitive_data(None) is None

    def test_mask_value(self):
        assert DataMasker.mask_value("") == ""
        assert DataMasker.mask_value("abcdefgh1234", show_last=4) == "********1234"
        assert DataMasker.mask_value("short", show_last=4) == DataMasker.MASKED_VALUE
        assert DataMasker.mask_value("anything") == "********"
