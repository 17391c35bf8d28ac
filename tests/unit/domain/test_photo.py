"""
Unit tests for Photo, CachedPhoto and SearchResult domain models
"""

import pytest

from pexels_cache.core.exceptions import RemoteFormatFailure
from pexels_cache.domain.models import (
    DETAIL_PAGE_INDEX,
    DETAIL_QUERY_KEY,
    CachedPhoto,
    Photo,
    SearchPage,
    SearchResult,
)


class TestPhotoParsing:
    """Test suite for Photo.from_dict"""

    def test_from_dict_ignores_extra_fields(self, photo_payload):
        photo = Photo.from_dict(photo_payload(7))

        assert photo.id == 7
        assert photo.width == 4000
        assert photo.height == 3000
        assert photo.photographer == "Jane Doe"
        assert photo.url == "https://www.pexels.com/photo/7/"
        assert photo.src.original.endswith("pexels-photo-7.jpeg")
        assert photo.src.small.endswith("?h=130")

    def test_round_trip_through_dict(self, make_photo):
        photo = make_photo(3)
        assert Photo.from_dict(photo.to_dict()) == photo

    @pytest.mark.parametrize("field", ["id", "width", "height", "photographer", "url"])
    def test_missing_field(self, photo_payload, field):
        payload = photo_payload(1)
        del payload[field]

        with pytest.raises(RemoteFormatFailure) as exc_info:
            Photo.from_dict(payload)

        assert exc_info.value.details["field"] == field

    def test_wrong_type(self, photo_payload):
        payload = photo_payload(1)
        payload["width"] = "4000"

        with pytest.raises(RemoteFormatFailure):
            Photo.from_dict(payload)

    def test_bool_is_not_an_int(self, photo_payload):
        payload = photo_payload(1)
        payload["id"] = True

        with pytest.raises(RemoteFormatFailure):
            Photo.from_dict(payload)

    def test_missing_src(self, photo_payload):
        payload = photo_payload(1)
        payload["src"] = None

        with pytest.raises(RemoteFormatFailure, match="src"):
            Photo.from_dict(payload)

    def test_missing_variant(self, photo_payload):
        payload = photo_payload(1)
        del payload["src"]["medium"]

        with pytest.raises(RemoteFormatFailure):
            Photo.from_dict(payload)

    def test_not_an_object(self):
        with pytest.raises(RemoteFormatFailure):
            Photo.from_dict(["not", "a", "photo"])


class TestPhoto:
    def test_to_cached(self, make_photo):
        cached = make_photo(5).to_cached(
            query_key="nature", page_index=2, is_favorite=True, updated_at=123
        )

        assert isinstance(cached, CachedPhoto)
        assert cached.photo.id == 5
        assert cached.query_key == "nature"
        assert cached.page_index == 2
        assert cached.is_favorite is True
        assert cached.updated_at == 123

    def test_detail_row(self, make_photo):
        cached = make_photo(5).to_cached(DETAIL_QUERY_KEY, DETAIL_PAGE_INDEX, False, 1)

        assert cached.query_key == "detail"
        assert cached.page_index == 0


class TestSearchModels:
    def test_search_page_has_more(self, make_photo):
        assert SearchPage(photos=[make_photo(1)], next_page="https://next").has_more is True
        assert SearchPage(photos=[make_photo(1)]).has_more is False

    def test_search_result_to_dict(self, make_photo):
        result = SearchResult(photos=[make_photo(1), make_photo(2)], has_next_page=True, from_cache=False)

        data = result.to_dict()

        assert result.count() == 2
        assert data["result_count"] == 2
        assert data["has_next_page"] is True
        assert data["from_cache"] is False
        assert data["photos"][0]["id"] == 1
