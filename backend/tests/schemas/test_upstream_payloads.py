"""Upstream payload schemas — caller options forwarded, proxy-only fields stripped.

Invariants:
    - projectId / projektId never reach Lokalise
    - data_encoded steers the codec and is never forwarded
    - Unknown Lokalise options pass through untouched
    - Unset optional fields are omitted rather than sent as null
"""

import pytest
from pydantic import ValidationError

from lokalise_proxy.schemas.files import DownloadFilesRequest, UploadFileRequest
from lokalise_proxy.schemas.keys import CreateKeysRequest
from lokalise_proxy.schemas.translations import FetchTranslationsRequest


def test_upload_strips_scope_and_encoding_flag():
    body = UploadFileRequest.model_validate({
        "projectId": "p1",
        "data": "abc",
        "filename": "en.json",
        "lang_iso": "en",
        "data_encoded": False,
        "cleanup_mode": True,
    })
    assert body.data_encoded is False
    assert body.to_upstream() == {
        "data": "abc", "filename": "en.json", "lang_iso": "en", "cleanup_mode": True,
    }


def test_upload_rejects_empty_data():
    with pytest.raises(ValidationError):
        UploadFileRequest(data="", filename="en.json", lang_iso="en")


def test_download_defaults():
    assert DownloadFilesRequest().to_upstream() == {"format": "json", "original_filenames": True}


def test_key_extras_pass_through():
    body = CreateKeysRequest.model_validate({
        "projektId": "p1",
        "keys": [{"key_name": "a", "is_plural": True}],
    })
    assert body.upstream_keys() == [{"key_name": "a", "is_plural": True}]


def test_fetch_accepts_alias_and_field_name():
    assert FetchTranslationsRequest.model_validate(
        {"targetLocales": ["fr"]},
    ).target_locales == ["fr"]
    assert FetchTranslationsRequest(target_locales=["de"]).target_locales == ["de"]


def test_fetch_requires_non_empty_list():
    with pytest.raises(ValidationError):
        FetchTranslationsRequest.model_validate({"targetLocales": []})
