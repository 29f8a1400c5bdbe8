from __future__ import annotations

import pytest

from typefetch.naming import escape_object_key, pascal_case, split_words


class TestPascalCase:
    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("Pet", "Pet"),
            ("pet", "Pet"),
            ("pet-store", "PetStore"),
            ("pet_store", "PetStore"),
            ("petStore", "PetStore"),
            ("HTTPError", "HttpError"),
            ("error_404", "Error_404"),
            ("v2.Pet", "V2Pet"),
            ("404_error", "404Error"),
        ],
    )
    def test_converts(self, value: str, expected: str) -> None:
        assert pascal_case(value) == expected

    def test_split_words(self) -> None:
        assert split_words("HTTPErrorCode_v2") == ["HTTP", "Error", "Code", "v2"]


class TestEscapeObjectKey:
    @pytest.mark.parametrize("key", ["name", "_private", "$id", "camelCase2"])
    def test_identifiers_are_bare(self, key: str) -> None:
        assert escape_object_key(key) == key

    @pytest.mark.parametrize("key", ["x-rate-limit", "2fa", "with space", ""])
    def test_other_keys_are_quoted(self, key: str) -> None:
        assert escape_object_key(key) == f'"{key}"'
