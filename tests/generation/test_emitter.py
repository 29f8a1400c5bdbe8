from __future__ import annotations

import logging

import pytest

from typefetch.generation.emitter import TypeEmitter, to_schema_type
from typefetch.openapi import OpenAPIDocument


class TestTypeEmitter:
    def test_emits_scalar_types(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "string"}) == "string"
        assert emitter.emit({"type": "integer"}) == "number"
        assert emitter.emit({"type": "number"}) == "number"
        assert emitter.emit({"type": "boolean"}) == "boolean"
        assert emitter.emit({"type": "null"}) == "null"

    def test_coerces_scalars_to_string_templates(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "string"}, coerce_to_string=True) == "string"
        assert emitter.emit({"type": "integer"}, coerce_to_string=True) == "`${number}`"
        assert emitter.emit({"type": "boolean"}, coerce_to_string=True) == "`${boolean}`"
        assert emitter.emit({"type": "null"}, coerce_to_string=True) == "`${null}`"

    def test_emits_ref_name(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"$ref": "#/components/schemas/Pet"}) == "Pet"
        assert emitter.emit({"$ref": "#/components/schemas/pet_store"}) == "PetStore"

    def test_ref_wins_over_siblings(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"$ref": "#/components/schemas/Pet", "nullable": True}) == "Pet"

    def test_missing_or_empty_schema_is_undefined(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit(None) is None
        assert emitter.emit({}) is None
        assert emitter.emit({"type": "file"}) is None
        assert emitter.emit(True) is None  # type: ignore[arg-type]

    def test_applies_nullable(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "string", "nullable": True}) == "string|null"
        assert emitter.emit({"nullable": True}) == "null"

    def test_nullable_presence_adds_null(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "string", "nullable": False}) == "string|null"
        assert emitter.emit({"nullable": False}) == "null"

    def test_nullable_enum(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit({"type": "string", "enum": ["a", "b"], "nullable": True})
        assert result == '"a"|"b"|null'

    def test_emits_not_as_exclude(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "string", "not": {"enum": ["a"]}}) == 'Exclude<string, "a">'

    def test_not_degrades_gracefully(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"not": {"type": "string"}}) is None
        assert emitter.emit({"type": "string", "not": {}}) == "string"

    def test_additional_properties_true(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit({"type": "object", "additionalProperties": True})
        assert result == "Record<string, unknown>&Record<string, unknown>"

    def test_additional_properties_schema(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit(
            {
                "type": "object",
                "properties": {"a": {"type": "string"}},
                "additionalProperties": {"type": "number"},
            }
        )
        assert result == "{a?:string}&number"

    def test_additional_properties_empty_schema(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit({"type": "object", "additionalProperties": {}})
        assert result == "Record<string, unknown>&Record<string, unknown>"

    def test_additional_properties_without_base(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"additionalProperties": True}) is None

    def test_additional_properties_false_is_ignored(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "object", "additionalProperties": False}) == "Record<string, unknown>"

    def test_emits_all_of_intersection(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit({"allOf": [{"$ref": "#/components/schemas/A"}, {"$ref": "#/components/schemas/B"}]})
        assert result == "A&B"

    def test_all_of_drops_undefined_members(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"allOf": [{"$ref": "#/components/schemas/A"}, {}]}) == "A"
        assert emitter.emit({"allOf": [{}]}) is None
        assert emitter.emit({"allOf": []}) is None

    def test_emits_one_of_union(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"oneOf": [{"type": "integer"}, {"type": "boolean"}]}) == "number|boolean"

    def test_one_of_widens_bare_string(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit({"oneOf": [{"type": "string"}, {"enum": ["a", "b"]}]})
        assert result == 'NonNullable<string>|"a"|"b"'
        assert result != "string"

    def test_one_of_single_string_is_not_widened(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"oneOf": [{"type": "string"}]}) == "string"

    def test_emits_any_of_union(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"anyOf": [{"type": "string"}, {"type": "integer"}]}) == "string|number"

    def test_any_of_with_null(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"anyOf": [{"type": "string"}, {"type": "null"}]}) == "string|null"

    def test_any_of_removes_duplicates(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"anyOf": [{"type": "integer"}, {"type": "number"}]}) == "number"

    def test_any_of_widens_when_members_are_not_plain(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit({"anyOf": [{"type": "string"}, {"enum": ["a"]}]})
        assert result == 'NonNullable<string>|"a"'

    def test_any_of_with_multiple_objects_warns(self, caplog: pytest.LogCaptureFixture) -> None:
        emitter = TypeEmitter({})
        schema = {
            "anyOf": [
                {"type": "object", "properties": {"a": {"type": "string"}}},
                {"type": "object", "properties": {"b": {"type": "number"}}},
            ]
        }
        with caplog.at_level(logging.WARNING, logger="typefetch"):
            result = emitter.emit(schema)
        assert result == "{a?:string}|{b?:number}"
        assert len(emitter.diagnostics) == 1
        assert emitter.diagnostics[0].schema == schema
        assert "anyOf" in caplog.text

    def test_any_of_with_single_object_does_not_warn(self) -> None:
        emitter = TypeEmitter({})
        emitter.emit({"anyOf": [{"type": "object"}, {"type": "string"}]})
        assert emitter.diagnostics == []

    def test_emits_enum_literals(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"enum": ["a", 1, True, None]}) == '"a"|1|true|null'

    def test_emits_object_properties(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit(
            {
                "type": "object",
                "properties": {"name": {"type": "string"}, "tag": {"type": "string"}},
                "required": ["name"],
            }
        )
        assert result == "{name:string;tag?:string}"

    def test_quotes_non_identifier_keys(self) -> None:
        emitter = TypeEmitter({})
        result = emitter.emit({"type": "object", "properties": {"x-rate": {"type": "integer"}}})
        assert result == '{"x-rate"?:number}'

    def test_unmapped_property_is_unknown(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "object", "properties": {"any": {}}}) == "{any?:unknown}"

    def test_empty_properties_is_empty_record(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "object", "properties": {}}) == "Record<string, never>"

    def test_object_without_properties_is_open_record(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "object"}) == "Record<string, unknown>"
        assert emitter.emit({"type": "object"}, coerce_to_string=True) == "Record<string, string>"

    def test_emits_arrays(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": "array", "items": {"type": "string"}}) == "(string)[]"
        assert emitter.emit({"type": "array", "items": {"$ref": "#/components/schemas/Pet"}}) == "(Pet)[]"
        assert emitter.emit({"type": "array"}) == "unknown[]"
        assert emitter.emit({"type": "array", "items": {}}, coerce_to_string=True) == "string[]"

    def test_emits_type_array(self) -> None:
        emitter = TypeEmitter({})
        assert emitter.emit({"type": ["string", "null"]}) == "string|null"  # type: ignore[typeddict-item]

    def test_emit_is_pure(self, petstore_document: OpenAPIDocument) -> None:
        schema = {
            "oneOf": [
                {"type": "string"},
                {"type": "object", "properties": {"id": {"type": "integer"}}, "nullable": True},
            ]
        }
        first = to_schema_type(petstore_document, schema)
        second = to_schema_type(petstore_document, schema)
        assert first == second == "NonNullable<string>|{id?:number}|null"

    def test_does_not_mutate_schema(self) -> None:
        schema = {"type": "string", "nullable": True, "not": {"enum": ["x"]}}
        TypeEmitter({}).emit(schema)
        assert schema == {"type": "string", "nullable": True, "not": {"enum": ["x"]}}

    def test_modifier_priority(self) -> None:
        emitter = TypeEmitter({})
        schema = {
            "type": "object",
            "nullable": True,
            "additionalProperties": {"type": "string"},
            "not": {"type": "null"},
        }
        assert emitter.emit(schema) == "Exclude<Record<string, unknown>&string, null>|null"
