from openapi_har.sampler import SchemaSampler


def _sample(schema, document=None, **kwargs):
    return SchemaSampler().sample(schema, document=document, **kwargs)


class TestScalarSamples:
    def test_type_defaults(self):
        assert _sample({"type": "string"}) == "string"
        assert _sample({"type": "integer"}) == 0
        assert _sample({"type": "number", "minimum": 2.5}) == 2.5
        assert _sample({"type": "boolean"}) is True

    def test_explicit_values_take_priority(self):
        assert _sample({"type": "string", "const": "c", "example": "e"}) == "c"
        assert _sample({"type": "string", "example": "e", "default": "d"}) == "e"
        assert _sample({"type": "string", "default": "d", "enum": ["x"]}) == "d"
        assert _sample({"type": "string", "enum": ["x", "y"]}) == "x"

    def test_formats(self):
        assert _sample({"type": "string", "format": "email"}) == "user@example.com"
        assert _sample({"type": "string", "format": "date"}) == "2019-08-24"
        assert _sample({"type": "string", "format": "unknown"}) == "string"

    def test_nullable_type_list(self):
        assert _sample({"type": ["null", "integer"]}) == 0


class TestCompositeSamples:
    def test_object_skips_read_only(self):
        schema = {"properties": {"id": {"type": "integer", "readOnly": True}, "name": {"type": "string"}}}
        assert _sample(schema) == {"name": "string"}
        assert _sample(schema, skip_read_only=False) == {"id": 0, "name": "string"}

    def test_array_of_refs(self):
        doc = {"definitions": {"Tag": {"type": "object", "properties": {"label": {"type": "string"}}}}}
        schema = {"type": "array", "items": {"$ref": "#/definitions/Tag"}}
        assert _sample(schema, doc) == [{"label": "string"}]

    def test_all_of_merges_objects(self):
        schema = {
            "allOf": [
                {"type": "object", "properties": {"a": {"type": "integer"}}},
                {"type": "object", "properties": {"b": {"type": "boolean"}}},
            ]
        }
        assert _sample(schema) == {"a": 0, "b": True}

    def test_one_of_uses_first_branch(self):
        assert _sample({"oneOf": [{"type": "integer"}, {"type": "string"}]}) == 0

    def test_additional_properties(self):
        assert _sample({"type": "object", "additionalProperties": {"type": "string"}}) == {
            "property1": "string",
            "property2": "string",
        }

    def test_circular_reference_stops(self):
        doc = {
            "definitions": {
                "Node": {
                    "type": "object",
                    "properties": {"value": {"type": "integer"}, "next": {"$ref": "#/definitions/Node"}},
                }
            }
        }
        assert _sample({"$ref": "#/definitions/Node"}, doc) == {"value": 0, "next": {}}

    def test_deterministic(self):
        schema = {"type": "object", "properties": {"when": {"type": "string", "format": "date-time"}}}
        assert _sample(schema) == _sample(schema)
