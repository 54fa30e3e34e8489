"""Tests for property normalization and resource values."""

from swaggergen.models import Property, Resource, normalize_properties

_PATH = "/projects/{projectId:integer}/manifests/{id:integer}"


class TestNormalizeProperties:
    """Shorthand and full declarations normalize to the same shape."""

    def test_shorthand(self):
        assert normalize_properties({"name": "string"}) == {
            "name": Property(type="string", required=True),
        }

    def test_optional_suffix(self):
        parsed = normalize_properties({"name?": "string"})
        assert list(parsed) == ["name"]
        assert parsed["name"].required is False
        assert parsed["name"].type == "string"

    def test_full_declaration_defaults(self):
        parsed = normalize_properties({"id": {"type": "uuid"}})
        assert parsed["id"] == Property(type="uuid", required=True)

    def test_full_declaration_explicit(self):
        parsed = normalize_properties({
            "id": {
                "type": "uuid",
                "required": False,
                "description": "Primary key",
                "example": "abc",
                "validator": "string.custom",
            },
        })
        assert parsed["id"] == Property(
            type="uuid",
            required=False,
            description="Primary key",
            example="abc",
            validator="string.custom",
        )

    def test_optional_suffix_on_full_declaration(self):
        parsed = normalize_properties({"note?": {"type": "string", "required": True}})
        assert parsed["note"].required is False

    def test_order_preserved(self):
        parsed = normalize_properties({"b": "string", "a?": "string", "c": "url"})
        assert list(parsed) == ["b", "a", "c"]

    def test_empty(self):
        assert normalize_properties(None) == {}

    def test_single_suffix_stripped(self):
        parsed = normalize_properties({"name??": "string"})
        assert list(parsed) == ["name?"]
        assert parsed["name?"].required is False

    def test_null_type_defaults_to_string(self):
        parsed = normalize_properties({"name": {"type": None}})
        assert parsed["name"].type == "string"


class TestResource:
    """Test operation resolution and read-only detection."""

    def test_default_methods(self):
        resource = Resource.from_manifest("manifest", {"path": _PATH})
        assert resource.operations == ["list", "create", "read", "update", "delete"]
        assert resource.is_read_only is False

    def test_catalog_order(self):
        resource = Resource.from_manifest("manifest", {"path": _PATH, "methods": ["update", "list"]})
        assert resource.operations == ["list", "update"]

    def test_unknown_methods_skipped(self):
        resource = Resource.from_manifest("manifest", {"path": _PATH, "methods": ["read", "purge"]})
        assert resource.operations == ["read"]
        assert resource.unknown_methods == ["purge"]

    def test_read_only_without_mutations(self):
        resource = Resource.from_manifest("manifest", {"path": _PATH, "methods": ["list", "read", "delete"]})
        assert resource.is_read_only is True

    def test_explicit_read_only(self):
        resource = Resource.from_manifest("manifest", {"path": _PATH, "readOnly": True})
        assert resource.is_read_only is True

    def test_empty_methods_is_read_only(self):
        resource = Resource.from_manifest("manifest", {"path": _PATH, "methods": []})
        assert resource.operations == []
        assert resource.is_read_only is True
