"""Tests for generation options."""

from swaggergen.config import Options


class TestOptions:
    def test_defaults(self):
        options = Options()
        assert options.examples is True
        assert options.validators is True
        assert options.api_gateway is False
        assert options.seed is None

    def test_from_mapping_wire_names(self):
        options = Options.from_mapping({"examples": False, "validators": False, "apiGateway": True})
        assert options == Options(examples=False, validators=False, api_gateway=True)

    def test_from_mapping_snake_case(self):
        assert Options.from_mapping({"api_gateway": True}).api_gateway is True

    def test_from_mapping_missing_keys(self):
        assert Options.from_mapping({}) == Options()
        assert Options.from_mapping(None) == Options()

    def test_seed(self):
        assert Options.from_mapping({"seed": "3"}).seed == 3
