"""Tests for the example generators."""

import datetime

from swaggergen.examples import FakerExamples, fixed_examples


class TestFakerExamples:
    def test_known_providers(self):
        examples = FakerExamples(seed=1)
        assert isinstance(examples("word"), str)
        assert isinstance(examples("random_int"), int)
        assert isinstance(examples("uuid4"), str)
        assert examples("url").startswith("http")

    def test_unknown_key(self):
        assert FakerExamples(seed=1)("no_such_provider_here") is None

    def test_private_key(self):
        assert FakerExamples(seed=1)("_factory_map") is None

    def test_provider_requiring_arguments(self):
        assert FakerExamples(seed=1)("parse") is None

    def test_seed_is_deterministic(self):
        assert FakerExamples(seed=7)("word") == FakerExamples(seed=7)("word")

    def test_unseeded_is_deterministic(self):
        assert FakerExamples()("random_int") == FakerExamples()("random_int")

    def test_dates_become_iso_strings(self):
        value = FakerExamples(seed=1)("date_time")
        assert isinstance(value, str)
        assert datetime.datetime.fromisoformat(value)

    def test_non_scalar_results_dropped(self):
        assert FakerExamples(seed=1)("binary") is None
        assert FakerExamples(seed=1)("pylist") is None

    def test_decimal_becomes_float(self):
        assert isinstance(FakerExamples(seed=1)("pydecimal"), float)


class TestFixedExamples:
    def test_lookup(self):
        examples = fixed_examples({"word": "alpha"})
        assert examples("word") == "alpha"
        assert examples("url") is None
