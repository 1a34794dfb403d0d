"""
Engine registry: naming rules, resolution and the handle wrapper.
"""

import pytest

from dorkhound import registry
from dorkhound.engines import google  # noqa: F401 - registers the google engine
from dorkhound.errors import UnknownEngineError, UsageError


class StubEngine:
    def __init__(self):
        self.argv = None

    def start(self, argv):
        self.argv = list(argv)

    def version(self):
        return "0.1"

    def description(self):
        return "stub engine"

    def usage(self):
        return "usage: stub"


@pytest.fixture
def stub_name():
    name = "stub"
    registry.register_engine(name, StubEngine)
    yield name
    registry.unregister_engine(name)


class TestRegistration:
    @pytest.mark.parametrize("name", ["version", "help", "list", ""])
    def test_reserved_and_empty_names_are_rejected(self, name):
        with pytest.raises(ValueError):
            registry.register_engine(name, StubEngine)
        assert name not in registry.engine_names()

    def test_google_registers_on_import(self):
        assert "google" in registry.engine_names()

    def test_names_are_sorted(self, stub_name):
        names = registry.engine_names()
        assert names == sorted(names)
        assert stub_name in names

    def test_reregistering_replaces_factory(self, stub_name, caplog):
        class Other(StubEngine):
            def version(self):
                return "9.9"

        registry.register_engine(stub_name, Other)
        assert registry.use_without_start(stub_name).version() == "9.9"
        assert "registered twice" in caplog.text

    def test_unregister(self):
        registry.register_engine("temporary", StubEngine)
        registry.unregister_engine("temporary")
        registry.unregister_engine("temporary")
        assert "temporary" not in registry.engine_names()


class TestResolution:
    def test_unknown_engine(self):
        with pytest.raises(UnknownEngineError):
            registry.use_without_start("no-such-engine")
        with pytest.raises(LookupError):
            registry.use("no-such-engine", ["q"])

    def test_use_without_start_builds_fresh_engine(self, stub_name):
        first = registry.use_without_start(stub_name)
        second = registry.use_without_start(stub_name)
        assert first.engine is not second.engine
        assert first.engine.argv is None

    def test_use_starts_engine(self, stub_name):
        handle = registry.use(stub_name, ["-x", "query"])
        assert handle.name == stub_name
        assert handle.engine.argv == ["-x", "query"]

    def test_handle_forwards_metadata(self, stub_name):
        handle = registry.use_without_start(stub_name)
        assert handle.usage() == "usage: stub"
        assert str(handle) == "API( stub 0.1 | stub engine )"

    def test_google_handle(self):
        handle = registry.use("google", ["site:example.org"])
        assert str(handle) == f"API( google {google.VERSION} | Searches in google search engine )"
        assert handle.engine.options.query == "site:example.org"

    def test_google_rejects_missing_query(self):
        with pytest.raises(UsageError):
            registry.use("google", [])
