"""Tests for the classification registry."""
import threading

import pytest

from jurisdiction import RegistryInvariantError, registry
from jurisdiction.generated import ALPHA2_INDEX, ALPHA3_INDEX, DEFINITIONS
from jurisdiction.registry import ClassificationRegistry


class TestLookup:
    def test_every_definition_resolves_to_itself(self):
        for definition in DEFINITIONS:
            assert registry.lookup(definition.country_code) is definition

    def test_every_alpha_code_resolves(self):
        for code, country_code in {**ALPHA2_INDEX, **ALPHA3_INDEX}.items():
            assert registry.lookup(country_code).country_code == country_code
        assert len(ClassificationRegistry.get_instance()) == len(DEFINITIONS)

    def test_unknown_code_is_an_invariant_violation(self):
        assert 0 not in ClassificationRegistry.get_instance()
        with pytest.raises(RegistryInvariantError):
            registry.lookup(0)

    def test_duplicate_country_code_is_rejected(self):
        with pytest.raises(RegistryInvariantError):
            ClassificationRegistry([DEFINITIONS[0], DEFINITIONS[0]])


class TestSingleton:
    def test_instance_is_shared(self):
        assert ClassificationRegistry.get_instance() is ClassificationRegistry.get_instance()

    def test_concurrent_first_access_builds_once(self, monkeypatch):
        monkeypatch.setattr(ClassificationRegistry, "_instance", None)

        built = []
        original_init = ClassificationRegistry.__init__

        def counting_init(self, definitions):
            built.append(self)
            original_init(self, definitions)

        monkeypatch.setattr(ClassificationRegistry, "__init__", counting_init)

        workers = 8
        barrier = threading.Barrier(workers)
        instances = []

        def worker():
            barrier.wait()
            instances.append(ClassificationRegistry.get_instance())

        threads = [threading.Thread(target=worker) for _ in range(workers)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(built) == 1
        assert len(instances) == workers
        assert all(instance is built[0] for instance in instances)
