"""
Unit tests for the DI container.
"""
import pytest

from devconnect.di.base_container import BaseContainer


class TestBaseContainer:
    def test_singleton_returns_same_instance(self):
        container = BaseContainer()
        instance = object()
        container.register_singleton("thing", instance)
        assert container.get("thing") is instance

    def test_factory_builds_new_instance_each_time(self):
        container = BaseContainer()
        container.register_factory(list, lambda: [])
        assert container.get(list) is not container.get(list)

    def test_later_registration_wins(self):
        container = BaseContainer()
        container.register_factory("thing", lambda: "factory")
        container.register_singleton("thing", "singleton")
        assert container.get("thing") == "singleton"

    def test_unknown_key_raises_value_error(self):
        container = BaseContainer()
        assert container.is_registered(dict) is False
        with pytest.raises(ValueError, match="dict"):
            container.get(dict)
