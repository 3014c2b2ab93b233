"""Unit tests for the Model's proxy registry."""

from puremvc import Model, Proxy

from conftest import LifecycleProxy


def test_register_and_retrieve_proxy():
    """A registered proxy is returned by name with its data intact."""
    model = Model()
    proxy = Proxy("colors", ["red", "green", "blue"])

    model.register_proxy(proxy)

    assert model.retrieve_proxy("colors") is proxy
    assert model.retrieve_proxy("colors").data == ["red", "green", "blue"]


def test_remove_proxy_returns_instance():
    model = Model()
    proxy = Proxy("sizes", [7, 13, 21])
    model.register_proxy(proxy)

    removed = model.remove_proxy("sizes")

    assert removed is proxy
    assert model.retrieve_proxy("sizes") is None
    assert not model.has_proxy("sizes")


def test_remove_missing_proxy_returns_none():
    model = Model()
    assert model.remove_proxy("missing") is None


def test_has_proxy():
    model = Model()
    model.register_proxy(Proxy("aces", ["clubs", "spades", "hearts", "diamonds"]))
    assert model.has_proxy("aces")
    model.remove_proxy("aces")
    assert not model.has_proxy("aces")


def test_register_same_name_replaces_proxy():
    model = Model()
    model.register_proxy(Proxy("p", 1))
    replacement = Proxy("p", 2)

    model.register_proxy(replacement)

    assert model.retrieve_proxy("p") is replacement


def test_proxy_lifecycle_hooks():
    model = Model()
    proxy = LifecycleProxy()

    model.register_proxy(proxy)
    assert proxy.data == "on_register called"

    model.remove_proxy(LifecycleProxy.NAME)
    assert proxy.data == "on_remove called"


def test_initialize_model_hook():
    class SeededModel(Model):
        def initialize_model(self):
            self.register_proxy(Proxy("seed", 0))

    assert SeededModel().has_proxy("seed")
