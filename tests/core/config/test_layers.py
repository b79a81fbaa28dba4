# tests/core/config/test_layers.py
"""
Testes do LayerStore.

Os testes asseguram que:
- a ordem de inserção é a ordem de precedência
- nomes de camada são únicos
- camadas ausentes são armazenadas como `{}`
"""

import pytest

from atlas_config.core.config.layers import Layer, LayerStore


def test_store_preserves_insertion_order_as_precedence():
    store = LayerStore()
    store.add("defaults", {"a": 1})
    store.add("override", {"a": 2})

    assert store.names() == ["defaults", "override"]
    assert store.rank("defaults") == 0
    assert store.rank("override") == 1
    assert [layer.tree for layer in store] == [{"a": 1}, {"a": 2}]
    assert len(store) == 2


def test_duplicate_layer_name_is_rejected():
    store = LayerStore()
    store.add("defaults", {})
    with pytest.raises(ValueError):
        store.add("defaults", {"a": 1})
    assert store.names() == ["defaults"]


def test_none_tree_is_stored_as_empty_mapping():
    store = LayerStore()
    layer = store.add("autodetected", None)
    assert layer == Layer(name="autodetected", tree={})
    assert store.get("autodetected").tree == {}


def test_unknown_layer_lookup_raises_key_error():
    store = LayerStore()
    with pytest.raises(KeyError):
        store.get("overlay")
    with pytest.raises(KeyError):
        store.rank("overlay")


def test_as_dict_and_empty_factory():
    store = LayerStore()
    store.add("defaults", {"a": 1})
    assert store.as_dict() == {"defaults": {"a": 1}}
    assert Layer.empty("overlay").tree == {}
