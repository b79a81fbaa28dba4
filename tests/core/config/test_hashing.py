# tests/core/config/test_hashing.py
"""
Testes do hashing canônico de configuração.

Os testes asseguram que:
- configurações equivalentes produzem o mesmo hash
- o hash é independente da ordem das chaves
- o algoritmo corresponde ao SHA-256 do JSON canônico
- alterações na configuração produzem hashes diferentes
"""

import hashlib
import json
from datetime import date

from atlas_config.core.config.hashing import canonical_json, compute_config_hash


def _canonical_json_bytes(obj) -> bytes:
    s = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def test_hash_is_deterministic():
    h1 = compute_config_hash({"b": 2, "a": 1})
    h2 = compute_config_hash({"a": 1, "b": 2})
    assert h1 == h2
    assert isinstance(h1, str)
    assert len(h1) == 64


def test_hash_matches_sha256_of_canonical_json():
    cfg = {"use": {"base_url": "https://ação.example.com"}, "projects": [{"name": "chromium"}]}
    expected = hashlib.sha256(_canonical_json_bytes(cfg)).hexdigest()
    assert compute_config_hash(cfg) == expected
    assert canonical_json(cfg).encode("utf-8") == _canonical_json_bytes(cfg)


def test_hash_changes_on_override():
    assert compute_config_hash({"a": 1, "b": 2}) != compute_config_hash({"a": 1, "b": 3})


def test_hash_accepts_non_mapping_roots():
    assert len(compute_config_hash([1, 2, 3])) == 64
    assert compute_config_hash("x") != compute_config_hash(["x"])


def test_hash_is_total_over_yaml_values():
    cfg = {"release": date(2024, 1, 1), "codes": {1: "a", "x": "b"}}
    h1 = compute_config_hash(cfg)
    assert h1 == compute_config_hash({"codes": {"x": "b", 1: "a"}, "release": date(2024, 1, 1)})
    assert h1 != compute_config_hash({"release": date(2024, 1, 2), "codes": {1: "a", "x": "b"}})
    assert len(h1) == 64


def test_canonical_json_stringifies_keys_and_dates():
    assert canonical_json({"d": date(2024, 1, 1), 2: [1, (2, 3)]}) == '{"2":[1,[2,3]],"d":"2024-01-01"}'
