"""
Pytest configuration and shared fixtures for mnemonicode tests
"""

import random

import pytest
from typing import Dict, List, Tuple

from mnemonicode.config import FORMAT_ENV, STRICT_ENV, ABBREVIATE_ENV


def pytest_configure(config):
    config.addinivalue_line("markers", "benchmark: codec throughput benchmarks (pytest-benchmark)")


# (bytes, wire-format text) pairs
KNOWN_VECTORS: List[Tuple[bytes, str]] = [
    (b"", ""),
    (bytes([101, 2, 240, 6, 108, 11, 20, 97]), "digital-apollo-aroma--rival-artist-rebel"),
    (bytes([0x01, 0xE2, 0x40]), "consul-quiet-fax"),
    (b"hello", "square-angel-stone--carlo"),
    (b"\x00", "academy"),
    (b"\xff", "exact"),
    (b"\xff\xff", "nevada-archive"),
    (b"\xff\xff\xff", "claudia-photo-yes"),
    (b"\xff\xff\xff\xff", "natural-analyze-verbal"),
    (b"\x00\x00\x00", "academy-academy-ego"),
    (b"\x00\x00\x00\x00", "academy-academy-academy"),
]


@pytest.fixture(params=KNOWN_VECTORS, ids=lambda v: v[1] or "empty")
def known_vector(request) -> Tuple[bytes, str]:
    """Byte strings with their expected encodings"""
    return request.param


@pytest.fixture(scope="session")
def random_payloads() -> List[bytes]:
    """Deterministic pseudo-random payloads covering every length 0..64"""
    rng = random.Random(1626)
    return [bytes(rng.randrange(256) for _ in range(n)) for n in range(65)]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch) -> Dict[str, str]:
    """Remove codec settings from the environment so defaults apply"""
    for name in (FORMAT_ENV, STRICT_ENV, ABBREVIATE_ENV, "MNEMONICODE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    return {}
