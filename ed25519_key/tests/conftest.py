import json
from pathlib import Path

import pytest

from ed25519_key import Ed25519VerificationKey2020

_GOLDEN = Path(__file__).resolve().parent / "golden" / "vectors.json"


@pytest.fixture(scope="session")
def vectors() -> dict:
    return json.loads(_GOLDEN.read_text(encoding="utf-8"))


@pytest.fixture
def seeded_key(vectors: dict) -> Ed25519VerificationKey2020:
    seed = bytes.fromhex(vectors["seed_ones"]["seed_hex"])
    return Ed25519VerificationKey2020.generate(seed=seed, controller="did:example:1234")
