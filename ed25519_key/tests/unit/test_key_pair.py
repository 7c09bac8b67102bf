import pytest

from ed25519_key import Ed25519VerificationKey2020, FormatError, ValidationError
from ed25519_key.crypto import multibase
from ed25519_key.crypto.ed25519 import CryptographyProvider
from ed25519_key.crypto.multicodec import MULTICODEC_ED25519_PRIV_HEADER, MULTICODEC_ED25519_PUB_HEADER

CONTROLLER = "did:example:1234"


def test_suite_properties() -> None:
    assert Ed25519VerificationKey2020.suite == "Ed25519VerificationKey2020"
    assert Ed25519VerificationKey2020.SUITE_CONTEXT == "https://w3id.org/security/suites/ed25519-2020/v1"


def test_constructor_sets_id_from_controller(vectors: dict) -> None:
    fingerprint = vectors["seed_ones"]["public_key_multibase"]
    key = Ed25519VerificationKey2020(controller=CONTROLLER, public_key_multibase=fingerprint)
    assert key.id == f"{CONTROLLER}#{fingerprint}"
    assert key.type == "Ed25519VerificationKey2020"
    assert key.private_key_multibase is None


def test_constructor_keeps_explicit_id(vectors: dict) -> None:
    key = Ed25519VerificationKey2020(
        id="did:ex:123#test-id",
        controller=CONTROLLER,
        public_key_multibase=vectors["seed_ones"]["public_key_multibase"],
    )
    assert key.id == "did:ex:123#test-id"


def test_constructor_requires_public_key() -> None:
    with pytest.raises(ValidationError, match='"publicKeyMultibase" property is required'):
        Ed25519VerificationKey2020()


@pytest.mark.parametrize(
    "value",
    [
        "6Mkon3Necd6NkkyfoGoHxid2znGc59LU3K7mubaRcFbLfLX",
        "zruzf4Y29hDp7vLoV3NWzuymGMTtJcQfttAWzESod4wV2fbPvEp4XtzGp2VWwQSQAXMxDyqrnVurYg2sBiqiu1FHDDM",
        "z0OIl",
        "zTESTSTRNG",
    ],
)
def test_constructor_rejects_bad_public_header(value: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        Ed25519VerificationKey2020(public_key_multibase=value)
    assert excinfo.value.code == "invalidKeyHeader"


def test_constructor_rejects_bad_private_header(vectors: dict) -> None:
    public = vectors["seed_ones"]["public_key_multibase"]
    with pytest.raises(ValidationError, match="privateKeyMultibase"):
        Ed25519VerificationKey2020(public_key_multibase=public, private_key_multibase=public)


def test_generate_produces_tagged_keys() -> None:
    key = Ed25519VerificationKey2020.generate()
    public = multibase.decode(key.public_key_multibase)
    private = multibase.decode(key.private_key_multibase)
    assert len(public) == 34 and public[:2] == b"\xed\x01"
    assert len(private) == 66 and private[:2] == b"\x80\x26"
    assert private[34:] == public[2:]


def test_generate_from_seed_is_deterministic(vectors: dict) -> None:
    seed = bytes.fromhex(vectors["seed_ones"]["seed_hex"])
    first = Ed25519VerificationKey2020.generate(seed=seed)
    second = Ed25519VerificationKey2020.generate(seed=seed)
    assert first.public_key_multibase == second.public_key_multibase
    assert first.private_key_multibase == second.private_key_multibase
    assert first.fingerprint() == vectors["seed_ones"]["public_key_multibase"]
    assert first.private_key_multibase == vectors["seed_ones"]["private_key_multibase"]


def test_raw_key_views(seeded_key: Ed25519VerificationKey2020, vectors: dict) -> None:
    assert seeded_key.public_key_bytes.hex() == vectors["seed_ones"]["public_key_hex"]
    assert seeded_key.private_key_bytes == bytes.fromhex(vectors["seed_ones"]["seed_hex"]) + seeded_key.public_key_bytes
    public_only = Ed25519VerificationKey2020.from_fingerprint(seeded_key.fingerprint())
    assert public_only.private_key_bytes is None


def test_fingerprint_is_public_key_multibase(seeded_key: Ed25519VerificationKey2020) -> None:
    fingerprint = seeded_key.fingerprint()
    assert fingerprint == seeded_key.public_key_multibase
    assert fingerprint.startswith("z")


def test_from_fingerprint_round_trip() -> None:
    key = Ed25519VerificationKey2020.generate()
    restored = Ed25519VerificationKey2020.from_fingerprint(key.fingerprint())
    assert restored.public_key_multibase == key.public_key_multibase
    assert restored.private_key_multibase is None


def test_verify_fingerprint_accepts_own_fingerprint() -> None:
    key = Ed25519VerificationKey2020.generate()
    result = key.verify_fingerprint(key.fingerprint())
    assert result.verified is True
    assert result.error is None


def test_verify_fingerprint_same_seed(vectors: dict) -> None:
    seed = bytes.fromhex(vectors["seed_ones"]["seed_hex"])
    first = Ed25519VerificationKey2020.generate(seed=seed)
    second = Ed25519VerificationKey2020.generate(seed=seed)
    assert second.verify_fingerprint(first.fingerprint()).verified


@pytest.mark.parametrize("candidate", [None, 12, "", "6MkiTBz1ymuepAQ4HEHYSF1H8quG5GLVVQR3djdX3mDooWp"])
def test_verify_fingerprint_requires_multibase(candidate, seeded_key: Ed25519VerificationKey2020) -> None:
    result = seeded_key.verify_fingerprint(candidate)
    assert result.verified is False
    assert str(result.error) == '"fingerprint" must be a multibase encoded string.'


def test_verify_fingerprint_rejects_stripped_marker() -> None:
    key = Ed25519VerificationKey2020.generate()
    result = key.verify_fingerprint(key.fingerprint()[1:])
    assert result.verified is False
    assert str(result.error) == '"fingerprint" must be a multibase encoded string.'


def test_verify_fingerprint_rejects_reversed_body() -> None:
    key = Ed25519VerificationKey2020.generate()
    fingerprint = key.fingerprint()
    bad = fingerprint[0] + fingerprint[1:][::-1]
    result = key.verify_fingerprint(bad)
    assert result.verified is False
    assert str(result.error) == "Invalid fingerprint encoding (expecting 0xed01 byte prefix)."


def test_verify_fingerprint_rejects_garbage(seeded_key: Ed25519VerificationKey2020) -> None:
    result = seeded_key.verify_fingerprint("zTESTSTRNG")
    assert result.verified is False
    assert str(result.error) == "Invalid fingerprint encoding (expecting 0xed01 byte prefix)."


def test_verify_fingerprint_reports_decode_errors(seeded_key: Ed25519VerificationKey2020) -> None:
    result = seeded_key.verify_fingerprint("z0OIl")
    assert result.verified is False
    assert isinstance(result.error, FormatError)


def test_verify_fingerprint_rejects_other_key(seeded_key: Ed25519VerificationKey2020, vectors: dict) -> None:
    result = seeded_key.verify_fingerprint(vectors["seed_zeros"]["public_key_multibase"])
    assert result.verified is False


def test_export_all_fields(seeded_key: Ed25519VerificationKey2020, vectors: dict) -> None:
    seeded_key.revoked = "2020-12-17T00:00:00Z"
    exported = seeded_key.export(public_key=True, private_key=True)
    assert set(exported) == {"id", "type", "controller", "publicKeyMultibase", "privateKeyMultibase", "revoked"}
    assert exported["controller"] == CONTROLLER
    assert exported["type"] == "Ed25519VerificationKey2020"
    assert exported["id"] == f"{CONTROLLER}#{vectors['seed_ones']['public_key_multibase']}"
    assert exported["publicKeyMultibase"] == vectors["seed_ones"]["public_key_multibase"]
    assert exported["privateKeyMultibase"] == vectors["seed_ones"]["private_key_multibase"]
    assert exported["revoked"] == "2020-12-17T00:00:00Z"


def test_export_public_only() -> None:
    key = Ed25519VerificationKey2020.generate(id="did:ex:123#test-id")
    exported = key.export(public_key=True)
    assert set(exported) == {"id", "type", "publicKeyMultibase"}
    assert exported["id"] == "did:ex:123#test-id"


def test_export_omits_absent_fields() -> None:
    key = Ed25519VerificationKey2020.generate()
    public_only = Ed25519VerificationKey2020.from_fingerprint(key.fingerprint())
    exported = public_only.export(public_key=True, private_key=True, include_context=True)
    assert exported == {
        "type": "Ed25519VerificationKey2020",
        "@context": "https://w3id.org/security/suites/ed25519-2020/v1",
        "publicKeyMultibase": key.fingerprint(),
    }
    assert None not in exported.values()


def test_export_requires_a_key_flag(seeded_key: Ed25519VerificationKey2020) -> None:
    with pytest.raises(ValidationError):
        seeded_key.export()


def test_from_record_round_trip(seeded_key: Ed25519VerificationKey2020) -> None:
    exported = seeded_key.export(public_key=True, private_key=True)
    imported = Ed25519VerificationKey2020.from_record(exported)
    assert imported.export(public_key=True, private_key=True) == exported


def test_from_record_rejects_non_mapping() -> None:
    with pytest.raises(ValidationError):
        Ed25519VerificationKey2020.from_record(["not", "a", "record"])


class RecordingProvider(CryptographyProvider):
    def __init__(self) -> None:
        self.calls: list[str] = []

    def sign(self, secret_key: bytes, data: bytes) -> bytes:
        self.calls.append("sign")
        return super().sign(secret_key, data)

    def verify(self, public_key: bytes, data: bytes, signature: bytes) -> bool:
        self.calls.append("verify")
        return super().verify(public_key, data, signature)


@pytest.mark.parametrize(
    "restore",
    [
        lambda key, provider: Ed25519VerificationKey2020.from_record(
            key.export(public_key=True, private_key=True), provider=provider
        ),
        lambda key, provider: Ed25519VerificationKey2020.from_ed25519_verification_key_2018(
            key.to_ed25519_verification_key_2018(public_key=True, private_key=True), provider=provider
        ),
        lambda key, provider: Ed25519VerificationKey2020.from_jwk(key.to_jwk(private_key=True), provider=provider),
        lambda key, provider: Ed25519VerificationKey2020.from_json_web_key_2020(
            {
                "type": "JsonWebKey2020",
                "publicKeyJwk": key.to_jwk(),
                "privateKeyJwk": key.to_jwk(private_key=True),
            },
            provider=provider,
        ),
    ],
    ids=["record", "2018", "jwk", "json_web_key_2020"],
)
def test_importers_keep_the_given_provider(seeded_key: Ed25519VerificationKey2020, restore) -> None:
    provider = RecordingProvider()
    restored = restore(seeded_key, provider)
    signature = restored.signer().sign(data=b"x")
    assert restored.verifier().verify(data=b"x", signature=signature)
    assert provider.calls == ["sign", "verify"]


def test_from_fingerprint_keeps_the_given_provider(seeded_key: Ed25519VerificationKey2020) -> None:
    provider = RecordingProvider()
    public_only = Ed25519VerificationKey2020.from_fingerprint(seeded_key.fingerprint(), provider=provider)
    signature = seeded_key.signer().sign(data=b"x")
    assert public_only.verifier().verify(data=b"x", signature=signature)
    assert provider.calls == ["verify"]


def test_raw_key_views_strip_multicodec_headers(seeded_key: Ed25519VerificationKey2020) -> None:
    assert multibase.encode_key(MULTICODEC_ED25519_PUB_HEADER, seeded_key.public_key_bytes) == (
        seeded_key.public_key_multibase
    )
    assert multibase.encode_key(MULTICODEC_ED25519_PRIV_HEADER, seeded_key.private_key_bytes) == (
        seeded_key.private_key_multibase
    )
