import pytest

from lds_jws2020.encoding import b64url_decode, b64url_encode
from lds_jws2020.exceptions import InvalidKeyMaterial
from lds_jws2020.keys.okp import Ed25519Key

# RFC 8037, appendix A.1
RFC8037_PRIVATE_JWK = {
    "kty": "OKP",
    "crv": "Ed25519",
    "d": "nWGxne_9WmC6hEr0kuwsxERJxWl7MmkZcDusAxyuf2A",
    "x": "11qYAYKxCrfVS_7TyWQHOg7hcvPapiMlrwIaaPcHURo",
}


class TestEd25519Key:
    def test_generate(self):
        key = Ed25519Key()
        assert key.public_jwk["kty"] == "OKP"
        assert key.public_jwk["crv"] == "Ed25519"
        assert len(b64url_decode(key.public_jwk["x"])) == 32
        assert len(b64url_decode(key.private_jwk["d"])) == 32

    def test_rfc8037_public_key_derivation(self):
        private_only = {"kty": "OKP", "crv": "Ed25519", "d": RFC8037_PRIVATE_JWK["d"]}
        key = Ed25519Key(private_jwk=private_only)
        assert key.public_jwk["x"] == RFC8037_PRIVATE_JWK["x"]
        assert key.private_jwk == RFC8037_PRIVATE_JWK

    def test_rfc8037_signature(self):
        # RFC 8037, appendix A.4
        key = Ed25519Key(private_jwk=RFC8037_PRIVATE_JWK)
        signing_input = b"eyJhbGciOiJFZERTQSJ9.RXhhbXBsZSBvZiBFZDI1NTE5IHNpZ25pbmc"
        signature = key.sign(signing_input)

        assert b64url_encode(signature) == (
            "hgyY0il_MGCjP0JzlnLWG1PPOt7-09PGcvMg3AIbQR6dWbhijcNR4ki4iylGjg5BhVsPt9g7sVvpAr_MuM0KAg"
        )
        assert key.verify(signing_input, signature)

    def test_verify_only_key(self):
        key = Ed25519Key()
        verify_only = Ed25519Key(public_jwk=key.public_jwk)
        signature = key.sign(b"message")

        assert verify_only.signing_key is None
        assert verify_only.private_jwk is None
        assert verify_only.verify(b"message", signature)
        assert not verify_only.verify(b"Message", signature)
        assert not verify_only.verify(b"message", signature[:32])

    def test_non_matching_public_key(self):
        other = Ed25519Key()
        with pytest.raises(InvalidKeyMaterial):
            Ed25519Key(public_jwk=other.public_jwk, private_jwk=RFC8037_PRIVATE_JWK)

        mismatching_private = dict(RFC8037_PRIVATE_JWK, x=other.public_jwk["x"])
        with pytest.raises(InvalidKeyMaterial):
            Ed25519Key(private_jwk=mismatching_private)

    def test_invalid_key_sizes(self):
        with pytest.raises(InvalidKeyMaterial) as excinfo:
            Ed25519Key(private_jwk={"kty": "OKP", "crv": "Ed25519", "d": "AAAA"})
        assert str(excinfo.value) == "Invalid Ed25519 key. Member d must be a 32-byte value."

        with pytest.raises(InvalidKeyMaterial):
            Ed25519Key(public_jwk={"kty": "OKP", "crv": "Ed25519", "x": "AAAA"})

    def test_wrong_curve(self):
        with pytest.raises(InvalidKeyMaterial):
            Ed25519Key(
                public_jwk={"kty": "OKP", "crv": "X25519", "x": RFC8037_PRIVATE_JWK["x"]}
            )
