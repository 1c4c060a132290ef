import pytest

from lds_jws2020.exceptions import InvalidKeyMaterial
from lds_jws2020.keys.rsa import RSAKey


@pytest.fixture(scope="module")
def rsa_key():
    return RSAKey()


class TestRSAKey:
    def test_generated_key_jwks(self, rsa_key):
        assert rsa_key.public_jwk["kty"] == "RSA"
        assert rsa_key.public_jwk["e"] == "AQAB"
        assert set(rsa_key.private_jwk) == {"kty", "n", "e", "d", "p", "q", "dp", "dq", "qi"}

    def test_sign_and_verify(self, rsa_key):
        signature = rsa_key.sign(b"message")
        assert len(signature) == 256
        assert rsa_key.verify(b"message", signature)
        assert not rsa_key.verify(b"other message", signature)
        assert not rsa_key.verify(b"message", signature[1:])

    def test_private_key_round_trip(self, rsa_key):
        key = RSAKey(private_jwk=rsa_key.private_jwk)
        assert key.public_jwk == rsa_key.public_jwk
        assert key.private_jwk == rsa_key.private_jwk

        without_primes = {
            name: rsa_key.private_jwk[name] for name in ("kty", "n", "e", "d")
        }
        assert RSAKey(private_jwk=without_primes).public_jwk == rsa_key.public_jwk

    def test_verify_only_key(self, rsa_key):
        verify_only = RSAKey(public_jwk=rsa_key.public_jwk)
        assert verify_only.private_jwk is None
        assert verify_only.verify(b"message", rsa_key.sign(b"message"))

    def test_missing_members(self):
        with pytest.raises(InvalidKeyMaterial) as excinfo:
            RSAKey(public_jwk={"kty": "RSA", "n": "AQAB"})
        assert str(excinfo.value) == "RSA JWK is missing required member: e"

    def test_wrong_key_type(self, rsa_key):
        with pytest.raises(InvalidKeyMaterial):
            RSAKey(public_jwk=dict(rsa_key.public_jwk, kty="EC"))


class TestMinifyRSAPublicKey:
    def test_minify_rsa_public_key(self, rsa_key):
        minified_public_key = rsa_key._minify_public_key()
        assert len(minified_public_key) < len(rsa_key.public_jwk["n"])
        assert len(minified_public_key) == 31
