import pytest

from lds_jws2020.enums import Curve, KeyType
from lds_jws2020.exceptions import AlgorithmMismatch, InvalidKeyMaterial
from lds_jws2020.keys.ec import ECKey
from lds_jws2020.keys.okp import Ed25519Key
from lds_jws2020.provider import CryptoProvider


@pytest.fixture
def provider():
    return CryptoProvider()


class TestCryptoProvider:
    def test_generate_key_pair(self, provider):
        private_jwk, public_jwk = provider.generate_key_pair("OKP", "Ed25519")
        assert public_jwk["crv"] == "Ed25519"
        assert "d" in private_jwk and "d" not in public_jwk

        private_jwk, public_jwk = provider.generate_key_pair(KeyType.EC, Curve.P384)
        assert public_jwk["crv"] == "P-384"

    def test_generate_default_curves(self, provider):
        assert provider.generate_key_pair("OKP")[1]["crv"] == "Ed25519"
        assert provider.generate_key_pair("EC")[1]["crv"] == "P-256"

    def test_generate_unsupported_combinations(self, provider):
        with pytest.raises(InvalidKeyMaterial):
            provider.generate_key_pair("OKP", "P-256")
        with pytest.raises(InvalidKeyMaterial):
            provider.generate_key_pair("EC", "Ed25519")
        with pytest.raises(InvalidKeyMaterial):
            provider.generate_key_pair("RSA", "P-256")
        with pytest.raises(InvalidKeyMaterial):
            provider.generate_key_pair("oct")

    def test_public_key_from_private(self, provider):
        private_jwk, public_jwk = provider.generate_key_pair("EC", "secp256k1")
        assert provider.public_key_from_private(private_jwk) == public_jwk

    def test_sign_and_verify(self, provider):
        private_jwk, public_jwk = provider.generate_key_pair("EC", "P-256")
        signature = provider.sign(private_jwk, b"data", "ES256")

        assert provider.verify(public_jwk, b"data", signature, "ES256")
        assert not provider.verify(public_jwk, b"Data", signature, "ES256")

    def test_alg_must_match_key(self, provider):
        private_jwk, public_jwk = provider.generate_key_pair("EC", "P-256")
        with pytest.raises(AlgorithmMismatch):
            provider.sign(private_jwk, b"data", "ES384")

        signature = provider.sign(private_jwk, b"data", "ES256")
        with pytest.raises(AlgorithmMismatch):
            provider.verify(public_jwk, b"data", signature, "EdDSA")

    def test_load_key(self, provider):
        private_jwk, public_jwk = provider.generate_key_pair("OKP", "Ed25519")
        assert isinstance(provider.load_key(public_jwk=public_jwk), Ed25519Key)

        private_jwk, public_jwk = provider.generate_key_pair("EC", "P-256")
        assert isinstance(provider.load_key(public_jwk, private_jwk), ECKey)

    def test_load_key_with_mismatching_key_types(self, provider):
        okp_private_jwk, _ = provider.generate_key_pair("OKP", "Ed25519")
        _, ec_public_jwk = provider.generate_key_pair("EC", "P-256")
        with pytest.raises(InvalidKeyMaterial):
            provider.load_key(ec_public_jwk, okp_private_jwk)

    def test_jwk_thumbprint(self, provider):
        jwk = {"kty": "OKP", "crv": "Ed25519", "x": "11qYAYKxCrfVS_7TyWQHOg7hcvPapiMlrwIaaPcHURo"}
        assert provider.jwk_thumbprint(jwk) == "kPrK_qmxVWaYVA9wwBF6Iuo3vVzz7TxHCTwXBygrS4k"
