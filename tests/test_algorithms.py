import pytest

from lds_jws2020.algorithms import key_type_and_curve, recommended_alg
from lds_jws2020.enums import Algorithm, Curve, KeyType
from lds_jws2020.exceptions import InvalidKeyMaterial


class TestRecommendedAlg:
    def test_mapping(self):
        assert recommended_alg({"kty": "OKP", "crv": "Ed25519"}) == "EdDSA"
        assert recommended_alg({"kty": "EC", "crv": "P-256"}) == "ES256"
        assert recommended_alg({"kty": "EC", "crv": "P-384"}) == "ES384"
        assert recommended_alg({"kty": "EC", "crv": "secp256k1"}) == "ES256K"
        assert recommended_alg({"kty": "RSA", "n": "AQAB", "e": "AQAB"}) == "PS256"

    def test_kty_and_crv(self):
        assert key_type_and_curve({"kty": "EC", "crv": "P-384"}) == (
            KeyType.EC,
            Curve.P384,
        )
        assert key_type_and_curve({"kty": "RSA"}) == (KeyType.RSA, None)

    def test_unsupported_combinations(self):
        for jwk in [
            {"kty": "EC", "crv": "Ed25519"},
            {"kty": "OKP", "crv": "P-256"},
            {"kty": "OKP", "crv": "X25519"},
            {"kty": "EC", "crv": "P-521"},
            {"kty": "EC"},
            {"kty": "oct"},
            {},
        ]:
            with pytest.raises(InvalidKeyMaterial):
                recommended_alg(jwk)

    def test_alg_is_not_taken_from_jwk(self):
        assert recommended_alg({"kty": "EC", "crv": "P-256", "alg": "ES384"}) == "ES256"


class TestEnums:
    def test_from_str(self):
        assert KeyType.from_str("OKP") == KeyType.OKP
        assert Curve.from_str("secp256k1") == Curve.Secp256k1
        assert Algorithm.from_str("ES256K") == Algorithm.ES256K

        with pytest.raises(InvalidKeyMaterial):
            Algorithm.from_str("HS256")
        with pytest.raises(InvalidKeyMaterial):
            Curve.from_str("p-256")
