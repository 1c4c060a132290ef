from lds_jws2020.enums import Algorithm, Curve, KeyType
from lds_jws2020.exceptions import InvalidKeyMaterial

# The w3c-ccg lds-jws2020 key type/curve to JWS alg mapping. RSA keys map to
# a single algorithm regardless of their modulus size.
RECOMMENDED_ALGORITHMS = {
    (KeyType.OKP, Curve.Ed25519): Algorithm.EdDSA,
    (KeyType.EC, Curve.P256): Algorithm.ES256,
    (KeyType.EC, Curve.P384): Algorithm.ES384,
    (KeyType.EC, Curve.Secp256k1): Algorithm.ES256K,
    (KeyType.RSA, None): Algorithm.PS256,
}


def key_type_and_curve(jwk):
    """
    Extracts the (KeyType, Curve) pair of a JWK.

    Parameters
    ----------
    jwk: dict

    Returns
    -------
    tuple
        The KeyType and the Curve of the key. The curve is None for RSA keys.

    Raises
    ------
    InvalidKeyMaterial
        If the JWK is not a dictionary or the kty/crv combination is not supported.
    """
    if not isinstance(jwk, dict):
        raise InvalidKeyMaterial("JWK must be a dictionary")

    kty = KeyType.from_str(jwk.get("kty"))
    if kty == KeyType.RSA:
        return kty, None

    crv = Curve.from_str(jwk.get("crv"))
    if (kty, crv) not in RECOMMENDED_ALGORITHMS:
        raise InvalidKeyMaterial(
            "Unsupported curve {} for key type {}".format(crv.value, kty.value)
        )
    return kty, crv


def recommended_alg(jwk):
    """Returns the JWS alg value (str) bound to the key type and curve of the JWK."""
    return RECOMMENDED_ALGORITHMS[key_type_and_curve(jwk)].value
