import hashlib

from lds_jws2020.encoding import b64url_encode, canonical_json
from lds_jws2020.enums import KeyType
from lds_jws2020.exceptions import InvalidKeyMaterial

# RFC 7638, section 3.2
REQUIRED_MEMBERS = {
    KeyType.EC: ("crv", "kty", "x", "y"),
    KeyType.OKP: ("crv", "kty", "x"),
    KeyType.RSA: ("e", "kty", "n"),
}


def canonical_members(jwk):
    """
    Returns a new dictionary containing only the members of the JWK that take part in its thumbprint.

    Parameters
    ----------
    jwk: dict

    Returns
    -------
    dict

    Raises
    ------
    InvalidKeyMaterial
        If the kty is unknown or a required member is missing or not a string.
    """
    if not isinstance(jwk, dict):
        raise InvalidKeyMaterial("JWK must be a dictionary")

    kty = KeyType.from_str(jwk.get("kty"))
    members = {}
    for name in REQUIRED_MEMBERS[kty]:
        value = jwk.get(name)
        if type(value) is not str or not value:
            raise InvalidKeyMaterial(
                "{} JWK is missing required member: {}".format(kty.value, name)
            )
        members[name] = value
    return members


def thumbprint(jwk):
    """
    Computes the RFC 7638 thumbprint of a JWK.

    Any member other than the required ones, `kid` included, is ignored, so the thumbprint always reflects the key
    material itself.

    Parameters
    ----------
    jwk: dict

    Returns
    -------
    str
        The base64url-encoded SHA-256 digest of the canonical JWK.
    """
    return b64url_encode(hashlib.sha256(canonical_json(canonical_members(jwk))).digest())
