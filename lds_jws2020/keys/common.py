from lds_jws2020.exceptions import InvalidKeyMaterial
from lds_jws2020.thumbprint import REQUIRED_MEMBERS, canonical_members


def ensure_matching_public_key(derived_public_jwk, kty, *jwks):
    """
    Checks that every given JWK describes the public key derived from the private key.

    JWKs that carry none of the public members of their key type (e.g. a private JWK holding only `d`) are skipped.

    Raises
    ------
    InvalidKeyMaterial
        If one of the JWKs describes a different public key.
    """
    public_members = [
        name for name in REQUIRED_MEMBERS[kty] if name not in ("kty", "crv")
    ]
    expected = canonical_members(derived_public_jwk)
    for jwk in jwks:
        if jwk is None or not any(name in jwk for name in public_members):
            continue
        if canonical_members(jwk) != expected:
            raise InvalidKeyMaterial(
                "The provided public key does not match the one derived "
                "from the provided private key"
            )
