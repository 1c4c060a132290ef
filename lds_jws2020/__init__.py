from lds_jws2020.enums import Algorithm, Curve, KeyType
from lds_jws2020.exceptions import (
    AlgorithmMismatch,
    DeprecatedConfiguration,
    InvalidHeader,
    InvalidKeyMaterial,
    LdsJwsError,
    MalformedSignature,
    NoPrivateKey,
    NoPublicKey,
)
from lds_jws2020.jws import sign_detached, verify_detached
from lds_jws2020.key_pair import JsonWebKeyPair
from lds_jws2020.provider import CryptoProvider
from lds_jws2020.thumbprint import thumbprint

__all__ = [
    "Algorithm",
    "AlgorithmMismatch",
    "CryptoProvider",
    "Curve",
    "DeprecatedConfiguration",
    "InvalidHeader",
    "InvalidKeyMaterial",
    "JsonWebKeyPair",
    "KeyType",
    "LdsJwsError",
    "MalformedSignature",
    "NoPrivateKey",
    "NoPublicKey",
    "sign_detached",
    "thumbprint",
    "verify_detached",
]
