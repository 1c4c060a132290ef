from enum import Enum

from lds_jws2020.exceptions import InvalidKeyMaterial

__all__ = ["KeyType", "Curve", "Algorithm"]


class KeyType(Enum):
    EC = "EC"
    OKP = "OKP"
    RSA = "RSA"

    @staticmethod
    def from_str(string):
        if string == "EC":
            return KeyType.EC
        elif string == "OKP":
            return KeyType.OKP
        elif string == "RSA":
            return KeyType.RSA
        else:
            raise InvalidKeyMaterial("Unknown key type (kty): {}".format(string))


class Curve(Enum):
    Ed25519 = "Ed25519"
    P256 = "P-256"
    P384 = "P-384"
    Secp256k1 = "secp256k1"

    @staticmethod
    def from_str(string):
        if string == "Ed25519":
            return Curve.Ed25519
        elif string == "P-256":
            return Curve.P256
        elif string == "P-384":
            return Curve.P384
        elif string == "secp256k1":
            return Curve.Secp256k1
        else:
            raise InvalidKeyMaterial("Unknown curve (crv): {}".format(string))


class Algorithm(Enum):
    EdDSA = "EdDSA"
    ES256 = "ES256"
    ES384 = "ES384"
    ES256K = "ES256K"
    PS256 = "PS256"

    @staticmethod
    def from_str(string):
        for alg in Algorithm:
            if alg.value == string:
                return alg
        raise InvalidKeyMaterial("Unknown JWS algorithm: {}".format(string))
