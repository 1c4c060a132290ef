class LdsJwsError(Exception):
    pass


class InvalidKeyMaterial(LdsJwsError, ValueError):
    pass


class NoPrivateKey(LdsJwsError):
    pass


class NoPublicKey(LdsJwsError):
    pass


class MalformedSignature(LdsJwsError):
    pass


class InvalidHeader(LdsJwsError):
    pass


class AlgorithmMismatch(InvalidHeader):
    pass


class DeprecatedConfiguration(LdsJwsError):
    pass
