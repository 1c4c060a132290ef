import hashlib

import ecdsa
from ecdsa.curves import NIST256p, NIST384p, SECP256k1
from ecdsa.keys import BadSignatureError

from lds_jws2020.encoding import b64url_decode, b64url_encode
from lds_jws2020.enums import Curve, KeyType
from lds_jws2020.exceptions import InvalidKeyMaterial
from lds_jws2020.keys.common import ensure_matching_public_key

# JWK curve -> (ecdsa curve, hash function used by the matching JWS alg)
CURVES = {
    Curve.P256: (NIST256p, hashlib.sha256),
    Curve.P384: (NIST384p, hashlib.sha384),
    Curve.Secp256k1: (SECP256k1, hashlib.sha256),
}


class ECKey:
    """
    Representation of an elliptic curve key on one of the NIST P-256, P-384 or secp256k1 curves. Instances of this
    class allow signing of messages and signature verification, as well as key creation and derivation of a public
    key from a private key.

    Signatures are the fixed-length concatenation of R and S, as required by JWS (RFC 7518, section 3.4).
    """

    def __init__(self, public_jwk=None, private_jwk=None, crv=Curve.P256):
        """
        Creates an ECKey object.

        If both the public and private JWKs are not provided, it will generate a new key pair on the given curve.
        If both are provided, it will check that the public key corresponds to the private key.
        If only a private JWK is provided, it will derive the public key.
        If only a public JWK is provided, signing will not work, but signature verification is possible.

        Parameters
        ----------
        public_jwk: dict (optional)
        private_jwk: dict (optional)
        crv: Curve (optional)
            The curve used when generating a new key. Ignored when a JWK is provided.

        Raises
        ------
        InvalidKeyMaterial
            If a JWK is malformed, is not on a supported curve, or if the public and private JWKs do not match
        """
        jwk = private_jwk if private_jwk is not None else public_jwk
        if jwk is not None:
            if jwk.get("kty") != KeyType.EC.value:
                raise InvalidKeyMaterial("Expected an EC JWK")
            crv = Curve.from_str(jwk.get("crv"))
        if crv not in CURVES:
            raise InvalidKeyMaterial("Unsupported EC curve: {}".format(crv))

        self.crv = crv
        self.curve, self.hash_f = CURVES[crv]
        self._derive_signing_and_verifying_key(public_jwk, private_jwk)

    def __repr__(self):
        return "<{}.{}(crv={}, public_key={}, private_key=({}))>".format(
            self.__module__,
            type(self).__name__,
            self.crv.value,
            b64url_encode(self.verifying_key.to_string()),
            "hidden" if self.signing_key is not None else "not set",
        )

    @property
    def public_jwk(self):
        point = self.verifying_key.to_string()
        return {
            "kty": KeyType.EC.value,
            "crv": self.crv.value,
            "x": b64url_encode(point[: self.curve.baselen]),
            "y": b64url_encode(point[self.curve.baselen :]),
        }

    @property
    def private_jwk(self):
        if self.signing_key is None:
            return None
        jwk = self.public_jwk
        jwk["d"] = b64url_encode(self.signing_key.to_string())
        return jwk

    def sign(self, message):
        """
        Signs a message with the existing private key.

        Parameters
        ----------
        message: bytes

        Returns
        -------
        bytes
            The R || S signature.

        Raises
        ------
        AssertionError
            If the supplied message is not bytes, or if a private key has not been specified.
        """
        assert type(message) is bytes, "Message must be bytes."
        assert self.signing_key is not None, "Signing key is not set."

        return self.signing_key.sign_deterministic(message, hashfunc=self.hash_f)

    def verify(self, message, signature):
        """
        Verifies the signature of the given message

        Parameters
        ----------
        message: bytes
            The (allegedly) signed message.
        signature: bytes
            The signature to verify.

        Returns
        -------
        bool
            True if the signature is successfully verified, False otherwise.
        """
        assert type(message) is bytes, "Message must be bytes"
        assert type(signature) is bytes, "Signature must be bytes"

        try:
            return self.verifying_key.verify(signature, message, hashfunc=self.hash_f)
        except BadSignatureError:
            return False

    def _decode_coordinate(self, jwk, name):
        try:
            value = b64url_decode(jwk.get(name))
        except ValueError:
            raise InvalidKeyMaterial(
                "EC JWK member {} must be a base64url string".format(name)
            )
        if len(value) != self.curve.baselen:
            raise InvalidKeyMaterial(
                "EC JWK member {} must be {} bytes long for curve {}".format(
                    name, self.curve.baselen, self.crv.value
                )
            )
        return value

    def _signing_key_from_jwk(self, private_jwk):
        secret = self._decode_coordinate(private_jwk, "d")
        try:
            return ecdsa.SigningKey.from_string(secret, curve=self.curve)
        except (AssertionError, ValueError):
            raise InvalidKeyMaterial(
                "Invalid EC private key. Must be a {}-byte secret exponent.".format(
                    self.curve.baselen
                )
            )

    def _verifying_key_from_jwk(self, public_jwk):
        point = self._decode_coordinate(public_jwk, "x") + self._decode_coordinate(
            public_jwk, "y"
        )
        try:
            return ecdsa.VerifyingKey.from_string(point, curve=self.curve)
        except (AssertionError, ValueError):
            raise InvalidKeyMaterial(
                "Invalid EC public key. Must be a point on curve {}.".format(
                    self.crv.value
                )
            )

    def _derive_signing_and_verifying_key(self, public_jwk, private_jwk):
        # If neither the public, nor the private key is set, generate the key pair and return
        if public_jwk is None and private_jwk is None:
            self.signing_key = ecdsa.SigningKey.generate(curve=self.curve)
            self.verifying_key = self.signing_key.get_verifying_key()
            return

        # If the private key is set, derive the public key from it and verify that any provided
        # public members are matching
        if private_jwk is not None:
            self.signing_key = self._signing_key_from_jwk(private_jwk)
            self.verifying_key = self.signing_key.get_verifying_key()
            ensure_matching_public_key(
                self.public_jwk, KeyType.EC, private_jwk, public_jwk
            )
            return

        self.signing_key = None
        self.verifying_key = self._verifying_key_from_jwk(public_jwk)
