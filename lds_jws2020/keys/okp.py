from Crypto.PublicKey import ECC
from Crypto.Signature import eddsa

from lds_jws2020.encoding import b64url_decode, b64url_encode
from lds_jws2020.enums import Curve, KeyType
from lds_jws2020.exceptions import InvalidKeyMaterial
from lds_jws2020.keys.common import ensure_matching_public_key


class Ed25519Key:
    """
    Representation of an Ed25519 octet key pair (OKP). Instances of this class allow signing of messages and signature
    verification, as well as key creation and derivation of a public key from a private key.
    """

    def __init__(self, public_jwk=None, private_jwk=None):
        """
        Creates an Ed25519Key object.

        If both the public and private JWKs are not provided, it will generate a new key pair.
        If both are provided, it will check that the public key corresponds to the private key.
        If only a private JWK is provided, it will derive the public key.
        If only a public JWK is provided, signing will not work, but signature verification is possible.

        Parameters
        ----------
        public_jwk: dict (optional)
        private_jwk: dict (optional)

        Raises
        ------
        InvalidKeyMaterial
            If a JWK is malformed, or if the public and private JWKs do not match
        """
        for jwk in (public_jwk, private_jwk):
            if jwk is not None and (
                jwk.get("kty") != KeyType.OKP.value
                or jwk.get("crv") != Curve.Ed25519.value
            ):
                raise InvalidKeyMaterial("Expected an OKP JWK on curve Ed25519")
        self._derive_signing_and_verifying_key(public_jwk, private_jwk)

    def __repr__(self):
        return "<{}.{}(public_key={}, private_key=({}))>".format(
            self.__module__,
            type(self).__name__,
            self.public_jwk["x"],
            "hidden" if self.signing_key is not None else "not set",
        )

    @property
    def public_jwk(self):
        return {
            "kty": KeyType.OKP.value,
            "crv": Curve.Ed25519.value,
            "x": b64url_encode(self.verifying_key.export_key(format="raw")),
        }

    @property
    def private_jwk(self):
        if self.signing_key is None:
            return None
        jwk = self.public_jwk
        jwk["d"] = b64url_encode(self.signing_key.seed)
        return jwk

    def sign(self, message):
        """
        Signs a message with the existing private key (pure Ed25519, RFC 8032).

        Parameters
        ----------
        message: bytes

        Returns
        -------
        bytes
            The 64-byte signature.

        Raises
        ------
        AssertionError
            If the supplied message is not bytes, or if a private key has not been specified.
        """
        assert type(message) is bytes, "Message must be bytes."
        assert self.signing_key is not None, "Signing key is not set."

        return eddsa.new(self.signing_key, "rfc8032").sign(message)

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
            eddsa.new(self.verifying_key, "rfc8032").verify(message, signature)
        except ValueError:
            return False
        else:
            return True

    @staticmethod
    def _decode_member(jwk, name):
        try:
            value = b64url_decode(jwk.get(name))
        except ValueError:
            raise InvalidKeyMaterial(
                "OKP JWK member {} must be a base64url string".format(name)
            )
        if len(value) != 32:
            raise InvalidKeyMaterial(
                "Invalid Ed25519 key. Member {} must be a 32-byte value.".format(name)
            )
        return value

    def _derive_signing_and_verifying_key(self, public_jwk, private_jwk):
        # If neither the public, nor the private key is set, generate the key pair and return
        if public_jwk is None and private_jwk is None:
            self.signing_key = ECC.generate(curve="Ed25519")
            self.verifying_key = self.signing_key.public_key()
            return

        # If the private key is set, derive the public key from it and verify that any provided
        # public members are matching
        if private_jwk is not None:
            seed = self._decode_member(private_jwk, "d")
            try:
                self.signing_key = eddsa.import_private_key(seed)
            except ValueError:
                raise InvalidKeyMaterial(
                    "Invalid Ed25519 private key. Must be a 32-byte seed."
                )
            self.verifying_key = self.signing_key.public_key()
            ensure_matching_public_key(
                self.public_jwk, KeyType.OKP, private_jwk, public_jwk
            )
            return

        encoded_point = self._decode_member(public_jwk, "x")
        try:
            self.signing_key = None
            self.verifying_key = eddsa.import_public_key(encoded_point)
        except ValueError:
            raise InvalidKeyMaterial(
                "Invalid Ed25519 public key. Must be a 32-byte encoded curve point."
            )
