from Crypto.Hash import SHA256
from Crypto.PublicKey import RSA
from Crypto.Signature import pss
from Crypto.Util.number import inverse

from lds_jws2020.constants import DEFAULT_RSA_KEY_SIZE
from lds_jws2020.encoding import b64url_to_int, int_to_b64url
from lds_jws2020.enums import KeyType
from lds_jws2020.exceptions import InvalidKeyMaterial
from lds_jws2020.keys.common import ensure_matching_public_key


class RSAKey:
    """
    Representation of an RSA key. Instances of this class allow signing of messages and signature verification, as
    well as key creation and derivation of a public key from a private key.

    Signatures use RSASSA-PSS with SHA-256 and MGF1, with a salt as long as the digest (JWS PS256).
    """

    def __init__(self, public_jwk=None, private_jwk=None, key_size=DEFAULT_RSA_KEY_SIZE):
        """
        Creates an RSAKey object.

        If both the public and private JWKs are not provided, it will generate a new key pair.
        If both are provided, it will check that the public key corresponds to the private key.
        If only a private JWK is provided, it will derive the public key.
        If only a public JWK is provided, signing will not work, but signature verification is possible.

        Parameters
        ----------
        public_jwk: dict (optional)
        private_jwk: dict (optional)
        key_size: int (optional)
            The modulus size in bits used when generating a new key.

        Raises
        ------
        InvalidKeyMaterial
            If a JWK is malformed, or if the public and private JWKs do not match
        """
        for jwk in (public_jwk, private_jwk):
            if jwk is not None and jwk.get("kty") != KeyType.RSA.value:
                raise InvalidKeyMaterial("Expected an RSA JWK")
        self.key_size = key_size
        self._derive_signing_and_verifying_key(public_jwk, private_jwk)

    def __repr__(self):
        return "<{}.{}(public_key={}, private_key=({}))>".format(
            self.__module__,
            type(self).__name__,
            self._minify_public_key(),
            "hidden" if self.signing_key is not None else "not set",
        )

    @property
    def public_jwk(self):
        return {
            "kty": KeyType.RSA.value,
            "n": int_to_b64url(self.verifying_key.n),
            "e": int_to_b64url(self.verifying_key.e),
        }

    @property
    def private_jwk(self):
        if self.signing_key is None:
            return None
        key = self.signing_key
        jwk = self.public_jwk
        jwk.update(
            {
                "d": int_to_b64url(key.d),
                "p": int_to_b64url(key.p),
                "q": int_to_b64url(key.q),
                "dp": int_to_b64url(key.d % (key.p - 1)),
                "dq": int_to_b64url(key.d % (key.q - 1)),
                "qi": int_to_b64url(inverse(key.q, key.p)),
            }
        )
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
            The bytes of the signature.

        Raises
        ------
        AssertionError
            If the supplied message is not bytes, or if a private key has not been specified.
        """
        assert type(message) is bytes, "Message must be bytes."
        assert self.signing_key is not None, "Signing key is not set."

        return pss.new(self.signing_key).sign(SHA256.new(message))

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
            pss.new(self.verifying_key).verify(SHA256.new(message), signature)
        except (ValueError, TypeError):
            return False
        else:
            return True

    def _minify_public_key(self):
        n = self.public_jwk["n"]
        return "{0}...{1}".format(n[:20], n[-8:])

    @staticmethod
    def _decode_members(jwk, names):
        try:
            return tuple(b64url_to_int(jwk[name]) for name in names)
        except KeyError as e:
            raise InvalidKeyMaterial(
                "RSA JWK is missing required member: {}".format(e.args[0])
            )
        except ValueError:
            raise InvalidKeyMaterial("RSA JWK members must be base64url strings")

    def _derive_signing_and_verifying_key(self, public_jwk, private_jwk):
        # If neither the public, nor the private key is set, generate the key pair and return
        if public_jwk is None and private_jwk is None:
            self.signing_key = RSA.generate(self.key_size)
            self.verifying_key = self.signing_key.publickey()
            return

        # If the private key is set, derive the public key from it and verify that any provided
        # public members are matching
        if private_jwk is not None:
            components = self._decode_members(private_jwk, ("n", "e", "d"))
            if "p" in private_jwk and "q" in private_jwk:
                components += self._decode_members(private_jwk, ("p", "q"))
            try:
                self.signing_key = RSA.construct(components)
            except ValueError:
                raise InvalidKeyMaterial("Invalid RSA private key.")
            self.verifying_key = self.signing_key.publickey()
            ensure_matching_public_key(
                self.public_jwk, KeyType.RSA, private_jwk, public_jwk
            )
            return

        components = self._decode_members(public_jwk, ("n", "e"))
        try:
            self.signing_key = None
            self.verifying_key = RSA.construct(components)
        except ValueError:
            raise InvalidKeyMaterial("Invalid RSA public key.")
