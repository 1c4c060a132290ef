import logging

from lds_jws2020.algorithms import key_type_and_curve, recommended_alg
from lds_jws2020.enums import Curve, KeyType
from lds_jws2020.exceptions import AlgorithmMismatch, InvalidKeyMaterial
from lds_jws2020.keys.ec import ECKey
from lds_jws2020.keys.okp import Ed25519Key
from lds_jws2020.keys.rsa import RSAKey
from lds_jws2020.thumbprint import thumbprint

logger = logging.getLogger(__name__)

DEFAULT_CURVES = {KeyType.OKP: Curve.Ed25519, KeyType.EC: Curve.P256}


class CryptoProvider:
    """
    Asymmetric primitives used by key pairs and the detached JWS codec, operating on JWKs.

    Key pairs and the codec receive a provider explicitly, so that it can be replaced, e.g. by a test double returning
    fixed signatures. Subclasses need to override `generate_key_pair`, `public_key_from_private`, `sign` and `verify`.
    """

    def generate_key_pair(self, kty, crv=None):
        """
        Generates fresh key material.

        Parameters
        ----------
        kty: KeyType or str
        crv: Curve or str, optional
            Defaults to Ed25519 for OKP and P-256 for EC keys. Must not be set for RSA keys.

        Returns
        -------
        tuple
            The private JWK and the public JWK.

        Raises
        ------
        InvalidKeyMaterial
            If the key type/curve combination is not supported.
        """
        if not isinstance(kty, KeyType):
            kty = KeyType.from_str(kty)
        if crv is not None and not isinstance(crv, Curve):
            crv = Curve.from_str(crv)
        if crv is None:
            crv = DEFAULT_CURVES.get(kty)

        if kty == KeyType.OKP:
            if crv != Curve.Ed25519:
                raise InvalidKeyMaterial("Unsupported OKP curve: {}".format(crv.value))
            key = Ed25519Key()
        elif kty == KeyType.EC:
            key = ECKey(crv=crv)
        elif kty == KeyType.RSA:
            if crv is not None:
                raise InvalidKeyMaterial("RSA keys do not have a curve")
            key = RSAKey()
        else:
            raise NotImplementedError("Unsupported key type: {}".format(kty.value))

        logger.debug("Generated a new %s key pair", kty.value)
        return key.private_jwk, key.public_jwk

    def public_key_from_private(self, private_jwk):
        """Derives the public JWK from a private JWK."""
        return self.load_key(private_jwk=private_jwk).public_jwk

    def sign(self, private_jwk, data, alg):
        """
        Signs data with the private key.

        Raises
        ------
        AlgorithmMismatch
            If `alg` is not the algorithm bound to the key.
        """
        self._check_alg(private_jwk, alg)
        return self.load_key(private_jwk=private_jwk).sign(bytes(data))

    def verify(self, public_jwk, data, signature, alg):
        """
        Verifies a signature over data with the public key.

        Returns
        -------
        bool
            True if the signature is valid, False otherwise.
        """
        self._check_alg(public_jwk, alg)
        return self.load_key(public_jwk=public_jwk).verify(bytes(data), bytes(signature))

    def jwk_thumbprint(self, jwk):
        return thumbprint(jwk)

    @staticmethod
    def load_key(public_jwk=None, private_jwk=None):
        """
        Instantiates the key object matching the type of the given JWK(s).

        Returns
        -------
        ECKey or Ed25519Key or RSAKey
        """
        jwk = private_jwk if private_jwk is not None else public_jwk
        kty, _ = key_type_and_curve(jwk)
        if public_jwk is not None:
            key_type_and_curve(public_jwk)

        if kty == KeyType.OKP:
            return Ed25519Key(public_jwk, private_jwk)
        elif kty == KeyType.EC:
            return ECKey(public_jwk, private_jwk)
        elif kty == KeyType.RSA:
            return RSAKey(public_jwk, private_jwk)
        else:
            raise NotImplementedError("Unsupported key type: {}".format(kty.value))

    @staticmethod
    def _check_alg(jwk, alg):
        expected = recommended_alg(jwk)
        if alg != expected:
            raise AlgorithmMismatch(
                "Key of type {} must be used with {}, not {}".format(
                    jwk.get("kty"), expected, alg
                )
            )


default_provider = CryptoProvider()
