import copy

from lds_jws2020.algorithms import key_type_and_curve, recommended_alg
from lds_jws2020.constants import DEFAULT_KEY_TYPE
from lds_jws2020.exceptions import DeprecatedConfiguration, InvalidKeyMaterial
from lds_jws2020.jws import Signer, Verifier
from lds_jws2020.provider import default_provider
from lds_jws2020.schema import validate_public_jwk

ALG_MAPPING_URL = "https://github.com/w3c-ccg/lds-jws2020"


class JsonWebKeyPair:
    """
    A JsonWebKey2020 key pair, bound to a linked-data verification method.

    Attributes
    ----------
    id: str
        The verification method identifier. Defaults to `<controller>#<JWK thumbprint>`.
    type: str
        The verification method type.
    controller: str, optional
        The entity (e.g. a DID) controlling the key.
    public_key_jwk: dict
        The JWK encoded public key.
    private_key_jwk: dict, optional
        The JWK encoded private key. Key pairs without one can only verify.
    alg: str
        The JWS alg for this key, derived from the key type and curve of the public key.
    provider: CryptoProvider
        The cryptographic primitives used for signing and verification.
    """

    def __init__(
        self,
        id=None,
        type=DEFAULT_KEY_TYPE,
        controller=None,
        public_key_jwk=None,
        private_key_jwk=None,
        alg=None,
        provider=None,
    ):
        if alg is not None:
            raise DeprecatedConfiguration(
                "alg is no longer allowed. See the mapping table here: {}".format(
                    ALG_MAPPING_URL
                )
            )
        if public_key_jwk is None and private_key_jwk is None:
            raise InvalidKeyMaterial("Either a public or a private JWK is required")
        for jwk in (public_key_jwk, private_key_jwk):
            if jwk is not None and not isinstance(jwk, dict):
                raise InvalidKeyMaterial("JWK must be a dictionary")

        self._provider = provider or default_provider
        self._type = type
        self._controller = controller
        self._private_key_jwk = copy.deepcopy(private_key_jwk)

        if public_key_jwk is None:
            public_key_jwk = self.provider.public_key_from_private(private_key_jwk)
            kty, _ = key_type_and_curve(public_key_jwk)
            validate_public_jwk(public_key_jwk, kty)
        else:
            kty, _ = key_type_and_curve(public_key_jwk)
            validate_public_jwk(public_key_jwk, kty)
            # Raises if the public key is not a valid key or not the one of the private key
            self.provider.load_key(public_key_jwk, private_key_jwk)
        self._public_key_jwk = copy.deepcopy(public_key_jwk)

        self._alg = recommended_alg(self._public_key_jwk)
        self._id = id if id is not None else "{}#{}".format(
            controller or "", self.fingerprint()
        )

    def __eq__(self, other):
        if self.__class__ is other.__class__:
            return (
                self.id,
                self.type,
                self.controller,
                self._public_key_jwk,
                self._private_key_jwk,
            ) == (
                other.id,
                other.type,
                other.controller,
                other._public_key_jwk,
                other._private_key_jwk,
            )
        return NotImplemented

    def __repr__(self):
        return "<{}.{}(id={}, type={}, controller={}, alg={}, private_key=({}))>".format(
            self.__module__,
            type(self).__name__,
            self.id,
            self.type,
            self.controller,
            self.alg,
            "hidden" if self._private_key_jwk is not None else "not set",
        )

    @property
    def id(self):
        return self._id

    @property
    def alg(self):
        return self._alg

    @property
    def type(self):
        return self._type

    @property
    def controller(self):
        return self._controller

    @property
    def provider(self):
        return self._provider

    @property
    def public_key_jwk(self):
        return copy.deepcopy(self._public_key_jwk)

    @property
    def private_key_jwk(self):
        return copy.deepcopy(self._private_key_jwk)

    @property
    def public_key(self):
        return self.public_key_jwk

    @property
    def private_key(self):
        return self.private_key_jwk

    @staticmethod
    def generate(kty, crv=None, provider=None, **options):
        """
        Generates a key pair with fresh key material.

        Parameters
        ----------
        kty: KeyType or str
            One of "OKP", "EC" or "RSA".
        crv: Curve or str, optional
            The curve for OKP and EC keys.
        provider: CryptoProvider, optional
        options:
            Any other JsonWebKeyPair constructor arguments (id, type, controller).

        Returns
        -------
        JsonWebKeyPair
        """
        provider = provider or default_provider
        private_key_jwk, public_key_jwk = provider.generate_key_pair(kty, crv)
        return JsonWebKeyPair(
            public_key_jwk=public_key_jwk,
            private_key_jwk=private_key_jwk,
            provider=provider,
            **options
        )

    @staticmethod
    def from_options(options, provider=None):
        """
        Creates a key pair from a dictionary using the JSON-LD member names (`id`, `type`, `controller`,
        `publicKeyJwk`, `privateKeyJwk`).

        Raises
        ------
        DeprecatedConfiguration
            If the dictionary contains an `alg` member.
        """
        return JsonWebKeyPair(
            id=options.get("id"),
            type=options.get("type", DEFAULT_KEY_TYPE),
            controller=options.get("controller"),
            public_key_jwk=options.get("publicKeyJwk"),
            private_key_jwk=options.get("privateKeyJwk"),
            alg=options.get("alg"),
            provider=provider,
        )

    @staticmethod
    def from_public_node(public_node, provider=None):
        """
        Creates a verify-only key pair from a public key node, as produced by `public_node`.

        Parameters
        ----------
        public_node: dict
        provider: CryptoProvider, optional

        Returns
        -------
        JsonWebKeyPair

        Raises
        ------
        InvalidKeyMaterial
            If the node has no `publicKeyJwk` member.
        """
        if "publicKeyJwk" not in public_node:
            raise InvalidKeyMaterial("Public key node has no publicKeyJwk member")
        return JsonWebKeyPair(
            id=public_node.get("id"),
            type=public_node.get("type", DEFAULT_KEY_TYPE),
            controller=public_node.get("controller"),
            public_key_jwk=public_node["publicKeyJwk"],
            provider=provider,
        )

    def signer(self):
        """
        Returns a signer object for use with linked-data signatures.

        Signing with a key pair that has no private key raises NoPrivateKey.
        """
        return Signer(self)

    def verifier(self):
        """Returns a verifier object for use with linked-data signatures."""
        return Verifier(self)

    def fingerprint(self):
        """
        Generates and returns the RFC 7638 thumbprint of the public key.

        Returns
        -------
        str
        """
        return self.provider.jwk_thumbprint(self._public_key_jwk)

    @staticmethod
    def fingerprint_from_public_key(public_key_jwk, provider=None):
        return (provider or default_provider).jwk_thumbprint(public_key_jwk)

    def verify_fingerprint(self, fingerprint):
        """
        Tests whether the fingerprint was generated from this key pair.

        Parameters
        ----------
        fingerprint: str
            An RFC 7638 JWK thumbprint.

        Returns
        -------
        dict
            `valid` is True if the fingerprint matches the public key. `error` holds the reason when it does not.
        """
        if type(fingerprint) is not str:
            return {
                "valid": False,
                "error": TypeError("`fingerprint` must be a string."),
            }
        if fingerprint != self.fingerprint():
            return {
                "valid": False,
                "error": ValueError(
                    "The fingerprint does not match the public key of this key pair."
                ),
            }
        return {"valid": True, "error": None}

    def add_encoded_public_key(self, public_key_node):
        """
        Adds the JWK encoded public key to a public key node.

        Parameters
        ----------
        public_key_node: dict

        Returns
        -------
        dict
            The same node, with a `publicKeyJwk` member.
        """
        public_key_node["publicKeyJwk"] = self.public_key_jwk
        return public_key_node

    def public_node(self, controller=None):
        """
        Contains the public key of the key pair and the other information linked-data signatures need to form a proof.

        Parameters
        ----------
        controller: str, optional
            The entity controlling the key pair. Defaults to the controller of the key pair.

        Returns
        -------
        dict
            Dictionary with `id`, `type`, `publicKeyJwk` and, if there is a controller, `controller` fields.
        """
        controller = controller or self.controller
        node = {"id": self.id, "type": self.type}
        if controller:
            node["controller"] = controller
        return self.add_encoded_public_key(node)

    def to_dict(self, include_private_key=False):
        """Exports the key pair using the JSON-LD member names."""
        d = self.public_node()
        if include_private_key and self._private_key_jwk is not None:
            d["privateKeyJwk"] = self.private_key_jwk
        return d
