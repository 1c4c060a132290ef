"""
Detached JWS with unencoded payload (RFC 7797), as used by the JsonWebSignature2020 suite.

A detached signature has the form `<protected header>..<signature>`: the payload segment is empty and the signing
input is the ASCII protected header, a dot and the raw (not base64url-encoded) payload bytes.
"""
import json
import logging

from lds_jws2020.constants import CRITICAL_HEADERS, DETACHED_SEPARATOR
from lds_jws2020.encoding import b64url_decode, b64url_encode, canonical_json
from lds_jws2020.exceptions import (
    AlgorithmMismatch,
    InvalidHeader,
    MalformedSignature,
    NoPrivateKey,
    NoPublicKey,
)
from lds_jws2020.provider import default_provider
from lds_jws2020.schema import validate_detached_jws_header

logger = logging.getLogger(__name__)


def detached_header(alg):
    return {"alg": alg, "b64": False, "crit": list(CRITICAL_HEADERS)}


def signing_input(encoded_header, payload):
    return encoded_header.encode("ascii") + b"." + bytes(payload)


def sign_detached(key_pair, payload, provider=None):
    """
    Creates a detached JWS over the payload.

    Parameters
    ----------
    key_pair: JsonWebKeyPair
        The key pair to sign with. Must hold a private key.
    payload: bytes
        The data to sign. It is not included in the result.
    provider: CryptoProvider, optional
        Defaults to the provider of the key pair.

    Returns
    -------
    str
        The detached JWS.

    Raises
    ------
    NoPrivateKey
        If the key pair has no private key.
    TypeError
        If the payload is not a bytes-like object.
    """
    if not key_pair.private_key_jwk:
        raise NoPrivateKey("No private key to sign with.")
    _check_payload(payload)
    provider = provider or _provider_of(key_pair)

    encoded_header = b64url_encode(canonical_json(detached_header(key_pair.alg)))
    signature = provider.sign(
        key_pair.private_key_jwk, signing_input(encoded_header, payload), key_pair.alg
    )
    return encoded_header + DETACHED_SEPARATOR + b64url_encode(signature)


def verify_detached(key_pair, payload, signature, provider=None):
    """
    Verifies a detached JWS over the payload.

    The protected header must be exactly {"alg": <alg of the key pair>, "b64": false, "crit": ["b64"]}. Malformed
    input raises; a signature that does not verify returns False.

    Parameters
    ----------
    key_pair: JsonWebKeyPair
    payload: bytes
        The data that was (allegedly) signed.
    signature: str
        The detached JWS.
    provider: CryptoProvider, optional
        Defaults to the provider of the key pair.

    Returns
    -------
    bool
        True if the header is valid and the signature verifies, False otherwise.

    Raises
    ------
    NoPublicKey
        If the key pair has no public key.
    MalformedSignature
        If the signature does not consist of a header and a signature segment separated by "..".
    InvalidHeader
        If the header cannot be decoded or does not have the expected members.
    AlgorithmMismatch
        If the header alg is not the alg of the key pair.
    """
    if not key_pair.public_key_jwk:
        raise NoPublicKey("No public key to verify with.")
    _check_payload(payload)
    provider = provider or _provider_of(key_pair)

    encoded_header, encoded_signature = _split(signature)
    header = _decode_header(encoded_header)
    if header.get("alg") != key_pair.alg:
        raise AlgorithmMismatch(
            "Invalid JWS header, expected {} === {}.".format(
                header.get("alg"), key_pair.alg
            )
        )
    validate_detached_jws_header(header)

    return _verify_signature(
        provider,
        key_pair,
        signing_input(encoded_header, payload),
        encoded_signature,
    )


def _verify_signature(provider, key_pair, data, encoded_signature):
    try:
        signature = b64url_decode(encoded_signature)
        return bool(
            provider.verify(key_pair.public_key_jwk, data, signature, key_pair.alg)
        )
    except Exception as e:
        # The header has been validated at this point; anything raised here means the signature does not verify
        logger.debug("An error occurred when verifying signature: %s", e, exc_info=True)
        return False


def _split(signature):
    if type(signature) is not str:
        raise MalformedSignature("Detached JWS must be a string")
    segments = signature.split(DETACHED_SEPARATOR)
    if len(segments) != 2 or not segments[0]:
        raise MalformedSignature(
            "Detached JWS must have the form <header>{}<signature>".format(
                DETACHED_SEPARATOR
            )
        )
    return segments


def _decode_header(encoded_header):
    try:
        header = json.loads(b64url_decode(encoded_header).decode("utf-8"))
    except (ValueError, UnicodeDecodeError) as e:
        raise InvalidHeader("Could not parse JWS header; {}".format(e))
    if not isinstance(header, dict):
        raise InvalidHeader("Invalid JWS header.")
    return header


def _check_payload(payload):
    if not isinstance(payload, (bytes, bytearray, memoryview)):
        raise TypeError("Payload must be bytes")


def _provider_of(key_pair):
    return getattr(key_pair, "provider", None) or default_provider


class Signer:
    """Signs proof data with a key pair, for use by a linked-data proof suite."""

    def __init__(self, key_pair):
        self.key_pair = key_pair

    @property
    def id(self):
        return self.key_pair.id

    @property
    def alg(self):
        return self.key_pair.alg

    def sign(self, data):
        return sign_detached(self.key_pair, data)


class Verifier:
    """Verifies proof data against a key pair, for use by a linked-data proof suite."""

    def __init__(self, key_pair):
        self.key_pair = key_pair

    @property
    def id(self):
        return self.key_pair.id

    @property
    def alg(self):
        return self.key_pair.alg

    def verify(self, data, signature):
        return verify_detached(self.key_pair, data, signature)
