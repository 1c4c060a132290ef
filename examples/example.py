from pprint import pprint

from lds_jws2020 import JsonWebKeyPair, verify_detached

CONTROLLER = "did:example:123"


def sign_and_verify(kty, crv=None):
    key_pair = JsonWebKeyPair.generate(kty, crv, controller=CONTROLLER)
    print("Generated {} key pair {} (alg: {})".format(kty, key_pair.id, key_pair.alg))

    # The payload is never part of the signature; the verifier needs the same bytes
    payload = b"canonicalized proof options and document"
    signature = key_pair.signer().sign(payload)
    print("Detached JWS: {}".format(signature))

    # Verifiers usually only know the public key node of the verification method
    public_node = key_pair.public_node()
    pprint(public_node)

    verify_only = JsonWebKeyPair.from_public_node(public_node)
    assert verify_detached(verify_only, payload, signature)
    assert not verify_detached(verify_only, payload + b"!", signature)
    assert verify_only.verify_fingerprint(key_pair.fingerprint())["valid"]


if __name__ == "__main__":
    sign_and_verify("OKP", "Ed25519")
    sign_and_verify("EC", "P-256")
    sign_and_verify("EC", "secp256k1")
    sign_and_verify("RSA")
