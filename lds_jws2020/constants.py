from os.path import abspath, dirname, join

DEFAULT_KEY_TYPE = "JsonWebKey2020"
SIGNATURE_SUITE = "JsonWebSignature2020"

# Protected header members of the unencoded-payload profile (RFC 7797)
CRITICAL_HEADERS = ["b64"]
DETACHED_SEPARATOR = ".."

DEFAULT_RSA_KEY_SIZE = 2048

SCHEMA_DIR = join(dirname(abspath(__file__)), "schemas")
