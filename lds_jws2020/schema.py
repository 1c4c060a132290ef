from os.path import join

import jsonref
from jsonschema.exceptions import ValidationError
from jsonschema.validators import validator_for

from lds_jws2020.constants import SCHEMA_DIR
from lds_jws2020.enums import KeyType
from lds_jws2020.exceptions import InvalidHeader, InvalidKeyMaterial

DETACHED_JWS_HEADER_SCHEMA = "detached_jws_header.json"
PUBLIC_JWK_SCHEMAS = {
    KeyType.EC: "ec_public_jwk.json",
    KeyType.OKP: "okp_public_jwk.json",
    KeyType.RSA: "rsa_public_jwk.json",
}


def _load_json_schema(filename):
    """Loads the given schema file"""

    absolute_path = join(SCHEMA_DIR, filename)
    base_uri = "file://{}/".format(SCHEMA_DIR)

    with open(absolute_path) as schema_file:
        return jsonref.loads(
            schema_file.read(), base_uri=base_uri, jsonschema=True, proxies=False
        )


def get_schema_validator(schema_file):
    """Instantiates the jsonschema.Validator instance for the given schema

    Parameters
    ----------
    schema_file: str
        The filename of the JSON schema, relative to the package schema directory

    Returns
    -------
    jsonschema.Validator
        The validator instance for the given schema
    """
    schema = _load_json_schema(schema_file)
    cls = validator_for(schema)
    cls.check_schema(schema)
    return cls(schema)


HEADER_VALIDATOR = get_schema_validator(DETACHED_JWS_HEADER_SCHEMA)
PUBLIC_JWK_VALIDATORS = {
    kty: get_schema_validator(filename) for kty, filename in PUBLIC_JWK_SCHEMAS.items()
}


def validate_public_jwk(jwk, kty):
    """
    Validates a public JWK against the schema of its key type.

    Raises
    ------
    InvalidKeyMaterial
        If the JWK is missing required members, has malformed members or carries private key members.
    """
    try:
        PUBLIC_JWK_VALIDATORS[kty].validate(jwk)
    except ValidationError as e:
        raise InvalidKeyMaterial(
            "Invalid {} public JWK: {}".format(kty.value, e.message)
        )


def validate_detached_jws_header(header):
    """
    Validates that a protected header is exactly {"alg", "b64": false, "crit": ["b64"]}.

    Raises
    ------
    InvalidHeader
        If the header has missing or extra members, or unexpected values.
    """
    try:
        HEADER_VALIDATOR.validate(header)
    except ValidationError as e:
        raise InvalidHeader("Invalid JWS header parameters: {}".format(e.message))
