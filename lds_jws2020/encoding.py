import base64
import binascii
import json
import re

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data):
    """Base64url-encodes bytes without padding and returns an ASCII string."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(string):
    """
    Decodes an unpadded base64url string.

    Parameters
    ----------
    string: str

    Returns
    -------
    bytes

    Raises
    ------
    ValueError
        If the input is not a string, contains characters outside the base64url alphabet (padding included), or
        is not the canonical encoding of the decoded bytes.
    """
    if type(string) is not str:
        raise ValueError("Base64url input must be a string")
    if not _BASE64URL_RE.fullmatch(string) or len(string) % 4 == 1:
        raise ValueError("Invalid base64url string")
    try:
        data = base64.urlsafe_b64decode(string + "=" * (-len(string) % 4))
    except binascii.Error as e:
        raise ValueError("Invalid base64url string: {}".format(e))
    # Unused trailing bits must be zero, so that every byte string has exactly one encoding
    if b64url_encode(data) != string:
        raise ValueError("Non-canonical base64url string")
    return data


def canonical_json(obj):
    """Serializes to UTF-8 JSON with sorted members and no insignificant whitespace."""
    return json.dumps(
        obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False
    ).encode("utf-8")


def int_to_b64url(value):
    return b64url_encode(value.to_bytes((value.bit_length() + 7) // 8 or 1, "big"))


def b64url_to_int(string):
    return int.from_bytes(b64url_decode(string), "big")
