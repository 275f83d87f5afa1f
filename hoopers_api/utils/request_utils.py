import json
import re
from typing import Any

from starlette.datastructures import Headers

REQUEST_KEY_REGEXP_BLACKLIST = [
    r"password",
    r"secret",
    r"token",
    r"authorization",
]


def key_is_blacklisted(key: str):
    for regexp in REQUEST_KEY_REGEXP_BLACKLIST:
        if re.search(regexp, key.lower()):
            return True
    return False


def strip_sensitive_items(value: Any) -> Any:
    if isinstance(value, dict):
        return {
            k: strip_sensitive_items(v)
            for (k, v) in value.items()
            if not key_is_blacklisted(k)
        }
    if isinstance(value, list):
        return [strip_sensitive_items(e) for e in value]
    if isinstance(value, Headers):
        return dict(strip_sensitive_items(dict(value)))
    return value


def decode_request_body(request_body: bytes):
    if not request_body:
        return None
    try:
        request_dict = strip_sensitive_items(json.loads(request_body.decode("utf-8")))
    except json.JSONDecodeError:
        request_dict = request_body.decode("utf-8")
    except UnicodeDecodeError:
        request_dict = {}
    return request_dict
