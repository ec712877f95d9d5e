from __future__ import annotations

import base64
import binascii
from urllib.parse import urlencode, parse_qsl, quote


def encode_opaque_cursor(data: dict[str, str], *, debug: bool = False) -> str:
    """ Encode a dict of data as an opaque cursor

    Key=value pairs are percent-escaped and joined with '&', then wrapped with url-safe base64.
    In debug mode, the key=value string is given as it is, so that you see what's up.
    """
    raw = urlencode(data, quote_via=quote)
    if debug:
        return raw
    else:
        return base64.urlsafe_b64encode(raw.encode()).decode()


def decode_opaque_cursor(cursor: str, *, debug: bool = False) -> dict[str, str]:
    """ Decode an opaque cursor into a dict of data

    Raises:
        ValueError: all sorts of errors related to bad cursor
    """
    if debug:
        raw = cursor
    else:
        try:
            raw = base64.b64decode(cursor.encode('ascii'), altchars=b'-_', validate=True).decode()  # UnicodeError
        except binascii.Error as e:
            raise ValueError(str(e)) from e

    return dict(parse_qsl(raw, keep_blank_values=True, strict_parsing=True))  # ValueError
