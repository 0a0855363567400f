"""Small helpers for strings, files, URLs and encodings."""

from __future__ import annotations

import os
import urllib.error
import urllib.request

# Characters that the C locale treats as white space.
_WHITESPACE = " \t\n\v\f\r"

_BASE64_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_BASE64_VALUES = {char: value for value, char in enumerate(_BASE64_ALPHABET)}

_REQUEST_TIMEOUT = 60


def ltrim(s: str) -> str:
    """Return *s* without leading white space."""
    return s.lstrip(_WHITESPACE)


def rtrim(s: str) -> str:
    """Return *s* without trailing white space."""
    return s.rstrip(_WHITESPACE)


def trim(s: str) -> str:
    """Return *s* without leading and trailing white space."""
    return s.strip(_WHITESPACE)


def is_file(path: str | os.PathLike) -> bool:
    """Tell whether *path* names a file that can be opened for reading."""
    try:
        with open(path, "rb"):
            return True
    except OSError:
        return False


def read_mtime(path: str | os.PathLike) -> int | None:
    """Return the modification time of *path* in whole seconds, or None."""
    try:
        return int(os.stat(path).st_mtime)
    except OSError:
        return None


def is_url_absolute(url: str) -> bool:
    """Tell whether *url* starts with a scheme such as ``http:``.

    The first of ``:``, ``/`` and ``?`` must be a colon, and it must not be
    the first character.
    """
    first = next((index for index, char in enumerate(url) if char in ":/?"), None)
    if not first:
        return False
    return url[first] == ":"


def path_prefix(path: str) -> str:
    """Return the leading alphanumeric part of the last component of *path*."""
    name = path.rpartition("/")[2]
    prefix = []
    for char in name:
        if not (char.isascii() and char.isalnum()):
            break
        prefix.append(char)
    return "".join(prefix)


def resolve_redirections(url: str) -> str:
    """Follow redirections of *url* with a HEAD request and return the final URL.

    Error responses (4xx, 5xx) still count as resolved. A redirection that
    cannot be followed raises ConnectionError; network failures raise OSError.
    """
    request = urllib.request.Request(url, method="HEAD")
    try:
        with urllib.request.urlopen(request, timeout=_REQUEST_TIMEOUT) as response:
            status = response.status
            final_url = response.geturl()
    except urllib.error.HTTPError as error:
        status = error.code
        final_url = error.filename or url
    if 300 <= status < 400:
        raise ConnectionError(f"could not resolve redirection of {url} (status {status})")
    return final_url


def get_perms(path: str | os.PathLike) -> int:
    """Return the mode bits of *path*; raise OSError if it cannot be stat'ed."""
    return os.stat(path).st_mode


def split(s: str, delim: str) -> list[str]:
    """Split *s* at *delim*; a trailing delimiter yields no empty last item."""
    parts = s.split(delim)
    if parts[-1] == "":
        parts.pop()
    return parts


def base64_decode(data: str) -> bytes:
    """Decode base64 *data*, stopping at the first character outside the alphabet."""
    out = bytearray()
    value = 0
    bits = -8
    for char in data:
        digit = _BASE64_VALUES.get(char)
        if digit is None:
            break
        value = ((value << 6) + digit) & 0xFFFFFFFF
        bits += 6
        if bits >= 0:
            out.append((value >> bits) & 0xFF)
            bits -= 8
    return bytes(out)


def bytes_to_hex(data: bytes) -> str:
    """Return *data* as lower-case hexadecimal digits."""
    return bytes(data).hex()