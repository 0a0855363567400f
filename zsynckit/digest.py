"""Verification of HTTP instance digests (RFC 3230, RFC 5843)."""

from __future__ import annotations

import hashlib
import logging
from collections.abc import Iterable, Mapping

from .util import base64_decode, bytes_to_hex, split, trim

log = logging.getLogger(__name__)

_HASHES = {
    "md5": ("MD5", hashlib.md5),
    "sha": ("SHA1", hashlib.sha1),
    "sha-256": ("SHA256", hashlib.sha256),
}


class DigestError(Exception):
    """An instance digest could not be parsed or did not match the body."""


def _header_pairs(
    headers: Mapping[str, str] | Iterable[tuple[str, str]],
) -> Iterable[tuple[str, str]]:
    if isinstance(headers, Mapping):
        return headers.items()
    return headers


def verify_instance_digest(
    verification_status: int,
    status: int,
    headers: Mapping[str, str] | Iterable[tuple[str, str]],
    body: bytes | str,
) -> bool:
    """Check the body of a response against the Digest header of another.

    *verification_status* and *headers* belong to the response fetched without
    following redirections; *status* and *body* to the final response.
    Returns True if a supported digest was found and matched, False if there
    was nothing to verify. Raises DigestError on a mismatch, a malformed or
    unknown digest, or a final response that is neither 200 nor skippable.
    """
    if status != 200:
        if verification_status == 206:
            log.info("Skipping instance digest verification of partial response")
            return False
        raise DigestError(f"unexpected status code {status} for .zsync response")

    if isinstance(body, str):
        body = body.encode("utf-8")

    found = False
    for name, value in _header_pairs(headers):
        if name.lower() != "digest":
            continue

        for raw_part in split(value, ","):
            part = trim(raw_part)
            algorithm, sep, encoded = part.partition("=")
            if not sep or not algorithm:
                raise DigestError(f"Failed to parse key/value pair: {part}")

            algorithm = trim(algorithm)
            key = algorithm.lower()
            digest = bytes_to_hex(base64_decode(trim(encoded)))

            if key in _HASHES:
                label, factory = _HASHES[key]
                log.info("Found %s digest: %s", label, digest)
                if digest != factory(body).hexdigest():
                    raise DigestError(
                        "Failed to verify digest of redirected .zsync response"
                    )
                log.info("Verified instance digest of redirected .zsync response")
                found = True
            elif key == "sha-512":
                log.info("Found SHA512 digest: %s", digest)
                log.info("SHA512 instance digests are not supported at the moment")
            else:
                raise DigestError(f"Invalid instance digest type: {algorithm}")

        # only the first Digest header is taken into account
        break

    return found