"""Resolution of URLs and target file names taken from .zsync files."""

from __future__ import annotations

import logging

from .util import is_url_absolute, path_prefix

log = logging.getLogger(__name__)

DEFAULT_FILENAME = "zsync-download"


class FilenameRejected(ValueError):
    """The file name given in a .zsync file may not be used."""


def make_url_absolute(base: str, relative: str) -> str:
    """Resolve *relative* against the URL *base* of the .zsync file.

    An absolute *relative* is returned unchanged. A URL starting with ``/``
    is joined to the scheme and host of *base*; any other is joined to the
    directory of *base*. Raises ValueError if *base* cannot serve.
    """
    if is_url_absolute(relative):
        return relative

    if not base:
        raise ValueError(f"cannot resolve relative URL {relative!r} without a base URL")

    if relative.startswith("/"):
        scheme_end = base.find("://")
        if scheme_end < 0:
            raise ValueError(f"base URL {base!r} has no scheme")
        host_end = base.find("/", scheme_end + 3)
        if host_end < 0:
            host_end = len(base)
        return base[:host_end] + relative

    slash = base.rfind("/")
    if slash < 0:
        raise ValueError(f"base URL {base!r} has no directory part")
    return base[: slash + 1] + relative


def target_filename(zsync_filename: str | None, local_path: str, source: str) -> str:
    """Choose the path of the file to create.

    An explicit *local_path* wins. Otherwise the file name from the .zsync
    file (read from *source*) is used, provided it holds no path component;
    failing that, a name derived from *local_path* or a fixed default.
    Raises FilenameRejected if the .zsync file names a path.
    """
    if local_path:
        return local_path

    new_path = ""
    if zsync_filename:
        if "/" in zsync_filename:
            raise FilenameRejected(
                f"rejected filename specified in {source}, contained path component"
            )
        prefix = path_prefix(local_path)
        if zsync_filename.startswith(prefix):
            new_path = zsync_filename
        elif prefix:
            log.warning(
                "Rejected filename specified in %s - prefix %s is different from filename %s",
                source,
                prefix,
                zsync_filename,
            )

    if not new_path:
        new_path = path_prefix(local_path) or DEFAULT_FILENAME
    return new_path