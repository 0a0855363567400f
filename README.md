# zsynckit

Helpers for zsync-style delta downloads: working with lists of byte ranges,
resolving the URLs and file names given in a `.zsync` file, checking HTTP
instance digests (RFC 3230) and drawing a text progress bar.

zsynckit uses only the standard library. It has no command-line entry point.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `zsynckit.ranges`

- `pair_ranges(offsets)` turns a flat list `[start0, stop0, start1, stop1, ...]`
  into a list of `(start, stop)` pairs. It raises `ValueError` for an odd
  number of offsets.
- `optimize_ranges(ranges, threshold=DEFAULT_THRESHOLD)` merges each range into
  the previous one when the gap between them is at most `threshold` bytes
  (default `64 * 4096`). It returns a new list.

```python
from zsynckit.ranges import optimize_ranges, pair_ranges

pair_ranges([0, 99, 200, 299])
# [(0, 99), (200, 299)]

optimize_ranges([(0, 99), (200, 299), (10_000_000, 10_000_099)])
# [(0, 299), (10000000, 10000099)]
```

### `zsynckit.urls`

- `make_url_absolute(base, relative)` resolves a URL from a `.zsync` file
  against the URL the `.zsync` file came from. An absolute URL comes back
  unchanged. A URL starting with `/` is joined to the scheme and host of
  `base`; any other URL is joined to the directory of `base`. It raises
  `ValueError` when `base` is empty or cannot be used.
- `target_filename(zsync_filename, local_path, source)` picks the local file
  to write. An explicit `local_path` wins. Otherwise the name from the
  `.zsync` file is used. If that name is missing or unusable, the fallback is
  a name derived from `local_path`, and failing that `zsync-download`. A name
  that holds a `/` raises `FilenameRejected`, a subclass of `ValueError`.

```python
from zsynckit.urls import make_url_absolute, target_filename

make_url_absolute("https://example.com/dl/file.zsync", "file.iso")
# 'https://example.com/dl/file.iso'
make_url_absolute("https://example.com/dl/file.zsync", "/file.iso")
# 'https://example.com/file.iso'

target_filename(None, "", "https://example.com/dl/file.zsync")
# 'zsync-download'
```

### `zsynckit.digest`

`verify_instance_digest(verification_status, status, headers, body)` checks
`body` against the first `Digest` header found in `headers`. The arguments
are:

- `headers`: a mapping or an iterable of `(name, value)` pairs.
- `verification_status`: the status of the response fetched without
  following redirections.
- `status`: the status of the final response.

It supports `md5`, `sha` (SHA-1) and `sha-256`. A `sha-512` digest is logged
and otherwise ignored.

The function returns `True` when a supported digest matched. It returns
`False` when there was nothing to verify, or when the final response was not
200 but the first response was 206.

It raises `DigestError` in these cases:

- a digest does not match the body
- a digest cannot be parsed
- the algorithm is unknown
- the final response is not 200 and the first response was not 206

### `zsynckit.progress`

- `progress_bar(chars, percent)` returns one bar line: `chars` of 20 cells
  filled with `#`, followed by the percentage.
- `Progress(stream=sys.stdout, clock=...)` draws the bar. Calling
  `update(percent, downloaded)` redraws at most once per clock second and
  shows the download rate in kBps and an ETA. Calling `end(outcome)` writes
  the final line.
- `Outcome` names how a transfer ended: `ABORTED`, `INCOMPLETE` or `DONE`.

```python
from zsynckit.progress import progress_bar

progress_bar(10, 50.0)
# '\r##########---------- 50.0%'
```

### `zsynckit.util`

Small helpers:

- strings: `ltrim`, `rtrim`, `trim`, `split`
- files: `is_file`, `read_mtime`, `get_perms`
- URLs and paths: `is_url_absolute`, `path_prefix`
- encodings: `base64_decode`, `bytes_to_hex`
- `resolve_redirections(url)` sends a HEAD request with `urllib` and returns
  the final URL. It raises `ConnectionError` when the response is still a
  redirection.

## What zsynckit does not do

zsynckit does not fetch byte ranges over HTTP. It also does not parse
`.zsync` files, compute rolling checksums or assemble a target file. It
offers no way of locating a system CA certificate bundle. Those parts of a
delta download are left to the code that uses these helpers.