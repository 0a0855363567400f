import pytest

from zsynckit.urls import FilenameRejected, make_url_absolute, target_filename

BASE = "http://example.com/dir/file.zsync"


def test_absolute_relative_is_returned_unchanged():
    url = "https://example.org/other/target.bin"
    assert make_url_absolute(BASE, url) == url


def test_absolute_relative_needs_no_base():
    url = "ftp://example.org/target.bin"
    assert make_url_absolute("", url) == url


def test_empty_base_raises():
    with pytest.raises(ValueError):
        make_url_absolute("", "target.bin")


def test_directory_relative_url():
    result = make_url_absolute(BASE, "target.bin")
    assert result == "http://example.com/dir/target.bin"


def test_directory_relative_keeps_base_directory():
    result = make_url_absolute(BASE, "sub/target.bin")
    assert result.startswith("http://example.com/dir/")
    assert result.endswith("sub/target.bin")


def test_root_relative_url():
    result = make_url_absolute(BASE, "/other/target.bin")
    assert result == "http://example.com/other/target.bin"


def test_root_relative_url_with_host_only_base():
    result = make_url_absolute("http://example.com", "/target.bin")
    assert result == "http://example.com/target.bin"


def test_root_relative_without_scheme_raises():
    with pytest.raises(ValueError):
        make_url_absolute("dir/file.zsync", "/target.bin")


def test_relative_with_base_without_slash_raises():
    with pytest.raises(ValueError):
        make_url_absolute("file.zsync", "target.bin")


def test_explicit_local_path_wins():
    assert target_filename("remote.bin", "local.bin", BASE) == "local.bin"


def test_explicit_local_path_wins_even_over_bad_name():
    assert target_filename("../evil", "local.bin", BASE) == "local.bin"


def test_name_from_zsync_file_is_used():
    assert target_filename("remote.AppImage", "", BASE) == "remote.AppImage"


def test_name_with_path_component_is_rejected():
    with pytest.raises(FilenameRejected) as info:
        target_filename("../etc/passwd", "", BASE)
    assert BASE in str(info.value)


def test_rejection_is_a_value_error():
    with pytest.raises(ValueError):
        target_filename("/abs/path", "", BASE)


@pytest.mark.parametrize("name", [None, ""])
def test_missing_name_falls_back_to_default(name):
    assert target_filename(name, "", BASE) == "zsync-download"