import binascii
import os

import pytest
from urllib3.exceptions import LocationParseError

from resource_resolver import (
    BytesResolver,
    BytesResource,
    FileResolver,
    FileResource,
    HttpResolver,
    HttpResource,
    ResolverFunc,
    StringResolver,
    StringResource,
    urlsafe_b64decode,
)


class TestStringResolver:
    def test_strips_scheme(self):
        assert StringResolver().resolve("string://hello world") == StringResource("hello world")

    def test_any_scheme_and_none(self):
        assert StringResolver().resolve("text://a") == StringResource("a")
        assert StringResolver().resolve("raw value") == StringResource("raw value")


class TestBytesResolver:
    def test_standard_base64(self):
        assert BytesResolver().resolve("bytes://aGVsbG8=") == BytesResource(b"hello")

    def test_invalid_base64_surfaces_codec_error(self):
        with pytest.raises(binascii.Error):
            BytesResolver().resolve("bytes://not base64!")

    def test_standard_requires_padding(self):
        with pytest.raises(binascii.Error):
            BytesResolver().resolve("bytes://aGVsbG8")

    def test_custom_decoder(self):
        # "-_" only exist in the URL-safe alphabet
        resource = BytesResolver(urlsafe_b64decode).resolve("bytes://-_8=")
        assert resource == BytesResource(b"\xfb\xff")

    def test_arbitrary_decoder(self):
        resource = BytesResolver(bytes.fromhex).resolve("hex://cafe")
        assert resource.data == b"\xca\xfe"


class TestFileResolver:
    def test_root(self):
        resource = FileResolver(root="/tmp").resolve("file://a.txt")
        assert resource == FileResource("/tmp/a.txt")
        assert resource.location() == "/tmp/a.txt"

    def test_leading_slash_stays_under_root(self):
        assert FileResolver(root="/srv").resolve("file:///data/a.txt").location() == "/srv/data/a.txt"

    def test_absolute_without_root(self):
        assert FileResolver().resolve("file:///etc/hosts").location() == "/etc/hosts"

    def test_relative_without_root_uses_cwd(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        assert FileResolver().resolve("data/a.txt").location() == os.path.join(str(tmp_path), "data", "a.txt")

    def test_path_is_cleaned(self):
        assert FileResolver(root="/tmp/x").resolve("file://../y/./z.txt").location() == "/tmp/y/z.txt"

    def test_no_disk_access(self, tmp_path):
        resource = FileResolver(root=str(tmp_path)).resolve("file://missing.txt")
        assert not os.path.exists(resource.location())


class TestHttpResolver:
    def test_builds_lazy_handle(self, fake_client):
        resource = HttpResolver(open_method="POST", client=fake_client).resolve("https://example.com/x?y=1")
        assert resource == HttpResource(url="https://example.com/x?y=1", open_method="POST", client=fake_client)
        assert fake_client.requests == []

    def test_invalid_url(self):
        with pytest.raises(LocationParseError):
            HttpResolver().resolve("http://example.com:port/")


def test_resolver_func():
    upper = ResolverFunc(lambda value: StringResource(value.upper()))
    assert upper.resolve("abc") == StringResource("ABC")


@pytest.mark.parametrize(
    "resolver, value",
    [
        (StringResolver(), "string://same"),
        (BytesResolver(), "bytes://aGVsbG8="),
        (FileResolver(root="/tmp"), "file://a.txt"),
        (HttpResolver(), "http://example.com/"),
    ],
)
def test_resolving_twice_gives_independent_equal_handles(resolver, value):
    first, second = resolver.resolve(value), resolver.resolve(value)
    assert first is not second
    assert first == second
    assert first.location() == second.location()
