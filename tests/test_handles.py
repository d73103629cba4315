import dataclasses
import io

import pytest

from resource_resolver import BytesResource, FileResource, StringResource


class TestStringResource:
    def test_location(self):
        assert StringResource("x").location() == "string"

    def test_write_to_counts_encoded_bytes(self):
        sink = io.BytesIO()
        assert StringResource("héllo").write_to(sink) == 6
        assert sink.getvalue() == "héllo".encode("utf-8")

    def test_open(self):
        with StringResource("hello world").open() as f:
            assert f.read() == b"hello world"


class TestBytesResource:
    def test_location(self):
        assert BytesResource(b"").location() == "bytes"

    def test_write_to_and_open(self):
        sink = io.BytesIO()
        assert BytesResource(b"\x00\x01").write_to(sink) == 2
        assert sink.getvalue() == b"\x00\x01"
        with BytesResource(b"\x00\x01").open() as f:
            assert f.read() == b"\x00\x01"


class TestFileResource:
    def test_write_to(self, tmp_path):
        path = tmp_path / "data.bin"
        path.write_bytes(b"x" * 200_000)

        sink = io.BytesIO()
        assert FileResource(str(path)).write_to(sink) == 200_000
        assert sink.getvalue() == b"x" * 200_000

    def test_open_reads_current_contents(self, tmp_path):
        path = tmp_path / "a.txt"
        resource = FileResource(str(path))
        path.write_text("first")
        with resource.open() as f:
            assert f.read() == b"first"
        path.write_text("second")
        with resource.open() as f:
            assert f.read() == b"second"

    def test_missing_file(self, tmp_path):
        resource = FileResource(str(tmp_path / "missing"))
        assert resource.location() == str(tmp_path / "missing")
        with pytest.raises(FileNotFoundError):
            resource.open()
        with pytest.raises(FileNotFoundError):
            resource.write_to(io.BytesIO())


def test_handles_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        FileResource("/tmp/a").path = "/tmp/b"
