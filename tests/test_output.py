"""Unit tests for the output writer."""

import io

import pytest

from plistutil.core.ir import FormatSelector, RenderedPayload
from plistutil.core.output import write_output
from plistutil.errors import OutputWriteError

RENDERED = RenderedPayload(data=b"bplist00\x00\x01\xff", output_format=FormatSelector.BINARY)


class TestWriteOutput:

    def test_writes_file_exactly(self, tmp_path):
        path = tmp_path / "out.plist"
        write_output(RENDERED, str(path))
        assert path.read_bytes() == RENDERED.data

    def test_truncates_existing_file(self, tmp_path):
        path = tmp_path / "out.plist"
        path.write_bytes(b"x" * 100)
        write_output(RENDERED, str(path))
        assert path.read_bytes() == RENDERED.data

    def test_writes_given_stdout(self):
        stream = io.BytesIO()
        write_output(RENDERED, "-", stdout=stream)
        assert stream.getvalue() == RENDERED.data

    def test_none_destination_is_stdout(self):
        stream = io.BytesIO()
        write_output(RENDERED, None, stdout=stream)
        assert stream.getvalue() == RENDERED.data

    def test_nothing_rendered_means_no_file(self, tmp_path):
        path = tmp_path / "out.plist"
        write_output(None, str(path))
        assert not path.exists()

    def test_unopenable_destination(self, tmp_path):
        path = tmp_path / "missing-dir" / "out.plist"
        with pytest.raises(OutputWriteError) as excinfo:
            write_output(RENDERED, str(path))
        assert "Could not open output file" in str(excinfo.value)
        assert excinfo.value.exit_code == 1
