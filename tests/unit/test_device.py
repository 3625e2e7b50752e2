"""Unit tests for SvgDevice and the svg_device entry point."""

import io
import threading

import pytest

from svgdevice import active_device, svg_device
from svgdevice.config import DeviceSettings, OutputConfig, WriteErrorPolicy
from svgdevice.device import SvgDevice
from svgdevice.domain import Circle, GraphicsContext, Point, points_from_arrays
from svgdevice.exceptions import (
    CanvasClosedError,
    DeviceSetupError,
    DeviceWriteError,
    PrimitiveError,
)

GC = GraphicsContext(col=0xFF000000, fill=0x00FFFFFF, lwd=1.0)


class FlakySink(io.StringIO):
    """StringIO whose writes can be made to fail."""

    fail_write = False

    def write(self, s):
        if self.fail_write:
            raise OSError("No space left on device")
        return super().write(s)


def body_lines(sink: io.StringIO) -> list[str]:
    """Return the lines between the root tag and the closing tag."""
    return sink.getvalue().splitlines()[1:-1]


class TestSvgDevice:
    """Tests for drawing on an open canvas."""

    def test_open_stream_writes_root(self):
        sink = io.StringIO()
        SvgDevice.open_stream(sink, 504, 360)
        assert sink.getvalue().startswith('<svg xmlns="http://www.w3.org/2000/svg"')
        assert 'viewBox="0 0 504 360"' in sink.getvalue()

    def test_draw_calls_in_order(self):
        sink = io.StringIO()
        with SvgDevice.open_stream(sink, 100, 100) as dev:
            dev.circle((1, 1), 1, GC)
            dev.line((0, 0), (1, 1), GC)
            dev.polyline([(0, 0), (1, 1)], GC)
            dev.polygon([(0, 0), (1, 0), (1, 1)], GC)
            dev.rect((0, 0), (1, 1), GC)
            dev.text((0, 0), "t", 0.0, 0.0, GC)
            dev.path([[(0, 0), (1, 0), (1, 1)]], True, GC)

        tags = [line.split(" ", 1)[0] for line in body_lines(sink)]
        assert tags == [
            "<circle", "<line", "<polyline", "<polygon", "<rect", "<text", "<path",
        ]
        assert sink.getvalue().endswith("</svg>\n")

    def test_stats_count_kinds(self):
        dev = SvgDevice.open_stream(io.StringIO(), 10, 10)
        dev.circle((0, 0), 1, GC)
        dev.circle((0, 0), 2, GC)
        dev.line((0, 0), (1, 1), GC)
        dev.close()
        assert dev.stats.elements == {"circle": 2, "line": 1}
        assert dev.stats.element_count == 3
        assert dev.stats.failure_count == 0

    def test_accepts_point_instances(self):
        sink = io.StringIO()
        with SvgDevice.open_stream(sink, 10, 10) as dev:
            dev.line(Point(0, 0), Point(2, 3), GC)
        assert 'x2="2.000" y2="3.000"' in sink.getvalue()

    def test_parallel_arrays(self):
        """Test that coordinate arrays can be adapted to a polyline."""
        sink = io.StringIO()
        with SvgDevice.open_stream(sink, 10, 10) as dev:
            dev.polyline(points_from_arrays([0, 1, 2], [3, 4, 5]), GC)
        assert 'points="0.000,3.000 1.000,4.000 2.000,5.000"' in sink.getvalue()

    def test_empty_sequences(self):
        """Test that zero-point primitives do not fail."""
        sink = io.StringIO()
        with SvgDevice.open_stream(sink, 10, 10) as dev:
            dev.polyline([], GC)
            dev.polygon([], GC)
            dev.path([], False, GC)
            dev.path([[]], False, GC)
        lines = body_lines(sink)
        assert len(lines) == 4
        assert lines[0].startswith('<polyline points=""')
        assert lines[1].startswith('<polygon points=""')
        assert lines[2].startswith('<path d=""')
        assert lines[3].startswith('<path d=""')

    def test_draw_unknown_primitive(self):
        dev = SvgDevice.open_stream(io.StringIO(), 10, 10)
        with pytest.raises(PrimitiveError):
            dev.draw("circle", GC)  # type: ignore[arg-type]

    def test_draw_after_close(self):
        dev = SvgDevice.open_stream(io.StringIO(), 10, 10)
        dev.close()
        assert dev.is_closed
        with pytest.raises(CanvasClosedError, match="draw circle"):
            dev.draw(Circle(Point(0, 0), 1), GC)

    def test_close_twice_is_noop(self):
        sink = io.StringIO()
        dev = SvgDevice.open_stream(sink, 10, 10)
        dev.close()
        dev.close()
        assert sink.getvalue().count("</svg>") == 1


class TestWriteErrorPolicy:
    """Tests for per-call write failure handling."""

    def test_raise_policy(self):
        """Test that a failed element raises and the canvas stays usable."""
        sink = FlakySink()
        dev = SvgDevice.open_stream(sink, 10, 10)
        sink.fail_write = True
        with pytest.raises(DeviceWriteError, match="Failed to write rect"):
            dev.rect((0, 0), (1, 1), GC)
        assert len(dev.stats.failures) == 1
        assert dev.stats.failures[0][0] == "rect"

        sink.fail_write = False
        dev.circle((0, 0), 1, GC)
        dev.close()
        assert dev.stats.element_count == 1
        assert sink.getvalue().endswith("</svg>\n")

    def test_log_policy(self):
        """Test that a failed element is counted but not raised."""
        settings = DeviceSettings(output=OutputConfig(on_write_error=WriteErrorPolicy.LOG))
        sink = FlakySink()
        dev = SvgDevice.open_stream(sink, 10, 10, settings)
        sink.fail_write = True
        dev.line((0, 0), (1, 1), GC)
        dev.text((0, 0), "x", 0, 0, GC)
        assert dev.stats.failure_count == 2
        assert [kind for kind, _ in dev.stats.failures] == ["line", "text"]


class TestConcurrency:
    """Tests for serialized multi-threaded use."""

    def test_threads_keep_document_whole(self):
        sink = io.StringIO()
        dev = SvgDevice.open_stream(sink, 100, 100)

        def worker(row: int) -> None:
            for i in range(50):
                dev.line((i, row), (i + 1, row), GC)

        threads = [threading.Thread(target=worker, args=(row,)) for row in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        dev.close()

        lines = body_lines(sink)
        assert len(lines) == 200
        assert all(line.startswith("<line ") and line.endswith(" />") for line in lines)
        for row in range(4):
            xs = [line for line in lines if f'y1="{row}.000"' in line]
            assert xs == sorted(xs, key=lambda s: float(s.split('"')[1]))
            assert len(xs) == 50


class TestSvgDeviceEntryPoint:
    """Tests for the host-facing svg_device() call."""

    def test_creates_file(self, tmp_path):
        out = tmp_path / "plot.svg"
        dev = svg_device(out, 7, 5)
        assert (dev.width_pt, dev.height_pt) == (504, 360)
        dev.circle((10, 10), 5, GC)
        dev.close()

        text = out.read_text(encoding="utf-8")
        assert text.startswith(
            '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 504 360" '
            'width="504" height="360">'
        )
        assert text.endswith("</svg>\n")

    def test_truncates_existing_file(self, tmp_path):
        out = tmp_path / "plot.svg"
        out.write_text("old content " * 100, encoding="utf-8")
        svg_device(out, 1, 1).close()
        assert "old content" not in out.read_text(encoding="utf-8")

    def test_fractional_inches(self, tmp_path):
        dev = svg_device(tmp_path / "a.svg", 8.5, 11)
        dev.close()
        assert (dev.width_pt, dev.height_pt) == (612, 792)

    def test_registers_active_device(self, tmp_path):
        dev = svg_device(tmp_path / "a.svg", 1, 1)
        assert active_device() is dev
        dev.close()
        assert active_device() is None

    def test_new_device_replaces_active(self, tmp_path):
        first = svg_device(tmp_path / "a.svg", 1, 1)
        second = svg_device(tmp_path / "b.svg", 1, 1)
        assert active_device() is second
        first.close()
        assert active_device() is second
        second.close()
        assert active_device() is None

    def test_setup_failure(self, tmp_path):
        """Test that an uncreatable path fails before any drawing."""
        with pytest.raises(DeviceSetupError) as exc_info:
            svg_device(tmp_path / "missing" / "plot.svg", 1, 1)
        assert "missing" in exc_info.value.path
        assert active_device() is None


class TestLibraryLogging:
    """Tests for logging when the host has not configured any."""

    def test_drawing_prints_nothing(self, capsys):
        """Test that drawing through the library leaves stdout untouched."""
        sink = io.StringIO()
        with SvgDevice.open_stream(sink, 10, 10) as dev:
            for i in range(3):
                dev.circle((i, i), 1, GC)
        assert capsys.readouterr().out == ""
        assert sink.getvalue().count("<circle ") == 3


class TestNonFiniteGeometry:
    """Tests for NaN and infinite coordinates."""

    @pytest.mark.parametrize(
        "start, end",
        [((float("nan"), 0), (1, 1)), ((0, 0), (float("inf"), 1)), ((0, float("-inf")), (1, 1))],
    )
    def test_rejected_before_writing(self, start, end):
        """Test that a non-finite line raises and writes nothing."""
        sink = io.StringIO()
        dev = SvgDevice.open_stream(sink, 10, 10)
        with pytest.raises(PrimitiveError, match="non-finite"):
            dev.line(start, end, GC)
        dev.line((0, 0), (1, 1), GC)
        dev.close()

        lines = body_lines(sink)
        assert len(lines) == 1
        assert "nan" not in sink.getvalue()
        assert "inf" not in sink.getvalue()

    def test_non_finite_line_width(self):
        dev = SvgDevice.open_stream(io.StringIO(), 10, 10)
        with pytest.raises(PrimitiveError):
            dev.path([[(0, 0), (1, 1)]], True, GraphicsContext(col=0, lwd=float("nan")))


class TestDeviceStatsTiming:
    """Tests for the open-to-close duration."""

    def test_duration_recorded_on_close(self):
        dev = SvgDevice.open_stream(io.StringIO(), 10, 10)
        assert dev.stats.start_time is not None
        assert dev.stats.duration_seconds == 0.0
        dev.close()
        assert dev.stats.end_time is not None
        assert dev.stats.duration_seconds >= 0.0
        assert dev.stats.end_time >= dev.stats.start_time
