"""
TrackingSession 테스트
센서 시작 실패 / 기록 실패 시 기능 비활성화 정책 검증
"""
from unittest.mock import Mock

from skeleton_recorder.domain.record.recorder import SESSION_BANNER, FrameRecorder, build_header
from skeleton_recorder.infrastructure.storage.record_sink import FileRecordSink
from skeleton_recorder.services.service_factory import create_frame_pipeline
from skeleton_recorder.services.tracking_session import (
    SessionStatus,
    TrackingMode,
    TrackingSession,
)
from tests.test_helpers import IdentityMapper, ListSink, make_frame


def _session(sensor, tmp_path, **kwargs):
    sink = FileRecordSink(tmp_path / "rec.csv")
    pipeline = create_frame_pipeline(IdentityMapper(), render_sink=Mock(), record_sink=sink, overlay=False)
    return TrackingSession(sensor, pipeline, record_sink=sink, **kwargs), sink


class TestSessionStart:

    def test_start_writes_banner(self, mock_sensor, tmp_path):
        session, sink = _session(mock_sensor, tmp_path)
        assert session.start() == SessionStatus.RUNNING
        mock_sensor.set_tracking_mode.assert_called_once_with(TrackingMode.Default)
        mock_sensor.start.assert_called_once()
        assert sink.path.read_text(encoding="utf-8") == SESSION_BANNER

    def test_no_sensor(self, tmp_path):
        session, sink = _session(None, tmp_path)
        assert session.start() == SessionStatus.NO_SENSOR
        assert session.handle_frame([make_frame()]) is None
        assert not sink.path.exists()

    def test_sensor_start_failure_creates_no_file(self, mock_sensor, tmp_path):
        mock_sensor.start.side_effect = OSError("device busy")
        session, sink = _session(mock_sensor, tmp_path)

        assert session.start() == SessionStatus.NO_SENSOR
        assert session.sensor is None
        assert session.handle_frame([make_frame()]) is None
        assert not sink.path.exists()

    def test_seated_mode_forwarded(self, mock_sensor, tmp_path):
        session, _ = _session(mock_sensor, tmp_path, seated=True)
        session.start()
        mock_sensor.set_tracking_mode.assert_called_with(TrackingMode.Seated)

        session.set_seated_mode(False)
        mock_sensor.set_tracking_mode.assert_called_with(TrackingMode.Default)

    def test_truncate_when_not_appending(self, mock_sensor, tmp_path):
        session, sink = _session(mock_sensor, tmp_path, append=False, banner=False)
        sink.path.write_text("old session\n", encoding="utf-8")
        session.start()
        assert sink.path.read_text(encoding="utf-8") == ""

    def test_append_keeps_previous_sessions(self, mock_sensor, tmp_path):
        session, sink = _session(mock_sensor, tmp_path)
        sink.path.write_text("old session\n", encoding="utf-8")
        session.start()
        assert sink.path.read_text(encoding="utf-8") == "old session\n" + SESSION_BANNER

    def test_unwritable_record_file_disables_recording(self, mock_sensor, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("", encoding="utf-8")
        sink = FileRecordSink(blocker / "rec.csv")
        render_sink = Mock()
        pipeline = create_frame_pipeline(IdentityMapper(), render_sink=render_sink, record_sink=sink, overlay=False)
        session = TrackingSession(mock_sensor, pipeline, record_sink=sink)

        assert session.start() == SessionStatus.RECORDING_DISABLED
        assert not pipeline.recording

        # 렌더링은 계속
        result = session.handle_frame([make_frame()])
        assert result is not None
        assert result.rows == []
        render_sink.draw.assert_called_once()


class TestSessionFrames:

    def test_frames_before_start_ignored(self, mock_sensor, tmp_path):
        session, _ = _session(mock_sensor, tmp_path)
        assert session.handle_frame([make_frame()]) is None

    def test_records_rows(self, mock_sensor, tmp_path):
        session, sink = _session(mock_sensor, tmp_path)
        session.start()
        session.handle_frame([make_frame(timestamp=2.0)])
        session.handle_frame([make_frame(timestamp=2.5)])

        lines = sink.path.read_text(encoding="utf-8").splitlines()
        assert lines[:2] == SESSION_BANNER.splitlines()
        assert lines[2:4] == build_header().splitlines()
        assert lines[4].startswith("00,")
        assert lines[5].startswith("500,")

    def test_sink_failure_mid_session(self, mock_sensor):
        """세 번째 append(두 번째 행)에서 실패 → 기록만 끄고 렌더링은 계속"""
        failing = ListSink(fail_on={2})
        render_sink = Mock()
        pipeline = create_frame_pipeline(IdentityMapper(), render_sink=render_sink, overlay=False)
        pipeline.recorder = FrameRecorder(failing)
        session = TrackingSession(mock_sensor, pipeline, banner=False)

        session.start()
        assert session.handle_frame([make_frame(timestamp=0.0)]) is not None
        assert session.handle_frame([make_frame(timestamp=0.1)]) is None
        assert session.status == SessionStatus.RECORDING_DISABLED
        assert not pipeline.recording

        result = session.handle_frame([make_frame(timestamp=0.2)])
        assert result is not None
        assert result.rows == []
        assert render_sink.draw.call_count == 3
        assert len(failing.writes) == 2

    def test_restart_writes_fresh_header_and_clock(self, mock_sensor, tmp_path):
        """stop → start 하면 새 세션처럼 헤더부터 다시 쓰고 경과 시간도 0 부터"""
        session, sink = _session(mock_sensor, tmp_path, append=False, banner=False)
        session.start()
        session.handle_frame([make_frame(timestamp=1.0)])
        session.stop()

        assert session.start() == SessionStatus.RUNNING
        session.handle_frame([make_frame(timestamp=100.0)])

        lines = sink.path.read_text(encoding="utf-8").splitlines()
        assert lines[:2] == build_header().splitlines()
        assert lines[2].startswith("00,")
        assert len(lines) == 3

    def test_restart_in_append_mode_starts_new_block(self, mock_sensor, tmp_path):
        session, sink = _session(mock_sensor, tmp_path, banner=False)
        session.start()
        session.handle_frame([make_frame(timestamp=1.0)])
        session.handle_frame([make_frame(timestamp=1.5)])
        session.stop()
        session.start()
        session.handle_frame([make_frame(timestamp=50.0)])

        text = sink.path.read_text(encoding="utf-8")
        assert text.count("Elapsed,") == 2
        assert text.splitlines()[-1].startswith("00,")

    def test_stop(self, mock_sensor, tmp_path):
        session, _ = _session(mock_sensor, tmp_path)
        session.start()
        session.stop()
        mock_sensor.stop.assert_called_once()
        assert session.status == SessionStatus.STOPPED
        assert session.handle_frame([make_frame()]) is None
