"""
Pytest Configuration & Shared Fixtures

이 파일은 모든 테스트에서 재사용 가능한 fixture를 정의합니다.
"""
import pytest
from unittest.mock import Mock

from skeleton_recorder.domain.angle.calculator import JointAngleComputer
from skeleton_recorder.domain.projection.projector import ScreenProjector
from skeleton_recorder.domain.record.recorder import FrameRecorder
from skeleton_recorder.domain.render.plan import SkeletonRenderPlan
from skeleton_recorder.infrastructure.sensor.nominal_mapper import NominalDepthMapper
from skeleton_recorder.presentation.overlay import OverlayLayout
from skeleton_recorder.services.frame_pipeline import FramePipeline
from tests.test_helpers import IdentityMapper, ListSink, make_frame


# ========================================
# Domain Object Fixtures
# ========================================

@pytest.fixture
def tracked_frame():
    """모든 관절 Tracked 인 T-포즈 프레임"""
    return make_frame()


@pytest.fixture
def identity_projector():
    """x, y 를 그대로 화면 좌표로 쓰는 투영기"""
    return ScreenProjector(IdentityMapper())


@pytest.fixture
def nominal_projector():
    return ScreenProjector(NominalDepthMapper())


@pytest.fixture
def render_plan():
    return SkeletonRenderPlan()


@pytest.fixture
def list_sink():
    return ListSink()


@pytest.fixture
def recorder(list_sink):
    return FrameRecorder(list_sink)


# ========================================
# Mock Service Fixtures
# ========================================

@pytest.fixture
def mock_render_sink():
    """Mock RenderSink (draw 호출만 기록)"""
    return Mock()


@pytest.fixture
def mock_sensor():
    """Mock SkeletonSensor"""
    mock = Mock()
    mock.start.return_value = None
    return mock


@pytest.fixture
def pipeline(nominal_projector, render_plan, mock_render_sink, recorder):
    """기록 + 오버레이 포함 파이프라인"""
    return FramePipeline(
        angle_computer=JointAngleComputer(),
        projector=nominal_projector,
        render_plan=render_plan,
        render_sink=mock_render_sink,
        recorder=recorder,
        overlay=OverlayLayout(),
    )
