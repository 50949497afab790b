"""
skeleton_recorder - 센서 스켈레톤 스트림 → 2D 오버레이 + 관절 각도 기록
"""

__version__ = "0.1.0"
