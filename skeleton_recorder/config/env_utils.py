import os
from pathlib import Path


def env_bool(name: str, default: bool = False) -> bool:
    """
    환경 변수를 bool 로 읽는다.
    - 미설정이면 default
    - "1", "true", "yes", "y", "on" (대소문자/앞뒤 공백 무시) 만 True
    """
    v = os.getenv(name)
    if v is None:
        return default
    return str(v).strip().lower() in ("1", "true", "yes", "y", "on")


def env_path(name: str, default: Path) -> Path:
    """환경 변수를 Path 로 읽는다. 미설정이거나 빈 문자열이면 default"""
    v = os.getenv(name)
    return Path(v) if v else default
