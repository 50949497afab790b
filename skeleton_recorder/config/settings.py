from __future__ import annotations
import os
from pathlib import Path

from dotenv import load_dotenv

# helpers
from skeleton_recorder.config.env_utils import env_bool, env_path


# ─────────────────────────────────────────────────────────
# Project root 탐색
#   - .git / pyproject.toml 중 하나가 보이는 최상단을 루트로 간주
#   - 실패 시 BASE_DIR 환경변수, 그것도 없으면 현재 작업 디렉토리
# ─────────────────────────────────────────────────────────
def find_project_root() -> Path:
    cur = Path(__file__).resolve()
    for parent in cur.parents:
        if any((parent / m).exists() for m in (".git", "pyproject.toml")):
            return parent
    env_root = os.getenv("BASE_DIR")
    if env_root:
        return Path(env_root).resolve()
    return Path.cwd()


ROOT: Path = find_project_root()

# ─────────────────────────────────────────────────────────
# .env 로딩
#   - ENV_FILE 지정 시 우선
#   - 없으면 ROOT/.env.<ENV> → 없으면 ROOT/.env
# ─────────────────────────────────────────────────────────
_DEFAULT_ENV = os.getenv("ENV", "local")
_env_file_candidate = ROOT / f".env.{_DEFAULT_ENV}"
_ENV_FILE = (
    Path(os.getenv("ENV_FILE")).resolve()
    if os.getenv("ENV_FILE")
    else (_env_file_candidate if _env_file_candidate.exists() else (ROOT / ".env"))
)
load_dotenv(dotenv_path=_ENV_FILE, override=False)


class Settings:
    # ── App / Runtime ─────────────────────────────────────
    ENV: str = os.getenv("ENV", _DEFAULT_ENV)
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # ── Base Paths ────────────────────────────────────────
    ROOT: Path = ROOT
    DATA_DIR: Path = env_path("DATA_DIR", ROOT / "data")

    # ── Recording (flat CSV log) ──────────────────────────
    RECORD_DIR: Path = env_path("RECORD_DIR", DATA_DIR / "records")
    RECORD_FILE: str = os.getenv("RECORD_FILE", "skeleton_angles.csv")
    RECORD_ENABLED: bool = env_bool("RECORD_ENABLED", True)
    # False 면 세션 시작 시 기존 파일을 비우고 새로 쓴다
    RECORD_APPEND: bool = env_bool("RECORD_APPEND", True)
    # 세션 시작 배너 ("Start skeleton detection ...")
    RECORD_SESSION_BANNER: bool = env_bool("RECORD_SESSION_BANNER", True)

    # ── Rendering / Sensor ────────────────────────────────
    OVERLAY_ENABLED: bool = env_bool("OVERLAY_ENABLED", True)
    SEATED_MODE: bool = env_bool("SEATED_MODE", False)

    @property
    def RECORD_PATH(self) -> Path:
        return Path(self.RECORD_DIR) / self.RECORD_FILE


# 전역 싱글톤처럼 사용
settings = Settings()
