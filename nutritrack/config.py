from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping, Optional


def _int_env(environ: Mapping[str, str], name: str, default: int) -> int:
    try:
        return int(environ.get(name) or default)
    except ValueError:
        return default


@dataclass(frozen=True)
class Settings:
    """Centralized configuration for the NutriTrack backend.

    Built once at process entry (``Settings.from_env()``) and handed to
    ``create_app``; request handlers reach it through ``app.state.settings``.
    """

    data_root: Path
    db_path: Path
    # In production you MUST set NUTRITRACK_SESSION_SECRET. The dev fallback keeps local
    # demos easy, but this is not safe for public deployments.
    session_secret: str = "nutritrack-dev-secret-change-me"
    session_ttl_days: int = 14
    cookie_secure: bool = False
    cors_origins: List[str] = field(default_factory=lambda: ["http://localhost:5173"])
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 3000

    @property
    def session_ttl_seconds(self) -> int:
        return int(self.session_ttl_days) * 24 * 60 * 60

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        repo_root = Path(__file__).resolve().parent.parent

        data_root = Path(env.get("NUTRITRACK_DATA_ROOT") or (repo_root / "data")).expanduser()
        db_path = Path(env.get("NUTRITRACK_DB_PATH") or (data_root / "nutritrack.db")).expanduser()

        cors = env.get("NUTRITRACK_CORS_ORIGINS", "http://localhost:5173")
        if cors.strip() == "*":
            cors_origins = ["*"]
        else:
            cors_origins = [origin.strip() for origin in cors.split(",") if origin.strip()]

        return cls(
            data_root=data_root,
            db_path=db_path,
            session_secret=env.get("NUTRITRACK_SESSION_SECRET") or cls.session_secret,
            session_ttl_days=_int_env(env, "NUTRITRACK_SESSION_TTL_DAYS", 14),
            cookie_secure=(env.get("NUTRITRACK_COOKIE_SECURE") or "").strip() in {"1", "true", "True"},
            cors_origins=cors_origins,
            log_level=(env.get("NUTRITRACK_LOG_LEVEL") or "INFO").upper(),
            host=env.get("NUTRITRACK_HOST") or env.get("HOST") or "127.0.0.1",
            port=_int_env(env, "NUTRITRACK_PORT", _int_env(env, "PORT", 3000)),
        )

    @classmethod
    def for_data_root(cls, data_root: Path, **overrides) -> "Settings":
        """Settings rooted at ``data_root`` (used by tests and one-off scripts)."""
        return cls(data_root=data_root, db_path=data_root / "nutritrack.db", **overrides)
