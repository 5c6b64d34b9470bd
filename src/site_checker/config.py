"""Centralized configuration loaded from .env."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

STRATEGIES = ("broad", "targeted")


def _load_env() -> None:
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path)
    else:
        load_dotenv()


def _split_hosts(raw: str) -> tuple[str, ...]:
    return tuple(h.strip().lower() for h in raw.split(",") if h.strip())


@dataclass(frozen=True)
class Settings:
    # Fetch tuning
    fetch_timeout: float = 15.0
    max_html_chars: int = 500_000
    text_excerpt_chars: int = 5_000
    user_agent: str = "Mozilla/5.0 (compatible; SiteChecker/1.0)"
    accept_language: str = "ja,en;q=0.9"

    # Our own site is served from local assets instead of the network
    self_hosts: tuple[str, ...] = ()
    asset_dir: str = ""

    # Crawl settings
    strategy: str = "targeted"
    broad_page_limit: int = 9
    targeted_page_limit: int = 4
    max_workers: int = 9
    show_progress: bool = False

    @classmethod
    def from_env(cls) -> Settings:
        _load_env()
        strategy = os.getenv("CRAWL_STRATEGY", "targeted")
        if strategy not in STRATEGIES:
            raise ValueError(
                f"CRAWL_STRATEGY must be one of {', '.join(STRATEGIES)}, got '{strategy}'"
            )
        return cls(
            fetch_timeout=float(os.getenv("FETCH_TIMEOUT", "15")),
            max_html_chars=int(os.getenv("MAX_HTML_CHARS", "500000")),
            user_agent=os.getenv("USER_AGENT", "Mozilla/5.0 (compatible; SiteChecker/1.0)"),
            accept_language=os.getenv("ACCEPT_LANGUAGE", "ja,en;q=0.9"),
            self_hosts=_split_hosts(os.getenv("SELF_HOSTS", "")),
            asset_dir=os.getenv("ASSET_DIR", ""),
            strategy=strategy,
            max_workers=int(os.getenv("MAX_WORKERS", "9")),
        )
