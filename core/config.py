"""
Forms Configuration
Page geometry, letterhead assets and document constants
"""

import os
from pathlib import Path
from typing import Optional, Tuple
from dataclasses import dataclass, field
from loguru import logger

PROJECT_ROOT = Path(__file__).parent.parent

# Environment resolved from: env var → .env file
try:
    from dotenv import load_dotenv
    _env_path = PROJECT_ROOT / ".env"
    if _env_path.exists():
        load_dotenv(_env_path)
except ImportError:
    pass


DEFAULT_ADDRESS_LINES: Tuple[str, ...] = (
    "Herseltsesteenweg 4, 3200 Aarschot",
    "016 30 08 20",
    "KBO 0409 949 615 / RPR Leuven",
)


@dataclass
class FormsConfig:
    """Configuration for claim document generation"""
    # A4 in points
    page_width: float = 595.28
    page_height: float = 841.89
    margin_left: float = 50.0
    margin_right: float = 50.0
    margin_bottom: float = 50.0
    # Start a new page instead of drawing below margin_bottom
    paginate: bool = True

    # Letterhead: local paths or http(s) URLs
    left_logo: str = str(PROJECT_ROOT / "assets" / "arcadia.png")
    right_logo: str = str(PROJECT_ROOT / "assets" / "sma_logo.png")
    address_lines: Tuple[str, ...] = field(default=DEFAULT_ADDRESS_LINES)
    asset_timeout: float = 10.0

    footer_tag: str = "CPD Arcadia-2021.02.10"
    wrap_chars: int = 90

    @property
    def content_width(self) -> float:
        return self.page_width - self.margin_left - self.margin_right


def _env_flag(name: str, default: bool) -> bool:
    raw = os.environ.get(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config_from_env() -> FormsConfig:
    """Build a FormsConfig, letting FORMS_* environment variables override defaults"""
    defaults = FormsConfig()
    config = FormsConfig(
        left_logo=os.environ.get("FORMS_LEFT_LOGO", defaults.left_logo),
        right_logo=os.environ.get("FORMS_RIGHT_LOGO", defaults.right_logo),
        footer_tag=os.environ.get("FORMS_FOOTER_TAG", defaults.footer_tag),
        paginate=_env_flag("FORMS_PAGINATE", defaults.paginate),
        asset_timeout=float(os.environ.get("FORMS_ASSET_TIMEOUT", defaults.asset_timeout)),
    )
    logger.debug(f"Forms config loaded (paginate={config.paginate})")
    return config


# Global instance
_config: Optional[FormsConfig] = None


def get_config() -> FormsConfig:
    """Get or create the global forms configuration"""
    global _config
    if _config is None:
        _config = load_config_from_env()
    return _config


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() re-reads the environment"""
    global _config
    _config = None
