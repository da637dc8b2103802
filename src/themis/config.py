"""Configuration management for Themis."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from themis.core.entries import EntryOrder

logger = logging.getLogger(__name__)


def _home() -> Path:
    """The invoking user's home directory, or an empty base if it can't be found."""
    try:
        return Path.home()
    except RuntimeError:
        return Path("")


THEMIS_HOME = Path(os.environ.get("THEMIS_HOME", _home() / ".themis"))
CONFIG_FILE = THEMIS_HOME / "config" / "themis.conf"
DEFAULT_VAULT_DIR = _home() / "obsidian-vault" / "themis"


@dataclass
class Config:
    """Themis configuration."""

    vault_dir: str = str(DEFAULT_VAULT_DIR)
    entry_order: EntryOrder = EntryOrder.NEWEST
    log_level: str = "INFO"

    @property
    def vault_path(self) -> Path:
        return Path(self.vault_dir).expanduser()


def _unquote(value: str) -> str:
    """Strip quotes, or an inline comment from an unquoted value."""
    # Handle quoted values with inline comments: "value" # comment
    for quote in ('"', "'"):
        if value.startswith(quote):
            end_quote = value.find(quote, 1)
            if end_quote != -1:
                return value[1:end_quote]
            return value[1:]
    if "#" in value:
        value = value.split("#")[0].strip()
    return value


def load_config(config_file: Path | None = None) -> Config:
    """Load configuration from themis.conf, then apply environment overrides."""
    config = Config()
    config_file = config_file or CONFIG_FILE

    if config_file.exists():
        for line in config_file.read_text().splitlines():
            line = line.strip()
            if not line or line.startswith("#"):
                continue

            if "=" not in line:
                continue

            key, _, value = line.partition("=")
            key = key.strip().lower()
            value = _unquote(value.strip())

            match key:
                case "vault_dir":
                    if value:
                        config.vault_dir = value
                case "entry_order":
                    try:
                        config.entry_order = EntryOrder(value.lower())
                    except ValueError:
                        logger.warning(f"Invalid ENTRY_ORDER {value!r}, using {config.entry_order.value}")
                case "log_level":
                    if isinstance(logging.getLevelName(value.upper()), int):
                        config.log_level = value.upper()
                    else:
                        logger.warning(f"Invalid LOG_LEVEL {value!r}, using {config.log_level}")

    env_vault = os.environ.get("THEMIS_VAULT_DIR")
    if env_vault:
        config.vault_dir = env_vault

    return config
