import os
import tomllib
from dataclasses import dataclass
from pathlib import Path

CONFIG_ENV_VAR = "GUSH_CONFIG"


class ConfigError(Exception):
    """Raised when the configuration file exists but cannot be used."""


@dataclass(frozen=True)
class GushConfig:
    """In-memory representation of the user's gush configuration.

    Example config.toml:
      [github]
      # Login used to name the fork remote and the PR head
      username = "octocat"
    """

    github_username: str | None


def default_config_path() -> Path:
    """Return $GUSH_CONFIG if set, otherwise ~/.gush/config.toml."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override)
    return Path.home() / ".gush" / "config.toml"


def load_config(config_path: Path) -> GushConfig:
    """Load config.toml if present; otherwise return defaults.

    Raises:
        ConfigError: If the file is not valid TOML or has the wrong shape
    """
    if not config_path.exists():
        return GushConfig(github_username=None)

    try:
        data = tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Invalid TOML in {config_path}: {e}") from e

    github = data.get("github", {})
    if not isinstance(github, dict):
        raise ConfigError(f"[github] in {config_path} must be a table")

    username = github.get("username")
    if username is not None:
        username = str(username).strip() or None
    return GushConfig(github_username=username)
