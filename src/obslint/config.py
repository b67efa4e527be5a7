"""Configuration management for obslint."""

import logging
import os
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field

try:
    import tomllib  # Python 3.11+
except ImportError:
    import tomli as tomllib  # Python < 3.11

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = [".md"]
DEFAULT_EXCLUDE_GLOBS = [".git/**", ".obsidian/**", ".trash/**"]


def _find_repo_root(start_dir: Path) -> Path:
    """Find the vault/repo root by walking upward looking for known markers."""
    current_dir = start_dir

    while True:
        for marker in (".obslint", ".obsidian", ".git"):
            if (current_dir / marker).exists():
                return current_dir

        parent_dir = current_dir.parent

        # Stop if we reach filesystem root
        if parent_dir == current_dir:
            return start_dir

        current_dir = parent_dir


def _load_repo_config_data(repo_root: Path) -> Optional[dict]:
    """Load repo config data from .obslint/config.toml if it exists."""
    config_file = repo_root / ".obslint" / "config.toml"

    if not config_file.exists():
        return None

    try:
        with open(config_file, "rb") as f:
            return tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as e:
        # A malformed config file falls back to defaults
        logger.warning(f"Ignoring unreadable config {config_file}: {e}")
        return None


def _nested_get(data: Optional[dict[str, Any]], path: list[str]) -> Any:
    cur: Any = data or {}
    for key in path:
        if not isinstance(cur, dict) or key not in cur:
            return None
        cur = cur[key]
    return cur


def _env_list(name: str) -> Optional[list[str]]:
    value = os.environ.get(name)
    if value is None:
        return None
    return [part.strip() for part in value.split(",") if part.strip()]


def _env_int(name: str) -> Optional[int]:
    value = os.environ.get(name)
    if value is None or not value.strip():
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"Invalid environment: {name} must be an integer, got {value!r}") from None


def _str_list(value: Any, key: str) -> Optional[list[str]]:
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(x, str) for x in value):
        raise ValueError(f"Invalid config: [lint].{key} must be a list of strings")
    return value


def _first_set(*layers: Optional[list[str]]) -> list[str]:
    for layer in layers:
        if layer is not None:
            return layer
    return []


def resolve_lint_root(cli_root: str) -> Path:
    root = Path(cli_root).expanduser().resolve()
    if not root.exists():
        raise FileNotFoundError(f"Vault path does not exist: {root}")
    if not root.is_dir():
        raise FileNotFoundError(f"Vault path is not a directory: {root}")
    return root


class LintConfig(BaseModel):
    """Configuration for a single lint run."""

    root: Path
    extensions: list[str] = Field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    exclude_globs: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE_GLOBS))
    workers: Optional[int] = Field(default=None, ge=1)

    model_config = {"frozen": True}

    @classmethod
    def from_env(
        cls,
        cli_root: str,
        *,
        cli_extensions: Optional[list[str]] = None,
        cli_exclude: Optional[list[str]] = None,
        cli_workers: Optional[int] = None,
    ) -> "LintConfig":
        """Resolve configuration with the following precedence:

        1. CLI options (if provided)
        2. OBSLINT_EXTENSIONS / OBSLINT_EXCLUDE / OBSLINT_WORKERS environment variables
        3. [lint] table of .obslint/config.toml, searched upward from the vault root
        4. Defaults

        Raises:
            FileNotFoundError: If the vault root is missing or not a directory
            ValueError: If a config value has the wrong type
        """
        root = resolve_lint_root(cli_root)
        data = _load_repo_config_data(_find_repo_root(root))

        repo_extensions = _str_list(_nested_get(data, ["lint", "extensions"]), "extensions")
        repo_exclude = _str_list(_nested_get(data, ["lint", "exclude_globs"]), "exclude_globs")
        repo_workers = _nested_get(data, ["lint", "workers"])
        if repo_workers is not None and not isinstance(repo_workers, int):
            raise ValueError("Invalid config: [lint].workers must be an integer")

        # An explicitly empty list is a real setting, not a fall-through.
        extensions = _first_set(cli_extensions, _env_list("OBSLINT_EXTENSIONS"), repo_extensions, DEFAULT_EXTENSIONS)
        exclude_globs = _first_set(cli_exclude, _env_list("OBSLINT_EXCLUDE"), repo_exclude, DEFAULT_EXCLUDE_GLOBS)

        workers = cli_workers
        if workers is None:
            workers = _env_int("OBSLINT_WORKERS")
        if workers is None:
            workers = repo_workers

        return cls(
            root=root,
            extensions=[e if e.startswith(".") else f".{e}" for e in extensions],
            exclude_globs=list(exclude_globs),
            workers=workers,
        )
