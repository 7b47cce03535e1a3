"""Configuration loading for terminaldocs (.terminaldocs.yml)."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

from .models import ModuleBuildInfo

CONFIG_FILENAME = ".terminaldocs.yml"
DEFAULT_STYLES_DIR = "terminal-styles"
DEFAULT_BUILD_DIR = "target"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass(frozen=True)
class InjectionSettings:
    """Options controlling the style injection pass."""

    styles_dir: str = DEFAULT_STYLES_DIR
    process_nested: bool = True
    resources_dir: Optional[Path] = None

    def __post_init__(self) -> None:
        name = self.styles_dir
        if not name or name in {".", ".."} or "/" in name or "\\" in name:
            raise ConfigError(f"Invalid styles directory name: {name!r}")


@dataclass(frozen=True)
class TerminalDocsConfig:
    """Represents the settings defined in .terminaldocs.yml."""

    root: Path
    skip: bool = False
    project_name: Optional[str] = None
    aggregator: bool = True
    build_dir: Optional[Path] = None
    templates_dir: Optional[Path] = None
    styles: InjectionSettings = field(default_factory=InjectionSettings)
    modules: List[ModuleBuildInfo] = field(default_factory=list)

    @property
    def effective_build_dir(self) -> Path:
        return self.build_dir or self.root / DEFAULT_BUILD_DIR

    @property
    def display_name(self) -> str:
        return self.project_name or self.root.name or "Project"

    def with_overrides(self, **changes: Any) -> "TerminalDocsConfig":
        """Return a copy with non-``None`` overrides applied."""
        applied = {key: value for key, value in changes.items() if value is not None}
        return replace(self, **applied) if applied else self


def load_config(config_path: Path) -> TerminalDocsConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(Path(config_path))
    root = config_file.parent.resolve()

    if not config_file.exists():
        return TerminalDocsConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    styles_data = _as_dict(data.get("styles"))
    styles = InjectionSettings(
        styles_dir=_as_str(styles_data.get("dir")) or DEFAULT_STYLES_DIR,
        process_nested=_as_bool(styles_data.get("process_nested"), default=True),
        resources_dir=_as_path(root, styles_data.get("resources_dir")),
    )

    return TerminalDocsConfig(
        root=root,
        skip=_as_bool(data.get("skip"), default=False),
        project_name=_as_str(data.get("project_name")),
        aggregator=_as_bool(data.get("aggregator"), default=True),
        build_dir=_as_path(root, data.get("build_dir")),
        templates_dir=_as_path(root, data.get("templates_dir")),
        styles=styles,
        modules=_parse_modules(root, data.get("modules")),
    )


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.is_file():
        return config_path.resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _parse_modules(root: Path, value: Any) -> List[ModuleBuildInfo]:
    if value is None:
        return []
    if not isinstance(value, Sequence) or isinstance(value, str):
        raise ConfigError("modules must be a list of mappings")
    modules: List[ModuleBuildInfo] = []
    seen: set[str] = set()
    for entry in value:
        entry_data = _as_dict(entry)
        identifier = _as_str(entry_data.get("id"))
        if not identifier:
            raise ConfigError("Each module entry requires a non-empty 'id'")
        if identifier in seen:
            raise ConfigError(f"Duplicate module id: {identifier}")
        seen.add(identifier)
        build_dir = _as_path(root, entry_data.get("build_dir"))
        if build_dir is None:
            build_dir = root / identifier / DEFAULT_BUILD_DIR
        # ``description: ""`` stays an empty string, a missing key stays None.
        description = entry_data["description"] if "description" in entry_data else None
        modules.append(
            ModuleBuildInfo(
                identifier=identifier,
                build_dir=build_dir,
                description=None if description is None else str(description),
            )
        )
    return modules


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_path(root: Path, value: Any) -> Optional[Path]:
    text = _as_str(value)
    if not text:
        return None
    path = Path(text).expanduser()
    return path if path.is_absolute() else root / path


def _as_bool(value: Any, *, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return default


__all__ = [
    "CONFIG_FILENAME",
    "ConfigError",
    "DEFAULT_STYLES_DIR",
    "InjectionSettings",
    "TerminalDocsConfig",
    "load_config",
]
