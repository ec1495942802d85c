from __future__ import annotations

import dataclasses as dc
import os
import pathlib
import typing as t

try:
    import tomllib  # py311+
except ModuleNotFoundError:  # pragma: no cover
    import tomli as tomllib  # type: ignore[no-redef]

from .errors import ConfigError
from .hasher import DEFAULT_ALGORITHM

PathLikeStr = str | os.PathLike[str]

CONFIG_ENV = "DIRCOMP_CONFIG"
_BOOL_KEYS = ("show_all", "debug", "color")


@dc.dataclass(frozen=True)
class DiffOptions:
    """Output switches threaded through a single comparison run."""

    show_all: bool = False       # also report unchanged files
    debug: bool = False          # trace walk to the diagnostic stream
    algorithm: str = DEFAULT_ALGORITHM
    color: bool = True           # style report lines when stdout is a terminal

    def merged(self, **overrides: t.Any) -> "DiffOptions":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return dc.replace(self, **changes)


def platform_config_default() -> pathlib.Path:
    """
    Determine the default config path by OS:
      - Windows: %APPDATA%/dircomp/config.toml
      - Others:  $XDG_CONFIG_HOME/dircomp/config.toml or ~/.config/dircomp/config.toml
    """
    if os.name == "nt":
        appdata = os.environ.get("APPDATA") or os.path.expanduser("~\\AppData\\Roaming")
        return pathlib.Path(appdata) / "dircomp" / "config.toml"
    config_home = os.environ.get("XDG_CONFIG_HOME")
    if config_home:
        return pathlib.Path(config_home) / "dircomp" / "config.toml"
    return pathlib.Path.home() / ".config" / "dircomp" / "config.toml"


def resolve_config_path(path: PathLikeStr | None) -> tuple[pathlib.Path, bool]:
    """
    Resolve the config path (explicit path -> DIRCOMP_CONFIG env -> platform
    default). The flag tells whether the path was asked for explicitly.
    """
    if path:
        return pathlib.Path(path).expanduser(), True
    env = os.environ.get(CONFIG_ENV)
    if env:
        return pathlib.Path(env).expanduser(), True
    return platform_config_default(), False


def _parse_config_dict(d: dict[str, t.Any]) -> DiffOptions:
    section = d.get("dircomp", {})
    if not isinstance(section, dict):
        raise ConfigError("[dircomp] must be a table")
    unknown = sorted(set(section) - set(_BOOL_KEYS) - {"algorithm"})
    if unknown:
        raise ConfigError(f"unknown config key(s): {', '.join(unknown)}")
    for key in _BOOL_KEYS:
        if key in section and not isinstance(section[key], bool):
            raise ConfigError(f"config key {key!r} must be true or false")
    if "algorithm" in section and not isinstance(section["algorithm"], str):
        raise ConfigError("config key 'algorithm' must be a string")
    return DiffOptions(
        show_all=section.get("show_all", False),
        debug=section.get("debug", False),
        algorithm=section.get("algorithm", DEFAULT_ALGORITHM),
        color=section.get("color", True),
    )


def load_options(path: PathLikeStr | None = None) -> DiffOptions:
    """
    Load options from TOML. A missing default file yields the built-in
    defaults; a missing explicit file is an error.
    """
    candidate, explicit = resolve_config_path(path)
    if not candidate.exists():
        if explicit:
            raise ConfigError(f"config file not found: {candidate}")
        return DiffOptions()
    try:
        with candidate.open("rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f"cannot read config file {candidate}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid config file {candidate}: {exc}") from exc
    return _parse_config_dict(data)
