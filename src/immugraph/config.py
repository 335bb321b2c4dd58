"""Library settings backed by OmegaConf."""

from __future__ import annotations

import threading
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from omegaconf import DictConfig, OmegaConf

from .cache import clear_caches, resize_caches
from .exceptions import ConfigurationError
from .logger import DEFAULT_LEVEL, logger, set_level

__all__ = ["Config", "DEFAULTS", "configure", "get_config", "reset"]

DEFAULTS: dict[str, Any] = {
    "cache": {"maxsize": None},
    "logging": {"level": DEFAULT_LEVEL},
    "validate": True,
}

_LEVELS = {"TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"}


class Config:
    """Settings for immugraph, merged over :data:`DEFAULTS`.

    Values are reachable by attribute, e.g. ``cfg.cache.maxsize``.
    """

    def __init__(
        self,
        mapping: Mapping[str, Any] | DictConfig | str | Path | None = None,
    ) -> None:
        """Create a configuration.

        Parameters
        ----------
        mapping:
            Overrides as a mapping, a ``DictConfig`` or the path of a YAML
            file. ``None`` keeps the defaults.
        """
        if isinstance(mapping, (str, Path)):
            try:
                user = OmegaConf.load(str(mapping))
            except Exception as e:
                raise ConfigurationError(f"Failed to load config from {mapping}: {e}") from e
        else:
            user = OmegaConf.create(mapping or {})
        try:
            conf = OmegaConf.merge(OmegaConf.create(DEFAULTS), user)
        except Exception as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        object.__setattr__(self, "_conf", conf)
        self._check()

    def _check(self) -> None:
        maxsize = self._conf.cache.maxsize
        if maxsize is not None and (
            isinstance(maxsize, bool) or not isinstance(maxsize, int) or maxsize < 1
        ):
            raise ConfigurationError(f"cache.maxsize must be a positive int or null, got {maxsize!r}")
        level = self._conf.logging.level
        if not isinstance(level, str) or level.upper() not in _LEVELS:
            raise ConfigurationError(f"Unknown logging.level {level!r}")
        if not isinstance(self._conf["validate"], bool):
            raise ConfigurationError(f"validate must be a bool, got {self._conf['validate']!r}")

    def __getattr__(self, name: str) -> Any:
        """Allow attribute-style access to config values."""
        if name.startswith("_"):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")
        try:
            return self._conf[name]
        except (KeyError, TypeError):
            raise AttributeError(f"'{type(self).__name__}' has no attribute '{name}'")

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError("Config is read-only; call configure() to change settings")

    def merged(self, overrides: Mapping[str, Any]) -> "Config":
        """Return a new config with ``overrides`` applied on top of this one."""
        base = OmegaConf.to_container(self._conf, resolve=True)
        return Config(OmegaConf.merge(OmegaConf.create(base), OmegaConf.create(dict(overrides))))

    def to_dict(self) -> dict[str, Any]:
        return OmegaConf.to_container(self._conf, resolve=True)  # type: ignore[return-value]


_config = Config()
_config_lock = threading.Lock()


def get_config() -> Config:
    """Return the active configuration."""
    return _config


def _apply(config: Config) -> None:
    set_level(config.logging.level.upper())
    resize_caches(config.cache.maxsize)


def configure(
    config: Config | Mapping[str, Any] | str | Path | None = None,
    **overrides: Any,
) -> Config:
    """Replace the active configuration and apply it.

    Parameters
    ----------
    config:
        Configuration object, mapping, or path to a YAML file.
    **overrides:
        Top-level sections merged on top, e.g.
        ``configure(cache={"maxsize": 256})``.

    Returns
    -------
    Config
        The configuration now in effect.
    """
    global _config
    new = config if isinstance(config, Config) else Config(config)
    if overrides:
        new = new.merged(overrides)
    with _config_lock:
        _config = new
        _apply(new)
    logger.debug("configured immugraph: {}", new.to_dict())
    return new


def reset() -> None:
    """Restore the default configuration and empty every cache. Primarily for testing."""
    global _config
    with _config_lock:
        _config = Config()
        _apply(_config)
    clear_caches()
