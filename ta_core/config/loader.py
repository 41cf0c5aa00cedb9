"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from .defaults import DefaultConfig, get_default_config


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_coin_config(self, coin_id: str) -> dict[str, Any]:
        """Load coin-specific configuration overrides."""
        coins_file = self.config_dir / "coins.yaml"

        if not coins_file.exists():
            return {}

        with open(coins_file) as f:
            coins_config = yaml.safe_load(f) or {}

        if not isinstance(coins_config, dict):
            raise ConfigurationError(f"{coins_file} must contain a mapping", field="coins", value=coins_config)

        coins = coins_config.get("coins") or {}
        if not isinstance(coins, dict):
            raise ConfigurationError("'coins' must map coin ids to overrides", field="coins", value=coins)

        coin_config = coins.get(coin_id) or {}
        if not isinstance(coin_config, dict):
            raise ConfigurationError(
                f"Overrides for coin '{coin_id}' must be a mapping",
                field=f"coins.{coin_id}",
                value=coin_config,
                context={"coin_id": coin_id},
            )

        return coin_config

    def merge_config(
        self,
        coin_id: Optional[str] = None,
        call_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Coin-specific overrides
        3. Global defaults (lowest priority)
        """
        # Start with global defaults
        config = self._dataclass_to_dict(self.defaults)

        # Apply coin-specific overrides
        if coin_id:
            config = self._deep_merge(config, self.load_coin_config(coin_id))

        # Apply per-call overrides
        if call_overrides:
            config = self._deep_merge(config, call_overrides)

        return config

    def load(
        self,
        coin_id: Optional[str] = None,
        call_overrides: Optional[dict[str, Any]] = None
    ) -> DefaultConfig:
        """Merge all tiers and rebuild a typed configuration."""
        return build_config(self.merge_config(coin_id, call_overrides))

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def build_config(config: dict[str, Any]) -> DefaultConfig:
    """
    Rebuild a typed DefaultConfig from a (merged) configuration dictionary.

    Sections missing from the dictionary fall back to their defaults.

    Raises:
        ConfigurationError: If a section or parameter name is unknown
    """
    defaults = get_default_config()
    sections = {}

    for section in fields(DefaultConfig):
        params_cls = type(getattr(defaults, section.name))
        values = config.get(section.name) or {}
        try:
            sections[section.name] = params_cls(**values)
        except TypeError as e:
            raise ConfigurationError(
                f"Invalid parameters for section '{section.name}': {e}",
                field=section.name,
                value=values,
            )

    unknown = set(config) - set(sections)
    if unknown:
        raise ConfigurationError(
            f"Unknown configuration sections: {sorted(unknown)}",
            field=",".join(sorted(unknown)),
        )

    return DefaultConfig(**sections)
