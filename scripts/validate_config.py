#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

import yaml

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ta_core.config.loader import ConfigLoader, build_config
from ta_core.config.validation import ConfigValidator, ValidationError
from ta_core.errors import ConfigurationError


def validate_coin_config(loader: ConfigLoader, coin_id: Optional[str]) -> List[ValidationError]:
    """Validate the merged configuration for a specific coin."""
    config = loader.merge_config(coin_id)
    errors = ConfigValidator.validate_config(config)
    if not errors:
        # Unknown sections or parameter names only surface when rebuilding
        build_config(config)
    return errors


def configured_coins(loader: ConfigLoader) -> List[str]:
    """Coin ids listed in coins.yaml."""
    coins_file = loader.config_dir / "coins.yaml"
    if not coins_file.exists():
        return []

    with open(coins_file) as f:
        data = yaml.safe_load(f) or {}

    return list((data.get("coins") or {}).keys())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)

    print(f"Validating configuration in {loader.config_dir}...")

    all_valid = True

    for coin_id in [None] + configured_coins(loader):
        label = coin_id or "defaults"
        try:
            errors = validate_coin_config(loader, coin_id)
        except ConfigurationError as e:
            print(f"  {label}: {e}")
            all_valid = False
            continue

        if errors:
            print(f"  {label}: {len(errors)} validation errors")
            for error in errors:
                print(f"    - {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"  {label}: ok")

    if all_valid:
        print("All configuration validation passed")
        sys.exit(0)
    else:
        print("Configuration validation failed")
        sys.exit(1)


if __name__ == "__main__":
    main()
