#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from quote_app.config.loader import ConfigLoader, build_config
from quote_app.config.validation import ConfigValidator


def main():
    """Validate the merged settings.yaml + environment configuration."""
    print("🔍 Validating quote-app configuration...")

    loader = ConfigLoader.create()
    all_valid = True

    print(f"\n📄 Settings directory: {loader.config_dir}")
    config = loader.merge_config()
    errors = ConfigValidator.validate_config(config)

    if errors:
        print(f"❌ Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  • {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("✅ Merged configuration is valid")

    try:
        app_config = build_config(config)
    except (TypeError, ValueError) as e:
        print(f"❌ Error building typed configuration: {e}")
        all_valid = False
    else:
        if not app_config.api.api_key:
            print("⚠️  ALPHA_VANTAGE_API_KEY is not set; provider requests will be rejected")
        print(f"🌐 Proxy will listen on {app_config.server.host}:{app_config.server.port}")

    if all_valid:
        print("\n🎉 Configuration validation passed!")
        sys.exit(0)
    else:
        print("\n❌ Configuration validation failed!")
        sys.exit(1)


if __name__ == "__main__":
    main()
