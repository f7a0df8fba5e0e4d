"""Loader for model definitions from YAML configuration."""

from pathlib import Path
from typing import List

import yaml

from lexeme_practice.util.paths import get_models_config_path
from .modelspec import ModelSpec


def load_models_from_yaml(config_path: Path = None) -> List[ModelSpec]:
    """Load all model definitions from models.yaml."""
    config_path = Path(config_path) if config_path else get_models_config_path()

    if not config_path.exists():
        raise FileNotFoundError(f"Models config not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    models = []
    for entry in data.get("models", []):
        model = ModelSpec(
            id=entry["id"],
            platform_id=entry["platform_id"],
            family=entry.get("family", "chat_completion"),
            quality_tier=entry.get("quality_tier", "medium"),
            typical_latency_ms=entry.get("typical_latency_ms"),
            rpm_limit=entry.get("rpm_limit"),
            notes=entry.get("notes"),
        )
        models.append(model)

    return models
