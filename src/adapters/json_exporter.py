"""JSON export of built and translated values.

Why JSON:
- Interoperability with other tools and pipelines.
- Keeps a stable, diffable rendition of profiles and weather results.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from pathlib import Path

from pydantic import BaseModel


def dump_models_json(models: BaseModel | Sequence[BaseModel]) -> str:
    """Serialize one model or a list of models with a stable format."""

    if isinstance(models, BaseModel):
        payload: object = models.model_dump(mode="json")
    else:
        payload = [m.model_dump(mode="json") for m in models]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"


def export_model_json(*, model: BaseModel | Sequence[BaseModel], output_path: Path) -> Path:
    """Export to a UTF-8 JSON file, creating parent directories."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_models_json(model), encoding="utf-8")
    return output_path
