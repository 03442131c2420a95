"""📥 Graph Loader - Read lineage graphs from YAML or JSON files.

JSON is a subset of YAML, so ``yaml.safe_load`` reads both.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, TypeVar

import yaml
from pydantic import BaseModel, ValidationError

from dplineage.exceptions import GraphLoadError

from .models import ColumnLineageData, FlowData

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _read_document(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Lineage graph not found: {path}")

    with open(path) as f:
        try:
            return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise GraphLoadError(str(path), f"invalid YAML/JSON: {e}") from e


def parse_document(data: Any, model: type[ModelT], source: str = "<dict>") -> ModelT:
    """Validate an already-parsed document into ``model``.

    Raises:
        GraphLoadError: If the payload does not match the model
    """
    if not isinstance(data, dict):
        raise GraphLoadError(source, f"expected a mapping, got {type(data).__name__}")
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise GraphLoadError(source, str(e)) from e


def load_flow_data(path: Path | str) -> FlowData:
    """Load nodes and relationships from a file.

    Args:
        path: YAML or JSON file with ``nodes`` and ``relationships`` keys

    Returns:
        Validated FlowData
    """
    path = Path(path)
    flow = parse_document(_read_document(path), FlowData, source=str(path))
    logger.debug(
        "Loaded %d nodes and %d relationships from %s",
        len(flow.nodes),
        len(flow.relationships),
        path,
    )
    return flow


def load_column_lineage(path: Path | str) -> ColumnLineageData:
    """Load a selected port, its neighbour ports and column relationships."""
    path = Path(path)
    data = parse_document(_read_document(path), ColumnLineageData, source=str(path))
    logger.debug(
        "Loaded %d ports and %d column relationships from %s",
        len(data.all_ports()),
        len(data.column_relationships),
        path,
    )
    return data
