"""
API response utilities for normalizing upstream responses.

The upstream is inconsistent about single-entity responses:
- Some endpoints return the entity itself: {"id": 1, "name": ...}
- Others wrap it in an envelope: {"data": {"id": 1, "name": ...}}

The shape is decided once, at the API boundary, into a tagged result. A payload
is treated as an envelope when it has a ``data`` field and no top-level ``id``.
This is a heuristic: an entity that has its own ``data`` field and no ``id``
would be unwrapped by mistake.
"""

import logging
from typing import Any, Dict, List, Literal, Set, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from ..models.pagination import PaginatedResponse, PaginationMetadata

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)


class Wrapped(BaseModel):
    """Payload was an envelope; ``entity`` is its ``data`` field."""

    kind: Literal["wrapped"] = "wrapped"
    entity: Any = None


class Unwrapped(BaseModel):
    """Payload was the entity itself."""

    kind: Literal["unwrapped"] = "unwrapped"
    entity: Any = None


EntityResponse = Union[Wrapped, Unwrapped]


def classify_entity_response(raw: Any) -> EntityResponse:
    """
    Decide whether a single-entity payload is wrapped in an envelope.

    Args:
        raw: Raw JSON payload

    Returns:
        Wrapped when ``raw`` is a dict with ``data`` and without ``id``,
        Unwrapped otherwise (including non-dict payloads)

    Examples:
        >>> classify_entity_response({"data": {"id": 5}}).kind
        'wrapped'
        >>> classify_entity_response({"id": 5, "data": {}}).kind
        'unwrapped'
    """
    if isinstance(raw, dict) and "data" in raw and "id" not in raw:
        return Wrapped(entity=raw["data"])
    return Unwrapped(entity=raw)


def normalize_entity(raw: Any) -> Any:
    """Return the entity of a single-entity payload, unwrapping envelopes."""
    return classify_entity_response(raw).entity


def _invalid_fields(model: Type[BaseModel], error: ValidationError) -> Set[str]:
    # Top-level keys of the failing fields, under both field name and alias
    names = {str(detail["loc"][0]) for detail in error.errors() if detail.get("loc")}
    for field_name, field in model.model_fields.items():
        if field_name in names or (field.alias and field.alias in names):
            names.add(field_name)
            if field.alias:
                names.add(field.alias)
    return names


def build_model(model: Type[T], data: Dict[str, Any]) -> T:
    """
    Parse one upstream record into ``model`` without failing on its shape.

    Fields whose value has the wrong type (e.g. ``"logo": "text"`` where an
    object is expected, or ``"totalCount": null``) are dropped and left at
    their default, and the rest of the record is kept.

    Args:
        model: Pydantic model to build
        data: Raw record

    Returns:
        Model instance
    """
    try:
        return model(**data)
    except ValidationError as error:
        invalid = _invalid_fields(model, error)
        logger.debug("Dropping malformed %s fields: %s", model.__name__, sorted(invalid))
    cleaned = {key: value for key, value in data.items() if key not in invalid}
    try:
        return model(**cleaned)
    except ValidationError:
        return model.model_construct(**cleaned)


def parse_entity(raw: Any, model: Type[T]) -> Union[T, None]:
    """
    Normalize a single-entity payload and parse it into ``model``.

    Returns None when the payload holds no entity object. Missing or malformed
    fields are left unset; no error is raised for an unexpected shape.
    """
    entity = normalize_entity(raw)
    if not isinstance(entity, dict):
        return None
    return build_model(model, entity)


def extract_list(raw: Any) -> List[Any]:
    """Items of a ``{"data": [...]}`` payload; anything else yields []."""
    if isinstance(raw, dict):
        data = raw.get("data")
        return data if isinstance(data, list) else []
    return raw if isinstance(raw, list) else []


def parse_list(raw: Any, model: Type[T]) -> List[T]:
    """Parse the object items of a list payload, skipping anything else."""
    return [build_model(model, item) for item in extract_list(raw) if isinstance(item, dict)]


def parse_paginated_response(raw: Any, model: Type[T]) -> PaginatedResponse[T]:
    """
    Parse a list payload ``{"data": [...], "pagination": {...}}``.

    Non-dict items are skipped; a missing or malformed pagination block is
    reported as None, and malformed pagination fields as unknown (None).
    """
    items = parse_list(raw, model)
    pagination = None
    if isinstance(raw, dict) and isinstance(raw.get("pagination"), dict):
        pagination = build_model(PaginationMetadata, raw["pagination"])
    return PaginatedResponse[model](data=items, pagination=pagination)  # type: ignore[valid-type]


def envelope_data(raw: Any) -> Dict[str, Any]:
    """The ``data`` object of an envelope payload, or {}."""
    entity = normalize_entity(raw)
    return entity if isinstance(entity, dict) else {}
