# category_engine/schemas/category.py
"""
Input/output models for category data coming from the content backend.

Backend payloads are untrusted: every field is optional, and blank strings
or values of the wrong type are treated as missing. Input that is not a
mapping at all is dropped by ``coerce_model`` instead of raising.
"""

import logging
from typing import Any, Callable, List, Mapping, Optional, Type, TypeVar, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


def _blank_to_none(value: Any) -> Any:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _text_or_none(value: Any) -> Optional[str]:
    value = _blank_to_none(value)
    # Non-string values carry no usable category information
    return value if isinstance(value, str) else None


class ExternalCategoryRecord(BaseModel):
    """
    A category record as returned by the content backend.

    Records may be nested through ``children``; children are kept raw and
    validated one by one so a single bad child does not discard its parent.
    Fields of the wrong type read as missing, so a record with a usable
    slug is never discarded.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    id: Optional[Union[int, str]] = None
    slug: Optional[str] = None
    name: Optional[str] = None
    parent_slug: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("parent_slug", "parentSlug"),
    )
    is_active: Optional[bool] = Field(
        default=None,
        validation_alias=AliasChoices("is_active", "isActive"),
    )
    description: Optional[str] = None
    color: Optional[str] = None
    children: Optional[List[Any]] = None

    @field_validator("slug", "name", "parent_slug", mode="before")
    @classmethod
    def blank_strings_are_missing(cls, v: Any) -> Any:
        return _text_or_none(v)

    @field_validator("id", "is_active", "description", "color", mode="wrap")
    @classmethod
    def invalid_values_are_missing(cls, v: Any, handler: Callable[[Any], Any]) -> Any:
        try:
            return handler(v)
        except ValidationError:
            logger.debug(f"Ignoring invalid category field value {v!r}")
            return None

    @field_validator("children", mode="before")
    @classmethod
    def non_list_children_are_missing(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return list(v)
        return None


class Category(BaseModel):
    """
    A top-level category entry, as consumed by the homepage strip.

    Entries synthesized from the canonical tree carry negative ids.
    """

    model_config = ConfigDict(extra="ignore")

    id: Optional[Union[int, str]] = None
    name: str
    slug: str
    description: Optional[str] = None
    color: Optional[str] = None
    is_active: Optional[bool] = None
    parent_slug: Optional[str] = None


class CategoryReference(BaseModel):
    """
    The category attached to a single content item.

    Any combination of fields may be missing.
    """

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    slug: Optional[str] = None
    name: Optional[str] = None
    parent_slug: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("parent_slug", "parentSlug"),
    )

    @field_validator("slug", "name", "parent_slug", mode="before")
    @classmethod
    def blank_strings_are_missing(cls, v: Any) -> Any:
        return _text_or_none(v)


def coerce_model(raw: Any, model: Type[ModelT]) -> Optional[ModelT]:
    """
    Validate an arbitrary value into ``model``.

    Accepts an instance of the model, any other pydantic model, or a mapping.
    Returns None for anything else or when validation fails.
    """
    if raw is None:
        return None
    if isinstance(raw, model):
        return raw
    if isinstance(raw, BaseModel):
        raw = raw.model_dump()
    if not isinstance(raw, Mapping):
        logger.debug(f"Dropping non-mapping {model.__name__} input: {type(raw).__name__}")
        return None

    try:
        return model.model_validate(dict(raw))
    except ValidationError as e:
        logger.debug(f"Dropping invalid {model.__name__}: {e.error_count()} error(s)")
        return None
