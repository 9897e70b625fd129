"""Move request models exchanged with the presentation layer."""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, StrictInt, TypeAdapter, ValidationError


class WasteSource(BaseModel, frozen=True):
    """Top card of the waste pile."""

    source: Literal["waste"] = "waste"

    def __str__(self) -> str:
        return "waste"


class TableauSource(BaseModel, frozen=True):
    """Run of face-up cards starting at ``start_index`` in a tableau column."""

    source: Literal["tableau"] = "tableau"
    column: StrictInt
    start_index: StrictInt

    def __str__(self) -> str:
        return f"tableau[{self.column}][{self.start_index}:]"


class FoundationSource(BaseModel, frozen=True):
    """Top card of a foundation pile."""

    source: Literal["foundation"] = "foundation"
    index: StrictInt

    def __str__(self) -> str:
        return f"foundation[{self.index}]"


class TableauTarget(BaseModel, frozen=True):
    """Tableau column to drop onto."""

    type: Literal["tableau"] = "tableau"
    column: StrictInt

    def __str__(self) -> str:
        return f"tableau[{self.column}]"


class FoundationTarget(BaseModel, frozen=True):
    """Foundation drop.

    ``index`` is whatever pile the caller dropped on; the validator resolves
    the real pile from the card's suit and ignores it.
    """

    type: Literal["foundation"] = "foundation"
    index: StrictInt | None = None

    def __str__(self) -> str:
        return "foundation"


MoveSource = Annotated[
    Union[WasteSource, TableauSource, FoundationSource],
    Field(discriminator="source"),
]
MoveTarget = Annotated[
    Union[TableauTarget, FoundationTarget],
    Field(discriminator="type"),
]

_source_adapter = TypeAdapter(MoveSource)
_target_adapter = TypeAdapter(MoveTarget)

SOURCE_TYPES = (WasteSource, TableauSource, FoundationSource)
TARGET_TYPES = (TableauTarget, FoundationTarget)


def parse_source(data: Any) -> MoveSource | None:
    """Coerce a move source from a model or a mapping.

    Args:
        data: Source model instance or mapping such as
            ``{"source": "tableau", "column": 2, "start_index": 4}``.

    Returns:
        Source model, or None if the data is malformed.
    """
    if isinstance(data, SOURCE_TYPES):
        return data
    try:
        return _source_adapter.validate_python(data)
    except ValidationError:
        return None


def parse_target(data: Any) -> MoveTarget | None:
    """Coerce a move target from a model or a mapping.

    Returns:
        Target model, or None if the data is malformed.
    """
    if isinstance(data, TARGET_TYPES):
        return data
    try:
        return _target_adapter.validate_python(data)
    except ValidationError:
        return None
