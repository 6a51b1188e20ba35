# src/clippings_kit/serialization.py

"""Wire format for parsed clippings.

JSON list of ``{"book": {...}, "clippings": [...]}`` groups. Each clipping
carries a ``kind`` discriminator; bookmarks have no ``text`` key. Location
``to`` is null for single points.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from .models import (
    Book,
    BookClippings,
    ClippingArticleClip,
    ClippingBookmark,
    ClippingContent,
    ClippingHighlight,
    ClippingNote,
    ClippingsDocument,
    ClippingsList,
    Location,
    LocationKind,
    sort_clippings_list,
)


class LocationModel(BaseModel):
    from_: int = Field(alias="from")
    to: int | None
    kind: Literal["Page", "Location"]

    class Config:
        extra = "forbid"
        populate_by_name = True


class HighlightModel(BaseModel):
    kind: Literal["ClippingHighlight"] = "ClippingHighlight"
    location: LocationModel
    text: str

    class Config:
        extra = "forbid"


class NoteModel(BaseModel):
    kind: Literal["ClippingNote"] = "ClippingNote"
    location: LocationModel
    text: str

    class Config:
        extra = "forbid"


class BookmarkModel(BaseModel):
    kind: Literal["ClippingBookmark"] = "ClippingBookmark"
    location: LocationModel

    class Config:
        extra = "forbid"


class ArticleClipModel(BaseModel):
    kind: Literal["ClippingArticleClip"] = "ClippingArticleClip"
    location: LocationModel
    text: str

    class Config:
        extra = "forbid"


ContentModel = Annotated[
    Union[HighlightModel, NoteModel, BookmarkModel, ArticleClipModel],
    Field(discriminator="kind"),
]


class BookModel(BaseModel):
    title: str
    author: str | None

    class Config:
        extra = "forbid"


class BookClippingsModel(BaseModel):
    book: BookModel
    clippings: list[ContentModel]

    class Config:
        extra = "forbid"


_groups_adapter = TypeAdapter(list[BookClippingsModel])

_TEXT_MODELS: dict[type, type[BaseModel]] = {
    ClippingHighlight: HighlightModel,
    ClippingNote: NoteModel,
    ClippingArticleClip: ArticleClipModel,
}

_TEXT_CONTENT: dict[type[BaseModel], type] = {
    model: content for content, model in _TEXT_MODELS.items()
}


def _location_to_model(location: Location) -> LocationModel:
    return LocationModel(
        from_=location.from_, to=location.to, kind=location.kind.value
    )


def _location_from_model(model: LocationModel) -> Location:
    return Location(kind=LocationKind(model.kind), from_=model.from_, to=model.to)


def _content_to_model(content: ClippingContent) -> BaseModel:
    location = _location_to_model(content.location)
    if isinstance(content, ClippingBookmark):
        return BookmarkModel(location=location)
    return _TEXT_MODELS[type(content)](location=location, text=content.text)


def _content_from_model(model: BaseModel) -> ClippingContent:
    location = _location_from_model(model.location)  # type: ignore[attr-defined]
    if isinstance(model, BookmarkModel):
        return ClippingBookmark(location=location)
    return _TEXT_CONTENT[type(model)](location=location, text=model.text)  # type: ignore[attr-defined]


def to_models(groups: ClippingsList) -> list[BookClippingsModel]:
    return [
        BookClippingsModel(
            book=BookModel(title=group.book.title, author=group.book.author),
            clippings=[_content_to_model(c) for c in group.clippings],
        )
        for group in groups
    ]


def from_models(models: list[BookClippingsModel]) -> ClippingsList:
    return [
        BookClippings(
            book=Book(title=model.book.title, author=model.book.author),
            clippings=[_content_from_model(c) for c in model.clippings],
        )
        for model in models
    ]


def dump_groups(groups: ClippingsList) -> str:
    """Serialize groups to compact JSON. Non-ASCII text is kept as is."""
    return _groups_adapter.dump_json(to_models(groups), by_alias=True).decode(
        "utf-8"
    )


def dump_document(document: ClippingsDocument, sort: bool = False) -> str:
    """Serialize a document, optionally sorted by (author, title)."""
    groups = document.to_list()
    if sort:
        sort_clippings_list(groups)
    return dump_groups(groups)


def load_groups(data: str | bytes) -> ClippingsList:
    """Inverse of dump_groups.

    Raises:
        pydantic.ValidationError: If the data does not match the wire format.
    """
    return from_models(_groups_adapter.validate_json(data))
