"""
Article Service Module

Handles the blog article lifecycle:
- Creation with required-field, date, upload and field checks
- Retrieval and listing
- Partial update
- Soft delete (status flip, record and cover file are kept)
- Keyword refresh and banned-word checks on article content

Every function takes the ArticleStore it works on; nothing here reaches
for a global session.
"""

import logging
import os
from datetime import datetime
from typing import Any, Dict, List

from marshmallow import ValidationError

from app.models.article import BlogArticle, DATE_FORMAT
from app.schemas.article_schema import ArticleSchema, ArticlePatchSchema, BannedWordsSchema
from app.services.article_store import ArticleStore
from app.services.content_validator import validate_content
from app.services.text_analyzer import find_top_words
from app.utils.enums import ArticleStatus
from app.utils.errors import (
    BannedWordsError,
    DuplicateSlugError,
    FieldValidationError,
    InvalidDateError,
    InvalidFileTypeError,
    MissingFieldError,
    NotFoundError,
)

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ["authorId", "title", "content", "publicationDate", "keywords", "status", "slug"]
DATE_FIELDS = ["publicationDate"]
IMAGE_EXTENSIONS = {
    "image/jpeg": ["jpg", "jpeg"],
    "image/png": ["png"],
    "image/gif": ["gif"],
}
SLUG_TAKEN = "This slug is already used by another article."


def parse_date(value: Any, field: str) -> datetime:
    """
    Parse ``YYYY-MM-DD HH:MM:SS``.

    The parsed value must format back to exactly the input, so zero padding
    and surrounding whitespace are rejected.
    """
    if not isinstance(value, str):
        raise InvalidDateError(field, value)
    try:
        parsed = datetime.strptime(value, DATE_FORMAT)
    except ValueError:
        raise InvalidDateError(field, value)
    if parsed.strftime(DATE_FORMAT) != value:
        raise InvalidDateError(field, value)
    return parsed


def load_banned_words(value: Any) -> List[str]:
    """
    Normalize a ``banned`` input: absent means none, a string is split on commas.

    Raises:
        FieldValidationError: value is neither a string nor a list of strings
    """
    if value is None:
        return []
    try:
        return BannedWordsSchema().load({"banned": value})["banned"]
    except ValidationError as e:
        raise FieldValidationError(dict(e.messages))


def _upload_extension(upload) -> str:
    """Extension kept from the client filename only when it matches the image type."""
    allowed = IMAGE_EXTENSIONS[upload.mimetype]
    ext = os.path.splitext(upload.filename or "")[1].lstrip(".").lower()
    return ext if ext in allowed else allowed[0]


def _check_upload(upload) -> None:
    if upload.mimetype not in IMAGE_EXTENSIONS:
        logger.warning("Rejected cover picture with type %s", upload.mimetype)
        raise InvalidFileTypeError(upload.mimetype)


def create_article(
    store: ArticleStore,
    data: Dict[str, Any],
    cover_picture=None,
    storage=None,
) -> BlogArticle:
    """
    Create a new article.

    Args:
        store: Article store the record is added to
        data: Raw input keyed by API field names (authorId, title, ...)
        cover_picture: Uploaded file with ``filename``, ``mimetype`` and ``stream`` (optional)
        storage: File storage used when a cover picture is given

    Returns:
        The stored article

    Raises:
        MissingFieldError: first required field absent, in REQUIRED_FIELDS order
        InvalidDateError: publicationDate is not ``YYYY-MM-DD HH:MM:SS``
        InvalidFileTypeError: cover picture is not JPEG, PNG or GIF
        FieldValidationError: every field constraint violated
        StorageError: the cover picture could not be written
    """
    for field in REQUIRED_FIELDS:
        if data.get(field) is None:
            raise MissingFieldError(field)

    dates = {field: parse_date(data[field], field) for field in DATE_FIELDS}

    has_upload = cover_picture is not None and bool(cover_picture.filename)
    if has_upload:
        _check_upload(cover_picture)

    try:
        values = ArticleSchema().load({f: data[f] for f in REQUIRED_FIELDS if f not in DATE_FIELDS})
        errors: Dict[str, List[str]] = {}
    except ValidationError as e:
        values = None
        errors = dict(e.messages)

    slug = data["slug"]
    if isinstance(slug, str) and slug and store.slug_taken(slug):
        errors.setdefault("slug", []).append(SLUG_TAKEN)
    if errors:
        raise FieldValidationError(errors)

    cover_picture_ref = None
    if has_upload:
        cover_picture_ref = storage.save(cover_picture.stream, _upload_extension(cover_picture))

    article = BlogArticle(
        publication_date=dates["publicationDate"],
        creation_date=datetime.now(),
        cover_picture_ref=cover_picture_ref,
        **values
    )
    try:
        article = store.add(article)
    except DuplicateSlugError:
        # Another request took the slug after the check above
        if cover_picture_ref:
            storage.delete(cover_picture_ref)
        raise FieldValidationError({"slug": [SLUG_TAKEN]})
    logger.info("Created article %s", article.id)
    return article


def get_article(store: ArticleStore, article_id: int) -> BlogArticle:
    article = store.get(article_id)
    if article is None:
        raise NotFoundError(article_id)
    return article


def list_articles(store: ArticleStore) -> List[BlogArticle]:
    """All articles, deleted ones included."""
    return store.list()


def update_article(store: ArticleStore, article_id: int, patch: Dict[str, Any]) -> BlogArticle:
    """
    Apply the fields present in ``patch`` to an article.

    Keys with a None value count as absent. Only title, content,
    publicationDate, keywords, status and slug are applied.

    Raises:
        NotFoundError: no article with this id
        InvalidDateError: publicationDate present but malformed
        FieldValidationError: status outside the enum, a non-string value,
            or a slug held by another live article
    """
    present = {k: v for k, v in patch.items() if v is not None}

    try:
        with store.lock(article_id) as article:
            if article is None:
                raise NotFoundError(article_id)

            publication_date = None
            if "publicationDate" in present:
                publication_date = parse_date(present["publicationDate"], "publicationDate")

            try:
                changes = ArticlePatchSchema().load(present)
            except ValidationError as e:
                raise FieldValidationError(dict(e.messages))

            if "slug" in changes and store.slug_taken(changes["slug"], exclude_id=article_id):
                raise FieldValidationError({"slug": [SLUG_TAKEN]})

            for attr, value in changes.items():
                setattr(article, attr, value)
            if publication_date is not None:
                article.publication_date = publication_date
    except DuplicateSlugError:
        raise FieldValidationError({"slug": [SLUG_TAKEN]})

    logger.info("Updated article %s (%s)", article_id, ", ".join(sorted(present)) or "no fields")
    return article


def delete_article(store: ArticleStore, article_id: int) -> BlogArticle:
    """
    Soft delete an article.

    The record and its cover picture stay in place; deleting twice is allowed.
    """
    with store.lock(article_id) as article:
        if article is None:
            raise NotFoundError(article_id)
        article.status = ArticleStatus.DELETED.value

    logger.info("Deleted article %s", article_id)
    return article


def refresh_keywords(store: ArticleStore, article_id: int, banned: Any) -> BlogArticle:
    """
    Replace an article's keywords with the top words of its content.

    ``banned`` is a list or a comma-delimited string, checked once the
    article is known to exist.
    """
    with store.lock(article_id) as article:
        if article is None:
            raise NotFoundError(article_id)
        article.keywords = find_top_words(article.content, load_banned_words(banned))

    logger.info("Refreshed keywords of article %s", article_id)
    return article


def check_content(store: ArticleStore, article_id: int, banned: Any) -> None:
    """
    Raise BannedWordsError if the article's content contains a banned word.
    """
    article = get_article(store, article_id)
    found = validate_content(article.content, load_banned_words(banned))
    if found:
        logger.warning("Article %s contains %d banned word(s)", article_id, len(found))
        raise BannedWordsError(found)
