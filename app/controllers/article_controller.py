"""
Article Controller Module

Handles blog article HTTP requests:
- Parsing JSON or form bodies
- Calling the article service with the SQL store
- Translating article errors to status codes and JSON bodies
"""

from flask import request, current_app
from app.extensions import db
from app.utils.http import ok, error, json_body
from app.utils.errors import (
    ArticleError,
    BannedWordsError,
    FieldValidationError,
    InvalidDateError,
    InvalidFileTypeError,
    MissingFieldError,
    NotFoundError,
    StorageError,
)
from app.services.article_store import SqlArticleStore
from app.services.storage import LocalFileStorage
from app.services.article_service import (
    create_article,
    get_article,
    list_articles,
    update_article,
    delete_article,
    refresh_keywords,
    check_content,
)

ERROR_STATUS = {
    MissingFieldError: 400,
    InvalidDateError: 400,
    InvalidFileTypeError: 400,
    FieldValidationError: 400,
    BannedWordsError: 400,
    NotFoundError: 404,
    StorageError: 500,
}


def _store():
    return SqlArticleStore(db.session)


def _article_error(e: ArticleError):
    status = ERROR_STATUS.get(type(e), 400)
    if isinstance(e, FieldValidationError):
        return error(e.message, status, details=e.errors)
    return error(e.message, status)


def _unexpected(e: Exception):
    db.session.rollback()
    current_app.logger.exception("Unexpected error: %s", e)
    return error("Unexpected error", 500)


def list_articles_handler():
    try:
        return ok([article.to_dict() for article in list_articles(_store())])
    except Exception as e:
        return _unexpected(e)


def create_article_handler():
    """
    Create a new article.

    Body Parameters (multipart, urlencoded or JSON):
        - authorId, title, content, publicationDate, keywords, status, slug (required)
        - keywords: list, repeated field, or comma-delimited string
        - coverPictureRef (optional): JPEG, PNG or GIF file
    """
    try:
        create_article(
            _store(),
            json_body(),
            cover_picture=request.files.get("coverPictureRef"),
            storage=LocalFileStorage(current_app.config["UPLOAD_DIRECTORY"]),
        )
        return ok({"status": "Article created"}, 201)
    except ArticleError as e:
        return _article_error(e)
    except Exception as e:
        return _unexpected(e)


def get_article_handler(article_id: int):
    try:
        return ok(get_article(_store(), article_id).to_dict())
    except ArticleError as e:
        return _article_error(e)
    except Exception as e:
        return _unexpected(e)


def update_article_handler(article_id: int):
    """
    Partially update an article.

    Body Parameters (all optional):
        - title, content, publicationDate, keywords, status, slug
    """
    try:
        update_article(_store(), article_id, json_body())
        return ok({"status": "Article updated"})
    except ArticleError as e:
        return _article_error(e)
    except Exception as e:
        return _unexpected(e)


def delete_article_handler(article_id: int):
    try:
        delete_article(_store(), article_id)
        return ok({"status": "Article deleted"})
    except ArticleError as e:
        return _article_error(e)
    except Exception as e:
        return _unexpected(e)


def refresh_keywords_handler(article_id: int):
    """
    Replace keywords with the three most frequent words of the content.

    Body Parameters:
        - banned: words to skip (list or comma-delimited string)
    """
    try:
        refresh_keywords(_store(), article_id, json_body().get("banned"))
        return ok({"status": "Keywords updated"})
    except ArticleError as e:
        return _article_error(e)
    except Exception as e:
        return _unexpected(e)


def validate_content_handler(article_id: int):
    """
    Check an article's content against banned words.

    Body Parameters:
        - banned: words to look for (list or comma-delimited string)
    """
    try:
        check_content(_store(), article_id, json_body().get("banned"))
        return ok({"status": "Content is valid"})
    except ArticleError as e:
        return _article_error(e)
    except Exception as e:
        return _unexpected(e)
