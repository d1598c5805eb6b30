"""
Error kinds raised by the article service.

Each error carries the data the HTTP layer needs to build a response;
status codes are decided by the controller, not here.
"""

from typing import Dict, List


class ArticleError(Exception):
    message = "Article error"

    def __init__(self, message: str = None):
        super().__init__(message or self.message)
        self.message = message or self.message


class MissingFieldError(ArticleError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"Missing required field: {field}")


class InvalidDateError(ArticleError):
    def __init__(self, field: str, value=None):
        self.field = field
        self.value = value
        super().__init__(f"Invalid date format for field: {field}")


class InvalidFileTypeError(ArticleError):
    message = "Invalid file type. Only JPEG, PNG, and GIF images are allowed."

    def __init__(self, mimetype: str = None):
        self.mimetype = mimetype
        super().__init__()


class StorageError(ArticleError):
    message = "Failed to upload file"


class FieldValidationError(ArticleError):
    message = "Invalid article data"

    def __init__(self, errors: Dict[str, List[str]]):
        self.errors = errors
        super().__init__()


class NotFoundError(ArticleError):
    message = "Article not found"

    def __init__(self, article_id: int = None):
        self.article_id = article_id
        super().__init__()


class BannedWordsError(ArticleError):
    def __init__(self, words: List[str]):
        self.words = list(words)
        super().__init__("Content contains banned words: " + ", ".join(self.words))


class DuplicateSlugError(ArticleError):
    """Raised by a store when a live article would share its slug."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"Slug already in use: {slug}")
