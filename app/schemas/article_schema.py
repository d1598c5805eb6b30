from marshmallow import Schema, fields, validate, EXCLUDE
from app.utils.enums import ArticleStatus

NOT_BLANK = "This value should not be blank."
STATUS_CHOICES = [e.value for e in ArticleStatus]


def split_words(value):
    """A single comma-delimited string becomes a list; sequences pass through."""
    if isinstance(value, str):
        return value.split(",")
    if isinstance(value, (list, tuple)):
        return list(value)
    return value


class WordList(fields.List):
    """List of strings that also accepts one comma-delimited string."""

    def __init__(self, **kwargs):
        super().__init__(fields.Str(), **kwargs)

    def _deserialize(self, value, attr, data, **kwargs):
        return super()._deserialize(split_words(value), attr, data, **kwargs)


class ArticleSchema(Schema):
    """Field constraints checked when an article is created."""

    class Meta:
        unknown = EXCLUDE

    author_id = fields.Int(data_key="authorId", required=True)
    title = fields.Str(required=True, validate=[
        validate.Length(min=1, error=NOT_BLANK),
        validate.Length(max=100),
    ])
    content = fields.Str(required=True, validate=validate.Length(min=1, error=NOT_BLANK))
    keywords = WordList(required=True)
    status = fields.Str(required=True, validate=validate.OneOf(STATUS_CHOICES))
    slug = fields.Str(required=True, validate=[
        validate.Length(min=1, error=NOT_BLANK),
        validate.Length(max=255),
    ])


class ArticlePatchSchema(Schema):
    """
    Fields accepted by a partial update.

    Only keys present in the input appear in the loaded result. authorId,
    creationDate, coverPictureRef and id are not updatable and are dropped.
    publicationDate is parsed by the service.
    """

    class Meta:
        unknown = EXCLUDE

    title = fields.Str()
    content = fields.Str()
    keywords = WordList()
    status = fields.Str(validate=validate.OneOf(STATUS_CHOICES))
    slug = fields.Str()


class BannedWordsSchema(Schema):
    class Meta:
        unknown = EXCLUDE

    banned = WordList(load_default=list)
