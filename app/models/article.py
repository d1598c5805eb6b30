from app.extensions import db
from datetime import datetime

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class BlogArticle(db.Model):
    __tablename__ = "blog_articles"
    __table_args__ = (
        # A slug may be reused only once the article holding it is deleted
        db.Index(
            "uq_blog_articles_live_slug", "slug", unique=True,
            sqlite_where=db.text("status != 'deleted'"),
            postgresql_where=db.text("status != 'deleted'"),
        ),
    )

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    author_id = db.Column(db.Integer, nullable=False)
    title = db.Column(db.String(100), nullable=False)
    content = db.Column(db.Text, nullable=False)
    publication_date = db.Column(db.DateTime, nullable=False)
    creation_date = db.Column(db.DateTime, nullable=False, default=datetime.now)
    keywords = db.Column(db.JSON, nullable=False, default=list)
    status = db.Column(db.String(20), nullable=False, index=True)  # draft, published, deleted
    slug = db.Column(db.String(255), nullable=False, index=True)
    cover_picture_ref = db.Column(db.String(255), nullable=True)

    def copy(self) -> "BlogArticle":
        """Detached copy of this article; keywords list is not shared."""
        clone = BlogArticle(**{c.name: getattr(self, c.name) for c in self.__table__.columns})
        clone.keywords = list(self.keywords or [])
        return clone

    def to_dict(self):
        """Convert article to dictionary for JSON response."""
        return {
            "id": self.id,
            "authorId": self.author_id,
            "title": self.title,
            "content": self.content,
            "publicationDate": self.publication_date.strftime(DATE_FORMAT) if self.publication_date else None,
            "creationDate": self.creation_date.strftime(DATE_FORMAT) if self.creation_date else None,
            "keywords": list(self.keywords or []),
            "status": self.status,
            "slug": self.slug,
            "coverPictureRef": self.cover_picture_ref,
        }

    def __repr__(self):
        return f"<BlogArticle {self.id}: {self.title}>"
