"""
Article Store Module

Owns the collection of blog articles. Two implementations share one interface:
- SqlArticleStore: Flask-SQLAlchemy session, row locks for per-article writes,
  a partial unique index for live slugs
- InMemoryArticleStore: dict keyed by id, hands out copies, one mutex

Both refuse to persist a non-deleted article whose slug is already used by
another non-deleted article, raising DuplicateSlugError.
"""

import threading
from contextlib import contextmanager
from typing import Dict, Iterator, List, Optional

from sqlalchemy.exc import IntegrityError

from app.models.article import BlogArticle
from app.utils.enums import ArticleStatus
from app.utils.errors import DuplicateSlugError


class ArticleStore:
    """Interface used by the article service."""

    def add(self, article: BlogArticle) -> BlogArticle:
        raise NotImplementedError

    def get(self, article_id: int) -> Optional[BlogArticle]:
        raise NotImplementedError

    def list(self) -> List[BlogArticle]:
        raise NotImplementedError

    def lock(self, article_id: int):
        """
        Context manager yielding the article for modification, or None if it
        does not exist.

        Writes to the same article are serialized for the duration of the
        block and the yielded article is saved when the block exits cleanly.
        """
        raise NotImplementedError

    def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError


class SqlArticleStore(ArticleStore):
    def __init__(self, session):
        self.session = session

    def _commit(self, article: BlogArticle) -> None:
        slug, article_id = article.slug, article.id
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            if self._live_slug(slug, article_id):
                raise DuplicateSlugError(slug)
            raise

    def _live_slug(self, slug: str, exclude_id: Optional[int]) -> bool:
        query = self.session.query(BlogArticle.id).filter(
            BlogArticle.slug == slug,
            BlogArticle.status != ArticleStatus.DELETED.value,
        )
        if exclude_id is not None:
            query = query.filter(BlogArticle.id != exclude_id)
        return query.first() is not None

    def add(self, article: BlogArticle) -> BlogArticle:
        self.session.add(article)
        self._commit(article)
        return article

    def get(self, article_id: int) -> Optional[BlogArticle]:
        return self.session.get(BlogArticle, article_id)

    def list(self) -> List[BlogArticle]:
        return self.session.query(BlogArticle).order_by(BlogArticle.id).all()

    @contextmanager
    def lock(self, article_id: int) -> Iterator[Optional[BlogArticle]]:
        article = (
            self.session.query(BlogArticle)
            .filter_by(id=article_id)
            .with_for_update()
            .populate_existing()
            .first()
        )
        try:
            yield article
        except Exception:
            self.session.rollback()
            raise
        if article is None:
            self.session.rollback()
        else:
            self._commit(article)

    def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        return self._live_slug(slug, exclude_id)


class InMemoryArticleStore(ArticleStore):
    def __init__(self):
        self._articles: Dict[int, BlogArticle] = {}
        self._next_id = 1
        self._mutex = threading.RLock()

    def _check_slug(self, article: BlogArticle) -> None:
        # Caller holds the mutex
        if article.status == ArticleStatus.DELETED.value:
            return
        for other in self._articles.values():
            if (other.id != article.id and other.slug == article.slug
                    and other.status != ArticleStatus.DELETED.value):
                raise DuplicateSlugError(article.slug)

    def add(self, article: BlogArticle) -> BlogArticle:
        with self._mutex:
            self._check_slug(article)
            stored = article.copy()
            stored.id = self._next_id
            self._next_id += 1
            self._articles[stored.id] = stored
            article.id = stored.id
            return stored.copy()

    def get(self, article_id: int) -> Optional[BlogArticle]:
        with self._mutex:
            article = self._articles.get(article_id)
            return article.copy() if article else None

    def list(self) -> List[BlogArticle]:
        with self._mutex:
            return [self._articles[k].copy() for k in sorted(self._articles)]

    @contextmanager
    def lock(self, article_id: int) -> Iterator[Optional[BlogArticle]]:
        with self._mutex:
            stored = self._articles.get(article_id)
            working = stored.copy() if stored else None
            yield working
            if working is not None:
                working.id = article_id
                self._check_slug(working)
                self._articles[article_id] = working.copy()

    def slug_taken(self, slug: str, exclude_id: Optional[int] = None) -> bool:
        with self._mutex:
            return any(
                a.slug == slug and a.status != ArticleStatus.DELETED.value and a.id != exclude_id
                for a in self._articles.values()
            )
