"""
Article Routes Module

Defines URL mappings for blog article endpoints. All routes require a
Bearer token.
"""

from flask import Blueprint
from app.utils.auth import require_auth
from app.controllers.article_controller import (
    list_articles_handler,
    create_article_handler,
    get_article_handler,
    update_article_handler,
    delete_article_handler,
    refresh_keywords_handler,
    validate_content_handler,
)

article_bp = Blueprint("blog_articles", __name__, url_prefix="/api/blog-articles")


@article_bp.get("")
@require_auth
def list_articles():
    """List all blog articles"""
    return list_articles_handler()


@article_bp.post("")
@require_auth
def create_article():
    """Create a new blog article"""
    return create_article_handler()


@article_bp.get("/<int:id>")
@require_auth
def get_article(id):
    """Get a blog article by ID"""
    return get_article_handler(id)


@article_bp.patch("/<int:id>")
@require_auth
def update_article(id):
    """Partially update a blog article"""
    return update_article_handler(id)


@article_bp.delete("/<int:id>")
@require_auth
def delete_article(id):
    """Soft delete a blog article"""
    return delete_article_handler(id)


@article_bp.patch("/<int:id>/keywords")
@require_auth
def refresh_keywords(id):
    """Recompute keywords from the article content"""
    return refresh_keywords_handler(id)


@article_bp.post("/<int:id>/validate-content")
@require_auth
def validate_content(id):
    """Check the article content for banned words"""
    return validate_content_handler(id)
