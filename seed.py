from app import create_app
from app.extensions import db
from app.services.article_store import SqlArticleStore
from app.services.article_service import create_article, list_articles

app = create_app()

SAMPLES = [
    {
        "authorId": 1,
        "title": "Test Article",
        "content": "This is the content of the test article.",
        "publicationDate": "2024-08-13 10:00:00",
        "keywords": ["keyword1", "keyword2"],
        "status": "published",
        "slug": "test-article",
    },
    {
        "authorId": 1,
        "title": "Draft Article",
        "content": "Drafts stay hidden until someone publishes them.",
        "publicationDate": "2024-08-14 10:00:00",
        "keywords": "draft,unpublished",
        "status": "draft",
        "slug": "draft-article",
    },
]

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()
    store = SqlArticleStore(db.session)
    if list_articles(store):
        print("Articles already present, nothing to seed")
    else:
        for sample in SAMPLES:
            article = create_article(store, sample)
            print(f"Created article {article.id}: {sample['slug']}")
