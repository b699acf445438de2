"""
Unit tests для маппинга Article ↔ BlogArticleModel.
"""

from datetime import datetime

from src.domain.entities.article import Article
from src.domain.value_objects.article_status import ArticleStatus
from src.infrastructure.persistence.article_repository_impl import ArticleRepositoryImpl


def make_article(**overrides) -> Article:
    data = dict(
        author_id=3,
        title="Mapped",
        content="mapped content",
        slug="mapped",
        publication_date=datetime(2024, 9, 8, 10, 0),
        creation_date=datetime(2024, 9, 8, 9, 0),
        keywords=("mapped", "content"),
        status=ArticleStatus.PUBLISHED,
        cover_picture_ref="cover.jpg",
    )
    data.update(overrides)
    return Article(**data)


def test_to_model_new_article_has_no_id():
    repository = ArticleRepositoryImpl(session=None)

    model = repository._to_model(make_article())

    assert model.id is None
    assert model.keywords == ["mapped", "content"]
    assert model.status == "published"
    assert model.cover_picture_ref == "cover.jpg"


def test_round_trip_entity_model_entity():
    repository = ArticleRepositoryImpl(session=None)
    article = make_article(id=10)

    restored = repository._to_entity(repository._to_model(article))

    assert restored == article


def test_to_entity_null_keywords():
    repository = ArticleRepositoryImpl(session=None)
    model = repository._to_model(make_article(id=1))
    model.keywords = None

    assert repository._to_entity(model).keywords == ()
