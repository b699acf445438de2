"""
Unit tests для ArticlePreparer (create / update / delete).
"""

from datetime import datetime

from src.application.commands.create_article_command import CreateArticleCommand
from src.application.commands.update_article_command import UpdateArticleCommand
from src.application.services.article_preparer import ArticlePreparer
from src.domain.entities.article import Article
from src.domain.value_objects.article_status import ArticleStatus
from src.domain.value_objects.banned_words import BannedWords
from src.domain.value_objects.content_rejected import ContentRejected

FIXED_NOW = datetime(2024, 9, 8, 12, 0, 0)


def make_command(**overrides) -> CreateArticleCommand:
    data = dict(
        author_id=1,
        title="Test Blog Article with Image",
        content="This is a test blog article with an image. It also includes keyword testing.",
        slug="test-blog-article-image",
        publication_date=datetime(2024, 9, 8, 10, 0, 0),
    )
    data.update(overrides)
    return CreateArticleCommand(**data)


# =============================================================================
# prepare_for_create
# =============================================================================

def test_prepare_for_create_computes_keywords(preparer):
    """Тест: ключевые слова вычисляются из контента."""
    article = preparer.prepare_for_create(make_command())

    assert isinstance(article, Article)
    assert article.keywords == ("this", "is", "a")
    assert article.creation_date == FIXED_NOW
    assert article.publication_date == datetime(2024, 9, 8, 10, 0, 0)
    assert article.status == ArticleStatus.DRAFT
    assert article.id is None


def test_prepare_for_create_keywords_skip_banned():
    preparer = ArticlePreparer(BannedWords.of(["this", "is", "a"]))
    command = make_command(content="test blog article with an image")
    # "this"/"is"/"a" отсутствуют в тексте — контент допустим
    article = preparer.prepare_for_create(command)
    assert article.keywords == ("test", "blog", "article")


def test_prepare_for_create_rejects_banned_content(preparer):
    """Тест: запрещённое слово → ContentRejected."""
    result = preparer.prepare_for_create(make_command(content="This Has BANNED1"))

    assert isinstance(result, ContentRejected)
    assert result.banned_words == ("banned1",)
    assert result.message == "Content contains banned words"


def test_prepare_for_create_copies_cover_and_status(preparer):
    article = preparer.prepare_for_create(
        make_command(cover_picture_ref="abc.jpg", status=ArticleStatus.PUBLISHED)
    )
    assert article.cover_picture_ref == "abc.jpg"
    assert article.status == ArticleStatus.PUBLISHED


def test_keyword_limit_is_configurable():
    preparer = ArticlePreparer(keyword_limit=1)
    article = preparer.prepare_for_create(make_command(content="b a b"))
    assert article.keywords == ("b",)


# =============================================================================
# prepare_for_update
# =============================================================================

def test_prepare_for_update_title_only_keeps_content(preparer, sample_article):
    """Тест: patch без content не трогает content и keywords."""
    updated = preparer.prepare_for_update(sample_article, UpdateArticleCommand(title="Updated"))

    assert updated.title == "Updated"
    assert updated.content == sample_article.content
    assert updated.keywords == sample_article.keywords
    assert sample_article.title == "Test Blog Article"


def test_prepare_for_update_content_recomputes_keywords(preparer, sample_article):
    """Тест: новый content пересчитывает ключевые слова только по новому тексту."""
    command = UpdateArticleCommand(
        content="This updated content has more words. Words matter when you update content.",
        status=ArticleStatus.PUBLISHED,
    )

    updated = preparer.prepare_for_update(sample_article, command)

    assert updated.keywords == ("content", "words", "this")
    assert updated.status == ArticleStatus.PUBLISHED
    assert updated.id == sample_article.id
    assert sample_article.keywords == ("word", "other", "single")


def test_prepare_for_update_rejected_leaves_existing(preparer, sample_article):
    result = preparer.prepare_for_update(
        sample_article, UpdateArticleCommand(title="New", content="banned2 here")
    )

    assert isinstance(result, ContentRejected)
    assert sample_article.title == "Test Blog Article"


def test_prepare_for_update_empty_patch_returns_same(preparer, sample_article):
    assert preparer.prepare_for_update(sample_article, UpdateArticleCommand()) is sample_article


def test_prepare_for_update_copies_slug_and_date(preparer, sample_article):
    when = datetime(2025, 1, 1)
    updated = preparer.prepare_for_update(
        sample_article, UpdateArticleCommand(slug="new-slug", publication_date=when)
    )
    assert updated.slug == "new-slug"
    assert updated.publication_date == when


def test_prepare_for_delete(preparer, sample_article):
    deleted = preparer.prepare_for_delete(sample_article)
    assert deleted.status == ArticleStatus.DELETED
    assert deleted.content == sample_article.content


def test_keyword_limit_above_maximum_is_clamped():
    """Тест: лимит больше 3 не ломает создание статьи."""
    preparer = ArticlePreparer(BannedWords.empty(), keyword_limit=5)

    article = preparer.prepare_for_create(make_command(content="a b c d e"))

    assert article.keywords == ("a", "b", "c")


def test_default_clock_is_timezone_aware():
    article = ArticlePreparer().prepare_for_create(make_command())
    assert article.creation_date.tzinfo is not None
