"""
FastAPI Routes для статей блога.

Путь: src/api/routes/articles.py
"""

import logging
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, Query, UploadFile
from fastapi.responses import JSONResponse

from src.api.dependencies import (
    get_article_preparer,
    get_article_service,
    get_picture_storage,
)
from src.api.schemas.article_schemas import (
    ArticleResponse,
    CreateArticleRequest,
    KeywordsPreviewRequest,
    KeywordsPreviewResponse,
    MessageResponse,
    UpdateArticleRequest,
)
from src.application.commands.create_article_command import CreateArticleCommand
from src.application.commands.update_article_command import UpdateArticleCommand
from src.application.services.article_preparer import ArticlePreparer
from src.application.services.article_service import ArticleService
from src.domain.entities.article import SLUG_MAX_LENGTH, TITLE_MAX_LENGTH
from src.domain.repositories.picture_storage import IPictureStorage
from src.domain.services.text_analysis import find_banned, top_keywords
from src.domain.value_objects.article_status import ArticleStatus
from src.domain.value_objects.content_rejected import ContentRejected
from src.infrastructure.config.settings import Settings, get_settings
from src.infrastructure.storage.local_picture_storage import guess_extension

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articles", tags=["articles"])


def _rejected_response(rejected: ContentRejected) -> JSONResponse:
    return JSONResponse(status_code=400, content=rejected.to_dict())


async def _store_picture(
    upload: UploadFile,
    storage: IPictureStorage,
    settings: Settings
) -> str:
    """Проверить и сохранить загруженную обложку, вернуть имя файла."""
    content_type = (upload.content_type or "").lower()
    if content_type not in settings.get_allowed_picture_types():
        logger.warning(f"[Articles] Rejected cover upload {upload.filename!r}: {content_type or 'unknown'}")
        raise HTTPException(status_code=415, detail=f"Unsupported picture type: {content_type or 'unknown'}")

    data = await upload.read()
    if not data:
        raise HTTPException(status_code=400, detail="Uploaded picture is empty")
    if len(data) > settings.max_upload_size:
        raise HTTPException(status_code=413, detail="Uploaded picture is too large")

    return await storage.store(data, guess_extension(content_type, upload.filename))


@router.get("/", response_model=List[ArticleResponse])
async def list_articles(
    limit: int = Query(100, ge=1, le=1000),
    offset: int = Query(0, ge=0),
    status: Optional[ArticleStatus] = None,
    include_deleted: bool = False,
    service: ArticleService = Depends(get_article_service)
):
    """Получить список статей (удалённые скрыты, если не запрошены)."""
    articles = await service.list_articles(limit, offset, status, include_deleted)
    return [ArticleResponse.from_entity(a) for a in articles]


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service)
):
    """Получить статью по ID."""
    article = await service.get_article(article_id)
    if not article:
        raise HTTPException(status_code=404, detail="Article not found")
    return ArticleResponse.from_entity(article)


@router.post("/", response_model=ArticleResponse, status_code=201)
async def create_article(
    request: CreateArticleRequest,
    service: ArticleService = Depends(get_article_service)
):
    """Создать статью (ключевые слова вычисляются из content)."""
    command = CreateArticleCommand(
        author_id=request.author_id,
        title=request.title,
        content=request.content,
        slug=request.slug,
        publication_date=request.publication_date,
        status=request.status,
    )

    result = await service.create_article(command)
    if isinstance(result, ContentRejected):
        return _rejected_response(result)
    return ArticleResponse.from_entity(result)


@router.post("/with-cover", response_model=ArticleResponse, status_code=201)
async def create_article_with_cover(
    author_id: int = Form(..., alias="authorId"),
    title: str = Form(..., min_length=1, max_length=TITLE_MAX_LENGTH),
    content: str = Form(..., min_length=1),
    slug: str = Form(..., min_length=1, max_length=SLUG_MAX_LENGTH),
    publication_date: Optional[datetime] = Form(None, alias="publicationDate"),
    status: ArticleStatus = Form(ArticleStatus.DRAFT),
    cover_picture: Optional[UploadFile] = File(None, alias="coverPicture"),
    service: ArticleService = Depends(get_article_service),
    preparer: ArticlePreparer = Depends(get_article_preparer),
    storage: IPictureStorage = Depends(get_picture_storage),
    settings: Settings = Depends(get_settings)
):
    """
    Создать статью из multipart формы с обложкой.

    Статья проверяется (контент и инварианты Article) до записи файла.
    Если сохранение статьи не удалось, записанный файл удаляется.
    """
    command = CreateArticleCommand(
        author_id=author_id,
        title=title,
        content=content,
        slug=slug,
        publication_date=publication_date,
        status=status,
    )

    # DomainValidationError отсюда → 422, файл ещё не записан
    prepared = preparer.prepare_for_create(command)
    if isinstance(prepared, ContentRejected):
        return _rejected_response(prepared)

    if cover_picture is None or not cover_picture.filename:
        result = await service.create_article(command)
    else:
        picture_ref = await _store_picture(cover_picture, storage, settings)
        try:
            result = await service.create_article(
                replace(command, cover_picture_ref=picture_ref)
            )
        except Exception:
            logger.warning(f"[Articles] Article not saved, removing cover {picture_ref}")
            await storage.delete(picture_ref)
            raise
        if isinstance(result, ContentRejected):
            await storage.delete(picture_ref)

    if isinstance(result, ContentRejected):
        return _rejected_response(result)
    return ArticleResponse.from_entity(result)


@router.patch("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: int,
    request: UpdateArticleRequest,
    service: ArticleService = Depends(get_article_service)
):
    """Частично обновить статью. Новый content пересчитывает ключевые слова."""
    command = UpdateArticleCommand(
        title=request.title,
        content=request.content,
        publication_date=request.publication_date,
        status=request.status,
        slug=request.slug,
    )

    result = await service.update_article(article_id, command)
    if isinstance(result, ContentRejected):
        return _rejected_response(result)
    return ArticleResponse.from_entity(result)


@router.delete("/{article_id}", response_model=MessageResponse)
async def delete_article(
    article_id: int,
    service: ArticleService = Depends(get_article_service)
):
    """Мягко удалить статью (status = deleted)."""
    await service.delete_article(article_id)
    return MessageResponse(message="Article soft deleted")


@router.post("/{article_id}/cover", response_model=ArticleResponse)
async def upload_cover(
    article_id: int,
    cover_picture: UploadFile = File(..., alias="coverPicture"),
    service: ArticleService = Depends(get_article_service),
    storage: IPictureStorage = Depends(get_picture_storage),
    settings: Settings = Depends(get_settings)
):
    """Загрузить обложку для существующей статьи."""
    if await service.get_article(article_id) is None:
        raise HTTPException(status_code=404, detail="Article not found")

    picture_ref = await _store_picture(cover_picture, storage, settings)
    try:
        article = await service.attach_cover(article_id, picture_ref)
    except Exception:
        logger.warning(f"[Articles] Cover not attached to {article_id}, removing {picture_ref}")
        await storage.delete(picture_ref)
        raise
    return ArticleResponse.from_entity(article)


@router.post("/keywords/preview", response_model=KeywordsPreviewResponse)
async def preview_keywords(
    request: KeywordsPreviewRequest,
    preparer: ArticlePreparer = Depends(get_article_preparer)
):
    """Проверить текст и посчитать ключевые слова без сохранения."""
    banned = find_banned(request.content, preparer.banned_words)
    return KeywordsPreviewResponse(
        allowed=not banned,
        banned_words=list(banned),
        keywords=top_keywords(request.content, preparer.banned_words, request.limit),
    )
