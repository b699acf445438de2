#!/usr/bin/env python3
"""
CLI для блога.

Использование:
    python cli.py init-db
    python cli.py keywords "Some article text" --banned "banned1,banned2"
    python cli.py list --status published
"""

import asyncio
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

console = Console()


@click.group()
def cli():
    """Blog Articles CLI."""
    pass


@cli.command("init-db")
def init_db():
    """Создать таблицы в БД."""
    from src.infrastructure.config.database import init_models

    asyncio.run(init_models())
    console.print("✅ [bold green]Таблицы созданы[/bold green]")


@cli.command()
@click.argument('text')
@click.option('--banned', default=None, help='Запрещённые слова через запятую (по умолчанию из настроек)')
@click.option('--limit', default=3, show_default=True, help='Количество ключевых слов')
def keywords(text: str, banned: Optional[str], limit: int):
    """
    Проверить текст и показать ключевые слова.

    Примеры:
        python cli.py keywords "word word other"
        python cli.py keywords "This has banned1" --banned banned1
    """
    from src.domain.services.text_analysis import find_banned, top_keywords
    from src.domain.value_objects.banned_words import BannedWords
    from src.infrastructure.config.banned_words import get_banned_words

    banned_words = BannedWords.parse(banned) if banned is not None else get_banned_words()

    found = find_banned(text, banned_words)
    if found:
        console.print(f"❌ [bold red]Запрещённые слова:[/bold red] {', '.join(found)}")
    else:
        console.print("✅ [bold green]Текст допустим[/bold green]")

    result = top_keywords(text, banned_words, limit)
    console.print(f"Ключевые слова: {', '.join(result) if result else '—'}")


@cli.command("list")
@click.option('--status', type=click.Choice(['draft', 'published', 'deleted']), default=None)
@click.option('--include-deleted', is_flag=True, help='Показать удалённые')
@click.option('--limit', default=50, show_default=True)
def list_articles(status: Optional[str], include_deleted: bool, limit: int):
    """Показать статьи из БД."""
    from src.domain.value_objects.article_status import ArticleStatus
    from src.infrastructure.config.database import AsyncSessionLocal
    from src.infrastructure.persistence.article_repository_impl import ArticleRepositoryImpl

    async def _fetch():
        async with AsyncSessionLocal() as session:
            repository = ArticleRepositoryImpl(session)
            return await repository.find_all(
                status=ArticleStatus(status) if status else None,
                include_deleted=include_deleted,
                limit=limit,
            )

    articles = asyncio.run(_fetch())

    table = Table(title=f"Статьи ({len(articles)})")
    table.add_column("ID", justify="right")
    table.add_column("Заголовок")
    table.add_column("Статус")
    table.add_column("Ключевые слова")
    for article in articles:
        table.add_row(
            str(article.id),
            article.title,
            article.status.value,
            ", ".join(article.keywords),
        )
    console.print(table)


if __name__ == '__main__':
    cli()
