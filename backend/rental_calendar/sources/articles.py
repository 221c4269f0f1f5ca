"""Article source client: read-only catalogue with owned quantities."""

from pydantic import TypeAdapter

from rental_calendar.models import Article
from rental_calendar.sources.base import ApiSource

_article_list = TypeAdapter(list[Article])
_article = TypeAdapter(Article)


class ArticleSource(ApiSource):
    name = "articles"

    async def list_all(self) -> list[Article]:
        response = await self._request("GET")
        return self._parse(_article_list, response)

    async def get(self, article_id: int) -> Article | None:
        response = await self._request("GET", f"/{article_id}", allow_not_found=True)
        if response is None:
            return None
        return self._parse(_article, response)
