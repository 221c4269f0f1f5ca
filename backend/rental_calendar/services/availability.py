"""Remaining article stock over a date span."""

import logging
from collections.abc import Iterable, Mapping, Sequence
from datetime import date

from rental_calendar.models import Article, Reservation
from rental_calendar.schemas.availability import ArticleAvailability, Shortage
from rental_calendar.services.date_range import iter_days, overlaps_day

logger = logging.getLogger(__name__)


def stock_from_articles(articles: Iterable[Article]) -> dict[int, int]:
    """Map article id -> total owned quantity, leaving out articles without a stock figure."""
    return {a.id: a.quantity_total for a in articles if a.quantity_total is not None}


def reserved_on(day: date, article_id: int, reservations: Iterable[Reservation]) -> int:
    """Quantity of ``article_id`` held on ``day`` by non-cancelled reservations."""
    return sum(
        r.quantity_of(article_id)
        for r in reservations
        if not r.is_cancelled and overlaps_day(day, r.start_date, r.end_date)
    )


def availability(
    article_id: int,
    start: date,
    end: date,
    reservations: Sequence[Reservation],
    stock_by_article: Mapping[int, int],
) -> int | None:
    """Minimum remaining quantity of an article over ``[start, end]``.

    A booking must hold its quantity on every day it spans, so the lowest
    day binds. Returns ``None`` when there is no stock figure for the
    article, which callers must not confuse with ``0``. An end before the
    start is treated as the single day ``start``.
    """
    stock = stock_by_article.get(article_id)
    if stock is None:
        return None
    if end < start:
        end = start

    relevant = [
        r
        for r in reservations
        if not r.is_cancelled
        and r.start_date <= end
        and r.end_date >= start
        and r.quantity_of(article_id)
    ]
    return min(stock - reserved_on(day, article_id, relevant) for day in iter_days(start, end))


def availability_batch(
    article_ids: Iterable[int],
    start: date,
    end: date,
    reservations: Sequence[Reservation],
    stock_by_article: Mapping[int, int],
) -> dict[int, int | None]:
    """Run ``availability`` independently for each requested article."""
    return {
        article_id: availability(article_id, start, end, reservations, stock_by_article)
        for article_id in article_ids
    }


def describe_availability(
    articles: Sequence[Article],
    article_ids: Iterable[int],
    start: date,
    end: date,
    reservations: Sequence[Reservation],
) -> list[ArticleAvailability]:
    """Availability of each requested article, with its catalogue details."""
    by_id = {a.id: a for a in articles}
    remaining = availability_batch(article_ids, start, end, reservations, stock_from_articles(articles))

    result = []
    for article_id, quantity in remaining.items():
        article = by_id.get(article_id)
        if article is None:
            logger.info("No stock data for article %s; availability unknown", article_id)
            result.append(ArticleAvailability(id=article_id))
            continue
        result.append(
            ArticleAvailability(
                id=article.id,
                name=article.name,
                description=article.description,
                price_per_day=article.price_per_day,
                quantity_total=article.quantity_total,
                quantity_available=quantity,
            )
        )
    return result


def check_booking(
    items: Mapping[int, int],
    start: date,
    end: date,
    reservations: Sequence[Reservation],
    stock_by_article: Mapping[int, int],
) -> list[Shortage]:
    """Items whose requested quantity exceeds what remains over the span.

    ``items`` maps article id -> requested quantity. Articles with unknown
    stock never produce a shortage.
    """
    shortages = []
    remaining = availability_batch(items.keys(), start, end, reservations, stock_by_article)
    for article_id, requested in items.items():
        available = remaining[article_id]
        if available is not None and requested > available:
            shortages.append(
                Shortage(article_id=article_id, requested=requested, available=max(available, 0))
            )
    return shortages
