# app/routes/catalog.py
"""Public reads for the marketplace, services, blog, events and news."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.catalog_crud import blog_posts, events, news, products, services
from app.models.blog_post import BlogPost
from app.models.event import Event
from app.models.news import News
from app.models.product import Product
from app.models.service import Service
from app.routes.crud_router import build_admin_crud_router
from app.schemas.blog import BlogPostOut
from app.schemas.events import EventCreate, EventOut, EventUpdate
from app.schemas.news import NewsCreate, NewsOut, NewsUpdate
from app.schemas.product import ProductOut
from app.schemas.services import ServiceOut
from sustainhub.core.error_messages import ErrorResponses
from sustainhub.db.database import get_session

products_router = APIRouter(tags=["Marketplace"])
services_router = APIRouter(tags=["Services"])
blog_posts_router = APIRouter(tags=["Blog"])
events_router = APIRouter(tags=["Events"])
news_router = APIRouter(tags=["News"])


# ------------------------
# Products
# ------------------------
@products_router.get("/", response_model=List[ProductOut])
async def list_products(
    category: Optional[str] = Query(None, description="Filter by category"),
    session: AsyncSession = Depends(get_session),
):
    filters = [Product.category == category] if category else []
    return await products.list(session, *filters)


@products_router.get("/{product_id}", response_model=ProductOut)
async def get_product(product_id: int, session: AsyncSession = Depends(get_session)):
    product = await products.get(session, product_id)
    if not product:
        raise ErrorResponses.not_found("Product")
    return product


# ------------------------
# Services
# ------------------------
@services_router.get("/", response_model=List[ServiceOut])
async def list_services(session: AsyncSession = Depends(get_session)):
    return await services.list(session, Service.available.is_(True))


@services_router.get("/{service_id}", response_model=ServiceOut)
async def get_service(service_id: int, session: AsyncSession = Depends(get_session)):
    service = await services.get(session, service_id, Service.available.is_(True))
    if not service:
        raise ErrorResponses.not_found("Service")
    return service


# ------------------------
# Blog posts (published only)
# ------------------------
@blog_posts_router.get("/", response_model=List[BlogPostOut])
async def list_blog_posts(session: AsyncSession = Depends(get_session)):
    return await blog_posts.list(session, BlogPost.published.is_(True))


@blog_posts_router.get("/{post_id}", response_model=BlogPostOut)
async def get_blog_post(post_id: int, session: AsyncSession = Depends(get_session)):
    post = await blog_posts.get(session, post_id, BlogPost.published.is_(True))
    if not post:
        raise ErrorResponses.not_found("Blog post")
    return post


# ------------------------
# Events
# ------------------------
@events_router.get("/", response_model=List[EventOut])
async def list_events(session: AsyncSession = Depends(get_session)):
    return await events.list(session, Event.published.is_(True))


@events_router.get("/{event_id}", response_model=EventOut)
async def get_event(event_id: int, session: AsyncSession = Depends(get_session)):
    event = await events.get(session, event_id, Event.published.is_(True))
    if not event:
        raise ErrorResponses.not_found("Event")
    return event


admin_events_router = build_admin_crud_router(
    events, EventCreate, EventUpdate, EventOut, "event", ["Admin: Events"]
)


# ------------------------
# News
# ------------------------
@news_router.get("/", response_model=List[NewsOut])
async def list_news(session: AsyncSession = Depends(get_session)):
    return await news.list(session, News.published.is_(True))


@news_router.get("/{news_id}", response_model=NewsOut)
async def get_news(news_id: int, session: AsyncSession = Depends(get_session)):
    item = await news.get(session, news_id, News.published.is_(True))
    if not item:
        raise ErrorResponses.not_found("News item")
    return item


admin_news_router = build_admin_crud_router(
    news, NewsCreate, NewsUpdate, NewsOut, "news item", ["Admin: News"]
)
