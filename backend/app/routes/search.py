# app/routes/search.py
from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy import or_
from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.catalog_crud import blog_posts, products, services
from app.models.blog_post import BlogPost
from app.models.product import Product
from app.models.service import Service
from app.schemas.engagement import SearchResult
from sustainhub.db.database import get_session

search_router = APIRouter(tags=["Search"])


def _matches(pattern: str, *columns):
    return or_(*(column.ilike(pattern, escape="\\") for column in columns))


@search_router.get("/search", response_model=List[SearchResult])
async def global_search(
    query: str = Query(..., min_length=1, description="Case-insensitive text to look for"),
    session: AsyncSession = Depends(get_session),
):
    """Marketplace products, published blog posts and services matching ``query``."""
    escaped = query.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    pattern = f"%{escaped}%"

    found_products = await products.list(
        session,
        _matches(pattern, Product.name, Product.description, Product.category),
        order_by=(Product.id.asc(),),
    )
    found_posts = await blog_posts.list(
        session,
        BlogPost.published.is_(True),
        _matches(
            pattern,
            BlogPost.title_pt, BlogPost.title_en,
            BlogPost.excerpt_pt, BlogPost.excerpt_en,
            BlogPost.category,
        ),
        order_by=(BlogPost.id.asc(),),
    )
    found_services = await services.list(
        session,
        _matches(
            pattern,
            Service.title_pt, Service.title_en,
            Service.description_pt, Service.description_en,
            Service.specialist,
        ),
        order_by=(Service.id.asc(),),
    )

    results = [
        {"id": p.id, "title": p.name, "category": p.category, "type": "marketplace", "href": "/marketplace"}
        for p in found_products
    ]
    results += [
        {"id": b.id, "title": b.title_pt, "category": b.category, "type": "blog", "href": "/knowledge"}
        for b in found_posts
    ]
    results += [
        {"id": s.id, "title": s.title_pt, "category": "Serviço", "type": "services", "href": "/services"}
        for s in found_services
    ]
    return results
