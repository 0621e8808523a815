# app/crud/catalog_crud.py
from sqlalchemy import func

from app.crud.base import CrudAccessor
from app.models.blog_post import BlogPost
from app.models.event import Event
from app.models.news import News
from app.models.product import Product
from app.models.service import Service

products = CrudAccessor(Product)
blog_posts = CrudAccessor(BlogPost)
services = CrudAccessor(Service)
events = CrudAccessor(Event, order_by=(Event.event_date.asc(), Event.id.asc()))
news = CrudAccessor(
    News, order_by=(func.coalesce(News.published_at, News.created_at).desc(), News.id.desc())
)
