# app/routes/admin_catalog.py
import json

from app.crud.catalog_crud import blog_posts, products, services
from app.routes.crud_router import build_admin_crud_router
from app.schemas.base import UploadRequest, UploadResponse
from app.schemas.blog import BlogPostCreate, BlogPostOut, BlogPostUpdate
from app.schemas.product import ProductCreate, ProductOut, ProductUpdate
from app.schemas.services import ServiceCreate, ServiceOut, ServiceUpdate
from app.utils.storage_utils import upload_base64_image


def _dump_features(data: dict) -> dict:
    if data.get("features") is not None:
        data["features"] = json.dumps(data["features"], ensure_ascii=False)
    return data


# ------------------------
# Products
# ------------------------
admin_products_router = build_admin_crud_router(
    products, ProductCreate, ProductUpdate, ProductOut, "product", ["Admin: Products"]
)


@admin_products_router.post("/upload-image", response_model=UploadResponse)
async def upload_product_image(data: UploadRequest):
    return await upload_base64_image(data.file, data.filename, data.content_type, folder="products")


# ------------------------
# Blog
# ------------------------
admin_blog_router = build_admin_crud_router(
    blog_posts, BlogPostCreate, BlogPostUpdate, BlogPostOut, "blog post", ["Admin: Blog"]
)


@admin_blog_router.post("/upload-image", response_model=UploadResponse)
async def upload_blog_image(data: UploadRequest):
    return await upload_base64_image(data.file, data.filename, data.content_type, folder="blog")


# ------------------------
# Services
# ------------------------
admin_services_router = build_admin_crud_router(
    services, ServiceCreate, ServiceUpdate, ServiceOut, "service", ["Admin: Services"],
    prepare=_dump_features,
)
