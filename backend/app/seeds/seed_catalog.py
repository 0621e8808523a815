# app/seeds/seed_catalog.py
import json
import logging
from datetime import datetime, timezone

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.blog_post import BlogPost
from app.models.event import Event
from app.models.news import News
from app.models.product import Product
from app.models.service import Service

logger = logging.getLogger("sustainhub.seeds")

PRODUCTS = [
    {"name": "Sementes Orgânicas de Milho", "description": "Sementes certificadas, livres de OGM", "price": 250,
     "category": "Sementes", "image_url": "https://images.unsplash.com/photo-1574943320219-553eb213f72d?q=80&w=800",
     "sustainability_score": 95, "stock": 50},
    {"name": "Fertilizante Orgânico", "description": "Composto natural rico em nutrientes", "price": 180,
     "category": "Insumos", "image_url": "https://images.unsplash.com/photo-1464226184884-fa280b87c399?q=80&w=800",
     "sustainability_score": 90, "stock": 100},
    {"name": "Sistema de Irrigação por Gotejamento", "description": "Economize até 70% de água", "price": 1500,
     "category": "Equipamentos", "image_url": "https://images.unsplash.com/photo-1530836369250-ef72a3f5cda8?q=80&w=800",
     "sustainability_score": 88, "stock": 20},
    {"name": "Kit de Compostagem", "description": "Transforme resíduos orgânicos em adubo", "price": 450,
     "category": "Equipamentos", "image_url": "https://images.unsplash.com/photo-1542601906990-b4d3fb778b09?q=80&w=800",
     "sustainability_score": 92, "stock": 35},
    {"name": "Tomate Orgânico Local", "description": "Produção local certificada", "price": 80,
     "category": "Produtos Frescos", "image_url": "https://images.unsplash.com/photo-1592924357228-91a4daadcfea?q=80&w=800",
     "sustainability_score": 85, "stock": 200},
    {"name": "Mel Silvestre", "description": "Mel puro de abelhas nativas", "price": 350,
     "category": "Produtos Frescos", "image_url": "https://images.unsplash.com/photo-1587049352846-4a222e784720?q=80&w=800",
     "sustainability_score": 93, "stock": 45},
]

BLOG_POSTS = [
    {"title_pt": "Agricultura Sustentável", "title_en": "Sustainable Agriculture",
     "excerpt_pt": "Descubra as melhores práticas", "excerpt_en": "Discover best practices",
     "content_pt": "A agricultura sustentável é fundamental para garantir a segurança alimentar e preservar "
                   "o meio ambiente para as próximas gerações.",
     "content_en": "Sustainable agriculture is fundamental to ensure food security and preserve the "
                   "environment for future generations.",
     "author": "Admin", "category": "Agricultura",
     "image_url": "https://images.unsplash.com/photo-1500382017468-9049fed747ef?q=80&w=800",
     "read_time": 5, "published": True},
    {"title_pt": "Compostagem", "title_en": "Composting",
     "excerpt_pt": "Aprenda a fazer compostagem", "excerpt_en": "Learn how to compost",
     "content_pt": "A compostagem é uma técnica simples e eficaz para reduzir resíduos orgânicos e criar "
                   "adubo natural de alta qualidade.",
     "content_en": "Composting is a simple and effective technique to reduce organic waste and create "
                   "high-quality natural fertilizer.",
     "author": "Admin", "category": "Sustentabilidade",
     "image_url": "https://images.unsplash.com/photo-1542601906990-b4d3fb778b09?q=80&w=800",
     "read_time": 4, "published": True},
    {"title_pt": "Irrigação Eficiente", "title_en": "Efficient Irrigation",
     "excerpt_pt": "Técnicas modernas de irrigação", "excerpt_en": "Modern irrigation techniques",
     "content_pt": "Sistemas eficientes podem reduzir 70% do consumo de água, economizando recursos e "
                   "aumentando a produtividade.",
     "content_en": "Efficient systems can reduce water consumption by 70%, saving resources and "
                   "increasing productivity.",
     "author": "Admin", "category": "Tecnologia",
     "image_url": "https://images.unsplash.com/photo-1530836369250-ef72a3f5cda8?q=80&w=800",
     "read_time": 6, "published": True},
]

SERVICES = [
    {"title_pt": "Consultoria em Agricultura", "title_en": "Agriculture Consulting",
     "description_pt": "Orientação especializada", "description_en": "Specialized guidance",
     "specialist": "Dr. Silva", "price": 500, "price_type": "hourly",
     "features": ["Análise", "Planejamento"], "available": True},
    {"title_pt": "Análise de Solo", "title_en": "Soil Analysis",
     "description_pt": "Análise completa do solo", "description_en": "Complete soil analysis",
     "specialist": "Eng. Santos", "price": 300, "price_type": "project",
     "features": ["Coleta", "Relatório"], "available": True},
    {"title_pt": "Treinamento em Compostagem", "title_en": "Composting Training",
     "description_pt": "Workshop prático", "description_en": "Practical workshop",
     "specialist": "Prof. Costa", "price": 200, "price_type": "daily",
     "features": ["Teoria", "Prática"], "available": True},
]

EVENTS = [
    {"title_pt": "Feira de Produtores Orgânicos", "title_en": "Organic Growers Fair",
     "description_pt": "Encontro de produtores locais com venda direta e demonstrações.",
     "description_en": "Local growers meet-up with direct sales and demonstrations.",
     "event_date": datetime(2026, 11, 14, 9, 0, tzinfo=timezone.utc), "location": "Maputo",
     "category": "Feira", "max_participants": 300, "organizer_name": "SustainHub",
     "status": "upcoming", "published": True},
    {"title_pt": "Oficina de Irrigação Gota a Gota", "title_en": "Drip Irrigation Workshop",
     "description_pt": "Montagem prática de um sistema de irrigação eficiente.",
     "description_en": "Hands-on assembly of an efficient irrigation system.",
     "event_date": datetime(2026, 12, 5, 14, 0, tzinfo=timezone.utc), "location": "Beira",
     "category": "Workshop", "max_participants": 40, "organizer_name": "Eng. Santos",
     "status": "upcoming", "published": True},
]

NEWS = [
    {"title_pt": "Cooperativas ampliam produção orgânica", "title_en": "Cooperatives expand organic output",
     "summary_pt": "Pequenos produtores aumentam a área certificada.",
     "summary_en": "Smallholders grow their certified acreage.",
     "content_pt": "As cooperativas da região sul registaram um aumento da área com certificação orgânica.",
     "content_en": "Southern region cooperatives reported growth in organically certified land.",
     "source": "SustainHub", "author": "Admin", "category": "Agricultura",
     "published_at": datetime(2026, 9, 1, 8, 0, tzinfo=timezone.utc), "published": True},
    {"title_pt": "Nova linha de crédito verde", "title_en": "New green credit line",
     "summary_pt": "Financiamento para projetos de irrigação eficiente.",
     "summary_en": "Funding for efficient irrigation projects.",
     "content_pt": "Uma nova linha de crédito apoia agricultores que adotem tecnologias de poupança de água.",
     "content_en": "A new credit line supports farmers adopting water-saving technology.",
     "source": "SustainHub", "author": "Admin", "category": "Financiamento",
     "published_at": datetime(2026, 9, 20, 8, 0, tzinfo=timezone.utc), "published": True},
]


async def seed_catalog(session: AsyncSession) -> dict:
    """Insert the bundled catalog and return how many rows went into each table."""
    session.add_all(Product(**data) for data in PRODUCTS)
    session.add_all(BlogPost(**data) for data in BLOG_POSTS)
    session.add_all(
        Service(**{**data, "features": json.dumps(data["features"], ensure_ascii=False)}) for data in SERVICES
    )
    session.add_all(Event(**data) for data in EVENTS)
    session.add_all(News(**data) for data in NEWS)
    await session.commit()

    counts = {
        "products": len(PRODUCTS),
        "blog_posts": len(BLOG_POSTS),
        "services": len(SERVICES),
        "events": len(EVENTS),
        "news": len(NEWS),
    }
    logger.info("Catalog seeded: %s", counts)
    return counts
