from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.models import Product
from modules.products.repositories.django_repository import ProductDjangoRepository
from modules.products.services import ProductService

CATALOG = [
    ("Monitor 27", "27 inch IPS monitor", Decimal("1299.90")),
    ("Mechanical Keyboard", "Hot swappable switches", Decimal("399.90")),
    ("Gaming Mouse", "Wired optical mouse", Decimal("249.90")),
    ("Notebook 14", "Lightweight laptop", Decimal("3999.00")),
    ("Headset", "Over ear headset with microphone", Decimal("299.90")),
    ("Office Desk", None, Decimal("899.00")),
    ("Ergonomic Chair", "Adjustable lumbar support", Decimal("1499.00")),
    ("A4 Paper", "500 sheets", Decimal("29.90")),
    ("Blue Pen", None, Decimal("4.90")),
    ("Notebook Stand", "Aluminium stand", Decimal("149.90")),
]


class Command(BaseCommand):
    help = "Seed the catalogue with development products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--seed",
            type=int,
            default=42,
            help="Seed for ids and stock levels, for reproducible data.",
        )

    def handle(self, *args, **options):
        rng = random.Random(options["seed"])
        service = ProductService(repository=ProductDjangoRepository(), rng=rng)
        self.stdout.write("Creating products...")

        created = 0
        for name, description, price in CATALOG:
            if Product.objects.filter(name=name).exists():
                continue
            dto = CreateProductDTO(
                name=name,
                description=description,
                price=price,
                stock_available=rng.randint(10, 200),
            )
            service.create_product(dto)
            created += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"Seed completed: products={created}, total={Product.objects.count()}"
            )
        )
