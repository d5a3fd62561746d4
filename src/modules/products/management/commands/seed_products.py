from __future__ import annotations

import random
from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.dtos import CreateProductDTO
from modules.products.lifecycle import open_product_service

SEED_PRODUCTS = [
    ("Keyboard", "75.0000"),
    ("Mouse", "150.0000"),
    ("Monitor", "150.0000"),
    ("Headphones", "50.0000"),
    ("Speakers", "25.0000"),
    ("Printer", "200.0000"),
    ("Scanner", "250.0000"),
    ("Webcam", "35.9900"),
    ("Microphone", "45.5000"),
    ("Router", "99.9900"),
]


class Command(BaseCommand):
    help = "Seed the catalog with development products."

    def add_arguments(self, parser):
        parser.add_argument(
            "--extra",
            type=int,
            default=0,
            help="Number of additional generated products.",
        )

    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding products...")

        created = 0
        with open_product_service() as service:
            for name, price in SEED_PRODUCTS:
                service.create(CreateProductDTO(name=name, price=Decimal(price)))
                created += 1
            for idx in range(1, options["extra"] + 1):
                price = Decimal(random.randint(100, 99999)) / Decimal(100)
                service.create(CreateProductDTO(name=f"Product {idx:03d}", price=price))
                created += 1

        self.stdout.write(self.style.SUCCESS(f"Seed completed: products={created}"))
