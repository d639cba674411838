"""The default catalog seeded on first run."""

from __future__ import annotations

from datetime import datetime

from bevstock.domain.model.product import Product, ProductVariant

# (id, name, color, [(volume, set_size, current_sets, threshold), ...])
_DEFAULT_CATALOG = [
    ("coca-cola", "Coca-Cola", "from-red-600 via-red-500 to-red-700", [
        ("200ml", 24, 45, 10),
        ("750ml", 12, 38, 8),
        ("2.25L", 9, 25, 5),
    ]),
    ("thums-up", "Thums Up", "from-gray-800 via-gray-700 to-gray-900", [
        ("200ml", 24, 35, 8),
        ("750ml", 12, 22, 6),
        ("300ml", 20, 18, 4),
    ]),
    ("sprite", "Sprite", "from-emerald-500 via-green-500 to-teal-600", [
        ("200ml", 24, 52, 12),
        ("750ml", 12, 28, 8),
        ("2.25L", 9, 15, 4),
    ]),
    ("fanta", "Fanta", "from-orange-500 via-amber-500 to-yellow-500", [
        ("200ml", 24, 42, 10),
        ("750ml", 12, 25, 6),
        ("2.25L", 9, 12, 3),
    ]),
    ("limca", "Limca", "from-lime-500 via-green-400 to-emerald-500", [
        ("200ml", 24, 18, 6),
        ("750ml", 12, 15, 4),
    ]),
    ("maaza", "Maaza", "from-yellow-500 via-orange-400 to-red-500", [
        ("200ml", 24, 28, 8),
        ("600ml", 15, 20, 5),
        ("1.2L", 12, 14, 3),
    ]),
    ("kinley", "Kinley", "from-blue-500 via-cyan-500 to-teal-500", [
        ("500ml", 24, 30, 8),
        ("1L", 12, 22, 5),
        ("2L", 6, 16, 3),
    ]),
]


def default_catalog(now: datetime) -> tuple[Product, ...]:
    """Build a fresh copy of the default catalog stamped with *now*."""
    return tuple(
        Product(
            id=product_id,
            name=name,
            color=color,
            variants=tuple(
                ProductVariant(
                    volume=volume,
                    set_size=set_size,
                    current_sets=current_sets,
                    threshold=threshold,
                )
                for volume, set_size, current_sets, threshold in variants
            ),
            last_updated=now,
        )
        for product_id, name, color, variants in _DEFAULT_CATALOG
    )
