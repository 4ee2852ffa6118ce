"""Seed catalog for a maintenance storeroom.

Covers every stock status: in stock, low stock, critical (zero on hand).
"""
import json
import os
from dataclasses import asdict
from typing import Dict, List

from stockdesk.models.inventory import Category, Part, UserRole

SEED_PARTS: List[Part] = [
    Part("1", 12, 5, name="SKF 6204 Bearing", sku="BR-045-22", category=Category.MECHANICAL.value,
         location="Shelf A-04", unit="UN", cost=45.00, supplier="Mecanica Express", lead_time=3,
         manufacturer="SKF", model="6204-2Z"),
    Part("2", 2, 4, name="V-Belt B-45", sku="TR-102-99", category=Category.TRANSMISSION.value,
         location="Shelf B-01", unit="UN", cost=85.50, supplier="Correias Sul", lead_time=5,
         manufacturer="Gates", model="Hi-Power II"),
    Part("3", 0, 2, name="Inductive Sensor M12", sku="EL-882-10", category=Category.ELECTRICAL.value,
         location="Central Store", unit="UN", cost=120.00, supplier="Eletro Pecas", lead_time=2,
         manufacturer="Pepperl+Fuchs", model="NBB4-12GM50-E2"),
    Part("4", 4, 2, name="WEG 5HP Three-Phase Motor", sku="MTR-552-X", category=Category.MECHANICAL.value,
         location="B-04", unit="UN", cost=1250.00, supplier="EletroIndustrial Ltda", lead_time=5,
         manufacturer="WEG", model="W22 Premium"),
    Part("5", 40, 50, name="Hydraulic Oil ISO 68", sku="LU-101-20L", category=Category.LUBRICANTS.value,
         location="External Depot", unit="L", cost=18.50, supplier="Petro Lub", lead_time=7,
         manufacturer="Ipiranga", model="Ipitur AW 68"),
]

SEED_PROFILES: List[Dict] = [
    {"id": "u-1", "name": "Roberto Silva", "email": "roberto.silva@example.com",
     "role": UserRole.MANAGER.value, "status": "active", "department": "Maintenance"},
    {"id": "u-2", "name": "Carlos Mendes", "email": "carlos.mendes@example.com",
     "role": UserRole.ADMIN.value, "status": "active", "department": "IT"},
]


def part_rows() -> List[Dict]:
    rows = []
    for part in SEED_PARTS:
        row = asdict(part)
        if row["image_url"] is None:
            del row["image_url"]
        rows.append(row)
    return rows


def generate_seed_data(output_dir: str = "data_layer/data") -> Dict[str, str]:
    """Writes parts.json and profiles.json; returns the written paths."""
    os.makedirs(output_dir, exist_ok=True)
    paths = {
        "parts": os.path.join(output_dir, "parts.json"),
        "profiles": os.path.join(output_dir, "profiles.json"),
    }
    with open(paths["parts"], "w", encoding="utf-8") as f:
        json.dump(part_rows(), f, indent=2, ensure_ascii=False)
    with open(paths["profiles"], "w", encoding="utf-8") as f:
        json.dump(SEED_PROFILES, f, indent=2, ensure_ascii=False)
    print(f"  ✓ {len(SEED_PARTS)} parts, {len(SEED_PROFILES)} profiles -> {output_dir}")
    return paths


if __name__ == "__main__":
    generate_seed_data()
