"""
Product Catalog Backend — Application Package Initializer
==========================================================

What: Marks the `product_catalog` directory as a Python package.
Who:  Imported by uvicorn (`product_catalog.main:app`), pytest, and the
      `product-catalog` console script.

Architecture Note:
    The backend is split into thin layers:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Business Logic)   │  ← Load → operate → save
    ├─────────────────────────────────────┤
    │          Schemas (Data)             │  ← Pydantic product models
    ├─────────────────────────────────────┤
    │        Storage (Persistence)        │  ← Flat JSON file via aiofiles
    └─────────────────────────────────────┘

    Routes never touch the data file directly; they receive a
    ProductRepository through FastAPI's dependency injection, so the
    JSON file can be swapped for another backend without touching routing.
"""

__version__ = "1.0.0"
