# Services package init
"""
Product Catalog Backend — Services Layer
==========================================

What:  Business logic layer sitting between routes (HTTP) and storage.

Service Inventory:
    - record_store: Pure find/insert/update/delete primitives over a snapshot
    - ImageService: Image path resolution and cover URL building
    - ProductService: Load → operate → save orchestration for each endpoint
"""
