# Routes package init
"""
Product Catalog Backend — API Routes Package
==============================================

Route Inventory:
    - products.py: GET/POST /api/products, PUT/DELETE /api/products/{id},
                   GET /api/products/{id}/image
    - health.py:   GET /health

Routes stay thin: extract request data, call ProductService, shape the
response. Static files under /images are mounted in main.py.
"""
