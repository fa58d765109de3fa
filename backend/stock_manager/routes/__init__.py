"""
Stock Manager Backend — API Routes Package
===========================================

Route Inventory:
    - categories.py:      /api/categories, /api/categories/{id}
    - sub_categories.py:  /api/sub-categories, /api/sub-categories/{id}
    - components.py:      /api/components, /api/components/{id},
                          /api/components/category/{id},
                          /api/components/sub-category/{id}
    - sub_components.py:  /api/sub-components, /api/sub-components/{id},
                          /api/sub-components/component/{id}
    - health.py:          /health

Routes stay thin: FastAPI validates path ids (UUID) and bodies (the *In
schemas), services run the statement, and the global exception handlers
(main.py) shape every error response.
"""
