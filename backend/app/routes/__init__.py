# Routes package init
"""
LexSite Backend: API Routes Package
=====================================

Route Inventory:
    - tools.py:      POST /api/tools/court-fee             (calculate court fee)
                     GET  /api/tools/court-fee/slabs       (slab schedule)
                     GET  /api/tools/court-fee/slabs/{n}   (one slab)
                     GET  /api/tools/court-fee/case-types  (case types)
                     GET  /api/tools/amount-in-words       (spell an amount)
    - reference.py:  GET  /api/fee-schedule                (reference table)
                     GET  /api/courts/vc-links             (court directory)
                     GET  /api/police-stations             (station search)
                     GET  /api/legal-drafts                (drafts library)
                     POST /api/legal-drafts/{id}/download  (count a download)
    - health.py:     GET  /health                          (service health)

Routes stay thin: read the request, call a service, set headers.
"""
