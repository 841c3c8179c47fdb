# Services package init
"""
LexSite Backend: Services Layer
=================================

Service Inventory:
    - fee_engine:        Pure court-fee schedule, words and display formatting
    - FeeService:        Claim input policy and calculator responses
    - ReferenceService:  Fee schedule table and court directory queries
"""
