"""
MetalBaza cart and checkout service

Bilingual (Uzbek/Russian) cart store, pricing and order materialization
for a construction materials storefront.
"""

__version__ = "1.0.0"
