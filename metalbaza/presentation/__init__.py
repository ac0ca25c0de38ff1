"""
Presentation layer

HTTP adapter over the application use cases.
"""
