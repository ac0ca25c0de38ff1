"""
Application layer

Use cases orchestrating the domain and the repositories.
"""
