"""
Domain Layer

Entities, value objects, repository contracts and the pricing rules.
Nothing here knows about SQLAlchemy, FastAPI or Telegram.
"""
