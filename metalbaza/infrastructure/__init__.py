"""
Infrastructure layer

Persistence, configuration, logging, localization and outbound messaging.
"""
