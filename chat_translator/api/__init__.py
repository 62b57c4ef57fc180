"""
API Module
==========
Flask API routes and blueprints.
"""
from chat_translator.api.registry import ActionRegistry
from chat_translator.api.routes import (
    create_query_blueprint,
    create_health_blueprint,
    create_logs_blueprint
)

__all__ = [
    'ActionRegistry',
    'create_query_blueprint',
    'create_health_blueprint',
    'create_logs_blueprint'
]
