"""
Chat Translator - Interactive Chinese/English translation front-end
===================================================================
Detects whether a query is predominantly Chinese, asks an OpenAI chat
completion endpoint for a translation in the opposite direction, and serves
the result list over a small Flask API. Rapid successive queries are
debounced so only the newest one reaches the network.

Version: 1.0.0
"""

__version__ = "1.0.0"

from chat_translator.app import create_app, run_server

__all__ = ["create_app", "run_server", "__version__"]
