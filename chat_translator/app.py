"""
Chat Translator Application
===========================
Flask application factory and main entry point.
"""
from flask import Flask
from flask_cors import CORS

from chat_translator.config import config
from chat_translator.api.registry import ActionRegistry
from chat_translator.api.routes import (
    create_query_blueprint,
    create_health_blueprint,
    create_logs_blueprint
)
from chat_translator.services.session import TranslationSession
from chat_translator.utils.logging import get_logger, debug_print


def create_app(testing: bool = False, session: TranslationSession = None) -> Flask:
    """
    Application factory for Flask app.

    Args:
        testing: If True, configure for testing
        session: Session to serve; a default one is built when omitted

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    app.config.update(TESTING=testing)
    app.json.sort_keys = False

    cors_origins = config.server.cors_origins
    if testing:
        cors_origins = ['*']

    CORS(app, resources={r"/api/*": {"origins": cors_origins}})

    session = session or TranslationSession()
    registry = ActionRegistry()

    app.register_blueprint(create_query_blueprint(session, registry))
    app.register_blueprint(create_health_blueprint(session))
    app.register_blueprint(create_logs_blueprint())

    @app.errorhandler(400)
    def bad_request(e):
        return {'error': 'Bad request', 'details': str(e)}, 400

    @app.errorhandler(404)
    def not_found(e):
        return {'error': 'Resource not found'}, 404

    @app.errorhandler(500)
    def internal_error(e):
        logger = get_logger().api_logger
        logger.error(f"Internal error: {e}")
        return {'error': 'Internal server error'}, 500

    logger = get_logger()
    logger.api_logger.info(f"Chat Translator started on {config.server.host}:{config.server.port}")
    debug_print("Application initialized", 'INFO', 'APP')

    return app


def run_server():
    """Run the Flask development server."""
    app = create_app()

    print(f"""
  Chat Translator
  Server:   http://{config.server.host}:{config.server.port}
  Model:    {config.openai.model}
  Data dir: {config.paths.data_dir}
    """)

    # threaded so a new keystroke's query can supersede one still in flight
    app.run(
        host=config.server.host,
        port=config.server.port,
        debug=config.server.debug,
        threaded=True
    )


if __name__ == '__main__':
    run_server()
