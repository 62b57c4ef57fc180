"""
API Routes
==========
Flask blueprints exposing the query/result surface to a host launcher.
"""
from flask import Blueprint, request, jsonify

from chat_translator import __version__
from chat_translator.api.registry import ActionRegistry
from chat_translator.services.session import TranslationSession
from chat_translator.utils.logging import get_logger, debug_print, log_buffer


def create_query_blueprint(session: TranslationSession, registry: ActionRegistry) -> Blueprint:
    """Create query and activation routes blueprint."""
    bp = Blueprint('query', __name__, url_prefix='/api')
    logger = get_logger().api_logger

    @bp.route('/query', methods=['GET'])
    def query():
        """Run a query and return its result list."""
        search = request.args.get('q', '')
        results = []
        for item in session.handle_query(search):
            entry = item.to_dict()
            entry['id'] = registry.register(item)
            results.append(entry)
        return jsonify({'results': results})

    @bp.route('/results/<result_id>/activate', methods=['POST'])
    def activate(result_id: str):
        """Run the action attached to a previously returned result."""
        item = registry.get(result_id)
        if item is None:
            return jsonify({'error': 'Result not found'}), 404

        success = item.activate()
        logger.info(f"Result {result_id[:8]} activated: {'ok' if success else 'failed'}")
        debug_print(f"[ACTIVATE] {item.title[:40]} -> {success}", 'INFO', 'API')
        return jsonify({'success': success})

    return bp


def create_health_blueprint(session: TranslationSession) -> Blueprint:
    """Create health check routes blueprint."""
    bp = Blueprint('health', __name__, url_prefix='/api')

    @bp.route('/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        configured = session.credential_store.exists()
        return jsonify({
            'status': 'healthy' if configured else 'unconfigured',
            'credential': 'configured' if configured else 'missing',
            'debounce': session.debounce.state.value,
            'version': __version__
        })

    return bp


def create_logs_blueprint() -> Blueprint:
    """Create logs routes blueprint."""
    bp = Blueprint('logs', __name__, url_prefix='/api')

    @bp.route('/logs', methods=['GET'])
    def get_logs():
        """Get logs from the in-memory buffer."""
        since_id = request.args.get('since', 0, type=int)
        epoch = request.args.get('epoch', type=int)
        if epoch is not None:
            logs = log_buffer.get_for_epoch(epoch)
        elif since_id > 0:
            logs = log_buffer.get_since(since_id)
        else:
            logs = log_buffer.get_all()
        return jsonify({'logs': logs})

    @bp.route('/logs/clear', methods=['POST'])
    def clear_logs():
        """Clear the log buffer."""
        log_buffer.clear()
        return jsonify({'message': 'Logs cleared'})

    return bp
