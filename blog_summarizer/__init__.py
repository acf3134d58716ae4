from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import HTTPException
import logging
import os
from dotenv import load_dotenv

from blog_summarizer.exceptions import InternalError, SummarizerAppError
from blog_summarizer.services.summarizer import DEFAULT_SUMMARIZER_URL

load_dotenv()

logger = logging.getLogger(__name__)


def _status(value):
    return 'Loaded' if value else 'NOT Loaded'


def _resolve_log_level(name):
    """Map a LOG_LEVEL name to a logging level, INFO if unknown."""
    level = logging.getLevelName(str(name).strip().upper())
    return level if isinstance(level, int) else logging.INFO


def register_error_handlers(app):
    """Render every error as {"error": message}."""

    @app.errorhandler(SummarizerAppError)
    def handle_app_error(e):
        return jsonify(e.to_dict()), e.status_code

    @app.errorhandler(HTTPException)
    def handle_http_error(e):
        return jsonify({'error': e.description}), e.code

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        logger.exception(f"Unhandled error: {e}")
        error = InternalError(str(e) or 'Failed to summarize blog due to an internal server error.')
        return jsonify(error.to_dict()), error.status_code


def create_app(config_name='development', test_config=None):
    app = Flask(__name__)

    # Config
    app.config['TESTING'] = config_name == 'testing'
    app.config['HUGGINGFACE_API_KEY'] = os.getenv('HUGGINGFACE_API_KEY')
    app.config['HUGGINGFACE_SUMMARIZER_URL'] = os.getenv(
        'HUGGINGFACE_SUMMARIZER_URL',
        DEFAULT_SUMMARIZER_URL
    )
    app.config['SUMMARY_INPUT_LIMIT'] = int(os.getenv('SUMMARY_INPUT_LIMIT', 1000))
    app.config['SUMMARY_MIN_LENGTH'] = int(os.getenv('SUMMARY_MIN_LENGTH', 50))
    app.config['SUMMARY_MAX_LENGTH'] = int(os.getenv('SUMMARY_MAX_LENGTH', 200))
    app.config['FETCH_TIMEOUT'] = float(os.getenv('FETCH_TIMEOUT', 10))
    app.config['SUMMARIZER_TIMEOUT'] = float(os.getenv('SUMMARIZER_TIMEOUT', 60))

    if test_config:
        app.config.update(test_config)

    logging.basicConfig(
        level=_resolve_log_level(os.getenv('LOG_LEVEL', 'INFO')),
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s'
    )

    # Urdu text stays readable in JSON responses
    app.json.ensure_ascii = False

    CORS(app)

    from blog_summarizer.services.storage import is_storage_configured
    from blog_summarizer.services.document_store import is_document_store_configured

    logger.info(f"Hugging Face API key: {_status(app.config['HUGGINGFACE_API_KEY'])}")
    logger.info(f"Supabase credentials: {_status(is_storage_configured())}")
    logger.info(f"MongoDB URI: {_status(is_document_store_configured())}")

    register_error_handlers(app)

    from blog_summarizer.routes import register_routes
    register_routes(app)

    # Health check
    @app.route('/health', methods=['GET'])
    def health():
        return {
            'status': 'ok',
            'services': {
                'summarizer': bool(app.config['HUGGINGFACE_API_KEY']),
                'structured_store': is_storage_configured(),
                'document_store': is_document_store_configured(),
            },
        }, 200

    return app
