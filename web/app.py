"""
Flask Application Factory
==========================

This module creates and configures the Flask web application that serves
the roster scraping API.

For Junior Developers:
---------------------
The "application factory" pattern means we have a function that creates
the Flask app, rather than creating it at module level. This makes testing
easier and allows us to create multiple instances with different configs.

Usage:
    from web.app import create_app

    app = create_app()
    app.run()

    # Or with specific config
    app = create_app(config_class=TestingConfig)
"""

import sys

from flask import Flask, jsonify
from loguru import logger

from config.settings import get_config


def setup_logging(config_class):
    """
    Route loguru output to stderr and, when LOG_FILE is set, a rotating file.
    """
    logger.remove()  # Remove default handler
    logger.add(
        sys.stderr,
        level=config_class.LOG_LEVEL,
        format="<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )

    if not config_class.LOG_FILE:
        return

    try:
        logger.add(
            config_class.LOG_FILE,
            rotation="10 MB",
            retention="7 days",
            level=config_class.LOG_LEVEL,
        )
    except Exception as e:
        logger.warning(f"Could not set up file logging: {e}")


def create_app(config_class=None):
    """
    Create and configure the Flask application.

    Args:
        config_class: Configuration class to use (defaults to auto-detect)

    Returns:
        Configured Flask application

    Example:
        from config.settings import TestingConfig
        app = create_app(TestingConfig)
        client = app.test_client()
    """
    app = Flask(__name__)

    if config_class is None:
        config_class = get_config()

    app.config.from_object(config_class)
    app.json.sort_keys = config_class.JSON_SORT_KEYS

    setup_logging(config_class)
    logger.info("Creating Flask application...")

    # ===========================================================================
    # Register Blueprints
    # ===========================================================================
    from web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix='/api')

    # ===========================================================================
    # Error Handlers
    # ===========================================================================
    @app.errorhandler(404)
    def not_found_error(error):
        """Handle 404 Not Found errors."""
        return jsonify({'error': 'Not found'}), 404

    @app.errorhandler(405)
    def method_not_allowed_error(error):
        """Handle 405 Method Not Allowed errors."""
        return jsonify({'error': 'Method not allowed'}), 405

    @app.errorhandler(500)
    def internal_error(error):
        """Handle 500 Internal Server errors."""
        return jsonify({'error': 'Internal server error'}), 500

    logger.info("Flask application created successfully")

    return app


# ==============================================================================
# Application Entry Point
# ==============================================================================
if __name__ == '__main__':
    # This runs when you execute: python -m web.app
    app = create_app()
    app.run(debug=True, host='0.0.0.0', port=5000)
