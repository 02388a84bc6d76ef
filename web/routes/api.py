"""
API Routes
===========

JSON API for the roster scraper.

These endpoints are used by:
- The roster front end ("import from URL")
- Scripts that want a roster without running the CLI

Endpoints:
- POST /api/scrape  {"url": "...", "render": false} -> {"team": ..., "roster": [...]}
- GET  /api/health  -> {"status": "ok"}

For Junior Developers:
---------------------
Errors come back as JSON too, with an HTTP status that says who is at fault:
- 400: the request was bad, or the page has no roster we can read
- 502: the athletics site could not be reached (an upstream problem)
- 500: something broke on our side
"""

from flask import Blueprint, jsonify, request
from loguru import logger

from scrapers.exceptions import FetchFailure, NoRosterFound
from services.roster_service import RosterService

# Create the blueprint
api_bp = Blueprint('api', __name__)

# Initialize services
roster_service = RosterService()


@api_bp.after_app_request
def add_cors_headers(response):
    """Allow the roster front end to call the API from any origin."""
    if request.path.startswith('/api'):
        response.headers['Access-Control-Allow-Origin'] = '*'
        response.headers['Access-Control-Allow-Methods'] = 'GET, POST, OPTIONS'
        response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
    return response


# ==============================================================================
# Scrape Endpoint
# ==============================================================================

@api_bp.route('/scrape', methods=['POST', 'OPTIONS'])
def api_scrape():
    """
    Scrape a roster page.

    JSON Body:
        url: Roster page URL (required, http or https)
        render: Load the page in headless Chrome first (default false)

    Returns:
        JSON with team info and roster
    """
    if request.method == 'OPTIONS':
        return '', 200

    payload = request.get_json(silent=True) or {}
    url = (payload.get('url') or '').strip()
    render = bool(payload.get('render', False))

    if not url.lower().startswith(('http://', 'https://')):
        return jsonify({'error': 'URL is required'}), 400

    try:
        result = roster_service.scrape(url, render=render)
        return jsonify(result.to_dict())

    except NoRosterFound as e:
        logger.warning(f"API scrape - no roster on {url}")
        return jsonify(e.to_dict()), 400

    except FetchFailure as e:
        logger.error(f"API scrape - fetch failed: {e.message}")
        return jsonify(e.to_dict()), 502

    except Exception as e:
        logger.error(f"API error - scrape: {e}")
        return jsonify({
            'error': f"Failed to scrape roster: {e}",
            'suggestion': 'The site may block automated requests or use JavaScript rendering. '
                          'Try using the manual import option.',
        }), 500


# ==============================================================================
# Health Check
# ==============================================================================

@api_bp.route('/health')
def api_health():
    """Health check for load balancers and uptime monitors."""
    return jsonify({'status': 'ok'})
