"""
Catalog Proxy - Flask backend relaying browser queries to ExerciseDB.

Provides API endpoints for:
- POST /exercise-catalog/query: one query shape, raw provider JSON back
- GET /exercise-catalog/image: animated image relay by exercise id
- GET /exercise-catalog/body-parts, /exercise-catalog/equipment: reference data

Upstream credentials stay on the server. Responses are returned untouched;
callers normalize on their side.

Run locally:
    python cli.py serve --port 8080
"""

from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, Response, jsonify, request

from exercise_catalog.catalog import build_orchestrator
from exercise_catalog.config import PROXY_PATH, CatalogSettings
from exercise_catalog.errors import BothProvidersFailed, InvalidArgument, NotConfigured, UpstreamError
from exercise_catalog.failover import FailoverOrchestrator
from exercise_catalog.providers import RapidApiProvider
from exercise_catalog.query import CatalogQuery
from exercise_catalog.reference import body_parts, equipment_list

logger = logging.getLogger(__name__)

IMAGE_CACHE_CONTROL = "public, max-age=86400"


def create_app(
    settings: Optional[CatalogSettings] = None,
    orchestrator: Optional[FailoverOrchestrator] = None,
    image_provider: Optional[RapidApiProvider] = None,
) -> Flask:
    """
    Build the proxy application.

    Args:
        settings: Provider settings (from env if not provided)
        orchestrator: Query orchestrator (built from settings if not provided)
        image_provider: Provider used by the image relay (defaults to the
            orchestrator's primary when it is a RapidApiProvider)
    """
    settings = settings or CatalogSettings.from_env()
    orchestrator = orchestrator or build_orchestrator(settings)
    if image_provider is None:
        if isinstance(orchestrator.primary, RapidApiProvider):
            image_provider = orchestrator.primary
        else:
            image_provider = RapidApiProvider(
                api_key=settings.rapidapi_key,
                base_url=settings.rapidapi_base_url,
                host=settings.rapidapi_host,
                timeout_seconds=settings.timeout_seconds,
            )

    app = Flask(__name__)

    @app.route(PROXY_PATH, methods=['POST'])
    def query_catalog():
        """Forward one query shape through the failover orchestrator."""
        body = request.get_json(silent=True)
        if body is None:
            return jsonify({'error': 'Invalid JSON body'}), 400

        try:
            query = CatalogQuery.from_payload(body)
        except InvalidArgument as e:
            return jsonify({'error': str(e)}), 400

        try:
            result = orchestrator.execute(query)
        except BothProvidersFailed as e:
            return jsonify({
                'error': str(e),
                'primaryError': e.primary_error,
                'fallbackError': e.fallback_error,
            }), 502
        except Exception as e:
            logger.exception("Catalog query failed: action=%s", query.action)
            return jsonify({'error': str(e) or 'Unknown error'}), 500

        response = jsonify(result.data)
        response.headers['X-Catalog-Provider'] = result.provider
        return response

    @app.route('/exercise-catalog/image')
    def exercise_image():
        """Relay an exercise's animated image without exposing the API key."""
        exercise_id = (request.args.get('id') or '').strip()
        if not exercise_id:
            return jsonify({'error': 'id required'}), 400

        try:
            content, content_type = image_provider.fetch_image(
                exercise_id, request.args.get('resolution'),
            )
        except NotConfigured as e:
            return jsonify({'error': f'ExerciseDB image API not configured: {e}'}), 503
        except UpstreamError as e:
            logger.warning("Image relay failed: id=%s error=%s", exercise_id, e)
            status = 404 if e.status_code == 404 else 502
            return jsonify({'error': 'ExerciseDB image failed'}), status

        return Response(
            content,
            status=200,
            headers={
                'Content-Type': content_type,
                'Cache-Control': IMAGE_CACHE_CONTROL,
            },
        )

    @app.route('/exercise-catalog/body-parts')
    def list_body_parts():
        return jsonify({'success': True, 'data': body_parts()})

    @app.route('/exercise-catalog/equipment')
    def list_equipment():
        return jsonify({'success': True, 'data': equipment_list()})

    return app
