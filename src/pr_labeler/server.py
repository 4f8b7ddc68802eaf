"""
Webhook Server

Flask app that evaluates PRs when GitHub delivers pull_request events.
"""

import hmac
import hashlib
import logging
from typing import Callable, Optional

from flask import Flask, request, jsonify
from pydantic import ValidationError

from . import __version__
from .config import AppConfig, get_config
from .exceptions import LabelerError
from .labeler import PullRequestLabeler
from .models.event import PullRequestEvent
from .models.outcome import Skipped


logger = logging.getLogger(__name__)


HANDLED_ACTIONS = frozenset({
    'opened',
    'reopened',
    'synchronize',
    'ready_for_review',
    'review_requested',
    'review_request_removed',
    'edited',
})


def verify_signature(secret: str, body: bytes, signature: Optional[str]) -> bool:
    """Check an ``X-Hub-Signature-256`` header against the raw request body."""
    if not signature or not signature.startswith('sha256='):
        return False
    expected = hmac.new(secret.encode('utf-8'), body, hashlib.sha256).hexdigest()
    return hmac.compare_digest(f"sha256={expected}", signature)


def create_app(
    config: Optional[AppConfig] = None,
    labeler_factory: Optional[Callable[[str], PullRequestLabeler]] = None,
) -> Flask:
    """
    Create the webhook app.

    Args:
        config: Application configuration (default: loaded from environment)
        labeler_factory: Builds a labeler for an ``owner/repo``; defaults to a
            GitHub-backed labeler built from ``config``
    """
    config = config or get_config()
    if labeler_factory is None:
        def labeler_factory(repository: str) -> PullRequestLabeler:
            return PullRequestLabeler.from_config(config, repository=repository)

    app = Flask(__name__)

    @app.route('/api/v1/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'service': 'pr-labeler',
            'version': __version__
        })

    @app.route('/api/v1/webhooks/pull_request', methods=['POST'])
    def pull_request_webhook():
        """Evaluate the PR from a pull_request event."""
        secret = config.github.webhook_secret
        if secret and not verify_signature(secret, request.get_data(), request.headers.get('X-Hub-Signature-256')):
            logger.warning("Rejected webhook with invalid signature")
            return jsonify({'error': 'invalid signature', 'status': 'rejected'}), 401

        event_type = request.headers.get('X-GitHub-Event', 'pull_request')
        if event_type != 'pull_request':
            return jsonify({'status': 'ignored', 'reason': f'event {event_type}'}), 202

        try:
            event = PullRequestEvent.model_validate(request.get_json(force=True, silent=False))
        except (ValidationError, TypeError) as e:
            return jsonify({'error': str(e), 'status': 'failed'}), 400

        if event.action is not None and event.action not in HANDLED_ACTIONS:
            return jsonify({'status': 'ignored', 'reason': f'action {event.action}'}), 202

        if event.pr_number is None:
            return jsonify(Skipped(reason='missing PR number').to_dict())

        repository = event.repository_name or config.github.repository
        if not repository:
            return jsonify({'error': 'repository missing from event', 'status': 'failed'}), 400

        try:
            outcome = labeler_factory(repository).evaluate_event(event)
        except LabelerError as e:
            logger.error(f"Labeling failed for {repository}: {e}")
            return jsonify({'error': str(e), 'status': 'failed'}), 502

        return jsonify(outcome.to_dict())

    return app
