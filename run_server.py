#!/usr/bin/env python3
"""
PR Labeler Webhook Server

Runs the Flask app that labels pull requests on GitHub webhook deliveries.
"""

import os

from pr_labeler.config import ConfigManager
from pr_labeler.server import create_app


config = ConfigManager().config
app = create_app(config)

if __name__ == '__main__':
    port = int(os.getenv('PORT', '8000'))
    print("Starting PR Labeler webhook server...")
    print(f"Server will be available at: http://localhost:{port}")
    print("Endpoints:")
    print("   - Health Check: GET /api/v1/health")
    print("   - Webhook: POST /api/v1/webhooks/pull_request")

    app.run(
        host='0.0.0.0',
        port=port,
        debug=config.debug
    )
