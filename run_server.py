#!/usr/bin/env python
"""
Run the API Server

Starts the FastAPI server for the request workbench.

Usage:
    python run_server.py

The server runs on http://localhost:8000 (WORKBENCH_PORT to change)

Endpoints:
    GET  /api/health   - Health check
    POST /api/parse    - Parse URL-or-cURL text
    POST /api/generate - Build cURL text
    POST /api/execute  - Execute a request
"""

import uvicorn

from curl_workbench import config

uvicorn.run("curl_workbench.server:app", host=config.API_HOST, port=config.API_PORT, reload=False)
