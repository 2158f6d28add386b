#!/usr/bin/env python3
"""Run the mingle API server."""

import os

import uvicorn


def main():
    host = os.environ.get('MINGLE_HOST', '0.0.0.0')
    port = int(os.environ.get('MINGLE_PORT', '8000'))
    print(f"Starting Mingle API server on {host}:{port}...")
    print(f"API documentation available at: http://localhost:{port}/docs")
    uvicorn.run(
        "server.app:app",
        host=host,
        port=port,
        reload=os.environ.get('MINGLE_RELOAD', '1') == '1'
    )


if __name__ == "__main__":
    main()
