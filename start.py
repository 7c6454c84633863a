"""Simple launcher for the delivery path HTTP service.

This script configures logging from the environment, builds the
container and starts the FastAPI app with uvicorn.
"""

from __future__ import annotations

import uvicorn

from delivery_routing.api import create_app
from delivery_routing.config import get_config
from delivery_routing.container import Container
from delivery_routing.logging_setup import configure_logging


def main() -> None:
    config = get_config()
    configure_logging(config.observability)

    app = create_app(Container.create_default(config))

    print("=== Fastest Delivery Path ===")
    print(f"Store backend: {config.store.backend}")
    print(f"Listening on http://{config.api.host}:{config.api.port}")
    uvicorn.run(app, host=config.api.host, port=config.api.port, log_config=None)


if __name__ == "__main__":
    main()
