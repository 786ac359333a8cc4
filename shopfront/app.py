# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from flask import Flask

from shopfront.infrastructure.container import Container
from shopfront.shared.config import AppConfig, load_config
from shopfront.shared.logging import logger, setup_logging
from shopfront.shared.middleware.cors import configure_cors
from shopfront.shared.middleware.error_handler import configure_error_handling
from shopfront.shared.middleware.request_logger import configure_request_logging


def create_app(
    config: AppConfig | None = None, *, container: Container | None = None
) -> Flask:
    config = config or load_config()
    setup_logging("DEBUG" if config.debug_logging else None)

    container = container or Container(config)
    # Load catalog and users before the first request is served.
    catalog = container.catalog_store
    users = container.user_registry

    app = Flask(__name__)
    configure_error_handling(app, debug_mode=config.debug_logging)
    configure_request_logging(app, debug_mode=config.debug_logging)
    configure_cors(app, config.security)

    app.register_blueprint(container.misc_controller.as_blueprint())
    app.register_blueprint(container.catalog_controller.as_blueprint())
    app.register_blueprint(container.auth_controller.as_blueprint())
    app.register_blueprint(container.cart_controller.as_blueprint())

    app.extensions["shopfront.container"] = container

    logger.info(
        f"Flask app initialized: brands={catalog.brand_count} "
        f"products={catalog.product_count} users={len(users)}"
    )
    return app


def main() -> None:
    config = load_config()
    app = create_app(config)
    app.run(
        host=config.host,
        port=config.port,
        debug=config.debug_logging and not config.is_production(),
    )


if __name__ == "__main__":
    main()
