"""Run the gateway with uvicorn: `python -m docgate`."""

import uvicorn

from docgate.core.config import GatewayConfig, load_env
from docgate.core.logging import log
from docgate.db.client import DbClient, DbConfig
from docgate.gateway import create_app
from docgate.ui import print_welcome


def main() -> None:
    load_env()
    config = GatewayConfig.from_env()

    log.section(f"Starting {config.project_name}")
    with log.timed("Database initialization"):
        db_client = DbClient(DbConfig.from_gateway(config))
        db_client.test_connection()

    app = create_app(config, db_client=db_client)
    print_welcome(config.project_name, config.version, config.host, config.port)

    try:
        uvicorn.run(
            app,
            host=config.host,
            port=config.port,
            log_level="debug" if config.debug_mode else "info",
        )
    finally:
        db_client.close()


if __name__ == "__main__":
    main()
