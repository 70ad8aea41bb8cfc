# examples/main.py
"""
Serve a MongoDB database through docgate.

    uvicorn examples.main:app --port 5000
"""

from fastapi import FastAPI

from docgate import DbClient, DbConfig, GatewayConfig, create_app, load_env
from docgate.core.logging import log, color_palette

# ? Configuration -----------------------------------------------------------------------------------

load_env()
config = GatewayConfig.from_env(
    project_name="Shift API",
    author="Operations",
    collection_id_types={"shiftwise_data": "string", "audit_log": "objectid"},
)

log.section("Starting Application")

with log.timed("Database initialization"):
    db_client = DbClient(DbConfig.from_gateway(config))
    log.info(f"Serving database {color_palette['collection'](db_client.get_db().name)}")

app: FastAPI = create_app(config, db_client=db_client)
