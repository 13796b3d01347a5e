import json

import azure.functions as func
import dotenv
from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from relay_config.api import (
    check as check_handler,
    configure as configure_handler,
    current_settings as settings_handler,
    health as health_handler,
)
from relay_config.config import SettingsManager
from relay_config.context import build_context, configure_logging

dotenv.load_dotenv()

settings = SettingsManager.from_env()
configure_logging(settings)
context = build_context(settings)

app = func.FunctionApp(http_auth_level=func.AuthLevel.FUNCTION)


@app.function_name(name="ping")
@app.route(route="ping", methods=[func.HttpMethod.GET], auth_level=func.AuthLevel.ANONYMOUS)
async def ping(req: func.HttpRequest) -> func.HttpResponse:
    """Ping endpoint."""
    logger.info("HTTP trigger: ping")
    return func.HttpResponse("pong", status_code=200)


@app.function_name(name="health")
@app.route(route="health", methods=[func.HttpMethod.GET])
async def health(req: func.HttpRequest) -> func.HttpResponse:
    """Health check."""
    logger.info("HTTP trigger: health")

    response = await health_handler(context, route=req.params.get("route", None))
    return func.HttpResponse(
        json.dumps(response),
        status_code=200 if response["status"] == "success" else 500
    )


@app.function_name(name="settings")
@app.route(route="settings", methods=[func.HttpMethod.GET])
async def current_settings(req: func.HttpRequest) -> func.HttpResponse:
    """Current global configuration, passwords masked."""
    logger.info("HTTP trigger: settings")

    response = await settings_handler(context)
    return func.HttpResponse(json.dumps(response), status_code=200)


@app.function_name(name="configure")
@app.route(route="configure", methods=[func.HttpMethod.POST])
async def configure(req: func.HttpRequest) -> func.HttpResponse:
    """Submit the global configuration form."""
    logger.info("HTTP trigger: configure")

    try:
        req_body = req.get_json()
    except ValueError:
        return func.HttpResponse(
            json.dumps({"status": "error", "message": "Invalid JSON body"}),
            status_code=400
        )

    try:
        response = await configure_handler(req_body, context)
    except SQLAlchemyError:
        logger.exception("Configuration could not be saved")
        return func.HttpResponse(
            json.dumps({"status": "error", "message": "Configuration could not be saved"}),
            status_code=500
        )

    return func.HttpResponse(
        json.dumps(response),
        status_code=200 if response.get("status") == "success" else 400
    )


@app.function_name(name="check")
@app.route(route="check/{field}", methods=[func.HttpMethod.GET])
async def check(req: func.HttpRequest) -> func.HttpResponse:
    """Live validation of one ActionHub form field."""
    field = req.route_params.get("field")
    logger.info("HTTP trigger: check {}", field)

    response = await check_handler(field, req.params.get("value", ""))
    return func.HttpResponse(json.dumps(response), status_code=200)
