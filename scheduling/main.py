import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from scheduling.core import config
from scheduling.routes import schedule_routes

app = FastAPI(debug=config.DEBUG)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=['*'],
    allow_headers=['*'],
)

logger = logging.getLogger(__name__)


@app.on_event('startup')
def check_configuration() -> None:
    try:
        config.validate_runtime_config()
    except RuntimeError:
        logger.exception('Runtime configuration is incomplete. Check the calendar and email settings.')
        raise


@app.get('/')
def root():
    return {'status': 'Scheduling API Running'}


app.include_router(schedule_routes.router, prefix='/schedule')
