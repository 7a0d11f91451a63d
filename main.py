import logging
import os
from typing import Optional
from fastapi import Depends, FastAPI, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from app.config import settings, Settings
from app.controllers import community_controller, resource_controller
from app.dependencies import get_state
from app.exceptions import register_exception_handlers
from app.logging_config import setup_logging
from app.seeds.seed_resources import seed_state
from app.state import State

logger = logging.getLogger(__name__)


def create_app(state: Optional[State] = None, config: Settings = settings) -> FastAPI:
	"""
	Build the API around one State.

	Args:
		state: Store to serve. A new one (seeded when `config.seed_data` is set) is created if omitted.
		config: Settings to read static directory and CORS origins from.
	"""
	if state is None:
		state = State()
		if config.seed_data:
			seed_state(state)

	app = FastAPI(
		title="Disaster Resource Finder API",
		description="Find shelters, food centers and medical hubs, and share alerts, reports and volunteer sign-ups",
		version="1.0.0"
	)
	app.state.store = state

	app.add_middleware(
		CORSMiddleware,
		allow_origins=config.cors_origins,
		allow_credentials=False,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	register_exception_handlers(app)

	# Include routers
	app.include_router(resource_controller.router)
	app.include_router(community_controller.router)

	@app.get("/health")
	async def health(store: State = Depends(get_state)):
		"""Health check endpoint."""
		return {
			"status": "healthy",
			"resources": store.resource_count,
			"alerts": len(store.active_alerts)
		}

	@app.get("/", include_in_schema=False)
	async def index():
		"""Landing page."""
		if not os.path.isfile(config.index_file):
			raise StarletteHTTPException(status_code=status.HTTP_404_NOT_FOUND)
		return FileResponse(config.index_file)

	# Must stay last: it matches every path the routes above did not
	if os.path.isdir(config.static_dir):
		app.mount("/", StaticFiles(directory=config.static_dir), name="static")
	else:
		logger.warning(f"Static directory {config.static_dir} not found, landing page disabled")

	return app


setup_logging(level=settings.log_level)
app = create_app()


if __name__ == "__main__":
	import uvicorn

	logger.info(f"Disaster Resource Finder server running on port {settings.port}")
	logger.info(f"Open {settings.base_url} in your browser")
	logger.info(f"API endpoints available at {settings.base_url}/api")
	uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
