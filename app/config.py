import os
from pathlib import Path
from typing import List
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

PROJECT_ROOT = Path(__file__).resolve().parent.parent

class Settings:
	# Server configuration
	host: str = os.getenv("HOST", "0.0.0.0")
	port: int = int(os.getenv("PORT", "3000"))
	log_level: str = os.getenv("LOG_LEVEL", "INFO")

	# Landing page and any other static assets
	static_dir: str = os.getenv("STATIC_DIR", str(PROJECT_ROOT / "public"))

	# Comma separated, "*" allows every origin
	cors_origins_raw: str = os.getenv("CORS_ORIGINS", "*")

	# Query defaults
	default_list_limit: int = int(os.getenv("DEFAULT_LIST_LIMIT", "50"))
	default_nearby_radius_km: float = float(os.getenv("DEFAULT_NEARBY_RADIUS_KM", "50"))

	# Whether a fresh state is populated with the demo resources and alerts
	seed_data: bool = os.getenv("SEED_DATA", "true").lower() in ("1", "true", "yes")

	@property
	def cors_origins(self) -> List[str]:
		"""Allowed CORS origins as a list."""
		return [origin.strip() for origin in self.cors_origins_raw.split(",") if origin.strip()]

	@property
	def index_file(self) -> str:
		"""Path of the landing page served at `/`."""
		return os.path.join(self.static_dir, "index.html")

	@property
	def base_url(self) -> str:
		"""Local URL the server is reachable at."""
		return f"http://localhost:{self.port}"

settings = Settings()
