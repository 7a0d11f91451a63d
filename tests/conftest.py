"""
Pytest configuration and fixtures.
"""
import pytest
from datetime import datetime, timezone
from fastapi.testclient import TestClient
from app.schemas.resource import Resource
from app.seeds.seed_resources import seed_state
from app.state import State
from main import create_app


@pytest.fixture
def empty_state():
	"""A state with no records."""
	return State()


@pytest.fixture
def seeded_state():
	"""A state holding the five demo resources and two demo alerts."""
	return seed_state(State())


@pytest.fixture
def client(seeded_state):
	"""HTTP client for an app serving the seeded state."""
	app = create_app(state=seeded_state)
	return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def make_resource():
	"""Factory for resources with sensible defaults."""
	def _make_resource(resource_id: int, lat: float = 0.0, lng: float = 0.0, **overrides) -> Resource:
		timestamp = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)
		fields = {
			"id": resource_id,
			"name": f"Resource {resource_id}",
			"type": "shelter",
			"contact": "+91-00-0000000000",
			"lat": lat,
			"lng": lng,
			"capacity": 100,
			"date_added": timestamp,
			"last_updated": timestamp,
		}
		fields.update(overrides)
		return Resource(**fields)
	return _make_resource


@pytest.fixture
def sample_resource_payload():
	"""Valid body for POST /api/resources."""
	return {
		"name": "Pune Relief Camp",
		"lat": 18.5204,
		"lng": 73.8567,
		"type": "shelter",
		"contact": "+91-20-1234567890",
		"capacity": 250,
	}
