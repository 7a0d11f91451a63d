import logging
from typing import Any, Dict, List
from app.schemas.resource import Resource
from app.schemas.alert import EmergencyAlert
from app.state import State
from app.utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

SEED_RESOURCES: List[Dict[str, Any]] = [
	{
		"id": 1,
		"name": "Delhi Emergency Shelter Complex",
		"lat": 28.6139,
		"lng": 77.2090,
		"type": "shelter",
		"contact": "+91-11-1234567890",
		"capacity": 500,
		"description": "Large emergency shelter with dormitories, medical facility, and kitchen",
		"address": "Connaught Place, New Delhi",
		"operatingHours": "24/7",
		"facilities": ["Medical Aid", "Food", "Shelter", "Communication"],
	},
	{
		"id": 2,
		"name": "Mumbai Flood Relief Center",
		"lat": 19.0760,
		"lng": 72.8777,
		"type": "food",
		"contact": "+91-22-9988776655",
		"capacity": 800,
		"description": "24/7 food distribution center with fresh meals and emergency supplies",
		"address": "Bandra West, Mumbai",
		"operatingHours": "24/7",
		"facilities": ["Food Distribution", "Water", "Emergency Supplies"],
	},
	{
		"id": 3,
		"name": "Chennai Medical Emergency Hub",
		"lat": 13.0827,
		"lng": 80.2707,
		"type": "medical",
		"contact": "+91-44-9876543210",
		"capacity": 300,
		"description": "Fully equipped medical center with trauma care and ambulance services",
		"address": "T. Nagar, Chennai",
		"operatingHours": "24/7",
		"facilities": ["Emergency Care", "Trauma Unit", "Ambulance", "Pharmacy"],
	},
	{
		"id": 4,
		"name": "Bangalore Disaster Response Center",
		"lat": 12.9716,
		"lng": 77.5946,
		"type": "shelter",
		"contact": "+91-80-1111222233",
		"capacity": 400,
		"description": "Multi-purpose disaster response facility with coordination center",
		"address": "Whitefield, Bangalore",
		"operatingHours": "24/7",
		"facilities": ["Shelter", "Coordination", "Communication", "Transportation"],
	},
	{
		"id": 5,
		"name": "Kolkata Community Kitchen",
		"lat": 22.5726,
		"lng": 88.3639,
		"type": "food",
		"contact": "+91-33-4444555566",
		"capacity": 1000,
		"description": "Large community kitchen serving traditional meals and special dietary needs",
		"address": "Park Street, Kolkata",
		"operatingHours": "6:00 AM - 10:00 PM",
		"facilities": ["Hot Meals", "Special Diet", "Takeaway", "Delivery"],
	},
]

SEED_ALERTS: List[Dict[str, Any]] = [
	{
		"id": 1,
		"title": "Cyclone Warning - Eastern Coast",
		"description": "Severe cyclone expected to hit eastern coastal regions. All resources on high alert.",
		"severity": "high",
		"affectedAreas": ["Chennai", "Kolkata", "Bhubaneswar"],
	},
	{
		"id": 2,
		"title": "Flood Alert - Mumbai Region",
		"description": "Heavy rainfall expected. Flood relief centers activated.",
		"severity": "medium",
		"affectedAreas": ["Mumbai", "Pune", "Nashik"],
	},
]

def transform_seed_resources(rows: List[Dict[str, Any]]) -> List[Resource]:
	now = utc_now()
	return [
		Resource.from_dict({**row, "status": "active", "dateAdded": now, "lastUpdated": now})
		for row in rows
	]

def transform_seed_alerts(rows: List[Dict[str, Any]]) -> List[EmergencyAlert]:
	now = utc_now()
	return [
		EmergencyAlert.from_dict({**row, "dateCreated": now, "isActive": True})
		for row in rows
	]

def seed_state(state: State) -> State:
	"""Load the demo resources and alerts into an empty state."""
	for resource in transform_seed_resources(SEED_RESOURCES):
		state.add_resource(resource)
	for alert in transform_seed_alerts(SEED_ALERTS):
		state.add_alert(alert)
	logger.info(f"Seeded {len(SEED_RESOURCES)} resources and {len(SEED_ALERTS)} alerts")
	return state
