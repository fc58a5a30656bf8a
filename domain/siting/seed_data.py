"""Reference infrastructure for India, served when no datastore is configured."""
from __future__ import annotations

from typing import Any, Dict, List

RENEWABLE_SOURCES: List[Dict[str, Any]] = [
    {"name": "Gujarat Solar Park", "type": "solar", "latitude": "23.0225", "longitude": "72.5714", "capacity": 750},
    {"name": "Muppandal Wind Farm", "type": "wind", "latitude": "8.7642", "longitude": "77.7520", "capacity": 1500},
    {"name": "Bhuj Wind Farm", "type": "wind", "latitude": "23.2420", "longitude": "69.6669", "capacity": 300},
    {"name": "Rajasthan Solar Park", "type": "solar", "latitude": "27.5530", "longitude": "73.0114", "capacity": 2255},
    {"name": "Jaisalmer Wind Park", "type": "wind", "latitude": "26.9157", "longitude": "70.9083", "capacity": 1064},
    {"name": "Tamil Nadu Wind Farm", "type": "wind", "latitude": "9.9252", "longitude": "78.1198", "capacity": 400},
    {"name": "Maharashtra Solar Plant", "type": "solar", "latitude": "19.7515", "longitude": "75.7139", "capacity": 500},
    {"name": "Andhra Pradesh Wind Farm", "type": "wind", "latitude": "15.9129", "longitude": "79.7400", "capacity": 600},
    {"name": "Mumbai Offshore Wind Farm", "type": "Wind Farm", "latitude": "19.0760", "longitude": "72.8777", "capacity": 600},
    {"name": "Bangalore Tech Solar Park", "type": "Solar Farm", "latitude": "12.9716", "longitude": "77.5946", "capacity": 450},
]

DEMAND_CENTERS: List[Dict[str, Any]] = [
    {"name": "Tata Steel Jamshedpur", "type": "steel", "latitude": "22.8046", "longitude": "86.2029", "demand_level": "high"},
    {"name": "Mumbai Port", "type": "transport", "latitude": "18.9388", "longitude": "72.8354", "demand_level": "high"},
    {"name": "IOCL Mathura", "type": "chemical", "latitude": "27.4924", "longitude": "77.6737", "demand_level": "medium"},
    {"name": "NTPC Vindhyachal", "type": "power", "latitude": "24.3006", "longitude": "82.6537", "demand_level": "high"},
    {"name": "Jindal Steel Angul", "type": "steel", "latitude": "20.8397", "longitude": "85.1012", "demand_level": "medium"},
    {"name": "Chennai Port", "type": "transport", "latitude": "13.1067", "longitude": "80.3314", "demand_level": "high"},
    {"name": "Reliance Jamnagar", "type": "chemical", "latitude": "22.4707", "longitude": "70.0577", "demand_level": "high"},
    {"name": "BHEL Trichy", "type": "power", "latitude": "10.7905", "longitude": "78.7047", "demand_level": "medium"},
    {"name": "Visakhapatnam Steel", "type": "steel", "latitude": "17.6868", "longitude": "83.2185", "demand_level": "high"},
    {"name": "Kandla Port", "type": "transport", "latitude": "23.0330", "longitude": "70.2231", "demand_level": "medium"},
]

__all__ = ["DEMAND_CENTERS", "RENEWABLE_SOURCES"]
