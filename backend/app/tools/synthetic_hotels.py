from __future__ import annotations

from typing import Dict, List

# Base price level per hotel type, before the proximity adjustment.
TYPE_PRICE_LEVEL: Dict[str, int] = {
    "luxury": 3,
    "business": 3,
    "boutique": 2,
    "heritage": 2,
    "budget": 1,
}

TYPE_AMENITIES: Dict[str, List[str]] = {
    "luxury": ["Free WiFi", "Spa", "Swimming Pool", "Fine Dining", "Valet Parking", "Room Service"],
    "business": ["Free WiFi", "Business Center", "Meeting Rooms", "Fitness Center", "Airport Shuttle"],
    "boutique": ["Free WiFi", "Rooftop Bar", "Designer Rooms", "Breakfast Included"],
    "heritage": ["Free WiFi", "Heritage Architecture", "Garden", "Restaurant", "Guided Tours"],
    "budget": ["Free WiFi", "Free Parking", "24-hour Front Desk"],
}

TYPE_REVIEWS: Dict[str, List[dict]] = {
    "luxury": [
        {"author": "Amelia R.", "text": "Impeccable service and a beautiful spa.", "rating": 5.0},
        {"author": "Karan M.", "text": "Pricey, but the rooms are worth every cent.", "rating": 4.0},
    ],
    "business": [
        {"author": "Daniel K.", "text": "Fast WiFi and a quiet desk, perfect for work trips.", "rating": 4.0},
        {"author": "Sofia L.", "text": "Convenient shuttle, breakfast starts early.", "rating": 4.0},
    ],
    "boutique": [
        {"author": "Priya S.", "text": "Lovely design and a great rooftop view.", "rating": 5.0},
        {"author": "Tom H.", "text": "Small rooms but full of character.", "rating": 4.0},
    ],
    "heritage": [
        {"author": "Margaret W.", "text": "Like sleeping in a museum, in the best way.", "rating": 5.0},
        {"author": "Luis G.", "text": "Charming building, plumbing shows its age.", "rating": 3.0},
    ],
    "budget": [
        {"author": "Chris P.", "text": "Clean and simple, great value.", "rating": 4.0},
        {"author": "Nina B.", "text": "Basic but the staff were friendly.", "rating": 3.0},
    ],
}

ROSTER: List[dict] = [
    {"name": "Grand Plaza Hotel", "type": "luxury", "rating": 4.5},
    {"name": "Business Suites", "type": "business", "rating": 4.2},
    {"name": "Comfort Inn & Suites", "type": "budget", "rating": 4.0},
    {"name": "Boutique Hotel Downtown", "type": "boutique", "rating": 4.7},
    {"name": "City Center Lodge", "type": "budget", "rating": 3.8},
    {"name": "Heritage Palace Hotel", "type": "heritage", "rating": 4.4},
    {"name": "Riverside Executive Tower", "type": "business", "rating": 4.1},
    {"name": "Royal Crown Residency", "type": "luxury", "rating": 4.6},
    {"name": "The Artisan House", "type": "boutique", "rating": 4.5},
    {"name": "Old Town Manor", "type": "heritage", "rating": 4.3},
]

STREETS: List[str] = [
    "Main St",
    "Market St",
    "Station Rd",
    "Park Ave",
    "High St",
    "Harbour Rd",
    "Church Ln",
    "King St",
]
