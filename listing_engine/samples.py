"""
Bundled sample snapshots for the three listing surfaces.

Timestamps are relative to ``now`` so "latest" ordering stays meaningful
whenever the snapshot is built.
"""
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, List, Optional, Tuple

from .snapshot import build_snapshot


def _days_ago(now: datetime, days: float) -> str:
    return (now - timedelta(days=days)).isoformat()


def marketplace_payloads(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    now = now or datetime.now(timezone.utc)
    return [
        {
            "id": "1",
            "title": "iPhone 14 Pro Max 256GB - Space Black",
            "description": "iPhone 14 Pro Max in excellent condition. Used for only 3 months. "
                           "Still has warranty until next year. Complete package with original box, "
                           "charger, and case. No scratches or dents. Serious buyers only.",
            "price": 45000, "currency": "PHP", "negotiable": True,
            "condition": "like_new", "category": "electronics", "subcategory": "smartphones",
            "seller": {"id": "seller_1", "name": "Sarah Kim", "verified": True},
            "location": {"region": "NCR", "city": "Makati", "area": "BGC"},
            "tags": ["iphone", "apple", "smartphone", "unlocked", "warranty"],
            "views": 1245, "favorites": 89, "inquiries": 23,
            "postedDate": _days_ago(now, 2), "updatedDate": _days_ago(now, 2),
            "status": "active", "isFeatured": True, "isUrgent": False,
        },
        {
            "id": "2",
            "title": "Toyota Vios 2020 - Manual Transmission",
            "description": "Well-maintained Toyota Vios 2020 with manual transmission. Single owner, "
                           "regularly serviced at Casa. Clean papers, no accidents. Complete OR/CR. "
                           "Fresh registration. Perfect for first-time car owners.",
            "price": 650000, "currency": "PHP", "negotiable": True,
            "condition": "good", "category": "vehicles", "subcategory": "cars",
            "seller": {"id": "seller_2", "name": "Miguel Santos", "verified": True},
            "location": {"region": "NCR", "city": "Quezon City", "area": "Diliman"},
            "tags": ["toyota", "vios", "manual", "sedan", "clean-papers"],
            "views": 2341, "favorites": 156, "inquiries": 45,
            "postedDate": _days_ago(now, 5), "updatedDate": _days_ago(now, 1),
            "status": "active", "isFeatured": True, "isUrgent": False,
        },
        {
            "id": "3",
            "title": "3-Seater Sofa Set - Like New Condition",
            "description": "Beautiful 3-seater sofa set in like-new condition. Made of premium fabric "
                           "and solid wood frame. Very comfortable and perfect for living room. "
                           "Reason for selling: moving to smaller place. Must go this week.",
            "price": 12000, "currency": "PHP", "negotiable": True,
            "condition": "like_new", "category": "furniture", "subcategory": "living-room",
            "seller": {"id": "seller_3", "name": "Lisa Chen", "verified": False},
            "location": {"region": "Central Visayas", "city": "Cebu", "area": "Lahug"},
            "tags": ["sofa", "furniture", "living-room", "beige", "comfortable"],
            "views": 567, "favorites": 34, "inquiries": 12,
            "postedDate": _days_ago(now, 3), "updatedDate": _days_ago(now, 3),
            "status": "active", "isFeatured": False, "isUrgent": True,
        },
        {
            "id": "4",
            "title": "Nike Air Max 270 - Size 9 US",
            "description": "Authentic Nike Air Max 270 in excellent condition. Worn only a few times. "
                           "Very comfortable for running and casual wear. Original box included. "
                           "Perfect for sneaker enthusiasts.",
            "price": 3500, "currency": "PHP", "negotiable": False,
            "condition": "good", "category": "clothing", "subcategory": "shoes",
            "seller": {"id": "seller_4", "name": "Alex Rodriguez", "verified": False},
            "location": {"region": "Davao", "city": "Davao", "area": "Poblacion"},
            "tags": ["nike", "airmax", "sneakers", "running", "authentic"],
            "views": 234, "favorites": 18, "inquiries": 5,
            "postedDate": _days_ago(now, 4), "updatedDate": _days_ago(now, 4),
            "status": "active", "isFeatured": False, "isUrgent": False,
        },
        {
            "id": "5",
            "title": "Samsung 15kg Washing Machine - Front Load",
            "description": "Samsung front-loading washing machine with 15kg capacity. Perfect for "
                           "large families. Energy efficient and has multiple wash programs. "
                           "Only 1 year old, still under warranty. Moving sale.",
            "price": 25000, "currency": "PHP", "negotiable": True,
            "condition": "good", "category": "home_appliances", "subcategory": "laundry",
            "seller": {"id": "seller_5", "name": "Maria Gonzales", "verified": True},
            "location": {"region": "NCR", "city": "Manila", "area": "Ermita"},
            "tags": ["samsung", "washing-machine", "front-load", "energy-efficient", "warranty"],
            "views": 456, "favorites": 67, "inquiries": 15,
            "postedDate": _days_ago(now, 1), "updatedDate": _days_ago(now, 1),
            "status": "active", "isFeatured": False, "isUrgent": False,
        },
    ]


def job_payloads(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    now = now or datetime.now(timezone.utc)
    return [
        {
            "id": "1",
            "title": "Senior Software Engineer",
            "company": {"id": "company_1", "name": "Globe Telecom"},
            "location": "BGC, Taguig", "region": "Metro Manila",
            "jobType": "full-time",
            "salaryRange": {"min": 60000, "max": 90000, "currency": "PHP", "period": "monthly"},
            "experienceLevel": "senior", "category": "technology",
            "description": "We are looking for an experienced Senior Software Engineer to join our "
                           "digital transformation team. You will be responsible for designing and "
                           "developing scalable applications that serve millions of users.",
            "skills": ["JavaScript", "React", "Node.js", "AWS", "Docker", "Kubernetes",
                       "TypeScript", "PostgreSQL"],
            "postedDate": _days_ago(now, 2), "updatedDate": _days_ago(now, 2),
            "views": 1245, "applications": 23,
            "isUrgent": False, "isFeatured": True, "isRemote": False, "status": "active",
        },
        {
            "id": "2",
            "title": "Customer Service Representative",
            "company": {"id": "company_2", "name": "Concentrix"},
            "location": "Alabang, Muntinlupa", "region": "Metro Manila",
            "jobType": "full-time",
            "salaryRange": {"min": 18000, "max": 25000, "currency": "PHP", "period": "monthly"},
            "experienceLevel": "entry", "category": "customer-service",
            "description": "Join our international customer service team supporting US and UK "
                           "clients. We provide comprehensive training and career advancement "
                           "opportunities in a dynamic BPO environment.",
            "skills": ["Customer Service", "English Communication", "Problem Solving",
                       "Computer Literacy", "Multi-tasking"],
            "postedDate": _days_ago(now, 1), "updatedDate": _days_ago(now, 1),
            "views": 2341, "applications": 67,
            "isUrgent": True, "isFeatured": False, "isRemote": False, "status": "active",
        },
        {
            "id": "3",
            "title": "Digital Marketing Specialist",
            "company": {"id": "company_3", "name": "Shopee Philippines"},
            "location": "Pasig City", "region": "Metro Manila",
            "jobType": "full-time",
            "salaryRange": {"min": 35000, "max": 50000, "currency": "PHP", "period": "monthly"},
            "experienceLevel": "mid", "category": "marketing",
            "description": "We are seeking a creative and data-driven Digital Marketing Specialist "
                           "to develop and execute marketing campaigns that drive user acquisition "
                           "and engagement on our e-commerce platform.",
            "skills": ["Digital Marketing", "Google Ads", "Facebook Ads", "SEO", "Analytics",
                       "Content Creation", "Social Media"],
            "postedDate": _days_ago(now, 3), "updatedDate": _days_ago(now, 3),
            "views": 987, "applications": 41,
            "isUrgent": False, "isFeatured": True, "isRemote": False, "status": "active",
        },
        {
            "id": "4",
            "title": "Remote Web Developer",
            "company": {"id": "company_4", "name": "Thinking Machines"},
            "location": "Remote (Philippines)", "region": "Remote",
            "jobType": "remote",
            "salaryRange": {"min": 50000, "max": 80000, "currency": "PHP", "period": "monthly"},
            "experienceLevel": "senior", "category": "technology",
            "description": "Work remotely on cutting-edge web applications for international "
                           "clients. We are a data science and AI company looking for a skilled "
                           "web developer to join our remote team.",
            "skills": ["Python", "Django", "React", "JavaScript", "PostgreSQL", "AWS", "Git",
                       "REST APIs"],
            "postedDate": _days_ago(now, 5), "updatedDate": _days_ago(now, 5),
            "views": 678, "applications": 15,
            "isUrgent": False, "isFeatured": False, "isRemote": True, "status": "active",
        },
        {
            "id": "5",
            "title": "Marketing Assistant (Part-time)",
            "company": {"id": "company_5", "name": "Jollibee Foods Corporation"},
            "location": "Ortigas, Pasig", "region": "Metro Manila",
            "jobType": "part-time",
            "salaryRange": {"min": 15000, "max": 20000, "currency": "PHP", "period": "monthly"},
            "experienceLevel": "entry", "category": "marketing",
            "description": "Support our marketing team with campaign execution, social media "
                           "management, and brand promotion activities. Perfect for students or "
                           "career changers looking to gain marketing experience.",
            "skills": ["Social Media", "Content Creation", "Basic Design", "Communication",
                       "Research"],
            "postedDate": _days_ago(now, 7), "updatedDate": _days_ago(now, 7),
            "views": 1456, "applications": 89,
            "isUrgent": True, "isFeatured": False, "isRemote": False, "status": "active",
        },
    ]


def property_payloads(now: Optional[datetime] = None) -> List[Dict[str, Any]]:
    now = now or datetime.now(timezone.utc)
    rows: List[Tuple[str, str, str, str, str, int, int, bool, bool, int, int]] = [
        # id, title, type, region, city, price, bedrooms, furnished, featured, viewCount, age_days
        ("1", "Modern 2BR Condo in BGC", "condo", "Metro Manila", "Taguig", 45000, 2, True, True, 150, 5),
        ("2", "Spacious House in Angeles City", "house", "Angeles", "Angeles City", 35000, 3, False, False, 89, 10),
        ("3", "Makati Studio near Ayala", "condo", "NCR", "Makati", 28000, 1, True, False, 210, 3),
        ("4", "Family House in Quezon City", "house", "manila", "Quezon City", 55000, 4, False, True, 95, 12),
        ("5", "IT Park Condo with Pool", "condo", "Cebu", "Cebu City", 32000, 1, True, True, 120, 4),
        ("6", "Lahug Townhouse", "townhouse", "Cebu City", "Cebu City", 40000, 3, False, False, 60, 8),
        ("7", "Gated Village Home in Davao", "village", "Davao", "Davao City", 30000, 3, False, False, 44, 6),
        ("8", "Pine View Apartment", "apartment", "Baguio", "Baguio City", 18000, 2, True, False, 77, 2),
        ("9", "Beachfront Villa Station 2", "villa", "Boracay", "Malay", 120000, 4, True, True, 300, 1),
        ("10", "Dumaguete Garden Cottage", "house", "Negros Oriental", "Dumaguete", 15000, 2, False, False, 20, 9),
    ]
    payloads = []
    for (pid, title, ptype, region, city, price, bedrooms, furnished, featured, views, age) in rows:
        payloads.append({
            "id": pid,
            "title": title,
            "description": f"{title}. Contact the owner for a viewing in {city}.",
            "type": ptype,
            "region": region,
            "city": city,
            "price": price,
            "currency": "PHP",
            "bedrooms": bedrooms,
            "bathrooms": max(1, bedrooms - 1),
            "furnished": furnished,
            "amenities": ["wifi", "parking"] + (["pool"] if "Pool" in title else []),
            "featured": featured,
            "viewCount": views,
            "createdAt": _days_ago(now, age),
            "updatedAt": _days_ago(now, age / 2),
            "status": "active",
            "monthlyStay": {"available": ptype in ("condo", "apartment")},
        })
    return payloads


SAMPLE_PAYLOADS = {
    "properties": property_payloads,
    "jobs": job_payloads,
    "marketplace": marketplace_payloads,
}


def sample_snapshot(kind: str, now: Optional[datetime] = None) -> Tuple[Any, ...]:
    """Immutable snapshot of the bundled sample data for ``kind``."""
    return build_snapshot(kind, SAMPLE_PAYLOADS[kind](now))
