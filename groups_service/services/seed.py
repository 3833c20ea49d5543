# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Seed data — the fixed collection a fresh session starts from.
"""

from datetime import datetime, timezone

from groups_service.models.domain import Group, Member

PLACEHOLDER_IMAGE = "/placeholder.svg?height=100&width=100"

SEED_GROUPS: list[dict] = [
    {
        "id": "1",
        "name": "Marketing Team",
        "description": "Team responsible for marketing campaigns and strategies",
        "status": "active",
        "rating": 4.5,
        "created_at": datetime(2023, 6, 15, tzinfo=timezone.utc),
        "members": [
            {"id": "m1", "name": "John Doe", "email": "john@example.com", "role": "leader"},
            {"id": "m2", "name": "Jane Smith", "email": "jane@example.com", "role": "member"},
            {"id": "m3", "name": "Alex Johnson", "email": "alex@example.com", "role": "member"},
        ],
    },
    {
        "id": "2",
        "name": "Development Team",
        "description": "Software engineers and developers",
        "status": "active",
        "rating": 4.8,
        "created_at": datetime(2023, 4, 10, tzinfo=timezone.utc),
        "members": [
            {"id": "m4", "name": "Sarah Williams", "email": "sarah@example.com", "role": "leader"},
            {"id": "m5", "name": "Mike Brown", "email": "mike@example.com", "role": "member"},
        ],
    },
    {
        "id": "3",
        "name": "Design Team",
        "description": "UI/UX designers and graphic artists",
        "status": "inactive",
        "rating": 3.7,
        "created_at": datetime(2023, 2, 5, tzinfo=timezone.utc),
        "members": [
            {"id": "m6", "name": "Emily Davis", "email": "emily@example.com", "role": "leader"},
            {"id": "m7", "name": "Chris Wilson", "email": "chris@example.com", "role": "member"},
            {"id": "m8", "name": "Taylor Moore", "email": "taylor@example.com", "role": "member"},
        ],
    },
    {
        "id": "4",
        "name": "Research Team",
        "description": "Market research and analysis",
        "status": "archived",
        "rating": 4.0,
        "created_at": datetime(2022, 12, 20, tzinfo=timezone.utc),
        "members": [
            {"id": "m9", "name": "Jordan Lee", "email": "jordan@example.com", "role": "leader"},
            {"id": "m10", "name": "Casey Kim", "email": "casey@example.com", "role": "member"},
        ],
    },
    {
        "id": "5",
        "name": "Customer Support",
        "description": "Customer service and support",
        "status": "pending",
        "rating": 3.5,
        "created_at": datetime(2023, 8, 1, tzinfo=timezone.utc),
        "members": [
            {"id": "m11", "name": "Riley Parker", "email": "riley@example.com", "role": "leader"},
            {"id": "m12", "name": "Morgan Taylor", "email": "morgan@example.com", "role": "member"},
            {"id": "m13", "name": "Jamie Garcia", "email": "jamie@example.com", "role": "member"},
        ],
    },
]


def seed_groups() -> tuple[Group, ...]:
    """Build a fresh copy of the seed collection."""
    return tuple(
        Group(
            **{k: v for k, v in sd.items() if k != "members"},
            image=PLACEHOLDER_IMAGE,
            members=tuple(Member(**m) for m in sd["members"]),
        )
        for sd in SEED_GROUPS
    )
