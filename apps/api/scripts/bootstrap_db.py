"""Create database schema and seed sample properties for development."""
from __future__ import annotations

import asyncio
from datetime import datetime, timedelta, timezone

from app.db.session import dispose_engine, get_engine, get_session_factory
from app.models.base import Base
from app.models.property import Property

PROPERTIES = [
	{
		"id": "prop-lakeview-condo",
		"title": "Lakeview Condo",
		"location": "Lake City",
		"price": 250_000,
		"status": "for-sale",
		"description": "2BR condo with a balcony over the water.",
		"type": "condo",
		"bedrooms": 2,
		"bathrooms": 1,
		"size": 92.5,
	},
	{
		"id": "prop-maple-house",
		"title": "Maple Street Family Home",
		"location": "Springfield",
		"price": 410_000,
		"status": "for-sale",
		"description": "Detached house with a garden and double garage.",
		"type": "house",
		"bedrooms": 4,
		"bathrooms": 3,
		"size": 210.0,
	},
	{
		"id": "prop-harbour-studio",
		"title": "Harbour Studio",
		"location": "Port Town",
		"price": 1_450,
		"status": "for-rent",
		"description": None,
		"type": "apartment",
		"bedrooms": 0,
		"bathrooms": 1,
		"size": 38.0,
	},
]


async def create_schema() -> None:
	"""Create the database schema if it does not already exist."""

	async with get_engine().begin() as conn:
		await conn.run_sync(Base.metadata.create_all)


async def seed_properties() -> None:
	"""Insert or update demo properties."""

	now = datetime.now(timezone.utc)
	async with get_session_factory()() as session:
		async with session.begin():
			for offset, data in enumerate(PROPERTIES):
				fields = {key: value for key, value in data.items() if key != "id"}
				record = await session.get(Property, data["id"])
				if record is None:
					session.add(
						Property(
							id=data["id"],
							created_at=now - timedelta(minutes=offset),
							**fields,
						)
					)
				else:
					for key, value in fields.items():
						setattr(record, key, value)


async def main() -> None:
	try:
		await create_schema()
		await seed_properties()
	finally:
		await dispose_engine()
	print("Database schema ensured and demo properties seeded.")


if __name__ == "__main__":
	asyncio.run(main())
