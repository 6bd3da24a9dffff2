import logging
import random
import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from faker import Faker
from sqlalchemy.orm import Session

from shared.core.database import PropertySessionLocal, property_engine, Base
from shared.core.exceptions import validate_payload

from .app.crud import properties_crud, tasks_crud
from .app.enum.properties_enum import PropertyStatus
from .app.enum.tasks_enum import TaskStatus, TaskType
from .app.models import Property, Task
from .app.schemas.properties_schemas import PropertyCreate
from .app.schemas.tasks_schemas import TaskCreate

logger = logging.getLogger(__name__)

SAMPLE_PROPERTIES = [
    {
        "name": "Sunset Apartments",
        "address": "123 Main Street, San Francisco, CA 94102",
        "ownerName": "John Smith",
        "monthlyRent": "2500.00",
        "status": PropertyStatus.OCCUPIED,
    },
    {
        "name": "Ocean View Villa",
        "address": "456 Beach Boulevard, Santa Monica, CA 90401",
        "ownerName": "Jane Doe",
        "monthlyRent": "3500.00",
        "status": PropertyStatus.VACANT,
    },
    {
        "name": "Mountain Lodge",
        "address": "789 Peak Drive, Denver, CO 80202",
        "ownerName": "Bob Johnson",
        "monthlyRent": "2000.00",
        "status": PropertyStatus.MAINTENANCE,
    },
    {
        "name": "Downtown Loft",
        "address": "321 City Center, New York, NY 10001",
        "ownerName": "Alice Williams",
        "monthlyRent": "4000.00",
        "status": PropertyStatus.OCCUPIED,
    },
    {
        "name": "Garden Cottage",
        "address": "654 Green Lane, Portland, OR 97201",
        "ownerName": "Charlie Brown",
        "monthlyRent": "1800.00",
        "status": PropertyStatus.VACANT,
    },
]

# (property name, description, type, assignee, status, due date)
SAMPLE_TASKS = [
    ("Sunset Apartments", "Deep clean all rooms and common areas", TaskType.CLEANING,
     "Maria Garcia", TaskStatus.PENDING, "2024-12-15"),
    ("Sunset Apartments", "Fix leaking faucet in master bathroom", TaskType.MAINTENANCE,
     "Mike Johnson", TaskStatus.IN_PROGRESS, "2024-12-10"),
    ("Ocean View Villa", "Annual safety inspection", TaskType.INSPECTION,
     "Sarah Williams", TaskStatus.PENDING, "2024-12-20"),
    ("Ocean View Villa", "Clean windows and balcony", TaskType.CLEANING,
     "Maria Garcia", TaskStatus.DONE, "2024-12-05"),
    ("Mountain Lodge", "Replace broken HVAC system", TaskType.MAINTENANCE,
     "Mike Johnson", TaskStatus.IN_PROGRESS, "2024-12-18"),
    ("Downtown Loft", "Quarterly property inspection", TaskType.INSPECTION,
     "Sarah Williams", TaskStatus.DONE, "2024-12-01"),
    ("Garden Cottage", "Paint exterior walls", TaskType.MAINTENANCE,
     "Mike Johnson", TaskStatus.PENDING, "2024-12-25"),
    ("Garden Cottage", "Deep clean before new tenant move-in", TaskType.CLEANING,
     "Maria Garcia", TaskStatus.PENDING, "2024-12-22"),
]


def seed_properties(db: Session) -> int:
    if db.query(Property).count() > 0:
        logger.info("Properties already seeded. Skipping...")
        return 0

    for payload in SAMPLE_PROPERTIES:
        properties_crud.create_property(db, validate_payload(PropertyCreate, payload))

    logger.info("Seeded %d properties", len(SAMPLE_PROPERTIES))
    return len(SAMPLE_PROPERTIES)


def seed_tasks(db: Session) -> int:
    if db.query(Task).count() > 0:
        logger.info("Tasks already seeded. Skipping...")
        return 0

    properties = {p.name: p for p in db.query(Property).all()}
    if not properties:
        logger.warning("No properties found. Please seed properties first.")
        return 0

    seeded = 0
    for property_name, description, task_type, assignee, task_status, due in SAMPLE_TASKS:
        owner = properties.get(property_name)
        if owner is None:
            logger.warning("Property %r not found, skipping task %r", property_name, description)
            continue
        task = validate_payload(TaskCreate, {
            "propertyId": owner.id,
            "description": description,
            "type": task_type,
            "assignedTo": assignee,
            "status": task_status,
            "dueDate": due,
        })
        tasks_crud.create_task(db, task)
        seeded += 1

    logger.info("Seeded %d tasks", seeded)
    return seeded


def seed_fake_data(db: Session, count: int, fake: Faker = None) -> int:
    """Insert ``count`` random properties, each with one or two tasks."""
    fake = fake or Faker()
    for _ in range(count):
        db_property = properties_crud.create_property(db, validate_payload(PropertyCreate, {
            "name": fake.company()[:100],
            "address": fake.address().replace("\n", ", ")[:200],
            "ownerName": fake.name()[:100],
            "monthlyRent": Decimal(random.randint(50000, 900000)) / 100,
            "status": random.choice(list(PropertyStatus)),
        }))

        for _ in range(random.randint(1, 2)):
            tasks_crud.create_task(db, validate_payload(TaskCreate, {
                "propertyId": db_property.id,
                "description": fake.sentence(nb_words=8)[:500],
                "type": random.choice(list(TaskType)),
                "assignedTo": fake.name()[:100],
                "status": random.choice(list(TaskStatus)),
                "dueDate": datetime.now(timezone.utc) + timedelta(days=random.randint(1, 60)),
            }))

    logger.info("Seeded %d fake properties", count)
    return count


def seed_data(db: Session) -> None:
    seed_properties(db)
    seed_tasks(db)


def rollback_data(db: Session) -> None:
    # tasks first, then their owners
    deleted_tasks = db.query(Task).delete()
    deleted_properties = db.query(Property).delete()
    db.commit()
    logger.info("Rolled back %d tasks and %d properties",
                deleted_tasks, deleted_properties)


def main(argv=None) -> int:
    logging.basicConfig(level=logging.INFO)
    args = sys.argv[1:] if argv is None else argv
    command = args[0] if args else "run"

    Base.metadata.create_all(bind=property_engine)
    db: Session = PropertySessionLocal()
    try:
        if command == "rollback":
            rollback_data(db)
        elif command == "fake":
            seed_fake_data(db, int(args[1]) if len(args) > 1 else 10)
        elif command == "run":
            seed_data(db)
        else:
            logger.error("Unknown command %r, expected run, rollback or fake", command)
            return 2
    finally:
        db.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
