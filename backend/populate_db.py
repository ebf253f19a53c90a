import os
import random
import sys
from datetime import datetime, timedelta, timezone

# Add 'backend' folder to Python path
sys.path.append(os.path.abspath(os.path.dirname(__file__)))

# Database models and setup
from database import SessionLocal, init_db
from models.category import Category
from models.feedback import Feedback, FeedbackStatus
from services.bootstrap import seed_defaults

# Configuration
SAMPLE_FEEDBACK = int(os.getenv("SAMPLE_FEEDBACK", "50")) # Number of demo feedback rows
SAMPLE_DAYS = 30 # Spread creation dates over the last N days
# End Configuration

SUBMITTERS = [
    ("Alice Johnson", "alice@example.com"),
    ("Bob Smith", "bob@example.com"),
    ("Clara White", "clara@example.com"),
    ("David Green", "david@example.com"),
]

COMMENTS = [
    "Works as expected.",
    "The checkout page keeps timing out.",
    "Would love a dark mode.",
    "Search results are not relevant.",
    "Great support experience.",
]


def populate(sample_feedback: int = SAMPLE_FEEDBACK) -> None:
    """Creates default accounts and categories, then adds demo feedback."""
    init_db()
    session = SessionLocal()
    try:
        created = seed_defaults(session)
        print(f"Accounts created: {created['principals']}, categories created: {created['categories']}")

        categories = session.query(Category).all()
        now = datetime.now(timezone.utc)

        print(f"Inserting {sample_feedback} feedback records...")
        for _ in range(sample_feedback):
            name, email = random.choice(SUBMITTERS)
            session.add(Feedback(
                user_id=email,
                product_id=f"P-{random.randint(1, 20):03d}",
                rating=random.randint(1, 5),
                comment=random.choice(COMMENTS),
                submitter_name=name,
                submitter_email=email,
                status=random.choice(list(FeedbackStatus)),
                category=random.choice(categories + [None]),
                created_at=now - timedelta(days=random.uniform(0, SAMPLE_DAYS)),
            ))
        session.commit()
        print("Done.")
    finally:
        session.close()


if __name__ == "__main__":
    populate()
