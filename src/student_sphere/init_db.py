"""Create all tables directly from the ORM metadata (development databases)."""

from student_sphere.db.session import create_tables


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


if __name__ == "__main__":
    init_db()
    print("Database initialized.")
