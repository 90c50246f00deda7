"""Seed a verified demo user with one address."""

from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from app import create_app
from models import db
from models.address import Address
from models.user import User

DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "DemoPass123"
DEMO_ADDRESS = {
    "city_name": "Istanbul",
    "county_name": "Kadikoy",
    "district_name": "Moda",
    "address_text": "Demo Street 1",
}


def main() -> None:
    app = create_app()
    with app.app_context():
        user = User.query.filter_by(email=DEMO_EMAIL).first()
        if user is None:
            address = Address(**DEMO_ADDRESS)
            user = User(
                email=DEMO_EMAIL,
                first_name="Demo",
                last_name="User",
                addresses=[address],
                default_address=address,
            )
            db.session.add(user)
            action = "created"
        else:
            action = "updated"
        user.set_password(DEMO_PASSWORD)
        user.mark_verified()
        db.session.commit()
        print(f"Demo user {action}: {DEMO_EMAIL}")


if __name__ == "__main__":
    main()
