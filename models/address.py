"""Address model definition."""

from datetime import datetime

from . import db


# JSON field name -> column name
ADDRESS_FIELDS = {
    "cityName": "city_name",
    "countyName": "county_name",
    "districtName": "district_name",
    "addressText": "address_text",
}


class Address(db.Model):
    """A postal address. Ownership lives on the user side only."""

    __tablename__ = "addresses"

    id = db.Column(db.Integer, primary_key=True)
    city_name = db.Column(db.String(120), nullable=False)
    county_name = db.Column(db.String(120), nullable=False)
    district_name = db.Column(db.String(120), nullable=False)
    address_text = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, nullable=False, default=datetime.utcnow)
    updated_at = db.Column(
        db.DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow
    )

    def __repr__(self) -> str:
        return f"<Address id={self.id} city={self.city_name}>"

    def to_dict(self) -> dict:
        """Serialize the address into a dictionary."""

        return {
            "id": self.id,
            "cityName": self.city_name,
            "countyName": self.county_name,
            "districtName": self.district_name,
            "addressText": self.address_text,
            "createdAt": self.created_at.isoformat() if self.created_at else None,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
