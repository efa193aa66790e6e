"""Property model for real estate listings"""
from sqlalchemy import Column, Integer, String, Numeric
from property_inventory.database import Base


class Property(Base):
    """Property model representing a priced real estate unit"""
    __tablename__ = "properties"

    # AUTOINCREMENT keeps SQLite from reusing ids of deleted rows
    id = Column(Integer, primary_key=True, autoincrement=True)

    location = Column(String(100), nullable=True)

    # Pricing
    square_meters = Column(Numeric(10, 2), nullable=True)
    price_per_square_meter = Column(Numeric(10, 2), nullable=True)
    total_price = Column(Numeric(20, 2), nullable=True)

    owner = Column(String(50), nullable=True)

    # Administrative divisions
    country = Column(String(50), nullable=True)
    region = Column(String(50), nullable=True)
    province = Column(String(50), nullable=True)
    district = Column(String(50), nullable=True)

    __table_args__ = (
        {"sqlite_autoincrement": True},
    )

    def __repr__(self) -> str:
        return f"<Property id={self.id} location={self.location!r} owner={self.owner!r}>"
