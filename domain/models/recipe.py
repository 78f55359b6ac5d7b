"""
Recipe and sharing reference models (seeded, read-only for end users).
"""

from sqlalchemy import JSON, Column, Integer, Text

from domain.models.database import Base


class Recipe(Base):
    """Recipe with a flat list of human-readable ingredient names"""

    __tablename__ = "recipes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    description = Column(Text, nullable=False)
    prep_time = Column(Integer, nullable=False)  # minutes
    image_url = Column(Text)
    ingredients = Column(JSON, nullable=False, default=list)
    instructions = Column(Text, nullable=False)
    rating = Column(Integer)  # 0..50, one implied decimal


class FoodBank(Base):
    """Food bank accepting donations"""

    __tablename__ = "food_banks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    distance = Column(Integer, nullable=False)  # miles x 10
    open_hours = Column(Text, nullable=False)
    description = Column(Text, nullable=False)


class NearbyUser(Base):
    """Neighbour available for food sharing"""

    __tablename__ = "nearby_users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(Text, nullable=False)
    distance = Column(Integer, nullable=False)  # miles x 10
    rating = Column(Integer, nullable=False)  # 0..50
    image_url = Column(Text)
