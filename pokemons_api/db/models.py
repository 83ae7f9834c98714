from sqlalchemy import Column, Integer, String, Text

from .db import Base


class Pokemon(Base):
    __tablename__ = "pokemons"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    name = Column(String(100), nullable=False)
    type = Column(String(100))
    color = Column(String(50))
    habitat = Column(String(50))
    height = Column(Integer)
    weight = Column(Integer)
    description = Column(Text)
