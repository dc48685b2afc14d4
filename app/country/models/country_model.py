from sqlalchemy import Column, Integer, String, LargeBinary
from sqlalchemy.orm import relationship
from app.core.database import Base

class Country(Base):
    __tablename__ = "country"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)
    flag_blob = Column(LargeBinary)

    competitions = relationship("Competition", back_populates="country")
