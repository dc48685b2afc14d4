from sqlalchemy import Column, Integer, String, LargeBinary, ForeignKey
from sqlalchemy.orm import relationship, deferred
from app.core.database import Base

class Competition(Base):
    __tablename__ = "competition"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    logo_blob = Column(LargeBinary)
    country_id = Column(Integer, ForeignKey("country.id"))
    # Installable archive, only loaded when explicitly requested
    file_blob = deferred(Column(LargeBinary))

    country = relationship("Country", back_populates="competitions")
