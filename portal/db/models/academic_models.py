# /portal/db/models/academic_models.py

"""
SQLAlchemy models for the academic catalogue: a Program contains Majors, a
Major contains Sections, and Courses are offered to Sections through
course requests.
"""

from sqlalchemy import Column, ForeignKey, Integer, String
from sqlalchemy.orm import relationship

from ..base_class import Base


class Program(Base):
    __tablename__ = "programs"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)

    majors = relationship("Major", back_populates="program", cascade="all, delete-orphan")


class Major(Base):
    __tablename__ = "majors"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    program_id = Column(Integer, ForeignKey("programs.id"), nullable=False, index=True)

    program = relationship("Program", back_populates="majors")
    sections = relationship("Section", back_populates="major", cascade="all, delete-orphan")


class Section(Base):
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    semester = Column(Integer, nullable=False, default=1)
    major_id = Column(Integer, ForeignKey("majors.id"), nullable=False, index=True)

    major = relationship("Major", back_populates="sections")
    students = relationship("Student", back_populates="section")


class Course(Base):
    __tablename__ = "courses"

    id = Column(Integer, primary_key=True, index=True)
    code = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False)
    credit_hours = Column(Integer, nullable=False, default=3)
