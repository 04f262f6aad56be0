# /portal/models/academic_model.py

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class Program(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str


class Major(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    program_id: int


class Section(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    semester: int
    major_id: int


class Course(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    code: str
    name: str
    credit_hours: int


# --- List envelopes, matching the `{<collection>: [...]}` response shape ---

class ProgramList(BaseModel):
    programs: List[Program] = Field(default_factory=list)


class MajorList(BaseModel):
    majors: List[Major] = Field(default_factory=list)


class SectionList(BaseModel):
    sections: List[Section] = Field(default_factory=list)
