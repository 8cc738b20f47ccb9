"""Data models for family records"""
from typing import List
from pydantic import BaseModel, ConfigDict, Field


class Person(BaseModel):
    """Family member"""
    model_config = ConfigDict(populate_by_name=True)

    age: int = Field(..., alias="Age", description="Age in years, not range checked")


class Family(BaseModel):
    """Family with its members"""
    model_config = ConfigDict(populate_by_name=True)

    id: int = Field(..., alias="ID", description="Family identifier")
    persons: List[Person] = Field(default_factory=list, alias="Persons")
