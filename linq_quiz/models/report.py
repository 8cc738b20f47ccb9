"""Report output models"""
from typing import Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FamilySummary(BaseModel):
    """Statistic entry for a single family"""
    model_config = ConfigDict(
        frozen=True,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "FamilyID": 2,
                "NumberOfFamilyMembers": 2,
                "AverageAge": 15.0
            }
        }
    )

    family_id: int = Field(..., alias="FamilyID")
    number_of_family_members: int = Field(..., alias="NumberOfFamilyMembers", ge=0)
    average_age: float = Field(..., alias="AverageAge", description="0 for families without members")


class LetterOccurrence(BaseModel):
    """Number of occurrences of one letter in a text"""
    model_config = ConfigDict(frozen=True)

    letter: str = Field(..., min_length=1, max_length=1)
    number_of_occurrences: int = Field(..., ge=1)

    @field_validator('letter')
    @classmethod
    def validate_letter(cls, v):
        """Only uppercase A-Z is a valid letter"""
        if not ('A' <= v <= 'Z'):
            raise ValueError(f"letter must be an uppercase A-Z character (got {v!r})")
        return v

    def as_tuple(self) -> Tuple[str, int]:
        return self.letter, self.number_of_occurrences
