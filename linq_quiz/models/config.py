"""Configuration models"""
from pydantic import BaseModel, Field, field_validator

OUTPUT_FORMATS = ('json', 'csv')


class Config(BaseModel):
    """Command-line configuration"""
    output_format: str = Field(default='json', description="Rendering of results: json or csv")

    @field_validator('output_format', mode='before')
    @classmethod
    def parse_output_format(cls, v):
        """Normalize and check the output format"""
        if isinstance(v, str):
            v = v.strip().lower()
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of {', '.join(OUTPUT_FORMATS)}")
        return v
