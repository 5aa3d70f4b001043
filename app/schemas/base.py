"""
Shared pydantic base for camelCase wire payloads
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """snake_case attributes, camelCase JSON keys"""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
