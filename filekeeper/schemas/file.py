"""File API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class FileRecordResponse(BaseModel):
    """File record returned by POST /files and GET /files/{id}. Serializes camelCase keys."""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": 1,
                "originalName": "a.txt",
                "storedName": "1718000000000_a.txt",
                "contentType": "text/plain",
                "size": 5,
                "createdAt": "2024-06-10T06:13:20Z",
            }
        },
    )

    id: int
    original_name: str
    stored_name: str = Field(description="Key of the blob in the storage backend.")
    content_type: str
    size: int = Field(description="Size in bytes as reported by the client at upload.")
    created_at: datetime
