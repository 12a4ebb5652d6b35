"""API request models."""

from pydantic import BaseModel, Field


class ValidateRequest(BaseModel):
    """Request to validate one SVG document."""

    svg: str = Field(
        ...,
        description="SVG document as markup text",
        examples=[
            '<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100">'
            '<rect x="10" y="10" width="80" height="80" fill="#FF0000"/></svg>'
        ],
    )
