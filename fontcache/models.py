from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_PAGE_SIZE

class FontInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    path: str
    family: str
    style: str

# Tool input validation models
class GetSystemFontsRequest(BaseModel):
    pass  # No parameters needed

class GetFontCountRequest(BaseModel):
    pass  # No parameters needed

class GetChangelogRequest(BaseModel):
    pass  # No parameters needed

class GetPaginatedFontsRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    page: int = Field(..., ge=0, description="Zero-based page index")
    page_size: int = Field(
        DEFAULT_PAGE_SIZE, ge=0, alias="pageSize", description="Number of fonts per page"
    )
