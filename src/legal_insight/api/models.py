from typing import Optional
from pydantic import BaseModel, Field, field_validator

from legal_insight.api import config


class ExtractRequest(BaseModel):
    text: str = Field(min_length=config.MIN_DOCUMENT_LENGTH, max_length=config.MAX_TEXT_LENGTH)


class LawsRequest(BaseModel):
    text: str = Field(min_length=1, max_length=config.MAX_TEXT_LENGTH)


class BailRequest(BaseModel):
    text: str = Field(min_length=1, max_length=config.MAX_TEXT_LENGTH)
    format: Optional[str] = None

    @field_validator("text")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("text must not be blank")
        return v

    @field_validator("format")
    @classmethod
    def _known_format(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and v not in config.RESPONSE_FORMATS:
            raise ValueError(f"format must be one of {', '.join(config.RESPONSE_FORMATS)}")
        return v

    def response_format(self) -> str:
        return self.format or config.RESPONSE_FORMAT
