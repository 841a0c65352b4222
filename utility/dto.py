from typing import List, Optional

from pydantic import BaseModel


class TranslateRequest(BaseModel):
    # absent fields are rejected by the router (400)
    text: Optional[str] = None
    sourceLanguage: Optional[str] = None  # e.g. "tr"
    targetLanguage: Optional[str] = None  # e.g. "en"


class TranslateResponse(BaseModel):
    translatedText: str
    sourceLanguage: Optional[str] = None
    targetLanguage: Optional[str] = None
    originalText: Optional[str] = None
    message: Optional[str] = None
    needsMoreText: Optional[bool] = None
    isShortText: Optional[bool] = None


class ErrorResponse(BaseModel):
    error: str


class QualityRequest(BaseModel):
    originalText: str
    translatedText: str
    sourceLanguage: str
    targetLanguage: str
    needsMoreText: bool = False
    isShortText: bool = False


class QualityResponse(BaseModel):
    score: Optional[int] = None
    feedback: List[str] = []


class LanguageInfo(BaseModel):
    code: str
    name: str
    flag: str
