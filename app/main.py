from __future__ import annotations

from typing import List

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from utility.AsyncExternalLLM import AsyncExternalLLM
from utility.dto import LanguageInfo, QualityRequest, QualityResponse, TranslateRequest
from utility.languages import list_languages
from utility.logging_config import setup_logger
from utility.quality_scorer import HeuristicQualityScorer, assess_for_display
from utility.settings import Settings
from utility.translation_router import TranslationRouter

logger = setup_logger(__name__)

# -----------------------------
# FastAPI app
# -----------------------------
app = FastAPI()

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)


# -----------------------------
# Startup
# -----------------------------
@app.on_event("startup")
async def startup():
    settings = Settings.from_env()
    app.state.settings = settings

    provider = None
    if settings.openrouter_api_key:
        provider = AsyncExternalLLM.from_settings(settings)
    else:
        logger.warning("OPENROUTER_API_KEY is not set, model-backed translation is disabled")
    app.state.router = TranslationRouter(
        provider=provider,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
        strict_languages=settings.strict_languages,
    )
    app.state.scorer = HeuristicQualityScorer()

    logger.info("Server started (model=%s, strict_languages=%s)", settings.model, settings.strict_languages)


# -----------------------------
# HTTP Endpoints
# -----------------------------
@app.post("/api/translate")
async def translate(req: TranslateRequest):
    result = await app.state.router.route(req.text, req.sourceLanguage, req.targetLanguage)
    return JSONResponse(
        status_code=result.status_code,
        content=result.body.model_dump(exclude_none=True),
    )


@app.post("/api/quality", response_model=QualityResponse)
async def quality(req: QualityRequest):
    assessment = assess_for_display(
        app.state.scorer,
        original=req.originalText,
        translation=req.translatedText,
        source_lang=req.sourceLanguage,
        target_lang=req.targetLanguage,
        needs_more_text=req.needsMoreText,
        is_short_text=req.isShortText,
    )
    return QualityResponse(score=assessment.score, feedback=assessment.feedback)


@app.get("/api/languages", response_model=List[LanguageInfo])
async def languages():
    return list_languages()


if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(app, host=settings.host, port=settings.port)
