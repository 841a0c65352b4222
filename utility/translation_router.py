from dataclasses import dataclass
from typing import Optional, Union

from utility.AsyncExternalLLM import TranslationProvider
from utility.dto import ErrorResponse, TranslateResponse
from utility.languages import is_supported, lookup_short_word
from utility.logging_config import setup_logger
from utility.prompt_manager import PromptManager

logger = setup_logger(__name__)

MIN_TEXT_LENGTH = 2
MAX_SHORT_TEXT_LENGTH = 3

MSG_MISSING_PARAMETERS = "missing parameters"
MSG_UNSUPPORTED_LANGUAGE = "unsupported language"
MSG_TRANSLATION_FAILED = "an error occurred during translation"
MSG_TOO_SHORT = "Text too short, no translation performed"
MSG_SHORT_TEXT = "Short text"
MSG_SAME_LANGUAGE = "Source and target language are the same"


# Whitespace and line terminators removed by a browser String.trim()
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680\u2028\u2029\u202f\u205f\u3000\ufeff"
    + "".join(chr(c) for c in range(0x2000, 0x200b))
)


def trim_text(text: str) -> str:
    return text.strip(TRIM_CHARS)


def text_length(text: str) -> int:
    """Length in UTF-16 code units, as browsers count it ('👋' is 2)."""
    return len(text.encode("utf-16-le")) // 2


# -----------------------------
# Errors
# -----------------------------
class TranslationError(Exception):
    status_code = 500
    public_message = MSG_TRANSLATION_FAILED


class BadRequest(TranslationError):
    status_code = 400

    def __init__(self, message: str = MSG_MISSING_PARAMETERS):
        super().__init__(message)
        self.public_message = message


class UpstreamEmpty(TranslationError):
    """Provider answered without usable text."""


class UpstreamFailure(TranslationError):
    """Provider raised (network, HTTP status, malformed body)."""


@dataclass
class RouteResult:
    status_code: int
    body: Union[TranslateResponse, ErrorResponse]


class TranslationRouter:
    """
    Decides per request whether the external model is needed at all.

    Rules, first match wins:
        1. missing field            -> 400
        2. trimmed length < 2       -> echo, needsMoreText
        3. trimmed length 2..3      -> short-word table, isShortText
        4. source == target         -> echo
        5. otherwise                -> provider call
    """

    def __init__(
        self,
        provider: Optional[TranslationProvider],
        temperature: float = 0.3,
        max_tokens: int = 1000,
        strict_languages: bool = False,
    ):
        self.provider = provider
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.strict_languages = strict_languages

    async def route(self, text: str, source_lang: str, target_lang: str) -> RouteResult:
        try:
            response = await self._decide(text, source_lang, target_lang)
        except TranslationError as e:
            return RouteResult(status_code=e.status_code, body=ErrorResponse(error=e.public_message))
        return RouteResult(status_code=200, body=response)

    async def _decide(self, text: str, source_lang: str, target_lang: str) -> TranslateResponse:
        if not text or not source_lang or not target_lang:
            logger.info("Missing parameters")
            raise BadRequest(MSG_MISSING_PARAMETERS)

        if self.strict_languages and not (is_supported(source_lang) and is_supported(target_lang)):
            logger.info("Unsupported language pair %s -> %s", source_lang, target_lang)
            raise BadRequest(MSG_UNSUPPORTED_LANGUAGE)

        trimmed = trim_text(text)
        length = text_length(trimmed)

        if length < MIN_TEXT_LENGTH:
            logger.info("Text too short (%d chars), skipping translation", length)
            return TranslateResponse(translatedText=text, message=MSG_TOO_SHORT, needsMoreText=True)

        if length <= MAX_SHORT_TEXT_LENGTH:
            # Out-of-table words come back untranslated
            translation = lookup_short_word(trimmed, target_lang)
            logger.info("Short text %r -> %s (%s)", trimmed, target_lang, "table" if translation else "echo")
            return TranslateResponse(
                translatedText=translation or trimmed,
                message=MSG_SHORT_TEXT,
                isShortText=True,
            )

        if source_lang == target_lang:
            logger.info("Same source and target language (%s), no translation needed", source_lang)
            return TranslateResponse(translatedText=text, message=MSG_SAME_LANGUAGE)

        translated = await self._translate_with_model(text, source_lang, target_lang)
        return TranslateResponse(
            translatedText=translated,
            sourceLanguage=source_lang,
            targetLanguage=target_lang,
            originalText=text,
        )

    async def _translate_with_model(self, text: str, source_lang: str, target_lang: str) -> str:
        system_instruction, user_message = PromptManager.build_prompt(text, source_lang, target_lang)
        logger.info("Calling provider %s -> %s (template v%s)", source_lang, target_lang, PromptManager.TEMPLATE.version)
        logger.debug("Text: %r", text)

        if self.provider is None:
            logger.error("No translation provider configured (OPENROUTER_API_KEY unset)")
            raise UpstreamFailure("no provider configured")

        try:
            completion = await self.provider.complete(
                system_instruction,
                user_message,
                temperature=self.temperature,
                max_output_tokens=self.max_tokens,
            )
        except Exception as e:
            logger.error("Translation provider failed: %s: %s", type(e).__name__, e)
            raise UpstreamFailure(str(e)) from e

        translated = (completion or "").strip()
        if not translated:
            logger.error("Translation provider returned an empty result")
            raise UpstreamEmpty("empty completion")

        logger.info("Translation succeeded (%d chars)", len(translated))
        return translated
