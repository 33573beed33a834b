import json
import httpx
from typing import Dict, Iterable, List, Optional, Tuple
from pydantic import ValidationError
from core.config import settings
from core.logger import logger
from models.quiz import Question
from models.result import AIAnalysisReport
from models.session import UserAnswer

REPORT_SCHEMA = {
    "type": "OBJECT",
    "properties": {
        "strengths": {"type": "ARRAY", "items": {"type": "STRING"}},
        "weaknesses": {"type": "ARRAY", "items": {"type": "STRING"}},
        "patterns": {"type": "ARRAY", "items": {"type": "STRING"}},
        "timeManagement": {"type": "STRING"},
        "actionPlan": {"type": "ARRAY", "items": {"type": "STRING"}},
        "motivationalMessage": {"type": "STRING"},
    },
    "required": ["strengths", "weaknesses", "patterns", "timeManagement", "actionPlan", "motivationalMessage"],
}


def build_performance_data(questions: Iterable[Question], answers: Iterable[UserAnswer]) -> List[Dict]:
    """One entry per recorded answer: question text, category, correctness and time taken."""
    by_id = {q.id: q for q in questions}
    data = []
    for answer in answers:
        question = by_id.get(answer.question_id)
        data.append({
            "question": question.question if question else None,
            "category": question.category if question else None,
            "isCorrect": question is not None and answer.selected_option == question.correct_answer,
            "timeTaken": answer.time_taken,
        })
    return data


class AIService:
    """Best-effort performance analysis using the Gemini API. Never raises into callers."""

    def __init__(self):
        self.api_key = settings.GEMINI_API_KEY
        self.model = settings.GEMINI_MODEL
        self.base_url = f"{settings.GEMINI_BASE_URL}/{self.model}:generateContent"

    async def analyze_performance(
        self, questions: Iterable[Question], answers: Iterable[UserAnswer]
    ) -> Tuple[Optional[AIAnalysisReport], Optional[str]]:
        """
        Ask the model for strengths, weaknesses and an action plan.

        Returns (report, None) on success or (None, error) on any failure.
        """
        if not self.api_key:
            return None, "GEMINI_API_KEY is not configured"

        performance = build_performance_data(questions, answers)
        prompt = f"Analyze these results for a Nepal exam student: {json.dumps(performance)}"

        try:
            async with httpx.AsyncClient(timeout=settings.AI_ANALYSIS_TIMEOUT_SECONDS) as client:
                response = await client.post(
                    self.base_url,
                    headers={
                        "x-goog-api-key": self.api_key,
                        "Content-Type": "application/json"
                    },
                    json={
                        "contents": [{"role": "user", "parts": [{"text": prompt}]}],
                        "generationConfig": {
                            "responseMimeType": "application/json",
                            "responseSchema": REPORT_SCHEMA
                        }
                    }
                )

            if response.status_code != 200:
                logger.error("Gemini API error", status=response.status_code, error=response.text)
                return None, f"API error: {response.status_code}"

            data = response.json()
            content = data["candidates"][0]["content"]["parts"][0]["text"]
            report = AIAnalysisReport.model_validate(json.loads(content or "{}"))
        except (httpx.HTTPError, KeyError, IndexError, TypeError, ValueError, ValidationError) as e:
            logger.error("AI analysis failed", error=str(e))
            return None, f"Analysis error: {str(e)}"

        logger.info("AI analysis completed", answers=len(performance))
        return report, None
