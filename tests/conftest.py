"""
Pytest configuration and fixtures for quiz engine tests.
"""
import sys
import os
import random
import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.quiz import Category, Question
from models.session import QuizSettings


@pytest.fixture
def sample_questions():
    """Four banking questions, 30 seconds each"""
    return [
        Question(id="q1", category="banking", sub_topic="monetary_policy",
                 question="Who issues currency notes in Nepal?",
                 options=["Nepal Rastra Bank", "Ministry of Finance", "Nepal Bank Ltd", "Parliament"],
                 correct_answer=0, time_limit=30),
        Question(id="q2", category="banking", sub_topic="monetary_policy",
                 question="CRR stands for?",
                 options=["Credit Reserve Ratio", "Cash Reserve Ratio", "Capital Risk Ratio"],
                 correct_answer=1, time_limit=30, hint="It is about cash."),
        Question(id="q3", category="banking", sub_topic="accounting",
                 question="A debit balance in the cash book means?",
                 options=["Overdraft", "Cash in hand", "Loss"],
                 correct_answer=1, time_limit=30),
        Question(id="q4", category="banking", sub_topic="accounting",
                 question="Which statement shows financial position?",
                 options=["Balance sheet", "Cash flow", "Trial balance", "Ledger"],
                 correct_answer=0, time_limit=30),
    ]


@pytest.fixture
def catalog(sample_questions):
    """Sample questions plus two general knowledge questions"""
    return sample_questions + [
        Question(id="g1", category="gk", question="Highest peak?",
                 options=["Everest", "K2"], correct_answer=0),
        Question(id="g2", category="gk", sub_topic="geography", question="Longest river of Nepal?",
                 options=["Karnali", "Koshi", "Gandaki"], correct_answer=0, time_limit=45),
    ]


@pytest.fixture
def categories():
    return [
        Category(id="banking", name="Banking", max_questions=3),
        Category(id="gk", name="General Knowledge"),
    ]


@pytest.fixture
def timed_settings():
    return QuizSettings(questions_per_quiz=10, show_timer=True)


@pytest.fixture
def rng():
    return random.Random(42)
