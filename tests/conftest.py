import pytest
import sys
from pathlib import Path

# Add src to sys.path so we can import quiz_toolkit
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())


# Common test fixtures
@pytest.fixture
def cq_text() -> str:
    """Two English CQ questions sharing a subject, with answers."""
    return "\n".join([
        "[Subject: Physics]",
        "[Chapter: Light]",
        "[Board: D.B.-24]",
        "Question 1",
        "A bar is placed in front of a convex lens.",
        "[There is a picture]",
        "a. What is a lens? (1)",
        "b. What is focal length? (2)",
        "c. Find the image distance. (3)",
        'd. "If the bar is placed at F..." Explain with ray diagram. (4)',
        "Answer:",
        "a. A lens is a transparent medium.",
        "b. The distance from the optical centre to the focus.",
        "c. Using the lens formula,",
        "v = 30 cm.",
        "d. No image is formed.",
        "",
        "Question 2",
        "A car accelerates uniformly.",
        "a. What is velocity? (1)",
        "b. Define acceleration. (2)",
    ])


@pytest.fixture
def bengali_cq_text() -> str:
    """A Bengali CQ question with Bengali labels, digits and answer marker."""
    return "\n".join([
        "[বিষয়: পদার্থবিজ্ঞান]",
        "প্রশ্ন ১",
        "একটি উত্তল লেন্সের সামনে একটি দণ্ড রাখা হলো।",
        "ক. লেন্স কী? (১)",
        "খ. ফোকাস দূরত্ব বলতে কী বোঝায়? (২)",
        "গ. প্রতিবিম্বের দূরত্ব নির্ণয় করো। (৩)",
        "উত্তর:",
        "ক. লেন্স একটি স্বচ্ছ মাধ্যম।",
        "খ. আলোক কেন্দ্র থেকে প্রধান ফোকাস পর্যন্ত দূরত্ব।",
    ])


@pytest.fixture
def mcq_text() -> str:
    """MCQ block in the lettered-option format with answers and explanations."""
    return "\n".join([
        "[Subject: Chemistry]",
        "1. Which gas is most abundant in air?",
        "a) Oxygen",
        "b) Nitrogen",
        "c) Argon",
        "d) Carbon dioxide",
        "Correct: b",
        "Explanation: Nitrogen makes up about 78% of air.",
        "",
        "২. পানির রাসায়নিক সংকেত কোনটি?",
        "ক) H2O",
        "খ) CO2",
        "গ) O2",
        "ঘ) NaCl",
        "সঠিক: ক",
        "ব্যাখ্যা:",
        "পানি হাইড্রোজেন ও অক্সিজেন দিয়ে তৈরি।",
    ])
