"""Built-in question catalogs and the custom catalog loader."""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from brightmatch.assessments.config import AssessmentConfig, get_assessment_config
from brightmatch.assessments.models import Dichotomy, Question


def _iq(qid: str, text: str, options: tuple[str, ...], correct: int) -> Question:
    return Question(id=qid, text=text, options=options, correct_answer_index=correct)


def _eq(qid: str, text: str, options: tuple[str, ...]) -> Question:
    return Question(id=qid, text=text, options=options)


def _type(qid: int, text: str, first: str, second: str, axis: Dichotomy) -> Question:
    return Question(id=str(qid), text=text, options=(first, second), dimension=axis)


IQ_QUESTIONS: tuple[Question, ...] = (
    _iq("1", "What comes next in the sequence: 2, 6, 12, 20, 30, ?",
        ("42", "40", "38", "44"), 0),
    _iq("2", "If all Bloops are Razzles and all Razzles are Lazzles, then all "
        "Bloops are definitely Lazzles.", ("True", "False"), 0),
    _iq("3", "Which number should replace the question mark: 3, 7, 15, 31, ?",
        ("63", "47", "55", "62"), 0),
    _iq("4", "A car travels 60 miles in 1 hour. How many miles will it travel "
        "in 45 minutes?", ("45", "50", "40", "55"), 0),
    _iq("5", "Which word does not belong: Apple, Banana, Carrot, Orange",
        ("Apple", "Banana", "Carrot", "Orange"), 2),
    _iq("6", "If 5 machines make 5 widgets in 5 minutes, how long would it take "
        "100 machines to make 100 widgets?",
        ("5 minutes", "100 minutes", "20 minutes", "1 minute"), 0),
    _iq("7", "What is the next letter in this sequence: A, D, G, J, ?",
        ("M", "K", "L", "N"), 0),
    _iq("8", "Which number is missing: 1, 1, 2, 3, 5, 8, ?",
        ("11", "13", "15", "10"), 1),
    _iq("9", 'If you rearrange the letters "CIFAIPC", you would have the name '
        "of a(n):", ("Ocean", "Country", "City", "Animal"), 0),
    _iq("10", "What comes next: 1, 4, 9, 16, 25, ?",
        ("36", "30", "35", "49"), 0),
)

# Options are ordered so that a higher index shows more emotional intelligence.
EQ_QUESTIONS: tuple[Question, ...] = (
    _eq("1", "When a friend is upset, what is your first instinct?", (
        "Give practical advice to solve the problem",
        "Change the subject to cheer them up",
        "Share a similar experience you had",
        "Listen and offer emotional support",
    )),
    _eq("2", "How do you typically handle stress?", (
        "Keep busy to distract myself",
        "Analyze the situation logically",
        "Talk it out with friends or family",
        "Take time to process emotions before reacting",
    )),
    _eq("3", "In a group setting, you usually:", (
        "Take charge of the situation",
        "Focus on the task at hand",
        "Try to keep the mood light",
        "Notice how everyone is feeling",
    )),
    _eq("4", "When someone disagrees with you, you:", (
        "Avoid the confrontation",
        "Stand firm in your position",
        "Find a compromise quickly",
        "Try to understand their perspective",
    )),
    _eq("5", "How do you recognize your own emotions?", (
        "Others point them out to me",
        "I notice physical sensations first",
        "I analyze my thoughts and behavior",
        "I regularly check in with myself",
    )),
    _eq("6", "When you make a mistake that affects others, you:", (
        "Explain why it happened",
        "Try to fix it quickly",
        "Apologize and learn from it",
        "Take full responsibility and make amends",
    )),
    _eq("7", "How do you respond when someone is angry with you?", (
        "Get defensive and argue back",
        "Walk away until they calm down",
        "Try to understand why they're upset",
        "Stay calm and listen to their concerns",
    )),
    _eq("8", "When working in a team, you:", (
        "Focus on getting the job done",
        "Make sure everyone contributes equally",
        "Help resolve conflicts between members",
        "Ensure everyone feels heard and valued",
    )),
    _eq("9", "How do you handle criticism?", (
        "Take it personally and feel hurt",
        "Dismiss it if you disagree",
        "Consider if there's truth in it",
        "Thank them and reflect on the feedback",
    )),
    _eq("10", "When you're feeling overwhelmed, you:", (
        "Push through and ignore the feeling",
        "Complain to others about your situation",
        "Take a break and practice self-care",
        "Identify the source and create a plan",
    )),
)

_EI, _SN, _TF, _JP = Dichotomy.EI, Dichotomy.SN, Dichotomy.TF, Dichotomy.JP

TYPE_QUESTIONS: tuple[Question, ...] = (
    _type(1, "At a party, you would rather:",
          "Meet new people and socialize with many",
          "Have deep conversations with a few close friends", _EI),
    _type(2, "You feel more energized when:",
          "Being around other people", "Spending time alone", _EI),
    _type(3, "When making decisions, you prefer to:",
          "Talk it through with others", "Think it through privately first", _EI),
    _type(4, "In group settings, you typically:",
          "Speak up and share your thoughts readily",
          "Listen more and speak when you have something important to say", _EI),
    _type(5, "You prefer to:",
          "Have a wide circle of acquaintances",
          "Have a small circle of close friends", _EI),
    _type(6, "After a long day, you prefer to:",
          "Go out and be around people", "Stay home and relax quietly", _EI),
    _type(7, "When working on a project, you prefer to:",
          "Collaborate with a team", "Work independently", _EI),
    _type(8, "You tend to:", "Think out loud", "Think before speaking", _EI),
    _type(9, "At work or school, you:",
          "Enjoy being the center of attention",
          "Prefer to work behind the scenes", _EI),
    _type(10, "When learning something new, you prefer:",
          "Group discussions and activities", "Reading and individual study", _EI),
    _type(11, "You tend to focus on:",
          "Facts and details", "Possibilities and big picture", _SN),
    _type(12, "When learning something new, you prefer:",
          "Step-by-step instructions",
          "Understanding the overall concept first", _SN),
    _type(13, "You're more interested in:",
          "What is actually happening", "What could potentially happen", _SN),
    _type(14, "You trust:",
          "Experience and proven methods", "Inspiration and new approaches", _SN),
    _type(15, "You prefer work that involves:",
          "Practical applications", "Theoretical concepts", _SN),
    _type(16, "When reading, you prefer:",
          "Factual information and how-to guides",
          "Fiction and imaginative stories", _SN),
    _type(17, "You are more likely to:",
          "Notice specific details in your environment",
          "See patterns and connections", _SN),
    _type(18, "When solving problems, you:",
          "Use tried and tested methods", "Look for innovative solutions", _SN),
    _type(19, "You prefer to:",
          "Focus on the present moment", "Think about future possibilities", _SN),
    _type(20, "Your memory tends to focus on:",
          "Specific facts and details", "General impressions and meanings", _SN),
    _type(21, "When making decisions, you prioritize:",
          "Logic and objective analysis", "Values and how it affects people", _TF),
    _type(22, "You're more convinced by:",
          "Logical reasoning", "Emotional appeals", _TF),
    _type(23, "In conflicts, you tend to:",
          "Focus on finding the most logical solution",
          "Consider everyone's feelings and find harmony", _TF),
    _type(24, "You value:", "Fairness and justice", "Compassion and mercy", _TF),
    _type(25, "When giving feedback, you:",
          "Focus on what needs to be improved",
          "Consider how the person might feel", _TF),
    _type(26, "You prefer to be seen as:",
          "Competent and logical", "Caring and understanding", _TF),
    _type(27, "When analyzing a situation, you first consider:",
          "The facts and logical implications",
          "The people involved and their feelings", _TF),
    _type(28, "You are more motivated by:",
          "Achievement and competence", "Appreciation and harmony", _TF),
    _type(29, "In arguments, you:",
          "Focus on the logical points",
          "Try to understand different perspectives", _TF),
    _type(30, "You prefer criticism that is:",
          "Direct and honest", "Gentle and considerate", _TF),
    _type(31, "You prefer to:",
          "Plan things in advance", "Keep your options open", _JP),
    _type(32, "Your ideal weekend is:",
          "Planned with scheduled activities", "Spontaneous and flexible", _JP),
    _type(33, "You work best when:",
          "Following a clear schedule", "Working at your own pace", _JP),
    _type(34, "You prefer:",
          "Having things settled and decided",
          "Keeping things open for new information", _JP),
    _type(35, "When starting a project, you:",
          "Make a detailed plan first", "Jump in and figure it out as you go", _JP),
    _type(36, "Your workspace tends to be:",
          "Organized and tidy", "Flexible and adaptable", _JP),
    _type(37, "You prefer deadlines that are:",
          "Clear and firm", "Flexible and negotiable", _JP),
    _type(38, "When traveling, you prefer to:",
          "Have a detailed itinerary", "Go with the flow and explore", _JP),
    _type(39, "You feel more comfortable when:",
          "Things are decided and settled", "Options remain open", _JP),
    _type(40, "Your approach to time is:",
          "Structured and punctual", "Flexible and relaxed", _JP),
)

# Quick 20-item variant: the first five questions of each axis.
SHORT_TYPE_QUESTIONS: tuple[Question, ...] = tuple(
    q for start in (0, 10, 20, 30) for q in TYPE_QUESTIONS[start : start + 5]
)

_BUILTIN_CATALOGS: dict[str, tuple[Question, ...]] = {
    "iq": IQ_QUESTIONS,
    "eq": EQ_QUESTIONS,
    "type": TYPE_QUESTIONS,
    "type-short": SHORT_TYPE_QUESTIONS,
}


def get_catalog(name: str) -> tuple[Question, ...]:
    """Return a built-in catalog: 'iq', 'eq', 'type' or 'type-short'."""
    key = name.strip().lower()
    if key not in _BUILTIN_CATALOGS:
        raise KeyError(
            f"Unknown catalog: {name!r}. Must be one of {sorted(_BUILTIN_CATALOGS)}"
        )
    return _BUILTIN_CATALOGS[key]


class CatalogService:
    """Service for loading custom question catalogs from YAML or JSON."""

    def __init__(self, config: AssessmentConfig | None = None) -> None:
        self.config = config or get_assessment_config()

    def resolve_path(self, path: Path | str) -> Path:
        """Resolve a catalog path, falling back to the configured catalog dir."""
        candidate = Path(path)
        if candidate.exists() or candidate.is_absolute():
            return candidate
        return self.config.catalog_dir / candidate

    def load_catalog(self, path: Path | str) -> list[Question]:
        """Load and validate a catalog.

        The file holds either a list of question mappings or a mapping with
        a ``questions`` key.
        """
        catalog_path = self.resolve_path(path)
        if not catalog_path.exists():
            raise FileNotFoundError(f"Catalog not found: {catalog_path}")

        suffix = catalog_path.suffix.lower()
        raw = catalog_path.read_text(encoding="utf-8")
        if suffix in {".yaml", ".yml"}:
            data = self._parse_yaml(raw, catalog_path)
        elif suffix == ".json":
            data = self._parse_json(raw, catalog_path)
        else:
            data = self._parse_unknown(raw, catalog_path)

        entries = self._extract_entries(data, catalog_path)
        return [Question.model_validate(entry) for entry in entries]

    def _parse_yaml(self, raw: str, path: Path) -> object:
        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML catalog: {path}") from e

    def _parse_json(self, raw: str, path: Path) -> object:
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON catalog: {path}") from e

    def _parse_unknown(self, raw: str, path: Path) -> object:
        """Auto-detect the format when the file extension is unknown."""
        stripped = raw.lstrip()

        # Try JSON first if it looks like JSON, otherwise fall back to YAML.
        if stripped.startswith("{") or stripped.startswith("["):
            try:
                return json.loads(raw)
            except json.JSONDecodeError:
                pass

        try:
            return yaml.safe_load(raw)
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid catalog format: {path}") from e

    def _extract_entries(self, data: object, path: Path) -> list:
        if isinstance(data, dict):
            data = data.get("questions")
        if not isinstance(data, list) or not data:
            raise ValueError(f"Catalog must contain a non-empty question list: {path}")
        return data
