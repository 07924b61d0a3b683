"""Dependency graph checks for question logic.

Each question depends on the trigger questions named by its rules. A rule is
only legal when its trigger comes strictly earlier in the survey and adding
it keeps the dependency relation acyclic.
"""

from collections import defaultdict
from typing import Dict, Iterable, List

from survey_logic.schemas.logic import Question
from survey_logic.logging_config import get_logger

logger = get_logger(__name__)


def build_dependency_graph(questions: Iterable[Question]) -> Dict[str, List[str]]:
    """Build adjacency list of question -> trigger question IDs.

    Args:
        questions: All questions of the survey

    Returns:
        Dictionary mapping question_id -> list of trigger question IDs
    """
    graph = defaultdict(list)

    for question in questions:
        if question.logic is None:
            continue
        for rule in question.logic.rules:
            graph[question.id].append(rule.trigger_question_id)

    return graph


def _reaches(graph: Dict[str, List[str]], start_id: str, target_id: str) -> bool:
    """Return True if ``target_id`` is reachable from ``start_id``.

    Iterative DFS; the visited set bounds the walk even on cyclic data.
    """
    visited = set()
    stack = [start_id]

    while stack:
        current = stack.pop()
        if current == target_id:
            return True
        if current in visited:
            continue
        visited.add(current)

        for neighbor in graph.get(current, []):
            if neighbor not in visited:
                stack.append(neighbor)

    return False


def detect_circular_dependency(
    question_id: str,
    trigger_question_id: str,
    questions: Iterable[Question],
) -> bool:
    """Check whether making ``question_id`` depend on a trigger is illegal.

    Rejects:
    1. Self-reference
    2. Triggers that do not come strictly before the question
    3. Triggers whose own dependencies lead back to the question

    Unknown question or trigger IDs are not reported here; the rule
    validator rejects unknown triggers.

    Args:
        question_id: Question that would own the rule
        trigger_question_id: Proposed trigger question
        questions: All questions of the survey with their current logic

    Returns:
        True if the dependency is illegal (cyclic or forward), False otherwise

    Example:
        >>> detect_circular_dependency("q1", "q1", questions)
        True
    """
    if question_id == trigger_question_id:
        logger.info(f"Question {question_id} cannot depend on itself")
        return True

    questions = list(questions)
    by_id = {q.id: q for q in questions}
    current = by_id.get(question_id)
    trigger = by_id.get(trigger_question_id)

    if current is None or trigger is None:
        return False

    if trigger.order >= current.order:
        logger.info(
            f"Question {question_id} (order {current.order}) cannot depend on "
            f"later question {trigger_question_id} (order {trigger.order})"
        )
        return True

    graph = build_dependency_graph(questions)
    if _reaches(graph, trigger_question_id, question_id):
        logger.warning(
            f"Dependency cycle: {trigger_question_id} already depends on {question_id}"
        )
        return True

    return False


def find_dependents(question_id: str, questions: Iterable[Question]) -> List[str]:
    """Return IDs of questions whose rules reference ``question_id``.

    These questions hold invalid logic once ``question_id`` is deleted.
    """
    return [
        qid
        for qid, triggers in build_dependency_graph(questions).items()
        if question_id in triggers
    ]
