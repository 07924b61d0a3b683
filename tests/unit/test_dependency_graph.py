"""Unit tests for dependency graph checks."""

from survey_logic.schemas.logic import LogicRule, QuestionType
from survey_logic.services.dependency_graph import (
    build_dependency_graph,
    detect_circular_dependency,
    find_dependents,
)


class TestBuildDependencyGraph:
    """Tests for build_dependency_graph."""

    def test_adjacency(self, chain_questions):
        graph = build_dependency_graph(chain_questions)
        assert graph == {"B": ["A"], "C": ["B"]}

    def test_ungated_questions_have_no_edges(self, mixed_questions):
        assert build_dependency_graph(mixed_questions) == {}


class TestDetectCircularDependency:
    """Tests for detect_circular_dependency."""

    def test_self_reference(self, chain_questions):
        for question in chain_questions:
            assert detect_circular_dependency(question.id, question.id, chain_questions) is True

    def test_self_reference_on_unknown_question(self):
        assert detect_circular_dependency("ghost", "ghost", []) is True

    def test_forward_reference(self, chain_questions):
        assert detect_circular_dependency("A", "C", chain_questions) is True
        assert detect_circular_dependency("B", "C", chain_questions) is True

    def test_legal_backward_reference(self, chain_questions):
        assert detect_circular_dependency("C", "B", chain_questions) is False
        assert detect_circular_dependency("C", "A", chain_questions) is False

    def test_equal_order_is_rejected(self, question_factory):
        questions = [
            question_factory("X", QuestionType.TEXT_INPUT, 3),
            question_factory("Y", QuestionType.TEXT_INPUT, 3),
        ]
        assert detect_circular_dependency("X", "Y", questions) is True

    def test_unknown_ids_are_left_to_rule_validation(self, chain_questions):
        assert detect_circular_dependency("C", "missing", chain_questions) is False
        assert detect_circular_dependency("missing", "A", chain_questions) is False

    def test_transitive_cycle_in_malformed_data(self, question_factory):
        """Stored data where an earlier question already depends on a later one."""
        questions = [
            question_factory("A", QuestionType.TEXT_INPUT, 0, logic={
                "rules": [LogicRule(trigger_question_id="C", condition="equals", value="x")],
            }),
            question_factory("B", QuestionType.TEXT_INPUT, 1, logic={
                "rules": [LogicRule(trigger_question_id="A", condition="equals", value="x")],
            }),
            question_factory("C", QuestionType.TEXT_INPUT, 2),
        ]
        # C -> B would close C -> B -> A -> C
        assert detect_circular_dependency("C", "B", questions) is True

    def test_terminates_on_cycles_not_involving_target(self, question_factory):
        questions = [
            question_factory("A", QuestionType.TEXT_INPUT, 0, logic={
                "rules": [LogicRule(trigger_question_id="B", condition="equals", value="x")],
            }),
            question_factory("B", QuestionType.TEXT_INPUT, 1, logic={
                "rules": [LogicRule(trigger_question_id="A", condition="equals", value="x")],
            }),
            question_factory("C", QuestionType.TEXT_INPUT, 2),
        ]
        assert detect_circular_dependency("C", "B", questions) is False

    def test_long_chain(self, question_factory):
        questions = [question_factory("q0", QuestionType.TEXT_INPUT, 0)]
        for i in range(1, 500):
            questions.append(question_factory(f"q{i}", QuestionType.TEXT_INPUT, i, logic={
                "rules": [LogicRule(trigger_question_id=f"q{i - 1}", condition="equals", value="x")],
            }))
        assert detect_circular_dependency("q499", "q498", questions) is False
        assert detect_circular_dependency("q0", "q499", questions) is True


class TestFindDependents:
    """Tests for find_dependents."""

    def test_direct_dependents(self, chain_questions):
        assert find_dependents("A", chain_questions) == ["B"]
        assert find_dependents("B", chain_questions) == ["C"]
        assert find_dependents("C", chain_questions) == []
