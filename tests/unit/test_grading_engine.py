# =============================================================================
# TESTES - Quiz Grading Engine
# =============================================================================
# Testes unitarios para correcao de respostas e pontuacao
# =============================================================================

import pytest


class TestCheckAnswerSingle:
    """Testes para questoes de escolha unica."""

    def test_exact_match_is_correct(self):
        """Verifica que a mesma chave e correta."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import SingleAnswer

        assert check_answer(SingleAnswer(key="a"), SingleAnswer(key="a")) is True

    def test_different_key_is_wrong(self):
        """Verifica que chave diferente e errada."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import SingleAnswer

        assert check_answer(SingleAnswer(key="b"), SingleAnswer(key="a")) is False

    def test_absent_answer_is_wrong(self):
        """Verifica que resposta ausente e errada."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import SingleAnswer

        assert check_answer(None, SingleAnswer(key="a")) is False

    def test_no_case_folding(self):
        """Verifica comparacao exata, sem normalizar maiusculas."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import SingleAnswer

        assert check_answer(SingleAnswer(key="A"), SingleAnswer(key="a")) is False
        assert check_answer(SingleAnswer(key=" a"), SingleAnswer(key="a")) is False

    def test_multiple_answer_against_single_key(self):
        """Verifica que variante multiple nunca acerta gabarito single."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer, SingleAnswer

        assert check_answer(MultipleAnswer(keys=("a",)), SingleAnswer(key="a")) is False


class TestCheckAnswerMultiple:
    """Testes para questoes de multipla escolha."""

    def test_same_set_is_correct(self):
        """Verifica conjunto identico."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer

        key = MultipleAnswer(keys=("a", "c"))
        assert check_answer(MultipleAnswer(keys=("a", "c")), key) is True

    def test_order_independent(self):
        """Verifica que a ordem das chaves nao importa."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer

        key = MultipleAnswer(keys=("a", "c"))
        assert check_answer(MultipleAnswer(keys=("c", "a")), key) is True

    def test_subset_is_wrong(self):
        """Verifica que tamanho menor e errado."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer

        key = MultipleAnswer(keys=("a", "c"))
        assert check_answer(MultipleAnswer(keys=("a",)), key) is False

    def test_extra_element_is_wrong(self):
        """Verifica que elemento extra e errado."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer

        key = MultipleAnswer(keys=("a", "c"))
        assert check_answer(MultipleAnswer(keys=("a", "c", "x")), key) is False

    def test_same_size_different_keys_is_wrong(self):
        """Verifica que mesmo tamanho com chave diferente e errado."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer

        key = MultipleAnswer(keys=("a", "c"))
        assert check_answer(MultipleAnswer(keys=("a", "b")), key) is False

    def test_duplicates_do_not_fake_a_match(self):
        """Verifica que repeticoes sao descartadas e nao geram falso positivo."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer

        key = MultipleAnswer(keys=("a", "c"))
        assert check_answer(MultipleAnswer(keys=("a", "a")), key) is False

    def test_single_answer_against_multiple_key(self):
        """Verifica que variante single nunca acerta gabarito multiple."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer, SingleAnswer

        assert check_answer(SingleAnswer(key="a"), MultipleAnswer(keys=("a",))) is False

    def test_absent_answer_is_wrong(self):
        """Verifica que resposta ausente e errada."""
        from quiz_manager.engine.grading_engine import check_answer
        from quiz_manager.models.answers import MultipleAnswer

        assert check_answer(None, MultipleAnswer(keys=("a", "c"))) is False


class TestComputePercentage:
    """Testes para calculo de percentual."""

    @pytest.mark.parametrize(
        "score,total,expected",
        [(3, 4, 75.0), (1, 3, 33.3), (2, 3, 66.7), (0, 5, 0.0), (5, 5, 100.0)],
    )
    def test_rounded_to_one_decimal(self, score, total, expected):
        """Verifica arredondamento para uma casa decimal."""
        from quiz_manager.engine.grading_engine import compute_percentage

        assert compute_percentage(score, total) == expected

    @pytest.mark.parametrize("score,total,expected", [(1, 400, 0.3), (3, 8, 37.5), (1, 8, 12.5)])
    def test_halves_round_up(self, score, total, expected):
        """Verifica meios arredondados para cima (1/400 = 0.25% -> 0.3)."""
        from quiz_manager.engine.grading_engine import compute_percentage

        assert compute_percentage(score, total) == expected

    def test_zero_total(self):
        """Verifica que total zero resulta em 0.0."""
        from quiz_manager.engine.grading_engine import compute_percentage

        assert compute_percentage(0, 0) == 0.0


class TestGradingEngine:
    """Testes para correcao de um quiz completo."""

    def test_three_of_four_correct(self, four_question_quiz):
        """Verifica score=3, total=4, percentage=75.0."""
        from quiz_manager.engine.grading_engine import GradingEngine
        from quiz_manager.models.answers import SingleAnswer

        answers = {
            1: SingleAnswer(key="a"),
            2: SingleAnswer(key="a"),
            3: SingleAnswer(key="a"),
            4: SingleAnswer(key="b"),
        }

        outcome = GradingEngine().grade(four_question_quiz, answers)

        assert outcome.score == 3
        assert outcome.total == 4
        assert outcome.percentage == 75.0

    def test_responses_in_display_order(self, sample_quiz):
        """Verifica ordem das respostas corrigidas."""
        from quiz_manager.engine.grading_engine import GradingEngine

        outcome = GradingEngine().grade(sample_quiz, {})

        assert [r.question_id for r in outcome.responses] == [1, 2]

    def test_unanswered_questions_are_wrong(self, sample_quiz):
        """Verifica que questoes sem resposta contam como erradas."""
        from quiz_manager.engine.grading_engine import GradingEngine
        from quiz_manager.models.answers import SingleAnswer

        outcome = GradingEngine().grade(sample_quiz, {1: SingleAnswer(key="a")})

        assert outcome.score == 1
        assert outcome.responses[1].is_correct is False
        assert outcome.responses[1].user_answer is None
